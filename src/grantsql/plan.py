"""Grant plans: batches of grant requests described in a TOML file.

    [[grant]]
    kind = "table"
    database = "DB"
    schema = "SCH"
    name = "T"
    privileges = ["SELECT"]
    roles = ["ANALYST"]
"""

from __future__ import annotations

import tomllib
from pathlib import Path

from grantsql.diagnostics import RenderResult
from grantsql.grants import ObjectKind
from grantsql.lint import render_request
from grantsql.request import Action, GrantRequest

# Keys naming the identifier parts, by kind arity.
_PART_KEYS: dict[int, tuple[str, ...]] = {
    0: (),
    1: ("name",),
    2: ("database", "name"),
    3: ("database", "schema", "name"),
}

_ALLOWED_KEYS = frozenset(
    {
        "kind",
        "database",
        "schema",
        "name",
        "argument_types",
        "privileges",
        "roles",
        "shares",
        "with_grant_option",
    }
)


class PlanError(Exception):
    """Raised when a grant plan file cannot be read or is malformed."""


def _string_list(entry: dict, key: str, where: str) -> tuple[str, ...]:
    value = entry.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PlanError(f"{where}: '{key}' must be a list of strings")
    return tuple(value)


def _parse_entry(entry: object, index: int) -> GrantRequest:
    where = f"grant #{index + 1}"
    if not isinstance(entry, dict):
        raise PlanError(f"{where}: expected a table")

    unknown = sorted(set(entry) - _ALLOWED_KEYS)
    if unknown:
        raise PlanError(f"{where}: unknown key(s): {', '.join(unknown)}")

    kind_str = entry.get("kind")
    if not isinstance(kind_str, str):
        raise PlanError(f"{where}: missing 'kind'")
    try:
        kind = ObjectKind.from_slug(kind_str)
    except ValueError as e:
        raise PlanError(f"{where}: {e}") from e

    part_keys = _PART_KEYS[kind.arity]
    missing = [k for k in part_keys if k not in entry]
    if missing:
        raise PlanError(f"{where}: {kind.slug} requires {', '.join(part_keys)}")
    extra = [k for k in ("database", "schema", "name") if k in entry and k not in part_keys]
    if extra:
        raise PlanError(f"{where}: {kind.slug} does not take {', '.join(extra)}")
    parts = tuple(entry[k] for k in part_keys)
    if not all(isinstance(p, str) for p in parts):
        raise PlanError(f"{where}: name parts must be strings")

    with_grant_option = entry.get("with_grant_option", False)
    if not isinstance(with_grant_option, bool):
        raise PlanError(f"{where}: 'with_grant_option' must be a boolean")

    request = GrantRequest(
        kind=kind,
        parts=parts,
        argument_types=_string_list(entry, "argument_types", where),
        privileges=_string_list(entry, "privileges", where),
        roles=_string_list(entry, "roles", where),
        shares=_string_list(entry, "shares", where),
        with_grant_option=with_grant_option,
    )
    if not request.privileges:
        raise PlanError(f"{where}: 'privileges' is empty")
    if not request.roles and not request.shares:
        raise PlanError(f"{where}: no roles or shares to grant to")
    return request


def parse_plan(text: str) -> list[GrantRequest]:
    """Parse grant plan TOML text into requests, in file order."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise PlanError(f"invalid TOML: {e}") from e

    entries = data.get("grant")
    if not isinstance(entries, list) or not entries:
        raise PlanError("no [[grant]] entries found")
    return [_parse_entry(entry, i) for i, entry in enumerate(entries)]


def load_plan(path: Path) -> list[GrantRequest]:
    try:
        text = path.read_text()
    except OSError as e:
        raise PlanError(f"cannot read {path}: {e}") from e
    return parse_plan(text)


def render_plan(requests: list[GrantRequest], action: Action = Action.GRANT) -> RenderResult:
    """Render every request; diagnostics are prefixed with their entry number."""
    result = RenderResult()
    for i, request in enumerate(requests):
        rendered = render_request(request, action)
        for diag in rendered.diagnostics:
            diag.message = f"grant #{i + 1}: {diag.message}"
        result.extend(rendered)
    return result
