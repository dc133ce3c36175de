"""Advisory checks on grant requests. None of them alter the rendered SQL."""

from __future__ import annotations

from grantsql.diagnostics import Diagnostic, codes
from grantsql.grants import ObjectKind
from grantsql.grants.executable import OWNERSHIP
from grantsql.request import Action, GrantRequest


def check_empty_identifiers(request: GrantRequest) -> Diagnostic | None:
    """Warn when any identifier part is empty or blank."""
    blank = [i for i, part in enumerate(request.parts) if not part.strip()]
    if not blank:
        return None
    return (
        Diagnostic.warning(
            codes.EMPTY_IDENTIFIER,
            f"empty identifier in {request.kind.slug} name",
        )
        .note(f"blank part position(s): {', '.join(str(i + 1) for i in blank)}")
        .note("the statement is rendered as-is; the database will reject it")
    )


def check_argument_types(request: GrantRequest) -> Diagnostic | None:
    if not request.argument_types or request.kind.takes_arguments:
        return None
    return Diagnostic.warning(
        codes.ARGUMENT_TYPES_IGNORED,
        f"argument types are ignored for {request.kind.slug}",
    ).note("only functions and procedures carry an argument signature")


def check_ownership_grant_option(request: GrantRequest, action: Action) -> Diagnostic | None:
    if action != Action.GRANT or not request.with_grant_option:
        return None
    if OWNERSHIP not in request.privileges:
        return None
    return Diagnostic.info(
        codes.GRANT_OPTION_IGNORED,
        "WITH GRANT OPTION ignored for OWNERSHIP",
    ).note("ownership transfers render COPY CURRENT GRANTS instead")


def check_ownership_case(request: GrantRequest) -> Diagnostic | None:
    """Warn on privileges that read as OWNERSHIP but will not render as a transfer."""
    for privilege in request.privileges:
        if privilege != OWNERSHIP and privilege.strip().upper() == OWNERSHIP:
            return Diagnostic.warning(
                codes.OWNERSHIP_CASE,
                f"privilege '{privilege}' is not treated as an ownership transfer",
            ).note("spell it exactly OWNERSHIP to add COPY CURRENT GRANTS")
    return None


def check_view_keyword(request: GrantRequest) -> Diagnostic | None:
    if request.kind != ObjectKind.MATERIALIZED_VIEW or not request.privileges:
        return None
    return Diagnostic.info(
        codes.VIEW_KEYWORD,
        "materialized view privileges are rendered with the VIEW keyword",
    )
