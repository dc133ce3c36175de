"""Shared options and helpers for the rendering commands."""

from __future__ import annotations

from collections.abc import Callable

import click

from grantsql.cli._output import format_result
from grantsql.diagnostics import RenderResult
from grantsql.grants import ObjectKind
from grantsql.request import GrantRequest
from grantsql.statementlog import cleanup_old_logs, log_statements

KIND_CHOICE = click.Choice([k.slug for k in ObjectKind])
_CLEANUP_SCHEDULED = "grantsql.cleanup_scheduled"


def output_options(f: Callable) -> Callable:
    """Attach --format and --log to a command."""
    f = click.option(
        "--log",
        "log",
        is_flag=True,
        envvar="GRANTSQL_LOG",
        help="Append rendered statements to ~/.grantsql/logs.",
    )(f)
    f = click.option(
        "--format",
        "output_format",
        type=click.Choice(["json", "text"]),
        default="text",
        help="Output format.",
    )(f)
    return f


def build_request(
    kind_slug: str,
    parts: tuple[str, ...],
    *,
    argument_types: tuple[str, ...] = (),
    privileges: tuple[str, ...] = (),
    roles: tuple[str, ...] = (),
    shares: tuple[str, ...] = (),
    with_grant_option: bool = False,
) -> GrantRequest:
    """Build a request, rejecting a part count that does not fit the kind."""
    kind = ObjectKind.from_slug(kind_slug)
    if len(parts) != kind.arity:
        expected = {
            0: "no name parts",
            1: "NAME",
            2: "DATABASE NAME",
            3: "DATABASE SCHEMA NAME",
        }[kind.arity]
        raise click.BadParameter(
            f"{kind.slug} takes {expected}, got {len(parts)} part(s)",
            param_hint="'PARTS'",
        )
    return GrantRequest(
        kind=kind,
        parts=parts,
        argument_types=argument_types,
        privileges=privileges,
        roles=roles,
        shares=shares,
        with_grant_option=with_grant_option,
    )


def require_grantees(roles: tuple[str, ...], shares: tuple[str, ...]) -> None:
    """Roles and shares may be mixed; at least one grantee is needed."""
    if not roles and not shares:
        raise click.UsageError("Provide at least one --role or --share.")


def emit(
    result: RenderResult,
    *,
    output_format: str,
    command: str,
    log: bool,
    source: str | None = None,
) -> None:
    """Echo the result and, with --log, record the statements.

    Retention cleanup is scheduled once per invocation, when the command exits.
    """
    output = format_result(result, output_format=output_format)
    if output:
        click.echo(output)
    if log:
        log_statements(
            command=command,
            statements=result.statements,
            diagnostics=[str(d.code) for d in result.diagnostics],
            source=source,
        )
        ctx = click.get_current_context()
        if not ctx.meta.get(_CLEANUP_SCHEDULED):
            ctx.meta[_CLEANUP_SCHEDULED] = True
            ctx.call_on_close(cleanup_old_logs)
