"""The `show`, `show-of`, `grant` and `revoke` commands for a single object."""

from __future__ import annotations

import click

from grantsql.cli._shared import (
    KIND_CHOICE,
    build_request,
    emit,
    output_options,
    require_grantees,
)
from grantsql.grants import Grantee, GranteeKind
from grantsql.lint import render_request, render_show_of, render_show_on
from grantsql.request import Action

_arg_type_option = click.option(
    "--arg-type",
    "argument_types",
    multiple=True,
    help="Argument type of a function or procedure (repeatable, in order).",
)
_privilege_option = click.option(
    "-p",
    "--privilege",
    "privileges",
    multiple=True,
    required=True,
    help="Privilege to render, inserted verbatim (repeatable).",
)
_role_option = click.option("--role", "roles", multiple=True, help="Grantee role (repeatable).")
_share_option = click.option(
    "--share", "shares", multiple=True, help="Grantee share (repeatable)."
)


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.argument("parts", nargs=-1)
@_arg_type_option
@output_options
def show(
    kind: str,
    parts: tuple[str, ...],
    argument_types: tuple[str, ...],
    output_format: str,
    log: bool,
) -> None:
    """Render SHOW GRANTS ON an object.

    \b
    Examples:
      grantsql show account
      grantsql show table DB SCH T
      grantsql show function DB SCH F --arg-type NUMBER --arg-type VARCHAR
    """
    request = build_request(kind, parts, argument_types=argument_types)
    emit(render_show_on(request), output_format=output_format, command="show", log=log)


@click.command("show-of")
@click.option("--role", default=None, help="Role whose grants to list.")
@click.option("--share", default=None, help="Share whose grants to list.")
@output_options
def show_of(role: str | None, share: str | None, output_format: str, log: bool) -> None:
    """Render SHOW GRANTS OF a role or share."""
    if (role is None) == (share is None):
        raise click.UsageError("Provide exactly one of --role or --share.")
    if role is not None:
        grantee = Grantee(role, GranteeKind.ROLE)
    else:
        grantee = Grantee(share, GranteeKind.SHARE)
    emit(render_show_of(grantee), output_format=output_format, command="show-of", log=log)


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.argument("parts", nargs=-1)
@_privilege_option
@_role_option
@_share_option
@click.option(
    "--with-grant-option",
    is_flag=True,
    help="Let the grantee re-grant the privilege (ignored for OWNERSHIP).",
)
@_arg_type_option
@output_options
def grant(
    kind: str,
    parts: tuple[str, ...],
    privileges: tuple[str, ...],
    roles: tuple[str, ...],
    shares: tuple[str, ...],
    with_grant_option: bool,
    argument_types: tuple[str, ...],
    output_format: str,
    log: bool,
) -> None:
    """Render GRANT statements, one per grantee and privilege.

    \b
    Examples:
      grantsql grant table DB SCH T -p SELECT --role ANALYST
      grantsql grant schema DB SCH -p OWNERSHIP --role ADMIN
      grantsql grant warehouse WH1 -p USAGE --share PARTNER
    """
    require_grantees(roles, shares)
    request = build_request(
        kind,
        parts,
        argument_types=argument_types,
        privileges=privileges,
        roles=roles,
        shares=shares,
        with_grant_option=with_grant_option,
    )
    emit(
        render_request(request, Action.GRANT),
        output_format=output_format,
        command="grant",
        log=log,
    )


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.argument("parts", nargs=-1)
@_privilege_option
@_role_option
@_share_option
@_arg_type_option
@output_options
def revoke(
    kind: str,
    parts: tuple[str, ...],
    privileges: tuple[str, ...],
    roles: tuple[str, ...],
    shares: tuple[str, ...],
    argument_types: tuple[str, ...],
    output_format: str,
    log: bool,
) -> None:
    """Render REVOKE statements, one per grantee and privilege."""
    require_grantees(roles, shares)
    request = build_request(
        kind,
        parts,
        argument_types=argument_types,
        privileges=privileges,
        roles=roles,
        shares=shares,
    )
    emit(
        render_request(request, Action.REVOKE),
        output_format=output_format,
        command="revoke",
        log=log,
    )
