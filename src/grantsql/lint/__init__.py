"""Render requests into statements and collect advisory diagnostics."""

from __future__ import annotations

from grantsql.diagnostics import Diagnostic, RenderResult, codes
from grantsql.grants import Grantee
from grantsql.grants.executable import show_grants_of
from grantsql.lint.checks import (
    check_argument_types,
    check_empty_identifiers,
    check_ownership_case,
    check_ownership_grant_option,
    check_view_keyword,
)
from grantsql.request import Action, GrantRequest


def _object_diagnostics(request: GrantRequest) -> list[Diagnostic]:
    return [
        d
        for d in (check_empty_identifiers(request), check_argument_types(request))
        if d is not None
    ]


def render_request(request: GrantRequest, action: Action = Action.GRANT) -> RenderResult:
    """Render every GRANT or REVOKE a request describes.

    Steps:
        1. Object checks (empty identifiers, stray argument types)
        2. Privilege checks (ownership spelling, ignored grant option)
        3. Keyword rewrite notice for materialized views
        4. Statements: roles then shares, privileges in the given order

    Raises ValueError if the request's name parts do not fit its kind.
    """
    diagnostics = _object_diagnostics(request)
    for diag in (
        check_ownership_case(request),
        check_ownership_grant_option(request, action),
        check_view_keyword(request),
    ):
        if diag is not None:
            diagnostics.append(diag)

    return RenderResult(statements=request.statements(action), diagnostics=diagnostics)


def render_show_on(request: GrantRequest) -> RenderResult:
    """Render SHOW GRANTS ON the request's object."""
    return RenderResult(
        statements=[request.locator().show()],
        diagnostics=_object_diagnostics(request),
    )


def render_show_of(grantee: Grantee) -> RenderResult:
    """Render SHOW GRANTS OF a role or share."""
    diagnostics: list[Diagnostic] = []
    if not grantee.name.strip():
        diagnostics.append(
            Diagnostic.warning(
                codes.EMPTY_IDENTIFIER, f"empty {grantee.kind.value.lower()} name"
            )
        )
    return RenderResult(statements=[show_grants_of(grantee)], diagnostics=diagnostics)
