"""Grant executables: render GRANT, REVOKE and SHOW GRANTS OF for one grantee."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from grantsql.grants._types import GranteeKind

if TYPE_CHECKING:
    from grantsql.grants.locator import ObjectLocator

OWNERSHIP = "OWNERSHIP"


def show_grants_of(grantee: Grantee) -> str:
    return f"SHOW GRANTS OF {grantee}"


def on_clause(keyword: str, qualified_name: str) -> str:
    """Render ``<KEYWORD> <qualified_name>``, or the bare keyword for the account.

    The account has no qualified name, so no separator is emitted for it:
    ``GRANT X ON ACCOUNT TO ...`` keeps single spacing on purpose, matching
    ``SHOW GRANTS ON ACCOUNT``.
    """
    if not qualified_name:
        return keyword
    return f"{keyword} {qualified_name}"


@dataclass(frozen=True)
class Grantee:
    name: str
    kind: GranteeKind

    def __str__(self) -> str:
        return f'{self.kind.value} "{self.name}"'


@dataclass(frozen=True)
class GrantExecutable:
    """One (object, grantee) pair; renders statements for any privilege.

    Privileges are inserted verbatim. Only an exact ``OWNERSHIP`` triggers
    ``COPY CURRENT GRANTS``, and then the grant-option flag is ignored.
    """

    target: ObjectLocator
    grantee: Grantee

    @property
    def _on(self) -> str:
        return on_clause(self.target.grant_keyword, self.target.qualified_name)

    def grant(self, privilege: str, with_grant_option: bool = False) -> str:
        statement = f"GRANT {privilege} ON {self._on} TO {self.grantee}"
        if privilege == OWNERSHIP:
            return f"{statement} COPY CURRENT GRANTS"
        if with_grant_option:
            return f"{statement} WITH GRANT OPTION"
        return statement

    def revoke(self, privilege: str) -> str:
        return f"REVOKE {privilege} ON {self._on} FROM {self.grantee}"

    def show(self) -> str:
        """SQL listing grants held by the grantee (not grants on the object)."""
        return show_grants_of(self.grantee)
