"""Grant requests: one object, its grantees and the privileges to render."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from grantsql.grants import GrantExecutable, ObjectKind, ObjectLocator, locate


class Action(enum.Enum):
    GRANT = "grant"
    REVOKE = "revoke"


@dataclass(frozen=True)
class GrantRequest:
    kind: ObjectKind
    parts: tuple[str, ...] = ()
    argument_types: tuple[str, ...] = ()
    privileges: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()
    shares: tuple[str, ...] = ()
    with_grant_option: bool = False

    def locator(self) -> ObjectLocator:
        return locate(self.kind, *self.parts, argument_types=self.argument_types)

    def executables(self) -> list[GrantExecutable]:
        """Roles first, then shares, each in the order given."""
        locator = self.locator()
        return [locator.role(r) for r in self.roles] + [locator.share(s) for s in self.shares]

    def statements(self, action: Action) -> list[str]:
        statements: list[str] = []
        for executable in self.executables():
            for privilege in self.privileges:
                if action == Action.GRANT:
                    statements.append(executable.grant(privilege, self.with_grant_option))
                else:
                    statements.append(executable.revoke(privilege))
        return statements
