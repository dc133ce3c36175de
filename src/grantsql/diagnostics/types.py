"""Diagnostic values attached to rendered statements.

Diagnostics never change or suppress the SQL; they tell the caller about
inputs the target database is likely to reject or that render differently
than the caller may expect.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from grantsql.diagnostics.codes import DiagnosticCode


class Level(enum.IntEnum):
    INFO = 0
    WARNING = 1


@dataclass
class Diagnostic:
    level: Level
    code: DiagnosticCode
    message: str
    notes: list[str] = field(default_factory=list)

    # -- Builder classmethods ---------------------------------------------------

    @classmethod
    def warning(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.WARNING, code=code, message=message)

    @classmethod
    def info(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.INFO, code=code, message=message)

    # -- Builder chain methods --------------------------------------------------

    def note(self, note: str) -> Diagnostic:
        self.notes.append(note)
        return self


@dataclass
class RenderResult:
    statements: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def extend(self, other: RenderResult) -> None:
        self.statements.extend(other.statements)
        self.diagnostics.extend(other.diagnostics)
