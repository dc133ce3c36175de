"""Stable, searchable diagnostic code registry.

Ranges:
- G01xx: Object identification
- G02xx: Privileges and grant options
- G03xx: Keyword rewrites (info-level)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticCode:
    value: int

    def __str__(self) -> str:
        return f"G{self.value:04d}"


# Object identification (G01xx)
EMPTY_IDENTIFIER = DiagnosticCode(101)
ARGUMENT_TYPES_IGNORED = DiagnosticCode(102)

# Privileges and grant options (G02xx)
GRANT_OPTION_IGNORED = DiagnosticCode(201)
OWNERSHIP_CASE = DiagnosticCode(202)

# Keyword rewrites (G03xx)
VIEW_KEYWORD = DiagnosticCode(301)
