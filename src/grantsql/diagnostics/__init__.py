"""Advisory diagnostics: types, codes and rendering."""

from grantsql.diagnostics.codes import DiagnosticCode
from grantsql.diagnostics.types import Diagnostic, Level, RenderResult

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "Level",
    "RenderResult",
]
