"""Render results for terminal (text) and machine (JSON) output."""

from __future__ import annotations

from grantsql.diagnostics.types import Diagnostic, RenderResult


def render_json(result: RenderResult) -> dict:
    """Render a RenderResult as a JSON-serializable dict."""
    return {
        "statements": result.statements,
        "diagnostics": [_diagnostic_to_dict(diag) for diag in result.diagnostics],
    }


def render_text(result: RenderResult) -> str:
    """Render diagnostics, then one statement per line."""
    lines: list[str] = []
    for d in result.diagnostics:
        lines.append(f"{d.level.name.lower()}[{d.code}]: {d.message}")
        for note in d.notes:
            lines.append(f"  = note: {note}")
    lines.extend(result.statements)
    return "\n".join(lines)


def _diagnostic_to_dict(d: Diagnostic) -> dict:
    return {
        "level": d.level.name.lower(),
        "code": str(d.code),
        "message": d.message,
        "notes": d.notes,
    }
