"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from grantsql.diagnostics.render import render_json, render_text
from grantsql.diagnostics.types import RenderResult


def format_result(result: RenderResult, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(render_json(result), indent=2)
    return render_text(result)
