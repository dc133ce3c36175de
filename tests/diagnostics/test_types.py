"""Tests for diagnostic values, codes and rendering."""

import json

from grantsql.diagnostics import Diagnostic, Level, RenderResult, codes
from grantsql.diagnostics.render import render_json, render_text


def test_diagnostic_code_display():
    assert str(codes.EMPTY_IDENTIFIER) == "G0101"
    assert str(codes.VIEW_KEYWORD) == "G0301"


def test_builder_api():
    diag = (
        Diagnostic.warning(codes.EMPTY_IDENTIFIER, "empty identifier in table name")
        .note("first")
        .note("second")
    )
    assert diag.level == Level.WARNING
    assert diag.notes == ["first", "second"]


def test_extend_keeps_order():
    first = RenderResult(statements=["A"], diagnostics=[Diagnostic.info(codes.VIEW_KEYWORD, "x")])
    first.extend(RenderResult(statements=["B", "C"]))
    assert first.statements == ["A", "B", "C"]
    assert len(first.diagnostics) == 1


def test_render_text():
    result = RenderResult(
        statements=['GRANT SELECT ON TABLE "DB"."S"."T" TO ROLE "R"'],
        diagnostics=[
            Diagnostic.info(codes.GRANT_OPTION_IGNORED, "WITH GRANT OPTION ignored").note("why")
        ],
    )
    assert render_text(result).split("\n") == [
        "info[G0201]: WITH GRANT OPTION ignored",
        "  = note: why",
        'GRANT SELECT ON TABLE "DB"."S"."T" TO ROLE "R"',
    ]


def test_render_text_statements_only():
    assert render_text(RenderResult(statements=["SHOW GRANTS ON ACCOUNT"])) == (
        "SHOW GRANTS ON ACCOUNT"
    )


def test_render_json_is_serializable():
    result = RenderResult(
        statements=["SHOW GRANTS ON ACCOUNT"],
        diagnostics=[Diagnostic.warning(codes.EMPTY_IDENTIFIER, "empty")],
    )
    data = json.loads(json.dumps(render_json(result)))
    assert data["statements"] == ["SHOW GRANTS ON ACCOUNT"]
    assert data["diagnostics"] == [
        {"level": "warning", "code": "G0101", "message": "empty", "notes": []}
    ]
