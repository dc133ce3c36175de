"""Root conftest: shared fixtures."""

from __future__ import annotations

from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def _isolated_statement_log(tmp_path, monkeypatch):
    """Keep statement logs out of the real home directory."""
    monkeypatch.delenv("GRANTSQL_LOG", raising=False)
    log_root = tmp_path / "logs"
    with patch("grantsql.statementlog._LOG_ROOT", log_root):
        yield log_root
