"""Statement log: one JSONL file per project and UTC day, pruned after a retention window."""

from __future__ import annotations

import json
import os
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

DEFAULT_RETENTION_DAYS = 30
_LOG_ROOT = Path.home() / ".grantsql" / "logs"


def _project_dir() -> Path:
    """Log directory for the working directory, e.g. /home/dev/infra -> home-dev-infra."""
    parts = Path(os.getcwd()).parts[1:]
    return _LOG_ROOT / "-".join(parts)


def log_path(day: date) -> Path:
    return _project_dir() / f"{day.isoformat()}.jsonl"


def log_statements(
    *,
    command: str,
    statements: list[str],
    diagnostics: list[str] | None = None,
    source: str | None = None,
) -> Path:
    """Append one entry for a rendering command. Returns the file written."""
    now = datetime.now(UTC)
    entry = {
        "ts": now.isoformat(),
        "command": command,
        "source": source,
        "statements": statements,
        "diagnostics": diagnostics or [],
    }

    path = log_path(now.date())
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a") as f:
        f.write(json.dumps(entry) + "\n")
    return path


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
    """Delete this project's day files older than retention_days. Returns the count."""
    project_dir = _project_dir()
    if not project_dir.is_dir():
        return 0

    cutoff = datetime.now(UTC).date() - timedelta(days=retention_days)
    deleted = 0
    for path in project_dir.glob("*.jsonl"):
        try:
            day = date.fromisoformat(path.stem)
        except ValueError:
            continue  # not one of ours
        if day < cutoff:
            path.unlink()
            deleted += 1
    return deleted
