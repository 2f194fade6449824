"""Run log for `rustfix suggest`.

One JSONL file per day and per workspace under ~/.rustfix/logs/, e.g.
~/.rustfix/logs/home-dev-crates-demo/2026-10-19.jsonl. Each line records what a
run decoded and how many replacements it proposed, per file.
"""

from __future__ import annotations

import json
import os
from datetime import UTC, date, datetime, timedelta
from pathlib import Path

from rustfix.config import DEFAULT_RETENTION_DAYS
from rustfix.suggestions.types import Suggestion

_LOG_ROOT = Path.home() / ".rustfix" / "logs"


def _workspace_key() -> str:
    """Directory name for the workspace being fixed, built from the cwd path parts."""
    parts = Path(os.getcwd()).parts[1:]
    return "-".join(parts) or "root"


def _workspace_dir() -> Path:
    return _LOG_ROOT / _workspace_key()


def _replacements_per_file(suggestions: list[Suggestion]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for s in suggestions:
        for r in s.replacements:
            counts[r.snippet.file_name] = counts.get(r.snippet.file_name, 0) + 1
    return counts


def log_run(
    *,
    source: str,
    diagnostics: int,
    suggestions: list[Suggestion],
    skipped: int = 0,
    only: list[str] | None = None,
) -> Path:
    """Append a run entry to today's file for the current workspace.

    Returns the file written.
    """
    now = datetime.now(UTC)
    per_file = _replacements_per_file(suggestions)
    entry = {
        "ts": now.isoformat(),
        "source": source,
        "diagnostics": diagnostics,
        "skipped": skipped,
        "suggestions": len(suggestions),
        "replacements": sum(per_file.values()),
        "files": list(per_file),
        "per_file": per_file,
        "only": only or [],
    }

    run_file = _workspace_dir() / f"{now.date().isoformat()}.jsonl"
    run_file.parent.mkdir(parents=True, exist_ok=True)
    with run_file.open("a") as f:
        f.write(json.dumps(entry) + "\n")
    return run_file


def _file_day(path: Path) -> date | None:
    try:
        return date.fromisoformat(path.stem)
    except ValueError:
        return None


def cleanup_old_logs(*, retention_days: int = DEFAULT_RETENTION_DAYS) -> list[Path]:
    """Remove day files older than `retention_days` for the current workspace.

    Files whose name is not a date are left alone. The workspace directory is
    removed once it is empty. Returns the removed files.
    """
    workspace = _workspace_dir()
    if not workspace.is_dir():
        return []

    oldest_kept = datetime.now(UTC).date() - timedelta(days=retention_days)
    removed: list[Path] = []
    for run_file in sorted(workspace.glob("*.jsonl")):
        day = _file_day(run_file)
        if day is not None and day < oldest_kept:
            run_file.unlink()
            removed.append(run_file)

    if not any(workspace.iterdir()):
        workspace.rmdir()
    return removed
