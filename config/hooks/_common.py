#!/usr/bin/env python3
"""
Shared utilities for the session lifecycle hooks.

This module contains the path, file and timestamp helpers used across the
hooks so that no hook carries its own OS-specific handling.
"""

from __future__ import annotations

import fnmatch
import json
import sys
import tempfile
import time
from datetime import datetime
from pathlib import Path
from uuid import uuid4


# Sessions modified within this window are reported at SessionStart
RECENT_SESSION_DAYS = 7

# Debug log location - shared across all hooks
DEBUG_LOG = Path(tempfile.gettempdir()) / "claude-hooks-debug.log"


# ============================================================================
# Directory Resolution
# ============================================================================


def get_claude_dir() -> Path:
    """Base configuration directory (~/.claude)."""
    return Path.home() / ".claude"


def get_sessions_dir() -> Path:
    """Directory holding session marker files and the session log."""
    return get_claude_dir() / "sessions"


def get_learned_skills_dir() -> Path:
    """Directory holding learned-pattern markdown files."""
    return get_claude_dir() / "learned"


def get_temp_dir() -> Path:
    return Path(tempfile.gettempdir())


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if absent. No-op if it exists."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


# ============================================================================
# File Operations
# ============================================================================


def read_file(path: str | Path) -> str | None:
    """Read a file's full text content.

    Args:
        path: File to read

    Returns:
        File content, or None if the file does not exist. Any other
        failure (permission denied, path is a directory) propagates.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except FileNotFoundError:
        return None


def write_file(path: str | Path, content: str) -> None:
    """Write text to a file, creating parent directories and overwriting."""
    path = Path(path)
    ensure_dir(path.parent)
    # newline="" here and in read_file keeps content byte-for-byte
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def append_file(path: str | Path, content: str) -> None:
    """Append text to a file, creating it (and its parents) if absent."""
    path = Path(path)
    ensure_dir(path.parent)
    with open(path, "a", encoding="utf-8", newline="") as f:
        f.write(content)


def find_files(
    directory: str | Path, pattern: str, max_age_days: float | None = None
) -> list[Path]:
    """Find entries in a directory whose names match a wildcard pattern.

    Args:
        directory: Directory to search (not recursive)
        pattern: Shell-style wildcard matched against entry names, e.g. "*.md"
        max_age_days: Only keep entries modified within this many days

    Returns:
        Matching paths sorted most-recently-modified first. A missing
        directory yields an empty list.
    """
    directory = Path(directory)
    if not directory.is_dir():
        return []

    cutoff = None
    if max_age_days is not None:
        cutoff = time.time() - max_age_days * 24 * 60 * 60

    entries = []
    for entry in directory.iterdir():
        if not fnmatch.fnmatch(entry.name, pattern):
            continue
        try:
            mtime = entry.stat().st_mtime
        except FileNotFoundError:
            continue  # Removed between listing and stat
        if cutoff is not None and mtime < cutoff:
            continue
        entries.append((mtime, entry))

    entries.sort(key=lambda item: item[0], reverse=True)
    return [entry for _, entry in entries]


# ============================================================================
# Timestamps & IDs
# ============================================================================


def get_date_string() -> str:
    """Current local date as YYYY-MM-DD."""
    return datetime.now().strftime("%Y-%m-%d")


def get_time_string() -> str:
    """Current local time as HH:MM."""
    return datetime.now().strftime("%H:%M")


def get_datetime_string() -> str:
    """Current local date and time as YYYY-MM-DD HH:MM:SS."""
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S")


def short_id(length: int = 8) -> str:
    """Random lowercase hex ID for disambiguating same-day session files."""
    return uuid4().hex[:length]


# ============================================================================
# Hook I/O
# ============================================================================


def read_hook_input() -> dict:
    """Read the JSON payload the host writes to stdin.

    Returns an empty dict when stdin is a terminal, closed or unreadable,
    empty, or does not hold a JSON object. Hooks must run with no input.
    """
    if sys.stdin is None or sys.stdin.isatty():
        return {}
    try:
        data = json.loads(sys.stdin.read() or "{}")
    except (json.JSONDecodeError, ValueError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def log(message: str) -> None:
    """Write a human-visible diagnostic line to stderr."""
    print(message, file=sys.stderr)


def log_debug(
    message: str,
    hook_name: str = "unknown",
    parsed_data: dict | None = None,
    error: Exception | None = None,
) -> None:
    """Log diagnostic info for debugging hook issues.

    Args:
        message: Description of what happened
        hook_name: Name of the calling hook
        parsed_data: Parsed JSON data (optional)
        error: Exception that occurred (optional)
    """
    try:
        with open(DEBUG_LOG, "a", encoding="utf-8") as f:
            f.write(f"\n{'=' * 60}\n")
            f.write(f"Timestamp: {datetime.now().isoformat()}\n")
            f.write(f"Hook: {hook_name}\n")
            f.write(f"Message: {message}\n")
            if error:
                f.write(f"Error: {type(error).__name__}: {error}\n")
            if parsed_data is not None:
                f.write(f"Parsed data: {json.dumps(parsed_data, indent=2)}\n")
            f.write(f"{'=' * 60}\n")
    except Exception:
        pass  # Never fail on logging


def report_failure(
    prefix: str, hook_name: str, error: Exception, parsed_data: dict | None = None
) -> None:
    """Top-level handler body shared by every hook: log and swallow."""
    log(f"[{prefix}] Error: {error}")
    log_debug(
        f"{hook_name} failed",
        hook_name=hook_name,
        parsed_data=parsed_data,
        error=error,
    )
