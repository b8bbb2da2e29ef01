#!/usr/bin/env python3
"""
Per-session counter state for the hooks.

Each hook invocation is a fresh process, so counters live in the temp
directory, one file per key holding a single integer as text. There is no
locking: two overlapping invocations can lose an increment, which is fine
for advisory counters.
"""

from __future__ import annotations

import os
from pathlib import Path

from _common import get_temp_dir, read_file, write_file


COUNTER_PREFIX = "claude-tool-count-"


def get_session_id(payload_session_id: str = "") -> str:
    """Session identifier used to namespace counters.

    CLAUDE_SESSION_ID if the host sets it, else the session_id from the
    hook payload, else the parent PID, else "default".
    """
    session_id = os.environ.get("CLAUDE_SESSION_ID", "").strip()
    if session_id:
        return session_id
    if payload_session_id:
        return str(payload_session_id)
    ppid = os.getppid()
    if ppid:
        return str(ppid)
    return "default"


def counter_path(key: str) -> Path:
    return get_temp_dir() / f"{COUNTER_PREFIX}{key}"


def read_counter(key: str) -> int:
    """Current value for key. Missing or unparseable files count as 0."""
    content = read_file(counter_path(key))
    if content is None:
        return 0
    try:
        return int(content.strip())
    except ValueError:
        return 0


def increment_and_get(key: str) -> int:
    """Increment the counter for key and return the new value."""
    count = read_counter(key) + 1
    write_file(counter_path(key), str(count))
    return count
