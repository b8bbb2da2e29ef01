#!/usr/bin/env python3
"""
SessionEnd Hook - Session Marker

Writes a dated marker file for every session that ends, and appends a line
to the cumulative session log. SessionStart reads the markers back in the
next session.

SessionEnd hooks must not fail: errors are logged and the hook exits 0.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Add hooks directory to path for shared imports
sys.path.insert(0, str(Path(__file__).parent))

from _common import (
    append_file,
    ensure_dir,
    get_date_string,
    get_datetime_string,
    get_sessions_dir,
    log,
    read_hook_input,
    report_failure,
    short_id,
    write_file,
)

PREFIX = "SessionEnd"
SESSION_LOG = "session-log.txt"


def record_session(cwd: str) -> Path:
    """Write the marker file and log line. Returns the marker path."""
    sessions_dir = ensure_dir(get_sessions_dir())
    timestamp = get_datetime_string()

    marker = sessions_dir / f"{get_date_string()}-{short_id()}-session.tmp"
    write_file(marker, f"Session ended: {timestamp}\nWorking directory: {cwd}\n")

    append_file(sessions_dir / SESSION_LOG, f"[{timestamp}] Session ended in {cwd}\n")
    return marker


def main():
    input_data = {}
    try:
        input_data = read_hook_input()
        cwd = input_data.get("cwd", "") or os.getcwd()
        marker = record_session(cwd)
        log(f"[{PREFIX}] Session recorded: {marker.name}")
    except Exception as e:
        report_failure(PREFIX, "session-end", e, parsed_data=input_data)

    sys.exit(0)


if __name__ == "__main__":
    main()
