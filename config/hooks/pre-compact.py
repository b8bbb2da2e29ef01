#!/usr/bin/env python3
"""
PreCompact Hook - Compaction Marker

Records each context compaction in the compaction log next to the session
markers, so a later session can tell the conversation was summarized part
way through.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add hooks directory to path for shared imports
sys.path.insert(0, str(Path(__file__).parent))

from _common import (
    append_file,
    ensure_dir,
    get_datetime_string,
    get_sessions_dir,
    log,
    read_hook_input,
    report_failure,
)

PREFIX = "PreCompact"
COMPACTION_LOG = "compaction-log.txt"


def record_compaction(trigger: str = "") -> Path:
    """Append one line to the compaction log. Returns the log path."""
    log_path = ensure_dir(get_sessions_dir()) / COMPACTION_LOG
    line = f"[{get_datetime_string()}] Context compaction triggered"
    if trigger:
        line += f" ({trigger})"
    append_file(log_path, line + "\n")
    return log_path


def main():
    input_data = {}
    try:
        input_data = read_hook_input()
        record_compaction(input_data.get("trigger", ""))
        log(f"[{PREFIX}] State saved before compaction")
    except Exception as e:
        report_failure(PREFIX, "pre-compact", e, parsed_data=input_data)

    sys.exit(0)


if __name__ == "__main__":
    main()
