#!/usr/bin/env python3
"""
PreToolUse hook that suggests /compact at logical checkpoints.

Counts tool calls per session and nudges once when the count reaches
COMPACT_THRESHOLD (default 50), then every 25 calls after that. Auto-compact
fires at arbitrary points; a manual /compact between phases keeps the
context that matters.

Hook event: PreToolUse
Matcher: Edit, Write
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
from _common import log, read_hook_input, report_failure
from _state import get_session_id, increment_and_get

PREFIX = "StrategicCompact"
DEFAULT_COMPACT_THRESHOLD = 50
REMINDER_INTERVAL = 25


def get_threshold() -> int:
    """COMPACT_THRESHOLD from the environment, or the default if unset/invalid."""
    try:
        threshold = int(os.environ.get("COMPACT_THRESHOLD", ""))
    except ValueError:
        return DEFAULT_COMPACT_THRESHOLD
    return threshold if threshold > 0 else DEFAULT_COMPACT_THRESHOLD


def suggestion_for(count: int, threshold: int) -> str | None:
    """Message to print after the count-th tool call, if any."""
    if count == threshold:
        return (
            f"[{PREFIX}] {threshold} tool calls reached - "
            "consider /compact if transitioning phases"
        )
    if count > threshold and count % REMINDER_INTERVAL == 0:
        return (
            f"[{PREFIX}] {count} tool calls - "
            "good checkpoint for /compact if context is stale"
        )
    return None


def main():
    input_data = {}
    try:
        input_data = read_hook_input()
        count = increment_and_get(get_session_id(input_data.get("session_id", "")))
        message = suggestion_for(count, get_threshold())
        if message:
            log(message)
    except Exception as e:
        report_failure(PREFIX, "suggest-compact", e, parsed_data=input_data)

    sys.exit(0)


if __name__ == "__main__":
    main()
