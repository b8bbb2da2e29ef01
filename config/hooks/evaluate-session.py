#!/usr/bin/env python3
"""
Stop hook that flags sessions worth mining for learned skills.

Counts the user messages in the session transcript. Long sessions get a
reminder to extract reusable patterns into ~/.claude/learned/; short ones
are skipped.

Hook event: Stop
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))
from _common import get_learned_skills_dir, log, read_hook_input, report_failure

PREFIX = "ContinuousLearning"
DEFAULT_MIN_SESSION_LENGTH = 10


def get_min_session_length() -> int:
    try:
        min_length = int(os.environ.get("EVALUATE_MIN_SESSION_LENGTH", ""))
    except ValueError:
        return DEFAULT_MIN_SESSION_LENGTH
    return min_length if min_length > 0 else DEFAULT_MIN_SESSION_LENGTH


def count_user_messages(transcript_path: Path) -> int:
    """Count JSONL entries with type "user". Malformed lines are skipped."""
    count = 0
    with open(transcript_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError:
                continue
            if isinstance(entry, dict) and entry.get("type") == "user":
                count += 1
    return count


def main():
    input_data = {}
    try:
        input_data = read_hook_input()
        transcript_path = input_data.get("transcript_path", "")
        if not transcript_path or not Path(transcript_path).is_file():
            sys.exit(0)

        message_count = count_user_messages(Path(transcript_path))
        min_length = get_min_session_length()
        if message_count < min_length:
            log(f"[{PREFIX}] Session too short ({message_count} messages), skipping")
        else:
            log(
                f"[{PREFIX}] Session has {message_count} messages - "
                "evaluate for extractable patterns"
            )
            log(f"[{PREFIX}] Save learned skills to: {get_learned_skills_dir()}")
    except Exception as e:
        report_failure(PREFIX, "evaluate-session", e, parsed_data=input_data)

    sys.exit(0)


if __name__ == "__main__":
    main()
