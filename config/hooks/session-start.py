#!/usr/bin/env python3
"""
SessionStart Hook - Report Prior Context

Lists session markers left by recent SessionEnd runs and the learned skills
available for this session, so the assistant knows what context exists.

Never blocks the session: any failure is logged and the hook exits 0.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

# Add hooks directory to path for shared imports
sys.path.insert(0, str(Path(__file__).parent))

from _common import (
    RECENT_SESSION_DAYS,
    ensure_dir,
    find_files,
    get_learned_skills_dir,
    get_sessions_dir,
    log,
    read_hook_input,
    report_failure,
)

PREFIX = "SessionStart"


def report_context(cwd: str) -> None:
    sessions_dir = ensure_dir(get_sessions_dir())
    learned_dir = ensure_dir(get_learned_skills_dir())

    recent = find_files(sessions_dir, "*-session.tmp", max_age_days=RECENT_SESSION_DAYS)
    if recent:
        log(f"[{PREFIX}] Found {len(recent)} recent session(s)")
        log(f"[{PREFIX}] Latest: {recent[0].name}")

    skills = find_files(learned_dir, "*.md")
    if skills:
        log(f"[{PREFIX}] {len(skills)} learned skill(s) available in {learned_dir}")

    log(f"[{PREFIX}] Working directory: {cwd}")


def main():
    input_data = {}
    try:
        input_data = read_hook_input()
        cwd = input_data.get("cwd", "") or os.getcwd()
        report_context(cwd)
    except Exception as e:
        report_failure(PREFIX, "session-start", e, parsed_data=input_data)

    sys.exit(0)


if __name__ == "__main__":
    main()
