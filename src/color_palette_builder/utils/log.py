"""
log.py.

Does: Lightweight debug logger controlled by PALETTE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Topics: normalize, palette, extraction.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "is_topic_enabled"]

_ENV_VAR = "PALETTE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(_ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PALETTE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_topic_enabled(topic: str) -> bool:
    """Does: True when `topic` (or 'all') is listed; nothing is enabled when unset."""
    topic_key = topic.lower().strip()
    return "all" in _DEBUG_TOPICS or topic_key in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "palette",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if enabled via PALETTE_DEBUG_TOPICS.
    """
    if not is_topic_enabled(topic):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic.lower().strip()}][{level.upper()}] {msg}", file=stream)
