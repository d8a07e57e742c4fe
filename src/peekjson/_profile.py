"""
Hot-path profiling for the reader.

Enabled by setting PEEKJSON_PROFILE in the environment before import. Each
profiled section records its wall time and how many characters of the
source it consumed; sections nest, so read_value includes the time and
characters of the reads it dispatches to. When disabled, ProfileContext is
an empty context manager.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

from ._source import LookaheadSource

PROFILE_HOT_PATHS = __debug__ and "PEEKJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated counters for one profiled section of the reader."""

    section: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_consumed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_consumed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the counters, keyed by section name."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times a section and counts the characters it reads from `source`."""

        def __init__(self, section: str, source: LookaheadSource) -> None:
            self.section = section
            self.source = source
            self.start_pos = 0
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_pos = self.source.pos
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.get(self.section)
            if stats is None:
                stats = _hot_path_stats[self.section] = HotPathStats(
                    self.section
                )
            stats.record_call(duration, self.source.pos - self.start_pos)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, section: str, source: LookaheadSource) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass
