"""
Interval library - named just intervals, loaded from YAML.
"""

from chuk_mcp_tuning.intervals.loader import IntervalLibrary

__all__ = [
    "IntervalLibrary",
]
