"""
MCP tool implementations.

Tools are organized by domain:
- ratios - Ratio arithmetic and classification
- intervals - Named interval library
- playback - MIDI rendering
"""

from chuk_mcp_tuning.tools.intervals import register_interval_tools
from chuk_mcp_tuning.tools.playback import register_playback_tools
from chuk_mcp_tuning.tools.ratios import register_ratio_tools

__all__ = [
    "register_interval_tools",
    "register_playback_tools",
    "register_ratio_tools",
]
