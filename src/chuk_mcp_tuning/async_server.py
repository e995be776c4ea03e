#!/usr/bin/env python3
"""
Async Tuning MCP Server using chuk-mcp-server

This server provides MCP tools for exact just-intonation arithmetic.
Intervals are ratios folded into one octave and kept in lowest terms.

The server provides tools for:
- Normalizing, stacking, dividing and inverting ratios
- Raising intervals to integer powers
- Classifying intervals by harmonic (prime) limit
- Looking up named intervals
- Rendering ratios to MIDI as chords or melodic intervals
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tuning.intervals import IntervalLibrary
from chuk_mcp_tuning.models.playback import PlaybackSettings
from chuk_mcp_tuning.tools import (
    register_interval_tools,
    register_playback_tools,
    register_ratio_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tuning")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
INTERVALS_DIR = BASE_PATH / "intervals"
OUTPUT_DIR = BASE_PATH / "output"
SETTINGS_FILE = BASE_PATH / "tuning.yaml"
LIBRARY_PATH = Path(__file__).parent / "intervals" / "library"

settings = (
    PlaybackSettings.from_yaml(SETTINGS_FILE) if SETTINGS_FILE.exists() else PlaybackSettings()
)
interval_library = IntervalLibrary(
    library_path=LIBRARY_PATH,
    project_path=INTERVALS_DIR,
)

# Register all tools
ratio_tools = register_ratio_tools(mcp)
interval_tools = register_interval_tools(mcp, interval_library)
playback_tools = register_playback_tools(mcp, OUTPUT_DIR, settings)

# Export tool functions for direct access
tuning_ratio = ratio_tools["tuning_ratio"]
tuning_multiply = ratio_tools["tuning_multiply"]
tuning_divide = ratio_tools["tuning_divide"]
tuning_complement = ratio_tools["tuning_complement"]
tuning_pow = ratio_tools["tuning_pow"]
tuning_limit = ratio_tools["tuning_limit"]

tuning_list_interval_sets = interval_tools["tuning_list_interval_sets"]
tuning_describe_interval = interval_tools["tuning_describe_interval"]

tuning_render_ratio = playback_tools["tuning_render_ratio"]

logger.info("CHUK Tuning MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
