"""
Playback tools - MCP tools for rendering ratios to MIDI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tuning.constants import ErrorMessages, PlaybackMode
from chuk_mcp_tuning.core import Ratio
from chuk_mcp_tuning.models.playback import PlaybackSettings
from chuk_mcp_tuning.playback import render_ratio

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_playback_tools(
    mcp: ChukMCPServer,
    output_dir: Path,
    settings: PlaybackSettings | None = None,
) -> dict[str, Any]:
    """
    Register playback rendering tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for output files
        settings: Rendering parameters

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    settings = settings or PlaybackSettings()

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_render_ratio(
        ratio: str,
        mode: str = "interval",
        output_name: str | None = None,
    ) -> str:
        """
        Render a ratio as two tones in a MIDI file.

        The root plays at the base frequency (220 Hz by default) and the
        upper tone at the base frequency times the ratio, pitch-bent to
        the exact just frequency.

        Args:
            ratio: Ratio notation, e.g. '7/6'
            mode: 'chord' (together) or 'interval' (one after the other)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and render details

        Example:
            tuning_render_ratio(ratio="7/6", mode="chord")
        """
        try:
            try:
                playback_mode = PlaybackMode(mode)
            except ValueError:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_MODE.format(mode=mode)}
                )

            r = Ratio.parse(ratio)
            mid = render_ratio(r, playback_mode, settings)

            stem = output_name or f"ratio_{r.numerator}_{r.denominator}_{playback_mode.value}"
            filename = f"{stem}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / filename
            mid.save(str(output_path))
            logger.info(f"Rendered {r} ({mode}) to {output_path}")

            return json.dumps(
                {
                    "status": "success",
                    "ratio": str(r),
                    "mode": playback_mode.value,
                    "path": str(output_path),
                    "seconds": round(mid.length, 3),
                }
            )
        except Exception as e:
            logger.exception("Failed to render ratio")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_render_ratio"] = tuning_render_ratio

    return tools
