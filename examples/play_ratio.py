#!/usr/bin/env python3
"""
Example: Hear a septimal minor third.

Builds 7/6 and renders it both as a melodic interval and as a chord.
Pass --port to send it to a MIDI output as well (needs python-rtmidi).

Usage:
    python examples/play_ratio.py
    python examples/play_ratio.py --port "FluidSynth virtual port"
    # Creates: examples/output/ratio_7_6_*.mid
"""

import argparse
from pathlib import Path

from chuk_mcp_tuning import PlaybackMode, Ratio
from chuk_mcp_tuning.playback import play, render_ratio


def main() -> None:
    """Render (and optionally play) 7/6 in both playback modes."""
    parser = argparse.ArgumentParser(description="Play a just interval")
    parser.add_argument("--ratio", default="7/6", help="Ratio to play (default: 7/6)")
    parser.add_argument("--port", default=None, help="MIDI output port name")
    args = parser.parse_args()

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    ratio = Ratio.parse(args.ratio)
    print(f"{ratio}: {ratio.cents:.2f} cents, {ratio.limit()}-limit")

    for mode in (PlaybackMode.INTERVAL, PlaybackMode.CHORD):
        path = output_dir / f"ratio_{ratio.numerator}_{ratio.denominator}_{mode.value}.mid"
        render_ratio(ratio, mode).save(str(path))
        print(f"  Created: {path}")

        if args.port:
            print(f"  Playing {mode.value} on {args.port}...")
            play(ratio, mode, port_name=args.port)

    print("\nDone! Open the MIDI files in a synth with a 2-semitone bend range.")


if __name__ == "__main__":
    main()
