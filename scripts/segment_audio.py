#!/usr/bin/env python3
"""Split a recording into speech and music segments.

This script runs the speech/music segmentation pipeline on an audio file
(RMS extraction, MLER features, classification, smoothing, segment merging)
and prints the resulting segment list as JSON for the editing stage.

Usage:
    python scripts/segment_audio.py --input path/to/episode.wav
    python scripts/segment_audio.py --input episode.wav --has-intro
    python scripts/segment_audio.py --input episode.wav --min-segment-seconds 15 --clamp
    python scripts/segment_audio.py --input episode.wav --include-windows --log-level INFO

Example output:
    {
        "sample_rate": 44100,
        "duration_sec": 1800.0,
        "long_frame_count": 1800,
        "has_intro": false,
        "config": {"rms_frame_ms": 20, "long_frame_ms": 1000, ...},
        "segment_count": 3,
        "segments": [
            {"start_second": -3, "end_second": 41, "is_music": true, "label": "music"},
            {"start_second": 45, "end_second": 1712, "is_music": false, "label": "speech"},
            {"start_second": 1713, "end_second": 1802, "is_music": true, "label": "music"}
        ]
    }
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.config import get_settings
from app.logging import run_context, setup_logging
from audioio.errors import AudioIOError
from segmentation import clamp_segments, segment_file
from segmentation.errors import SegmentationError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Split a recording into speech and music segments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --input episode.wav
    %(prog)s --input episode.wav --has-intro
    %(prog)s --input episode.wav --upper-music-threshold 0.05 --pretty
    %(prog)s --input episode.wav --clamp --output segments.json
        """,
    )

    # Input/output arguments
    parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Path to the input audio file",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout)",
    )
    parser.add_argument(
        "--pretty", "-p",
        action="store_true",
        help="Pretty-print JSON output with indentation",
    )
    parser.add_argument(
        "--has-intro",
        action="store_true",
        help="The recording opens with a non-music intro",
    )

    # Tunables (default: from PODSEG_* environment settings)
    parser.add_argument(
        "--rms-frame-ms",
        type=int,
        default=None,
        help="RMS frame duration in milliseconds (default: 20)",
    )
    parser.add_argument(
        "--long-frame-ms",
        type=int,
        default=None,
        help="Classification window in milliseconds (default: 1000)",
    )
    parser.add_argument(
        "--low-energy-coefficient",
        type=float,
        default=None,
        help="Low-energy threshold as a fraction of mean RMS (default: 0.20)",
    )
    parser.add_argument(
        "--upper-music-threshold",
        type=float,
        default=None,
        help="MLER at or below which a window is music (default: 0.0)",
    )
    parser.add_argument(
        "--min-segment-seconds",
        type=int,
        default=None,
        help="Runs shorter than this are absorbed (default: 10)",
    )
    parser.add_argument(
        "--grow-before-seconds",
        type=int,
        default=None,
        help="Boundary growth at segment starts (default: 3)",
    )
    parser.add_argument(
        "--grow-after-seconds",
        type=int,
        default=None,
        help="Boundary growth at segment ends (default: 3)",
    )
    parser.add_argument(
        "--smoothing-radius",
        type=int,
        default=None,
        help="Majority filter half-width (default: 3)",
    )

    # Output control arguments
    parser.add_argument(
        "--include-windows",
        action="store_true",
        help="Include per-second features and labels in output",
    )
    parser.add_argument(
        "--clamp",
        action="store_true",
        help="Clamp segment bounds to the recording and drop inverted segments",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level for diagnostics on stderr (default: WARNING)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the script.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(args.log_level or settings.log_level)

    # Validate input file exists
    input_path = Path(args.input)
    if not input_path.exists():
        print(json.dumps({
            "error": "File not found",
            "code": "FILE_NOT_FOUND",
            "path": str(input_path),
        }), file=sys.stderr)
        return 1

    try:
        config = settings.segmenter_config(
            rms_frame_ms=args.rms_frame_ms,
            long_frame_ms=args.long_frame_ms,
            low_energy_coefficient=args.low_energy_coefficient,
            upper_music_threshold=args.upper_music_threshold,
            min_segment_seconds=args.min_segment_seconds,
            grow_before_seconds=args.grow_before_seconds,
            grow_after_seconds=args.grow_after_seconds,
            smoothing_radius=args.smoothing_radius,
        )

        with run_context():
            result = segment_file(
                input_path,
                has_intro=args.has_intro,
                config=config,
                include_windows=args.include_windows,
            )

        if args.clamp:
            result.segments = clamp_segments(result.segments, result.long_frame_count)

        output = result.to_dict(include_windows=args.include_windows)

        if args.pretty:
            json_output = json.dumps(output, indent=2, ensure_ascii=False)
        else:
            json_output = json.dumps(output, ensure_ascii=False)

        if args.output:
            output_path = Path(args.output)
            output_path.write_text(json_output + "\n")
            print(f"Segments written to {output_path}", file=sys.stderr)
        else:
            print(json_output)

        return 0

    except (AudioIOError, SegmentationError) as e:
        error_output = {
            "error": str(e),
            "code": getattr(e, "code", "UNKNOWN_ERROR"),
            "type": type(e).__name__,
        }
        if e.details:
            error_output["details"] = e.details
        print(json.dumps(error_output, default=str), file=sys.stderr)
        return 2

    except Exception as e:
        print(json.dumps({
            "error": str(e),
            "code": "UNEXPECTED_ERROR",
            "type": type(e).__name__,
        }), file=sys.stderr)
        return 3


if __name__ == "__main__":
    sys.exit(main())
