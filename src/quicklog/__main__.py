"""quicklog command line entry point.

Usage:
    python -m quicklog TEXT [OPTIONS]

Options:
    --now HH:MM      Current time, used to place bare durations
    --json           Print the parse result as JSON
    --segments       Print the text with detected spans bracketed
    --config PATH    Path to YAML config file
    --profile NAME   Profile name (dev, prod, test)
    --version        Show version
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv

from . import __version__
from .config import QuicklogConfig
from .config.loader import load_config
from .config.profiles import Profile, detect_profile, get_profile_path
from .display import format_duration, format_duration_long, format_time_display, get_time_of_day
from .parser import ParsedTime, Segment, get_highlighted_segments, parse_time_from_text


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="quicklog",
        description="quicklog - extract times and durations from activity text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m quicklog "coded for 2 hours" --now 14:00
  python -m quicklog "meeting 3 to 5" --json
  python -m quicklog "quick call at noon" --segments

Environment:
  QUICKLOG_PROFILE    Set profile (dev, prod, test)
""",
    )

    parser.add_argument("text", help="Activity text to parse")

    parser.add_argument(
        "--now",
        metavar="HH:MM",
        help="Current time, used to place bare durations",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the parse result as JSON",
    )

    parser.add_argument(
        "--segments",
        action="store_true",
        help="Print the text with detected spans bracketed",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )

    parser.add_argument(
        "--profile",
        choices=[p.value for p in Profile],
        help="Configuration profile to use",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"quicklog v{__version__}",
    )

    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> QuicklogConfig:
    """Load the configuration selected on the command line.

    An explicit --config or --profile must exist. An auto-detected profile
    without a file on disk falls back to the built-in defaults.
    """
    if args.config:
        return load_config(path=args.config)
    if args.profile:
        return load_config(profile=args.profile)

    path = get_profile_path(detect_profile())
    if not path.exists():
        return QuicklogConfig()
    return load_config(path=path)


def render_segments(segments: list[Segment]) -> str:
    """Render segments with highlighted spans in brackets."""
    return "".join(f"[{s.text}]" if s.is_highlighted else s.text for s in segments)


def render_summary(result: ParsedTime) -> str:
    """Render a parse result as readable lines."""
    if not result.has_time_pattern:
        return f"Activity: {result.cleaned_activity}\nNo time expression found"

    lines = [f"Activity: {result.cleaned_activity or '(none)'}"]
    if result.start_time:
        lines.append(
            f"Start: {format_time_display(result.start_time)} "
            f"({get_time_of_day(result.start_time)})"
        )
    if result.end_time:
        lines.append(f"End: {format_time_display(result.end_time)}")

    duration = result.duration_minutes
    if duration is None:
        # Duration-only input without an anchor
        duration = sum(d.duration_minutes or 0 for d in result.detections) or None
    if duration:
        lines.append(f"Duration: {format_duration(duration)} ({format_duration_long(duration)})")

    for detection in result.detections:
        lines.append(f"  - {detection.type.value}: {detection.matched_text!r}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for quicklog.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = parse_args(argv)

    try:
        config = resolve_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1
    except (TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger = logging.getLogger("quicklog")
    logger.debug(f"quicklog v{__version__}, log level {config.logging.level}")

    result = parse_time_from_text(args.text, args.now, config.parser)

    if args.json:
        payload = result.to_dict()
        if args.segments:
            payload["segments"] = [
                s.to_dict() for s in get_highlighted_segments(args.text, result.detections)
            ]
        print(json.dumps(payload, indent=2))
        return 0

    if args.segments:
        print(render_segments(get_highlighted_segments(args.text, result.detections)))
    print(render_summary(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
