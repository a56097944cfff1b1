"""quicklog - time expression parsing for activity logging.

Turns short activity descriptions into structured times:
- Durations ("coded for 2 hours", "quick call")
- Clock times ("meeting at 2:30pm", "lunch")
- Ranges ("worked 9am-5pm", "3 to 5")

Usage:
    python -m quicklog "coded for 2 hours" --now 14:00
"""

__version__ = "0.1.0"

from .config import QuicklogConfig
from .config.loader import load_config
from .parser import (
    Detection,
    DetectionType,
    ParsedTime,
    Segment,
    detect_time_patterns,
    get_highlighted_segments,
    has_time_pattern,
    parse_time_from_text,
)

__all__ = [
    "Detection",
    "DetectionType",
    "ParsedTime",
    "QuicklogConfig",
    "Segment",
    "__version__",
    "detect_time_patterns",
    "get_highlighted_segments",
    "has_time_pattern",
    "load_config",
    "parse_time_from_text",
]
