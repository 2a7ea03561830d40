"""
Timecoder - SMPTE Timecode Engine
Frame-accurate timecode values, drop-frame conversion and timecode arithmetic.
"""

__version__ = "0.1.0"

from .errors import (
    TimecodeError,
    InvalidFrameCount,
    InvalidDropFrameValue,
    MalformedTimecode,
    FrameRateMismatch,
    InvalidFrameRate,
)
from .frame_rate import FrameRate, RateKind, all_standard_rates, parse_frame_rate
from .components import DisplayComponents
from .timecode import Timecode
from .formatting import format_timecode, parse_timecode, parse_duration, parse_input
from .arithmetic import add, subtract, add_timecodes, subtract_timecodes, difference, frames_in_24_hours
from .sequence import generate_countdown, generate_countup, ruler_labels

__all__ = [
    "TimecodeError",
    "InvalidFrameCount",
    "InvalidDropFrameValue",
    "MalformedTimecode",
    "FrameRateMismatch",
    "InvalidFrameRate",
    "FrameRate",
    "RateKind",
    "all_standard_rates",
    "parse_frame_rate",
    "DisplayComponents",
    "Timecode",
    "format_timecode",
    "parse_timecode",
    "parse_duration",
    "parse_input",
    "add",
    "subtract",
    "add_timecodes",
    "subtract_timecodes",
    "difference",
    "frames_in_24_hours",
    "generate_countdown",
    "generate_countup",
    "ruler_labels",
]
