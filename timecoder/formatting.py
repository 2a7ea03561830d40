"""
Timecode Formatting and Parsing

Display form: HH:MM:SS:FF, or HH:MM:SS;FF for drop frame.

Accepted input:
- "01:02:03:04", "01:02:03;04", "01:02:03.04" - the last separator is
  cosmetic and is not checked against the frame rate
- "1234" - a bare frame count
- Calculator digit entry: "1234" -> 00:00:12:34 (right-aligned HHMMSSFF)
- Durations: "90s", "5m", "1h", "2h30m", "7h6m5s4f", "1:30" (MM:SS),
  "1:30:00" (HH:MM:SS), "1:30:00:15"
"""

import re

from timecoder.components import DisplayComponents
from timecoder.errors import MalformedTimecode
from timecoder.frame_rate import FrameRate
from timecoder.timecode import Timecode

_TIMECODE_PATTERN = re.compile(r"^(\d+):(\d{1,2}):(\d{1,2})[:;.](\d{1,3})$")

# Calculator entry is HHMMSSFF
MAX_DIGITS = 8


def format_timecode(tc: Timecode, allow_overflow: bool = False) -> str:
    """
    Format as HH:MM:SS:FF (or HH:MM:SS;FF for drop frame).

    Args:
        tc: Timecode to format
        allow_overflow: Show hours past 23 (e.g. "25:00:00:00") instead of
            wrapping at 24
    """
    hours, minutes, seconds, frames = tc.to_components(allow_overflow)
    separator = ";" if tc.rate.is_drop_frame else ":"
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}{separator}{frames:02d}"


def is_timecode_string(text: str) -> bool:
    """True if text has the HH:MM:SS:FF shape, whether or not its fields are in range."""
    return _TIMECODE_PATTERN.match(text.strip()) is not None


def format_frames(tc: Timecode) -> str:
    """Frame-count display used by the calculator, e.g. "1234f"."""
    return f"{tc.total_frames}f"


def parse_timecode(text: str, rate: FrameRate) -> Timecode:
    """
    Parse a timecode string or a bare frame count.

    Raises:
        MalformedTimecode: wrong field count, non-numeric or out-of-range fields
        InvalidDropFrameValue: a frame number drop frame skips (DF rates only)
    """
    stripped = text.strip()

    if stripped.isdecimal():
        return Timecode(int(stripped), rate)

    match = _TIMECODE_PATTERN.match(stripped)
    if match is None:
        raise MalformedTimecode(f"Invalid timecode format: {text!r} (expected HH:MM:SS:FF or HH:MM:SS;FF)")

    components = DisplayComponents(*(int(field) for field in match.groups()))
    return Timecode.from_components(components, rate)


def parse_digits(digits: str, rate: FrameRate) -> Timecode:
    """
    Parse calculator digit entry.

    Digits are right-aligned into HHMMSSFF, so "32" is 00:00:00:32 and
    "1000" is 00:00:10:00.

    Raises:
        MalformedTimecode: non-digits, more than 8 digits or out-of-range fields
    """
    digits = digits.strip()
    if not digits.isdecimal():
        raise MalformedTimecode(f"Invalid digit entry: {digits!r}")
    if len(digits) > MAX_DIGITS:
        raise MalformedTimecode(f"Digit entry is limited to {MAX_DIGITS} digits (got {len(digits)})")

    padded = digits.rjust(MAX_DIGITS, "0")
    components = DisplayComponents(
        hours=int(padded[0:2]),
        minutes=int(padded[2:4]),
        seconds=int(padded[4:6]),
        frames=int(padded[6:8]),
    )
    return Timecode.from_components(components, rate)


def parse_duration(text: str, rate: FrameRate) -> int:
    """
    Parse a duration to a frame count at the rate's nominal fps.

    Formats:
    - "1:30" -> MM:SS
    - "1:30:00" -> HH:MM:SS
    - "1:30:00:15" -> HH:MM:SS:FF
    - "90s" -> 90 seconds
    - "5m" -> 5 minutes
    - "1h" -> 1 hour
    - "120f" -> 120 frames
    - "2h30m", "7h6m5s4f" -> compound

    Fields are not range checked, so "90s" and "0:90" are both 90 seconds.
    Durations are always counted non-drop: "1m" is nominal fps * 60 frames.

    Returns:
        Frame count
    """
    time_str = text.strip().lower()
    if not time_str:
        raise MalformedTimecode("Empty duration")

    hours = minutes = seconds = frames = 0

    if ':' in time_str or ';' in time_str:
        parts = time_str.replace(';', ':').split(':')
        if not all(part.isdecimal() for part in parts):
            raise MalformedTimecode(f"Invalid duration format: {text}")
        values = [int(part) for part in parts]
        if len(values) == 2:
            minutes, seconds = values
        elif len(values) == 3:
            hours, minutes, seconds = values
        elif len(values) == 4:
            hours, minutes, seconds, frames = values
        else:
            raise MalformedTimecode(f"Invalid duration format: {text}")
    else:
        # Compound format like "2h30m", "7h6m5s4f", "1h30s"
        current_value = ""
        seen_units = set()
        for char in time_str:
            if char.isdigit():
                current_value += char
            elif char in 'hmsf':
                if not current_value or char in seen_units:
                    raise MalformedTimecode(f"Invalid duration format: {text}")
                seen_units.add(char)
                value = int(current_value)
                current_value = ""
                if char == 'h':
                    hours = value
                elif char == 'm':
                    minutes = value
                elif char == 's':
                    seconds = value
                else:
                    frames = value
            else:
                raise MalformedTimecode(f"Invalid duration format: {text}")

        if current_value:
            if seen_units:
                raise MalformedTimecode(f"Invalid duration format: {text}")
            # Just a number, assume seconds
            seconds = int(current_value)

    nominal = rate.nominal_frame_rate
    return ((hours * 60 + minutes) * 60 + seconds) * nominal + frames


def parse_input(text: str, rate: FrameRate) -> Timecode:
    """
    Parse calculator input the way a paste is interpreted.

    - Contains ":" or ";": a timecode string
    - Ends in "f" / "F": a frame count ("1234f")
    - More than 8 digits: a frame count
    - Otherwise: digit entry ("01234567" -> 01:23:45:67)
    """
    stripped = text.strip()

    if ':' in stripped or ';' in stripped:
        return parse_timecode(stripped, rate)

    if stripped[-1:] in ('f', 'F'):
        count = stripped[:-1]
        if not count.isdecimal():
            raise MalformedTimecode(f"Invalid frame count: {text!r}")
        return Timecode(int(count), rate)

    if stripped.isdecimal():
        if len(stripped) > MAX_DIGITS:
            return Timecode(int(stripped), rate)
        return parse_digits(stripped, rate)

    raise MalformedTimecode(f"Cannot parse {text!r} as a timecode or frame count")
