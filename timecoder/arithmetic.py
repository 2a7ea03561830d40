"""
Timecode Arithmetic

All operations work on frame counts and wrap at 24 hours, the way a
hardware timecode calculator does: 00:00:00:00 minus one frame is
23:59:59:29 at 30 fps. The wrap length is the frame count of 24:00:00:00 at
the rate, so for drop frame it already excludes the skipped numbers and the
wrap always lands exactly on 00:00:00:00.

Combining two timecodes requires the same frame rate; values are never
resampled implicitly.
"""

from timecoder.drop_frame import DROP_FRAMES_PER_MINUTE
from timecoder.errors import FrameRateMismatch
from timecoder.frame_rate import FrameRate
from timecoder.timecode import Timecode

SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440


def frames_in_24_hours(rate: FrameRate) -> int:
    """Frame count of 24:00:00:00 at the given rate."""
    frames = rate.nominal_frame_rate * SECONDS_PER_DAY
    if rate.is_drop_frame:
        # Every minute except each tenth one skips two numbers
        frames -= DROP_FRAMES_PER_MINUTE * (MINUTES_PER_DAY - MINUTES_PER_DAY // 10)
    return frames


def _wrap(frames: int, rate: FrameRate) -> Timecode:
    # Python's % is already non-negative for a positive modulus
    return Timecode(frames % frames_in_24_hours(rate), rate)


def _require_same_rate(a: Timecode, b: Timecode):
    if a.rate != b.rate:
        raise FrameRateMismatch(f"Cannot combine timecodes at {a.rate} and {b.rate}")


def add(tc: Timecode, delta_frames: int) -> Timecode:
    """Add a (possibly negative) number of frames, wrapping at 24 hours."""
    return _wrap(tc.total_frames + delta_frames, tc.rate)


def subtract(tc: Timecode, delta_frames: int) -> Timecode:
    """Subtract a number of frames, wrapping below zero to the previous day."""
    return _wrap(tc.total_frames - delta_frames, tc.rate)


def add_timecodes(a: Timecode, b: Timecode) -> Timecode:
    """
    a + b, wrapping at 24 hours.

    Raises:
        FrameRateMismatch: if the rates differ
    """
    _require_same_rate(a, b)
    return add(a, b.total_frames)


def subtract_timecodes(a: Timecode, b: Timecode) -> Timecode:
    """
    a - b, wrapping below zero.

    Raises:
        FrameRateMismatch: if the rates differ
    """
    _require_same_rate(a, b)
    return subtract(a, b.total_frames)


def difference(a: Timecode, b: Timecode) -> int:
    """
    Signed frame delta a - b (no wrapping).

    Raises:
        FrameRateMismatch: if the rates differ
    """
    _require_same_rate(a, b)
    return a.total_frames - b.total_frames


def multiply(tc: Timecode, factor: int) -> Timecode:
    """Scale a duration by a positive integer, wrapping at 24 hours."""
    if factor <= 0:
        raise ValueError(f"Multiplier must be a positive integer (got {factor})")
    return _wrap(tc.total_frames * factor, tc.rate)


def divide(tc: Timecode, divisor: int) -> Timecode:
    """Divide a duration by a positive integer, discarding the remainder frames."""
    if divisor <= 0:
        raise ValueError(f"Divisor must be a positive integer (got {divisor})")
    return Timecode(tc.total_frames // divisor, tc.rate)
