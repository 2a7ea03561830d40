"""
Timecode Sequences

Runs of consecutive timecodes (count-up and countdown) and batch conversion
of frame arrays for timeline rulers and marker lists.
"""

import numpy as np

from timecoder import arithmetic, drop_frame
from timecoder.errors import InvalidFrameCount
from timecoder.frame_rate import FrameRate
from timecoder.timecode import Timecode


def generate_countup(start: Timecode, duration_frames: int) -> list[Timecode]:
    """
    Generate timecodes counting up from start.

    Args:
        start: First timecode
        duration_frames: Number of frames to advance (duration_frames + 1 values)

    Returns:
        List of Timecode objects, wrapping past 24 hours
    """
    if duration_frames < 0:
        raise InvalidFrameCount(f"Duration cannot be negative (got {duration_frames})")
    return [arithmetic.add(start, i) for i in range(duration_frames + 1)]


def generate_countdown(start: Timecode, duration_frames: int) -> list[Timecode]:
    """
    Generate timecodes counting down from start.

    The countdown stops at 00:00:00:00 even if duration_frames is longer.

    Args:
        start: First timecode (remaining time)
        duration_frames: Number of frames to count down

    Returns:
        List of Timecode objects counting down towards zero
    """
    if duration_frames < 0:
        raise InvalidFrameCount(f"Duration cannot be negative (got {duration_frames})")

    result = []
    for i in range(duration_frames + 1):
        remaining_frames = start.total_frames - i
        if remaining_frames < 0:
            break
        result.append(Timecode(remaining_frames, start.rate))

    return result


def components_array(frames, rate: FrameRate, allow_overflow: bool = False) -> tuple[np.ndarray, ...]:
    """
    Decompose an array of frame indices into (hours, minutes, seconds, frames) arrays.

    Raises:
        InvalidFrameCount: if any frame index is negative
    """
    frames = np.asarray(frames, dtype=np.int64)
    if frames.size and frames.min() < 0:
        raise InvalidFrameCount("Frame indices cannot be negative")

    if rate.is_drop_frame:
        return drop_frame.frames_to_components_array(frames, rate, allow_overflow)

    total_seconds, frame_field = np.divmod(frames, rate.nominal_frame_rate)
    total_minutes, seconds = np.divmod(total_seconds, 60)
    hours, minutes = np.divmod(total_minutes, 60)
    if not allow_overflow:
        hours = hours % 24
    return hours, minutes, seconds, frame_field


def ruler_labels(start: int, stop: int, step: int, rate: FrameRate,
                 allow_overflow: bool = False) -> list[str]:
    """
    Formatted timecode labels for frames in range(start, stop, step).

    Example:
        ruler_labels(0, 7200, 1800, FrameRate.FPS_29_97_DF)
        -> ['00:00:00;00', '00:01:00;02', '00:02:00;04', '00:03:00;06']
    """
    if step <= 0:
        raise ValueError(f"Step must be positive (got {step})")

    hours, minutes, seconds, frames = components_array(
        np.arange(start, stop, step, dtype=np.int64), rate, allow_overflow
    )
    separator = ";" if rate.is_drop_frame else ":"

    return [
        f"{h:02d}:{m:02d}:{s:02d}{separator}{f:02d}"
        for h, m, s, f in zip(hours.tolist(), minutes.tolist(), seconds.tolist(), frames.tolist())
    ]
