"""
Drop-Frame Timecode Conversion

29.97 fps video is numbered as if it ran at 30 fps. Left alone, the display
falls behind the wall clock by 3.6 seconds per hour. Drop-frame numbering
fixes that by skipping frame numbers :00 and :01 at the start of every minute,
except minutes divisible by ten. No video frames are dropped; only labels.

Frame counts (29.97 DF):
- Minute 0 of each ten-minute block: 1800 frames (no skip)
- Minutes 1-9 of each block: 1798 frames each
- Ten-minute block: 17982 frames
- Hour: 107892 frames
- 24 hours: 2589408 frames

Example boundary:
- Frame 1799 = 00:00:59;29
- Frame 1800 = 00:01:00;02 (00:01:00;00 and 00:01:00;01 do not exist)
- Frame 17982 = 00:10:00;00
"""

import numpy as np

from timecoder.components import DisplayComponents
from timecoder.errors import InvalidDropFrameValue
from timecoder.frame_rate import FrameRate

# Frame numbers skipped at the start of each non-tenth minute
DROP_FRAMES_PER_MINUTE = 2


def _block_sizes(rate: FrameRate) -> tuple[int, int, int]:
    """(frames in a full minute, frames in a dropped minute, frames in ten minutes)"""
    frames_per_minute = rate.nominal_frame_rate * 60
    frames_per_dropped_minute = frames_per_minute - DROP_FRAMES_PER_MINUTE
    frames_per_ten_minutes = frames_per_minute * 10 - 9 * DROP_FRAMES_PER_MINUTE
    return frames_per_minute, frames_per_dropped_minute, frames_per_ten_minutes


def frames_to_components(total_frames: int, rate: FrameRate,
                         allow_overflow: bool = False) -> DisplayComponents:
    """
    Convert an absolute frame index to drop-frame display components.

    Args:
        total_frames: Zero-based frame index (>= 0)
        rate: A drop-frame rate
        allow_overflow: Keep hours past 23 instead of wrapping at 24

    Returns:
        DisplayComponents; the frames field is never 0 or 1 at second 0 of a
        skipped minute
    """
    nominal = rate.nominal_frame_rate
    frames_per_minute, frames_per_dropped_minute, frames_per_ten_minutes = _block_sizes(rate)

    blocks, remainder = divmod(total_frames, frames_per_ten_minutes)

    if remainder < frames_per_minute:
        # First minute of the block keeps every frame number
        minute_in_block = 0
        offset = remainder
    else:
        extra_minutes, offset = divmod(remainder - frames_per_minute, frames_per_dropped_minute)
        minute_in_block = extra_minutes + 1
        # Skip the two missing numbers at the top of the minute
        offset += DROP_FRAMES_PER_MINUTE

    total_minutes = blocks * 10 + minute_in_block
    seconds, frames = divmod(offset, nominal)
    hours, minutes = divmod(total_minutes, 60)
    if not allow_overflow:
        hours %= 24

    return DisplayComponents(hours, minutes, seconds, frames)


def components_to_frames(components: DisplayComponents, rate: FrameRate) -> int:
    """
    Convert drop-frame display components to an absolute frame index.

    Raises:
        MalformedTimecode: if a field is out of range
        InvalidDropFrameValue: if the components name a skipped frame number
    """
    hours, minutes, seconds, frames = DisplayComponents(*components).validate(rate.nominal_frame_rate)

    if seconds == 0 and minutes % 10 != 0 and frames < DROP_FRAMES_PER_MINUTE:
        raise InvalidDropFrameValue(
            f"Frame {frames:02d} does not exist at {hours:02d}:{minutes:02d}:00 in drop-frame timecode"
        )

    total_minutes = hours * 60 + minutes
    dropped = DROP_FRAMES_PER_MINUTE * (total_minutes - total_minutes // 10)
    nominal_frames = (total_minutes * 60 + seconds) * rate.nominal_frame_rate + frames

    return nominal_frames - dropped


def frames_to_components_array(total_frames, rate: FrameRate,
                               allow_overflow: bool = False) -> tuple[np.ndarray, ...]:
    """
    Vectorised frames_to_components for an array of frame indices.

    Returns:
        (hours, minutes, seconds, frames) as int64 arrays
    """
    total_frames = np.asarray(total_frames, dtype=np.int64)
    nominal = rate.nominal_frame_rate
    frames_per_minute, frames_per_dropped_minute, frames_per_ten_minutes = _block_sizes(rate)

    blocks, remainder = np.divmod(total_frames, frames_per_ten_minutes)
    dropped_minute = remainder >= frames_per_minute

    extra_minutes, dropped_offset = np.divmod(
        np.maximum(remainder - frames_per_minute, 0), frames_per_dropped_minute
    )
    minute_in_block = np.where(dropped_minute, extra_minutes + 1, 0)
    offset = np.where(dropped_minute, dropped_offset + DROP_FRAMES_PER_MINUTE, remainder)

    total_minutes = blocks * 10 + minute_in_block
    seconds, frames = np.divmod(offset, nominal)
    hours, minutes = np.divmod(total_minutes, 60)
    if not allow_overflow:
        hours = hours % 24

    return hours, minutes, seconds, frames
