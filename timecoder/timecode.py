"""
Timecode Value

A Timecode is an absolute, zero-based frame index plus the frame rate it was
counted at. The H:M:S:F display is derived from those two values on demand,
so there is no hidden state and nothing to keep in sync.

Time and display are kept apart:
- Seconds <-> frames uses the real rate (30000/1001 for 29.97)
- Frames <-> display uses the nominal rate (30) and, for 29.97 DF, the
  drop-frame skip pattern
"""

import math
import operator
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Union

from timecoder import drop_frame
from timecoder.components import DisplayComponents
from timecoder.errors import InvalidFrameCount, FrameRateMismatch
from timecoder.frame_rate import FrameRate, round_half_away


@total_ordering
@dataclass(frozen=True, eq=True)
class Timecode:
    """
    Immutable SMPTE timecode value.

    Every operation returns a new Timecode. Values are equal when both the
    frame count and the frame rate match.
    """
    total_frames: int
    rate: FrameRate = FrameRate.FPS_24

    def __post_init__(self):
        try:
            total_frames = operator.index(self.total_frames)
        except TypeError:
            raise InvalidFrameCount(f"Frame count must be an integer (got {self.total_frames!r})") from None
        if total_frames < 0:
            raise InvalidFrameCount(f"Frame count cannot be negative (got {total_frames})")
        if not isinstance(self.rate, FrameRate):
            raise TypeError(f"rate must be a FrameRate (got {type(self.rate).__name__})")
        object.__setattr__(self, "total_frames", total_frames)

    # --- Construction ---

    @classmethod
    def from_frames(cls, frames: int, rate: FrameRate) -> 'Timecode':
        """Create a timecode from an absolute frame count (>= 0)."""
        return cls(frames, rate)

    @classmethod
    def zero(cls, rate: FrameRate) -> 'Timecode':
        """00:00:00:00 at the given rate."""
        return cls(0, rate)

    @classmethod
    def from_seconds(cls, seconds: float, rate: FrameRate) -> 'Timecode':
        """
        Create a timecode from a duration in seconds.

        The frame count is round(seconds * real fps), ties away from zero,
        computed exactly so 1000/1001 rates do not pick up float error.

        Raises:
            InvalidFrameCount: if seconds is negative or not finite
        """
        seconds = float(seconds)
        if not math.isfinite(seconds) or seconds < 0:
            raise InvalidFrameCount(f"Duration must be a non-negative number of seconds (got {seconds})")
        frames = round_half_away(Fraction(seconds) * rate.exact_frames_per_second)
        return cls(frames, rate)

    @classmethod
    def from_components(cls, components, rate: FrameRate) -> 'Timecode':
        """
        Create a timecode from (hours, minutes, seconds, frames).

        Raises:
            MalformedTimecode: if a field is out of range
            InvalidDropFrameValue: for a frame number drop frame skips
        """
        components = DisplayComponents(*components)
        if rate.is_drop_frame:
            return cls(drop_frame.components_to_frames(components, rate), rate)

        hours, minutes, seconds, frames = components.validate(rate.nominal_frame_rate)
        total_seconds = (hours * 60 + minutes) * 60 + seconds
        return cls(total_seconds * rate.nominal_frame_rate + frames, rate)

    @classmethod
    def from_string(cls, text: str, rate: FrameRate) -> 'Timecode':
        """Parse "HH:MM:SS:FF" / "HH:MM:SS;FF" or a bare frame count."""
        from timecoder.formatting import parse_timecode
        return parse_timecode(text, rate)

    # --- Decomposition ---

    def to_components(self, allow_overflow: bool = False) -> DisplayComponents:
        """
        Split into display fields.

        Args:
            allow_overflow: Keep hours past 23 instead of wrapping at 24
        """
        if self.rate.is_drop_frame:
            return drop_frame.frames_to_components(self.total_frames, self.rate, allow_overflow)

        total_seconds, frames = divmod(self.total_frames, self.rate.nominal_frame_rate)
        total_minutes, seconds = divmod(total_seconds, 60)
        hours, minutes = divmod(total_minutes, 60)
        if not allow_overflow:
            hours %= 24
        return DisplayComponents(hours, minutes, seconds, frames)

    @property
    def components(self) -> DisplayComponents:
        return self.to_components()

    def to_seconds(self) -> float:
        """Real elapsed time: total_frames / real fps."""
        return float(Fraction(self.total_frames) / self.rate.exact_frames_per_second)

    # --- Rate conversion ---

    def converting(self, rate: FrameRate) -> 'Timecode':
        """Same frame count at another rate (the display changes)."""
        return Timecode(self.total_frames, rate)

    def converting_duration(self, rate: FrameRate) -> 'Timecode':
        """Same real duration at another rate (the frame count changes)."""
        frames = round_half_away(
            Fraction(self.total_frames) / self.rate.exact_frames_per_second * rate.exact_frames_per_second
        )
        return Timecode(frames, rate)

    # --- Serialization ---

    def to_dict(self) -> dict:
        return {"frames": self.total_frames, "frameRate": self.rate.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> 'Timecode':
        return cls(data["frames"], FrameRate.from_dict(data["frameRate"]))

    # --- Operators ---

    def _check_rate(self, other: 'Timecode'):
        if self.rate != other.rate:
            raise FrameRateMismatch(f"Cannot combine timecodes at {self.rate} and {other.rate}")

    def __lt__(self, other: 'Timecode') -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        self._check_rate(other)
        return self.total_frames < other.total_frames

    def __add__(self, other: Union['Timecode', int]) -> 'Timecode':
        from timecoder import arithmetic
        if isinstance(other, Timecode):
            return arithmetic.add_timecodes(self, other)
        if isinstance(other, int):
            return arithmetic.add(self, other)
        return NotImplemented

    def __radd__(self, other: int) -> 'Timecode':
        if isinstance(other, int):
            return self.__add__(other)
        return NotImplemented

    def __sub__(self, other: Union['Timecode', int]) -> 'Timecode':
        from timecoder import arithmetic
        if isinstance(other, Timecode):
            return arithmetic.subtract_timecodes(self, other)
        if isinstance(other, int):
            return arithmetic.subtract(self, other)
        return NotImplemented

    def __mul__(self, factor: int) -> 'Timecode':
        from timecoder import arithmetic
        if isinstance(factor, int):
            return arithmetic.multiply(self, factor)
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> 'Timecode':
        from timecoder import arithmetic
        if isinstance(divisor, int):
            return arithmetic.divide(self, divisor)
        return NotImplemented

    def __str__(self) -> str:
        from timecoder.formatting import format_timecode
        return format_timecode(self)
