"""
Display components: the (hours, minutes, seconds, frames) shape exchanged
between a Timecode and its string form.
"""

from typing import NamedTuple

from timecoder.errors import MalformedTimecode


class DisplayComponents(NamedTuple):
    """Hours, minutes, seconds and frames as shown on a display."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    frames: int = 0

    def validate(self, nominal_frame_rate: int) -> 'DisplayComponents':
        """
        Check field ranges against a nominal rate.

        Hours are unbounded so overflow-formatted values can be read back.

        Raises:
            MalformedTimecode: if any field is negative or out of range
        """
        if min(self) < 0:
            raise MalformedTimecode(f"Timecode fields cannot be negative (got {self})")
        if self.minutes > 59:
            raise MalformedTimecode(f"Minutes must be 0-59 (got {self.minutes})")
        if self.seconds > 59:
            raise MalformedTimecode(f"Seconds must be 0-59 (got {self.seconds})")
        if self.frames >= nominal_frame_rate:
            raise MalformedTimecode(f"Frames must be 0-{nominal_frame_rate - 1} (got {self.frames})")
        return self
