"""
Timecode engine errors.

Every error is a ValueError so callers that only care about bad input can
catch the builtin. Nothing here is retried or corrected by the engine.
"""


class TimecodeError(ValueError):
    """Base class for all timecode engine errors."""


class InvalidFrameCount(TimecodeError):
    """A negative (or otherwise unusable) frame count or duration was supplied."""


class InvalidDropFrameValue(TimecodeError):
    """Frame field 0 or 1 at second 0 of a minute that drop frame skips."""


class MalformedTimecode(TimecodeError):
    """A timecode string has the wrong shape, non-numeric or out-of-range fields."""


class FrameRateMismatch(TimecodeError):
    """Two timecodes with different frame rates were combined."""


class InvalidFrameRate(TimecodeError):
    """A custom frame rate or serialized rate record cannot be used."""
