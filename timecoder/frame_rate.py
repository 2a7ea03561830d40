"""
Frame Rate Catalog

The nine standard rates used in video production plus an open custom rate.

Each rate carries three numbers:
- Real frames per second: the capture rate. NTSC rates are exact 1000/1001
  ratios (24000/1001, 30000/1001, 60000/1001), never truncated decimals,
  so long durations do not drift.
- Nominal frame rate: the integer rate used for the frames field of a
  timecode (30 for 29.97, 24 for 23.976).
- Drop frame flag: only 29.97 DF skips frame numbers.

Serialized form (tagged record):
- {"type": "fps24"}
- {"type": "custom", "customValue": 47.952}
"""

import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Optional

from timecoder.errors import InvalidFrameRate


class RateKind(str, Enum):
    """Discriminator for FrameRate (also the serialized "type" value)."""
    FPS_23_976 = "fps23_976"
    FPS_24 = "fps24"
    FPS_25 = "fps25"
    FPS_29_97_DF = "fps29_97_df"  # 29.97 drop-frame
    FPS_29_97_NDF = "fps29_97_ndf"  # 29.97 non-drop
    FPS_30 = "fps30"
    FPS_50 = "fps50"
    FPS_59_94 = "fps59_94"
    FPS_60 = "fps60"
    CUSTOM = "custom"


# kind -> (exact fps, nominal fps)
_STANDARD_RATES = {
    RateKind.FPS_23_976: (Fraction(24000, 1001), 24),
    RateKind.FPS_24: (Fraction(24), 24),
    RateKind.FPS_25: (Fraction(25), 25),
    RateKind.FPS_29_97_DF: (Fraction(30000, 1001), 30),
    RateKind.FPS_29_97_NDF: (Fraction(30000, 1001), 30),
    RateKind.FPS_30: (Fraction(30), 30),
    RateKind.FPS_50: (Fraction(50), 50),
    RateKind.FPS_59_94: (Fraction(60000, 1001), 60),
    RateKind.FPS_60: (Fraction(60), 60),
}


def round_half_away(value) -> int:
    """
    Round a non-negative float or Fraction to the nearest integer, ties away
    from zero (29.5 -> 30, 48.5 -> 49).
    """
    whole = math.floor(value)
    if value - whole >= Fraction(1, 2):
        return whole + 1
    return whole


@dataclass(frozen=True)
class FrameRate:
    """
    A video frame rate.

    Use the class constants for standard rates (FrameRate.FPS_24,
    FrameRate.FPS_29_97_DF, ...) and FrameRate.custom() for anything else.
    Equality and hashing are structural.
    """
    kind: RateKind
    custom_value: Optional[float] = None

    def __post_init__(self):
        kind = RateKind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is RateKind.CUSTOM:
            value = self.custom_value
            if value is None:
                raise InvalidFrameRate("Custom frame rate requires a value")
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise InvalidFrameRate(f"Custom frame rate must be a number (got {value!r})") from None
            if not math.isfinite(value) or value <= 0:
                raise InvalidFrameRate(f"Custom frame rate must be positive and finite (got {value})")
            if round_half_away(value) < 1:
                raise InvalidFrameRate(f"Custom frame rate must round to at least 1 fps (got {value})")
            object.__setattr__(self, "custom_value", value)
        elif self.custom_value is not None:
            raise InvalidFrameRate(f"Standard rate {kind.value} does not take a custom value")

    @classmethod
    def custom(cls, fps: float) -> 'FrameRate':
        """Create a custom (always non-drop) frame rate."""
        return cls(RateKind.CUSTOM, fps)

    @property
    def is_custom(self) -> bool:
        return self.kind is RateKind.CUSTOM

    @property
    def exact_frames_per_second(self) -> Fraction:
        """Real frame rate as an exact fraction."""
        if self.is_custom:
            return Fraction(self.custom_value)
        return _STANDARD_RATES[self.kind][0]

    @property
    def frames_per_second(self) -> float:
        """Real frame rate as float (29.97002997... for NTSC 30)."""
        if self.is_custom:
            return self.custom_value
        return float(_STANDARD_RATES[self.kind][0])

    @property
    def nominal_frame_rate(self) -> int:
        """
        Integer rate used for the frames field of a timecode.

        Custom rates round half away from zero: custom(29.5) -> 30.
        """
        if self.is_custom:
            return round_half_away(self.custom_value)
        return _STANDARD_RATES[self.kind][1]

    @property
    def is_drop_frame(self) -> bool:
        """Only 29.97 DF uses drop-frame numbering."""
        return self.kind is RateKind.FPS_29_97_DF

    def to_dict(self) -> dict:
        """Serialize as a tagged record."""
        if self.is_custom:
            return {"type": self.kind.value, "customValue": self.custom_value}
        return {"type": self.kind.value}

    @classmethod
    def from_dict(cls, data: dict) -> 'FrameRate':
        """Inverse of to_dict()."""
        try:
            kind = RateKind(data["type"])
        except (KeyError, TypeError, ValueError):
            raise InvalidFrameRate(f"Unknown frame rate record: {data!r}") from None

        if kind is RateKind.CUSTOM:
            if "customValue" not in data:
                raise InvalidFrameRate("Custom frame rate record is missing customValue")
            return cls.custom(data["customValue"])
        return cls(kind)

    def __str__(self) -> str:
        if self.is_custom:
            return f"custom({self.custom_value:g})"
        return self.kind.value


FrameRate.FPS_23_976 = FrameRate(RateKind.FPS_23_976)
FrameRate.FPS_24 = FrameRate(RateKind.FPS_24)
FrameRate.FPS_25 = FrameRate(RateKind.FPS_25)
FrameRate.FPS_29_97_DF = FrameRate(RateKind.FPS_29_97_DF)
FrameRate.FPS_29_97_NDF = FrameRate(RateKind.FPS_29_97_NDF)
FrameRate.FPS_30 = FrameRate(RateKind.FPS_30)
FrameRate.FPS_50 = FrameRate(RateKind.FPS_50)
FrameRate.FPS_59_94 = FrameRate(RateKind.FPS_59_94)
FrameRate.FPS_60 = FrameRate(RateKind.FPS_60)

STANDARD_RATES = (
    FrameRate.FPS_23_976,
    FrameRate.FPS_24,
    FrameRate.FPS_25,
    FrameRate.FPS_29_97_DF,
    FrameRate.FPS_29_97_NDF,
    FrameRate.FPS_30,
    FrameRate.FPS_50,
    FrameRate.FPS_59_94,
    FrameRate.FPS_60,
)


def all_standard_rates() -> tuple:
    """The nine standard rates, in a fixed order (custom excluded)."""
    return STANDARD_RATES


# Labels accepted on the command line, lowercased with spaces removed
_RATE_LABELS = {
    "23.976": FrameRate.FPS_23_976,
    "23.98": FrameRate.FPS_23_976,
    "24": FrameRate.FPS_24,
    "25": FrameRate.FPS_25,
    "29.97df": FrameRate.FPS_29_97_DF,
    "29.97ndf": FrameRate.FPS_29_97_NDF,
    "29.97": FrameRate.FPS_29_97_NDF,
    "30": FrameRate.FPS_30,
    "50": FrameRate.FPS_50,
    "59.94": FrameRate.FPS_59_94,
    "60": FrameRate.FPS_60,
}


def parse_frame_rate(text: str) -> FrameRate:
    """
    Parse a frame rate from user input.

    Accepts:
    - A kind: "fps29_97_df", "fps24"
    - A label: "29.97 DF", "29.97ndf", "23.976", "59.94", "25fps"
    - Any positive number: "48" -> custom(48.0). Numbers within 0.01 of an
      NTSC rate map to that rate (29.97 is non-drop; use "29.97df" for DF).

    Raises:
        InvalidFrameRate: if the text is not a usable rate
    """
    key = text.strip().lower().replace(" ", "")
    if key.endswith("fps") and not key.startswith("fps"):
        key = key[:-3]

    try:
        kind = RateKind(key)
    except ValueError:
        pass
    else:
        if kind is not RateKind.CUSTOM:
            return FrameRate(kind)

    if key in _RATE_LABELS:
        return _RATE_LABELS[key]

    try:
        fps = float(key)
    except ValueError:
        raise InvalidFrameRate(f"Invalid frame rate: {text}") from None

    # Map near matches to standard rates
    if abs(fps - 23.976) < 0.01:
        return FrameRate.FPS_23_976
    elif abs(fps - 29.97) < 0.01:
        return FrameRate.FPS_29_97_NDF
    elif abs(fps - 59.94) < 0.01:
        return FrameRate.FPS_59_94
    for rate in (FrameRate.FPS_24, FrameRate.FPS_25, FrameRate.FPS_30, FrameRate.FPS_50, FrameRate.FPS_60):
        if fps == rate.frames_per_second:
            return rate

    return FrameRate.custom(fps)
