"""
Timecode Arithmetic Tests
=========================
"""

import pytest

from timecoder import arithmetic
from timecoder.errors import FrameRateMismatch
from timecoder.frame_rate import FrameRate
from timecoder.timecode import Timecode


class TestFramesIn24Hours:

    @pytest.mark.parametrize("rate, frames", [
        (FrameRate.FPS_24, 2073600),
        (FrameRate.FPS_25, 2160000),
        (FrameRate.FPS_30, 2592000),
        (FrameRate.FPS_29_97_NDF, 2592000),
        (FrameRate.FPS_29_97_DF, 2589408),
        (FrameRate.FPS_60, 5184000),
        (FrameRate.custom(29.5), 2592000),
    ])
    def test_values(self, rate, frames):
        assert arithmetic.frames_in_24_hours(rate) == frames

    def test_drop_frame_day_is_144_ten_minute_blocks(self, df):
        assert arithmetic.frames_in_24_hours(df) == 144 * 17982


class TestAddSubtract:

    def test_add_negative_wraps_to_previous_day(self, fps30):
        result = arithmetic.add(Timecode(0, fps30), -1)
        assert str(result) == "23:59:59:29"

    def test_subtract_below_zero(self, fps30):
        assert arithmetic.subtract(Timecode(0, fps30), 1) == arithmetic.add(Timecode(0, fps30), -1)

    def test_drop_frame_wraps_to_valid_instant(self, df):
        last = arithmetic.add(Timecode(0, df), -1)
        assert str(last) == "23:59:59;29"
        assert str(arithmetic.add(last, 1)) == "00:00:00;00"
        assert arithmetic.add(last, 1).total_frames == 0

    def test_add_wraps_forward(self, fps24):
        assert arithmetic.add(Timecode(2073599, fps24), 1).total_frames == 0

    def test_subtract_multiple_days(self, fps24):
        day = arithmetic.frames_in_24_hours(fps24)
        assert arithmetic.subtract(Timecode(0, fps24), 3 * day + 5).total_frames == day - 5

    def test_result_is_new_value(self, fps24):
        tc = Timecode(10, fps24)
        arithmetic.add(tc, 5)
        assert tc.total_frames == 10

    def test_add_timecodes(self, fps24):
        a = Timecode.from_components((1, 0, 0, 0), fps24)
        b = Timecode.from_components((0, 30, 0, 0), fps24)
        assert str(arithmetic.add_timecodes(a, b)) == "01:30:00:00"

    def test_subtract_timecodes(self, fps24):
        a = Timecode.from_components((1, 0, 0, 0), fps24)
        b = Timecode.from_components((0, 0, 30, 0), fps24)
        assert str(arithmetic.subtract_timecodes(a, b)) == "00:59:30:00"

    def test_subtract_timecodes_wraps(self, fps24):
        a = Timecode(0, fps24)
        b = Timecode(24, fps24)
        assert str(arithmetic.subtract_timecodes(a, b)) == "23:59:59:00"

    def test_add_across_drop(self, df):
        tc = Timecode.from_components((0, 0, 59, 29), df)
        assert str(arithmetic.add(tc, 1)) == "00:01:00;02"


class TestRateMismatch:

    def test_add(self, fps24, fps30):
        with pytest.raises(FrameRateMismatch):
            arithmetic.add_timecodes(Timecode(10, fps24), Timecode(10, fps30))

    def test_subtract(self, fps24, fps30):
        with pytest.raises(FrameRateMismatch):
            arithmetic.subtract_timecodes(Timecode(10, fps24), Timecode(10, fps30))

    def test_difference(self, df):
        with pytest.raises(FrameRateMismatch):
            arithmetic.difference(Timecode(10, df), Timecode(10, FrameRate.FPS_29_97_NDF))

    def test_custom_rates_compare_structurally(self):
        a = Timecode(10, FrameRate.custom(29.5))
        b = Timecode(5, FrameRate.custom(29.5))
        assert arithmetic.add_timecodes(a, b).total_frames == 15
        with pytest.raises(FrameRateMismatch):
            arithmetic.add_timecodes(a, Timecode(5, FrameRate.custom(30.5)))


class TestDifference:

    def test_signed(self, fps24):
        assert arithmetic.difference(Timecode(250, fps24), Timecode(100, fps24)) == 150
        assert arithmetic.difference(Timecode(100, fps24), Timecode(250, fps24)) == -150

    def test_does_not_wrap(self, fps24):
        day = arithmetic.frames_in_24_hours(fps24)
        assert arithmetic.difference(Timecode(day * 2, fps24), Timecode(0, fps24)) == day * 2


class TestScale:

    def test_multiply(self, fps24):
        assert arithmetic.multiply(Timecode(240, fps24), 3).total_frames == 720

    def test_multiply_wraps(self, fps24):
        day = arithmetic.frames_in_24_hours(fps24)
        assert arithmetic.multiply(Timecode(day - 1, fps24), 2).total_frames == day - 2

    def test_divide_floors(self, fps24):
        assert arithmetic.divide(Timecode(100, fps24), 3).total_frames == 33

    @pytest.mark.parametrize("n", [0, -2])
    def test_non_positive_scale(self, fps24, n):
        with pytest.raises(ValueError):
            arithmetic.multiply(Timecode(100, fps24), n)
        with pytest.raises(ValueError):
            arithmetic.divide(Timecode(100, fps24), n)
