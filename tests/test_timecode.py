"""
Timecode Value Tests
====================
"""

import dataclasses

import pytest

from timecoder.errors import FrameRateMismatch, InvalidFrameCount, InvalidDropFrameValue
from timecoder.frame_rate import FrameRate
from timecoder.timecode import Timecode


class TestConstruction:

    def test_from_frames(self, fps24):
        tc = Timecode.from_frames(86400, fps24)
        assert tc.total_frames == 86400
        assert tc.rate == fps24

    def test_negative_frames_rejected(self, fps24):
        with pytest.raises(InvalidFrameCount):
            Timecode.from_frames(-1, fps24)

    def test_non_integer_frames_rejected(self, fps24):
        with pytest.raises(InvalidFrameCount):
            Timecode(1.5, fps24)

    def test_zero(self, fps24):
        tc = Timecode.zero(fps24)
        assert tc.total_frames == 0
        assert tc.components == (0, 0, 0, 0)

    def test_from_components(self, fps24):
        # 1*86400 + 2*1440 + 3*24 + 4
        assert Timecode.from_components((1, 2, 3, 4), fps24).total_frames == 89356

    def test_from_components_drop_frame(self, df):
        assert Timecode.from_components((0, 1, 0, 2), df).total_frames == 1800
        with pytest.raises(InvalidDropFrameValue):
            Timecode.from_components((0, 1, 0, 0), df)

    def test_immutable(self, fps24):
        tc = Timecode(10, fps24)
        with pytest.raises(dataclasses.FrozenInstanceError):
            tc.total_frames = 11


class TestComponents:

    @pytest.mark.parametrize("rate, frames", [
        (FrameRate.FPS_24, 86400),
        (FrameRate.FPS_25, 90000),
        (FrameRate.FPS_30, 108000),
        (FrameRate.FPS_23_976, 86400),
        (FrameRate.FPS_29_97_NDF, 108000),
        (FrameRate.FPS_59_94, 216000),
    ])
    def test_one_hour_non_drop(self, rate, frames):
        assert Timecode(frames, rate).components == (1, 0, 0, 0)

    def test_arbitrary(self, fps24):
        assert Timecode(89356, fps24).components == (1, 2, 3, 4)

    def test_single_frame(self, fps24):
        assert Timecode(1, fps24).components == (0, 0, 0, 1)

    def test_same_frames_differ_between_df_and_ndf(self, df, fps30):
        assert Timecode(1800, fps30).components == (0, 1, 0, 0)
        assert Timecode(1800, df).components == (0, 1, 0, 2)

    def test_hours_wrap_unless_overflow(self, fps24):
        total = ((99 * 60 + 59) * 60 + 59) * 24 + 23
        tc = Timecode(total, fps24)
        assert tc.to_components() == (3, 59, 59, 23)
        assert tc.to_components(allow_overflow=True) == (99, 59, 59, 23)

    def test_custom_rate_frame_field_below_nominal(self):
        rate = FrameRate.custom(29.5)
        assert Timecode(29, rate).components == (0, 0, 0, 29)
        assert Timecode(30, rate).components == (0, 0, 1, 0)
        for total in range(0, 3000):
            assert Timecode(total, rate).components.frames < 30


class TestSeconds:

    def test_to_seconds(self, fps24):
        assert Timecode(86400, fps24).to_seconds() == pytest.approx(3600.0)

    def test_to_seconds_uses_real_rate(self, df):
        # 30 frames at 29.97 is slightly longer than a second
        assert Timecode(30, df).to_seconds() == pytest.approx(1.001)

    def test_from_seconds(self, fps24):
        assert Timecode.from_seconds(3600.0, fps24).total_frames == 86400

    def test_from_seconds_drop_frame_tracks_real_time(self, df):
        # One displayed minute of drop frame lasts 60.06 real seconds
        tc = Timecode.from_seconds(60.06, df)
        assert tc.total_frames == 1800
        assert str(tc) == "00:01:00;02"

    def test_from_seconds_rounds_half_away_from_zero(self):
        rate = FrameRate.custom(2.0)
        assert Timecode.from_seconds(0.25, rate).total_frames == 1
        assert Timecode.from_seconds(0.75, rate).total_frames == 2

    def test_seconds_round_trip_23_976(self):
        rate = FrameRate.FPS_23_976
        seconds = Timecode.from_seconds(100.0, rate).to_seconds()
        assert abs(seconds - 100.0) <= 1 / rate.frames_per_second

    @pytest.mark.parametrize("seconds", [-0.5, float("nan"), float("inf")])
    def test_invalid_seconds(self, fps24, seconds):
        with pytest.raises(InvalidFrameCount):
            Timecode.from_seconds(seconds, fps24)


class TestRateConversion:

    def test_converting_keeps_frame_count(self, fps24, fps30):
        tc30 = Timecode(86400, fps24).converting(fps30)
        assert tc30.total_frames == 86400
        assert tc30.rate == fps30
        assert tc30.components != (1, 0, 0, 0)

    def test_converting_duration_keeps_time(self, fps24, fps30):
        tc30 = Timecode(86400, fps24).converting_duration(fps30)
        assert tc30.total_frames == 108000
        assert tc30.to_seconds() == pytest.approx(3600.0)

    def test_converting_duration_ntsc(self, fps30, df):
        # 1800 frames at 30 fps is 60 s, which is 1798.2 frames at 29.97
        assert Timecode(1800, fps30).converting_duration(df).total_frames == 1798


class TestComparison:

    def test_ordering(self, fps24):
        a = Timecode(100, fps24)
        b = Timecode(200, fps24)
        assert a < b
        assert not b < a
        assert a <= b
        assert b > a
        assert b >= a

    def test_ordering_across_rates_fails(self, fps24, fps30):
        with pytest.raises(FrameRateMismatch):
            Timecode(100, fps24) < Timecode(200, fps30)

    def test_equality(self, fps24):
        assert Timecode(10, fps24) == Timecode(10, fps24)
        assert Timecode(10, fps24) != Timecode(10, FrameRate.FPS_25)
        assert len({Timecode(10, fps24), Timecode(10, fps24)}) == 1


class TestOperators:

    def test_add_frames(self, fps24):
        assert (Timecode(10, fps24) + 5).total_frames == 15
        assert (5 + Timecode(10, fps24)).total_frames == 15

    def test_add_timecodes(self, fps24):
        one_hour = Timecode.from_components((1, 0, 0, 0), fps24)
        half_hour = Timecode.from_components((0, 30, 0, 0), fps24)
        assert (one_hour + half_hour).components == (1, 30, 0, 0)

    def test_subtract_timecodes(self, fps24):
        one_hour = Timecode.from_components((1, 0, 0, 0), fps24)
        thirty_seconds = Timecode.from_components((0, 0, 30, 0), fps24)
        assert (one_hour - thirty_seconds).components == (0, 59, 30, 0)

    def test_subtract_frames_wraps(self, fps30):
        assert str(Timecode(0, fps30) - 1) == "23:59:59:29"

    def test_multiply_and_divide(self, fps24):
        tc = Timecode(240, fps24)
        assert (tc * 3).total_frames == 720
        assert (3 * tc).total_frames == 720
        assert (tc // 7).total_frames == 34

    def test_mismatched_rates(self, fps24, fps30):
        with pytest.raises(FrameRateMismatch):
            Timecode(1, fps24) + Timecode(1, fps30)

    def test_unsupported_operand(self, fps24):
        with pytest.raises(TypeError):
            Timecode(1, fps24) + 1.5


class TestSerialization:

    def test_round_trip(self, df):
        tc = Timecode.from_components((1, 2, 3, 4), df)
        assert Timecode.from_dict(tc.to_dict()) == tc

    def test_record_shape(self):
        tc = Timecode(48, FrameRate.custom(47.952))
        assert tc.to_dict() == {"frames": 48, "frameRate": {"type": "custom", "customValue": 47.952}}
