"""
Test Configuration
==================

Pytest fixtures shared by the timecoder tests.
"""

import pytest

from timecoder.frame_rate import FrameRate


@pytest.fixture
def df():
    """29.97 drop-frame."""
    return FrameRate.FPS_29_97_DF


@pytest.fixture
def fps24():
    return FrameRate.FPS_24


@pytest.fixture
def fps30():
    return FrameRate.FPS_30


@pytest.fixture(params=[
    FrameRate.FPS_23_976,
    FrameRate.FPS_24,
    FrameRate.FPS_25,
    FrameRate.FPS_29_97_DF,
    FrameRate.FPS_29_97_NDF,
    FrameRate.FPS_30,
    FrameRate.FPS_50,
    FrameRate.FPS_59_94,
    FrameRate.FPS_60,
    FrameRate.custom(29.5),
    FrameRate.custom(47.952),
], ids=str)
def any_rate(request):
    """Every standard rate plus a couple of custom ones."""
    return request.param
