"""Tests for GapLocatorService"""
import logging

import numpy as np
import pytest

from slider_gap.models.image import Image
from slider_gap.services.gap_locator_service import GapLocatorService


def test_locate_with_rgb_background(gap_rgb, slider_rgb):
    result = GapLocatorService().locate(Image(gap_rgb), Image(slider_rgb), 0)

    assert result.x == 60
    assert result.confident is True


def test_slider_pixels_are_not_used(gap_rgb):
    black = Image(np.zeros((50, 20, 3), dtype=np.uint8))
    white = Image(np.full((50, 20, 3), 255, dtype=np.uint8))
    service = GapLocatorService()

    assert service.locate(Image(gap_rgb), black, 0) == service.locate(Image(gap_rgb), white, 0)


def test_slider_size_bounds_the_window(gap_rgb):
    # a 40px wide slider puts the window at [45, 55), before the gap
    wide = Image(np.zeros((50, 40, 3), dtype=np.uint8))
    result = GapLocatorService().locate(Image(gap_rgb), wide, 0)

    assert result.x == 45
    assert result.confident is False


def test_locate_base64(png_base64, gap_rgb, slider_rgb):
    result = GapLocatorService().locate_base64(
        png_base64(gap_rgb, data_uri=True), png_base64(slider_rgb), 0
    )
    assert result.x == 60


def test_locate_base64_rejects_bad_payload(png_base64, slider_rgb):
    with pytest.raises(ValueError):
        GapLocatorService().locate_base64("%%%", png_base64(slider_rgb), 0)


def test_constants_from_environment(monkeypatch):
    monkeypatch.setenv("GAP_EDGE_MARGIN", "2")
    monkeypatch.setenv("GAP_DROP_THRESHOLD", "30")

    service = GapLocatorService()
    assert service.EDGE_MARGIN == 2
    assert service.DROP_THRESHOLD == 30


def test_explicit_constants_win_over_environment(monkeypatch, gap_rgb, slider_rgb):
    monkeypatch.setenv("GAP_DROP_THRESHOLD", "30")

    service = GapLocatorService(edge_margin=0, drop_threshold=150)
    result = service.locate(Image(gap_rgb), Image(slider_rgb), 0)

    assert service.DROP_THRESHOLD == 150
    assert result.x == 20
    assert result.confident is False


def test_warns_when_no_gap_found(caplog, slider_rgb):
    flat = Image(np.full((50, 100, 3), 90, dtype=np.uint8))

    with caplog.at_level(logging.WARNING, logger="slider_gap.services.gap_locator_service"):
        GapLocatorService().locate(flat, Image(slider_rgb), 0)

    assert "No confident gap found" in caplog.text
