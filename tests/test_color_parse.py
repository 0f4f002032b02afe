# tests/test_color_parse.py
"""Generic CSS color parsing and color-model conversions."""

from __future__ import annotations

import importlib
import math

import pytest

from color_palette_builder.color.types import HSLA, OKLCHA, RGBA

parse = importlib.import_module("color_palette_builder.color.parse")
conv = importlib.import_module("color_palette_builder.color.convert")


def _close(rgba, expected, tol=1.0):
    return all(abs(a - b) <= tol for a, b in zip(rgba[:3], expected))


# ──────────────────────────────────────────────────────────────────────────────
# Accepted notations
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expected",
    [
        ("#fff", (255, 255, 255)),
        ("#F00", (255, 0, 0)),
        ("#00ff00", (0, 255, 0)),
        ("rgb(255, 0, 0)", (255, 0, 0)),
        ("rgb(12 34 56)", (12, 34, 56)),
        ("RGB(100%, 0%, 0%)", (255, 0, 0)),
        ("hsl(120, 100%, 50%)", (0, 255, 0)),
        ("hsl(0.5turn 100% 50%)", (0, 255, 255)),
        ("hsl(200grad 100% 50%)", (0, 255, 255)),
        ("hsl(240 100 50)", (0, 0, 255)),
        ("oklch(1 0 0)", (255, 255, 255)),
        ("oklch(0% 0 0)", (0, 0, 0)),
        ("tomato", (255, 99, 71)),
        ("Navy", (0, 0, 128)),
    ],
)
def test_parse_color_rgb_channels(text, expected):
    rgba = parse.parse_color(text)
    assert rgba is not None
    assert _close(rgba, expected)
    assert rgba.a == 1.0


@pytest.mark.parametrize(
    "text,alpha",
    [
        ("#ff000080", 128 / 255),
        ("#f008", 136 / 255),
        ("rgba(0, 0, 255, 0.5)", 0.5),
        ("rgb(100% 0% 0% / 50%)", 0.5),
        ("hsla(0, 100%, 50%, 0.25)", 0.25),
        ("oklch(0.5 0.1 200 / 0.3)", 0.3),
        ("transparent", 0.0),
    ],
)
def test_parse_color_alpha(text, alpha):
    rgba = parse.parse_color(text)
    assert rgba is not None
    assert rgba.a == pytest.approx(alpha)


def test_parse_oklch_red_reference():
    rgba = parse.parse_color("oklch(0.628 0.2577 29.23)")
    assert rgba is not None
    assert _close(rgba, (255, 0, 0), tol=2.0)


# ──────────────────────────────────────────────────────────────────────────────
# Rejected notations
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text",
    [
        "rgb(256, 0, 0)",
        "rgb(999 999 999)",
        "rgb(-1, 0, 0)",
        "rgb(1, 2)",
        "rgb(1 2 3 4)",
        "rgb(1, 2, 3 / 0.5)",
        "rgba(0, 0, 0, 1.5)",
        "hsl(10, 120%, 50%)",
        "hsl(10%, 50%, 50%)",
        "oklch(1.5 0.1 10)",
        "oklch(0.5 -0.1 10)",
        "#abcde",
        "#abcdeff",
        "#ggg",
        "nope",
        "",
        "lab(50 20 20)",
    ],
)
def test_parse_color_rejects(text):
    assert parse.parse_color(text) is None
    assert parse.is_valid_color(text) is False


def test_parse_color_non_string_is_none():
    assert parse.parse_color(None) is None  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────────────────────
# Conversions
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "value,unit,expected",
    [
        (0.5, "turn", 180.0),
        (200, "grad", 180.0),
        (math.pi, "rad", 180.0),
        (-90, "deg", 270.0),
        (720, "deg", 0.0),
    ],
)
def test_angle_to_degrees(value, unit, expected):
    assert conv.angle_to_degrees(value, unit) == pytest.approx(expected)


def test_angle_to_degrees_unknown_unit():
    with pytest.raises(ValueError):
        conv.angle_to_degrees(1, "gon")


def test_rgb_to_oklch_red_reference_values():
    lch = conv.rgb_to_oklch(RGBA(255, 0, 0))
    assert lch.l == pytest.approx(0.628, abs=1e-3)
    assert lch.c == pytest.approx(0.2577, abs=1e-3)
    assert lch.h == pytest.approx(29.23, abs=0.1)


@pytest.mark.parametrize("rgb", [(255, 0, 0), (12, 200, 99), (128, 128, 128), (0, 0, 0), (250, 240, 10)])
def test_oklch_round_trip(rgb):
    back = conv.oklch_to_rgb(conv.rgb_to_oklch(RGBA(*rgb)))
    assert _close(back, rgb, tol=0.5)


def test_oklch_out_of_gamut_is_clipped():
    rgba = conv.oklch_to_rgb(OKLCHA(0.9, 0.4, 140))
    assert all(0.0 <= c <= 255.0 for c in rgba[:3])


def test_hsl_round_trip():
    hsl = conv.rgb_to_hsl(RGBA(51, 102, 153))
    back = conv.hsl_to_rgb(HSLA(hsl.h, hsl.s, hsl.l))
    assert _close(back, (51, 102, 153), tol=0.01)


def test_rgb_to_hsv_primary():
    hsv = conv.rgb_to_hsv(RGBA(0, 0, 255, 0.5))
    assert (hsv.h, hsv.s, hsv.v, hsv.a) == pytest.approx((240.0, 100.0, 100.0, 0.5))


def test_to_model_dispatch_and_unknown():
    assert conv.to_model(RGBA(0, 0, 0), "rgb") == RGBA(0, 0, 0)
    with pytest.raises(ValueError):
        conv.to_model(RGBA(0, 0, 0), "cmyk")
