# tests/test_color_normalize.py
"""Shape classification and normalization of raw color text."""

from __future__ import annotations

import importlib
import random

import pytest

from color_palette_builder.errors import InvalidColorError

nz = importlib.import_module("color_palette_builder.color.normalize")


# ──────────────────────────────────────────────────────────────────────────────
# Shape classification (first match wins)
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,shape",
    [
        ("0.7 0.15 180", "oklch"),
        (".5 .1 20.5", "oklch"),
        ("120deg 50% 50%", "hsl"),
        ("200.5 50% 40%", "hsl"),
        ("0.25turn 10 20%", "hsl"),
        ("255 0 0", "rgb"),
        ("120 50 50", "rgb"),
        ("255, 128, 0", "rgb"),
        ("255,128,0", "rgb"),
        ("fff", "hex"),
        ("FFAA00", "hex"),
        ("aabbccdd", "hex"),
        ("abcde", None),
        ("red", None),
        ("#ffaa00", None),
        ("rgb(1, 2, 3)", None),
    ],
)
def test_classify_shape(text, shape):
    assert nz.classify_shape(text) == shape


def test_matchers_are_ordered_oklch_hsl_rgb_hex():
    assert [m.name for m in nz.SHAPE_MATCHERS] == ["oklch", "hsl", "rgb", "hex"]


# ──────────────────────────────────────────────────────────────────────────────
# Wrapping + validation
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expected",
    [
        ("0.7 0.15 180", "oklch(0.7 0.15 180)"),
        ("120deg 50% 50%", "hsl(120deg 50% 50%)"),
        ("210.5 40% 60%", "hsl(210.5 40% 60%)"),
        ("255 0 0", "rgb(255 0 0)"),
        ("255,   128 ,0", "rgb(255 128 0)"),
        ("255, 128, 0", "rgb(255 128 0)"),
        ("120 50 50", "rgb(120 50 50)"),
        ("ffaa00", "#ffaa00"),
        ("FFAA00", "#FFAA00"),
        ("abc", "#abc"),
        ("abcd", "#abcd"),
        ("aabbccdd", "#aabbccdd"),
        ("#ffaa00", "#ffaa00"),
        ("  tomato  ", "tomato"),
        ("rgba(0, 0, 0, 0.5)", "rgba(0, 0, 0, 0.5)"),
        ("hsl(0 100% 50% / 20%)", "hsl(0 100% 50% / 20%)"),
    ],
)
def test_normalize_color_wraps_and_keeps_text(text, expected):
    assert nz.normalize_color(text) == expected


@pytest.mark.parametrize(
    "text",
    ["999 999 999", "abcde", "abcdeff", "notacolor", "", "   ", "1.5 0.1 20", "300 50% 150%"],
)
def test_normalize_color_rejects(text):
    with pytest.raises(InvalidColorError):
        nz.normalize_color(text)


def test_normalize_is_idempotent_on_canonical_input():
    once = nz.normalize_color("#ffaa00")
    assert once == "#ffaa00"
    assert nz.normalize_color(once) == once
    wrapped = nz.normalize_color("ffaa00")
    assert nz.normalize_color(wrapped) == wrapped


def test_same_color_in_different_syntax_stays_distinct():
    assert nz.normalize_color("255 0 0") != nz.normalize_color("#ff0000")


def test_try_normalize_returns_none_on_reject():
    assert nz.try_normalize("999 999 999") is None
    assert nz.try_normalize("ff0000") == "#ff0000"


def test_invalid_color_error_carries_candidate_and_suggestion():
    with pytest.raises(InvalidColorError) as info:
        nz.normalize_color("gren")
    assert info.value.text == "gren"
    assert info.value.candidate == "gren"
    assert info.value.suggestion == "green"

    with pytest.raises(InvalidColorError) as info:
        nz.normalize_color("999 999 999")
    assert info.value.candidate == "rgb(999 999 999)"
    assert info.value.suggestion is None


def test_non_string_input_is_rejected():
    with pytest.raises(InvalidColorError):
        nz.normalize_color(None)  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────────────────────
# Properties
# ──────────────────────────────────────────────────────────────────────────────
def test_decimal_triples_always_become_oklch():
    rng = random.Random(7)
    for _ in range(500):
        text = f"{rng.uniform(0, 1):.3f} {rng.uniform(0, 0.4):.3f} {rng.uniform(0, 360):.2f}"
        assert nz.normalize_color(text) == f"oklch({text})"


def test_hex_bodies_get_hash_prefix_case_preserved():
    rng = random.Random(11)
    alphabet = "0123456789abcdefABCDEF"
    for length in (3, 4, 6, 8):
        for _ in range(50):
            body = "".join(rng.choice(alphabet) for _ in range(length))
            assert nz.normalize_color(body) == f"#{body}"
