import pytest

from texstream.colors import (
    Color,
    bounce01,
    color_decode,
    color_decode_float,
    color_encode,
    color_encode_float,
    color_sum,
)


def test_encode_matches_named_colors():
    assert color_encode(0xFF, 0, 0, 0xFF) == Color.RED
    assert color_encode(0, 0, 0, 0xFF) == Color.BLACK
    assert color_encode(0xFF, 0xFF, 0, 0xFF) == Color.YELLOW


def test_decode_named_color():
    assert color_decode(Color.CYAN) == (0, 0xFF, 0xFF, 0xFF)
    assert color_decode(Color.MAGENTA) == (0xFF, 0, 0xFF, 0xFF)


@pytest.mark.parametrize("color", list(Color))
def test_encode_decode_roundtrip(color):
    assert color_encode(*color_decode(color)) == color


@pytest.mark.parametrize("channels", [(1, 2, 3, 4), (255, 0, 128, 7), (0, 0, 0, 0)])
def test_decode_encode_roundtrip(channels):
    assert color_decode(color_encode(*channels)) == channels


def test_float_encoding_of_extremes():
    assert color_encode_float(1.0, 1.0, 1.0, 1.0) == Color.WHITE
    assert color_encode_float(0.0, 0.0, 1.0, 1.0) == Color.BLUE


def test_float_decode_roundtrip():
    assert color_decode_float(Color.WHITE) == (1.0, 1.0, 1.0, 1.0)
    assert color_encode_float(*color_decode_float(Color.GREEN)) == Color.GREEN


def test_color_sum_with_zero_is_identity():
    assert color_sum(Color.MAGENTA, 0) == Color.MAGENTA


def test_color_sum_is_symmetric_and_wraps():
    assert color_sum(Color.RED, Color.BLUE) == color_sum(Color.BLUE, Color.RED)
    assert color_sum(Color.WHITE, Color.WHITE) == 0xFEFEFEFE


def test_bounce01_keeps_values_in_range():
    assert bounce01(0.5) == 0.5
    assert bounce01(1.0) == 1.0
    assert bounce01(1.25) == pytest.approx(0.75)


def test_bounce01_negative_collapses_to_zero():
    assert bounce01(-0.3) == 0.0
    assert 0.0 <= bounce01(3.5) <= 1.0