import pytest

from sowa.color import Color


def test_default_is_opaque_white():
    c = Color()
    assert (c.r, c.g, c.b, c.a) == (1.0, 1.0, 1.0, 1.0)


def test_single_value_is_grey():
    c = Color(0.5)
    assert (c.r, c.g, c.b, c.a) == (0.5, 0.5, 0.5, 1.0)


def test_partial_channels_rejected():
    with pytest.raises(TypeError):
        Color(0.1, 0.2)


def test_rgba_float():
    c = Color.rgba_float(0.1, 0.2, 0.3)
    assert (c.r, c.g, c.b, c.a) == (0.1, 0.2, 0.3, 1.0)


def test_rgb_extremes():
    c = Color.rgb(255, 0, 0)
    assert (c.r, c.g, c.b, c.a) == (1.0, 0.0, 0.0, 1.0)


def test_rgb_out_of_range():
    with pytest.raises(ValueError):
        Color.rgb(256, 0, 0)


def test_str_default():
    assert str(Color()) == "Color(255, 255, 255, 255)"


def test_str_from_rgb():
    assert str(Color.rgb(255, 0, 0, 255)) == "Color(255, 0, 0, 255)"


@pytest.mark.parametrize(
    "hue, expected",
    [(0, (1, 0, 0)), (120, (0, 1, 0)), (240, (0, 0, 1)), (360, (1, 0, 0))],
)
def test_hsv_primaries(hue, expected):
    c = Color.hsv(hue, 1.0, 1.0)
    assert (c.r, c.g, c.b) == pytest.approx(expected)
    assert c.a == 1.0


def test_hsv_zero_saturation_is_grey():
    c = Color.hsv(200, 0.0, 0.4)
    assert c.r == pytest.approx(0.4)
    assert c.g == pytest.approx(0.4)
    assert c.b == pytest.approx(0.4)


def test_hsv_clamps_saturation():
    assert Color.hsv(75, 5.0, 1.0) == Color.hsv(75, 1.0, 1.0)


def test_hsv_negative_hue_falls_back_to_white():
    assert Color.hsv(-30, 1.0, 1.0) == Color()