import math

import numpy as np
import pytest

from color_picker.channels import ChannelId
from color_picker.color import ColorValue
from color_picker.colorspaces import HSL, HSV, RGB


def rgb_of(color):
    return color.triple(RGB)


def color_from(space, values):
    c = ColorValue()
    c.from_colorspace(space, values)
    return c


def test_starts_black():
    c = ColorValue()
    assert c.to_hex() == "#000000"
    assert all(v == 0.0 for v in c.as_dict().values())
    assert len(c.as_dict()) == 8


def test_hex_rounds_half_up():
    assert color_from(RGB, (1.0, 0.0, 0.50196)).to_hex() == "#ff0080"


def test_hex_clamps_out_of_range_rgb():
    c = color_from(RGB, (1.5, -0.2, 0.5))
    assert c.get(ChannelId.RED) == 1.5  # stored unclamped
    assert c.to_hex() == "#ff0080"


@pytest.mark.parametrize(
    "rgb, expected",
    [((1.5, 0.5, 1.0), "#ff80ff"), ((-0.5, 0.5, 0.0), "#008000")],
)
def test_out_of_range_rgb_keeps_hsl_saturation(rgb, expected):
    c = color_from(HSL, (0.3, 0.8, 0.5))
    c.from_colorspace(RGB, rgb)
    assert c.to_hex() == expected
    assert c.get(ChannelId.HSL_SAT) == pytest.approx(0.8)


def test_invert_out_of_range_rgb():
    c = color_from(RGB, (1.5, 0.5, 1.0))
    c.invert()
    assert np.allclose(rgb_of(c), (-0.5, 0.5, 0.0))


def test_invert():
    c = color_from(RGB, (0.2, 0.4, 0.6))
    c.invert()
    assert np.allclose(rgb_of(c), (0.8, 0.6, 0.4), atol=1e-9)


def test_complement_is_per_channel_half_turn():
    c = color_from(RGB, (0.1, 0.9, 0.3))
    c.complement()
    assert np.allclose(rgb_of(c), (0.6, 0.4, 0.8), atol=1e-9)


def test_from_colorspace_is_idempotent():
    c = ColorValue()
    c.from_colorspace(RGB, (0.25, 0.5, 0.75))
    first = c.as_dict()
    c.from_colorspace(RGB, (0.25, 0.5, 0.75))
    assert c.as_dict() == first


def test_derived_spaces_follow_rgb():
    c = color_from(RGB, (1.0, 0.0, 0.0))
    assert c.triple(HSL) == pytest.approx((0.0, 1.0, 0.5))
    assert c.triple(HSV) == pytest.approx((0.0, 1.0, 1.0))


def test_input_values_stored_verbatim():
    c = color_from(HSV, (0.3, 0.25, 0.8))
    assert c.get(ChannelId.HSV_SAT) == 0.25
    assert c.get(ChannelId.VALUE) == 0.8
    # hue is shared with HSL and re-derived there from RGB
    assert c.get(ChannelId.HUE) == pytest.approx(0.3)


def test_hue_survives_trip_through_black():
    c = color_from(HSL, (0.3, 0.8, 0.5))
    before = c.to_hex()
    hsv_sat = c.get(ChannelId.HSV_SAT)

    c.set(ChannelId.LIGHTNESS, 0.0)
    assert c.to_hex() == "#000000"
    assert c.get(ChannelId.HUE) == pytest.approx(0.3)
    assert c.get(ChannelId.HSV_SAT) == pytest.approx(hsv_sat)

    c.set(ChannelId.LIGHTNESS, 0.5)
    assert c.get(ChannelId.HUE) == pytest.approx(0.3)
    assert c.get(ChannelId.HSL_SAT) == pytest.approx(0.8)
    assert c.to_hex() == before


def test_gray_keeps_hue_and_hsl_saturation():
    c = color_from(HSV, (0.3, 1.0, 1.0))
    sat = c.get(ChannelId.HSL_SAT)
    c.from_colorspace(RGB, (0.5, 0.5, 0.5))
    assert c.get(ChannelId.HUE) == pytest.approx(0.3)
    assert c.get(ChannelId.HSL_SAT) == pytest.approx(sat)
    assert c.get(ChannelId.LIGHTNESS) == pytest.approx(0.5)
    # HSV saturation of a non-black gray is defined: zero
    assert c.get(ChannelId.HSV_SAT) == pytest.approx(0.0)


def test_set_rgb_channel_updates_everything():
    c = ColorValue()
    c.set(ChannelId.RED, 1.0)
    assert c.to_hex() == "#ff0000"
    assert c.get(ChannelId.LIGHTNESS) == pytest.approx(0.5)
    assert c.get(ChannelId.VALUE) == pytest.approx(1.0)
    assert c.get(ChannelId.HSV_SAT) == pytest.approx(1.0)


def test_set_accepts_names():
    c = ColorValue()
    c.set("value", 1.0)
    assert c.to_hex() == "#ffffff"
    assert c.get("VALUE") == 1.0


def test_set_hue_goes_through_hsl():
    c = color_from(RGB, (1.0, 0.0, 0.0))
    c.set(ChannelId.HUE, 1 / 3)
    assert c.to_hex() == "#00ff00"
    assert c.get(ChannelId.HSL_SAT) == pytest.approx(1.0)


def test_hue_wraps_out_of_range():
    a = color_from(HSV, (1.25, 1.0, 1.0))
    b = color_from(HSV, (0.25, 1.0, 1.0))
    assert a.to_hex() == b.to_hex()
    assert a.get(ChannelId.HUE) == pytest.approx(0.25)  # re-derived through HSL


def test_set_rejects_non_finite():
    c = color_from(RGB, (0.1, 0.2, 0.3))
    before = c.as_dict()
    for bad in (math.nan, math.inf, -math.inf):
        with pytest.raises(ValueError):
            c.set(ChannelId.GREEN, bad)
    assert c.as_dict() == before


def test_from_colorspace_needs_three_values():
    c = ColorValue()
    with pytest.raises(ValueError):
        c.from_colorspace(RGB, (0.1, 0.2))
    with pytest.raises(ValueError):
        c.from_colorspace("hsl", (0.1, 0.2, 0.3, 0.4))
    with pytest.raises(ValueError):
        c.from_colorspace("cmyk", (0.1, 0.2, 0.3))


def test_randomize_uses_given_generator():
    c = ColorValue()
    c.randomize(np.random.default_rng(3))
    expected = np.random.default_rng(3).random(3)
    assert np.allclose(rgb_of(c), expected)
    assert all(0.0 <= v < 1.0 for v in rgb_of(c))


def test_randomize_without_generator():
    c = ColorValue()
    c.randomize()
    assert all(0.0 <= v < 1.0 for v in rgb_of(c))


def test_parse_css_rgb():
    c = ColorValue()
    assert c.parse_css_color("rgb(255, 0, 128)")
    assert c.to_hex() == "#ff0080"
    assert c.get(ChannelId.BLUE) == pytest.approx(128 / 255)


def test_parse_failure_leaves_state():
    c = color_from(RGB, (0.2, 0.4, 0.6))
    before = c.to_hex()
    assert not c.parse_css_color("not-a-color")
    assert c.to_hex() == before


def test_clone_is_independent():
    c = color_from(RGB, (0.2, 0.4, 0.6))
    d = c.clone()
    d.set(ChannelId.RED, 1.0)
    assert c.get(ChannelId.RED) == 0.2
    assert d.get(ChannelId.RED) == 1.0
    assert c.clone().as_dict() == c.as_dict()


def test_assume_does_not_mutate():
    c = color_from(RGB, (1.0, 0.0, 0.0))
    before = c.as_dict()
    cyan = c.assume({ChannelId.HUE: 0.5})
    assert cyan.to_hex() == "#00ffff"
    assert c.as_dict() == before


def test_assume_within_one_colorspace():
    c = color_from(RGB, (1.0, 0.0, 0.0))
    assert c.assume({"lightness": 1.0}).to_hex() == "#ffffff"
    assert c.assume({ChannelId.GREEN: 1.0, ChannelId.BLUE: 1.0}).to_hex() == "#ffffff"


def test_assume_keeps_hue_of_black():
    c = color_from(HSV, (0.6, 1.0, 0.0))
    top = c.assume({ChannelId.VALUE: 1.0})
    assert top.get(ChannelId.HUE) == pytest.approx(0.6)
    assert top.to_hex() != "#ffffff"
