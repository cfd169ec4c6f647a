from __future__ import annotations

import logging
import math
from typing import Dict, Iterable, Mapping, Optional

import numpy as np

from .channels import CHANNELS, ChannelId, ChannelLike, get_channel
from .colorspaces import (
    COLORSPACES,
    RGB,
    ColorspaceLike,
    colorspace_containing,
    get_colorspace,
)
from .conversions import Triple
from .css import parse_css_rgb

log = logging.getLogger(__name__)


def _to_byte(v: float) -> int:
    return max(0, min(255, math.floor(v * 255 + 0.5)))


def _finite_triple(values: Iterable[float]) -> Triple:
    vals = tuple(float(v) for v in values)
    if len(vals) != 3:
        raise ValueError(f"expected 3 values, got {len(vals)}")
    if not all(math.isfinite(v) for v in vals):
        raise ValueError(f"values must be finite: {vals}")
    return vals  # type: ignore[return-value]


class ColorValue:
    """One color held in RGB, HSL and HSV at once.

    RGB is authoritative; HSL and HSV are re-derived from it after every
    change. Hue and saturation are undefined for grays (and saturation for
    black in HSV); in that case the previous value is kept so sliders don't
    jump when a color passes through an achromatic point.

    Values are normalized to [0, 1] but never clamped here: hue wraps through
    the conversions, RGB is stored as given and only clamped by ``to_hex``.
    """

    def __init__(self) -> None:
        self._values: Dict[ChannelId, float] = {cid: 0.0 for cid in CHANNELS}

    def __repr__(self) -> str:
        return f"ColorValue({self.to_hex()})"

    # -- accessors ---------------------------------------------------------

    def get(self, channel: ChannelLike) -> float:
        return self._values[get_channel(channel).id]

    def triple(self, colorspace: ColorspaceLike) -> Triple:
        space = get_colorspace(colorspace)
        a, b, c = (self._values[ch.id] for ch in space.channels)
        return a, b, c

    def as_dict(self) -> Dict[str, float]:
        return {cid.value: v for cid, v in self._values.items()}

    def to_hex(self) -> str:
        r, g, b = self.triple(RGB)
        return "#{:02x}{:02x}{:02x}".format(_to_byte(r), _to_byte(g), _to_byte(b))

    # -- setters -----------------------------------------------------------

    def set(self, channel: ChannelLike, value: float) -> None:
        ch = get_channel(channel)
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{ch.id.value} must be finite, got {value}")

        # The other two channels keep their *stored* values, not ones re-derived
        # from RGB, so a gray keeps its hue when lightness moves.
        space = colorspace_containing(ch)
        values = [value if other == ch else self._values[other.id] for other in space.channels]
        self.from_colorspace(space, values)

    def from_colorspace(self, colorspace: ColorspaceLike, values: Iterable[float]) -> None:
        space = get_colorspace(colorspace)
        vals = _finite_triple(values)

        for ch, v in zip(space.channels, vals):
            self._values[ch.id] = v

        rgb = space.to_rgb(*vals)
        for ch, v in zip(RGB.channels, rgb):
            self._values[ch.id] = v

        for other in COLORSPACES.values():
            if other is RGB or other is space:
                continue
            for ch, v in zip(other.channels, other.from_rgb(*rgb)):
                if v is not None:
                    self._values[ch.id] = v

        log.debug("%s %s -> %s", space.name, vals, self.to_hex())

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        rng = rng if rng is not None else np.random.default_rng()
        self.from_colorspace(RGB, rng.random(3).tolist())

    def invert(self) -> None:
        r, g, b = self.triple(RGB)
        self.from_colorspace(RGB, (1 - r, 1 - g, 1 - b))

    def complement(self) -> None:
        # per-channel half turn in RGB, not a hue rotation
        r, g, b = self.triple(RGB)
        self.from_colorspace(RGB, ((r + 0.5) % 1, (g + 0.5) % 1, (b + 0.5) % 1))

    def parse_css_color(self, text: str) -> bool:
        """Set the color from CSS text. Returns False and changes nothing on junk."""
        rgb = parse_css_rgb(text)
        if rgb is None:
            return False
        self.from_colorspace(RGB, rgb)
        return True

    # -- utilities ---------------------------------------------------------

    def clone(self) -> "ColorValue":
        other = ColorValue()
        other._values = dict(self._values)
        return other

    def assume(self, overrides: Mapping[ChannelLike, float]) -> "ColorValue":
        """A copy of this color with ``overrides`` applied through ``set``.

        Entries are applied in mapping order. Mixing channels from different
        colorspaces gives an order-dependent result; callers should keep all
        overrides within one colorspace.
        """
        other = self.clone()
        for channel, value in overrides.items():
            other.set(channel, value)
        return other


__all__ = ["ColorValue"]
