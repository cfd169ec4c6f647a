from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Tuple, Union

from .channels import CHANNELS, Channel, ChannelId, ChannelLike, get_channel
from .conversions import (
    Derived,
    Triple,
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
    rgb_to_rgb,
)

ToRGB = Callable[[float, float, float], Triple]
FromRGB = Callable[[float, float, float], Derived]


class ColorspaceId(str, Enum):
    RGB = "rgb"
    HSL = "hsl"
    HSV = "hsv"


@dataclass(frozen=True)
class Colorspace:
    id: ColorspaceId
    name: str
    channels: Tuple[Channel, Channel, Channel]
    to_rgb: ToRGB
    from_rgb: FromRGB

    def __post_init__(self) -> None:
        ids = {ch.id for ch in self.channels}
        if len(self.channels) != 3 or len(ids) != 3:
            raise ValueError(f"{self.name} needs exactly 3 distinct channels")

    def __contains__(self, channel: object) -> bool:
        return channel in self.channels


def _space(cid: ColorspaceId, to_rgb: ToRGB, from_rgb: FromRGB, *chans: ChannelId) -> Colorspace:
    return Colorspace(
        cid, cid.name, tuple(CHANNELS[c] for c in chans), to_rgb, from_rgb  # type: ignore[arg-type]
    )


# Insertion order is the search order of colorspace_containing().
COLORSPACES: Mapping[ColorspaceId, Colorspace] = MappingProxyType(
    {
        ColorspaceId.RGB: _space(
            ColorspaceId.RGB, rgb_to_rgb, rgb_to_rgb,
            ChannelId.RED, ChannelId.GREEN, ChannelId.BLUE,
        ),
        ColorspaceId.HSL: _space(
            ColorspaceId.HSL, hsl_to_rgb, rgb_to_hsl,
            ChannelId.HUE, ChannelId.HSL_SAT, ChannelId.LIGHTNESS,
        ),
        ColorspaceId.HSV: _space(
            ColorspaceId.HSV, hsv_to_rgb, rgb_to_hsv,
            ChannelId.HUE, ChannelId.HSV_SAT, ChannelId.VALUE,
        ),
    }
)

RGB = COLORSPACES[ColorspaceId.RGB]
HSL = COLORSPACES[ColorspaceId.HSL]
HSV = COLORSPACES[ColorspaceId.HSV]

ColorspaceLike = Union[Colorspace, ColorspaceId, str]


def get_colorspace(key: ColorspaceLike) -> Colorspace:
    if isinstance(key, Colorspace):
        return key
    if isinstance(key, ColorspaceId):
        return COLORSPACES[key]
    if isinstance(key, str):
        try:
            return COLORSPACES[ColorspaceId(key.strip().lower())]
        except ValueError:
            pass
    raise ValueError(f"unknown colorspace {key!r}")


def colorspace_containing(channel: ChannelLike) -> Colorspace:
    """First colorspace (RGB, HSL, HSV order) listing ``channel``.

    HUE belongs to both HSL and HSV and therefore resolves to HSL.
    """
    ch = get_channel(channel)
    for space in COLORSPACES.values():
        if ch in space:
            return space
    raise ValueError(f"no colorspace contains channel '{ch.id.value}'")


__all__ = [
    "COLORSPACES",
    "HSL",
    "HSV",
    "RGB",
    "Colorspace",
    "ColorspaceId",
    "ColorspaceLike",
    "colorspace_containing",
    "get_colorspace",
]
