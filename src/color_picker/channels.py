from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union


class ChannelId(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    HUE = "hue"
    HSL_SAT = "hsl_sat"
    HSV_SAT = "hsv_sat"
    LIGHTNESS = "lightness"
    VALUE = "value"


@dataclass(frozen=True)
class Channel:
    """One scalar component of a colorspace triple.

    ``stops`` is how many gradient keyframes a slider for this channel needs:
    hue runs through the rainbow, lightness goes black → full color → white.
    """

    id: ChannelId
    name: str
    stops: int

    def __post_init__(self) -> None:
        if self.stops < 2:
            raise ValueError(f"channel '{self.id.value}' needs at least 2 stops")


CHANNELS: Mapping[ChannelId, Channel] = MappingProxyType(
    {
        ChannelId.RED: Channel(ChannelId.RED, "red", 2),
        ChannelId.GREEN: Channel(ChannelId.GREEN, "green", 2),
        ChannelId.BLUE: Channel(ChannelId.BLUE, "blue", 2),
        ChannelId.HUE: Channel(ChannelId.HUE, "hue", 7),
        ChannelId.HSL_SAT: Channel(ChannelId.HSL_SAT, "saturation", 2),
        ChannelId.HSV_SAT: Channel(ChannelId.HSV_SAT, "saturation", 2),
        ChannelId.LIGHTNESS: Channel(ChannelId.LIGHTNESS, "lightness", 3),
        ChannelId.VALUE: Channel(ChannelId.VALUE, "value", 2),
    }
)

ChannelLike = Union[Channel, ChannelId, str]


def get_channel(key: ChannelLike) -> Channel:
    """Resolve a Channel, a ChannelId, or its name/value string."""
    if isinstance(key, Channel):
        return key
    if isinstance(key, ChannelId):
        return CHANNELS[key]
    if not isinstance(key, str):
        raise ValueError(f"unknown channel {key!r}")
    k = key.strip()
    for cid in ChannelId:
        if k.lower() == cid.value or k.upper() == cid.name:
            return CHANNELS[cid]
    raise ValueError(f"unknown channel '{key}'")


__all__ = ["CHANNELS", "Channel", "ChannelId", "ChannelLike", "get_channel"]
