from __future__ import annotations

import logging
import math
import threading
from typing import Any, Dict, Iterable, List, Literal, Optional, Tuple

import numpy as np

from .channels import Channel, ChannelLike, get_channel
from .color import ColorValue
from .colorspaces import COLORSPACES, ColorspaceLike

log = logging.getLogger(__name__)

Action = Literal["randomize", "invert", "complement"]
ACTIONS = {"randomize", "invert", "complement"}

Stop = Tuple[float, str]  # (offset in [0,1], "#rrggbb")


def _stops(color: ColorValue, ch: Channel) -> List[Stop]:
    out: List[Stop] = []
    for offset in np.linspace(0.0, 1.0, ch.stops):
        t = float(offset)
        out.append((t, color.assume({ch: t}).to_hex()))
    return out


def percent_label(value: Optional[float]) -> str:
    """Slider readout: percent with at most two decimals, e.g. ``'42.35%'``."""
    pct = math.floor((value or 0.0) * 10000 + 0.5) / 100
    return f"{pct:g}%"


class PickerSession:
    """The current color of one picker, plus what its sliders need to repaint.

    Requests may arrive on several threads; every mutation and every composite
    read holds the session lock so readers never see a half-applied change.
    """

    def __init__(
        self,
        color: Optional[ColorValue] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._color = color if color is not None else ColorValue()
        self._rng = rng if rng is not None else np.random.default_rng()
        self._lock = threading.RLock()

    def snapshot(self) -> ColorValue:
        with self._lock:
            return self._color.clone()

    # ---- input ----

    def drag(self, channel: ChannelLike, fraction: float) -> None:
        """Slider input: clamp to [0, 1] and set the channel."""
        ch = get_channel(channel)
        fraction = float(fraction)
        if not math.isfinite(fraction):
            raise ValueError(f"{ch.id.value} must be finite, got {fraction}")
        fraction = min(1.0, max(0.0, fraction))
        with self._lock:
            self._color.set(ch, fraction)

    def set_colorspace(self, colorspace: ColorspaceLike, values: Iterable[float]) -> None:
        with self._lock:
            self._color.from_colorspace(colorspace, values)

    def apply(self, action: Action) -> None:
        if action not in ACTIONS:
            raise ValueError(f"unknown action '{action}'")
        with self._lock:
            if action == "randomize":
                self._color.randomize(self._rng)
            elif action == "invert":
                self._color.invert()
            else:
                self._color.complement()
            log.debug("%s -> %s", action, self._color.to_hex())

    def parse(self, text: str) -> bool:
        with self._lock:
            return self._color.parse_css_color(text)

    # ---- rendering queries ----

    def gradient_stops(self, channel: ChannelLike) -> List[Stop]:
        """Colors a slider gradient passes through, one per channel stop."""
        ch = get_channel(channel)
        with self._lock:
            base = self._color.clone()
        return _stops(base, ch)

    def rows(self) -> List[Dict[str, Any]]:
        with self._lock:
            base = self._color.clone()
        rows: List[Dict[str, Any]] = []
        for space in COLORSPACES.values():
            for ch in space.channels:
                value = base.get(ch)
                rows.append(
                    {
                        "colorspace": space.id.value,
                        "channel": ch.id.value,
                        "name": ch.name,
                        "value": value,
                        "label": percent_label(value),
                        "stops": _stops(base, ch),
                    }
                )
        return rows

    def state(self) -> Dict[str, Any]:
        with self._lock:
            base = self._color.clone()
            rows = self.rows()
        return {"hex": base.to_hex(), "values": base.as_dict(), "rows": rows}


__all__ = ["ACTIONS", "Action", "PickerSession", "Stop", "percent_label"]
