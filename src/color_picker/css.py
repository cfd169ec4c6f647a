from __future__ import annotations

import logging
from typing import Optional

from coloraide import Color

from .conversions import Triple

log = logging.getLogger(__name__)

# A browser resolves every color to 8-bit sRGB; clip rather than gamut-map.
FIT_HEX = {"method": "clip"}


def parse_css_rgb(text: str) -> Optional[Triple]:
    """Parse any CSS color ColorAide understands into an 8-bit-quantized RGB triple.

    Returns None for junk. ``transparent`` counts as junk: it carries no color.
    Alpha is dropped.
    """
    if not isinstance(text, str):
        return None
    s = text.strip()
    if not s or s.lower() == "transparent":
        return None
    try:
        parsed = Color(s)
    except ValueError:
        log.debug("rejected color text %r", text)
        return None

    hex_str = parsed.convert("srgb").to_string(hex=True, alpha=False, fit=FIT_HEX)
    r, g, b = (int(hex_str[i : i + 2], 16) / 255 for i in (1, 3, 5))
    return r, g, b


__all__ = ["parse_css_rgb"]
