# common/colors.py
from __future__ import annotations
from typing import Dict, Optional, Tuple
import colorsys
import zlib

# Leagues of the built-in catalog get hand-picked pin colors
LEAGUE_COLORS: Dict[str, str] = {
    "Southwest Basketball League": "#E8702A",
    "High School Division":        "#1F77B4",
    "New Mexico Pro League":       "#D62728",
    "College Junior Varsity":      "#9467BD",
    "Southeast New Mexico League": "#2CA02C",
}

FALLBACK_COLOR = "#777777"


# -------------------- Simple color math --------------------
def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def lighten_or_darken(hexs: str, factor: float = 0.15) -> str:
    """Positive factor lightens, negative darkens."""
    r, g, b = _hex_to_rgb(hexs)
    if factor >= 0:
        r += (1 - r) * factor; g += (1 - g) * factor; b += (1 - b) * factor
    else:
        r *= (1 + factor); g *= (1 + factor); b *= (1 + factor)
    return _rgb_to_hex(r, g, b)


def _stable_hue(name: str) -> float:
    # built-in hash() is salted per process; crc32 keeps colors stable across reruns
    return (zlib.crc32(name.encode("utf-8")) % 360) / 360.0


# -------------------- Public API --------------------
def league_color(league: Optional[str]) -> str:
    """
    Pin color for a league.
    Known leagues use the fixed palette; anything else gets a deterministic
    hue from its name. Empty names use a neutral grey.
    """
    if not league:
        return FALLBACK_COLOR
    if league in LEAGUE_COLORS:
        return LEAGUE_COLORS[league]
    r, g, b = colorsys.hsv_to_rgb(_stable_hue(league), 0.65, 0.95)
    return _rgb_to_hex(r, g, b)


def is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if a swatch needs a border."""
    try:
        r, g, b = _hex_to_rgb(hexs)
    except (ValueError, IndexError):
        return False
    y = 0.2126 * r + 0.7152 * g + 0.0722 * b
    return y >= thr
