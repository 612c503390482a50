# common/colors.py
from __future__ import annotations
from typing import Dict, Iterable, Optional, Tuple
import colorsys
import zlib

from common.constants import zone_sizes

# Row colors for the league table zones
ZONE_COLORS = {
    "title":       "#F4D35E",
    "continental": "#9BD1F9",
    "relegation":  "#F7A1A1",
}
ZONE_LABELS = {
    "title":       "Champion",
    "continental": "Continental places",
    "relegation":  "Relegation",
}
NEUTRAL_COLOR = "#DDDDDD"


# -------------------- Simple color math --------------------
def _hex_to_rgb(hexs: str) -> Tuple[float, float, float]:
    h = hexs.strip().lstrip("#")
    return int(h[0:2], 16) / 255.0, int(h[2:4], 16) / 255.0, int(h[4:6], 16) / 255.0


def _rgb_to_hex(r: float, g: float, b: float) -> str:
    return "#{:02X}{:02X}{:02X}".format(int(r * 255), int(g * 255), int(b * 255))


def _rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    # sRGB -> XYZ -> Lab (D65)
    def f(u): return (u / 12.92) if u <= 0.04045 else (((u + 0.055) / 1.055) ** 2.4)
    r, g, b = f(r), f(g), f(b)
    X = r * 0.4124 + g * 0.3576 + b * 0.1805
    Y = r * 0.2126 + g * 0.7152 + b * 0.0722
    Z = r * 0.0193 + g * 0.1192 + b * 0.9505
    Xn, Yn, Zn = 0.95047, 1.00000, 1.08883

    def gfun(t): return t ** (1 / 3) if t > 0.008856 else (7.787 * t + 16 / 116)
    fx, fy, fz = gfun(X / Xn), gfun(Y / Yn), gfun(Z / Zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def _delta_e76(c1: str, c2: str) -> float:
    L1, a1, b1 = _rgb_to_lab(*_hex_to_rgb(c1))
    L2, a2, b2 = _rgb_to_lab(*_hex_to_rgb(c2))
    return ((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5


def _lighten_or_darken(hexs: str, factor: float = 0.15) -> str:
    """Positive factor lightens, negative darkens."""
    r, g, b = _hex_to_rgb(hexs)
    if factor >= 0:
        r += (1 - r) * factor; g += (1 - g) * factor; b += (1 - b) * factor
    else:
        r *= (1 + factor); g *= (1 + factor); b *= (1 + factor)
    return _rgb_to_hex(r, g, b)


def is_light_color(hexs: str, thr: float = 0.90) -> bool:
    """Perceived luminance threshold (Y) to decide if a dark outline/text is needed."""
    r, g, b = _hex_to_rgb(hexs)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b >= thr


def text_color_for(background: str) -> str:
    """Black text on light backgrounds, white on dark ones."""
    return "#000000" if is_light_color(background, thr=0.5) else "#FFFFFF"


# -------------------- Table zones --------------------
def zone_for_rank(rank: int, n_teams: int, sizes: Optional[Dict[str, int]] = None) -> Optional[str]:
    """
    Return 'title', 'continental', 'relegation' or None for a table position.
    The title spot counts towards the continental places; relegation applies
    only below them, so small leagues never overlap zones.
    """
    sizes = sizes or zone_sizes()
    if rank <= sizes["title"]:
        return "title"
    if rank <= sizes["continental"]:
        return "continental"
    if rank > max(n_teams - sizes["relegation"], sizes["continental"]):
        return "relegation"
    return None


def zone_color(rank: int, n_teams: int, sizes: Optional[Dict[str, int]] = None) -> Optional[str]:
    zone = zone_for_rank(rank, n_teams, sizes)
    return ZONE_COLORS[zone] if zone else None


# -------------------- Team colors for charts --------------------
def team_color(code: str) -> str:
    """Deterministic color per team code (stable across runs)."""
    h = (zlib.crc32(str(code).encode("utf-8")) % 360) / 360.0
    r, g, b = colorsys.hsv_to_rgb(h, 0.65, 0.85)
    return _rgb_to_hex(r, g, b)


def team_colors_map(codes: Iterable[str], delta: float = 12.0) -> Dict[str, str]:
    """
    {code -> hex} for chart bars. A color too close (ΔE76) to one already
    assigned is darkened, then lightened, so neighbouring bars stay apart.
    """
    out: Dict[str, str] = {}
    for code in codes:
        c = team_color(code)
        for factor in (-0.25, 0.35):
            if not any(_delta_e76(c, prev) < delta for prev in out.values()):
                break
            c = _lighten_or_darken(team_color(code), factor)
        out[str(code)] = c
    return out
