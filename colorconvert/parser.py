"""
Color text parsing.
Supported: named, transparent, hex 3/4/6/8, rgb/rgba, hsl/hsla, hwb/hwba,
cmyk/cmyka, lab, lch, oklab, oklch, ncol/ncola. Function arguments may be
comma-separated (alpha last) or space-separated with an optional "/ alpha".
"""

import logging
import math
import re
from typing import Callable, Dict, List, Optional, Tuple

from . import named
from .errors import ColorParseError
from .models import RGBA, channel, clamp, wrap_hue
from .spaces import CMYK, HSL, HWB, LAB, LCH, NCOL, OKLAB, OKLCH

logger = logging.getLogger(__name__)

# Regular expression patterns
num = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?"

NUM_RE = re.compile(f"^{num}$")
PERC_RE = re.compile(f"^({num})%?$")
ANGLE_RE = re.compile(f"^({num})(deg|grad|rad|turn)?$")
HEX_RE = re.compile(r"^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
FUNC_RE = re.compile(r"^([a-z]+)\s*\(([^()]*)\)$")
NAME_RE = re.compile(r"^[a-z]+$")
NCOL_HUE_RE = re.compile(f"^([rygcbm])({num})%?$")

# Magnitude that 100% stands for in a/b/C components
LAB_AB_RANGE = 125.0
LCH_C_RANGE = 150.0
OKLAB_AB_RANGE = 0.4


class _Malformed(Exception):
    """Internal signal that a component or argument list does not parse."""


# Component parsers -----------------------------------------------

def _finite(v: float) -> float:
    """Reject inf and nan."""
    # 1e999 matches the grammar but overflows to inf
    if not math.isfinite(v):
        raise _Malformed(f"not a finite number: {v!r}")
    return v


def _number(tok: str) -> float:
    """Bare number token."""
    if not NUM_RE.match(tok):
        raise _Malformed(f"not a number: {tok!r}")
    return _finite(float(tok))


def _percent(tok: str) -> float:
    """Percentage component, with or without the % sign, clamped to [0, 100]."""
    m = PERC_RE.match(tok)
    if not m:
        raise _Malformed(f"not a percentage: {tok!r}")
    return clamp(_finite(float(m.group(1))), 0, 100)


def _scaled(tok: str, full: float) -> float:
    """Plain number, or a percentage of full."""
    if tok.endswith("%"):
        return _number(tok[:-1]) / 100 * full
    return _number(tok)


def _hue(tok: str) -> float:
    """Angle with an optional unit, wrapped to [0, 360)."""
    m = ANGLE_RE.match(tok)
    if not m:
        raise _Malformed(f"not an angle: {tok!r}")
    v = _finite(float(m.group(1)))
    unit = m.group(2) or "deg"
    if unit == "grad":
        v = v * 9 / 10
    elif unit == "rad":
        v = math.degrees(v)
    elif unit == "turn":
        v = v * 360
    return wrap_hue(_finite(v))


def _alpha(tok: Optional[str]) -> float:
    """Alpha as a number or percentage, clamped to [0, 1]; 1 when absent."""
    if tok is None:
        return 1.0
    return clamp(_scaled(tok, 1.0), 0, 1)


def _rgb_channel(tok: str) -> int:
    """Integer channel from a number or a percentage of 255."""
    return channel(_scaled(tok, 255))


# Argument lists --------------------------------------------------

def _arguments(body: str, count: int) -> Tuple[List[str], Optional[str]]:
    """Split a function body into exactly count components plus optional alpha."""
    body = body.strip()
    if not body:
        raise _Malformed("empty argument list")

    if "," in body:
        if "/" in body:
            raise _Malformed("mixed comma and slash separators")
        parts = [p.strip() for p in body.split(",")]
        if any(not p or len(p.split()) != 1 for p in parts):
            raise _Malformed("empty or space-separated component in comma list")
        if len(parts) == count:
            return parts, None
        if len(parts) == count + 1:
            return parts[:count], parts[count]
        raise _Malformed(f"expected {count} components, got {len(parts)}")

    main, slash, alpha = body.partition("/")
    parts = main.split()
    if len(parts) != count:
        raise _Malformed(f"expected {count} components, got {len(parts)}")
    if not slash:
        return parts, None
    alpha_parts = alpha.split()
    if len(alpha_parts) != 1:
        raise _Malformed("alpha after '/' must be a single value")
    return parts, alpha_parts[0]


# Per-function parsers --------------------------------------------

def _parse_rgb(body: str) -> RGBA:
    """rgb() and rgba()."""
    (r, g, b), a = _arguments(body, 3)
    return RGBA(r=_rgb_channel(r), g=_rgb_channel(g), b=_rgb_channel(b), a=_alpha(a))


def _parse_hsl(body: str) -> RGBA:
    """hsl() and hsla()."""
    (h, s, l), a = _arguments(body, 3)
    return HSL(h=_hue(h), s=_percent(s), l=_percent(l), alpha=_alpha(a)).to_rgba()


def _parse_hwb(body: str) -> RGBA:
    """hwb() and hwba()."""
    (h, w, bl), a = _arguments(body, 3)
    return HWB(h=_hue(h), w=_percent(w), b=_percent(bl), alpha=_alpha(a)).to_rgba()


def _parse_cmyk(body: str) -> RGBA:
    """cmyk() and cmyka()."""
    (c, m, y, k), a = _arguments(body, 4)
    return CMYK(c=_percent(c), m=_percent(m), y=_percent(y), k=_percent(k), alpha=_alpha(a)).to_rgba()


def _parse_lab(body: str) -> RGBA:
    """CIE lab(), L clamped to [0, 100]."""
    (l, a, b), alpha = _arguments(body, 3)
    return LAB(
        l=clamp(_scaled(l, 100), 0, 100),
        a=_scaled(a, LAB_AB_RANGE),
        b=_scaled(b, LAB_AB_RANGE),
        alpha=_alpha(alpha),
    ).to_rgba()


def _parse_lch(body: str) -> RGBA:
    """CIE lch(), negative chroma clamped to 0."""
    (l, c, h), alpha = _arguments(body, 3)
    return LCH(
        l=clamp(_scaled(l, 100), 0, 100),
        c=max(_scaled(c, LCH_C_RANGE), 0),
        h=_hue(h),
        alpha=_alpha(alpha),
    ).to_rgba()


def _parse_oklab(body: str) -> RGBA:
    """oklab(), L clamped to [0, 1]."""
    (l, a, b), alpha = _arguments(body, 3)
    return OKLAB(
        l=clamp(_scaled(l, 1), 0, 1),
        a=_scaled(a, OKLAB_AB_RANGE),
        b=_scaled(b, OKLAB_AB_RANGE),
        alpha=_alpha(alpha),
    ).to_rgba()


def _parse_oklch(body: str) -> RGBA:
    """oklch()."""
    (l, c, h), alpha = _arguments(body, 3)
    return OKLCH(
        l=clamp(_scaled(l, 1), 0, 1),
        c=max(_scaled(c, OKLAB_AB_RANGE), 0),
        h=_hue(h),
        alpha=_alpha(alpha),
    ).to_rgba()


def _parse_ncol(body: str) -> RGBA:
    """ncol() and ncola(); the hue token is a sector letter and a position."""
    (hue, w, bl), a = _arguments(body, 3)
    m = NCOL_HUE_RE.match(hue)
    if not m:
        raise _Malformed(f"not an NCol hue: {hue!r}")
    return NCOL(
        hue=m.group(1).upper(),
        percent=_percent(m.group(2)),
        w=_percent(w),
        b=_percent(bl),
        alpha=_alpha(a),
    ).to_rgba()


FUNCTIONS: Dict[str, Callable[[str], RGBA]] = {
    "rgb": _parse_rgb,
    "rgba": _parse_rgb,
    "hsl": _parse_hsl,
    "hsla": _parse_hsl,
    "hwb": _parse_hwb,
    "hwba": _parse_hwb,
    "cmyk": _parse_cmyk,
    "cmyka": _parse_cmyk,
    "lab": _parse_lab,
    "lch": _parse_lch,
    "oklab": _parse_oklab,
    "oklch": _parse_oklch,
    "ncol": _parse_ncol,
    "ncola": _parse_ncol,
}


# HEX -------------------------------------------------------------

def parse_hex(s: str) -> Optional[RGBA]:
    """Parse hex color string to RGBA."""
    m = HEX_RE.match(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) in (3, 4):
        h = "".join(ch + ch for ch in h)
    a = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return RGBA(r=int(h[0:2], 16), g=int(h[2:4], 16), b=int(h[4:6], 16), a=a)


# Top-level parse to RGBA -----------------------------------------

def _sniff(s: str) -> RGBA:
    """Dispatch on the shape of the text: hex, function call or keyword."""
    if "\n" in s or "\r" in s:
        raise _Malformed("multi-line input")

    if s.startswith("#"):
        rgba = parse_hex(s)
        if rgba is None:
            raise _Malformed("bad hex notation")
        return rgba

    m = FUNC_RE.match(s)
    if m:
        handler = FUNCTIONS.get(m.group(1))
        if handler is None:
            raise _Malformed(f"unknown function {m.group(1)!r}")
        return handler(m.group(2))

    if NAME_RE.match(s):
        hex_val = named.lookup(s)
        if hex_val is None:
            raise _Malformed("unknown color name")
        return parse_hex(hex_val)

    raise _Malformed("no known notation")


def parse(text: str) -> RGBA:
    """Parse any supported color string to RGBA, raising ColorParseError."""
    s = text.strip().lower() if isinstance(text, str) else ""
    try:
        return _sniff(s)
    except _Malformed as exc:
        logger.debug("[Parser] Rejected %r: %s", text, exc)
        raise ColorParseError(text) from None
