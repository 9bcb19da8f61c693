"""
Rendering of colors to text.

Output is fixed-point and locale independent, so the same color and
precision always produce byte-identical strings.
"""

from typing import Union

from . import named
from .config import DEFAULT_PRECISION, Precision
from .errors import NamedColorNotFoundError
from .formats import ColorFormat
from .models import RGBA
from .spaces import CMYK, HSL, HWB, LAB, LCH, NCOL, OKLAB, OKLCH, ColorSpaceValue


# Number helpers --------------------------------------------------

def fixed(x: float, decimals: int) -> str:
    """Fixed-point string; negative zero is printed as zero."""
    v = round(x, decimals)
    if v == 0:
        v = 0.0
    return f"{v:.{decimals}f}"


def hue(x: float, decimals: int) -> str:
    """Hue string in [0, 360); a value that rounds up to 360 is reported as 0."""
    v = round(x, decimals)
    if v >= 360 or v == 0:
        v = 0.0
    return f"{v:.{decimals}f}"


def percent(x: float, decimals: int) -> str:
    """Fixed-point string with a trailing percent sign."""
    return fixed(x, decimals) + "%"


# Per-notation renderers ------------------------------------------

def rgba_to_hex(rgba: RGBA) -> str:
    """Uppercase #RRGGBB, or #RRGGBBAA when alpha rounds below a full byte."""
    base = f"#{rgba.r:02X}{rgba.g:02X}{rgba.b:02X}"
    alpha_byte = int(round(rgba.a * 255))
    if alpha_byte >= 255:
        return base
    return base + f"{alpha_byte:02X}"


def rgba_to_rgb_string(rgba: RGBA, with_alpha: bool = False, p: Precision = DEFAULT_PRECISION) -> str:
    """rgb() or, with alpha, rgba() with integer channels."""
    if with_alpha:
        return f"rgba({rgba.r}, {rgba.g}, {rgba.b}, {fixed(rgba.a, p.alpha)})"
    return f"rgb({rgba.r}, {rgba.g}, {rgba.b})"


def _legacy(name: str, parts: list, alpha: float, with_alpha: bool, p: Precision) -> str:
    """Comma-separated notation, with alpha appended for the *a variants."""
    if with_alpha:
        return f"{name}a({', '.join(parts)}, {fixed(alpha, p.alpha)})"
    return f"{name}({', '.join(parts)})"


def _modern(name: str, parts: list, alpha: float, p: Precision) -> str:
    """Space-separated notation, with "/ alpha" only when alpha prints below 1."""
    shown = fixed(alpha, p.alpha)
    if float(shown) >= 1:
        return f"{name}({' '.join(parts)})"
    return f"{name}({' '.join(parts)} / {shown})"


def hsl_string(v: HSL, with_alpha: bool = False, p: Precision = DEFAULT_PRECISION) -> str:
    """hsl() or hsla() with hue in degrees."""
    parts = [hue(v.h, p.hue), percent(v.s, p.percent), percent(v.l, p.percent)]
    return _legacy("hsl", parts, v.alpha, with_alpha, p)


def hwb_string(v: HWB, with_alpha: bool = False, p: Precision = DEFAULT_PRECISION) -> str:
    """hwb() or hwba()."""
    parts = [hue(v.h, p.hue), percent(v.w, p.percent), percent(v.b, p.percent)]
    return _legacy("hwb", parts, v.alpha, with_alpha, p)


def cmyk_string(v: CMYK, with_alpha: bool = False, p: Precision = DEFAULT_PRECISION) -> str:
    """cmyk() or cmyka(), every component a percentage."""
    parts = [percent(x, p.percent) for x in (v.c, v.m, v.y, v.k)]
    return _legacy("cmyk", parts, v.alpha, with_alpha, p)


def ncol_string(v: NCOL, with_alpha: bool = False, p: Precision = DEFAULT_PRECISION) -> str:
    """ncol() or ncola(), the hue written as sector letter and position."""
    parts = [v.hue + fixed(v.percent, p.percent), percent(v.w, p.percent), percent(v.b, p.percent)]
    return _legacy("ncol", parts, v.alpha, with_alpha, p)


def lab_string(v: LAB, p: Precision = DEFAULT_PRECISION) -> str:
    """CIE lab() in space-separated form."""
    return _modern("lab", [fixed(v.l, p.lab), fixed(v.a, p.lab), fixed(v.b, p.lab)], v.alpha, p)


def lch_string(v: LCH, p: Precision = DEFAULT_PRECISION) -> str:
    """CIE lch(); the hue uses the finer polar precision."""
    return _modern("lch", [fixed(v.l, p.lab), fixed(v.c, p.lab), hue(v.h, p.polar_hue)], v.alpha, p)


def oklab_string(v: OKLAB, p: Precision = DEFAULT_PRECISION) -> str:
    """oklab() in space-separated form."""
    return _modern("oklab", [fixed(v.l, p.oklab), fixed(v.a, p.oklab), fixed(v.b, p.oklab)], v.alpha, p)


def oklch_string(v: OKLCH, p: Precision = DEFAULT_PRECISION) -> str:
    """oklch(); the hue uses the finer polar precision."""
    return _modern("oklch", [fixed(v.l, p.oklab), fixed(v.c, p.oklab), hue(v.h, p.polar_hue)], v.alpha, p)


def rgba_to_named(rgba: RGBA) -> str:
    """CSS keyword with an exact match, raising NamedColorNotFoundError."""
    hex_val = rgba_to_hex(rgba)
    name = named.name_for_hex(hex_val)
    if name is None:
        raise NamedColorNotFoundError(hex_val)
    return name


# Entry point -----------------------------------------------------

def format_value(
    value: Union[RGBA, ColorSpaceValue],
    fmt: ColorFormat,
    precision: Precision = DEFAULT_PRECISION,
) -> str:
    """Render a canonical color or space value in the notation fmt names."""
    p = precision
    alpha = fmt.with_alpha
    if fmt in (ColorFormat.HEX, ColorFormat.RGB, ColorFormat.RGBA, ColorFormat.NAMED):
        if not isinstance(value, RGBA):
            value = value.to_rgba()
        if fmt == ColorFormat.HEX:
            return rgba_to_hex(value)
        if fmt == ColorFormat.NAMED:
            return rgba_to_named(value)
        return rgba_to_rgb_string(value, alpha, p)
    if isinstance(value, HSL):
        return hsl_string(value, alpha, p)
    if isinstance(value, HWB):
        return hwb_string(value, alpha, p)
    if isinstance(value, CMYK):
        return cmyk_string(value, alpha, p)
    if isinstance(value, NCOL):
        return ncol_string(value, alpha, p)
    if isinstance(value, LAB):
        return lab_string(value, p)
    if isinstance(value, LCH):
        return lch_string(value, p)
    if isinstance(value, OKLAB):
        return oklab_string(value, p)
    if isinstance(value, OKLCH):
        return oklch_string(value, p)
    raise TypeError(f"Cannot format {type(value).__name__} as {fmt.value}")
