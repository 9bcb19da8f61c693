"""
Color space models with RGBA as the hub.

Every space is a frozen pydantic model with a ``from_rgba`` classmethod and a
``to_rgba`` method. Converting between two spaces always goes through RGBA.
Components are kept unrounded; rounding for display is the formatter's job.
"""

import math
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .models import RGBA, channel, clamp, wrap_hue


class SpaceValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "SpaceValue":
        raise NotImplementedError

    def to_rgba(self) -> RGBA:
        raise NotImplementedError


# sRGB transfer function ------------------------------------------

def s_to_lin(c: int) -> float:
    """sRGB companding."""
    cs = c / 255
    return cs / 12.92 if cs <= 0.04045 else ((cs + 0.055) / 1.055) ** 2.4


def lin_to_s(l: float) -> int:
    """Linear to sRGB."""
    v = 12.92 * l if l <= 0.0031308 else 1.055 * (l ** (1 / 2.4)) - 0.055
    return channel(v * 255)


def cbrt(x: float) -> float:
    """Real cube root, sign preserved."""
    return math.copysign(abs(x) ** (1 / 3), x)


# Polar helpers shared by LCH and OKLCH ----------------------------

def to_polar(a: float, b: float) -> Tuple[float, float]:
    """Cartesian (a, b) to (chroma, hue in degrees)."""
    c = math.sqrt(a * a + b * b)
    h = wrap_hue(math.degrees(math.atan2(b, a)))
    return c, h


def from_polar(c: float, h: float) -> Tuple[float, float]:
    """(chroma, hue in degrees) to cartesian (a, b)."""
    hr = math.radians(h)
    return c * math.cos(hr), c * math.sin(hr)


# HSL -------------------------------------------------------------

def hue_of(r: float, g: float, b: float) -> float:
    """Hue in degrees of unit RGB; 0 for achromatic colors."""
    max_val = max(r, g, b)
    min_val = min(r, g, b)
    d = max_val - min_val
    if d == 0:
        return 0.0
    if max_val == r:
        h = 60 * (((g - b) / d) % 6)
    elif max_val == g:
        h = 60 * ((b - r) / d + 2)
    else:
        h = 60 * ((r - g) / d + 4)
    return wrap_hue(h)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """HSL to unit RGB. h in deg, s and l in [0,1]."""
    h = wrap_hue(h)
    c = (1 - abs(2 * l - 1)) * s
    hp = h / 60
    x = c * (1 - abs((hp % 2) - 1))

    if hp < 1:
        r1, g1, b1 = c, x, 0.0
    elif hp < 2:
        r1, g1, b1 = x, c, 0.0
    elif hp < 3:
        r1, g1, b1 = 0.0, c, x
    elif hp < 4:
        r1, g1, b1 = 0.0, x, c
    elif hp < 5:
        r1, g1, b1 = x, 0.0, c
    else:
        r1, g1, b1 = c, 0.0, x

    m = l - c / 2
    return r1 + m, g1 + m, b1 + m


class HSL(SpaceValue):
    h: float = Field(ge=0, lt=360)
    s: float = Field(ge=0, le=100)
    l: float = Field(ge=0, le=100)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "HSL":
        R, G, B = rgba.r / 255, rgba.g / 255, rgba.b / 255
        max_val = max(R, G, B)
        min_val = min(R, G, B)
        d = max_val - min_val
        l = (max_val + min_val) / 2
        s = 0 if d == 0 else d / (1 - abs(2 * l - 1))
        return cls(h=hue_of(R, G, B), s=clamp(s * 100, 0, 100), l=l * 100, alpha=rgba.a)

    def to_rgba(self) -> RGBA:
        r, g, b = hsl_to_unit_rgb(self.h, self.s / 100, self.l / 100)
        return RGBA(r=channel(r * 255), g=channel(g * 255), b=channel(b * 255), a=self.alpha)


# HWB -------------------------------------------------------------

class HWB(SpaceValue):
    h: float = Field(ge=0, lt=360)
    w: float = Field(ge=0, le=100)
    b: float = Field(ge=0, le=100)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "HWB":
        R, G, B = rgba.r / 255, rgba.g / 255, rgba.b / 255
        w = min(R, G, B)
        bl = 1 - max(R, G, B)
        return cls(h=hue_of(R, G, B), w=w * 100, b=bl * 100, alpha=rgba.a)

    def to_rgba(self) -> RGBA:
        w, bl = self.w / 100, self.b / 100
        sum_wb = w + bl
        if sum_wb >= 1:
            # No hue left, only a gray between white and black
            gray = channel(w / sum_wb * 255)
            return RGBA(r=gray, g=gray, b=gray, a=self.alpha)

        # CSS: convert H to RGB as if HSL with s=1 l=0.5, then mix white/black
        rr, gg, bb = hsl_to_unit_rgb(self.h, 1, 0.5)
        scale = 1 - w - bl
        return RGBA(
            r=channel((rr * scale + w) * 255),
            g=channel((gg * scale + w) * 255),
            b=channel((bb * scale + w) * 255),
            a=self.alpha,
        )


# CMYK ------------------------------------------------------------

class CMYK(SpaceValue):
    c: float = Field(ge=0, le=100)
    m: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    k: float = Field(ge=0, le=100)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "CMYK":
        R, G, B = rgba.r / 255, rgba.g / 255, rgba.b / 255
        k = 1 - max(R, G, B)
        if k >= 1:
            return cls(c=0, m=0, y=0, k=100, alpha=rgba.a)
        denom = 1 - k
        return cls(
            c=clamp((1 - R - k) / denom * 100, 0, 100),
            m=clamp((1 - G - k) / denom * 100, 0, 100),
            y=clamp((1 - B - k) / denom * 100, 0, 100),
            k=k * 100,
            alpha=rgba.a,
        )

    def to_rgba(self) -> RGBA:
        k = 1 - self.k / 100
        return RGBA(
            r=channel(255 * (1 - self.c / 100) * k),
            g=channel(255 * (1 - self.m / 100) * k),
            b=channel(255 * (1 - self.y / 100) * k),
            a=self.alpha,
        )


# LAB/LCH (CIELAB, D65) -------------------------------------------

# D65 reference white
XR, YR, ZR = 0.95047, 1.0, 1.08883

DELTA = 6 / 29


def srgb_to_xyz(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """sRGB D65 to XYZ."""
    R, G, B = s_to_lin(r), s_to_lin(g), s_to_lin(b)
    x = R * 0.41239079926595 + G * 0.35758433938387 + B * 0.18048078840183
    y = R * 0.21263900587151 + G * 0.71516867876775 + B * 0.07219231536073
    z = R * 0.01933081871559 + G * 0.11919477979462 + B * 0.95053215224966
    return x, y, z


def xyz_to_srgb(x: float, y: float, z: float) -> Tuple[int, int, int]:
    """XYZ to sRGB."""
    R = x * 3.24096994190452 + y * -1.53738317757009 + z * -0.498610760293
    G = x * -0.96924363628087 + y * 1.87596750150772 + z * 0.04155505740718
    B = x * 0.05563007969699 + y * -0.20397695888897 + z * 1.05697151424288
    return lin_to_s(R), lin_to_s(G), lin_to_s(B)


def f_lab(t: float) -> float:
    """LAB forward transform."""
    if t > DELTA ** 3:
        return t ** (1 / 3)
    return t / (3 * DELTA ** 2) + 4 / 29


def f_inv_lab(t: float) -> float:
    """LAB inverse transform."""
    if t > DELTA:
        return t * t * t
    return 3 * DELTA ** 2 * (t - 4 / 29)


class LAB(SpaceValue):
    l: float = Field(ge=0, le=100)
    a: float
    b: float

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "LAB":
        x, y, z = srgb_to_xyz(rgba.r, rgba.g, rgba.b)
        fx, fy, fz = f_lab(x / XR), f_lab(y / YR), f_lab(z / ZR)
        return cls(
            l=clamp(116 * fy - 16, 0, 100),
            a=500 * (fx - fy),
            b=200 * (fy - fz),
            alpha=rgba.a,
        )

    def to_rgba(self) -> RGBA:
        fy = (self.l + 16) / 116
        fx = fy + self.a / 500
        fz = fy - self.b / 200
        r, g, b = xyz_to_srgb(f_inv_lab(fx) * XR, f_inv_lab(fy) * YR, f_inv_lab(fz) * ZR)
        return RGBA(r=r, g=g, b=b, a=self.alpha)


class LCH(SpaceValue):
    l: float = Field(ge=0, le=100)
    c: float = Field(ge=0)
    h: float = Field(ge=0, lt=360)

    @classmethod
    def from_lab(cls, lab: LAB) -> "LCH":
        """Polar form of a LAB value."""
        c, h = to_polar(lab.a, lab.b)
        return cls(l=lab.l, c=c, h=h, alpha=lab.alpha)

    def to_lab(self) -> LAB:
        """Cartesian LAB."""
        a, b = from_polar(self.c, self.h)
        return LAB(l=self.l, a=a, b=b, alpha=self.alpha)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "LCH":
        return cls.from_lab(LAB.from_rgba(rgba))

    def to_rgba(self) -> RGBA:
        return self.to_lab().to_rgba()


# OKLab/OKLCH -----------------------------------------------------

class OKLAB(SpaceValue):
    l: float = Field(ge=0, le=1)
    a: float
    b: float

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "OKLAB":
        # sRGB -> linear
        R, G, B = s_to_lin(rgba.r), s_to_lin(rgba.g), s_to_lin(rgba.b)

        l = cbrt(0.4122214708 * R + 0.5363325363 * G + 0.0514459929 * B)
        m = cbrt(0.2119034982 * R + 0.6806995451 * G + 0.1073969566 * B)
        s = cbrt(0.0883024619 * R + 0.2817188376 * G + 0.6299787005 * B)

        return cls(
            l=clamp(0.2104542553 * l + 0.793617785 * m - 0.0040720468 * s, 0, 1),
            a=1.9779984951 * l - 2.428592205 * m + 0.4505937099 * s,
            b=0.0259040371 * l + 0.7827717662 * m - 0.808675766 * s,
            alpha=rgba.a,
        )

    def to_rgba(self) -> RGBA:
        # OKLab -> OKLMS -> linear sRGB -> compand
        L, a, b = self.l, self.a, self.b
        l_ = L + 0.3963377774 * a + 0.2158037573 * b
        m_ = L - 0.1055613458 * a - 0.0638541728 * b
        s_ = L - 0.0894841775 * a - 1.291485548 * b

        l = l_ * l_ * l_
        m = m_ * m_ * m_
        s = s_ * s_ * s_

        R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
        G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
        B = -0.0041960863 * l - 0.7034186147 * m + 1.707614701 * s

        return RGBA(r=lin_to_s(R), g=lin_to_s(G), b=lin_to_s(B), a=self.alpha)


class OKLCH(SpaceValue):
    l: float = Field(ge=0, le=1)
    c: float = Field(ge=0)
    h: float = Field(ge=0, lt=360)

    @classmethod
    def from_oklab(cls, lab: OKLAB) -> "OKLCH":
        """Polar form of an OKLAB value."""
        c, h = to_polar(lab.a, lab.b)
        return cls(l=lab.l, c=c, h=h, alpha=lab.alpha)

    def to_oklab(self) -> OKLAB:
        a, b = from_polar(self.c, self.h)
        return OKLAB(l=self.l, a=a, b=b, alpha=self.alpha)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "OKLCH":
        return cls.from_oklab(OKLAB.from_rgba(rgba))

    def to_rgba(self) -> RGBA:
        return self.to_oklab().to_rgba()


# NCol ------------------------------------------------------------

# Sector letters in hue order, 60 degrees each, red at 0
NCOL_SECTORS = "RYGCBM"


class NCOL(SpaceValue):
    hue: str = Field(pattern="^[RYGCBM]$")
    percent: float = Field(ge=0, le=100)
    w: float = Field(ge=0, le=100)
    b: float = Field(ge=0, le=100)

    @property
    def degrees(self) -> float:
        """Hue angle in degrees for the sector letter and position."""
        return wrap_hue(NCOL_SECTORS.index(self.hue) * 60 + self.percent * 0.6)

    @classmethod
    def from_hwb(cls, hwb: HWB) -> "NCOL":
        """Sector letter and position from the HWB hue."""
        sector = min(int(hwb.h // 60), 5)
        percent = (hwb.h - sector * 60) / 60 * 100
        return cls(
            hue=NCOL_SECTORS[sector],
            percent=clamp(percent, 0, 100),
            w=hwb.w,
            b=hwb.b,
            alpha=hwb.alpha,
        )

    def to_hwb(self) -> HWB:
        return HWB(h=self.degrees, w=self.w, b=self.b, alpha=self.alpha)

    @classmethod
    def from_rgba(cls, rgba: RGBA) -> "NCOL":
        return cls.from_hwb(HWB.from_rgba(rgba))

    def to_rgba(self) -> RGBA:
        return self.to_hwb().to_rgba()


ColorSpaceValue = Union[HSL, HWB, CMYK, LAB, LCH, OKLAB, OKLCH, NCOL]
