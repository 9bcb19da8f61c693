"""The closed set of color notations the converter can emit."""

from enum import Enum
from typing import Tuple

from .errors import InvalidTargetFormatError


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    HWB = "hwb"
    HWBA = "hwba"
    CMYK = "cmyk"
    CMYKA = "cmyka"
    LAB = "lab"
    LCH = "lch"
    OKLAB = "oklab"
    OKLCH = "oklch"
    NCOL = "ncol"
    NCOLA = "ncola"
    NAMED = "named"

    @classmethod
    def coerce(cls, value) -> "ColorFormat":
        """Case-insensitive lookup, raising InvalidTargetFormatError."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidTargetFormatError(str(value), SUPPORTED_FORMATS)

    @property
    def with_alpha(self) -> bool:
        """True for notations that always carry an alpha component."""
        return self in ALPHA_FORMATS


ALPHA_FORMATS = frozenset(
    {ColorFormat.RGBA, ColorFormat.HSLA, ColorFormat.HWBA, ColorFormat.CMYKA, ColorFormat.NCOLA}
)

# named is accepted as a target but sits outside the advertised set
EXTENSION_FORMATS: Tuple[str, ...] = (ColorFormat.NAMED.value,)

SUPPORTED_FORMATS: Tuple[str, ...] = tuple(f.value for f in ColorFormat if f.value not in EXTENSION_FORMATS)
