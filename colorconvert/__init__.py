"""
Color parsing and conversion with RGBA as the hub.

>>> from colorconvert import convert_color, parse_color
>>> parse_color("#ff0000")
RGBA(r=255, g=0, b=0, a=1.0)
>>> convert_color("rgb(255, 0, 0)", "cmyk")
'cmyk(0.0%, 100.0%, 100.0%, 0.0%)'
"""

from .config import DEFAULT_PRECISION, Precision, ServerSettings
from .dispatcher import ParsedColor, convert_color, describe_color, parse_color, to_space
from .errors import (
    ColorError,
    ColorParseError,
    InvalidTargetFormatError,
    NamedColorNotFoundError,
    ParseErrorKind,
)
from .formats import EXTENSION_FORMATS, SUPPORTED_FORMATS, ColorFormat
from .models import RGBA
from .spaces import CMYK, HSL, HWB, LAB, LCH, NCOL, OKLAB, OKLCH, ColorSpaceValue

__all__ = [
    "RGBA",
    "HSL",
    "HWB",
    "CMYK",
    "LAB",
    "LCH",
    "OKLAB",
    "OKLCH",
    "NCOL",
    "ColorSpaceValue",
    "ColorFormat",
    "SUPPORTED_FORMATS",
    "EXTENSION_FORMATS",
    "ParsedColor",
    "parse_color",
    "convert_color",
    "describe_color",
    "to_space",
    "Precision",
    "DEFAULT_PRECISION",
    "ServerSettings",
    "ColorError",
    "ColorParseError",
    "InvalidTargetFormatError",
    "NamedColorNotFoundError",
    "ParseErrorKind",
]
