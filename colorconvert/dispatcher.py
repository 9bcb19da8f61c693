"""
Public parse/convert entry points.

Text is parsed to RGBA, converted to the space the target notation lives in,
and rendered by the formatter. Nothing is cached between calls.
"""

import logging
from typing import Dict, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field

from . import parser
from .config import DEFAULT_PRECISION, Precision
from .errors import NamedColorNotFoundError
from .formats import ColorFormat
from .formatter import format_value
from .models import RGBA
from .spaces import CMYK, HSL, HWB, LAB, LCH, NCOL, OKLAB, OKLCH, ColorSpaceValue, SpaceValue

logger = logging.getLogger(__name__)

# Formats rendered straight from RGBA have no entry
SPACE_FOR_FORMAT: Dict[ColorFormat, Type[SpaceValue]] = {
    ColorFormat.HSL: HSL,
    ColorFormat.HSLA: HSL,
    ColorFormat.HWB: HWB,
    ColorFormat.HWBA: HWB,
    ColorFormat.CMYK: CMYK,
    ColorFormat.CMYKA: CMYK,
    ColorFormat.LAB: LAB,
    ColorFormat.LCH: LCH,
    ColorFormat.OKLAB: OKLAB,
    ColorFormat.OKLCH: OKLCH,
    ColorFormat.NCOL: NCOL,
    ColorFormat.NCOLA: NCOL,
}


class ParsedColor(BaseModel):
    """A parsed color with every notation derived from it."""

    model_config = ConfigDict(frozen=True)

    input: str = Field(..., description="The color text as given")
    rgba: RGBA
    hex: str
    rgb: str
    hsl: str
    hwb: str
    cmyk: str
    lab: str
    lch: str
    oklab: str
    oklch: str
    ncol: str
    name: Optional[str] = Field(default=None, description="CSS keyword, when one matches exactly")


def to_space(rgba: RGBA, fmt: ColorFormat) -> Union[RGBA, ColorSpaceValue]:
    """Convert a canonical color into the space the target notation needs."""
    space = SPACE_FOR_FORMAT.get(fmt)
    if space is None:
        return rgba
    return space.from_rgba(rgba)


def parse_color(text: str) -> RGBA:
    """Parse color text to canonical RGBA. Raises ColorParseError."""
    return parser.parse(text)


def convert_color(
    text: str,
    target_format: Union[str, ColorFormat],
    precision: Precision = DEFAULT_PRECISION,
) -> str:
    """
    Convert color text to the notation named by target_format.

    Raises InvalidTargetFormatError for an unknown target before touching the
    input, and ColorParseError when the input cannot be parsed.
    """
    fmt = ColorFormat.coerce(target_format)
    rgba = parser.parse(text)
    result = format_value(to_space(rgba, fmt), fmt, precision)
    logger.debug("[Convert] %r -> %s: %s", text, fmt.value, result)
    return result


def describe_color(text: str, precision: Precision = DEFAULT_PRECISION) -> ParsedColor:
    """Parse color text and render it in every notation."""
    rgba = parser.parse(text)
    with_alpha = not rgba.opaque

    def render(opaque_fmt: ColorFormat, alpha_fmt: ColorFormat) -> str:
        fmt = alpha_fmt if with_alpha else opaque_fmt
        return format_value(to_space(rgba, fmt), fmt, precision)

    try:
        name = format_value(rgba, ColorFormat.NAMED, precision)
    except NamedColorNotFoundError:
        name = None

    return ParsedColor(
        input=text,
        rgba=rgba,
        hex=format_value(rgba, ColorFormat.HEX, precision),
        rgb=render(ColorFormat.RGB, ColorFormat.RGBA),
        hsl=render(ColorFormat.HSL, ColorFormat.HSLA),
        hwb=render(ColorFormat.HWB, ColorFormat.HWBA),
        cmyk=render(ColorFormat.CMYK, ColorFormat.CMYKA),
        lab=render(ColorFormat.LAB, ColorFormat.LAB),
        lch=render(ColorFormat.LCH, ColorFormat.LCH),
        oklab=render(ColorFormat.OKLAB, ColorFormat.OKLAB),
        oklch=render(ColorFormat.OKLCH, ColorFormat.OKLCH),
        ncol=render(ColorFormat.NCOL, ColorFormat.NCOLA),
        name=name,
    )
