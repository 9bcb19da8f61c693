"""
Error types raised by the color parser and converter.
Clamping out-of-range components is not an error; only unusable input is.
"""

from enum import Enum


class ParseErrorKind(str, Enum):
    UNRECOGNIZED_FORMAT = "unrecognized_format"


class ColorError(ValueError):
    """Base class for every error raised by colorconvert."""


class ColorParseError(ColorError):
    """Input text matches no supported color grammar."""

    def __init__(self, text: str, kind: ParseErrorKind = ParseErrorKind.UNRECOGNIZED_FORMAT):
        self.text = text
        self.kind = kind
        super().__init__(f"Unrecognized color format: {text!r}")


class InvalidTargetFormatError(ColorError):
    """Requested target format is not one of the supported identifiers."""

    def __init__(self, target: str, supported: tuple = ()):
        self.target = target
        self.supported = supported
        message = f"Invalid target color format: {target!r}"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message)


class NamedColorNotFoundError(ColorError):
    """No CSS color keyword matches the color exactly."""

    def __init__(self, hex_value: str):
        self.hex_value = hex_value
        super().__init__(f"No named color matches {hex_value}")
