from pydantic import BaseModel, Field
from typing import List

from colorconvert.formats import EXTENSION_FORMATS, SUPPORTED_FORMATS

TARGET_DESCRIPTION = (
    "The target color code format to convert to, one of: "
    + ", ".join(SUPPORTED_FORMATS)
    + ". The extension target "
    + ", ".join(EXTENSION_FORMATS)
    + " returns the CSS keyword of an exact match"
)


class ColorConvertRequest(BaseModel):
    code: str = Field(..., description="The color code to convert")
    target: str = Field(..., description=TARGET_DESCRIPTION)


class ColorParseRequest(BaseModel):
    code: str = Field(..., description="The color code to parse")


class ColorBatchConvertRequest(BaseModel):
    codes: List[str] = Field(..., description="Color codes to convert, one result per code")
    target: str = Field(..., description=TARGET_DESCRIPTION)
