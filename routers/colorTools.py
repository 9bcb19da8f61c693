"""
Color conversion endpoints.
Each route is a thin caller of the colorconvert core and doubles as an MCP
tool through its operation_id.
"""

import logging
from typing import List

from fastapi import HTTPException, APIRouter

from colorconvert import (
    SUPPORTED_FORMATS,
    ColorError,
    ColorFormat,
    ParsedColor,
    convert_color,
    describe_color,
)
from schemas.requests import (
    ColorBatchConvertRequest,
    ColorConvertRequest,
    ColorParseRequest,
)
from schemas.responses import BatchConvertResponse, BatchItem, ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert_color_code", response_model=SuccessResponse, responses={400: {"model": ErrorResponse}}, operation_id="convert_color_code", description="Convert a color code to a target format")
async def parse_and_convert(request: ColorConvertRequest):
    """Parse a color and convert it to the target format."""
    try:
        message = convert_color(request.code, request.target)
    except ColorError as exc:
        logger.info("[Color] convert_color_code rejected %r: %s", request.code, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    return SuccessResponse(success=True, message=message)


@router.post("/parse_color_code", response_model=ParsedColor, responses={400: {"model": ErrorResponse}}, operation_id="parse_color_code", description="Parse a color code and list it in every supported format")
async def parse_code(request: ColorParseRequest):
    """Parse a color and describe it in every notation."""
    try:
        return describe_color(request.code)
    except ColorError as exc:
        logger.info("[Color] parse_color_code rejected %r: %s", request.code, exc)
        raise HTTPException(status_code=400, detail=str(exc))


@router.post("/convert_color_codes", response_model=BatchConvertResponse, responses={400: {"model": ErrorResponse}}, operation_id="convert_color_codes", description="Convert many color codes to a target format, skipping the ones that fail")
async def convert_many(request: ColorBatchConvertRequest):
    """Convert each code independently; a bad code fails only its own item."""
    try:
        target = ColorFormat.coerce(request.target)
    except ColorError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    results: List[BatchItem] = []
    for code in request.codes:
        try:
            results.append(BatchItem(code=code, success=True, message=convert_color(code, target)))
        except ColorError as exc:
            results.append(BatchItem(code=code, success=False, message=str(exc)))
    failed = sum(1 for item in results if not item.success)
    if failed:
        logger.info("[Color] convert_color_codes: %d of %d codes failed", failed, len(results))
    return BatchConvertResponse(results=results)


@router.get("/formats", response_model=List[str], operation_id="list_color_formats", description="List the supported target formats. The extension target 'named' is also accepted and returns the CSS keyword of an exact match")
async def list_formats():
    """Supported target format identifiers."""
    return list(SUPPORTED_FORMATS)
