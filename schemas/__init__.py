from .requests import ColorConvertRequest, ColorParseRequest, ColorBatchConvertRequest
from .responses import SuccessResponse, ErrorResponse, BatchItem, BatchConvertResponse

__all__ = [
    "ColorConvertRequest",
    "ColorParseRequest",
    "ColorBatchConvertRequest",
    "SuccessResponse",
    "ErrorResponse",
    "BatchItem",
    "BatchConvertResponse",
]
