from pydantic import BaseModel, Field
from typing import List


class SuccessResponse(BaseModel):
    success: bool = Field(True, description="Whether the operation succeeded")
    message: str = Field(..., description="The converted color code")


class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Why the request failed")


class BatchItem(BaseModel):
    code: str = Field(..., description="The color code as given")
    success: bool
    message: str = Field(..., description="The converted code, or the error when success is false")


class BatchConvertResponse(BaseModel):
    results: List[BatchItem]
