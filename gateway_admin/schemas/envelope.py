"""Uniform result envelope returned by every selector operation."""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

SUCCESS_CODE = 200
ERROR_CODE = 500


class AdminResult(BaseModel):
    code: int = Field(..., description="200 on success, 500 on error")
    status: Literal["success", "error"] = Field(..., description="Outcome of the operation")
    message: str = Field(..., description="Operation label followed by success or exception")
    data: Optional[Any] = Field(None, description="Operation result; always null on error")

    @classmethod
    def success(cls, message: str, data: Any = None) -> AdminResult:
        return cls(code=SUCCESS_CODE, status="success", message=message, data=data)

    @classmethod
    def error(cls, message: str) -> AdminResult:
        return cls(code=ERROR_CODE, status="error", message=message, data=None)