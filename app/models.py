"""
Pydantic models for the Complexity Analyzer API.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.config import settings
from complexity.models import ComplexityResult


class AnalyzeRequest(BaseModel):
    """Request payload for code analysis."""
    code: str = Field(default="", description="Source code to analyze (may be empty)")

    @field_validator("code")
    @classmethod
    def validate_code(cls, v: str) -> str:
        if len(v) > settings.MAX_CODE_LENGTH:
            raise ValueError(f"Code exceeds {settings.MAX_CODE_LENGTH} characters")
        return v


class AnalyzeResponse(BaseModel):
    """API response wrapper."""
    success: bool = Field(default=True)
    result: ComplexityResult


class ExtractResponse(BaseModel):
    """Text extracted from an uploaded document."""
    success: bool = Field(default=True)
    code: str = Field(..., description="Extracted source text")
    filename: str = Field(..., description="Uploaded file name")
    characters: int = Field(..., ge=0, description="Length of the extracted text")


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = Field(default=False)
    error: str = Field(..., description="Error code")
    message: Optional[str] = Field(default=None, description="Human readable reason")
