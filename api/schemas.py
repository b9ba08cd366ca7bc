"""
Summary API - Pydantic Schemas

PURE DATA MODELS - NO LOGIC
Only defines the JSON contract of POST /api/generate-summary.
"""

from typing import Optional

from pydantic import BaseModel, Field

from prompting import SummaryFormat, SummaryTone


class GenerateSummaryRequest(BaseModel):
    """Request body sent by the summarizer form."""

    user_input: str = Field(..., alias="userInput", description="Text to summarize, with instructions")
    format: Optional[SummaryFormat] = Field(default=SummaryFormat.PARAGRAPH)
    tone: Optional[SummaryTone] = Field(default=SummaryTone.PROFESSIONAL)

    class Config:
        populate_by_name = True


class GenerateSummaryResponse(BaseModel):
    """Success envelope."""

    ai_response: str = Field(..., alias="aiResponse", min_length=1)

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Failure envelope, returned with status 500."""

    error: str
    details: str
