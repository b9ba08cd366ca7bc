"""
Summary API Handler

Receives text from the summarizer form and relays it to the model.

Flow:
  config check → parse body → build prompt → model call → {"aiResponse": ...}

Error handling:
  Every failure (configuration, parsing, model call, empty reply) is caught
  here, logged once and returned as {"error", "details"} with status 500.
  No retries.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from inference import ModelBackend
from infra.config import InfraConfig, get_config
from services.summary import generate_summary

from .schemas import ErrorResponse, GenerateSummaryRequest, GenerateSummaryResponse

# Setup logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["summary"])

GENERIC_ERROR = "Failed to generate response"


def get_llm_backend(config: InfraConfig) -> ModelBackend:
    """Create the model backend for one request."""
    return config.create_llm_backend()


@router.post(
    "/generate-summary",
    response_model=GenerateSummaryResponse,
    responses={500: {"model": ErrorResponse}},
)
async def generate_summary_endpoint(request: Request):
    """
    Summarize the submitted text.

    Expected payload:
    {
        "userInput": "Please summarize the following text in approximately 50 words:\\n\\n...",
        "format": "bullets",
        "tone": "casual"
    }

    Returns:
        200 {"aiResponse": "<summary>"}
        500 {"error": "Failed to generate response", "details": "<reason>"}
    """
    try:
        config = get_config()
        config.validate()
        backend = get_llm_backend(config)

        body = await request.json()
        payload = GenerateSummaryRequest.model_validate(body)

        logger.info(
            f"Summary requested: {len(payload.user_input)} chars, "
            f"format={payload.format.value if payload.format else 'default'}, "
            f"tone={payload.tone.value if payload.tone else 'default'}"
        )

        summary = await generate_summary(
            payload.user_input,
            backend,
            config,
            format=payload.format,
            tone=payload.tone,
        )

        return JSONResponse(
            content=GenerateSummaryResponse(ai_response=summary).model_dump(by_alias=True)
        )

    except Exception as e:
        logger.error(f"Error in generate-summary: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERIC_ERROR, details=str(e) or "Unknown error").model_dump(),
        )
