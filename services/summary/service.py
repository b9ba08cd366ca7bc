"""
Summary generation service.

Role: user text + options → one model call → summary text.

Rules:
- Single attempt, no retry, no partial results
- Holds no state between calls
- An empty or missing model reply is an error, never a blank summary
"""

import logging
from typing import Optional, Union

from inference import ModelBackend, ModelRequest
from infra.config import InfraConfig
from prompting import SummaryFormat, SummaryTone, build_messages

logger = logging.getLogger(__name__)

SAMPLING_TEMPERATURE = 0.7
MAX_OUTPUT_TOKENS = 2048


class SummaryError(Exception):
    """Base class for summary generation failures."""


class EmptyModelResponseError(SummaryError):
    """The model call succeeded but returned no usable text."""

    def __init__(self, message: str = "No response received from AI"):
        super().__init__(message)


async def generate_summary(
    user_input: str,
    backend: ModelBackend,
    config: InfraConfig,
    format: Optional[Union[SummaryFormat, str]] = None,
    tone: Optional[Union[SummaryTone, str]] = None,
) -> str:
    """
    Generate a summary for user_input.

    Args:
        user_input: Text submitted by the form (forwarded unmodified)
        backend:    Model backend to invoke
        config:     Infrastructure config providing gateway options
        format:     Summary layout (default paragraph)
        tone:       Summary register (default professional)

    Returns:
        Non-empty summary text.

    Raises:
        ConfigurationError: gateway settings missing
        InferenceError: model call failed
        EmptyModelResponseError: model replied without text
    """
    request = ModelRequest(
        messages=build_messages(user_input, format=format, tone=tone),
        temperature=SAMPLING_TEMPERATURE,
        max_tokens=MAX_OUTPUT_TOKENS,
        gateway=config.gateway_options(),
        timeout_s=config.inference_timeout_s,
    )

    result = await backend.run(request)

    if result is None or not result.response:
        raise EmptyModelResponseError()

    logger.info(f"Summary generated: {len(result.response)} chars")
    return result.response
