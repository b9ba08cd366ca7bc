"""
Summary service exports.

Clean interface for the API layer to import summary components.
"""

from .service import (
    SummaryError,
    EmptyModelResponseError,
    generate_summary,
    SAMPLING_TEMPERATURE,
    MAX_OUTPUT_TOKENS,
)

__all__ = [
    "SummaryError",
    "EmptyModelResponseError",
    "generate_summary",
    "SAMPLING_TEMPERATURE",
    "MAX_OUTPUT_TOKENS",
]
