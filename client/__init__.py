"""
Summarizer client exports.

Form controller and command-line front end for POST /api/generate-summary.
"""

from .controller import (
    FAILURE_MESSAGE,
    Notice,
    SubmissionState,
    SummarizeRequest,
    SummarizerController,
    SummaryRequestError,
)

__all__ = [
    "FAILURE_MESSAGE",
    "Notice",
    "SubmissionState",
    "SummarizeRequest",
    "SummarizerController",
    "SummaryRequestError",
]
