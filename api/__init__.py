"""Summary API - Module Exports"""

from .schemas import ErrorResponse, GenerateSummaryRequest, GenerateSummaryResponse
from .summary import router

__all__ = [
    "GenerateSummaryRequest",
    "GenerateSummaryResponse",
    "ErrorResponse",
    "router",
]
