from typing import List, Optional

from .base import ModelBackend
from .types import ModelRequest, ModelResponse


class StubModelBackend(ModelBackend):
    """
    Deterministic fake model for testing and CI.

    Returns a fixed reply (or raises a fixed error) and records every
    request it receives.
    """

    def __init__(
        self,
        response: Optional[str] = "This is a stubbed summary.",
        error: Optional[Exception] = None,
    ):
        self.response = response
        self.error = error
        self.requests: List[ModelRequest] = []

    async def run(self, request: ModelRequest) -> ModelResponse:
        self.requests.append(request)

        if self.error is not None:
            raise self.error

        return ModelResponse(
            response=self.response,
            metadata={"backend": "stub"},
        )
