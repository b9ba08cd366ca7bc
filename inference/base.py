from abc import ABC, abstractmethod
from .types import ModelRequest, ModelResponse


class InferenceError(Exception):
    """Raised when the inference service cannot produce a reply."""


class ModelBackend(ABC):
    """
    Abstract model boundary.
    Summary code must depend ONLY on this interface.
    """

    @abstractmethod
    async def run(self, request: ModelRequest) -> ModelResponse:
        """
        Run one chat completion.

        Raises:
            InferenceError: transport failure or unsuccessful reply
        """
        raise NotImplementedError
