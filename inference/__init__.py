"""
Model boundary layer for LLM inference.

This package provides a clean abstraction for model invocation,
allowing the summary service to remain agnostic of the underlying backend.

Supported backends:
- StubModelBackend: Deterministic fake model (default for CI/tests)
- WorkersAIModelBackend: Cloudflare Workers AI through an AI Gateway

Example usage:
    from inference import StubModelBackend, ModelRequest, ChatMessage

    backend = StubModelBackend()
    request = ModelRequest(messages=[ChatMessage(role="user", content="Hello")])
    response = await backend.run(request)
"""

from .types import ChatMessage, GatewayOptions, ModelRequest, ModelResponse
from .base import InferenceError, ModelBackend
from .stub import StubModelBackend
from .workers_ai import WorkersAIModelBackend

__all__ = [
    "ChatMessage",
    "GatewayOptions",
    "ModelRequest",
    "ModelResponse",
    "InferenceError",
    "ModelBackend",
    "StubModelBackend",
    "WorkersAIModelBackend",
]
