"""
Cloudflare Workers AI backend, routed through an AI Gateway.

Endpoint:
  POST https://gateway.ai.cloudflare.com/v1/{account_id}/{gateway_id}/workers-ai/{model}

Gateway options travel as headers:
  cf-aig-skip-cache  → "true" | "false"
  cf-aig-cache-ttl   → cache lifetime, forwarded verbatim

Reply envelope:
  {"result": {"response": "..."}, "success": true, "errors": [], "messages": []}

Invariants:
- API token never logged
- Single attempt, no retry
- Non-2xx status, transport failure or success=false → InferenceError
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .base import InferenceError, ModelBackend
from .types import ModelRequest, ModelResponse

logger = logging.getLogger(__name__)

GATEWAY_BASE_URL = "https://gateway.ai.cloudflare.com/v1"
DEFAULT_MODEL = "@cf/meta/llama-3.1-70b-instruct"


class WorkersAIModelBackend(ModelBackend):
    """
    Workers AI chat backend.

    The gateway id is taken from each request's GatewayOptions so that a
    single backend instance can serve any configured gateway.
    """

    def __init__(
        self,
        account_id: str,
        api_token: str,
        model_name: str = DEFAULT_MODEL,
        base_url: str = GATEWAY_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Workers AI backend.

        Args:
            account_id: Cloudflare account id owning the gateway
            api_token:  API token with Workers AI permission
            model_name: Workers AI model, e.g. "@cf/meta/llama-3.1-70b-instruct"
            base_url:   Gateway base URL (overridable for tests)
            transport:  Optional httpx transport (tests inject MockTransport)
        """
        self.account_id = account_id
        self.api_token = api_token
        self.model_name = model_name
        self.base_url = base_url.rstrip("/")
        self._transport = transport

    def endpoint(self, gateway_id: str) -> str:
        return f"{self.base_url}/{self.account_id}/{gateway_id}/workers-ai/{self.model_name}"

    def _build_headers(self, request: ModelRequest) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }
        if request.gateway:
            headers["cf-aig-skip-cache"] = "true" if request.gateway.skip_cache else "false"
            headers["cf-aig-cache-ttl"] = str(request.gateway.cache_ttl)
        return headers

    async def run(self, request: ModelRequest) -> ModelResponse:
        if request.gateway is None:
            raise InferenceError("Workers AI requests must be routed through a gateway")

        url = self.endpoint(request.gateway.id)
        logger.debug(f"Workers AI request: model={self.model_name} gateway={request.gateway.id}")

        try:
            async with httpx.AsyncClient(timeout=request.timeout_s, transport=self._transport) as client:
                response = await client.post(
                    url, json=request.inputs(), headers=self._build_headers(request)
                )
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException as e:
            raise InferenceError(f"Workers AI request timed out: {e}") from e

        except httpx.HTTPStatusError as e:
            raise InferenceError(
                f"Workers AI returned HTTP {e.response.status_code}: {_error_text(e.response)}"
            ) from e

        except httpx.HTTPError as e:
            raise InferenceError(f"Workers AI request failed: {e}") from e

        except ValueError as e:
            raise InferenceError(f"Workers AI returned invalid JSON: {e}") from e

        return self._parse_reply(data)

    def _parse_reply(self, data: Any) -> ModelResponse:
        if not isinstance(data, dict):
            raise InferenceError("Workers AI returned an unexpected payload")

        if data.get("success") is False:
            messages = [err.get("message", str(err)) if isinstance(err, dict) else str(err)
                        for err in data.get("errors") or []]
            raise InferenceError(
                "Workers AI reported failure: " + ("; ".join(messages) or "unknown error")
            )

        result = data.get("result") or {}
        text = result.get("response") if isinstance(result, dict) else None

        return ModelResponse(
            response=text,
            metadata={"backend": "workers_ai", "model": self.model_name},
        )


def _error_text(response: httpx.Response) -> str:
    """Best-effort error message from a gateway error reply."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    errors = data.get("errors") if isinstance(data, dict) else None
    if errors:
        return "; ".join(
            err.get("message", str(err)) if isinstance(err, dict) else str(err) for err in errors
        )
    return response.text[:200]
