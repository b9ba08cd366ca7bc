"""
Infrastructure configuration system.

Environment-based backend selection, read at call time so that every
request sees the current environment. Missing required settings are a
fatal configuration error for every request.
"""

import os
from typing import Any, Callable, List, Optional, Literal
from dataclasses import dataclass, field

from inference import (
    GatewayOptions,
    ModelBackend,
    StubModelBackend,
    WorkersAIModelBackend,
)
from inference.workers_ai import DEFAULT_MODEL


LLMBackendType = Literal["stub", "workers_ai"]

DEFAULT_CACHE_TTL = 3600000


class ConfigurationError(Exception):
    """Raised when required service settings are missing or malformed."""


def _parse_env(name: str, parse: Callable[[str], Any], default: Any, invalid: List[str]) -> Any:
    """Parse an optional numeric variable; record its name in `invalid` on failure."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return parse(raw)
    except ValueError:
        invalid.append(name)
        return default


@dataclass
class InfraConfig:
    """Infrastructure configuration from environment."""

    # LLM
    llm_backend: LLMBackendType
    workers_ai_model: str
    cloudflare_account_id: Optional[str]
    cloudflare_api_token: Optional[str]
    inference_timeout_s: Optional[float]

    # Gateway
    gateway_id: Optional[str]
    gateway_skip_cache: bool
    gateway_cache_ttl: int

    # Names of variables whose values could not be parsed (defaults used instead)
    invalid_settings: List[str] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> "InfraConfig":
        """
        Load configuration from environment variables.

        Defaults:
        - LLM: workers_ai with llama-3.1-70b-instruct
        - Gateway: cache reads enabled, TTL 3600000
        - Timeout: none
        """
        invalid: List[str] = []
        return cls(
            # LLM Configuration
            llm_backend=os.getenv("LLM_BACKEND", "workers_ai").lower(),  # type: ignore
            workers_ai_model=os.getenv("WORKERS_AI_MODEL", DEFAULT_MODEL),
            cloudflare_account_id=os.getenv("CLOUDFLARE_ACCOUNT_ID") or None,
            cloudflare_api_token=os.getenv("CLOUDFLARE_API_TOKEN") or None,
            inference_timeout_s=_parse_env("INFERENCE_TIMEOUT_S", float, None, invalid),

            # Gateway Configuration
            gateway_id=os.getenv("CLOUDFLARE_GATEWAY_ID") or None,
            gateway_skip_cache=os.getenv("AI_GATEWAY_SKIP_CACHE", "false").lower() == "true",
            gateway_cache_ttl=_parse_env("AI_GATEWAY_CACHE_TTL", int, DEFAULT_CACHE_TTL, invalid),

            invalid_settings=invalid,
        )

    def missing_settings(self) -> List[str]:
        """Names of required environment variables that are not set."""
        required = {"CLOUDFLARE_GATEWAY_ID": self.gateway_id}
        if self.llm_backend != "stub":
            required["CLOUDFLARE_ACCOUNT_ID"] = self.cloudflare_account_id
            required["CLOUDFLARE_API_TOKEN"] = self.cloudflare_api_token
        return [key for key, value in required.items() if not value]

    def validate(self) -> None:
        """
        Raise ConfigurationError if any required setting is missing or invalid.

        The message never includes setting values.
        """
        if self.missing_settings():
            raise ConfigurationError("Required environment variables are not set")
        if self.invalid_settings:
            raise ConfigurationError(
                f"Invalid environment variables: {', '.join(self.invalid_settings)}"
            )

    def gateway_options(self) -> GatewayOptions:
        self.validate()
        return GatewayOptions(
            id=self.gateway_id,
            skip_cache=self.gateway_skip_cache,
            cache_ttl=self.gateway_cache_ttl,
        )

    def create_llm_backend(self) -> ModelBackend:
        """Create LLM backend instance based on configuration."""
        self.validate()
        if self.llm_backend == "stub":
            return StubModelBackend()
        return WorkersAIModelBackend(
            account_id=self.cloudflare_account_id,
            api_token=self.cloudflare_api_token,
            model_name=self.workers_ai_model,
        )


def get_config() -> InfraConfig:
    """Get infrastructure configuration from the current environment."""
    return InfraConfig.from_env()
