"""
Infrastructure module exports.

Configuration for the inference backend and its gateway.
"""

from .config import InfraConfig, get_config, LLMBackendType, ConfigurationError

__all__ = [
    "InfraConfig",
    "get_config",
    "LLMBackendType",
    "ConfigurationError",
]
