"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

INFRA_ENV_VARS = [
    "LLM_BACKEND",
    "WORKERS_AI_MODEL",
    "CLOUDFLARE_ACCOUNT_ID",
    "CLOUDFLARE_API_TOKEN",
    "CLOUDFLARE_GATEWAY_ID",
    "AI_GATEWAY_SKIP_CACHE",
    "AI_GATEWAY_CACHE_TTL",
    "INFERENCE_TIMEOUT_S",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Start every test without inference settings from the host or .env."""
    for name in INFRA_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def configured_env(monkeypatch):
    """Complete Workers AI configuration."""
    monkeypatch.setenv("LLM_BACKEND", "workers_ai")
    monkeypatch.setenv("CLOUDFLARE_ACCOUNT_ID", "acct-123")
    monkeypatch.setenv("CLOUDFLARE_API_TOKEN", "token-abc")
    monkeypatch.setenv("CLOUDFLARE_GATEWAY_ID", "summarizer-gw")
    return monkeypatch
