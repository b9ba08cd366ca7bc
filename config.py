"""
Configuration management for the Summarizer service.

Loads environment variables from .env file and provides typed access to configuration.
Inference credentials are read per request through infra.config.InfraConfig.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Application-level configuration for the Summarizer service."""

    # HTTP server
    APP_PORT = int(os.getenv("APP_PORT", "8000"))
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Environment
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Client (form controller / CLI)
    SUMMARIZER_API_URL = os.getenv("SUMMARIZER_API_URL", "http://localhost:8000")


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    print(f"  App Port: {Config.APP_PORT}")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"  Log Level: {Config.LOG_LEVEL}")
    print(f"  CORS Origins: {', '.join(Config.CORS_ORIGINS)}")
    print(f"  Summarizer API URL: {Config.SUMMARIZER_API_URL}")
