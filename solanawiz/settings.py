# solanawiz/settings.py — configuration and environment setup

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    return float(raw) if raw else None


@dataclass
class Settings:
    """Application configuration values loaded from environment variables."""
    okx_api_key: str = os.getenv("OKX_API_KEY", "")
    okx_base_url: str = os.getenv("OKX_BASE_URL", "https://www.okx.com")
    http_timeout: Optional[float] = _optional_float("HTTP_TIMEOUT")

    # Ollama (or any OpenAI-compatible /v1 endpoint)
    llm_base_url: str = os.getenv("LLM_BASE_URL", "http://localhost:11434/v1")
    llm_api_key: str = os.getenv("OPENAI_API_KEY", "ollama-local")
    llm_model: str = os.getenv("LLM_MODEL", "llama3")
    temperature: float = float(os.getenv("TEMPERATURE", "0.3"))
    max_tokens: int = int(os.getenv("MAX_TOKENS", "1024"))


settings = Settings()
