"""
config.py
---------
Runtime settings, read once at start-up and passed to the backend adapter.

Provider priority: OPENAI_API_KEY > ANTHROPIC_API_KEY > GROQ_API_KEY.
A missing credential is not an error; the adapter answers with its
fallback text instead.
"""

import os
from dataclasses import dataclass

DEFAULT_PORT = 8080
DEFAULT_TIMEOUT = 20.0
DEFAULT_MAX_OUTPUT_TOKENS = 220


@dataclass(frozen=True)
class Provider:
    type: str            # "openai" | "openai_compat" | "anthropic"
    name: str
    api_key: str
    model: str
    base_url: str | None = None


@dataclass(frozen=True)
class Settings:
    """Configuration container for the HTTP listener and the LLM backend."""
    host: str
    port: int
    provider: Provider | None
    timeout: float
    max_output_tokens: int

    @property
    def model(self) -> str:
        return self.provider.model if self.provider else ""


def _model_override(env) -> str:
    return env.get("MODEL") or env.get("LLM_MODEL") or ""


def resolve_provider(env=None) -> Provider | None:
    """Detect which provider to use based on available env vars."""
    env = os.environ if env is None else env
    override = _model_override(env)

    openai_key = env.get("OPENAI_API_KEY", "")
    anthropic_key = env.get("ANTHROPIC_API_KEY", "")
    groq_key = env.get("GROQ_API_KEY", "")

    if openai_key:
        return Provider(
            type="openai", name="OpenAI",
            api_key=openai_key,
            model=override or "gpt-4o-mini",
        )
    if anthropic_key:
        return Provider(
            type="anthropic", name="Claude",
            api_key=anthropic_key,
            model=override or "claude-sonnet-4-5",
        )
    if groq_key:
        return Provider(
            type="openai_compat", name="Groq",
            api_key=groq_key,
            model=override or "llama-3.3-70b-versatile",
            base_url="https://api.groq.com/openai/v1",
        )
    return None


def load_settings(env=None) -> Settings:
    """
    Build Settings from the environment.

    Invalid PORT / LLM_TIMEOUT / LLM_MAX_OUTPUT_TOKENS values raise ValueError.
    """
    env = os.environ if env is None else env
    return Settings(
        host=env.get("HOST", "0.0.0.0"),
        port=int(env.get("PORT") or DEFAULT_PORT),
        provider=resolve_provider(env),
        timeout=float(env.get("LLM_TIMEOUT") or DEFAULT_TIMEOUT),
        max_output_tokens=int(env.get("LLM_MAX_OUTPUT_TOKENS") or DEFAULT_MAX_OUTPUT_TOKENS),
    )
