"""Settings and provider resolution."""
import pytest

from intake_agent.config import DEFAULT_PORT, load_settings, resolve_provider


def test_no_credentials_means_no_provider():
    settings = load_settings({})
    assert settings.provider is None
    assert settings.model == ""
    assert settings.port == DEFAULT_PORT
    assert settings.host == "0.0.0.0"


def test_openai_takes_priority():
    provider = resolve_provider({"OPENAI_API_KEY": "sk-a", "ANTHROPIC_API_KEY": "sk-b"})
    assert provider.type == "openai"
    assert provider.model == "gpt-4o-mini"


def test_anthropic_then_groq():
    assert resolve_provider({"ANTHROPIC_API_KEY": "k", "GROQ_API_KEY": "g"}).type == "anthropic"
    groq = resolve_provider({"GROQ_API_KEY": "g"})
    assert groq.type == "openai_compat"
    assert groq.base_url == "https://api.groq.com/openai/v1"


def test_model_override():
    env = {"OPENAI_API_KEY": "k", "MODEL": "gpt-4.1-mini", "LLM_MODEL": "ignored"}
    assert resolve_provider(env).model == "gpt-4.1-mini"
    assert resolve_provider({"OPENAI_API_KEY": "k", "LLM_MODEL": "gpt-4o"}).model == "gpt-4o"


def test_numeric_overrides():
    settings = load_settings({"PORT": "3000", "LLM_TIMEOUT": "5.5", "LLM_MAX_OUTPUT_TOKENS": "100"})
    assert settings.port == 3000
    assert settings.timeout == 5.5
    assert settings.max_output_tokens == 100


def test_invalid_port_raises():
    with pytest.raises(ValueError):
        load_settings({"PORT": "eighty"})
