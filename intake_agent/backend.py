"""
backend.py
----------
Generative backend adapter: the only module that talks to an LLM.

generate() never raises. Every failure path (no credential, auth error,
network error, timeout, empty or unrecognised payload) degrades to a fixed
Spanish sentence, and every returned text is already capped at MAX_LINES.
"""

import logging

import anthropic
from openai import OpenAI, AuthenticationError, APIError

from intake_agent.normalizer import normalize_text, enforce_line_limit
from intake_agent.prompts import (
    SYSTEM_PROMPT,
    USER_TEMPLATE,
    NO_CREDENTIAL_REPLY,
    GENERIC_GUIDANCE_REPLY,
)

logger = logging.getLogger(__name__)


# --------------------------------------------------------------------------- #
# Payload extraction                                                            #
# --------------------------------------------------------------------------- #

def _first(items):
    if isinstance(items, list) and items:
        return items[0]
    return None


def _get(obj, key):
    return obj.get(key) if isinstance(obj, dict) else None


def _message_items(data):
    """Responses API output items that carry content (skips reasoning items)."""
    output = _get(data, "output")
    if not isinstance(output, list):
        return []
    return [
        item for item in output
        if isinstance(_get(item, "content"), list) and _get(item, "type") in (None, "message")
    ]


def _from_output_text_part(data):
    """Responses API: first ``output_text`` part of any message item."""
    for item in _message_items(data):
        for part in item["content"]:
            if _get(part, "type") == "output_text":
                return _get(part, "text")
    return None


def _from_first_output_part(data):
    return _get(_first(_get(_first(_message_items(data)), "content")), "text")


def _from_output_text(data):
    return _get(data, "output_text")


def _from_chat_choice(data):
    """Chat completions: choices[0].message.content."""
    return _get(_get(_first(_get(data, "choices")), "message"), "content")


def _from_text_block(data):
    """Anthropic messages: first ``text`` content block."""
    content = _get(data, "content")
    if not isinstance(content, list):
        return None
    for block in content:
        if _get(block, "type") == "text":
            return _get(block, "text")
    return None


EXTRACTORS = (
    _from_output_text_part,
    _from_first_output_part,
    _from_output_text,
    _from_chat_choice,
    _from_text_block,
)


def _as_dict(result):
    if isinstance(result, dict):
        return result
    if hasattr(result, "model_dump"):
        data = result.model_dump()
        # SDK Response.output_text is a computed property, absent from the dump
        output_text = getattr(result, "output_text", None)
        if isinstance(output_text, str) and output_text.strip():
            data.setdefault("output_text", output_text)
        return data
    return {}


def extract_text(result) -> str:
    """Return the first non-empty text any extractor finds, or ""."""
    data = _as_dict(result)
    for extractor in EXTRACTORS:
        value = extractor(data)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


# --------------------------------------------------------------------------- #
# Adapter                                                                       #
# --------------------------------------------------------------------------- #

class GenerativeBackend:
    """Wraps the configured provider behind a never-failing generate()."""

    def __init__(self, settings, client=None):
        self.settings = settings
        self._client = client

    @property
    def configured(self) -> bool:
        return self.settings.provider is not None

    def _get_client(self):
        if self._client is None:
            provider = self.settings.provider
            if provider.type == "anthropic":
                self._client = anthropic.Anthropic(
                    api_key=provider.api_key,
                    timeout=self.settings.timeout,
                )
            else:
                kwargs = {"api_key": provider.api_key, "timeout": self.settings.timeout}
                if provider.base_url:
                    kwargs["base_url"] = provider.base_url
                self._client = OpenAI(**kwargs)
        return self._client

    def _request(self, message: str):
        provider = self.settings.provider
        client = self._get_client()
        user_content = USER_TEMPLATE.format(message=message)

        if provider.type == "anthropic":
            return client.messages.create(
                model=provider.model,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": user_content}],
                max_tokens=self.settings.max_output_tokens,
            )

        if provider.type == "openai_compat":
            return client.chat.completions.create(
                model=provider.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": user_content},
                ],
                max_tokens=self.settings.max_output_tokens,
            )

        return client.responses.create(
            model=provider.model,
            input=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": user_content},
            ],
            max_output_tokens=self.settings.max_output_tokens,
        )

    def generate(self, message: str) -> str:
        """
        Ask the backend for a reply to the prospect's message.

        Parameters
        ----------
        message : str
            Normalized inbound text.

        Returns
        -------
        str, at most MAX_LINES non-empty lines, never empty.
        """
        if not self.configured:
            logger.warning("backend: no LLM credential configured, using fallback")
            return NO_CREDENTIAL_REPLY

        try:
            result = self._request(normalize_text(message))
        except (AuthenticationError, anthropic.AuthenticationError) as exc:
            logger.warning("backend: API key rejected by %s: %s", self.settings.provider.name, exc)
            return GENERIC_GUIDANCE_REPLY
        except (APIError, anthropic.APIError) as exc:
            logger.warning("backend: %s call failed: %s", self.settings.provider.name, exc)
            return GENERIC_GUIDANCE_REPLY
        except Exception:
            logger.exception("backend: unexpected error calling %s", self.settings.provider.name)
            return GENERIC_GUIDANCE_REPLY

        text = extract_text(result)
        if not text:
            logger.warning("backend: empty or unrecognised response, using fallback")
            text = GENERIC_GUIDANCE_REPLY
        return enforce_line_limit(text)
