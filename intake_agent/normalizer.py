"""
normalizer.py
-------------
Text helpers shared by the whole pipeline. NO LLM calls.

Responsibilities:
- Coerce arbitrary webhook values into trimmed strings
- Pull the prospect's message out of the heterogeneous payloads the chat
  platform sends
- Cap outbound replies at MAX_LINES non-empty lines
"""

MAX_LINES = 8

# Candidate locations of the inbound message, tried in priority order.
# Each entry is a path of keys into the (untyped) request body.
MESSAGE_KEYS = (
    ("message_content",),
    ("message",),
    ("text",),
    ("body",),
    ("caption",),
    ("data", "message"),
    ("data", "text"),
)


def normalize_text(value) -> str:
    """Return ``value`` as a trimmed string; ``None`` becomes ``""``."""
    if isinstance(value, str):
        return value.strip()
    if value is None:
        return ""
    return str(value).strip()


def _lookup(body, path):
    current = body
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def extract_message(body) -> str:
    """
    Find the prospect's message inside a webhook body.

    Parameters
    ----------
    body : any
        Parsed JSON or form data. Anything that is not a mapping is treated
        as an empty body.

    Returns
    -------
    str
        The first candidate that normalizes to a non-empty string, or ``""``.
    """
    if not isinstance(body, dict):
        return ""
    for path in MESSAGE_KEYS:
        value = _lookup(body, path)
        # Nested objects are containers, not messages
        if isinstance(value, (dict, list)):
            continue
        text = normalize_text(value)
        if text:
            return text
    return ""


def enforce_line_limit(text: str, max_lines: int = MAX_LINES) -> str:
    """Drop blank lines, trim the rest and keep at most ``max_lines`` of them."""
    lines = [line.strip() for line in normalize_text(text).split("\n")]
    lines = [line for line in lines if line]
    return "\n".join(lines[:max_lines])
