"""
agent.py
--------
Orchestrator: the single entry point called from the Flask webhook route.

Pipeline:
  webhook body
    → normalizer.extract_message()     [first non-empty candidate field]
    → classifier.classify()            [ordered keyword rules]
    → composer.compose()               [literal block or backend text]
    → returns envelope dict (ok, reply, message, text, intent)

Empty messages are answered with a fixed text and never reach the backend.
"""

import logging

from intake_agent.classifier import classify
from intake_agent.composer import compose
from intake_agent.normalizer import extract_message, enforce_line_limit
from intake_agent.prompts import EMPTY_MESSAGE_REPLY, ERROR_REPLY

logger = logging.getLogger(__name__)


def process_message(body, backend) -> dict:
    """
    Answer one inbound webhook call.

    Parameters
    ----------
    body    : parsed request body (dict, or anything else for "no body")
    backend : object with generate(message) -> str

    Returns
    -------
    dict envelope, see envelope(). Exceptions propagate; the route turns them
    into error_envelope().
    """
    message = extract_message(body)
    if not message:
        logger.info("agent: empty message, sending fallback")
        return envelope(EMPTY_MESSAGE_REPLY)

    intent = classify(message)
    logger.info("agent: intent=%s", intent)
    logger.debug("agent: message=%r", message[:200])

    reply = compose(intent, message, backend)
    return envelope(reply, intent=intent)


# --------------------------------------------------------------------------- #
# Envelope                                                                      #
# --------------------------------------------------------------------------- #

def envelope(text: str, ok: bool = True, intent: str | None = None) -> dict:
    # The chat platform reads whichever of these keys it was set up with.
    reply = enforce_line_limit(text)
    return {
        "ok": ok,
        "reply": reply,
        "message": reply,
        "text": reply,
        "intent": intent,
    }


def error_envelope() -> dict:
    return envelope(ERROR_REPLY, ok=False)
