"""
composer.py
-----------
Builds the outbound text for a classified intent.

Literal intents are answered verbatim; the others go through the generative
backend. Any object with a ``generate(message) -> str`` method works as the
backend, which keeps the composer testable without network access.
"""

from intake_agent import classifier
from intake_agent.normalizer import MAX_LINES, enforce_line_limit
from intake_agent.prompts import ADDRESS_BLOCK, CONFIRMATION_TEXT, SCHEDULE_LINE


def with_schedule(generated: str) -> str:
    """Append the office hours line, keeping it as the last surviving line."""
    head = enforce_line_limit(generated, MAX_LINES - 1)
    return enforce_line_limit(f"{head}\n{SCHEDULE_LINE}")


def compose(intent: str, message: str, backend) -> str:
    if intent == classifier.ADDRESS_REQUEST:
        return ADDRESS_BLOCK

    if intent == classifier.HARD_CONFIRM:
        return CONFIRMATION_TEXT

    if intent == classifier.APPOINTMENT_INTENT:
        return with_schedule(backend.generate(message))

    return enforce_line_limit(backend.generate(message))
