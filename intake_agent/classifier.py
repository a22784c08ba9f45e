"""
classifier.py
-------------
Keyword intent classification for inbound prospect messages. NO LLM calls.

Matching is plain substring containment on the lowercased text, so a keyword
inside a longer word still matches ("agendar" matches "reagendar").

Rules are evaluated in order and the first hit wins. The order is part of the
behaviour: a message asking for the address while confirming the appointment
must get the address block, and a hard confirmation ("queda confirmada")
must not fall through to the appointment rule.
"""

import logging

logger = logging.getLogger(__name__)

ADDRESS_REQUEST = "address_request"
HARD_CONFIRM = "hard_confirm"
APPOINTMENT_INTENT = "appointment_intent"
GENERAL = "general"

INTENTS = (ADDRESS_REQUEST, HARD_CONFIRM, APPOINTMENT_INTENT, GENERAL)

# Accented and unaccented spellings are both listed on purpose; prospects
# type either.
ADDRESS_KEYWORDS = (
    "domicilio",
    "dirección",
    "direccion",
    "ubicación",
    "ubicacion",
    "donde están",
    "dónde están",
    "mapa",
)

HARD_CONFIRM_KEYWORDS = (
    "confirmada",
    "queda confirmada",
    "queda agendada",
    "ya quedó",
    "ya quedo",
    "listo, gracias",
    "perfecto, gracias",
    "de acuerdo, gracias",
)

# "agendar" on its own counts as wanting an appointment.
APPOINTMENT_KEYWORDS = (
    "confirmo",
    "confirmar",
    "sí quiero la cita",
    "si quiero la cita",
    "quiero cita",
    "me interesa la cita",
    "agendar cita",
    "agendar",
)

RULES = (
    (ADDRESS_REQUEST, ADDRESS_KEYWORDS),
    (HARD_CONFIRM, HARD_CONFIRM_KEYWORDS),
    (APPOINTMENT_INTENT, APPOINTMENT_KEYWORDS),
)


def matches_any(text: str, keywords) -> bool:
    """Return True if any keyword occurs in the lowercased text."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def classify(text: str) -> str:
    """
    Classify a normalized message into one of INTENTS.

    Empty text matches nothing and comes back as GENERAL; callers that want
    a different answer for empty input must check before classifying.
    """
    for intent, keywords in RULES:
        if matches_any(text, keywords):
            logger.debug("classifier: %r -> %s", text[:80], intent)
            return intent
    return GENERAL
