"""
Intake Webhook – Family Law Prospect Responder
==============================================
Guadalajara, Jalisco

Receives inbound prospect messages from the chat platform and answers with:
  • the office address block, when the prospect asks where we are
  • the appointment confirmation script, when the prospect confirms
  • an LLM reply (plus office hours when they want an appointment) otherwise

Every webhook call is answered with HTTP 200 and a usable text.
"""

import os
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from dotenv import load_dotenv

from intake_agent.agent import process_message, error_envelope
from intake_agent.backend import GenerativeBackend
from intake_agent.config import load_settings

load_dotenv()

log_level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
if not logging.getLogger().handlers:
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

SERVICE_NAME = "intake-webhook"

app = Flask(__name__)
CORS(app)
app.json.sort_keys = False   # keep envelope keys in the order consumers expect

settings = load_settings()
backend = GenerativeBackend(settings)

if backend.configured:
    app.logger.info("LLM provider: %s (%s)", settings.provider.name, settings.model)
else:
    app.logger.warning("No LLM credential configured – replies will use fallback text")


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------

@app.route("/", methods=["GET"])
def index():
    # Some hosting platforms probe "/" for liveness
    return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}


@app.route("/health", methods=["GET"])
def health():
    return jsonify({
        "ok": True,
        "service": SERVICE_NAME,
        "status": "healthy",
        "backend_configured": backend.configured,
        "model": settings.model,
    })


# ---------------------------------------------------------------------------
# Webhook
# ---------------------------------------------------------------------------

@app.route("/webhook", methods=["GET"])
def webhook_status():
    return jsonify({"ok": True, "message": "Webhook activo"})


def _read_body():
    """Parsed JSON body, else form fields; {} when neither is present."""
    body = request.get_json(silent=True)
    if body is None:
        body = request.form.to_dict()
    return body


@app.route("/webhook", methods=["POST"])
def webhook():
    """Answer an inbound prospect message. Always returns HTTP 200."""
    try:
        result = process_message(_read_body(), backend)
    except Exception:
        app.logger.exception("Webhook error")
        result = error_envelope()
    return jsonify(result), 200


if __name__ == "__main__":
    app.logger.info("Servidor activo en puerto %s", settings.port)
    app.run(host=settings.host, port=settings.port)
