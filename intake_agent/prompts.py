"""
prompts.py
----------
Literal texts used by the intake responder.

The address block and the confirmation script are sent to prospects exactly
as written here; do not reformat them.
"""

ADDRESS_BLOCK = (
    "📍Av de las Américas 1254, Col. Country Club, Guadalajara, Jalisco. C.P 44610. Piso 10.\n"
    "Mapa: https://g.co/kgs/kyy6ef\n"
    "☎️ 3341622071\n"
    "🌎 https://tuabogadoenguadalajara.com"
)

CONFIRMATION_TEXT = (
    "Su cita ha quedado establecida.\n"
    "Le atenderá el abogado Raúl James.\n"
    "Muchas gracias 😊"
)

SCHEDULE_LINE = "Horarios: lunes a viernes de 10:30 a.m. a 6:30 p.m."

CLOSING_QUESTION = "¿Su cita la desea por la mañana o por la tarde?"

# Returned without calling the backend when the webhook carried no text.
EMPTY_MESSAGE_REPLY = (
    "Gracias por comunicarse con nosotros. "
    "Cuéntenos brevemente su situación para orientarle. "
    + CLOSING_QUESTION
)

# Backend fallbacks
NO_CREDENTIAL_REPLY = "Por el momento no puedo procesar su solicitud. " + CLOSING_QUESTION

GENERIC_GUIDANCE_REPLY = (
    "Entiendo su situación y con gusto le orientamos. "
    "Sí es posible promover legalmente acciones conforme al caso. "
    "Le invito a una cita gratuita presencial para revisar su situación. "
    + CLOSING_QUESTION
)

# Used when the pipeline itself failed.
ERROR_REPLY = (
    "Gracias por su mensaje. Sí es posible promover legalmente alternativas conforme al caso. "
    "Le invito a una cita gratuita presencial. " + CLOSING_QUESTION
)

SYSTEM_PROMPT = f"""Actúe como asistente de admisión de un despacho de Derecho Familiar en Guadalajara, Jalisco, México.

Responda SIEMPRE en trato formal, con empatía y claridad.

Su objetivo es:
1) Brindar orientación general sin asesoría definitiva.
2) Explicar que sí existen vías legales.
3) Conducir a agendar cita gratuita presencial.
4) Cerrar siempre con: “{CLOSING_QUESTION}”

Formato:
- Máximo 8 líneas.
- Profesional, cálido y directo.
- No prometer resultados.
- No dar montos exactos.
- No pedir datos sensibles.

Estructura obligatoria:
1) Validación breve.
2) Explicación general con “sí es posible promover legalmente…”
3) Invitación a cita gratuita.
4) Cierre obligatorio con la pregunta de horario.

Si el prospecto confirma que quiere cita:
Ofrecer horarios de lunes a viernes de 10:30 a.m. a 6:30 p.m.

Si pide domicilio:
Responder exactamente:

{ADDRESS_BLOCK}

Si se confirma la cita:
Responder:
“{CONFIRMATION_TEXT}”."""

USER_TEMPLATE = "Mensaje del prospecto: {message}"
