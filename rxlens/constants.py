"""All magic values live here — no inline literals anywhere else."""

# OpenAI chat completions endpoint
OPENAI_BASE_URL = "https://api.openai.com/v1"
OPENAI_VISION_MODEL = "gpt-4o"

# No retry policy: one outbound call per translate action.
OPENAI_MAX_RETRIES = 0

# Image payload
IMAGE_CONTENT_TYPE = "image/jpeg"
DATA_URL_TEMPLATE = "data:%s;base64,%s"

# Fixed prompts sent with every prescription photo
PRESCRIPTION_SYSTEM_PROMPT = (
    "Sos experto en leer y traducir ordenes medicas.\n"
    "Solo traduci sobre ordenes medicas.\n"
    "Responde de forma corta y consisa.\n"
    "No podes dar un diagnostico sobre la orden medica.\n"
    "Aclarar el % de precision de la traducción."
)
PRESCRIPTION_USER_PROMPT = "Clarificame lo que dice la receta medica?"

# Error messages carried by TranscriptionError
ERR_EMPTY_IMAGE = "Image is empty"
ERR_IMAGE_NOT_FOUND = "Image not found: %s"
ERR_IMAGE_PERMISSION = "Permission denied reading image: %s"
ERR_IMAGE_READ = "Could not read image: %s"
ERR_NO_PHOTO = "No photo attached"
ERR_PHOTO_DOWNLOAD = "Could not download photo: %s"
ERR_NETWORK = "Network failure: %s"
ERR_TIMEOUT = "Request to inference endpoint timed out"
ERR_ENDPOINT_STATUS = "Inference endpoint returned HTTP %d"
ERR_ENDPOINT_AUTH = "Inference endpoint rejected the credential (HTTP %d)"
ERR_ENDPOINT_BODY = "Inference endpoint returned a malformed body"
ERR_ENDPOINT_NO_CHOICES = "Inference endpoint returned no choices"
ERR_ENDPOINT_NO_CONTENT = "Inference endpoint returned no message content"
ERR_MISSING_API_KEY = "OPENAI_API_KEY must be set to translate prescriptions"

# Log messages
MSG_BOT_STARTING = "Starting prescription bot…"
MSG_BLOCKED_CHAT = "Blocked update from chat_id: %s"
MSG_TRANSCRIBE_START = "→ OpenAI %s (%d bytes)"
MSG_TRANSCRIBE_OK = "✓ Transcribed (%.1fs)"
MSG_TRANSCRIBE_FAIL = "✗ Transcription failed: %s"
MSG_TRANSLATE_BUSY = "Translate ignored: a request is already pending"
MSG_TRANSCRIBER_DISABLED = "Translation disabled: %s"
MSG_SEND_FAIL = "Telegram send_message failed: %s"
MSG_SEND_BEFORE_RUN = "send_message called before run()"
MSG_REPLIED = "Replied to %s in %.1fs"
MSG_CAPTURE_FAIL = "Capture failed: %s"
MSG_CAPTURE_UNEXPECTED = "Unexpected error capturing image"
MSG_CAPTURE_READ = "Read %d bytes from %s"
MSG_TRANSCRIBE_UNEXPECTED = "Unexpected error calling OpenAI"

# User-facing messages (Spanish, as shown on the camera screen)
MSG_TRANSLATING = "Traduciendo"
MSG_TRANSLATE_FAILED = "Error al traducir foto"
MSG_PERMISSION_REQUIRED = "Necesitamos tu permiso para usar la cámara"
MSG_TRANSLATE_BUSY_USER = "Todavía estoy traduciendo la foto anterior."
MSG_CLEARED = "Listo, mensaje limpiado."
MSG_NOT_CONFIGURED = "La traducción de recetas no está configurada."
MSG_STATUS = "Estado: %s"

# Bot commands
CMD_CLEAR = "limpiar"
CMD_STATUS = "estado"
CMD_HELP = "help"
CMD_START = "start"

MSG_HELP = (
    "rx-lens — traductor de recetas médicas\n"
    "\n"
    "Enviá una foto de la receta y te respondo qué dice.\n"
    "\n"
    "Comandos:\n"
    "  /help     — muestra este mensaje\n"
    "  /estado   — estado de la última traducción\n"
    "  /limpiar  — borra el último mensaje\n"
    "\n"
    "No doy diagnósticos: solo traduzco la orden médica."
)
