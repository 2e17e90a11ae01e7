import os
from dotenv import load_dotenv

load_dotenv()

# Models
TEXT_MODEL = os.getenv("TEXT_MODEL", "gemini-2.5-flash-lite")
ART_MODEL = os.getenv("ART_MODEL", "gemini-2.5-flash")

# Google AI Studio
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY") or os.getenv("API_KEY", "")

# Generation
ART_MAX_ATTEMPTS = int(os.getenv("ART_MAX_ATTEMPTS", 1))
DEFAULT_TOPIC = os.getenv("DEFAULT_TOPIC", "Hypertext")

# App
APP_NAME = "infinite-wiki"
PORT = int(os.getenv("PORT", 8080))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
