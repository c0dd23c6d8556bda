import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(ENV_FILE)

HF_ACCESS_TOKEN = os.environ.get("HF_ACCESS_TOKEN")
HF_BASE_URL = os.environ.get("HF_BASE_URL", "https://router.huggingface.co/v1")
RECIPE_MODEL = os.environ.get("RECIPE_MODEL", "mistralai/Mistral-7B-Instruct-v0.2")
RECIPE_MAX_TOKENS = 1024
RECIPE_ERROR_MESSAGE = "Failed to generate recipe"

PORT = int(os.environ.get("PORT", "5000"))
STATIC_DIR = Path(os.environ.get("STATIC_DIR", BASE_DIR / "client" / "dist"))
CORS_ORIGINS = [origin.strip() for origin in os.environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()]
