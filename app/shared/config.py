# app/shared/config.py
from pydantic import BaseModel
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]   # project root
STORAGE_DIR = ROOT / "storage"

def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    return int(raw) if raw else None

class Settings(BaseModel):
    ENV: str = os.getenv("ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Local SQLite DB under ./storage/ unless overridden
    DB_URL: str = os.getenv("DB_URL", f"sqlite:///{(STORAGE_DIR / 'memos.db').as_posix()}")

    # Gemini (google-genai)
    GEMINI_API_KEY: str | None = os.getenv("GEMINI_API_KEY") or None
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-001")
    GEMINI_TIMEOUT_MS: int | None = _optional_int("GEMINI_TIMEOUT_MS")

    # Prompt target language
    PROMPT_LANGUAGE: str = os.getenv("PROMPT_LANGUAGE", "Korean")

settings = Settings()
