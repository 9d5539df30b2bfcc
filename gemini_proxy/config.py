import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    gemini_api_key: Optional[str] = None
    cors_origins: tuple = ("*",)


def load_settings():
    """Read settings from the environment, falling back to a local .env file."""
    load_dotenv()

    # An empty or whitespace-only key is treated as not configured
    api_key = os.environ.get("GEMINI_API_KEY", "").strip() or None

    origins = tuple(
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    )

    return Settings(gemini_api_key=api_key, cors_origins=origins or ("*",))
