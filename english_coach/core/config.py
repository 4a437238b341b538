# english_coach/core/config.py
import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("english_coach.core.config")  # Logger for this module

GEMINI_API_KEY_PLACEHOLDER = "YOUR_GEMINI_API_KEY_HERE"

class Settings(BaseSettings):
    PROJECT_NAME: str = "English Coach Backend"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Please set your Gemini API Key in the .env file
    GEMINI_API_KEY: str | None = GEMINI_API_KEY_PLACEHOLDER
    GEMINI_MODEL_NAME_LITE: str = "gemini-1.5-flash"

    # Only /validate answers CORS preflights
    CORS_ALLOW_ORIGIN: str = "*"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def gemini_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY) and self.GEMINI_API_KEY != GEMINI_API_KEY_PLACEHOLDER

@lru_cache()
def get_settings() -> Settings:
    settings_instance = Settings()
    if not settings_instance.gemini_configured:
        logger.warning("GEMINI_API_KEY is not set; exercise endpoints will answer with a configuration error.")
    logger.info(f"Gemini model set to: {settings_instance.GEMINI_MODEL_NAME_LITE}")
    return settings_instance

settings = get_settings()
