from typing import Tuple
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    gemini_api_key: str = ""
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_model: str = "gemini-2.0-flash-exp"
    gemini_timeout: float = 30.0
    gemini_retries: int = 2

    suggest_web_search: bool = True
    mock_delay_seconds: float = 0.0

    image_max_size: str = "1568,1568"
    image_max_mb: float = 15.0

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return v

    def image_max_dims(self) -> Tuple[int, int]:
        w, h = self.image_max_size.split(",")
        return int(w), int(h)

    @property
    def mock_mode(self) -> bool:
        return not self.gemini_api_key.strip()

settings = Settings()
