from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "SkillSync Career Engine"
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:5173"

    # Uploads
    max_upload_mb: int = 10
    min_text_chars: int = 50

    # Fixed seed for skill levels / match percentages (None = unseeded)
    analysis_seed: Optional[int] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
