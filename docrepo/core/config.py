from typing import List, Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_title: str = "DocRepo"
    app_version: str = "1.0.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Разрешенные источники для CORS
    cors_origins: List[str] = ["*"]

    model_config = {"env_file": ".env", "env_prefix": "DOCREPO_", "extra": "ignore"}

settings = Settings()
