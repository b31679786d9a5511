"""Application configuration via Pydantic Settings.

NOTE: We explicitly map the .env variable names shared with the Node backend
(AI_SERVICE_URL etc.) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Remote AI service
    ai_service_url: str = Field(
        default="http://localhost:8081/ai/analyze",
        validation_alias="AI_SERVICE_URL",
    )
    ai_service_timeout: float = Field(default=50.0, validation_alias="AI_SERVICE_TIMEOUT")

    # Submission
    min_description_length: int = Field(default=10, validation_alias="MIN_DESCRIPTION_LENGTH")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
