"""Configuration management for the Teams card builder."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Builder defaults loaded from environment variables."""

    # Document
    card_schema: str = "https://adaptivecards.io/schemas/adaptive-card.json"
    card_version: str = "1.3"
    full_width: bool = True

    # Inputs
    input_error_message: str = "Required if isRequired is true"

    # Text normalization
    emoji_language: str = "alias"

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "TEAMSCARDS_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
