from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``RECORD_TREE_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECORD_TREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"


settings = Settings()
