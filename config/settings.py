from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "Matchmaking Service"
    DEBUG: bool = False  # Safe default for production; set DEBUG=True in .env for local dev

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging (LOG_FILE unset = console only)
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str | None = None


settings = Settings()
