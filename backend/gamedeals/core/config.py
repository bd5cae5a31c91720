from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central settings object.
    Values come from env vars; locally you can use backend/.env.
    """
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # CheapShark API
    CHEAPSHARK_BASE_URL: str = "https://www.cheapshark.com/api/1.0/"
    CHEAPSHARK_REDIRECT_URL: str = "https://www.cheapshark.com/redirect"
    HTTP_TIMEOUT_SECONDS: float = 20.0

    # Sessions (in memory, least recently used evicted past this count)
    MAX_SESSIONS: int = 1000

    # Logging
    LOG_LEVEL: str = "INFO"

    # Versioning
    APP_VERSION: str = "0.1.0"
    BUILD_ID: str = "dev"


# other modules import this
settings = Settings()
