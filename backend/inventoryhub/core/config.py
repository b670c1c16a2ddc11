from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "InventoryHub API"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: list[str] = ["*"]
    SEED_ON_STARTUP: bool = True

    # Simulated storage latency per operation (0 disables the wait, not the suspension)
    OPERATION_LATENCY_SECONDS: float = 0.01

    # Client
    API_BASE_URL: str = "http://localhost:5000"
    CLIENT_TIMEOUT_SECONDS: float = 10.0
    CACHE_TTL_SECONDS: float = 300.0

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="allow"
    )


settings = Settings()
