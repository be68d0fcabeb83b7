from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "desk-configurator"
    LOG_LEVEL: str = "INFO"

    # In-memory price cache used by the pricing routes
    PRICE_CACHE_TTL_SECONDS: float = 300.0
    PRICE_CACHE_MAX_SIZE: int = 1000

    # Upper bound for {"calculations": [...]} batch requests
    MAX_BATCH_SIZE: int = 10

    # Material ids hidden from the configurator catalog (e.g. out of stock)
    INACTIVE_MATERIALS: list[str] = []

    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
