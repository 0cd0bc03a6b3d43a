from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    DATA_SERVICE_URL: str = "http://data-service:8000"
    # Seconds allowed for connect and read against the data service
    DATA_SERVICE_TIMEOUT: float = 5.0
    LOW_STOCK_THRESHOLD: int = 10

    SERVICE_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()
