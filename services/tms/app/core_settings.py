from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    # Embedded SQLite unless DATABASE_URL or POSTGRES_HOST is provided
    DATABASE_URL: Optional[str] = None
    SQLITE_PATH: str = "thoron.db"
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "thoron"
    POSTGRES_USER: str = "thoron"
    POSTGRES_PASSWORD: str = "thoron"

    MAX_TRUCKLOAD_WEIGHT_LBS: float = 45000
    SEED_DEMO_DATA: bool = True
    RUN_MIGRATIONS: bool = True

    SERVICE_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    class Config:
        env_file = ".env"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.POSTGRES_HOST:
            return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        return f"sqlite:///{self.SQLITE_PATH}"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()
