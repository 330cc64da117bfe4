from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    DATABASE_URL: str
    UNIQUE_NAMES_CASE_INSENSITIVE: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True
    DB_POOL_SIZE: int = 25
    DB_MAX_OVERFLOW: int = 0
    DB_ECHO: bool = False
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


def get_settings() -> Settings:
    return Settings()
