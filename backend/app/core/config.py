from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str = "sqlite+pysqlite:///./bank.db"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: str = ""
    log_level: str = "INFO"

    auto_create_tables: bool = True

    class Config:
        env_prefix = ""
        case_sensitive = False
        env_file = ".env"

settings = Settings()
