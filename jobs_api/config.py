from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Safe defaults; override via environment or .env file
    APP_NAME: str = "Job Board API"
    APP_ENV: str = "dev"
    DATABASE_URL: str = "postgresql+psycopg2://postgres:postgres@db:5432/postgres"
    API_KEY: str = ""
    CORS_ALLOW_ORIGINS: str = "*"  # comma-separated
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()
