from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_ENV: str = Field(default="development")
    APP_SECRET: str = Field(default="please-change-me")
    LOG_LEVEL: str = Field(default="INFO")

    DB_HOST: str = Field(default="localhost")
    DB_PORT: int = Field(default=5432)
    DB_USER: str = Field(default="ejdev")
    DB_PASSWORD: str = Field(default="ejdev")
    DB_NAME: str = Field(default="ejdev")
    DATABASE_URL: str | None = Field(default=None)
    DB_SYNC_ECHO: bool = Field(default=False)

    SUPABASE_URL: str = Field(default="http://localhost:54321")
    SUPABASE_SERVICE_ROLE_KEY: str | None = Field(default=None)
    SUPABASE_JWT_SECRET: str = Field(default="dev-only-jwt-secret-change-me-in-production")
    SUPABASE_JWT_AUDIENCE: str = Field(default="authenticated")

    STORAGE_BUCKET: str = Field(default="images")
    STORAGE_QUOTA_MB: int = Field(default=1024)
    STORAGE_LIST_LIMIT: int = Field(default=1000)
    STORAGE_REQUEST_TIMEOUT_SECONDS: int = Field(default=20)

    REDIS_URL: str | None = Field(default=None)
    INSTAGRAM_CACHE_TTL_SECONDS: int = Field(default=3600)

    @property
    def sync_database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def project_root(self) -> Path:
        # backend/app/config.py -> parents[2] == repo root
        return Path(__file__).resolve().parents[2]


settings = Settings()
