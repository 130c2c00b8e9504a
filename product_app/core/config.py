"""
Configuración centralizada de la aplicación
"""
import json
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url
from typing import List, Optional


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "Product API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "CRUD API for the product catalog"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    # Database - DATABASE_URL wins over the individual parts when set
    DATABASE_URL: Optional[str] = None
    DB_HOST: str = "localhost"
    DB_PORT: int = 6432
    DB_NAME: str = "productapp"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"

    # Connection pool
    DB_MAX_CONNECTIONS: int = 10
    DB_MAX_CONNECTION_IDLE_TIME: int = 30  # seconds

    # CORS - Can be string (comma-separated) or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    def get_database_url(self) -> URL:
        """
        Build the SQLAlchemy URL for the connection pool

        Parses DATABASE_URL when configured, otherwise assembles a
        psycopg2 URL from the DB_* parts.
        """
        if self.DATABASE_URL:
            url = make_url(self.DATABASE_URL)
            # SQLAlchemy no longer accepts the short postgres:// scheme
            if url.drivername == "postgres":
                url = url.set(drivername="postgresql")
            return url

        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    def get_allowed_origins(self) -> List[str]:
        """
        CORS origins from ALLOWED_ORIGINS

        Accepts a JSON array or a comma-separated list; blank entries are
        dropped and an unset value allows no cross-origin callers.
        """
        raw = (self.ALLOWED_ORIGINS or "").strip()
        if raw.startswith("["):
            return [str(origin).strip() for origin in json.loads(raw) if str(origin).strip()]

        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
