# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path
from urllib.parse import quote_plus

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    # Database: a full URL wins, otherwise the DB_* parts are assembled for MySQL
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: str = ""
    DB_DATABASE: str = "shift_handover"
    DB_SSL: bool = False

    # Sessions
    SESSION_SECRET: str = "fallback_secret_key"
    SESSION_COOKIE_NAME: str = "session_cookie_name"
    SESSION_MAX_AGE_MINUTES: int = 30
    ALGORITHM: str = "HS256"

    APP_ENV: str = "development"
    HOST: str = "127.0.0.1"
    PORT: int = 3000
    BCRYPT_ROUNDS: int = 10
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            # SQLAlchemy requires the postgresql:// scheme
            if self.DATABASE_URL.startswith("postgres://"):
                return self.DATABASE_URL.replace("postgres://", "postgresql://", 1)
            return self.DATABASE_URL
        if self.DB_HOST:
            user = quote_plus(self.DB_USER or "")
            password = quote_plus(self.DB_PASSWORD)
            return f"mysql+pymysql://{user}:{password}@{self.DB_HOST}/{self.DB_DATABASE}"
        return "sqlite:///./database_handover.db"

settings = Settings()
