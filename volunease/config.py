from pydantic import BaseModel
import os
from dotenv import load_dotenv

load_dotenv()


def _split_origins(raw: str | None) -> list[str]:
    return [url.strip() for url in (raw or "").split(",") if url.strip()]


class Settings(BaseModel):
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "5000"))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Mongo
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "Volun-Ease")
    # Session cookie
    JWT_SECRET: str = os.getenv("JWT_SECRET", "changeme")
    JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    COOKIE_NAME: str = "token"
    # CORS
    ALLOWED_URLS: list[str] = _split_origins(os.getenv("ALLOWED_URLS"))

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


settings = Settings()
