# riyadah/config.py
import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _split_origins(raw: str) -> list[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseModel):
    # General app settings
    APP_NAME: str = "Riyadah Elite API"
    env: str = os.getenv("ENV", "dev")

    # Host & Port settings
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # CORS origins for frontend
    CORS_ORIGINS: list[str] = _split_origins(
        os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:5000")
    )

    # Database. Unset means bootstrap mode (in-memory SQLite, nothing survives a restart)
    database_url: str | None = os.getenv("DATABASE_URL") or None

    # Tokens
    jwt_secret: str = os.getenv("JWT_SECRET", "dev-secret")
    access_token_expire_days: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

    # Accounts and points economy
    welcome_bonus_points: int = int(os.getenv("WELCOME_BONUS_POINTS", "100"))
    min_password_length: int = int(os.getenv("MIN_PASSWORD_LENGTH", "6"))
    dashboard_activity_limit: int = 5


settings = Settings()  # Instantiate configuration
