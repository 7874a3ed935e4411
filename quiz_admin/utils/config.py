# quiz_admin/utils/config.py
import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load .env file before defining settings
load_dotenv()

class Settings(BaseSettings):
    # Database Settings
    # Production deployments point this at postgresql+asyncpg://...
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./quiz_admin.db")

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Question defaults
    default_time_limit: int = 30  # seconds
    default_compiler_language: str = "javascript"

    # Comma-separated actor ids that are granted the admin role on startup
    admin_user_ids: str = os.getenv("ADMIN_USER_IDS", "")

    @property
    def admin_ids(self) -> list[str]:
        return [uid.strip() for uid in self.admin_user_ids.split(",") if uid.strip()]

settings = Settings()

# --- Sanity checks ---
if settings.default_time_limit <= 0:
    raise ValueError("DEFAULT_TIME_LIMIT must be a positive number of seconds")
if not settings.default_compiler_language:
    raise ValueError("DEFAULT_COMPILER_LANGUAGE must not be empty")
