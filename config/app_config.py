import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_PAGE_LIMIT = 20
MAX_PAGE_LIMIT = 100


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def get_cors_origins() -> List[str]:
    """Allowed CORS origins, comma separated in CORS_ORIGINS"""
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def auto_init_db() -> bool:
    """Whether startup creates tables and seeds the settings singleton"""
    return _flag("AUTO_INIT_DB", "true")


def get_admin_token() -> str:
    return os.getenv("ADMIN_API_TOKEN", "")


def get_admin_identity() -> dict:
    return {
        "adminId": os.getenv("ADMIN_ID", "admin"),
        "name": os.getenv("ADMIN_NAME", "Administrator"),
    }


def get_port() -> int:
    return int(os.getenv("PORT", 8000))
