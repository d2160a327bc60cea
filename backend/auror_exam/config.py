"""
Configuration - environment driven settings for the examination engine
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PACKAGE_ROOT = Path(__file__).parent


def get_world_id() -> str:
    """Get the world to load for new sessions"""
    return os.getenv("AUROR_WORLD", "auror-exam")


def get_worlds_dir() -> Path:
    """Get the directory containing world folders"""
    return Path(os.getenv("AUROR_WORLDS_DIR", str(PACKAGE_ROOT / "worlds")))


def get_log_level() -> str:
    """Get the log level for the application logger"""
    return os.getenv("AUROR_LOG_LEVEL", "INFO").upper()


def session_logs_enabled() -> bool:
    """Whether per-session transcript files are written"""
    return os.getenv("AUROR_SESSION_LOGS", "0").lower() in ("1", "true", "yes")


def get_logs_dir() -> Path:
    """Get the directory for session transcripts"""
    return Path(os.getenv("AUROR_LOGS_DIR", str(PACKAGE_ROOT.parent.parent / "logs")))


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins for the HTTP API"""
    origins = os.getenv(
        "AUROR_CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173"
    )
    return [origin.strip() for origin in origins.split(",") if origin.strip()]
