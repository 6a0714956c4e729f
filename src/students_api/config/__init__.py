"""Configuration package for the students API.

Key Components:
- settings: Application configuration loaded from environment variables and TOML
- Database: async SQLAlchemy engine and session management for SQLite
- Logging: Loguru-based logging with development/production modes
- Error names: shared titles for the JSON error envelope
"""

from students_api.config.config import settings
from students_api.config.db import engine, get_session
from students_api.config.errors import ErrorNames, ResponseStatus
from students_api.config.logger import config_logger

__all__ = [
    "ErrorNames",
    "ResponseStatus",
    "config_logger",
    "engine",
    "get_session",
    "settings",
]
