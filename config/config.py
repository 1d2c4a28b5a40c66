"""Settings shared by every environment module."""

import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.getenv(name, default)))


def env_list(name: str, default: str = "*"):
    raw = os.getenv(name, default).strip()
    if raw == "*":
        return "*"
    return [item.strip() for item in raw.split(",") if item.strip()]


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///resourceflow.db")

# 4 weeks per month; set 4.33 for calendar-average months.
WEEKS_PER_MONTH = float(os.getenv("WEEKS_PER_MONTH", "4"))

CORS_ORIGINS = env_list("CORS_ORIGINS")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SQL_ECHO = env_flag("SQL_ECHO")

# Used by the API client and scripts talking to a running server.
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
