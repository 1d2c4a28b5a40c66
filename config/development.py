import os

from .config import API_BASE_URL, CORS_ORIGINS, DATABASE_URL, LOG_LEVEL, SQL_ECHO, WEEKS_PER_MONTH, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True

# If enabled, app creates missing tables and default settings on startup (idempotent)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed sample members/projects/allocations and holidays on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")
