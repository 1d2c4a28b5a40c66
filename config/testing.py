import os

from .config import API_BASE_URL, CORS_ORIGINS, SQL_ECHO, WEEKS_PER_MONTH

SECRET_KEY = "test-secret"

# In-memory SQLite: every app instance gets a fresh database.
DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
AUTO_SEED_DB = False
