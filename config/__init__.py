import os

_MODULES = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for the current environment.

    APP_ENV wins over FLASK_ENV. Accepted values: development/dev,
    testing/test, production/prod. Anything else falls back to development.
    """
    env = (os.getenv("APP_ENV") or os.getenv("FLASK_ENV") or "development").strip().lower()
    return _MODULES.get(env, "config.development")
