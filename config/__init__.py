import os

DEFAULT_ENV = "development"

# APP_ENV value -> settings module
_SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Settings module for the current APP_ENV; unknown names fall back to development."""
    env = os.getenv("APP_ENV", DEFAULT_ENV).strip().lower()
    return _SETTINGS_BY_ENV.get(env, _SETTINGS_BY_ENV[DEFAULT_ENV])
