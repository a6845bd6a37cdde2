import os


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "academy_system.config.production"

    if env in {"test", "testing"}:
        return "academy_system.config.testing"

    return "academy_system.config.development"
