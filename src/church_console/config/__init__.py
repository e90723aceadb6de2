import os


def get_settings_module() -> str:
    # Settings are chosen by APP_ENV, defaulting to 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "church_console.config.production"

    if env in {"test", "testing"}:
        return "church_console.config.testing"

    return "church_console.config.development"
