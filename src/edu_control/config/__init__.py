import os


def get_settings_module() -> str:
    # APP_ENV selects the settings module, 'development' by default
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "edu_control.config.production"

    if env in {"test", "testing"}:
        return "edu_control.config.testing"

    return "edu_control.config.development"
