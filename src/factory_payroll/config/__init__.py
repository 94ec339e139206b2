import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, default is development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "factory_payroll.config.production"

    if env in {"test", "testing"}:
        return "factory_payroll.config.testing"

    return "factory_payroll.config.development"


def env_list(name: str, default: str = "") -> list[str]:
    """Comma-separated environment variable as a list of non-empty names."""
    raw = os.getenv(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def env_ids(name: str, default: str = "") -> list[int]:
    return [int(part) for part in env_list(name, default)]
