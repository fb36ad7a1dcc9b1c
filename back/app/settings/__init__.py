# Standard library imports
import os

# Local application imports
from app.settings.dev import DevSettings
from app.settings.production import ProductionSettings


def get_settings() -> DevSettings | ProductionSettings:
    """
    Return an instance of the appropriate settings class
    based on the ENVIRONMENT environment variable.

    Staging runs with the dev defaults.
    """
    env = os.environ.get("ENVIRONMENT", "dev").lower()
    if env == "production":
        return ProductionSettings()  # type: ignore[call-arg]
    return DevSettings()


settings = get_settings()
