# Third-party imports
from pydantic import AliasChoices, Field

# Local application imports
from app.settings.common import CommonSettings


class ProductionSettings(CommonSettings):
    DEBUG_MODE: bool = False
    SENTRY_DSN: str | None = None

    # No insecure defaults in production
    ADMIN_PASSWORD: str
    JWT_SECRET_KEY: str = Field(validation_alias=AliasChoices("JWT_SECRET_KEY", "JWT_SECRET"))
