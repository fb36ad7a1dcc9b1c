# Standard library imports
from pathlib import Path
import secrets
from typing import Annotated, Any, Literal

# Third-party imports
from pydantic import AliasChoices, BeforeValidator, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR: Path = Path(__file__).resolve().parent.parent


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",")]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class CommonSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Use top level .env file (one level above ./back/)
        env_file="../.env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # General settings
    API_PREFIX: str = "/api"
    ENVIRONMENT: Literal["dev", "staging", "production"] = "dev"
    DEBUG_MODE: bool = False
    PROJECT_NAME: str = "Smart Complaint Portal"
    HOST: str = "0.0.0.0"  # nosec B104
    PORT: int = 5000

    # Storage settings
    DATA_FILE: Path = BASE_DIR.parent / "data.json"

    # CORS settings ("*" reflects any requesting origin)
    BACKEND_CORS_ORIGINS: Annotated[list[str] | str, BeforeValidator(parse_cors)] = ["*"]

    @computed_field  # type: ignore[prop-decorator, misc]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS]

    # Request limits
    MAX_BODY_SIZE: int = 10 * 1024 * 1024  # 10 MB

    # Rate limiting settings (requests per window per client address)
    RATE_LIMIT_WINDOW_SECONDS: int = 60
    CREATE_RATE_LIMIT: int = 5
    UPVOTE_RATE_LIMIT: int = 20

    # Use the first X-Forwarded-For hop as client address (behind a proxy only)
    TRUST_PROXY_HEADERS: bool = False

    # Optional settings
    SENTRY_DSN: str | None = None

    # JWT settings
    JWT_ALGORITHM: str = "HS256"
    JWT_SECRET_KEY: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        validation_alias=AliasChoices("JWT_SECRET_KEY", "JWT_SECRET"),
    )
    ADMIN_TOKEN_EXPIRE_MINUTES: int = 60 * 8  # 8 hours

    # Admin settings
    ADMIN_PASSWORD: str = "admin123"
