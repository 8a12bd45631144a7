"""Runtime configuration read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Server settings.

    Attributes:
        host: Interface to bind.
        port: TCP port to listen on.
        log_level: Root logging level name.
        cors_origins: Origins allowed by the CORS middleware.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


def _parse_origins(value: str) -> list[str]:
    origins = [origin.strip() for origin in value.split(",") if origin.strip()]
    return origins or ["*"]


def load_settings() -> Settings:
    """Build Settings from environment variables.

    Reads ``SOLAPI_HOST``, ``PORT``, ``LOG_LEVEL`` and ``CORS_ORIGINS``
    (comma separated) after loading a ``.env`` file if one is present.

    Raises:
        ValueError: If PORT is not an integer in 1..65535.
    """
    load_dotenv()

    raw_port = os.getenv("PORT", str(DEFAULT_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw_port!r}")
    if not 0 < port < 65536:
        raise ValueError(f"PORT must be between 1 and 65535, got {port}")

    return Settings(
        host=os.getenv("SOLAPI_HOST", DEFAULT_HOST),
        port=port,
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS", "*")),
    )
