"""Configuration handling for the pyappgate server."""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration."""

    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "info"
    database_uri: str = "sqlite:///appgate.db"
    auth_enabled: bool = True
    session_cookie: str = "appgate-session"


def get_config() -> Config:
    """Load configuration from environment variables."""
    return Config(
        host=os.getenv("PYAPPGATE_HOST", "0.0.0.0"),
        port=int(os.getenv("PYAPPGATE_PORT", "8000")),
        debug=os.getenv("PYAPPGATE_DEBUG", "false").lower() == "true",
        log_level=os.getenv("PYAPPGATE_LOG_LEVEL", "info"),
        database_uri=os.getenv("PYAPPGATE_DATABASE_URI", "sqlite:///appgate.db"),
        auth_enabled=os.getenv("PYAPPGATE_AUTH_ENABLED", "true").lower() == "true",
        session_cookie=os.getenv("PYAPPGATE_SESSION_COOKIE", "appgate-session"),
    )
