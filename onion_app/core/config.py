# Standard library imports
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv


DEFAULT_CONNECTION_STRING = "mongodb://localhost:27017/greetings"
CONNECTION_STRING_PREFIX = "CONNECTION_STRING_"

_TRUE_VALUES = ("true", "1", "yes")


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class AppSettings:
    """
    Application settings snapshot.

    Built once at startup from a flat key/value source (environment variables,
    optionally seeded from a .env file) and passed explicitly to every component
    that needs it. Instances are immutable.
    """

    application_name: str = "Onion Assignment API"
    environment: str = "development"
    detailed_errors: bool = False

    # Logging Configuration
    log_level: str = "INFO"
    log_include_scopes: bool = False

    cors_allowed_origins: Tuple[str, ...] = (
        "http://localhost:3000",
        "https://localhost:3000",
    )

    # Storage connection strings keyed by lower-case feature key ("greetings", "default")
    connection_strings: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, source: Mapping[str, str]) -> "AppSettings":
        """
        Build settings from a flat key/value mapping.

        Args:
            source: Mapping such as os.environ

        Returns:
            AppSettings snapshot
        """
        connection_strings = {
            key[len(CONNECTION_STRING_PREFIX):].lower(): value
            for key, value in source.items()
            if key.startswith(CONNECTION_STRING_PREFIX) and value
        }

        origins = source.get("CORS_ALLOWED_ORIGINS")
        if origins:
            cors_allowed_origins = tuple(o.strip() for o in origins.split(",") if o.strip())
        else:
            cors_allowed_origins = cls.cors_allowed_origins

        return cls(
            application_name=source.get("APP_NAME", cls.application_name),
            environment=source.get("ENVIRONMENT", cls.environment),
            detailed_errors=_as_bool(source.get("DETAILED_ERRORS")),
            log_level=source.get("LOG_LEVEL", cls.log_level).upper(),
            log_include_scopes=_as_bool(source.get("LOG_INCLUDE_SCOPES")),
            cors_allowed_origins=cors_allowed_origins,
            connection_strings=connection_strings,
        )

    def connection_string(self, feature_key: str) -> str:
        """
        Resolve the storage connection string for a feature.

        Falls back to the "default" connection string, then to
        DEFAULT_CONNECTION_STRING.
        """
        return (
            self.connection_strings.get(feature_key.lower())
            or self.connection_strings.get("default")
            or DEFAULT_CONNECTION_STRING
        )

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


def load_settings(env_file: Optional[str] = None) -> AppSettings:
    """
    Load application settings from the process environment.

    Args:
        env_file: Optional path to a .env file (defaults to python-dotenv lookup)

    Returns:
        AppSettings snapshot
    """
    load_dotenv(env_file)
    return AppSettings.from_mapping(os.environ)
