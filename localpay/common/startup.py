"""Startup-time logging of the effective configuration."""

from pydantic_settings import BaseSettings

from localpay.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def startup_config(current: BaseSettings) -> dict[str, object]:
    """Map every settings field to its env var name and effective value.

    Values for secret-like names are redacted; fields left at their default
    are tagged so overrides stand out in the log line.
    """

    config: dict[str, object] = {}
    for name in type(current).model_fields:
        value: object = getattr(current, name)
        if any(marker in name for marker in SECRET_MARKERS):
            value = "<redacted>"
        elif name not in current.model_fields_set:
            value = f"{value} (default)"
        config[name.upper()] = value
    return config


def log_startup_config(current: BaseSettings) -> None:
    """Log the effective configuration once, for quick troubleshooting."""

    logger.info("startup_config=%s", startup_config(current))
