"""Configuration loading for the Carerix webhooks client."""

from carerix_webhooks.config.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_ENV_FILE,
    CarerixConfig,
    OAuthConfig,
    Settings,
    load_config,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_ENV_FILE",
    "CarerixConfig",
    "OAuthConfig",
    "Settings",
    "load_config",
]
