"""Pydantic Settings for the Carerix webhooks client."""

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from carerix_webhooks.errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.carerix.io/webhooks/v1"
DEFAULT_ENV_FILE = ".env"
ENV_PREFIX = "CX_"


class OAuthConfig(BaseModel):
    """OAuth2 client credentials."""

    model_config = ConfigDict(frozen=True)

    auth_endpoint: str
    client_id: str
    client_secret: SecretStr
    scopes: Optional[str] = None


class CarerixConfig(BaseModel):
    """Resolved client configuration, built once per process."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    application_id: str
    oauth: OAuthConfig
    timeout: float = 30.0


class Settings(BaseSettings):
    """CX_* settings from the environment and an optional .env file.

    Values already present in the process environment take precedence over
    the ones in the env file. The env file is never written back into
    ``os.environ``.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    auth_endpoint: str
    client_id: str
    client_secret: SecretStr
    application_id: str
    scopes: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    @field_validator("auth_endpoint", "client_id", "client_secret", "application_id")
    @classmethod
    def require_value(cls, v: Any) -> Any:
        raw = v.get_secret_value() if isinstance(v, SecretStr) else v
        if not raw:
            raise ValueError("must not be empty")
        return v

    @field_validator("scopes", mode="before")
    @classmethod
    def empty_scopes_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("base_url", mode="before")
    @classmethod
    def empty_base_url_is_default(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_BASE_URL
        return v

    def to_config(self) -> CarerixConfig:
        """Build the immutable client configuration record."""
        return CarerixConfig(
            base_url=self.base_url,
            application_id=self.application_id,
            oauth=OAuthConfig(
                auth_endpoint=self.auth_endpoint,
                client_id=self.client_id,
                client_secret=self.client_secret,
                scopes=self.scopes,
            ),
            timeout=self.timeout,
        )


def _env_name(field_name: str) -> str:
    return f"{ENV_PREFIX}{field_name.upper()}"


def load_config(
    env_file: Optional[Union[str, Path]] = None,
    must_exist: bool = True,
) -> CarerixConfig:
    """Resolve the client configuration.

    Args:
        env_file: Optional dotenv file to read CX_* values from.
        must_exist: Fail when ``env_file`` does not exist. The CLI passes
            False for the default ``.env`` so the environment alone suffices.

    Returns:
        The frozen configuration record.

    Raises:
        ConfigurationError: If the env file cannot be read or a required
            value is missing or empty.
    """
    env_path: Optional[Path] = None
    if env_file is not None:
        env_path = Path(env_file).expanduser()
        if not env_path.is_file():
            if must_exist:
                raise ConfigurationError(
                    f"Failed to load env file at {env_file}: file not found"
                )
            env_path = None

    try:
        settings = Settings(_env_file=env_path)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else ""
        if error["type"] in ("missing", "value_error"):
            raise ConfigurationError(
                f"Missing required environment variable: {_env_name(field)}"
            ) from e
        raise ConfigurationError(
            f"Invalid value for {_env_name(field)}: {error['msg']}"
        ) from e
    except OSError as e:
        raise ConfigurationError(f"Failed to load env file at {env_file}: {e}") from e

    return settings.to_config()
