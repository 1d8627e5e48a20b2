"""Configuration loading and validation."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gistup.errors import ConfigError
from gistup.log import get_logger

logger = get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com/gists"
DEFAULT_CONFIG_PATH = Path("~/.config/gist/config.yaml")
TOKEN_ENV_VAR = "GIST_KEY"


class ApiConfig(BaseModel):
    """Settings for talking to the gist API."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    url: str = DEFAULT_API_URL
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("url", mode="before")
    @classmethod
    def expand_url(cls, v: str) -> str:
        """Expand environment variables in the endpoint URL."""
        return os.path.expandvars(str(v))


class RunConfig(BaseModel):
    """Everything one invocation needs, parsed once from the command line."""

    model_config = ConfigDict(frozen=True)

    public: bool
    token: str = ""
    clipboard: bool = False
    names: str = ""
    description: str = ""
    files: tuple[str, ...] = ()
    api: ApiConfig = ApiConfig()

    @field_validator("token", "names", "description", mode="before")
    @classmethod
    def none_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v


def load_api_config(config_path: Path | None = None) -> ApiConfig:
    """
    Load API settings from YAML.

    An explicit path must exist. Without one, ~/.config/gist/config.yaml is
    used when present and the defaults otherwise.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH.expanduser()
        if not config_path.is_file():
            return ApiConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config file {config_path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"cannot parse config file {config_path}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must contain a mapping")

    try:
        api = ApiConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"invalid config file {config_path}: {e.errors()[0]['msg']}") from e

    logger.debug("Loaded API settings from %s", config_path)
    return api
