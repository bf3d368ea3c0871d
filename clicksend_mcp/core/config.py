import os
from dataclasses import dataclass
from typing import Optional

import yaml
from dotenv import find_dotenv, load_dotenv

DEFAULT_BASE_URL = "https://rest.clicksend.com/v3"
CONFIG_ENV_VAR = "CLICKSEND_MCP_CONFIG"


class ConfigError(Exception):
    pass


class ConfigLoader:
    _instance = None
    _config = None

    def __new__(cls):
        """
        Create a singleton instance of ConfigLoader.
        Loads `.env` and the YAML configuration on first instantiation.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            cls._load_config()
        return cls._instance

    @classmethod
    def _load_config(cls):
        """
        Load the YAML file named by $CLICKSEND_MCP_CONFIG (or ./config.yaml) into _config.
        A missing file leaves an empty configuration so the server can run from env vars alone.
        """
        load_dotenv(find_dotenv(usecwd=True))
        config_path = os.environ.get(CONFIG_ENV_VAR) or os.path.join(os.getcwd(), "config.yaml")
        config_path = os.path.abspath(config_path)
        if not os.path.isfile(config_path):
            cls._config = {}
            return
        with open(config_path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"Cannot parse {config_path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping at the top level")
        cls._config = loaded

    @classmethod
    def reset(cls):
        """Forget the loaded configuration; the next instantiation reads it again."""
        cls._instance = None
        cls._config = None

    def get_config(self):
        """
        Return the loaded configuration dictionary.
        """
        return self._config


def get_config():
    """
    Helper function to get the singleton configuration instance's config dictionary.
    """
    return ConfigLoader().get_config()


@dataclass(frozen=True)
class APIConfig:
    """Upstream connection settings shared read-only by every tool invocation."""

    base_url: str = DEFAULT_BASE_URL
    basic_auth: Optional[str] = None
    timeout: Optional[float] = None

    def __post_init__(self):
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if not self.basic_auth:
            object.__setattr__(self, "basic_auth", None)


def _parse_timeout(value) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"request timeout must be a number, got {value!r}")
    if timeout <= 0:
        raise ConfigError(f"request timeout must be positive, got {value!r}")
    return timeout


def get_api_config() -> APIConfig:
    """Build the APIConfig; environment variables take precedence over config.yaml."""
    _cfg = get_config() or {}
    base_url = os.environ.get("CLICKSEND_BASE_URL") or _cfg.get("api_base_url") or DEFAULT_BASE_URL
    basic_auth = os.environ.get("CLICKSEND_BASIC_AUTH") or _cfg.get("basic_auth") or None
    timeout = os.environ.get("CLICKSEND_TIMEOUT") or _cfg.get("request_timeout")
    return APIConfig(
        base_url=str(base_url),
        basic_auth=str(basic_auth) if basic_auth else None,
        timeout=_parse_timeout(timeout),
    )
