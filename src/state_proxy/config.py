"""Configuration loading from the environment or a config file."""

import json
import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from state_proxy.exceptions import ConfigError
from state_proxy.observability import LogLevel

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)\}")

CONFIG_FILE_VAR = "STATE_PROXY_CONFIG"


def substitute_env_vars(value: Any, environ: Mapping[str, str] | None = None) -> Any:
    """Recursively substitute ${VAR_NAME} patterns with environment variables."""
    env = os.environ if environ is None else environ
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            var_name = match.group(1)
            env_value = env.get(var_name)
            if env_value is None:
                raise ConfigError(f"Environment variable {var_name} is not set")
            return env_value

        return ENV_VAR_PATTERN.sub(replace, value)
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v, env) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(v, env) for v in value]
    return value


class ServerConfig(BaseModel):
    """HTTP listener configuration."""

    host: str = "0.0.0.0"
    port: int = Field(default=80, ge=0, le=65535)


class StoreConfig(BaseModel):
    """External store configuration."""

    backend: str = "redis"  # redis | memory
    host: str | None = None
    port: int = Field(default=6379, ge=1, le=65535)
    db: int = 0
    socket_timeout: float | None = None
    socket_connect_timeout: float | None = None

    @model_validator(mode="after")
    def require_host(self) -> "StoreConfig":
        if self.backend == "redis" and not self.host:
            raise ValueError("store host is required for the redis backend")
        return self

    def backend_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for the backend constructor."""
        return self.model_dump(exclude={"backend"})


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: str = "json"  # json | text


class Config(BaseModel):
    """Main configuration for state-proxy."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def _validate(cls, data: dict[str, Any]) -> "Config":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Load configuration from environment variables.

        STORE_HOST and STORE_PORT fall back to REDIS_HOST and REDIS_PORT.
        """
        env = os.environ if environ is None else environ

        store: dict[str, Any] = {
            "backend": env.get("STORE_BACKEND", "redis"),
            "host": env.get("STORE_HOST") or env.get("REDIS_HOST"),
            "port": env.get("STORE_PORT") or env.get("REDIS_PORT") or "6379",
        }
        if "STORE_DB" in env:
            store["db"] = env["STORE_DB"]

        data = {
            "server": {"port": env.get("SERVICE_PORT") or "80"},
            "store": store,
            "logging": {
                "level": env.get("LOG_LEVEL", "INFO").upper(),
                "format": env.get("LOG_FORMAT", "json"),
            },
        }
        return cls._validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML or JSON file."""
        path = Path(path)
        try:
            with path.open() as f:
                if path.suffix in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot parse config file {path}: {e}") from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Load configuration from a dictionary."""
        data = substitute_env_vars(data)
        return cls._validate(data)

    @classmethod
    def load(cls, environ: Mapping[str, str] | None = None) -> "Config":
        """Load from the file named by STATE_PROXY_CONFIG, else the environment."""
        env = os.environ if environ is None else environ
        config_file = env.get(CONFIG_FILE_VAR)
        if config_file:
            return cls.from_file(config_file)
        return cls.from_env(env)
