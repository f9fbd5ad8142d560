"""Config file handling: connection settings and the persisted plugin token."""
from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass

import click

from vts_cli.errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "vtubestudio-cli"
CONFIG_FILENAME = "config.json"

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8001
DEFAULT_PLUGIN_NAME = "VTube Studio CLI"
DEFAULT_PLUGIN_DEVELOPER = "Walfie"


@dataclass
class Config:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    token: str | None = None
    plugin_name: str = DEFAULT_PLUGIN_NAME
    plugin_developer: str = DEFAULT_PLUGIN_DEVELOPER

    @property
    def websocket_url(self) -> str:
        return f"ws://{self.host}:{self.port}"

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Build a Config from parsed JSON, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError("config file must contain a JSON object")

        known = {f.name for f in dataclasses.fields(cls)}
        values = {k: v for k, v in data.items() if k in known}

        port = values.get("port", DEFAULT_PORT)
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            raise ConfigError(f"invalid port in config file: {port!r}")

        for key in ("host", "plugin_name", "plugin_developer"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"invalid {key} in config file: {values[key]!r}")

        token = values.get("token")
        if token is not None and not isinstance(token, str):
            raise ConfigError("invalid token in config file")

        return cls(**values)


def default_config_path() -> str:
    """Platform config dir for vts-cli, e.g. ~/.config/vtubestudio-cli/config.json."""
    return os.path.join(click.get_app_dir(APP_NAME), CONFIG_FILENAME)


def resolve_config_path(override: str | None = None) -> str:
    if override:
        return os.path.abspath(override)
    return default_config_path()


def load_config(config_path: str) -> Config:
    """Load the config file, raising ConfigError if it is missing or broken."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ConfigError(
            f"failed to load config file from {config_path!r} "
            f"(try running `vts config init` to create the file)"
        )
    except OSError as e:
        raise ConfigError(f"failed to read config file {config_path!r}: {e}")
    except json.JSONDecodeError as e:
        raise ConfigError(f"failed to parse JSON from config file: {e}")

    return Config.from_dict(data)


def save_config(config_path: str, config: Config) -> None:
    """Write the config as pretty JSON, creating parent directories."""
    base_dir = os.path.dirname(os.path.abspath(config_path))
    try:
        os.makedirs(base_dir, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"failed to create directory {base_dir!r}: {e}")

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(config.to_dict(), f, indent=2)
            f.write("\n")
    except OSError as e:
        logger.error("Failed to write config file %s", config_path)
        raise ConfigError(f"failed to write config file {config_path!r}: {e}")
