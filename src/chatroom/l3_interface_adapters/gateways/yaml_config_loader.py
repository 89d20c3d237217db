"""Gateway: YAML configuration file lookup and reading."""

from __future__ import annotations

from pathlib import Path

import yaml

from chatroom.l1_entities.errors import ConfigFileError
from chatroom.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Finds the chatroom config file and reads it as a raw mapping.

    Validation and defaults live in L4 (``build_app_config``); this gateway
    only knows where config files are and how to parse them.
    """

    def resolve(self, config_path: str | None = None) -> Path | None:
        """Return the explicit path, else the first existing default location, else None."""
        if config_path is not None:
            path = Path(config_path)
            if not path.exists():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)

    def read(self, path: Path | None) -> dict:
        """Parse *path* as a YAML mapping. ``None`` or an empty file reads as ``{}``."""
        if path is None:
            return {}
        try:
            data = yaml.safe_load(path.read_text(encoding='utf-8'))
        except yaml.YAMLError as e:
            raise ConfigFileError(f'Cannot parse {path}: {e}') from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigFileError(f'{path}: top level must be a mapping, got {type(data).__name__}')
        return data
