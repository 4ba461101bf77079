"""
Config writer - persists resolved records.

The resolver is pure; this is where files get written. Each entity gets
<configs-root>/<segment>/<entity>.config, where segment and entity come
from splitting the entity name at its first '.' (net1.client ->
net1/client.config).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from .errors import ConfigurationError
from .model import ResolvedEntityConfig

log = logging.getLogger(__name__)

CONFIG_SUFFIX = ".config"


def output_path(configs_root: str | Path, entity_name: str, net_name: str) -> Path:
    segment, sep, stem = entity_name.partition(".")
    if not sep:
        segment, stem = net_name, entity_name
    return Path(configs_root) / segment / f"{stem}{CONFIG_SUFFIX}"


def encode_config(config: ResolvedEntityConfig) -> str:
    """Tab-indented JSON; identical records give identical text."""
    return json.dumps(config.to_dict(), indent="\t")


def encode_configs(configs: Iterable[ResolvedEntityConfig]) -> str:
    return json.dumps([c.to_dict() for c in configs], indent="\t")


class ConfigWriter:
    """
    Writes ResolvedEntityConfig records under a configs root.

    Usage:
        writer = ConfigWriter("configs")
        paths = writer.write_all(configs)
    """

    def __init__(self, configs_root: str | Path, net_names: dict[str, str] | None = None):
        self.configs_root = Path(configs_root)
        # entity name -> netName, for names without a '.' separator
        self._net_names = dict(net_names or {})

    def path_for(self, config: ResolvedEntityConfig) -> Path:
        return output_path(self.configs_root, config.name, self._net_names.get(config.name, ""))

    def write(self, config: ResolvedEntityConfig) -> Path:
        path = self.path_for(config)
        path.parent.mkdir(parents=True, exist_ok=True)
        log.info("Writing entityConfig to %s ...", path)
        path.write_text(encode_config(config), encoding="utf-8")
        return path

    def write_all(self, configs: Iterable[ResolvedEntityConfig]) -> list[Path]:
        """Write every record; refuses up front if two records share a path."""
        configs = list(configs)
        owners: dict[Path, str] = {}
        for config in configs:
            path = self.path_for(config)
            if path in owners:
                raise ConfigurationError(
                    f"{config.name}: output path {path} is also used by {owners[path]}",
                    entity=config.name,
                )
            owners[path] = config.name
        return [self.write(config) for config in configs]
