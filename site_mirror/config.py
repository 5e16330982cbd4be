"""
Configuration loading for the site mirror.

The configuration is a JSON document read once at startup into an immutable
MirrorConfig that is handed to every component that needs it.
"""

import json
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .errors import ConfigError
from .utils.constants import DEFAULT_LINK_TYPES
from .utils.log import get_logger

logger = get_logger("config")


@dataclass(frozen=True)
class ManifestMetadata:
    """Descriptive fields recorded in the manifest."""

    author: str = ""
    license: str = ""
    version: str = ""
    project: str = ""


@dataclass(frozen=True)
class MirrorConfig:
    """Read-only settings shared by the crawl components."""

    # Ordered (tag, attribute) pairs driving link extraction
    link_types: Tuple[Tuple[str, str], ...] = DEFAULT_LINK_TYPES

    # Substrings that exclude a link outright
    block_names: Tuple[str, ...] = ()

    metadata: ManifestMetadata = field(default_factory=ManifestMetadata)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MirrorConfig":
        """
        Build a configuration from a parsed JSON document.

        Args:
            data: Mapping with optional ``linkTypes``, ``blockNames``,
                  ``author``, ``license``, ``version`` and ``project`` keys

        Returns:
            MirrorConfig instance

        Raises:
            ConfigError: If any field has the wrong shape
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        link_types = data.get("linkTypes")
        if link_types is None:
            pairs = DEFAULT_LINK_TYPES
        elif isinstance(link_types, dict):
            pairs = tuple(link_types.items())
        else:
            raise ConfigError("'linkTypes' must map tag names to attribute names")

        for tag, attribute in pairs:
            if not isinstance(attribute, str) or not tag or not attribute:
                raise ConfigError(f"Invalid linkTypes entry: {tag!r} -> {attribute!r}")

        block_names = data.get("blockNames", [])
        if not isinstance(block_names, list) or not all(
            isinstance(name, str) for name in block_names
        ):
            raise ConfigError("'blockNames' must be a list of strings")

        metadata = {}
        for key in ("author", "license", "version", "project"):
            value = data.get(key, "")
            if not isinstance(value, (str, int, float)):
                raise ConfigError(f"'{key}' must be a string")
            metadata[key] = str(value)

        return cls(
            link_types=tuple((tag.lower(), attr.lower()) for tag, attr in pairs),
            # An empty pattern would match every link
            block_names=tuple(name for name in block_names if name),
            metadata=ManifestMetadata(**metadata),
        )


def load_config(path: str) -> MirrorConfig:
    """
    Load the mirror configuration from a JSON file.

    Args:
        path: Path to the configuration file

    Returns:
        MirrorConfig instance

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    if not os.path.isfile(path):
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    config = MirrorConfig.from_dict(data)
    logger.debug(
        f"Loaded config from {path}: {len(config.link_types)} link types, "
        f"{len(config.block_names)} block names"
    )
    return config
