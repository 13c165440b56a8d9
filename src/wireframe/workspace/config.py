# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the Wireframe Studio project file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".wireframe-studio.yaml"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8050


class StudioConfigError(Exception):
    """Raised when a project file is invalid or cannot be loaded."""


@dataclass
class ServerConfig:
    """Where the interactive studio is served."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


@dataclass
class StudioConfig:
    """The parsed configuration of a Wireframe Studio project.

    Attributes:
        root: Directory containing the project file; sources are relative to it.
        sources: Wireframe source files, relative to *root*.
        server: Settings for ``wireframe serve``.
    """

    root: Path
    sources: list[str] = field(default_factory=list)
    server: ServerConfig = field(default_factory=ServerConfig)

    def source_paths(self) -> list[Path]:
        """Return the configured sources as absolute paths."""
        return [(self.root / source).resolve() for source in self.sources]


def load_studio_config(path: Path) -> StudioConfig:
    """Load and parse a Wireframe Studio project file.

    Args:
        path: Path to the ``.wireframe-studio.yaml`` file.

    Returns:
        A StudioConfig instance populated from the file.

    Raises:
        StudioConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise StudioConfigError(f"Project file not found: {path}") from None
    except OSError as exc:
        raise StudioConfigError(f"Cannot read project file: {exc}") from exc

    return _parse_studio_config(text, root=path.resolve().parent, source_label=str(path))


# ################
# Implementation
# ################


def _parse_studio_config(text: str, root: Path, source_label: str = "<string>") -> StudioConfig:
    """Parse project YAML text into a StudioConfig.

    An empty document is accepted and yields the defaults.

    Raises:
        StudioConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise StudioConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise StudioConfigError(f"{source_label}: project file must be a YAML mapping")

    sources: list[str] = []
    if "sources" in data:
        raw_sources = data["sources"]
        if not isinstance(raw_sources, list):
            raise StudioConfigError(f"{source_label}: 'sources' must be a list")
        for index, entry in enumerate(raw_sources):
            if not isinstance(entry, str):
                raise StudioConfigError(f"{source_label}: sources[{index}] must be a string")
            sources.append(entry)

    server = ServerConfig()
    if "server" in data:
        server = _parse_server(data["server"], source_label)

    return StudioConfig(root=root, sources=sources, server=server)


def _parse_server(entry: object, source_label: str) -> ServerConfig:
    """Parse the optional ``server`` mapping."""
    location = f"{source_label}: server"
    if not isinstance(entry, dict):
        raise StudioConfigError(f"{location} must be a YAML mapping")

    host = entry.get("host", DEFAULT_HOST)
    if not isinstance(host, str):
        raise StudioConfigError(f"{location}: 'host' must be a string")

    port = entry.get("port", DEFAULT_PORT)
    # bool is an int subclass; `port: yes` must not pass as port 1.
    if not isinstance(port, int) or isinstance(port, bool):
        raise StudioConfigError(f"{location}: 'port' must be an integer")
    if not 1 <= port <= 65535:
        raise StudioConfigError(f"{location}: 'port' must be between 1 and 65535, got {port}")

    return ServerConfig(host=host, port=port)
