# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the project configuration module."""

from pathlib import Path

import pytest

from wireframe.workspace import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    StudioConfig,
    StudioConfigError,
    load_studio_config,
)

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a project file and return its path."""
    config_file = tmp_path / ".wireframe-studio.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_config_uses_defaults(tmp_path: Path) -> None:
    """An empty project file yields no sources and the default server settings."""
    config = load_studio_config(_write_config(tmp_path, ""))

    assert isinstance(config, StudioConfig)
    assert config.sources == []
    assert config.server.host == DEFAULT_HOST
    assert config.server.port == DEFAULT_PORT
    assert config.root == tmp_path.resolve()


def test_config_with_sources(tmp_path: Path) -> None:
    """Sources are read in order and resolved against the project directory."""
    content = """\
sources:
  - app.wireframe
  - screens/settings.wireframe
"""
    config = load_studio_config(_write_config(tmp_path, content))

    assert config.sources == ["app.wireframe", "screens/settings.wireframe"]
    assert config.source_paths() == [
        (tmp_path / "app.wireframe").resolve(),
        (tmp_path / "screens" / "settings.wireframe").resolve(),
    ]


def test_config_with_server_settings(tmp_path: Path) -> None:
    """Host and port can be overridden."""
    content = """\
server:
  host: 0.0.0.0
  port: 9000
"""
    config = load_studio_config(_write_config(tmp_path, content))

    assert config.server.host == "0.0.0.0"
    assert config.server.port == 9000


def test_partial_server_settings_keep_defaults(tmp_path: Path) -> None:
    """Missing server keys fall back to their defaults."""
    config = load_studio_config(_write_config(tmp_path, "server:\n  port: 8080\n"))

    assert config.server.host == DEFAULT_HOST
    assert config.server.port == 8080


def test_comment_only_config(tmp_path: Path) -> None:
    """A file holding only comments is treated as empty."""
    config = load_studio_config(_write_config(tmp_path, "# nothing here\n"))
    assert config.sources == []


# ###############
# Error Cases
# ###############


def test_missing_file(tmp_path: Path) -> None:
    """A missing project file raises StudioConfigError."""
    with pytest.raises(StudioConfigError, match="not found"):
        load_studio_config(tmp_path / "missing.yaml")


def test_invalid_yaml(tmp_path: Path) -> None:
    """Malformed YAML raises StudioConfigError."""
    with pytest.raises(StudioConfigError, match="Invalid YAML"):
        load_studio_config(_write_config(tmp_path, "sources: [unclosed\n"))


def test_top_level_must_be_mapping(tmp_path: Path) -> None:
    """A YAML list at the top level is rejected."""
    with pytest.raises(StudioConfigError, match="must be a YAML mapping"):
        load_studio_config(_write_config(tmp_path, "- app.wireframe\n"))


def test_sources_must_be_list(tmp_path: Path) -> None:
    """A scalar sources entry is rejected."""
    with pytest.raises(StudioConfigError, match="'sources' must be a list"):
        load_studio_config(_write_config(tmp_path, "sources: app.wireframe\n"))


def test_source_entries_must_be_strings(tmp_path: Path) -> None:
    """Each source must be a path string."""
    with pytest.raises(StudioConfigError, match=r"sources\[1\] must be a string"):
        load_studio_config(_write_config(tmp_path, "sources:\n  - a.wireframe\n  - 42\n"))


def test_server_must_be_mapping(tmp_path: Path) -> None:
    """A scalar server entry is rejected."""
    with pytest.raises(StudioConfigError, match="server must be a YAML mapping"):
        load_studio_config(_write_config(tmp_path, "server: localhost\n"))


def test_host_must_be_string(tmp_path: Path) -> None:
    """A non-string host is rejected."""
    with pytest.raises(StudioConfigError, match="'host' must be a string"):
        load_studio_config(_write_config(tmp_path, "server:\n  host: 8\n"))


@pytest.mark.parametrize("port", ["yes", "'8050'", "80.5"])
def test_port_must_be_integer(tmp_path: Path, port: str) -> None:
    """Booleans, strings and floats are not ports."""
    with pytest.raises(StudioConfigError, match="'port' must be an integer"):
        load_studio_config(_write_config(tmp_path, f"server:\n  port: {port}\n"))


@pytest.mark.parametrize("port", [0, 65536, -1])
def test_port_must_be_in_range(tmp_path: Path, port: int) -> None:
    """Ports outside 1..65535 are rejected."""
    with pytest.raises(StudioConfigError, match="between 1 and 65535"):
        load_studio_config(_write_config(tmp_path, f"server:\n  port: {port}\n"))
