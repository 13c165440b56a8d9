# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for Wireframe Studio."""

from wireframe.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ServerConfig,
    StudioConfig,
    StudioConfigError,
    load_studio_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "ServerConfig",
    "StudioConfig",
    "StudioConfigError",
    "load_studio_config",
]
