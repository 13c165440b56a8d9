# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Wireframe Studio: screen wireframes described in a small text language."""
