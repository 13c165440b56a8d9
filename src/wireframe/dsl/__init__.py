# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Wireframe DSL: parsing, cross-reference checks and highlighting."""

from wireframe.dsl.highlighter import Token, TokenType, tokenize
from wireframe.dsl.parser import INDENT_UNIT, parse
from wireframe.dsl.references import check_links

__all__ = [
    "parse",
    "INDENT_UNIT",
    "check_links",
    "tokenize",
    "Token",
    "TokenType",
]
