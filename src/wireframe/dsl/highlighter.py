# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tokenizer used for syntax highlighting of wireframe sources.

The grammar here is deliberately looser than the parser's: every character
run is classified on its own, without regard to indentation or block
structure, and nothing ever raises. Tokens carry their raw source text so
that a highlighter can colour the exact span.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """Highlighting classes produced by the tokenizer."""

    KEYWORD = "keyword"
    STRING = "string"
    VARIABLE = "variable"
    OPERATOR = "operator"
    COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    """A highlighted span with its source location.

    Attributes:
        type: The highlighting class.
        value: The raw source text of the span (quotes included for strings).
        line: 1-based line number where the span starts.
        column: 1-based column number where the span starts.
    """

    type: TokenType
    value: str
    line: int
    column: int


KEYWORDS: frozenset[str] = frozenset(
    {
        "screen",
        "label",
        "input",
        "button",
        "image",
        "vertical_stack",
        "horizontal_stack",
        "navigation_stack",
        "tab_stack",
        "drawer_stack",
    }
)


def tokenize(source: str) -> list[Token]:
    """Split wireframe source text into highlighting tokens.

    Whitespace and characters with no highlighting class are skipped. An
    unterminated string runs to the end of its line.

    Args:
        source: The full editor text.

    Returns:
        Tokens in source order.
    """
    return _Scanner(source).tokenize()


# ################
# Implementation
# ################

_OPERATOR_CHARS = frozenset("={}[],")


class _Scanner:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._at_line_start = True
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner over the whole source."""
        while self._pos < len(self._source):
            self._scan_token()
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self) -> str:
        """Return the character one position ahead, or '' at end of input."""
        if self._pos + 1 < len(self._source):
            return self._source[self._pos + 1]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
            self._at_line_start = True
        else:
            self._column += 1
        return ch

    def _rest_of_line(self) -> str:
        """Consume up to (not including) the next newline and return the text."""
        start = self._pos
        while self._pos < len(self._source) and self._current() != "\n":
            self._advance()
        return self._source[start : self._pos]

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in " \t\r\n":
            self._advance()
            return

        starts_comment = ch == "#" or (ch == "/" and self._peek() == "/")
        if self._at_line_start and starts_comment:
            self._emit(TokenType.COMMENT, self._rest_of_line(), line, col)
            return
        self._at_line_start = False

        if ch == "-" and self._peek() == ">":
            self._advance()
            self._advance()
            self._emit(TokenType.OPERATOR, "->", line, col)
        elif ch in _OPERATOR_CHARS:
            self._advance()
            self._emit(TokenType.OPERATOR, ch, line, col)
        elif ch == '"':
            self._scan_string(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_word(line, col)
        else:
            self._advance()

    def _scan_string(self, line: int, col: int) -> None:
        """Scan a double-quoted string, honouring backslash escapes."""
        start = self._pos
        self._advance()  # opening "
        while self._pos < len(self._source) and self._current() != "\n":
            ch = self._advance()
            if ch == "\\" and self._pos < len(self._source) and self._current() != "\n":
                self._advance()
            elif ch == '"':
                break
        self._emit(TokenType.STRING, self._source[start : self._pos], line, col)

    def _scan_word(self, line: int, col: int) -> None:
        """Scan an identifier and classify it as keyword or variable."""
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() in "_-"):
            if self._current() == "-" and self._peek() == ">":
                break
            self._advance()
        value = self._source[start : self._pos]
        token_type = TokenType.KEYWORD if value.lower() in KEYWORDS else TokenType.VARIABLE
        self._emit(token_type, value, line, col)

    def _emit(self, token_type: TokenType, value: str, line: int, col: int) -> None:
        self._tokens.append(Token(token_type, value, line, col))
