# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line-oriented parser for wireframe sources.

Each physical line is classified on its own. Nesting is tracked with an
explicit stack of open contexts (a screen or a layout stack) together with
the indentation of the line that opened them. Malformed lines become
diagnostics and parsing continues with the next line.
"""

import logging
import re
from dataclasses import dataclass

from wireframe.dsl.references import check_links
from wireframe.model.document import (
    Diagnostic,
    DiagnosticCategory,
    DrawerStack,
    NavigationConfig,
    NavigationStack,
    ParseResult,
    ScreenLink,
    TabStack,
)
from wireframe.model.elements import (
    ButtonComponent,
    Component,
    Container,
    ImageComponent,
    InputComponent,
    LabelComponent,
    Screen,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

INDENT_UNIT = 2


def parse(source: str) -> ParseResult:
    """Parse wireframe source text into screens, navigation, links and diagnostics.

    Malformed input never raises; every problem is reported as a
    :class:`~wireframe.model.document.Diagnostic` and the rest of the
    document is still parsed.

    Args:
        source: The full source text, lines separated by ``\\n``.

    Returns:
        A new :class:`~wireframe.model.document.ParseResult`.

    Raises:
        TypeError: If *source* is not a string.
    """
    if not isinstance(source, str):
        raise TypeError(f"source must be a str, got {type(source).__name__}")
    result = _Parser().parse(source)
    logger.debug(
        "Parsed %d screen(s), %d link(s), %d diagnostic(s)",
        len(result.screens),
        len(result.links),
        len(result.diagnostics),
    )
    return result


# ################
# Implementation
# ################

_NAME = r"[A-Za-z0-9_-]+"
_NAME_RE = re.compile(_NAME)

_COMMENT_RE = re.compile(r"^\s*(//|#)")
_CLOSING_BRACE_RE = re.compile(r"^\}(.*)$")

# Top-level forms, in matching priority order.
_NAVIGATION_RE = re.compile(rf"^navigation_stack\s+root=({_NAME})$", re.IGNORECASE)
_TAB_RE = re.compile(r"^tab_stack\s+tabs=\[([^\]]*)\]$", re.IGNORECASE)
_DRAWER_RE = re.compile(rf"^drawer_stack\s+root=({_NAME})\s+drawer=({_NAME})$", re.IGNORECASE)
_LINK_RE = re.compile(rf"^({_NAME})\s*->\s*({_NAME})$")
_SCREEN_RE = re.compile(rf"^screen\s+({_NAME})$", re.IGNORECASE)

_TOP_LEVEL_FORMS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("navigation_stack", _NAVIGATION_RE),
    ("tab_stack", _TAB_RE),
    ("drawer_stack", _DRAWER_RE),
    ("link", _LINK_RE),
    ("screen", _SCREEN_RE),
)

# Nested forms.
_STACK_OPEN_RE = re.compile(r"^(vertical_stack|horizontal_stack)\s*\{$", re.IGNORECASE)
_LABEL_RE = re.compile(r'^label\s+"([^"]*)"$', re.IGNORECASE)
_INPUT_RE = re.compile(r'^input(?:\s+placeholder="([^"]*)")?$', re.IGNORECASE)
_BUTTON_RE = re.compile(r'^button\s+"([^"]*)"$', re.IGNORECASE)
_IMAGE_RE = re.compile(r'^image\s+src="([^"]*)"$', re.IGNORECASE)

# Accepted image sources: remote URL, absolute local path, bare image file name.
_IMAGE_SRC_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(https|http|ftp)://", re.IGNORECASE),
    re.compile(r"^/[^/]"),
    re.compile(r"^[A-Za-z0-9_-]+\.(png|jpg|jpeg|gif|svg)$", re.IGNORECASE),
)


@dataclass
class _Context:
    """An open block together with the indentation of its opening line."""

    container: Screen | Container
    base_indent: int

    @property
    def label(self) -> str:
        """Name used for this block in diagnostics."""
        if isinstance(self.container, Screen):
            return "screen"
        return self.container.kind


class _Parser:
    """Single-use parser state for one source text."""

    def __init__(self) -> None:
        self._result = ParseResult()
        self._stack: list[_Context] = []

    def parse(self, source: str) -> ParseResult:
        """Run the block pass, finalization and link validation."""
        for line_number, raw_line in enumerate(source.split("\n"), start=1):
            self._parse_line(raw_line, line_number)
        self._report_unclosed()
        self._result.diagnostics.extend(check_links(self._result.screens, self._result.links))
        return self._result

    # ------------------------------------------------------------------
    # Line dispatch
    # ------------------------------------------------------------------

    def _parse_line(self, raw_line: str, line_number: int) -> None:
        """Classify one physical line and apply it to the current context."""
        line = raw_line.rstrip()
        if not line or _COMMENT_RE.match(line):
            return

        content = line.lstrip()
        indent = len(line) - len(content)
        brace = _CLOSING_BRACE_RE.match(content)

        self._close_deindented(indent, is_brace=brace is not None)

        if brace is not None:
            self._close_with_brace(indent, brace.group(1).strip(), line_number)
            return

        if indent == 0:
            top_level = _match_top_level(content)
            if top_level is not None:
                # A new top-level construct ends the current screen.
                self._stack.clear()
                self._parse_top_level(*top_level, line_number)
                return

        if not self._stack:
            self._error(
                line_number,
                f'Unexpected content at top level: "{content}"',
                DiagnosticCategory.TOP_LEVEL_GRAMMAR,
            )
            return

        self._parse_nested(content, indent, line_number)

    # ------------------------------------------------------------------
    # Context stack
    # ------------------------------------------------------------------

    def _top_container(self) -> _Context | None:
        """Return the innermost context if it is a layout stack."""
        if self._stack and isinstance(self._stack[-1].container, Container):
            return self._stack[-1]
        return None

    def _close_deindented(self, indent: int, is_brace: bool) -> None:
        """Pop layout stacks that the current line's indentation has left.

        For a brace line, stacks are only popped down to the one the brace
        closes (the innermost stack opened at the same indentation). When no
        open stack matches, nothing is popped here and the brace is reported
        as misplaced against the innermost stack.
        """
        if is_brace and not any(
            isinstance(ctx.container, Container) and ctx.base_indent == indent for ctx in self._stack
        ):
            return
        while True:
            top = self._top_container()
            if top is None:
                return
            if is_brace and top.base_indent == indent:
                return
            if not is_brace and indent > top.base_indent:
                return
            self._stack.pop()

    def _close_with_brace(self, indent: int, trailing: str, line_number: int) -> None:
        """Apply a ``}`` line to the innermost open context."""
        if not self._stack:
            self._error(line_number, "Extraneous or misplaced closing brace '}'.", DiagnosticCategory.STRUCTURAL)
            return

        top = self._top_container()
        if top is None:
            self._error(
                line_number,
                "Closing brace '}' is not valid within a screen context.",
                DiagnosticCategory.STRUCTURAL,
            )
            return

        if indent != top.base_indent:
            self._error(
                line_number,
                f"Misplaced closing brace '}}' for stack '{top.label}'. "
                f"Expected at indent {top.base_indent}, found at {indent}.",
                DiagnosticCategory.STRUCTURAL,
            )
        self._stack.pop()

        if trailing:
            self._error(
                line_number,
                "Unexpected content after closing brace '}' on the same line.",
                DiagnosticCategory.STRUCTURAL,
            )

    def _report_unclosed(self) -> None:
        """Report the innermost stack still open at end of input."""
        for ctx in reversed(self._stack):
            if isinstance(ctx.container, Container):
                self._error(
                    ctx.container.line_number,
                    f"Unclosed {ctx.container.kind} block started on this line (missing '}}'?).",
                    DiagnosticCategory.STRUCTURAL,
                )
                return

    # ------------------------------------------------------------------
    # Top-level constructs
    # ------------------------------------------------------------------

    def _parse_top_level(self, form: str, match: re.Match[str], line_number: int) -> None:
        """Register a top-level construct recognised by :func:`_match_top_level`."""
        if form == "navigation_stack":
            self._register_navigation(NavigationStack(root=match.group(1), line_number=line_number))
        elif form == "tab_stack":
            tabs = [name.strip() for name in match.group(1).split(",") if name.strip()]
            if not tabs:
                self._error(
                    line_number,
                    "tab_stack must define at least one tab screen name.",
                    DiagnosticCategory.SEMANTIC,
                )
                return
            invalid = [name for name in tabs if not _NAME_RE.fullmatch(name)]
            for name in invalid:
                self._error(line_number, f'Invalid tab screen name: "{name}"', DiagnosticCategory.SEMANTIC)
            if invalid:
                return
            self._register_navigation(TabStack(tabs=tabs, line_number=line_number))
        elif form == "drawer_stack":
            self._register_navigation(
                DrawerStack(root=match.group(1), drawer=match.group(2), line_number=line_number)
            )
        elif form == "link":
            self._result.links.append(
                ScreenLink(source=match.group(1), destination=match.group(2), line_number=line_number)
            )
        else:
            self._open_screen(match.group(1), line_number)

    def _register_navigation(self, config: NavigationConfig) -> None:
        """Keep the first navigation construct; report and drop any later one."""
        if self._result.navigation:
            self._error(
                config.line_number,
                "Only one global navigation construct (navigation_stack, tab_stack, or drawer_stack) is allowed.",
                DiagnosticCategory.SEMANTIC,
            )
            return
        self._result.navigation.append(config)

    def _open_screen(self, name: str, line_number: int) -> None:
        """Register a screen and make it the current context.

        A duplicate name is reported but the screen is still kept.
        """
        if name in self._result.screen_names():
            self._error(line_number, f"Duplicate screen name: {name}", DiagnosticCategory.STRUCTURAL)
        screen = Screen(name=name, line_number=line_number)
        self._result.screens.append(screen)
        self._stack.append(_Context(container=screen, base_indent=0))

    # ------------------------------------------------------------------
    # Nested content
    # ------------------------------------------------------------------

    def _parse_nested(self, content: str, indent: int, line_number: int) -> None:
        """Parse a line that belongs to the innermost open context."""
        ctx = self._stack[-1]
        expected = ctx.base_indent + INDENT_UNIT
        if indent < expected:
            self._error(
                line_number,
                f"Incorrect indentation. Expected at least {expected} spaces for content "
                f"within '{ctx.label}'. Found {indent} spaces.",
                DiagnosticCategory.INDENTATION,
            )
            return

        stack_match = _STACK_OPEN_RE.match(content)
        if stack_match:
            container = Container(kind=stack_match.group(1).lower(), line_number=line_number)
            ctx.container.children.append(container)
            self._stack.append(_Context(container=container, base_indent=indent))
            return

        component = self._parse_component(content, line_number)
        if component is None:
            self._error(
                line_number,
                f"Invalid syntax or misplaced content within '{ctx.label}': \"{content}\"",
                DiagnosticCategory.NESTED_GRAMMAR,
            )
            return
        ctx.container.children.append(component)

    def _parse_component(self, content: str, line_number: int) -> Component | None:
        """Return the leaf component declared by *content*, or None if it is not one."""
        match = _LABEL_RE.match(content)
        if match:
            return LabelComponent(text=match.group(1), line_number=line_number)

        match = _INPUT_RE.match(content)
        if match:
            return InputComponent(placeholder=match.group(1) or "", line_number=line_number)

        match = _BUTTON_RE.match(content)
        if match:
            return ButtonComponent(text=match.group(1), line_number=line_number)

        match = _IMAGE_RE.match(content)
        if match:
            src = match.group(1)
            if not _is_valid_image_src(src):
                self._error(
                    line_number,
                    f'Invalid image src: "{src}". Must be a valid URL, an absolute path, or a local file name.',
                    DiagnosticCategory.CONTENT,
                )
            return ImageComponent(src=src, line_number=line_number)

        return None

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def _error(self, line_number: int, message: str, category: DiagnosticCategory) -> None:
        self._result.diagnostics.append(Diagnostic(line_number=line_number, message=message, category=category))


def _match_top_level(content: str) -> tuple[str, re.Match[str]] | None:
    """Return the first top-level form matching *content*, if any."""
    for form, pattern in _TOP_LEVEL_FORMS:
        match = pattern.match(content)
        if match:
            return form, match
    return None


def _is_valid_image_src(src: str) -> bool:
    """Return True if *src* is a URL, an absolute path, or a bare image file name."""
    return any(pattern.match(src) for pattern in _IMAGE_SRC_PATTERNS)
