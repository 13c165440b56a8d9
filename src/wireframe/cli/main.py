# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Wireframe Studio command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from yachalk import chalk

from wireframe.dsl.parser import parse
from wireframe.workspace.config import (
    CONFIG_FILE_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    StudioConfig,
    StudioConfigError,
    load_studio_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Wireframe Studio CLI."""
    parser = argparse.ArgumentParser(
        prog="wireframe",
        description="Wireframe Studio: screen wireframes from a small text language",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new Wireframe Studio project",
        description="Create a project file and a sample wireframe source.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the project in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Parse wireframe sources and report diagnostics",
        description="Parse wireframe sources and report every diagnostic found.",
    )
    check_parser.add_argument(
        "files",
        nargs="*",
        help="Source files to check (default: the sources listed in the project file)",
    )
    check_parser.add_argument(
        "--config",
        default=CONFIG_FILE_NAME,
        help=f"Project file used when no files are given (default: {CONFIG_FILE_NAME})",
    )
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Print each parse result as JSON instead of diagnostics",
    )

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive wireframe editor",
        description="Launch a web-based editor with live preview.",
    )
    serve_parser.add_argument(
        "file",
        nargs="?",
        help="Source file to open (default: the first source in the project file)",
    )
    serve_parser.add_argument(
        "--config",
        default=CONFIG_FILE_NAME,
        help=f"Project file (default: {CONFIG_FILE_NAME})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to run the server on (default: {DEFAULT_PORT})",
    )
    serve_parser.add_argument(
        "--host",
        default=None,
        help=f"Host to bind the server to (default: {DEFAULT_HOST})",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################

_SAMPLE_SOURCE = """\
navigation_stack root=Welcome

screen Welcome
  vertical_stack {
    label "Welcome to Wireframe Studio!"
    input placeholder="Enter your name"
    horizontal_stack {
      button "Sign Up"
      button "Login"
    }
  }

screen Dashboard
  label "Dashboard"
  image src="dashboard.png"

Welcome -> Dashboard
"""

_SAMPLE_FILE_NAME = "app.wireframe"


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _load_optional_config(config_path: Path) -> StudioConfig | None:
    """Load the project file if it exists.

    Raises:
        StudioConfigError: If the file exists but is invalid.
    """
    if not config_path.exists():
        return None
    return load_studio_config(config_path)


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    config_file = directory / CONFIG_FILE_NAME
    if config_file.exists():
        print(f"Error: project already exists at '{config_file}'.", file=sys.stderr)
        return 1

    config_content = (
        "# Wireframe Studio project configuration\n"
        "sources:\n"
        f"  - {_SAMPLE_FILE_NAME}\n"
        "server:\n"
        f"  host: {DEFAULT_HOST}\n"
        f"  port: {DEFAULT_PORT}\n"
    )
    config_file.write_text(config_content, encoding="utf-8")

    sample_file = directory / _SAMPLE_FILE_NAME
    if not sample_file.exists():
        sample_file.write_text(_SAMPLE_SOURCE, encoding="utf-8")

    print(f"Initialized Wireframe Studio project at '{config_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    if args.files:
        files = [Path(f) for f in args.files]
    else:
        try:
            config = _load_optional_config(Path(args.config))
        except StudioConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        if config is None or not config.sources:
            print("No wireframe sources given and none configured.")
            return 0
        files = config.source_paths()

    has_errors = False
    for path in files:
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
            has_errors = True
            continue

        result = parse(source)
        if args.json:
            print(result.model_dump_json(indent=2))
        else:
            for diag in result.diagnostics:
                location = chalk.bold(f"{path}:{diag.line_number}:")
                print(f"{location} {chalk.red(diag.message)}", file=sys.stderr)
        if result.has_errors:
            has_errors = True

    if has_errors:
        return 1

    if not args.json:
        print(chalk.green(f"Checked {len(files)} file(s). No issues found."))
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    try:
        config = _load_optional_config(Path(args.config))
    except StudioConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    source_path: Path | None = None
    if args.file is not None:
        source_path = Path(args.file)
    elif config is not None and config.sources:
        source_path = config.source_paths()[0]

    source = ""
    if source_path is not None:
        try:
            source = source_path.read_text(encoding="utf-8")
        except OSError as exc:
            print(f"Error: cannot read '{source_path}': {exc}", file=sys.stderr)
            return 1

    host = args.host or (config.server.host if config is not None else DEFAULT_HOST)
    port = args.port or (config.server.port if config is not None else DEFAULT_PORT)

    from wireframe.webui.app import create_app

    print(f"Serving Wireframe Studio at http://{host}:{port}/")
    app = create_app(source=source)
    app.run(host=host, port=port, debug=False)
    return 0
