#!/usr/bin/env python3
# Copyright 2026 Wireframe Studio Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, type check, tests, sample check, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/"]),
    ("Type check", ["uv", "run", "ty", "check", "src/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=wireframe", "--cov-report=term-missing"]),
    ("Sample wireframes", ["uv", "run", "wireframe", "check", "--config", "examples/.wireframe-studio.yaml"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run every CI step, then print a summary. Returns the process exit code."""
    results = [_run_step(name, cmd) for name, cmd in STEPS]
    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _banner(title: str) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(title))
    print(chalk.blue(_RULE))


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    """Run one step from the repository root and time it."""
    _banner(name)
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=REPO_ROOT)
    return name, proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    _banner("  Summary")
    for name, passed, elapsed in results:
        if passed:
            print(chalk.green(f"  PASS  {name} ({elapsed:.1f}s)"))
        else:
            print(chalk.red(f"  FAIL  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
