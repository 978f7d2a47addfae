"""CLI utility functions for prefbuild.

This module provides common utilities used across CLI commands including:
- Usage text
- Build result reporting (per-platform table and run summary)
- Interrupt and unexpected-error exits
"""

import sys
import traceback

from prefbuild import __version__
from prefbuild.build import RunSummary
from prefbuild.build.build_utils import echo, format_size
from prefbuild.platforms import platform_names

USAGE = f"""\
prefbuild {__version__} - build pref-doctor executables

Usage: prefbuild [command] [-v]

Commands:
  (none), -c, --current       Build for the current platform (default)
  -a, --all                   Build for every supported platform
  -p, --platform <os-arch>    Build for one platform (e.g. linux-x64)
  --list                      List supported platforms
  --clean                     Remove the build directory
  -V, --version               Show version
  -h, --help                  Show this help

Options:
  -v, --verbose               Show compiler output and tracebacks

Platforms: {", ".join(platform_names())}
"""


class BuildReporter:
    """Reports build runs to the operator, with ANSI colors."""

    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _colored(self, color: str, text: str) -> str:
        return f"{color}{text}{self.RESET}"

    def error(self, title: str, details: str = "") -> None:
        echo()
        echo(self._colored(self.RED, f"✗ {title}"))
        if details:
            echo()
            echo(details)
        echo()

    def success(self, message: str) -> None:
        echo()
        echo(self._colored(self.GREEN, f"✓ {message}"))

    def warning(self, message: str) -> None:
        echo()
        echo(self._colored(self.YELLOW, f"⚠ {message}"))

    def results_table(self, summary: RunSummary) -> None:
        """One line per attempted platform: status, artifact, size, time."""
        echo()
        echo("Platform          Status  Artifact")
        for outcome in summary.outcomes:
            if outcome.success:
                status = "ok"
                detail = (
                    f"{outcome.output_path} ({format_size(outcome.size_bytes)}, "
                    f"{outcome.build_time:.2f}s)"
                )
            else:
                status = "FAILED"
                detail = outcome.message.splitlines()[0] if outcome.message else ""
            echo(f"{outcome.label:<17} {status:<7} {detail}")

    def report(self, summary: RunSummary) -> int:
        """Print the final status of a build run and return its exit code."""
        if summary.total > 1:
            self.results_table(summary)

        if summary.success:
            if summary.total == 1:
                outcome = summary.outcomes[0]
                self.success("Build successful!")
                echo(f"Executable: {outcome.output_path} ({format_size(outcome.size_bytes)})")
            else:
                self.success(f"All {summary.total} platforms built successfully!")
            return 0

        if summary.total == 0:
            self.error("No build was attempted")
        elif summary.total == 1:
            self.error("Build failed!", summary.outcomes[0].message)
        else:
            self.error(
                "Build failed!",
                f"{summary.succeeded}/{summary.total} platforms succeeded. "
                f"Failed: {', '.join(summary.failed_platforms)}",
            )
        return 1

    def handle_keyboard_interrupt(self) -> None:
        """Exit with the SIGINT status after a warning."""
        self.warning("Build interrupted")
        sys.exit(130)

    def handle_unexpected_error(self, error: Exception) -> None:
        """Exit 1 with a message; the traceback is shown in verbose mode."""
        self.error("Unexpected error", f"{type(error).__name__}: {error}")

        if self.verbose:
            echo("Traceback:")
            echo(traceback.format_exc())

        sys.exit(1)


def print_usage() -> None:
    """Print command usage."""
    print(USAGE)
