"""
Command-line interface for prefbuild.

This module provides the `prefbuild` CLI tool for compiling pref-doctor into
standalone executables. The first argument selects the command; only
`--platform` takes a further argument. `-v/--verbose` may be given anywhere.
"""

import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from prefbuild import __version__
from prefbuild.build import BuildOrchestrator
from prefbuild.cli_utils import BuildReporter, print_usage
from prefbuild.config import BuildSettings

CMD_HELP = "help"
CMD_VERSION = "version"
CMD_CURRENT = "current"
CMD_ALL = "all"
CMD_PLATFORM = "platform"
CMD_CLEAN = "clean"
CMD_LIST = "list"
CMD_INVALID = "invalid"

COMMAND_TOKENS: Dict[str, str] = {
    "-h": CMD_HELP,
    "--help": CMD_HELP,
    "-V": CMD_VERSION,
    "--version": CMD_VERSION,
    "-c": CMD_CURRENT,
    "--current": CMD_CURRENT,
    "-a": CMD_ALL,
    "--all": CMD_ALL,
    "-p": CMD_PLATFORM,
    "--platform": CMD_PLATFORM,
    "--clean": CMD_CLEAN,
    "--list": CMD_LIST,
}

VERBOSE_TOKENS = ("-v", "--verbose")


@dataclass
class CommandArgs:
    """Command selected by the leading command-line token."""

    command: str
    platform: Optional[str] = None
    token: Optional[str] = None
    verbose: bool = False


def parse_command(argv: Sequence[str]) -> CommandArgs:
    """Parse the leading token of the command line.

    `-v/--verbose` may appear anywhere and is removed before the command
    token is read.

    Args:
        argv: Arguments without the program name

    Returns:
        CommandArgs; unknown tokens map to CMD_INVALID
    """
    verbose = any(arg in VERBOSE_TOKENS for arg in argv)
    argv = [arg for arg in argv if arg not in VERBOSE_TOKENS]

    if not argv:
        return CommandArgs(command=CMD_CURRENT, verbose=verbose)

    token = argv[0]
    command = COMMAND_TOKENS.get(token, CMD_INVALID)

    if command == CMD_PLATFORM:
        spec = argv[1] if len(argv) > 1 else None
        return CommandArgs(command=command, platform=spec, token=token, verbose=verbose)

    return CommandArgs(command=command, token=token, verbose=verbose)


def current_command(settings: BuildSettings, reporter: BuildReporter) -> None:
    """Build for the host platform.

    Examples:
        prefbuild                 # Build current platform
        prefbuild --current -v    # Same, with compiler output
    """
    orchestrator = BuildOrchestrator(settings)
    summary = orchestrator.build_current()
    sys.exit(reporter.report(summary))


def all_command(settings: BuildSettings, reporter: BuildReporter) -> None:
    """Build for every supported platform.

    Examples:
        prefbuild --all
    """
    orchestrator = BuildOrchestrator(settings)
    summary = orchestrator.build_all()
    sys.exit(reporter.report(summary))


def platform_command(
    settings: BuildSettings, reporter: BuildReporter, spec: Optional[str]
) -> None:
    """Build for one platform.

    Examples:
        prefbuild --platform linux-arm64
        prefbuild -p windows-x64
    """
    if not spec:
        reporter.error("Missing platform", "Usage: prefbuild --platform <os-arch>")
        sys.exit(1)

    orchestrator = BuildOrchestrator(settings)
    summary = orchestrator.build_platform(spec)
    sys.exit(reporter.report(summary))


def clean_command(settings: BuildSettings, reporter: BuildReporter) -> None:
    """Remove the build directory. Always exits 0."""
    orchestrator = BuildOrchestrator(settings)
    if orchestrator.clean():
        reporter.success("Clean complete")
    else:
        reporter.warning("Clean finished with warnings")
    sys.exit(0)


def list_command(settings: BuildSettings) -> None:
    """Print the supported platforms."""
    orchestrator = BuildOrchestrator(settings)
    orchestrator.list_platforms()
    sys.exit(0)


def main(argv: Optional[List[str]] = None) -> None:
    """prefbuild - cross-platform build orchestrator for pref-doctor."""
    args = parse_command(sys.argv[1:] if argv is None else argv)
    reporter = BuildReporter(verbose=args.verbose)

    if args.command == CMD_HELP:
        print_usage()
        sys.exit(0)

    if args.command == CMD_VERSION:
        print(f"prefbuild {__version__}")
        sys.exit(0)

    if args.command == CMD_INVALID:
        reporter.error(f"Unknown option: {args.token}")
        print_usage()
        sys.exit(1)

    settings = BuildSettings(verbose=args.verbose)

    print(f"prefbuild v{__version__}")
    print()

    try:
        if args.command == CMD_CURRENT:
            current_command(settings, reporter)
        elif args.command == CMD_ALL:
            all_command(settings, reporter)
        elif args.command == CMD_PLATFORM:
            platform_command(settings, reporter, args.platform)
        elif args.command == CMD_CLEAN:
            clean_command(settings, reporter)
        elif args.command == CMD_LIST:
            list_command(settings)
    except KeyboardInterrupt:
        reporter.handle_keyboard_interrupt()
    except Exception as e:
        reporter.handle_unexpected_error(e)


if __name__ == "__main__":
    main()
