"""Compiler Executor.

This module runs the external ahead-of-time compiler that turns the
application entry point into a standalone executable.

Design:
    - Wraps subprocess.run for `bun build --compile`
    - Passes the cross-compilation target only when one is given
    - Converts non-zero exits and launch failures into CompilationError
    - Undecodable compiler output is replaced, never raised
    - No timeout: a hung compiler hangs the run
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from .build_utils import echo

logger = logging.getLogger(__name__)


class CompilationError(Exception):
    """Raised when the compiler cannot be started or reports failure."""

    pass


class BunCompiler:
    """Invokes `bun build --compile` for one entry point and one target."""

    def __init__(self, command: Sequence[str] = ("bun",), verbose: bool = False):
        """Initialize compiler executor.

        Args:
            command: Executable (plus any leading arguments) used to run bun
            verbose: Echo compiler output after successful builds
        """
        self.command = list(command)
        self.verbose = verbose

    def build_command(
        self, entry_point: Path, target: Optional[str], output_path: Path
    ) -> List[str]:
        """Assemble the compiler command line."""
        cmd = list(self.command)
        cmd.extend(["build", "--compile"])
        if target:
            cmd.append(f"--target={target}")
        cmd.append(f"--outfile={output_path}")
        cmd.append(str(entry_point))
        return cmd

    def compile(
        self, entry_point: Path, target: Optional[str], output_path: Path
    ) -> Path:
        """Compile the entry point into a standalone executable.

        Args:
            entry_point: Application entry point (e.g. index.ts)
            target: Compiler target identifier, or None for the host default
            output_path: Path of the executable to produce

        Returns:
            The output path

        Raises:
            CompilationError: If the compiler is missing or exits non-zero
        """
        cmd = self.build_command(entry_point, target, output_path)
        logger.debug(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, errors="replace"
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            raise CompilationError(f"Failed to run {self.command[0]}: {e}") from e

        if result.returncode != 0:
            error_msg = f"Compiler exited with status {result.returncode}"
            if result.stderr:
                error_msg += f"\nstderr: {result.stderr.strip()}"
            if result.stdout:
                error_msg += f"\nstdout: {result.stdout.strip()}"
            raise CompilationError(error_msg)

        if result.stderr:
            logger.debug(result.stderr.strip())
        if self.verbose and result.stdout:
            echo(result.stdout.rstrip())

        return output_path
