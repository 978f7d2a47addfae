"""Build settings for prefbuild.

There is no configuration file: the CLI runs with the defaults below and
embedders (or tests) construct their own BuildSettings.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

DEFAULT_ENTRY_POINT = Path("index.ts")
DEFAULT_BINARY_NAME = "pref-doctor"
DEFAULT_OUTPUT_ROOT = Path("build")
DEFAULT_COMPILER_COMMAND: Tuple[str, ...] = ("bun",)


@dataclass
class BuildSettings:
    """Settings shared by every build in one invocation."""

    entry_point: Path = DEFAULT_ENTRY_POINT
    binary_name: str = DEFAULT_BINARY_NAME
    output_root: Path = DEFAULT_OUTPUT_ROOT
    compiler_command: Tuple[str, ...] = DEFAULT_COMPILER_COMMAND
    verbose: bool = False
    show_progress: bool = True

    def __post_init__(self) -> None:
        self.entry_point = Path(self.entry_point)
        self.output_root = Path(self.output_root)
        self.compiler_command = tuple(self.compiler_command)
        if not self.binary_name:
            raise ValueError("binary_name must not be empty")
        if not self.compiler_command:
            raise ValueError("compiler_command must not be empty")
