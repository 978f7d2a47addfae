"""
Single-platform builds.

SinglePlatformBuilder produces one executable: it makes sure the output
directory exists, runs the compiler for one catalog entry (or for the host
default when no entry applies) and reports the artifact size. Failures are
returned as a BuildOutcome instead of being raised.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config import BuildSettings
from ..platforms import PlatformDescriptor
from .build_dir import ensure_build_dir
from .build_utils import echo, format_size
from .compiler import BunCompiler, CompilationError

logger = logging.getLogger(__name__)


@dataclass
class BuildOutcome:
    """Result of one build attempt."""

    platform: Optional[PlatformDescriptor]
    success: bool
    output_path: Path
    size_bytes: Optional[int] = None
    message: str = ""
    build_time: float = 0.0

    @property
    def label(self) -> str:
        """Platform name, or 'current' for the bare host build."""
        return self.platform.name if self.platform else "current"


class SinglePlatformBuilder:
    """
    Builds the application for exactly one platform.

    Example usage:
        builder = SinglePlatformBuilder(BuildSettings())
        outcome = builder.build(PLATFORM_CATALOG[0])
        if outcome.success:
            print(f"Executable: {outcome.output_path}")
    """

    def __init__(
        self,
        settings: Optional[BuildSettings] = None,
        compiler: Optional[BunCompiler] = None,
    ):
        """
        Initialize builder.

        Args:
            settings: Build settings (defaults to BuildSettings())
            compiler: Compiler executor (defaults to one built from settings)
        """
        self.settings = settings or BuildSettings()
        self.compiler = compiler or BunCompiler(
            self.settings.compiler_command, verbose=self.settings.verbose
        )

    def output_path_for(
        self,
        platform: Optional[PlatformDescriptor],
        output_root: Optional[Path] = None,
    ) -> Path:
        """Deterministic artifact path for a platform (None = bare build)."""
        root = Path(output_root) if output_root is not None else self.settings.output_root
        if platform is None:
            return root / self.settings.binary_name
        return root / platform.artifact_name(self.settings.binary_name)

    def build(
        self, platform: PlatformDescriptor, output_root: Optional[Path] = None
    ) -> BuildOutcome:
        """Build the executable for one catalog platform."""
        return self._run(platform, self.output_path_for(platform, output_root))

    def build_bare(self, output_root: Optional[Path] = None) -> BuildOutcome:
        """Build for the host without a compiler target or filename suffix."""
        return self._run(None, self.output_path_for(None, output_root))

    def _run(
        self, platform: Optional[PlatformDescriptor], output_path: Path
    ) -> BuildOutcome:
        label = platform.name if platform else "current platform"
        target = platform.compiler_target if platform else None

        echo(f"Building {label}...")
        start_time = time.time()

        try:
            ensure_build_dir(output_path.parent, show_progress=self.settings.show_progress)
            self.compiler.compile(self.settings.entry_point, target, output_path)
        except (CompilationError, OSError) as e:
            build_time = time.time() - start_time
            echo(f"✗ Build failed for {label}: {e}")
            return BuildOutcome(
                platform=platform,
                success=False,
                output_path=output_path,
                message=str(e),
                build_time=build_time,
            )

        build_time = time.time() - start_time
        size_bytes = self._artifact_size(output_path)
        echo(f"✓ Built {output_path} ({format_size(size_bytes)}) in {build_time:.2f}s")

        return BuildOutcome(
            platform=platform,
            success=True,
            output_path=output_path,
            size_bytes=size_bytes,
            message="Build successful",
            build_time=build_time,
        )

    @staticmethod
    def _artifact_size(output_path: Path) -> Optional[int]:
        """Size of the artifact, or None if it isn't on disk."""
        try:
            return output_path.stat().st_size
        except OSError:
            logger.debug(f"Artifact {output_path} not found after successful build")
            return None
