"""
Build orchestration for prefbuild.

This module coordinates builds across the platform matrix:
- Current: detect the host platform and build it (bare build if unknown)
- All: build every catalog platform in order, continuing past failures
- Specific: build one platform named by an '<os>-<arch>' specifier
- List: print the catalog
- Clean: remove the output directory tree
"""

import logging
import shutil
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from tqdm import tqdm

from ..config import BuildSettings
from ..platforms import (
    PLATFORM_CATALOG,
    PlatformDescriptor,
    PlatformDetector,
    PlatformError,
    parse_platform_spec,
    platform_names,
)
from .build_utils import echo
from .builder import BuildOutcome, SinglePlatformBuilder

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Aggregated outcomes of one invocation."""

    outcomes: List[BuildOutcome] = field(default_factory=list)

    def add(self, outcome: BuildOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def success(self) -> bool:
        """True when something was built and every build succeeded."""
        return self.total > 0 and self.succeeded == self.total

    @property
    def failed_platforms(self) -> List[str]:
        return [outcome.label for outcome in self.outcomes if not outcome.success]


class BuildOrchestrator:
    """
    Runs one build mode to completion.

    Builds are strictly sequential: each platform finishes, size report
    included, before the next one starts.

    Example usage:
        orchestrator = BuildOrchestrator(BuildSettings())
        summary = orchestrator.build_all()
        sys.exit(0 if summary.success else 1)
    """

    def __init__(
        self,
        settings: Optional[BuildSettings] = None,
        builder: Optional[SinglePlatformBuilder] = None,
        detector: Optional[PlatformDetector] = None,
        catalog: Tuple[PlatformDescriptor, ...] = PLATFORM_CATALOG,
    ):
        """
        Initialize build orchestrator.

        Args:
            settings: Build settings (defaults to BuildSettings())
            builder: Single-platform builder (defaults to one built from settings)
            detector: Host platform detector
            catalog: Platforms available to the 'all' and 'specific' modes
        """
        self.settings = settings or BuildSettings()
        self.builder = builder or SinglePlatformBuilder(self.settings)
        self.detector = detector or PlatformDetector()
        self.catalog = catalog

    def build_current(self) -> RunSummary:
        """Build for the host platform.

        Falls back to a bare build (no compiler target, no suffix) when the
        host isn't in the catalog, since the compiler may still support it.
        """
        summary = RunSummary()
        platform = self.detector.detect(catalog=self.catalog)

        if platform is None:
            system, machine = self.detector.host_identifiers()
            echo(
                f"Host platform {system}/{machine} is not in the build matrix, "
                "building with compiler defaults"
            )
            summary.add(self.builder.build_bare(self.settings.output_root))
            return summary

        echo(f"Current platform: {platform.name}")
        summary.add(self.builder.build(platform, self.settings.output_root))
        return summary

    def build_all(self) -> RunSummary:
        """Build every catalog platform, in catalog order."""
        summary = RunSummary()
        total = len(self.catalog)
        echo(f"Building {total} platforms...")

        with tqdm(
            self.catalog,
            desc="Platforms",
            unit="platform",
            disable=not self.settings.show_progress,
        ) as progress:
            for index, platform in enumerate(progress, start=1):
                if self.settings.verbose:
                    echo(f"[{index}/{total}] {platform.name} ({platform.compiler_target})")
                summary.add(self.builder.build(platform, self.settings.output_root))

        echo()
        echo(f"Build results: {summary.succeeded}/{summary.total} succeeded")
        if summary.failed_platforms:
            echo(f"Failed: {', '.join(summary.failed_platforms)}")
        return summary

    def build_platform(self, spec: str) -> RunSummary:
        """Build the single platform named by an '<os>-<arch>' specifier.

        An unknown specifier builds nothing and yields an empty, failed summary.
        """
        summary = RunSummary()
        try:
            platform = parse_platform_spec(spec, self.catalog)
        except PlatformError as e:
            echo(f"✗ {e}")
            echo(f"Valid platforms: {', '.join(platform_names(self.catalog))}")
            return summary

        summary.add(self.builder.build(platform, self.settings.output_root))
        return summary

    def list_platforms(self) -> Tuple[PlatformDescriptor, ...]:
        """Print the catalog without building anything."""
        echo("Supported platforms:")
        for platform in self.catalog:
            artifact = platform.artifact_name(self.settings.binary_name)
            echo(f"  {platform.name:<16} {platform.compiler_target:<20} {artifact}")
        return self.catalog

    def clean(self) -> bool:
        """Remove the output directory tree.

        Returns:
            True if nothing is left behind; False if removal failed (reported
            as a warning, never raised)
        """
        output_root = self.settings.output_root
        echo("Cleaning build files...")

        if not output_root.exists():
            echo(f"Nothing to clean: {output_root}/ does not exist")
            return True

        try:
            shutil.rmtree(output_root)
        except OSError as e:
            logger.debug(f"Failed to remove {output_root}: {e}")
            echo(f"⚠ Warning: could not fully remove {output_root}/: {e}")
            return False

        echo(f"✓ Removed {output_root}/")
        return True
