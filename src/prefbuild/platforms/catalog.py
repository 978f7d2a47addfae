"""Platform catalog.

The fixed, ordered list of (os, arch) targets prefbuild can produce, each with
the compiler target identifier and the executable filename suffix for that
platform.

Supported Platforms:
    - Linux: linux-x64, linux-arm64
    - macOS: darwin-x64, darwin-arm64
    - Windows: windows-x64, windows-arm64
"""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

OSName = Literal["windows", "darwin", "linux"]
ArchName = Literal["x64", "arm64", "x86"]


class PlatformError(Exception):
    """Raised when a platform specifier cannot be resolved."""

    pass


@dataclass(frozen=True)
class PlatformDescriptor:
    """One buildable target."""

    os: OSName
    arch: ArchName
    compiler_target: str
    executable_suffix: str = ""

    @property
    def name(self) -> str:
        """Specifier form, e.g. 'linux-x64'."""
        return f"{self.os}-{self.arch}"

    def artifact_name(self, binary_name: str) -> str:
        """Filename of the executable built for this platform."""
        return f"{binary_name}-{self.name}{self.executable_suffix}"


PLATFORM_CATALOG: Tuple[PlatformDescriptor, ...] = (
    PlatformDescriptor("linux", "x64", "bun-linux-x64"),
    PlatformDescriptor("linux", "arm64", "bun-linux-arm64"),
    PlatformDescriptor("darwin", "x64", "bun-darwin-x64"),
    PlatformDescriptor("darwin", "arm64", "bun-darwin-arm64"),
    PlatformDescriptor("windows", "x64", "bun-windows-x64", ".exe"),
    PlatformDescriptor("windows", "arm64", "bun-windows-arm64", ".exe"),
)


def find_platform(
    os_name: str,
    arch: str,
    catalog: Tuple[PlatformDescriptor, ...] = PLATFORM_CATALOG,
) -> Optional[PlatformDescriptor]:
    """Return the catalog entry for an exact (os, arch) pair, or None."""
    for descriptor in catalog:
        if descriptor.os == os_name and descriptor.arch == arch:
            return descriptor
    return None


def platform_names(
    catalog: Tuple[PlatformDescriptor, ...] = PLATFORM_CATALOG,
) -> Tuple[str, ...]:
    """Return every valid specifier, in catalog order."""
    return tuple(descriptor.name for descriptor in catalog)


def parse_platform_spec(
    spec: str,
    catalog: Tuple[PlatformDescriptor, ...] = PLATFORM_CATALOG,
) -> PlatformDescriptor:
    """Resolve an '<os>-<arch>' specifier against the catalog.

    Args:
        spec: Platform specifier (e.g. "darwin-arm64")
        catalog: Catalog to search

    Returns:
        The matching PlatformDescriptor

    Raises:
        PlatformError: If the specifier is malformed or names no catalog entry
    """
    os_name, sep, arch = spec.partition("-")
    if not sep or not os_name or not arch:
        raise PlatformError(f"Invalid platform specifier: '{spec}' (expected <os>-<arch>)")

    descriptor = find_platform(os_name, arch, catalog)
    if descriptor is None:
        raise PlatformError(f"Unsupported platform: '{spec}'")
    return descriptor
