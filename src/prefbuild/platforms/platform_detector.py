"""Host Platform Detection.

Maps the operating system and CPU architecture reported by the running
interpreter onto an entry of the platform catalog.

Normalization tables:
    - OS: windows/win32/cygwin/msys -> windows, darwin -> darwin, linux -> linux
    - Arch: x86_64/amd64/x64 -> x64, aarch64/arm64 -> arm64, i386/i686/x86 -> x86
"""

import logging
import platform
from typing import Dict, Optional, Tuple

from .catalog import PLATFORM_CATALOG, PlatformDescriptor, find_platform

logger = logging.getLogger(__name__)

OS_ALIASES: Dict[str, str] = {
    "windows": "windows",
    "win32": "windows",
    "cygwin": "windows",
    "msys": "windows",
    "darwin": "darwin",
    "linux": "linux",
}

ARCH_ALIASES: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


class PlatformDetector:
    """Detects the host platform for current-platform builds."""

    @staticmethod
    def normalize_os(system: str) -> Optional[str]:
        """Translate a host OS identifier, or None if it is not recognized."""
        return OS_ALIASES.get(system.strip().lower())

    @staticmethod
    def normalize_arch(machine: str) -> Optional[str]:
        """Translate a host CPU identifier, or None if it is not recognized."""
        return ARCH_ALIASES.get(machine.strip().lower())

    @staticmethod
    def host_identifiers() -> Tuple[str, str]:
        """Return the raw (system, machine) pair reported by the interpreter."""
        return platform.system(), platform.machine()

    @staticmethod
    def detect(
        system: Optional[str] = None,
        machine: Optional[str] = None,
        catalog: Tuple[PlatformDescriptor, ...] = PLATFORM_CATALOG,
    ) -> Optional[PlatformDescriptor]:
        """Detect the catalog entry matching the host platform.

        Args:
            system: OS identifier (default: platform.system())
            machine: Architecture identifier (default: platform.machine())
            catalog: Catalog to search

        Returns:
            The matching PlatformDescriptor, or None when the host OS or
            architecture is unrecognized or the pair is not in the catalog
        """
        if system is None or machine is None:
            host_system, host_machine = PlatformDetector.host_identifiers()
            system = host_system if system is None else system
            machine = host_machine if machine is None else machine

        os_name = PlatformDetector.normalize_os(system)
        if os_name is None:
            logger.debug(f"Unrecognized operating system: {system!r}")
            return None

        arch = PlatformDetector.normalize_arch(machine)
        if arch is None:
            logger.debug(f"Unrecognized architecture: {machine!r}")
            return None

        descriptor = find_platform(os_name, arch, catalog)
        if descriptor is None:
            logger.debug(f"Host platform {os_name}-{arch} is not in the supported matrix")
        return descriptor
