"""Platform catalog and host detection."""

from .catalog import (
    PLATFORM_CATALOG,
    PlatformDescriptor,
    PlatformError,
    find_platform,
    parse_platform_spec,
    platform_names,
)
from .platform_detector import PlatformDetector

__all__ = [
    "PLATFORM_CATALOG",
    "PlatformDescriptor",
    "PlatformDetector",
    "PlatformError",
    "find_platform",
    "parse_platform_spec",
    "platform_names",
]
