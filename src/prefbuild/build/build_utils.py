"""Build utilities for prefbuild.

This module provides helpers for build output: status lines that don't tear
the platform progress bar, and artifact size formatting.
"""

from typing import Optional

from tqdm import tqdm


def echo(message: str = "") -> None:
    """Print a status line above any active progress bar."""
    tqdm.write(message)


def format_size(size_bytes: Optional[int]) -> str:
    """Format a byte count for display, e.g. '58.3 MB (61133616 bytes)'."""
    if size_bytes is None:
        return "unknown size"
    if size_bytes >= 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.1f} MB ({size_bytes} bytes)"
    if size_bytes >= 1024:
        return f"{size_bytes / 1024:.1f} KB ({size_bytes} bytes)"
    return f"{size_bytes} bytes"
