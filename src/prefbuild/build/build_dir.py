"""Output directory management."""

import logging
from pathlib import Path
from typing import Union

from .build_utils import echo

logger = logging.getLogger(__name__)


def ensure_build_dir(build_dir: Union[str, Path], show_progress: bool = True) -> Path:
    """Create the build directory if it doesn't exist.

    Args:
        build_dir: Directory that will receive build artifacts
        show_progress: Whether to announce a newly created directory

    Returns:
        The directory as a Path

    Raises:
        OSError: If the directory cannot be created (e.g. PermissionError)
    """
    build_dir = Path(build_dir)
    if build_dir.is_dir():
        return build_dir

    build_dir.mkdir(parents=True, exist_ok=True)
    logger.debug(f"Created build directory {build_dir}")
    if show_progress:
        echo(f"Created build directory: {build_dir}/")
    return build_dir
