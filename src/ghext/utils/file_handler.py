"""Filesystem checks for ghext"""

from pathlib import Path


def is_local_directory(path: str) -> bool:
    """True if ``path`` names an existing directory"""
    try:
        return Path(path).is_dir()
    except (OSError, ValueError):
        # Names the OS refuses to stat can't be directories we'd clone into
        return False
