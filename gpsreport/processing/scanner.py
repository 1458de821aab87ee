"""Scanner: walk the image directory and yield supported image paths."""

import logging
import os
from typing import Iterator, Union

from ..exceptions import ScanError

logger = logging.getLogger(__name__)

# Case-sensitive: "photo.JPG" is not picked up
SUPPORTED_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif")

PathType = Union[str, "os.PathLike[str]"]


def is_supported_image_ext(path: PathType) -> bool:
    """Return True if the path ends in one of the supported extensions.

    Args:
        path: File path (no filesystem access is made)

    Returns:
        True for ".jpg", ".jpeg", ".png" and ".gif" suffixes
    """
    return os.fspath(path).endswith(SUPPORTED_EXTENSIONS)


def validate_root(root: PathType) -> None:
    """Check that the scan root is a directory that can be listed.

    Args:
        root: Directory to scan

    Raises:
        ScanError: If the directory is missing, not a directory or unreadable
    """
    root = os.fspath(root)
    if not os.path.exists(root):
        raise ScanError(f"Image directory not found: {root}")
    if not os.path.isdir(root):
        raise ScanError(f"Image path is not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except OSError as e:
        raise ScanError(f"Cannot read image directory {root}: {e}") from e


def scan_images(root: PathType) -> Iterator[str]:
    """Yield paths of supported images below `root`, depth-first.

    Entries of each directory are visited in name order, so files and
    subdirectories are interleaved the way a sorted walk lists them.
    Symlinked directories are not followed.

    Args:
        root: Directory to scan

    Yields:
        Paths joined onto `root` (e.g. "images/trip/a.jpg")

    Raises:
        ScanError: If `root` itself cannot be listed
    """
    root = os.fspath(root)
    try:
        entries = _sorted_entries(root)
    except OSError as e:
        raise ScanError(f"Failed to walk image directory {root}: {e}") from e

    yield from _walk_entries(entries)


def _sorted_entries(directory: str):
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


def _walk_entries(entries) -> Iterator[str]:
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning(f"Skipping {entry.path}: {e}")
            continue

        if is_dir:
            try:
                children = _sorted_entries(entry.path)
            except OSError as e:
                logger.warning(f"Skipping directory {entry.path}: {e}")
                continue
            yield from _walk_entries(children)
        elif is_supported_image_ext(entry.path):
            yield entry.path
        else:
            logger.debug(f"Ignoring unsupported file: {entry.path}")
