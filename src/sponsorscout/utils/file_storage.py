"""File storage utilities for the local JSON document store."""

import os
import tempfile
from pathlib import Path


def _resolve_path(filepath: str) -> str:
    """
    Resolve a file path to an absolute path.

    Relative paths are resolved under ``settings.data_root`` so that stored
    documents land in the configured data directory. Absolute paths are returned
    unchanged.

    Args:
        filepath: An absolute or relative path string.

    Returns:
        Absolute path string.
    """
    if os.path.isabs(filepath):
        return filepath

    # Import here to avoid circular imports at module load time
    from sponsorscout.config import settings

    return os.path.join(settings.data_root, filepath)


def file_exists(filepath: str) -> bool:
    """
    Check if a file exists.

    Args:
        filepath: The path to check (absolute or relative to data_root).

    Returns:
        True if the file exists, False otherwise.
    """
    return os.path.exists(_resolve_path(filepath))


def load_file(filepath: str) -> str:
    """
    Load content from a file.

    Args:
        filepath: The path to the file to load (absolute or relative to data_root).

    Returns:
        The file content as a string.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        OSError: If the file cannot be read.
    """
    resolved = _resolve_path(filepath)
    with open(resolved, "r", encoding="utf-8") as f:
        return f.read()


def save_file(content: str, filepath: str) -> str:
    """
    Save content to a file atomically, creating directories if needed.

    The content is written to a temporary file in the same directory and then
    moved over the destination, so readers never observe a partial file.

    Args:
        content: The content to save.
        filepath: The destination path (absolute or relative to data_root).

    Returns:
        The absolute path where the file was saved.

    Raises:
        OSError: If the file cannot be written.

    Examples:
        >>> save_file('{"jobs": []}', "jobs.json")
    """
    resolved = _resolve_path(filepath)
    parent = Path(resolved).parent
    parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=parent, prefix=".tmp-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, resolved)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
    return resolved


def delete_file(filepath: str) -> bool:
    """
    Delete a file if it exists.

    Args:
        filepath: The path to delete (absolute or relative to data_root).

    Returns:
        True if a file was removed, False if there was nothing to delete.
    """
    resolved = _resolve_path(filepath)
    try:
        os.remove(resolved)
    except FileNotFoundError:
        return False
    return True
