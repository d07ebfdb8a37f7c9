"""Utilities Module

Helper functions for the document tailoring application.
"""
import re

from .exceptions import InvalidConfigurationError

# Path separators and NUL cannot appear in a single file name
_UNSAFE_NAME_CHARS = re.compile(r'[/\\\x00]')


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "45.3 KB")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def validate_base_name(base_name: str) -> None:
    """
    Validate a download base name.

    The name is used verbatim as the file name stem, so it may contain dots,
    spaces and any other characters except path separators.

    Args:
        base_name: Requested file name without extension

    Raises:
        InvalidConfigurationError: If the name is empty or would escape the
            download directory
    """
    if not base_name or not base_name.strip():
        raise InvalidConfigurationError("Base name cannot be empty")

    if base_name in ('.', '..'):
        raise InvalidConfigurationError(f"Base name is not a file name: {base_name!r}")

    if _UNSAFE_NAME_CHARS.search(base_name):
        raise InvalidConfigurationError(
            f"Base name must not contain path separators: {base_name!r}"
        )
