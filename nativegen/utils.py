"""Utility functions for loading catalogs and writing generated files.

This module provides JSON loading with proper error handling and the file
writing used when an export is saved to disk.
"""

import json
from pathlib import Path
from typing import Any

from .logging_config import get_logger

logger = get_logger(__name__)


class JSONLoaderError(Exception):
    """Custom exception for JSON loading errors."""

    pass


def load_json_object(file_path: str | Path, description: str = "JSON file") -> dict[str, Any]:
    """Load a local JSON file whose top level is an object.

    Catalogs, settings files and the settings store all share this layout.

    Args:
        file_path: Path to the JSON file.
        description: What the file holds, used in error messages.

    Returns:
        The parsed object, keys in document order.

    Raises:
        JSONLoaderError: If the file is missing, unreadable, not JSON, or not
            a JSON object.
    """
    file_path = Path(file_path)
    logger.debug(f"Loading {description} from {file_path}")

    if not file_path.exists():
        raise JSONLoaderError(f"{description.capitalize()} not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        raise JSONLoaderError(f"{description.capitalize()} must be a JSON file: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise JSONLoaderError(f"Invalid JSON in {description} {file_path}: {e}") from e
    except OSError as e:
        raise JSONLoaderError(f"Error reading {description} {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise JSONLoaderError(
            f"{description.capitalize()} must contain a JSON object: {file_path}"
        )

    logger.debug(f"Loaded {len(data)} top-level keys from {file_path}")
    return data


def write_text_file(
    directory: str | Path, filename: str, content: str, newline: str = ""
) -> Path:
    """Write generated text into ``directory/filename``.

    The directory is created when missing. Line endings are written exactly as
    they appear in ``content``.

    Args:
        directory: Output directory.
        filename: File name including extension.
        content: Text to write.
        newline: Passed to ``open``; the empty string disables translation.

    Returns:
        Path of the written file.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename

    with path.open("w", encoding="utf-8", newline=newline) as f:
        f.write(content)

    logger.info(f"Wrote {len(content)} characters to {path}")
    return path
