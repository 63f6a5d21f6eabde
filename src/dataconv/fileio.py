"""
Text file access used by the converter's load_* / save_* methods.

OS errors (FileNotFoundError, PermissionError, ...) propagate unchanged.
"""

import logging

logger = logging.getLogger(__name__)


def read_text_file(path, encoding: str = "utf-8") -> str:
    """Read a whole text file."""
    logger.debug("Reading %s", path)
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def write_text_file(path, text: str, encoding: str = "utf-8") -> None:
    """Write text to a file, replacing any existing content."""
    logger.debug("Writing %d characters to %s", len(text), path)
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


__all__ = ["read_text_file", "write_text_file"]
