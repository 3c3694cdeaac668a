"""Write rendered scripts to uniquely named temp files."""

import logging
import os
import tempfile
import uuid
from pathlib import Path

from toastwrap.core.errors import StageError

logger = logging.getLogger(__name__)

# PowerShell 5 reads BOM-less scripts as the ANSI code page
UTF8_BOM = b"\xef\xbb\xbf"
SCRIPT_SUFFIX = ".ps1"


def stage(script: str, directory: str | Path | None = None) -> Path:
    """Write ``script`` to a fresh ``<uuid>.ps1`` file and return its path.

    The file is created exclusively with owner-only permissions and starts
    with a UTF-8 byte-order mark. Deleting it is the caller's job.

    Args:
        script: Script text to write.
        directory: Target directory; the system temp dir when omitted.

    Raises:
        StageError: The file could not be created or written.
    """
    base = Path(directory) if directory is not None else Path(tempfile.gettempdir())
    path = base / f"{uuid.uuid4()}{SCRIPT_SUFFIX}"
    data = UTF8_BOM + script.encode("utf-8")

    flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
    try:
        fd = os.open(path, flags, 0o600)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
    except OSError as e:
        raise StageError(f"Failed to stage script at {path}: {e}") from e

    logger.debug("Staged %d bytes at %s", len(data), path)
    return path


def discard(path: Path) -> None:
    """Remove a staged script, tolerating one that is already gone."""
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove staged script %s: %s", path, e)
