"""ICS file writer for calendar documents."""

import logging
from pathlib import Path

from calfeed.exceptions import ExportError

logger = logging.getLogger(__name__)


class ICSWriter:
    """Writer for ICS calendar files."""

    def write(self, document: str, path: Path) -> None:
        """Write a calendar document to an ICS file.

        Args:
            document: Calendar text with CRLF line endings
            path: Path to write ICS file

        Raises:
            ExportError: If the document is empty or the file cannot be written
        """
        if not document:
            raise ExportError("Refusing to write an empty calendar document")

        try:
            # Binary mode keeps CRLF line endings intact
            path.write_bytes(document.encode("utf-8"))
        except OSError as e:
            # Remove empty file if it was created
            if path.exists() and path.stat().st_size == 0:
                path.unlink()
            raise ExportError(f"Failed to write calendar to {path}: {e}") from e

        logger.info(f"Calendar written to {path}")
