"""
OOXMLPackage class for managing Word document ZIP structure.

This module provides a clean abstraction for the OOXML package format,
separating ZIP handling from XML manipulation concerns. Parts are exposed
as raw bytes; parsing is left to the xml_part module.
"""

import io
import logging
import shutil
import tempfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import Any, BinaryIO

from .errors import ValidationError

logger = logging.getLogger(__name__)


class OOXMLPackage:
    """Manages the OOXML ZIP package structure.

    This class handles the low-level operations of:
    - Extracting .docx ZIP archives to temporary directories
    - Reading and overwriting package parts as bytes
    - Repacking modified content back to ZIP format
    - Cleaning up temporary resources

    Example:
        >>> with OOXMLPackage.open("document.docx") as pkg:
        ...     data = pkg.read_part("word/settings.xml")
        ...     # Modify data...
        ...     pkg.write_part("word/settings.xml", data)
        ...     pkg.save("modified.docx")
    """

    def __init__(
        self,
        temp_dir: Path,
        source_path: Path | None = None,
        entry_order: list[str] | None = None,
    ) -> None:
        """Initialize package with an already-extracted directory.

        Use the class methods `open()` or `from_bytes()` instead of
        calling this constructor directly.

        Args:
            temp_dir: Path to the extracted package contents
            source_path: Original source file path, if loaded from disk
            entry_order: ZIP entry names in their original archive order
        """
        self._temp_dir = temp_dir
        self._source_path = source_path
        self._entry_order = entry_order or []
        self._closed = False

    @classmethod
    def open(cls, source: str | Path | BinaryIO) -> "OOXMLPackage":
        """Open an OOXML package from a file path or file-like object.

        Args:
            source: Path to .docx file or file-like object containing it

        Returns:
            OOXMLPackage instance with extracted contents

        Raises:
            ValidationError: If the source is missing or not a valid ZIP file
        """
        source_path: Path | None = None

        if isinstance(source, str | Path):
            source_path = Path(source)
            if not source_path.exists():
                raise ValidationError(f"Document not found: {source_path}")
            zip_source: Path | BinaryIO = source_path
        else:
            zip_source = source

        if not zipfile.is_zipfile(zip_source):
            raise ValidationError("Source must be a valid .docx (ZIP) file")

        # is_zipfile moves the stream position
        if hasattr(zip_source, "seek"):
            zip_source.seek(0)

        temp_dir = Path(tempfile.mkdtemp(prefix="python_docx_review_"))
        try:
            with zipfile.ZipFile(zip_source, "r") as zip_ref:
                zip_ref.extractall(temp_dir)
                entry_order = [name for name in zip_ref.namelist() if not name.endswith("/")]
        except (zipfile.BadZipFile, OSError) as e:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise ValidationError(f"Failed to extract .docx file: {e}") from e

        logger.debug("Extracted %s to %s", source_path or "stream", temp_dir)
        return cls(temp_dir, source_path, entry_order)

    @classmethod
    def from_bytes(cls, data: bytes) -> "OOXMLPackage":
        """Open an OOXML package from bytes.

        Args:
            data: Bytes containing a .docx file

        Returns:
            OOXMLPackage instance with extracted contents
        """
        return cls.open(io.BytesIO(data))

    @property
    def temp_dir(self) -> Path:
        """Get the temporary directory containing extracted package contents."""
        return self._temp_dir

    @property
    def source_path(self) -> Path | None:
        """Get the original source file path, if available."""
        return self._source_path

    @property
    def closed(self) -> bool:
        return self._closed

    def get_part_path(self, part_name: str) -> Path:
        """Get the filesystem path to a package part.

        Args:
            part_name: Relative path within the package (e.g., "word/comments.xml")

        Returns:
            Path to the part in the temp directory
        """
        return self._temp_dir.joinpath(*PurePosixPath(part_name).parts)

    def part_exists(self, part_name: str) -> bool:
        """Check if a package part exists.

        Args:
            part_name: Relative path within the package

        Returns:
            True if the part exists
        """
        return self.get_part_path(part_name).is_file()

    def part_names(self) -> list[str]:
        """List all part names in the package, sorted."""
        return sorted(
            file.relative_to(self._temp_dir).as_posix()
            for file in self._temp_dir.rglob("*")
            if file.is_file()
        )

    def read_part(self, part_name: str) -> bytes | None:
        """Read a package part as raw bytes.

        Args:
            part_name: Relative path within the package (e.g., "word/comments.xml")

        Returns:
            The part content, or None if the part doesn't exist
        """
        part_path = self.get_part_path(part_name)
        if not part_path.is_file():
            return None
        return part_path.read_bytes()

    def write_part(self, part_name: str, data: bytes) -> None:
        """Overwrite a package part with new content.

        The destination is truncated first, so nothing from a longer
        previous version survives.

        Args:
            part_name: Relative path within the package
            data: New content of the part

        Raises:
            OSError: If the part cannot be written
        """
        part_path = self.get_part_path(part_name)
        part_path.parent.mkdir(parents=True, exist_ok=True)
        with open(part_path, "wb") as f:
            f.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), part_name)

    def _write_zip(self, target: str | Path | BinaryIO) -> None:
        # Keep the original entry order; [Content_Types].xml must stay first
        existing = set(self.part_names())
        ordered = [name for name in self._entry_order if name in existing]
        ordered += sorted(existing.difference(ordered))
        with zipfile.ZipFile(target, "w", zipfile.ZIP_DEFLATED) as zip_ref:
            for part_name in ordered:
                zip_ref.write(self.get_part_path(part_name), part_name)

    def save(self, output_path: str | Path) -> None:
        """Save the package to a .docx file.

        Args:
            output_path: Path to save the .docx file
        """
        output_path = Path(output_path)
        self._write_zip(output_path)
        logger.debug("Saved package to %s", output_path)

    def save_to_bytes(self) -> bytes:
        """Save the package to bytes.

        Returns:
            The complete .docx file as bytes
        """
        buffer = io.BytesIO()
        self._write_zip(buffer)
        return buffer.getvalue()

    def close(self) -> None:
        """Clean up temporary directory."""
        if not self._closed:
            shutil.rmtree(self._temp_dir, ignore_errors=True)
            self._closed = True

    def __enter__(self) -> "OOXMLPackage":
        """Context manager support."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager cleanup."""
        self.close()

    def __del__(self) -> None:
        """Clean up temporary directory on garbage collection."""
        self.close()
