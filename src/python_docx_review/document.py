"""
ReviewDocument class for preparing Word documents for review.

This module provides the main entry point: open a .docx, force change
tracking on, anonymize or restore comment authors, and save the result.
"""

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO

from .aliases import default_alias_path
from .constants import COMMENTS_PART
from .errors import DocxReviewError
from .models.comment import Comment
from .operations.anonymize import AuthorAnonymizer
from .operations.deanonymize import AuthorDeanonymizer
from .operations.tracking import TrackRevisionsEditor
from .package import OOXMLPackage
from .results import OperationResult
from .xml_part import decode_part

logger = logging.getLogger(__name__)


class ReviewDocument:
    """A Word document opened for review preparation.

    Documents can be loaded from:
    - File paths (str or Path)
    - Raw bytes
    - BytesIO objects
    - Open file objects (in binary mode)

    Edits land in the unpacked package immediately; call ``save()`` to write
    them out. Use the document as a context manager so the unpacked package
    is removed on every exit path.

    Example:
        >>> with ReviewDocument("contract.docx") as doc:
        ...     doc.enable_tracked_changes()
        ...     result = doc.anonymize_comments()
        ...     if result.success:
        ...         doc.save()

    Attributes:
        path: Path to the document file (None for in-memory documents)
    """

    def __init__(self, source: str | Path | bytes | BinaryIO) -> None:
        """Open a document.

        Args:
            source: Path, raw bytes, or binary file object of a .docx file

        Raises:
            ValidationError: If the document cannot be opened
        """
        if isinstance(source, bytes):
            self._package = OOXMLPackage.open(io.BytesIO(source))
        else:
            self._package = OOXMLPackage.open(source)
        self.path: Path | None = self._package.source_path

    @property
    def package(self) -> OOXMLPackage:
        """Get the underlying OOXML package."""
        return self._package

    @property
    def default_alias_path(self) -> Path | None:
        """Alias file used when none is given, or None for in-memory documents."""
        return default_alias_path(self.path) if self.path is not None else None

    @property
    def tracking_enabled(self) -> bool:
        """Whether word/settings.xml has change tracking switched on."""
        return TrackRevisionsEditor(self._package).is_enabled()

    @property
    def comments(self) -> list[Comment]:
        """All comments in document order; empty if there is no comments part."""
        try:
            part = decode_part(self._package, COMMENTS_PART)
        except DocxReviewError as e:
            logger.debug("No readable comments: %s", e)
            return []
        return Comment.find_all(part.tree)

    @property
    def comment_authors(self) -> list[str]:
        """Distinct comment authors in first-seen order."""
        return list(dict.fromkeys(c.author for c in self.comments if c.has_author))

    def enable_tracked_changes(self) -> OperationResult:
        """Force change tracking on.

        Safe to repeat: a document that is already tracked is not rewritten.
        """
        return TrackRevisionsEditor(self._package).enable_tracked_changes()

    def anonymize_comments(self, alias_path: str | Path | None = None) -> OperationResult:
        """Replace comment authors with Author1, Author2, ... aliases.

        Args:
            alias_path: Where to save the real name -> alias mapping
                (default: the document path with a .json suffix)

        Returns:
            OperationResult; see AuthorAnonymizer.anonymize_comments
        """
        return AuthorAnonymizer(self._package, self.path).anonymize_comments(alias_path)

    def deanonymize_comments(self, alias_path: str | Path | None = None) -> OperationResult:
        """Restore comment authors from an alias file.

        Args:
            alias_path: Alias file to read (default: the document path with a
                .json suffix)

        Returns:
            OperationResult; see AuthorDeanonymizer.deanonymize_comments
        """
        return AuthorDeanonymizer(self._package, self.path).deanonymize_comments(alias_path)

    def save(self, output_path: str | Path | None = None) -> Path:
        """Save the document to a file.

        Args:
            output_path: Path to save the document. If None, saves to original path.

        Returns:
            The path written

        Raises:
            ValueError: If output_path is not provided for in-memory documents
        """
        if output_path is None:
            if self.path is None:
                raise ValueError(
                    "output_path is required for in-memory documents. "
                    "Use doc.save(path) or doc.save_to_bytes() instead."
                )
            output_path = self.path
        output_path = Path(output_path)
        self._package.save(output_path)
        return output_path

    def save_to_bytes(self) -> bytes:
        """Save the document to bytes (in-memory)."""
        return self._package.save_to_bytes()

    def close(self) -> None:
        """Release the unpacked package."""
        self._package.close()

    def __enter__(self) -> "ReviewDocument":
        """Context manager support."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Context manager cleanup."""
        self.close()
