"""
AuthorDeanonymizer class for restoring real comment authors.

Reads the alias file written by AuthorAnonymizer and maps every aliased
w:comment author back to the real name. The document does not have to be
the one that was anonymized in this process; only the alias file and the
part name have to agree.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..aliases import AliasStore, invert_aliases, resolve_alias_path
from ..constants import COMMENTS_PART
from ..errors import AliasFileInvalidError, AliasFileMissingError, DocxReviewError
from ..models.comment import Comment
from ..package import OOXMLPackage
from ..results import OperationResult
from ..xml_part import decode_part, encode_part

logger = logging.getLogger(__name__)


class AuthorDeanonymizer:
    """Restores comment authors from a saved alias file.

    Authors that are not a known alias are left untouched.

    Example:
        >>> deanonymizer = AuthorDeanonymizer(package, document_path="review.docx")
        >>> ok, message = deanonymizer.deanonymize_comments()
    """

    operation = "deanonymize_comments"

    def __init__(
        self,
        package: OOXMLPackage,
        document_path: str | Path | None = None,
        part_name: str = COMMENTS_PART,
    ) -> None:
        self._package = package
        self._document_path = document_path
        self._part_name = part_name

    def _load_names(self, source: Path | None) -> dict[str, str]:
        """Load the alias file and return alias -> real name."""
        if source is None:
            raise AliasFileMissingError(None)
        mapping = AliasStore.load(source)
        if not mapping:
            raise AliasFileInvalidError(source, "no authors in file")
        return invert_aliases(mapping)

    def deanonymize_comments(self, alias_path: str | Path | None = None) -> OperationResult:
        """Replace aliased comment authors with their real names.

        Args:
            alias_path: Alias file to read; defaults to the document path
                with a .json suffix

        Returns:
            OperationResult carrying the alias -> name map in ``aliases``
        """
        source = resolve_alias_path(alias_path, self._document_path)
        try:
            names = self._load_names(source)

            part = decode_part(self._package, self._part_name)
            restored = 0
            for comment in Comment.find_all(part.tree):
                real_name = names.get(comment.author) if comment.has_author else None
                if real_name is not None:
                    comment.author = real_name
                    restored += 1

            encode_part(part, self._package)
        except DocxReviewError as e:
            logger.debug("deanonymize_comments failed: %s", e)
            return OperationResult(
                success=False,
                operation=self.operation,
                message=str(e),
                alias_path=source,
                error=e,
            )

        logger.debug("Restored %d comment authors in %s", restored, self._part_name)
        return OperationResult(
            success=True,
            operation=self.operation,
            message="OK",
            changed=restored > 0,
            aliases=names,
            alias_path=source,
        )
