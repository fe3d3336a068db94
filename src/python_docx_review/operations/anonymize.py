"""
AuthorAnonymizer class for replacing comment authors with aliases.

Every w:comment author in word/comments.xml is rewritten to ``Author<N>``
and the real-name to alias mapping is saved next to the document, so
AuthorDeanonymizer can restore the names later.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..aliases import AliasStore, AliasTable, resolve_alias_path
from ..constants import COMMENTS_PART
from ..errors import AliasFilePersistError, DocxReviewError, NoCommentsFoundError
from ..models.comment import Comment
from ..package import OOXMLPackage
from ..results import OperationResult
from ..xml_part import decode_part, encode_part

logger = logging.getLogger(__name__)


class AuthorAnonymizer:
    """Replaces comment authors with sequential aliases.

    Aliasing is scoped to one call: each run starts from an empty table, so
    running it on an already anonymized document aliases the aliases.

    Example:
        >>> anonymizer = AuthorAnonymizer(package, document_path="review.docx")
        >>> result = anonymizer.anonymize_comments()
        >>> result.aliases
        {'Ann Smith': 'Author1', 'Bob Jones': 'Author2'}
        >>> result.alias_path
        PosixPath('review.json')
    """

    operation = "anonymize_comments"

    def __init__(
        self,
        package: OOXMLPackage,
        document_path: str | Path | None = None,
        part_name: str = COMMENTS_PART,
    ) -> None:
        """Initialize the anonymizer.

        Args:
            package: Package holding the comments part
            document_path: Document path the default alias file is derived from
            part_name: Comments part name (default: word/comments.xml)
        """
        self._package = package
        self._document_path = document_path
        self._part_name = part_name

    def _fail(self, error: DocxReviewError, alias_path: Path | None = None) -> OperationResult:
        logger.debug("anonymize_comments failed: %s", error)
        return OperationResult(
            success=False,
            operation=self.operation,
            message=str(error),
            alias_path=alias_path,
            error=error,
        )

    def anonymize_comments(self, alias_path: str | Path | None = None) -> OperationResult:
        """Rewrite every comment author to an alias and save the mapping.

        Args:
            alias_path: Where to save the mapping; defaults to the document
                path with a .json suffix

        Returns:
            OperationResult carrying ``aliases`` and ``alias_path``. If the
            mapping cannot be saved the result is a failure even though the
            comments part has already been rewritten.
        """
        target = resolve_alias_path(alias_path, self._document_path)
        if target is None:
            return self._fail(
                AliasFilePersistError(None, "no alias file path given and no document path")
            )

        table = AliasTable()
        try:
            part = decode_part(self._package, self._part_name)
            comments = Comment.find_all(part.tree)
            if not comments:
                raise NoCommentsFoundError(self._part_name)

            for comment in comments:
                if not comment.has_author:
                    logger.warning("Comment %s has no author; leaving it as is", comment.id)
                    continue
                comment.author = table.resolve(comment.author)

            encode_part(part, self._package)
        except DocxReviewError as e:
            return self._fail(e, target)

        logger.debug(
            "Anonymized %d comments by %d authors in %s",
            len(comments),
            len(table),
            self._part_name,
        )

        aliases = table.as_dict()
        try:
            AliasStore.save(aliases, target)
        except AliasFilePersistError as e:
            # The comments part has been rewritten already; only report
            result = self._fail(e, target)
            result.changed = True
            return result

        return OperationResult(
            success=True,
            operation=self.operation,
            message="OK",
            changed=True,
            aliases=aliases,
            alias_path=target,
        )
