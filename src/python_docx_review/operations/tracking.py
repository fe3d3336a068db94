"""
TrackRevisionsEditor class for forcing change tracking on.

Word records "Track Changes" as an empty w:trackRevisions element in
word/settings.xml. Adding it is idempotent: a settings part that already has
the marker is left byte-for-byte alone.
"""

from __future__ import annotations

import logging

from lxml import etree

from ..constants import NSMAP, SETTINGS_PART, WORD_NAMESPACE, w
from ..errors import DocxReviewError, NoRootElementError
from ..package import OOXMLPackage
from ..results import OperationResult
from ..xml_part import XmlPart, decode_part, encode_part

logger = logging.getLogger(__name__)


class TrackRevisionsEditor:
    """Ensures the settings part carries a w:trackRevisions marker.

    Example:
        >>> editor = TrackRevisionsEditor(package)
        >>> ok, message = editor.enable_tracked_changes()
        >>> editor.is_enabled()
        True
    """

    operation = "enable_tracked_changes"

    def __init__(self, package: OOXMLPackage, part_name: str = SETTINGS_PART) -> None:
        """Initialize the editor.

        Args:
            package: Package holding the settings part
            part_name: Settings part name (default: word/settings.xml)
        """
        self._package = package
        self._part_name = part_name

    @staticmethod
    def _find_marker(part: XmlPart) -> etree._Element | None:
        markers = part.xpath("//w:trackRevisions", NSMAP)
        return markers[0] if markers else None

    def is_enabled(self) -> bool:
        """Check whether change tracking is already on.

        Returns:
            True if the marker is present; False if it is absent or the
            settings part is missing or unreadable
        """
        try:
            part = decode_part(self._package, self._part_name)
        except DocxReviewError as e:
            logger.debug("Cannot check tracking state: %s", e)
            return False
        return self._find_marker(part) is not None

    def enable_tracked_changes(self) -> OperationResult:
        """Add w:trackRevisions to the settings part if it is missing.

        Returns:
            OperationResult; ``changed`` is False with message
            "No change needed." when the marker was already there
        """
        try:
            part = decode_part(self._package, self._part_name)

            if self._find_marker(part) is not None:
                logger.debug("%s already has trackRevisions", self._part_name)
                return OperationResult(
                    success=True, operation=self.operation, message="No change needed."
                )

            root = part.root
            if root is None:
                raise NoRootElementError(self._part_name)

            # Only declare the w prefix when the root does not already bind it
            nsmap = None if WORD_NAMESPACE in root.nsmap.values() else NSMAP
            etree.SubElement(root, w("trackRevisions"), nsmap=nsmap)

            encode_part(part, self._package)
        except DocxReviewError as e:
            logger.debug("enable_tracked_changes failed: %s", e)
            return OperationResult(
                success=False, operation=self.operation, message=str(e), error=e
            )

        logger.debug("Added trackRevisions to %s", self._part_name)
        return OperationResult(success=True, operation=self.operation, message="OK", changed=True)
