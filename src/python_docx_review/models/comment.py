"""
Comment wrapper class for document comments.

Provides a Pythonic API for reading a w:comment element and rewriting its
author. Attributes and content that are not accessed pass through untouched.
"""

from datetime import datetime

from lxml import etree

from ..constants import NSMAP, w


class Comment:
    """Wrapper around a w:comment element.

    Example:
        >>> for comment in doc.comments:
        ...     print(f"{comment.author}: {comment.text}")
    """

    def __init__(self, element: etree._Element) -> None:
        """Initialize Comment wrapper.

        Args:
            element: The w:comment XML element
        """
        self._element = element

    @classmethod
    def find_all(cls, root: etree._Element | etree._ElementTree) -> list["Comment"]:
        """Wrap every w:comment under root, in document order."""
        return [cls(element) for element in root.xpath("//w:comment", namespaces=NSMAP)]

    @property
    def element(self) -> etree._Element:
        """Get the underlying XML element."""
        return self._element

    @property
    def id(self) -> str:
        """Get the comment ID.

        Returns:
            The comment ID as a string
        """
        return self._element.get(w("id"), "")

    @property
    def has_author(self) -> bool:
        return self._element.get(w("author")) is not None

    @property
    def author(self) -> str:
        """Get the comment author.

        Returns:
            Author name, or empty string if not set
        """
        return self._element.get(w("author"), "")

    @author.setter
    def author(self, value: str) -> None:
        self._element.set(w("author"), value)

    @property
    def initials(self) -> str | None:
        """Get the author's initials.

        Returns:
            Initials string or None if not present
        """
        return self._element.get(w("initials"))

    @property
    def date(self) -> datetime | None:
        """Get the comment date/time.

        Returns:
            datetime object or None if not present/parseable
        """
        date_str = self._element.get(w("date"))
        if not date_str:
            return None
        try:
            # OOXML uses ISO 8601 format, handle both Z and offset formats
            return datetime.fromisoformat(date_str.replace("Z", "+00:00"))
        except ValueError:
            return None

    @property
    def text(self) -> str:
        """Get the comment text content.

        Extracts text from all w:t elements within the comment.

        Returns:
            The full text of the comment
        """
        text_elements = self._element.iter(w("t"))
        return "".join(elem.text or "" for elem in text_elements)

    def __repr__(self) -> str:
        return f"<Comment id={self.id!r} author={self.author!r}>"
