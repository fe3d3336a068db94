"""
Whitespace-preserving XML codec for package parts.

Parts are parsed with lxml without dropping blank text, and the bytes that
lxml would otherwise rewrite (the XML declaration, the line break that
follows it, and trailing whitespace after the root element) are kept
verbatim so an unmodified part serializes back to identical bytes.
"""

import logging
import re
from dataclasses import dataclass

from lxml import etree

from .errors import NoRootElementError, PartNotFoundError, PartWriteError, XmlParseError
from .package import OOXMLPackage

logger = logging.getLogger(__name__)

# Optional UTF-8 BOM, the XML declaration and any whitespace after it
_PROLOG_RE = re.compile(rb"^(?:\xef\xbb\xbf)?<\?xml[^>]*\?>[ \t\r\n]*")
_EPILOG_RE = re.compile(rb"[ \t\r\n]*\Z")


@dataclass
class XmlPart:
    """An in-memory XML document tied to one package part.

    Attributes:
        name: Part name inside the package (e.g., "word/comments.xml")
        tree: Parsed document
        prolog: Raw bytes preceding the document content (declaration, BOM)
        epilog: Raw whitespace following the root element
    """

    name: str
    tree: etree._ElementTree
    prolog: bytes = b""
    epilog: bytes = b""

    @property
    def root(self) -> etree._Element | None:
        return self.tree.getroot()

    def xpath(self, path: str, namespaces: dict[str, str]) -> list[etree._Element]:
        """Run an XPath query against the whole document."""
        return self.tree.xpath(path, namespaces=namespaces)

    def to_bytes(self) -> bytes:
        """Serialize the document, re-attaching the original prolog and epilog."""
        encoding = self.tree.docinfo.encoding or "UTF-8"
        body = etree.tostring(self.tree, encoding=encoding, xml_declaration=False)
        body = _EPILOG_RE.sub(b"", body)
        return self.prolog + body + self.epilog


def parse_part(part_name: str, data: bytes) -> XmlPart:
    """Parse raw part bytes into an XmlPart.

    Args:
        part_name: Part name, used in error messages
        data: Raw part content

    Returns:
        The parsed part

    Raises:
        NoRootElementError: If the content is empty or has no root element
        XmlParseError: If the content is not well-formed XML
    """
    if not data.strip():
        raise NoRootElementError(part_name)

    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
    try:
        root = etree.fromstring(data, parser)
    except etree.XMLSyntaxError as e:
        raise XmlParseError(part_name, e) from e

    tree = root.getroottree()
    prolog_match = _PROLOG_RE.match(data)
    prolog = prolog_match.group(0) if prolog_match else b""
    epilog = _EPILOG_RE.search(data).group(0)

    return XmlPart(name=part_name, tree=tree, prolog=prolog, epilog=epilog)


def decode_part(package: OOXMLPackage, part_name: str) -> XmlPart:
    """Load and parse a part from a package.

    Args:
        package: Package to read from
        part_name: Relative path within the package

    Returns:
        The parsed part

    Raises:
        PartNotFoundError: If the part doesn't exist
        XmlParseError: If the part cannot be read or is not well-formed XML
        NoRootElementError: If the part has no root element
    """
    try:
        data = package.read_part(part_name)
    except OSError as e:
        raise XmlParseError(part_name, e) from e
    if data is None:
        raise PartNotFoundError(part_name)

    logger.debug("Decoding %s (%d bytes)", part_name, len(data))
    return parse_part(part_name, data)


def encode_part(part: XmlPart, package: OOXMLPackage) -> None:
    """Serialize a part and overwrite its entry in the package.

    Args:
        part: The part to write
        package: Package to write into

    Raises:
        PartWriteError: If serialization or the write fails
    """
    try:
        data = part.to_bytes()
        package.write_part(part.name, data)
    except (OSError, etree.SerialisationError, LookupError) as e:
        raise PartWriteError(part.name, e) from e
