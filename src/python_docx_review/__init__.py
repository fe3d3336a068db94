"""
python_docx_review - Prepare Word documents for review.

This package forces change tracking on in .docx files and anonymizes comment
authors behind reversible Author1, Author2, ... aliases, saving the mapping
next to the document so the real names can be restored later.

Example:
    >>> from python_docx_review import ReviewDocument
    >>> with ReviewDocument("contract.docx") as doc:
    ...     doc.enable_tracked_changes()
    ...     doc.anonymize_comments()
    ...     doc.save("contract_for_review.docx")
"""

__version__ = "0.1.0"
__all__ = [
    "ReviewDocument",
    "OOXMLPackage",
    "OperationResult",
    "Comment",
    "XmlPart",
    "AliasStore",
    "AliasTable",
    "default_alias_path",
    "TrackRevisionsEditor",
    "AuthorAnonymizer",
    "AuthorDeanonymizer",
    "DocxReviewError",
    "ValidationError",
    "PartNotFoundError",
    "XmlParseError",
    "PartWriteError",
    "NoRootElementError",
    "NoCommentsFoundError",
    "AliasFileError",
    "AliasFileMissingError",
    "AliasFileInvalidError",
    "AliasFilePersistError",
]

# Import alias handling
from .aliases import AliasStore, AliasTable, default_alias_path

# Import document class
from .document import ReviewDocument
from .errors import (
    AliasFileError,
    AliasFileInvalidError,
    AliasFileMissingError,
    AliasFilePersistError,
    DocxReviewError,
    NoCommentsFoundError,
    NoRootElementError,
    PartNotFoundError,
    PartWriteError,
    ValidationError,
    XmlParseError,
)

# Import model classes
from .models.comment import Comment

# Import operations
from .operations import AuthorAnonymizer, AuthorDeanonymizer, TrackRevisionsEditor

# Import package class
from .package import OOXMLPackage

# Import result types
from .results import OperationResult

# Import XML codec
from .xml_part import XmlPart
