"""
Custom exception classes for python_docx_review package.

Operations raise these internally; the public operation methods catch them
and report them as failed OperationResult values instead of letting them
escape.
"""

from pathlib import Path


class DocxReviewError(Exception):
    """Base exception for all python_docx_review errors."""

    pass


class ValidationError(DocxReviewError):
    """Raised when a document package cannot be opened or saved."""

    pass


class PartError(DocxReviewError):
    """Base class for errors tied to a single package part.

    Attributes:
        part_name: Name of the part inside the package (e.g. "word/comments.xml")
    """

    def __init__(self, part_name: str, message: str) -> None:
        self.part_name = part_name
        super().__init__(message)


class PartNotFoundError(PartError):
    """Raised when a required part is missing from the package."""

    def __init__(self, part_name: str) -> None:
        super().__init__(part_name, f"Can't access {part_name}!")


class XmlParseError(PartError):
    """Raised when a part is not well-formed XML.

    Attributes:
        cause: The underlying parser error
    """

    def __init__(self, part_name: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(part_name, f"Error reading {part_name}: {cause}")


class PartWriteError(PartError):
    """Raised when a part cannot be written back to the package.

    Attributes:
        cause: The underlying I/O error
    """

    def __init__(self, part_name: str, cause: Exception) -> None:
        self.cause = cause
        super().__init__(part_name, f"Error saving {part_name}: {cause}")


class NoRootElementError(PartError):
    """Raised when a part parses but has no document element."""

    def __init__(self, part_name: str) -> None:
        super().__init__(part_name, f"No root element in {part_name}!")


class NoCommentsFoundError(PartError):
    """Raised when the comments part holds no w:comment elements."""

    def __init__(self, part_name: str) -> None:
        super().__init__(part_name, f"No comments found in {part_name}!")


class AliasFileError(DocxReviewError):
    """Base class for alias file problems.

    Attributes:
        path: The alias file path involved, or None if it could not be resolved
    """

    def __init__(self, path: Path | None, message: str) -> None:
        self.path = path
        super().__init__(message)


class AliasFileMissingError(AliasFileError):
    """Raised when no alias file exists at the resolved path."""

    def __init__(self, path: Path | None) -> None:
        if path is None:
            message = "Can't load authors: no alias file path given and no document path!"
        else:
            message = f"Can't load authors from {path}!"
        super().__init__(path, message)


class AliasFileInvalidError(AliasFileError):
    """Raised when an alias file exists but does not hold a usable mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"Can't load authors from {path}: {reason}")


class AliasFilePersistError(AliasFileError):
    """Raised when the alias mapping cannot be written out."""

    def __init__(self, path: Path | None, reason: str) -> None:
        self.reason = reason
        if path is None:
            message = f"Error saving authors: {reason}"
        else:
            message = f"Error saving authors to {path}: {reason}"
        super().__init__(path, message)
