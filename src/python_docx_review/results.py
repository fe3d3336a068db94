"""
Result classes for document operations.

Every public operation returns an OperationResult instead of raising for
expected failures such as a missing part or a missing alias file.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass
class OperationResult:
    """Result of running one document transformation.

    Unpacks as a ``(success, message)`` pair:

        >>> ok, message = doc.enable_tracked_changes()

    Attributes:
        success: Whether the operation completed
        operation: Name of the operation (e.g., "enable_tracked_changes")
        message: Short human-readable diagnostic naming the part or path involved
        changed: Whether a package part was rewritten
        aliases: Author mapping that was written (anonymize) or applied (deanonymize)
        alias_path: Alias file that was written or read
        error: Exception behind a failure, if any
    """

    success: bool
    operation: str
    message: str
    changed: bool = False
    aliases: dict[str, str] | None = None
    alias_path: Path | None = None
    error: Exception | None = None

    def __iter__(self) -> Iterator[bool | str]:
        yield self.success
        yield self.message

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        """Get string representation of the result."""
        if not self.success:
            status = "✗"
        elif self.changed:
            status = "✓"
        else:
            status = "○"
        return f"{status} {self.operation}: {self.message}"
