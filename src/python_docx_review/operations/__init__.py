"""
Operation classes for document transformations.

Each class works on one package part and reports its outcome as an
OperationResult rather than raising for expected failures.
"""

from .anonymize import AuthorAnonymizer
from .deanonymize import AuthorDeanonymizer
from .tracking import TrackRevisionsEditor

__all__ = ["AuthorAnonymizer", "AuthorDeanonymizer", "TrackRevisionsEditor"]
