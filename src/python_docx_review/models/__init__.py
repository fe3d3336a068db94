"""
Model classes wrapping OOXML elements.
"""

from .comment import Comment

__all__ = ["Comment"]
