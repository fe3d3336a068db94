"""
Centralized constants for OOXML namespaces, package part names and alias files.

Import from here rather than repeating namespace URLs or part names in the
operation modules.
"""

# =============================================================================
# Word Processing Namespaces
# =============================================================================

# Main WordprocessingML namespace (Word 2007+)
WORD_NAMESPACE = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

# Basic namespace map with just the main Word namespace
NSMAP = {"w": WORD_NAMESPACE}


# =============================================================================
# Package Parts
# =============================================================================

SETTINGS_PART = "word/settings.xml"
COMMENTS_PART = "word/comments.xml"


# =============================================================================
# Author Aliases
# =============================================================================

# Aliases are ALIAS_PREFIX followed by a 1-based counter: Author1, Author2, ...
ALIAS_PREFIX = "Author"

# Suffix used when deriving the alias file path from the document path
ALIAS_FILE_SUFFIX = ".json"

# Suffixes that select YAML instead of JSON for alias files
YAML_SUFFIXES = (".yaml", ".yml")


# =============================================================================
# Helper Functions
# =============================================================================


def w(tag: str) -> str:
    """Create a fully qualified Word namespace tag.

    Args:
        tag: Tag name without namespace prefix (e.g., "comment", "author")

    Returns:
        Fully qualified tag (e.g., "{http://...wordprocessingml/2006/main}comment")

    Example:
        >>> w("author")
        '{http://schemas.openxmlformats.org/wordprocessingml/2006/main}author'
    """
    return f"{{{WORD_NAMESPACE}}}{tag}"
