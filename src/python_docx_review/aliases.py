"""
Author alias assignment and persistence.

AliasTable hands out ``Author1``, ``Author2``, ... in first-seen order, and
AliasStore writes the real-name to alias mapping to a side file next to the
document so a later run can reverse it.
"""

import json
import logging
from pathlib import Path

import yaml

from .constants import ALIAS_FILE_SUFFIX, ALIAS_PREFIX, YAML_SUFFIXES
from .errors import AliasFileInvalidError, AliasFileMissingError, AliasFilePersistError

logger = logging.getLogger(__name__)


def default_alias_path(document_path: str | Path) -> Path:
    """Derive the alias file path from a document path.

    Example:
        >>> default_alias_path("reports/review.docx")
        PosixPath('reports/review.json')
    """
    return Path(document_path).with_suffix(ALIAS_FILE_SUFFIX)


def resolve_alias_path(
    alias_path: str | Path | None, document_path: str | Path | None
) -> Path | None:
    """Pick the explicit alias path, else derive one from the document path.

    Returns None when neither is available (e.g. a document opened from bytes).
    """
    if alias_path is not None:
        return Path(alias_path)
    if document_path is not None:
        return default_alias_path(document_path)
    return None


class AliasTable:
    """Insertion-ordered mapping from real author names to aliases.

    The first distinct name becomes ``Author1``, the next ``Author2`` and so
    on. Looking up a name again returns the alias it already has.

    Example:
        >>> table = AliasTable()
        >>> [table.resolve(name) for name in ["Ann", "Bob", "Ann"]]
        ['Author1', 'Author2', 'Author1']
    """

    def __init__(self, prefix: str = ALIAS_PREFIX) -> None:
        self._prefix = prefix
        self._aliases: dict[str, str] = {}

    def resolve(self, name: str) -> str:
        """Return the alias for a name, assigning the next one on first sight."""
        alias = self._aliases.get(name)
        if alias is None:
            alias = f"{self._prefix}{len(self._aliases) + 1}"
            self._aliases[name] = alias
            logger.debug("Assigned alias %s", alias)
        return alias

    def as_dict(self) -> dict[str, str]:
        """Return a copy of the real name -> alias mapping."""
        return dict(self._aliases)

    def __len__(self) -> int:
        return len(self._aliases)

    def __contains__(self, name: object) -> bool:
        return name in self._aliases


def invert_aliases(mapping: dict[str, str]) -> dict[str, str]:
    """Turn a real name -> alias mapping into alias -> real name.

    If two names share an alias, the later entry wins.
    """
    return {alias: name for name, alias in mapping.items()}


class AliasStore:
    """Reads and writes alias mappings as flat string-to-string files.

    Files ending in ``.yaml`` or ``.yml`` use YAML, everything else JSON.
    Both are written as UTF-8.
    """

    @staticmethod
    def _is_yaml(path: Path) -> bool:
        return path.suffix.lower() in YAML_SUFFIXES

    @classmethod
    def save(cls, mapping: dict[str, str | None], path: str | Path) -> Path:
        """Write a mapping to a file, omitting None values.

        Args:
            mapping: Real name -> alias mapping
            path: Destination file

        Returns:
            The path written

        Raises:
            AliasFilePersistError: If the mapping is not string-to-string or
                the file cannot be written
        """
        path = Path(path)
        data = {key: value for key, value in mapping.items() if value is not None}
        for key, value in data.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise AliasFilePersistError(path, f"non-string entry {key!r}: {value!r}")

        try:
            with open(path, "w", encoding="utf-8") as f:
                if cls._is_yaml(path):
                    yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
                else:
                    json.dump(data, f, ensure_ascii=False, indent=2)
        except OSError as e:
            raise AliasFilePersistError(path, str(e)) from e

        logger.debug("Saved %d author aliases to %s", len(data), path)
        return path

    @classmethod
    def load(cls, path: str | Path) -> dict[str, str]:
        """Read a mapping from a file.

        Args:
            path: File written by ``save``

        Returns:
            The mapping, with null values dropped

        Raises:
            AliasFileMissingError: If the file does not exist
            AliasFileInvalidError: If the file is unreadable or not a flat
                string-to-string object
        """
        path = Path(path)
        if not path.is_file():
            raise AliasFileMissingError(path)

        try:
            with open(path, encoding="utf-8") as f:
                if cls._is_yaml(path):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except yaml.YAMLError as e:
            raise AliasFileInvalidError(path, f"invalid YAML ({e})") from e
        except json.JSONDecodeError as e:
            raise AliasFileInvalidError(path, f"invalid JSON ({e})") from e
        except (OSError, UnicodeDecodeError) as e:
            raise AliasFileInvalidError(path, str(e)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise AliasFileInvalidError(path, "expected an object of names to aliases")

        mapping: dict[str, str] = {}
        for key, value in data.items():
            if value is None:
                continue
            if not isinstance(key, str) or not isinstance(value, str):
                raise AliasFileInvalidError(path, f"non-string entry {key!r}: {value!r}")
            mapping[key] = value

        logger.debug("Loaded %d author aliases from %s", len(mapping), path)
        return mapping
