"""
Read-only access to a project's manifest

All lookups into the parsed TOML document go through ProjectManifest so the
rest of the build never chains optional dictionary lookups by hand.
"""

import datetime
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import tomli

from .errors import InvalidValueError, NotFoundError


logger = logging.getLogger("installer_build")


class ManifestValue:
    """A value from the manifest tagged with its kind"""

    TABLE = "table"
    ARRAY = "array"
    STRING = "string"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    DATETIME = "datetime"

    def __init__(self, raw: Any):
        self.raw = raw
        self.kind = self._kind_of(raw)

    @classmethod
    def _kind_of(cls, raw: Any) -> str:
        # bool is a subclass of int, check it first
        if isinstance(raw, bool):
            return cls.BOOLEAN
        if isinstance(raw, int):
            return cls.INTEGER
        if isinstance(raw, float):
            return cls.FLOAT
        if isinstance(raw, str):
            return cls.STRING
        if isinstance(raw, Mapping):
            return cls.TABLE
        if isinstance(raw, list):
            return cls.ARRAY
        if isinstance(raw, (datetime.date, datetime.time)):
            return cls.DATETIME
        raise InvalidValueError(f"Unsupported manifest value: {raw!r}")

    def __repr__(self) -> str:
        return f"ManifestValue({self.kind}, {self.raw!r})"


class ProjectManifest:
    """Parsed project manifest with a centralized accessor"""

    def __init__(self, document: Mapping[str, Any],
                 path: Optional[Path] = None,
                 metadata_table: Tuple[str, ...] = ("package", "metadata", "wix"),
                 package_table: str = "package"):
        """
        Initialize manifest view

        Args:
            document: Parsed TOML document
            path: Path of the manifest file the document came from
            metadata_table: Key path of the packaging configuration table
            package_table: Key of the package table
        """
        self._document = document
        self.path = Path(path) if path is not None else None
        self.metadata_table = tuple(metadata_table)
        self.package_table = package_table

    @classmethod
    def load(cls, path: Union[str, Path], **kwargs) -> "ProjectManifest":
        """
        Load a manifest from a TOML file

        Args:
            path: Path to the manifest file

        Returns:
            ProjectManifest instance
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError(path, "package manifest")
        with open(path, "rb") as f:
            try:
                document = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise InvalidValueError(f"Could not parse manifest '{path}': {e}") from e
        return cls(document, path=path, **kwargs)

    @classmethod
    def from_string(cls, text: str, **kwargs) -> "ProjectManifest":
        """Parse a manifest from TOML text"""
        try:
            document = tomli.loads(text)
        except tomli.TOMLDecodeError as e:
            raise InvalidValueError(f"Could not parse manifest: {e}") from e
        return cls(document, **kwargs)

    def value(self, *keys: str) -> Optional[ManifestValue]:
        """
        Look up a nested value

        Args:
            keys: Key path from the document root

        Returns:
            Tagged value, or None if any key along the path is absent
        """
        node: Any = self._document
        for key in keys:
            if not isinstance(node, Mapping) or key not in node:
                return None
            node = node[key]
        return ManifestValue(node)

    def _typed(self, kind: str, keys: Tuple[str, ...]) -> Optional[ManifestValue]:
        found = self.value(*keys)
        if found is None:
            return None
        if found.kind != kind:
            logger.warning(
                f"Ignoring '{'.'.join(keys)}' in the package's manifest: "
                f"expected a {kind}, found a {found.kind}"
            )
            return None
        return found

    def string(self, *keys: str) -> Optional[str]:
        found = self._typed(ManifestValue.STRING, keys)
        return found.raw if found else None

    def boolean(self, *keys: str) -> Optional[bool]:
        found = self._typed(ManifestValue.BOOLEAN, keys)
        return found.raw if found else None

    def table(self, *keys: str) -> Optional[Dict[str, Any]]:
        found = self._typed(ManifestValue.TABLE, keys)
        return dict(found.raw) if found else None

    def string_array(self, *keys: str) -> Optional[List[str]]:
        """
        Look up an array of strings

        Returns:
            List of strings, or None if absent or not an array
        """
        found = self._typed(ManifestValue.ARRAY, keys)
        if found is None:
            return None
        items = []
        for item in found.raw:
            if not isinstance(item, str):
                raise InvalidValueError(
                    f"'{'.'.join(keys)}' in the package's manifest must only "
                    f"contain strings, found {item!r}"
                )
            items.append(item)
        return items

    # Convenience accessors for the two tables the build reads

    def package(self, key: str) -> Optional[str]:
        """Get a string field from the package table"""
        return self.string(self.package_table, key)

    def metadata_string(self, key: str) -> Optional[str]:
        return self.string(*self.metadata_table, key)

    def metadata_boolean(self, key: str) -> Optional[bool]:
        return self.boolean(*self.metadata_table, key)

    def metadata_strings(self, key: str) -> Optional[List[str]]:
        return self.string_array(*self.metadata_table, key)


__all__ = ["ManifestValue", "ProjectManifest"]
