"""Property store loading for TextBundleResolver.

Provides the protocol for bundle loaders, the immutable PropertyStore they
return, and a filesystem implementation with path-traversal protection.

Components:
    PropertyStore - Immutable key/value texts of one bundle
    StoreLoader - Protocol for opening a bundle by composed name
    PathPropertiesLoader - Reads <root_dir>/<bundle name>.properties

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

from textbundle.constants import DEFAULT_ENCODING, PROPERTIES_EXTENSION
from textbundle.localization.types import BundleName, MessageKey
from textbundle.syntax import parse_properties

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Store
    "PropertyStore",
    # Protocol
    "StoreLoader",
    # Concrete loader
    "PathPropertiesLoader",
]


@dataclass(frozen=True, slots=True)
class PropertyStore:
    """Immutable texts of a single bundle.

    The entries are copied into a read-only mapping at construction, so
    later changes to the caller's dict are not visible.

    Example:
        >>> store = PropertyStore({"ok": "OK"})
        >>> store.get("ok")
        'OK'
        >>> store.get("cancel") is None
        True

    Attributes:
        entries: Read-only mapping of keys to texts
    """

    entries: Mapping[MessageKey, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze a private copy of the entries."""
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: MessageKey) -> str | None:
        """Return the text for key, or None if the bundle lacks it."""
        return self.entries.get(key)

    def keys(self) -> tuple[MessageKey, ...]:
        """Return all keys in file order."""
        return tuple(self.entries)

    def __contains__(self, key: object) -> bool:
        """Check if key is defined in this bundle."""
        return key in self.entries

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)


class StoreLoader(Protocol):
    """Protocol for opening the property store behind a bundle name.

    This is a Protocol (structural typing) rather than ABC so that custom
    loaders (database, package resources, in-memory dicts) need no base class.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, bundles: dict[str, dict[str, str]]) -> None:
        ...         self.bundles = bundles
        ...     def open(self, bundle_name: str) -> PropertyStore:
        ...         try:
        ...             return PropertyStore(self.bundles[bundle_name])
        ...         except KeyError:
        ...             raise FileNotFoundError(bundle_name) from None
        ...     def describe_path(self, bundle_name: str) -> str:
        ...         return f"dict:{bundle_name}"
    """

    def open(self, bundle_name: BundleName) -> PropertyStore:
        """Open the store for a composed bundle name.

        Args:
            bundle_name: Bundle name without extension (e.g., 'messages_de')

        Returns:
            The bundle's texts

        Raises:
            FileNotFoundError: If no store exists for this name
            OSError: If the store cannot be read
            UnicodeDecodeError: If the store is not valid in the configured encoding
            PropertiesSyntaxError: If the store cannot be parsed
        """
        ...

    def describe_path(self, bundle_name: BundleName) -> str:
        """Return human-readable location of a bundle for diagnostics."""
        ...


@dataclass(frozen=True, slots=True)
class PathPropertiesLoader:
    """File system loader for .properties bundles.

    Implements StoreLoader by reading ``<root_dir>/<bundle_name><extension>``.
    Bundle names may contain forward slashes to address sub-directories.

    Security:
        Bundle names containing "..", absolute paths or a leading separator
        are rejected, and every resolved path is verified to stay inside
        root_dir.

    Example:
        >>> loader = PathPropertiesLoader("i18n")
        >>> store = loader.open("messages_de")
        # Reads: i18n/messages_de.properties

    Attributes:
        root_dir: Directory containing the bundles
        extension: File extension appended to bundle names (default: .properties)
        encoding: Text encoding of the files (default: utf-8)
    """

    root_dir: str | Path
    extension: str = PROPERTIES_EXTENSION
    encoding: str = DEFAULT_ENCODING
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate the extension.

        Raises:
            ValueError: If extension is empty or does not start with '.'
        """
        if not self.extension.startswith(".") or len(self.extension) < 2:
            msg = f"extension must start with '.' and name a suffix, got: '{self.extension}'"
            raise ValueError(msg)
        object.__setattr__(self, "_resolved_root", Path(self.root_dir).resolve())

    @staticmethod
    def _validate_bundle_name(bundle_name: BundleName) -> None:
        """Validate bundle name for path traversal attacks.

        A ".." path component is rejected; dots inside a file name such as
        "my..msgs" are not.

        Raises:
            ValueError: If bundle_name contains unsafe path components
        """
        if ".." in bundle_name.replace("\\", "/").split("/"):
            msg = f"Path traversal sequences not allowed in bundle name: '{bundle_name}'"
            raise ValueError(msg)
        if bundle_name.startswith(("/", "\\")) or Path(bundle_name).is_absolute():
            msg = f"Absolute paths not allowed in bundle name: '{bundle_name}'"
            raise ValueError(msg)

    def describe_path(self, bundle_name: BundleName) -> str:
        """Return the file path a bundle name maps to."""
        return str(Path(self.root_dir) / f"{bundle_name}{self.extension}")

    def open(self, bundle_name: BundleName) -> PropertyStore:
        """Read and parse the bundle file.

        Args:
            bundle_name: Bundle name without extension

        Returns:
            Parsed store

        Raises:
            ValueError: If bundle_name escapes root_dir
            FileNotFoundError: If the file does not exist
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not valid in the configured encoding
            PropertiesSyntaxError: If the file contains a malformed escape
        """
        self._validate_bundle_name(bundle_name)

        full_path = (self._resolved_root / f"{bundle_name}{self.extension}").resolve()
        if not full_path.is_relative_to(self._resolved_root):
            msg = f"Path traversal detected: bundle name '{bundle_name}' escapes root directory"
            raise ValueError(msg)

        source = full_path.read_text(encoding=self.encoding)
        return PropertyStore(parse_properties(source, source_path=str(full_path)))
