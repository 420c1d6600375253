"""Per-file component store.

Holds the extracted ``FileParsedComponents`` of every analysed file and
answers lookups by file name. Calculators receive absolute paths whose
directory and separator style may differ from the stored keys, so lookups
match on the base name without extension, case-insensitively.
"""

from __future__ import annotations

import ntpath
from collections.abc import Iterator
from pathlib import Path

import orjson
from loguru import logger
from pydantic import ValidationError

from .exceptions import StoreError
from .models import ClassInfo, FileParsedComponents


def base_name(file_name: str) -> str:
    """Return the base name of a path without its extension.

    Both ``/`` and ``\\`` are treated as separators.
    """
    base = ntpath.basename(file_name.replace("/", "\\"))
    stem, _ = ntpath.splitext(base)
    return stem or base


def file_stem(file_name: str) -> str:
    """Return the lookup key for a path: its lowercase base name.

    Examples:
        >>> file_stem("C:\\\\work\\\\src\\\\Account.java")
        'account'

        >>> file_stem("/home/dev/src/Account.java")
        'account'
    """
    return base_name(file_name).lower()


class ComponentStore:
    """In-memory store of extracted components keyed by source file path.

    Entries are replaced wholesale by ``put``; lookups return ``None``
    instead of raising when a file is unknown.
    """

    def __init__(self) -> None:
        self._entries: dict[str, FileParsedComponents] = {}
        self._by_stem: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, file_name: object) -> bool:
        return isinstance(file_name, str) and file_stem(file_name) in self._by_stem

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def file_names(self) -> list[str]:
        return list(self._entries)

    def put(self, file_path: str, components: FileParsedComponents) -> None:
        """Store components for a file, replacing any previous entry."""
        stem = file_stem(file_path)
        previous = self._by_stem.get(stem)
        if previous is not None:
            self._entries.pop(previous, None)
        self._entries[file_path] = components
        self._by_stem[stem] = file_path

    def get_by_file_name(self, file_name: str) -> FileParsedComponents | None:
        """Look up components by file name.

        Args:
            file_name: Any path or bare name of the source file

        Returns:
            The stored components, or None when no entry matches
        """
        key = self._by_stem.get(file_stem(file_name))
        if key is None:
            logger.warning(f"No data found for file name: {file_name}")
            return None
        return self._entries[key]

    def remove(self, file_name: str) -> bool:
        """Drop the entry for a file. Returns False when there was none."""
        key = self._by_stem.pop(file_stem(file_name), None)
        if key is None:
            return False
        self._entries.pop(key, None)
        return True

    def clear(self) -> None:
        self._entries.clear()
        self._by_stem.clear()

    def replace_all(self, other: ComponentStore) -> None:
        """Swap in the contents of another store."""
        self._entries = dict(other._entries)
        self._by_stem = dict(other._by_stem)

    def snapshot(self) -> ComponentStore:
        """Return a copy that can be read while this store is rewritten."""
        copy = ComponentStore()
        copy.replace_all(self)
        return copy

    def all_classes(self) -> list[ClassInfo]:
        """Every class recorded in the store, across all files."""
        classes: list[ClassInfo] = []
        for components in self._entries.values():
            for group in components.classes:
                classes.extend(group.classes)
        return classes

    @classmethod
    def from_directory(cls, directory: Path) -> ComponentStore:
        store = cls()
        store.load_directory(directory)
        return store

    def load_directory(self, directory: Path) -> int:
        """Load every ``*.json`` component file in a directory.

        Empty or malformed files are skipped with a warning.

        Args:
            directory: Directory holding one JSON file per source file

        Returns:
            Number of files loaded
        """
        if not directory.exists():
            logger.warning(f"Components directory does not exist: {directory}")
            return 0

        loaded = 0
        for path in sorted(directory.glob("*.json")):
            components = load_components_file(path)
            if components is None:
                continue
            self.put(components.file_name or path.name, components)
            loaded += 1

        logger.debug(f"Loaded {loaded} component files from {directory}")
        return loaded

    def save_directory(self, directory: Path) -> list[Path]:
        """Write one ``<basename>.json`` file per entry.

        Raises:
            StoreError: If the directory or a file cannot be written
        """
        written: list[Path] = []
        try:
            directory.mkdir(parents=True, exist_ok=True)
            for file_path, components in self._entries.items():
                target = directory / f"{base_name(file_path)}.json"
                target.write_bytes(
                    orjson.dumps(components.to_wire(), option=orjson.OPT_INDENT_2)
                )
                written.append(target)
                logger.debug(f"Saved parsed components for file: {target.stem}")
        except OSError as e:
            raise StoreError(
                f"Failed to save parsed components to {directory}: {e}",
                context={"directory": str(directory)},
            ) from e
        return written


def load_components_file(path: Path) -> FileParsedComponents | None:
    """Read one component file, returning None if it is empty or malformed."""
    try:
        content = path.read_bytes().strip()
    except OSError as e:
        logger.warning(f"Skipping unreadable file {path}: {e}")
        return None

    if not content:
        logger.warning(f"Skipping empty file: {path}")
        return None

    try:
        return FileParsedComponents.model_validate(orjson.loads(content))
    except orjson.JSONDecodeError as e:
        logger.warning(f"Error parsing JSON file {path}: {e}")
    except ValidationError as e:
        logger.warning(f"Invalid component structure in {path}: {e.error_count()} errors")
    return None
