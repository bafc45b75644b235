"""Resolve component names to stored records through the index."""

from __future__ import annotations

import logging
import re
from pathlib import Path, PurePosixPath

from pydantic import ValidationError

from .config import Config
from .errors import (
    ComponentFileInvalidError,
    ComponentFileNotFoundError,
    ComponentNotFoundError,
    IndexCorruptError,
    IndexNotFoundError,
)
from .schemas import ComponentDocument, ComponentIndex, IndexEntry

log = logging.getLogger(__name__)


class ComponentLookup:
    """Read-only access to the records written by ComponentStore.

    The build output directory is preferred over the source data directory,
    both for the index and for each component file.

    Example:
        lookup = ComponentLookup(root="/path/to/project")
        doc = lookup.load("button")
        print(doc.component, len(doc.props))
    """

    def __init__(
        self,
        root: str | Path | None = None,
        data_dir: str | None = None,
        build_data_dir: str | None = None,
    ):
        self.root = Path(root or Config.PROJECT_ROOT).resolve()
        self.data_dir = data_dir or Config.DATA_DIR
        self.build_data_dir = build_data_dir or Config.BUILD_DATA_DIR
        self.index_candidates = [
            self.root / self.build_data_dir / Config.INDEX_FILE,
            self.root / self.data_dir / Config.INDEX_FILE,
        ]

    def find_index(self) -> Path:
        for path in self.index_candidates:
            if path.exists():
                return path
        raise IndexNotFoundError(
            "Index file not found. Candidates: "
            + ", ".join(str(p) for p in self.index_candidates)
        )

    def load_index(self) -> ComponentIndex:
        path = self.find_index()
        try:
            return ComponentIndex.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            raise IndexCorruptError(
                f"Index file is invalid: {path} ({e.error_count()} errors)"
            ) from e

    def list_components(self) -> list[IndexEntry]:
        return list(self.load_index().components)

    def find_entry(self, name: str) -> IndexEntry:
        wanted = name.lower()
        for entry in self.load_index().components:
            if entry.name.lower() == wanted:
                return entry
        raise ComponentNotFoundError(f"Component '{name}' not found")

    def build_file(self, file: str) -> str:
        """Map a stored file path to its location in the build output."""
        path = PurePosixPath(file)
        data_dir = PurePosixPath(self.data_dir)
        if path.is_relative_to(data_dir):
            return str(PurePosixPath(self.build_data_dir) / path.relative_to(data_dir))
        return re.sub(r"^src/", "build/", file)

    def file_candidates(self, entry: IndexEntry) -> list[Path]:
        candidates = [self.root / self.build_file(entry.file), self.root / entry.file]
        # entry.file may lie outside both data dirs
        return list(dict.fromkeys(candidates))

    def resolve(self, name: str) -> Path:
        """Return the path of the stored record for ``name``.

        Raises:
            IndexNotFoundError: No index file at any candidate location
            ComponentNotFoundError: The index has no such component
            ComponentFileNotFoundError: The indexed file does not exist
        """
        entry = self.find_entry(name)
        candidates = self.file_candidates(entry)
        for path in candidates:
            if path.exists():
                return path
        raise ComponentFileNotFoundError(
            f"Component file not found for '{name}'. Candidates: "
            + ", ".join(str(p) for p in candidates)
        )

    def load(self, name: str) -> ComponentDocument:
        path = self.resolve(name)
        try:
            return ComponentDocument.model_validate_json(path.read_text(encoding="utf-8"))
        except ValidationError as e:
            log.warning(f"Invalid component file {path}: {e.error_count()} errors")
            raise ComponentFileInvalidError(
                f"Component file is invalid for '{name}': {path}"
            ) from e
