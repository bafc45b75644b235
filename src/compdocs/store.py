"""File-backed persistence for extracted component records."""

from __future__ import annotations

import copy
import json
import logging
import re
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from .config import Config
from .errors import StoreError
from .models import ComponentDoc

log = logging.getLogger(__name__)


def slugify(name: str) -> str:
    """Convert a component name to a filesystem-safe file stem."""
    slug = re.sub(r"\s+", "-", name.strip())
    slug = re.sub(r"[^a-zA-Z0-9\-_.]", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-") or "unknown"


def dump_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def add_index_entry(entries: list[Any], name: str, file: str) -> bool:
    """Append ``{name, file}`` unless ``name`` is already indexed.

    Names compare case-insensitively. An existing entry is never updated,
    even when ``file`` differs.

    Returns:
        True if an entry was appended
    """
    wanted = name.lower()
    for entry in entries:
        if isinstance(entry, dict) and (entry.get("name") or "").lower() == wanted:
            return False
    entries.append({"name": name, "file": file})
    return True


@dataclass
class StoredComponent:
    """Result of persisting one component."""

    name: str
    file: str  # POSIX path relative to the store root
    path: Path
    indexed: bool  # False if the index already had this name


class ComponentStore:
    """Writes one JSON file per component and keeps ``index.json`` current.

    Layout under ``root``:
        src/data/components/<slug>.json
        src/data/components/index.json  -> {"components": [{"name", "file"}]}

    Index updates are a read-modify-write inside ``transaction()``. That is
    safe for sequential use in one process only; two processes saving into
    the same store concurrently can lose index entries.

    Example:
        store = ComponentStore(root="/path/to/project")
        stored = store.save(doc)
        print(stored.file)  # src/data/components/Button.json
    """

    def __init__(self, root: str | Path | None = None, data_dir: str | None = None):
        self.root = Path(root or Config.PROJECT_ROOT).resolve()
        self.data_dir_rel = PurePosixPath(data_dir or Config.DATA_DIR)
        self.data_dir = self.root / self.data_dir_rel
        self.index_path = self.data_dir / Config.INDEX_FILE

    def load_index(self) -> list[Any]:
        """Return the index entries, or [] if the index is missing or corrupt."""
        if not self.index_path.exists():
            return []
        try:
            parsed = json.loads(self.index_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError):
            log.warning(f"{self.index_path.name} is invalid JSON, recreating a new one.")
            return []
        if isinstance(parsed, dict) and isinstance(parsed.get("components"), list):
            return parsed["components"]
        log.warning(f"{self.index_path.name} has no components list, recreating a new one.")
        return []

    @contextmanager
    def transaction(self) -> Iterator[list[Any]]:
        """Yield the index entries; write them back on exit if they changed.

        Nothing is written if the block raises.
        """
        entries = self.load_index()
        before = copy.deepcopy(entries)
        yield entries
        if entries != before:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            self.index_path.write_text(
                dump_json({"components": entries}), encoding="utf-8"
            )

    def save(self, doc: ComponentDoc) -> StoredComponent:
        """Write the component file and index it.

        Raises:
            StoreError: If the file or index cannot be written
        """
        file = str(self.data_dir_rel / f"{slugify(doc.component)}.json")
        path = self.root / file
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(dump_json(doc.to_dict()), encoding="utf-8")
            with self.transaction() as entries:
                indexed = add_index_entry(entries, doc.component, file)
        except OSError as e:
            raise StoreError(f"Failed to save component '{doc.component}': {e}") from e

        log.info(f"Saved: {file}")
        if indexed:
            log.info(f"Indexed: {self.data_dir_rel / Config.INDEX_FILE}")
        return StoredComponent(name=doc.component, file=file, path=path, indexed=indexed)

    def save_all(self, docs: Iterable[ComponentDoc]) -> list[StoredComponent]:
        """Save each component; a failure is logged and the next one still runs."""
        stored = []
        for doc in docs:
            try:
                stored.append(self.save(doc))
            except StoreError as e:
                log.error(e.message)
        return stored
