"""Extract component documentation from Markdown documents.

A document either describes one component (at most one ``### X Props``
heading) or several (one props heading per component). Both shapes go
through the same per-component extraction.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from pathlib import Path

from .errors import DocumentReadError
from .interpreters import interpret_table
from .markdown import extract_section, locate_table
from .models import (
    ComponentDoc,
    DocumentShape,
    MultiComponent,
    Section,
    SingleComponent,
    SourceDocument,
)

log = logging.getLogger(__name__)

HEADING_MARKER = "### "
PROPS_KEYWORD = "props"
METHODS_SUFFIX = "InstanceFunctions 组件实例方法"
FALLBACK_COMPONENT = "Unknown"

_MARKER_RE = re.compile(r"^\s*###\s*")
_PROPS_SUFFIX_RE = re.compile(r"\s+Props.*", re.IGNORECASE)


def read_document_text(text: str) -> SourceDocument:
    """Split text into lines with line endings and trailing whitespace removed."""
    return tuple(line.rstrip() for line in re.split(r"\r?\n", text))


def read_document(path: Path) -> SourceDocument:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(f"Cannot read {path}: {e}") from e
    return read_document_text(text)


def find_markdown_files(directory: Path) -> list[Path]:
    """Recursively list ``.md`` files, depth-first, in name order."""
    files: list[Path] = []
    for item in sorted(Path(directory).iterdir(), key=lambda p: p.name):
        if item.is_dir():
            files.extend(find_markdown_files(item))
        elif item.is_file() and item.name.lower().endswith(".md"):
            files.append(item)
    return files


def is_props_heading(line: str) -> bool:
    text = line.strip().lower()
    return text.startswith(HEADING_MARKER) and PROPS_KEYWORD in text


def component_name_from_heading(line: str) -> str:
    """``### Button Props`` -> ``Button``."""
    name = _MARKER_RE.sub("", line.strip())
    return _PROPS_SUFFIX_RE.sub("", name).strip()


def classify_document(lines: Sequence[str]) -> DocumentShape:
    """Decide whether a document describes one component or several."""
    headings = [line for line in lines if is_props_heading(line)]
    if len(headings) > 1:
        return MultiComponent(
            names=tuple(component_name_from_heading(h) for h in headings)
        )
    if headings:
        return SingleComponent(name=component_name_from_heading(headings[0]))
    return SingleComponent(name=FALLBACK_COMPONENT)


def section_labels(component: str) -> dict[str, str]:
    """Heading labels of the props, events and methods sections."""
    return {
        "props": f"{component} Props",
        "events": f"{component} Events",
        "methods": f"{component}{METHODS_SUFFIX}",
    }


def extract_sections(lines: Sequence[str], component: str) -> dict[str, Section]:
    return {
        schema: Section(
            component=component,
            label=label,
            lines=extract_section(lines, label),
        )
        for schema, label in section_labels(component).items()
    }


def extract_component(lines: Sequence[str], component: str) -> ComponentDoc:
    """Build the record for one component from its three sections."""
    sections = extract_sections(lines, component)
    tables = {schema: locate_table(s.lines) for schema, s in sections.items()}

    methods = None
    if tables["methods"]:
        methods = interpret_table(tables["methods"], "methods")

    return ComponentDoc(
        component=component,
        props=interpret_table(tables["props"], "props"),
        events=interpret_table(tables["events"], "events"),
        methods=methods,
    )


def extract_components(
    lines: SourceDocument, shape: DocumentShape | None = None
) -> list[ComponentDoc]:
    """Extract every component described by a document, in heading order.

    Duplicate component names are extracted once per heading.
    """
    if shape is None:
        shape = classify_document(lines)
    if isinstance(shape, MultiComponent):
        log.debug(f"Multi-component document: {', '.join(shape.names)}")
    return [extract_component(lines, name) for name in shape.names]


def extract_file(path: Path) -> list[ComponentDoc]:
    return extract_components(read_document(path))
