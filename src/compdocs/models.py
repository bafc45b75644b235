"""Data models for component documentation extraction."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Literal

# Immutable snapshot of a document's lines (newlines removed, right-stripped)
SourceDocument = tuple[str, ...]

# Header line, separator line, data lines. Empty when no table was found.
RawTable = tuple[str, ...]

Schema = Literal["props", "events", "methods"]


class _Column(enum.Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


# Marker for a canonical field with no matching column in the table header
ABSENT = _Column.ABSENT


@dataclass(frozen=True)
class HeaderMap:
    """Canonical field name -> column index (or ABSENT) for one table."""

    schema: Schema
    columns: dict[str, int | _Column] = field(default_factory=dict)

    def index(self, name: str) -> int | _Column:
        return self.columns.get(name, ABSENT)

    def is_absent(self, name: str) -> bool:
        return self.index(name) is ABSENT

    def cell(self, row: list[str], name: str) -> str:
        """Return the trimmed cell for a field, or "" if absent or past the row end."""
        idx = self.index(name)
        if idx is ABSENT or idx >= len(row):
            return ""
        return row[idx].strip()


@dataclass
class Section:
    """Lines under one component heading."""

    component: str
    label: str  # "Button Props", "Button Events", ...
    lines: SourceDocument = ()


@dataclass
class PropRecord:
    name: str
    type: str
    default_value: str | None
    description: str
    required: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "defaultValue": self.default_value,
            "description": self.description,
            "required": self.required,
        }


@dataclass
class EventRecord:
    name: str
    params: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "params": self.params,
            "description": self.description,
        }


@dataclass
class MethodRecord:
    name: str
    params: str
    return_type: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "params": self.params,
            "returnType": self.return_type,
            "description": self.description,
        }


@dataclass
class ComponentDoc:
    """Extracted documentation for one component."""

    component: str
    props: list[PropRecord] = field(default_factory=list)
    events: list[EventRecord] = field(default_factory=list)
    methods: list[MethodRecord] | None = None  # None when no methods table

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the key order of the stored JSON records."""
        data: dict[str, Any] = {
            "component": self.component,
            "props": [p.to_dict() for p in self.props],
            "events": [e.to_dict() for e in self.events],
        }
        if self.methods is not None:
            data["methods"] = [m.to_dict() for m in self.methods]
        return data


@dataclass(frozen=True)
class SingleComponent:
    """Document describing one component."""

    name: str

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True)
class MultiComponent:
    """Document describing several components, in heading order."""

    names: tuple[str, ...]


DocumentShape = SingleComponent | MultiComponent
