"""Interpret located tables as props / events / methods records."""

from __future__ import annotations

from .errors import UnknownSchemaError
from .markdown import DELIMITER, split_row
from .models import (
    ABSENT,
    EventRecord,
    HeaderMap,
    MethodRecord,
    PropRecord,
    RawTable,
    Schema,
)

# Recognized header labels per canonical field (Chinese, English).
# Labels are compared against lower-cased, trimmed header cells. When a table
# carries more than one label of a field, the earlier label wins.
HEADER_LABELS: dict[str, dict[str, tuple[str, ...]]] = {
    "props": {
        "name": ("名称", "name"),
        "type": ("类型", "type"),
        "default": ("默认值", "default"),
        "description": ("说明", "描述", "description"),
        "required": ("必传", "required"),
    },
    "events": {
        "name": ("名称", "name"),
        "params": ("参数", "params"),
        "description": ("描述", "说明", "description"),
    },
    "methods": {
        "name": ("名称", "name"),
        "params": ("参数", "params"),
        "returnType": ("返回值", "return", "returns"),
        "description": ("描述", "说明", "description"),
    },
}

NO_DEFAULT = "-"
AFFIRMATIVE = frozenset({"Y", "YES"})


def parse_table(table: RawTable) -> tuple[list[str], list[list[str]]]:
    """Split a raw table into lower-cased headers and data rows.

    The second line is the separator and is skipped.
    """
    if len(table) < 2:
        return [], []
    headers = [h.lower() for h in split_row(table[0])]
    rows = [
        split_row(line)
        for line in table[2:]
        if line.strip() and DELIMITER in line
    ]
    return headers, rows


def build_header_map(headers: list[str], schema: Schema) -> HeaderMap:
    """Resolve each canonical field of ``schema`` to a column index.

    Labels are tried in order, so a props table with both 说明 and 描述
    columns reads its description from 说明.
    """
    try:
        fields = HEADER_LABELS[schema]
    except KeyError:
        raise UnknownSchemaError(f"Unknown table schema: {schema!r}") from None

    normalized = [h.strip().lower() for h in headers]
    columns = {}
    for name, labels in fields.items():
        columns[name] = next(
            (normalized.index(label) for label in labels if label in normalized),
            ABSENT,
        )
    return HeaderMap(schema=schema, columns=columns)


def parse_props_table(table: RawTable) -> list[PropRecord]:
    headers, rows = parse_table(table)
    if not headers:
        return []
    header_map = build_header_map(headers, "props")

    result = []
    for row in rows:
        default_raw = header_map.cell(row, "default")
        required_raw = header_map.cell(row, "required").upper()
        result.append(
            PropRecord(
                name=header_map.cell(row, "name"),
                type=header_map.cell(row, "type"),
                default_value=None if default_raw in ("", NO_DEFAULT) else default_raw,
                description=header_map.cell(row, "description"),
                required=required_raw in AFFIRMATIVE,
            )
        )
    return result


def parse_events_table(table: RawTable) -> list[EventRecord]:
    headers, rows = parse_table(table)
    if not headers:
        return []
    header_map = build_header_map(headers, "events")
    return [
        EventRecord(
            name=header_map.cell(row, "name"),
            params=header_map.cell(row, "params"),
            description=header_map.cell(row, "description"),
        )
        for row in rows
    ]


def parse_methods_table(table: RawTable) -> list[MethodRecord]:
    headers, rows = parse_table(table)
    if not headers:
        return []
    header_map = build_header_map(headers, "methods")
    return [
        MethodRecord(
            name=header_map.cell(row, "name"),
            params=header_map.cell(row, "params"),
            return_type=header_map.cell(row, "returnType"),
            description=header_map.cell(row, "description"),
        )
        for row in rows
    ]


_PARSERS = {
    "props": parse_props_table,
    "events": parse_events_table,
    "methods": parse_methods_table,
}


def interpret_table(table: RawTable, schema: Schema) -> list:
    """Parse ``table`` with the record parser registered for ``schema``."""
    parser = _PARSERS.get(schema)
    if parser is None:
        raise UnknownSchemaError(f"Unknown table schema: {schema!r}")
    return parser(table)
