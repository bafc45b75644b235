"""Exceptions raised by compdocs.

Extraction itself never raises for missing headings, sections or tables.
These exceptions cover the edges: reading input, persisting records and
resolving components by name.
"""

from __future__ import annotations


class CompdocsError(Exception):
    """Base exception for compdocs operations."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentReadError(CompdocsError):
    """Raised when an input document cannot be read."""

    pass


class UnknownSchemaError(CompdocsError):
    """Raised when a table is interpreted against an unknown schema."""

    pass


class StoreError(CompdocsError):
    """Raised when a component record cannot be persisted."""

    pass


class ComponentLookupError(CompdocsError):
    """Base exception for lookup failures."""

    pass


class IndexNotFoundError(ComponentLookupError):
    """Raised when no index file exists at any candidate location."""

    status_code = 404


class IndexCorruptError(ComponentLookupError):
    """Raised when the index file is not valid JSON or has the wrong shape."""

    pass


class ComponentNotFoundError(ComponentLookupError):
    """Raised when the index has no entry for the requested component."""

    status_code = 404


class ComponentFileNotFoundError(ComponentLookupError):
    """Raised when the index entry points at a file that does not exist."""

    status_code = 404


class ComponentFileInvalidError(ComponentLookupError):
    """Raised when a component file cannot be parsed as a component record."""

    pass
