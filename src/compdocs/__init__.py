from compdocs.errors import (
    CompdocsError,
    ComponentFileInvalidError,
    ComponentFileNotFoundError,
    ComponentLookupError,
    ComponentNotFoundError,
    DocumentReadError,
    IndexCorruptError,
    IndexNotFoundError,
    StoreError,
    UnknownSchemaError,
)
from compdocs.extractors import (
    classify_document,
    extract_component,
    extract_components,
    extract_file,
    read_document,
    read_document_text,
)
from compdocs.lookup import ComponentLookup
from compdocs.models import (
    ComponentDoc,
    EventRecord,
    MethodRecord,
    MultiComponent,
    PropRecord,
    SingleComponent,
)
from compdocs.store import ComponentStore, StoredComponent

__all__ = [
    "CompdocsError",
    "ComponentDoc",
    "ComponentFileInvalidError",
    "ComponentFileNotFoundError",
    "ComponentLookup",
    "ComponentLookupError",
    "ComponentNotFoundError",
    "ComponentStore",
    "DocumentReadError",
    "EventRecord",
    "IndexCorruptError",
    "IndexNotFoundError",
    "MethodRecord",
    "MultiComponent",
    "PropRecord",
    "SingleComponent",
    "StoreError",
    "StoredComponent",
    "UnknownSchemaError",
    "classify_document",
    "extract_component",
    "extract_components",
    "extract_file",
    "read_document",
    "read_document_text",
]
