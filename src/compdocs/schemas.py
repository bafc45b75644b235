from typing import Any

from pydantic import BaseModel, Field


class PropSchema(BaseModel):
    name: str
    type: str = ""
    defaultValue: str | None = None
    description: str = ""
    required: bool = False


class EventSchema(BaseModel):
    name: str
    params: str = ""
    description: str = ""


class MethodSchema(BaseModel):
    name: str
    params: str = ""
    returnType: str = ""
    description: str = ""


class ComponentDocument(BaseModel):
    """A stored component record as loaded back from disk."""

    component: str
    props: list[PropSchema] = Field(default_factory=list)
    events: list[EventSchema] = Field(default_factory=list)
    methods: list[MethodSchema] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump()
        if self.methods is None:
            data.pop("methods")
        return data


class IndexEntry(BaseModel):
    name: str
    file: str


class ComponentIndex(BaseModel):
    components: list[IndexEntry] = Field(default_factory=list)
