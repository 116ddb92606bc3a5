"""Type descriptors assigned to generated properties."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TypeKind(str, Enum):
    """Kind of an inferred type."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    UNKNOWN = "any"
    RECORD = "record"
    ARRAY = "array"


PRIMITIVE_KINDS = {TypeKind.STRING, TypeKind.NUMBER, TypeKind.BOOLEAN}


class TypeDescriptor(BaseModel):
    """Inferred type of a single value.

    A closed union over primitives, null, unknown, a reference to a
    generated record, or an array of another descriptor.
    """

    model_config = ConfigDict(frozen=True)

    kind: TypeKind = Field(description="Which variant this descriptor is")
    name: Optional[str] = Field(
        default=None,
        description="Generated record name (RECORD only)"
    )
    item: Optional["TypeDescriptor"] = Field(
        default=None,
        description="Element type (ARRAY only)"
    )

    @classmethod
    def primitive(cls, kind: TypeKind) -> "TypeDescriptor":
        if kind not in PRIMITIVE_KINDS:
            raise ValueError(f"Not a primitive kind: {kind.value}")
        return cls(kind=kind)

    @classmethod
    def null(cls) -> "TypeDescriptor":
        return cls(kind=TypeKind.NULL)

    @classmethod
    def unknown(cls) -> "TypeDescriptor":
        return cls(kind=TypeKind.UNKNOWN)

    @classmethod
    def record(cls, name: str) -> "TypeDescriptor":
        return cls(kind=TypeKind.RECORD, name=name)

    @classmethod
    def array_of(cls, item: "TypeDescriptor") -> "TypeDescriptor":
        return cls(kind=TypeKind.ARRAY, item=item)

    @property
    def is_primitive(self) -> bool:
        return self.kind in PRIMITIVE_KINDS

    def render(self) -> str:
        """Render as a TypeScript type expression."""
        if self.kind == TypeKind.RECORD:
            return self.name
        if self.kind == TypeKind.ARRAY:
            return f"{self.item.render()}[]"
        return self.kind.value

    def __str__(self) -> str:
        return self.render()
