from typing import Any

from pydantic import BaseModel, Field

from json2ts.models.types import TypeDescriptor


class Property(BaseModel):
    """A single field of a generated record."""

    name: str = Field(description="Object key, unmodified")
    type: TypeDescriptor = Field(description="Inferred type of the value")
    is_optional: bool = Field(
        default=False,
        description="Whether the field is rendered with '?'"
    )


class GeneratedRecord(BaseModel):
    """A named interface/class discovered during inference."""

    name: str = Field(description="Record name, prefix applied")
    properties: list[Property] = Field(
        default_factory=list,
        description="Fields in source key order"
    )

    @property
    def property_names(self) -> list[str]:
        return [prop.name for prop in self.properties]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "properties": [
                {
                    "name": prop.name,
                    "type": prop.type.render(),
                    "optional": prop.is_optional,
                }
                for prop in self.properties
            ],
        }


# Record name -> record, in insertion (emission) order.
RecordTable = dict[str, GeneratedRecord]
