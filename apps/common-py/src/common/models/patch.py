"""JSON Patch (RFC 6902) operation model."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class PatchOperation(BaseModel):
    """Single field-level patch operation.

    Only the operations that make sense on a flat document are accepted;
    ``move`` and ``copy`` are rejected by the deserializer.
    """

    op: Literal["add", "remove", "replace", "test"] = Field(..., description="Operation kind")
    path: str = Field(..., description="JSON pointer to the target field, e.g. '/login'")
    value: Any = Field(None, description="Operand for add, replace and test")

    @property
    def has_value(self) -> bool:
        """Whether the client sent a value member, even a null one."""
        return "value" in self.model_fields_set
