from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from clipsort.utils.ids import new_category_id


def normalize_name(name: str) -> str:
    """Comparison key for category names; never stored."""
    return name.strip().lower()


class Category(BaseModel):
    """User-defined label. Frozen once created."""
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(default_factory=new_category_id)
    name: str = Field(min_length=1)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # older records may carry numeric ids
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def key(self) -> str:
        return normalize_name(self.name)
