from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from clipsort.models.category import Category


class ClipboardItem(BaseModel):
    """Captured clipboard entry; `timestamp` is epoch milliseconds.

    Fields written by other tools (content type, source app, ...) are kept
    as extras so rewrites carry them through.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    id: str
    timestamp: int
    content: str
    category: Optional[Category] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    def with_category(self, category: Category) -> "ClipboardItem":
        return self.model_copy(update={"category": category.model_copy()})
