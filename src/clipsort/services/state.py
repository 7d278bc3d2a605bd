from dataclasses import dataclass, field
from typing import List

from clipsort.models import Category, ClipboardItem


@dataclass
class HistoryState:
    """In-memory mirror of the persisted collections for one session.

    Collections are replaced, never mutated in place, so identity changes
    whenever contents change.
    """
    items: List[ClipboardItem] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)

    def set_items(self, items: List[ClipboardItem]) -> None:
        self.items = list(items)

    def set_categories(self, categories: List[Category]) -> None:
        self.categories = list(categories)
