from datetime import datetime, tzinfo
from typing import Dict, List, Optional, Sequence

from clipsort.models import Category, ClipboardItem

Grouped = Dict[str, List[ClipboardItem]]


def date_key(timestamp_ms: int, tz: Optional[tzinfo] = None) -> str:
    """Calendar date of an epoch-ms timestamp, local time unless `tz` is given."""
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=tz)
    return moment.strftime("%Y-%m-%d")


def group_items_by_date(items: Sequence[ClipboardItem], tz: Optional[tzinfo] = None) -> Grouped:
    grouped: Grouped = {}
    for item in items:
        grouped.setdefault(date_key(item.timestamp, tz), []).append(item)
    return grouped


def group_items_by_category(items: Sequence[ClipboardItem], categories: Sequence[Category]) -> Grouped:
    grouped: Grouped = {category.name: [] for category in categories}

    for item in items:
        name = item.category.name if item.category else None
        if name and name in grouped:
            grouped[name].append(item)

    return {name: bucket for name, bucket in grouped.items() if bucket}


class GroupedViews:
    """Caches both views, recomputing when an input collection is replaced.

    Inputs are compared by identity, so callers must swap in new lists
    rather than mutate the ones already passed.
    """

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self.tz = tz
        self._date_source: Optional[Sequence[ClipboardItem]] = None
        self._date_view: Grouped = {}
        self._category_sources: Optional[tuple] = None
        self._category_view: Grouped = {}

    def by_date(self, items: Sequence[ClipboardItem]) -> Grouped:
        if self._date_source is not items:
            self._date_view = group_items_by_date(items, self.tz)
            self._date_source = items
        return self._date_view

    def by_category(self, items: Sequence[ClipboardItem], categories: Sequence[Category]) -> Grouped:
        sources = self._category_sources
        if sources is None or sources[0] is not items or sources[1] is not categories:
            self._category_view = group_items_by_category(items, categories)
            self._category_sources = (items, categories)
        return self._category_view
