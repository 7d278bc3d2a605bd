"""
Tests for the date and category views.
"""
from datetime import timedelta, timezone

from clipsort.models import Category, ClipboardItem
from clipsort.services import GroupedViews, group_items_by_category, group_items_by_date
from clipsort.services.grouping import date_key

from conftest import ms

WORK = Category(id="c1", name="Work")
HOME = Category(id="c2", name="Home")
EMPTY = Category(id="c3", name="Empty")


def _item(item_id, timestamp=0, category=None):
    return ClipboardItem(id=item_id, timestamp=timestamp, content=item_id, category=category)


def test_by_date_uses_local_calendar_day():
    items = [
        _item("a", ms(2024, 1, 1, 10)),
        _item("b", ms(2024, 1, 1, 23)),
        _item("c", ms(2024, 1, 2, 1)),
    ]

    grouped = group_items_by_date(items)

    assert list(grouped) == ["2024-01-01", "2024-01-02"]
    assert [i.id for i in grouped["2024-01-01"]] == ["a", "b"]
    assert [i.id for i in grouped["2024-01-02"]] == ["c"]


def test_by_date_keeps_first_occurrence_order_and_stable_buckets():
    utc = timezone.utc
    items = [
        _item("late", ms(2024, 3, 5, 12, tz=utc)),
        _item("early", ms(2024, 3, 1, 12, tz=utc)),
        _item("late-again", ms(2024, 3, 5, 8, tz=utc)),
    ]

    grouped = group_items_by_date(items, tz=utc)

    assert list(grouped) == ["2024-03-05", "2024-03-01"]
    assert [i.id for i in grouped["2024-03-05"]] == ["late", "late-again"]


def test_by_date_respects_timezone():
    timestamp = ms(2024, 1, 1, 23, 30, tz=timezone.utc)
    assert date_key(timestamp, timezone.utc) == "2024-01-01"
    assert date_key(timestamp, timezone(timedelta(hours=2))) == "2024-01-02"
    assert date_key(timestamp, timezone(timedelta(hours=-5))) == "2024-01-01"


def test_by_date_empty():
    assert group_items_by_date([]) == {}


def test_by_category_excludes_uncategorized_and_unknown():
    stranger = Category(id="zz", name="Deleted")
    items = [
        _item("a", category=WORK),
        _item("b"),
        _item("c", category=stranger),
        _item("d", category=HOME),
        _item("e", category=WORK),
    ]

    grouped = group_items_by_category(items, [HOME, EMPTY, WORK])

    assert list(grouped) == ["Home", "Work"]
    assert [i.id for i in grouped["Work"]] == ["a", "e"]
    assert [i.id for i in grouped["Home"]] == ["d"]
    assert "Empty" not in grouped


def test_by_category_matches_on_exact_name():
    renamed = Category(id="c1", name="work")
    assert group_items_by_category([_item("a", category=renamed)], [WORK]) == {}


def test_by_category_with_no_categories():
    assert group_items_by_category([_item("a", category=WORK)], []) == {}


def test_views_are_cached_by_input_identity():
    views = GroupedViews(tz=timezone.utc)
    items = [_item("a", 0, WORK)]
    categories = [WORK]

    by_date = views.by_date(items)
    by_category = views.by_category(items, categories)

    assert views.by_date(items) is by_date
    assert views.by_category(items, categories) is by_category

    # equal contents, new objects
    assert views.by_date(list(items)) is not by_date
    assert views.by_category(items, [WORK, HOME]) is not by_category


def test_category_view_recomputes_when_categories_change():
    views = GroupedViews()
    items = [_item("a", 0, HOME)]

    assert views.by_category(items, [WORK]) == {}
    assert list(views.by_category(items, [WORK, HOME])) == ["Home"]
