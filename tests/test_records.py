import pytest

from clipsort.database import (
    MalformedRecordError,
    dump_categories,
    dump_items,
    parse_categories,
    parse_items,
    require_categories,
    require_items,
)
from clipsort.models import Category, ClipboardItem, normalize_name


def test_normalize_name_trims_and_lowercases():
    assert normalize_name("  Work ") == "work"
    assert normalize_name("WORK") == normalize_name(" work ") == normalize_name("Work")


def test_category_gets_prefixed_ulid():
    category = Category(name="Work")
    assert category.id.startswith("c_")
    assert Category(name="Work").id != category.id


def test_numeric_ids_are_coerced_to_strings():
    [category] = parse_categories([{"id": 1, "name": "Notes"}])
    assert category.id == "1"

    [item] = parse_items([{"id": 7, "timestamp": 0, "content": "x", "category": {"id": 1, "name": "Notes"}}])
    assert item.id == "7"
    assert item.category == category


def test_absent_records_parse_to_none():
    assert parse_items(None) is None
    assert parse_categories(None) is None


def test_malformed_records_are_treated_as_absent():
    assert parse_categories({"id": "c1", "name": "Work"}) is None
    assert parse_categories([{"id": "c1"}]) is None
    assert parse_categories([{"id": "c1", "name": ""}]) is None
    assert parse_items("not a list") is None
    assert parse_items([{"id": "a", "content": "no timestamp"}]) is None


def test_empty_list_is_a_valid_record():
    assert parse_items([]) == []
    assert parse_categories([]) == []


def test_dumped_items_carry_category_by_value():
    category = Category(id="c1", name="Work")
    item = ClipboardItem(id="a", timestamp=5, content="hello").with_category(category)

    assert dump_items([item]) == [
        {"id": "a", "timestamp": 5, "content": "hello", "category": {"id": "c1", "name": "Work"}}
    ]
    assert dump_categories([category]) == [{"id": "c1", "name": "Work"}]
    assert parse_items(dump_items([item])) == [item]


def test_unknown_fields_are_kept_through_copy_and_dump():
    [item] = parse_items([{"id": "a", "timestamp": 1, "content": "x", "type": "text"}])
    updated = item.with_category(Category(id="c1", name="Work"))

    assert dump_items([updated]) == [{
        "id": "a", "timestamp": 1, "content": "x", "type": "text",
        "category": {"id": "c1", "name": "Work"},
    }]


def test_require_helpers_distinguish_absent_from_malformed():
    assert require_items(None) == []
    assert require_categories(None) == []
    with pytest.raises(MalformedRecordError):
        require_items([{"id": "a", "timestamp": 1.5, "content": "x"}])
    with pytest.raises(MalformedRecordError):
        require_categories("Work")
