# tests/test_queries.py
import pytest
from mediashelf.models import Item, SortOrder
from mediashelf.queries import filter_items, sort_items, visible_items


def make_item(item_id, title, author=None, year=None, notes=None):
    return Item(id=item_id, title=title, shelf_id="1", author=author, release_year=year, notes=notes)


@pytest.fixture
def items():
    return [
        make_item("1700000000000003", "zelda", author="Nintendo", year=1986),
        make_item("1700000000000001", "Abyss", author="james Cameron", year=1989, notes="Special edition"),
        make_item("1700000000000004", "Myst", year=None),
        make_item("1700000000000002", "Blade Runner", author="Ridley Scott", year=1982),
    ]


def titles(items):
    return [item.title for item in items]


def test_filter_matches_title_author_and_notes(items):
    assert titles(filter_items(items, "BLADE")) == ["Blade Runner"]
    assert titles(filter_items(items, "cameron")) == ["Abyss"]
    assert titles(filter_items(items, "special")) == ["Abyss"]


def test_filter_matches_release_year_alone():
    item = make_item("1", "Memento", author="Nolan", year=2001)
    other = make_item("2", "Space Odyssey", notes="Kubrick")
    assert filter_items([item, other], "2001") == [item]


def test_filter_blank_query_matches_everything(items):
    assert filter_items(items, "") == items
    assert filter_items(items, "   ") == items


def test_filter_ignores_missing_fields(items):
    assert filter_items(items, "none") == []


def test_sort_by_added_order(items):
    assert titles(sort_items(items, SortOrder.ADDED)) == ["Abyss", "Blade Runner", "zelda", "Myst"]


def test_sort_by_title_ignores_case(items):
    assert titles(sort_items(items, SortOrder.TITLE)) == ["Abyss", "Blade Runner", "Myst", "zelda"]


def test_sort_by_author_puts_missing_first(items):
    assert titles(sort_items(items, SortOrder.AUTHOR)) == ["Myst", "Abyss", "zelda", "Blade Runner"]


def test_sort_by_release_year_puts_missing_last():
    items = [make_item("1", "A", year=2001), make_item("2", "B", year=None), make_item("3", "C", year=1999)]
    assert [i.release_year for i in sort_items(items, SortOrder.RELEASE_YEAR)] == [1999, 2001, None]


def test_sort_is_stable():
    items = [make_item("3", "Same", author="X"), make_item("1", "same", author="x"), make_item("2", "SAME")]
    assert [i.id for i in sort_items(items, SortOrder.TITLE)] == ["3", "1", "2"]
    assert [i.id for i in sort_items(items, SortOrder.AUTHOR)] == ["2", "3", "1"]


def test_sort_accepts_order_value(items):
    assert sort_items(items, "title") == sort_items(items, SortOrder.TITLE)


def test_sort_does_not_modify_input(items):
    before = list(items)
    sort_items(items, SortOrder.TITLE)
    assert items == before


def test_visible_items_filters_then_sorts(items):
    assert titles(visible_items(items, "19", SortOrder.RELEASE_YEAR)) == ["Blade Runner", "zelda", "Abyss"]


def test_sort_order_display_names():
    assert [order.display_name for order in SortOrder] == [
        "Added Order", "Title (A-Z)", "Author (A-Z)", "Release Year (Asc)",
    ]
