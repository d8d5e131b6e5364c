# mediashelf/queries.py
from typing import Iterable, List

from mediashelf.models import Item, SortOrder


def matches(item: Item, query: str) -> bool:
    """Case-insensitive substring match on title, author, notes and year"""
    query = query.lower()
    fields = (
        item.title,
        item.author or '',
        item.notes or '',
        str(item.release_year) if item.release_year is not None else '',
    )
    return any(query in field.lower() for field in fields)


def filter_items(items: Iterable[Item], query: str) -> List[Item]:
    """Items matching the search query; a blank query matches everything"""
    query = (query or '').strip()
    if not query:
        return list(items)
    return [item for item in items if matches(item, query)]


def _release_year_key(item: Item):
    # Unknown years sort after every known year
    return (item.release_year is None, item.release_year or 0)


_SORT_KEYS = {
    SortOrder.ADDED: lambda item: item.id,
    SortOrder.TITLE: lambda item: item.title.lower(),
    SortOrder.AUTHOR: lambda item: (item.author or '').lower(),
    SortOrder.RELEASE_YEAR: _release_year_key,
}


def sort_items(items: Iterable[Item], order: SortOrder = SortOrder.ADDED) -> List[Item]:
    """Stable sort of items by the given order"""
    return sorted(items, key=_SORT_KEYS[SortOrder(order)])


def visible_items(items: Iterable[Item], query: str = '', order: SortOrder = SortOrder.ADDED) -> List[Item]:
    """Filter by query, then sort"""
    return sort_items(filter_items(items, query), order)
