# mediashelf/services/collection_service.py

import json
import logging
from datetime import datetime
from typing import Any, NamedTuple, Optional

from mediashelf.codec import decode_import_item, encode_items
from mediashelf.exceptions import CodecError, ImportFormatError, NotFoundError, ValidationError
from mediashelf.models import DEFAULT_ICON, Icon, Item, Shelf
from mediashelf.store import MediaCollection
from mediashelf.utils.ids import generate_id

logger = logging.getLogger(__name__)

# Distinguishes "not provided" from an explicit None when editing
UNSET: Any = object()

MIN_RELEASE_YEAR = 1000
MAX_YEARS_AHEAD = 5


class ImportResult(NamedTuple):
    imported: int
    skipped: int


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class CollectionService:
    """Validated commands over a MediaCollection.

    The collection accepts whatever it is given; this layer makes sure only
    well-formed shelves and items reach it.
    """

    def __init__(self, collection: MediaCollection):
        self.collection = collection

    # Shelves

    def require_shelf(self, shelf_id: str) -> Shelf:
        shelf = self.collection.get_shelf(shelf_id)
        if shelf is None:
            raise NotFoundError(f"Shelf not found: {shelf_id}")
        return shelf

    def find_shelf(self, ref: str) -> Shelf:
        """Find a shelf by id, or failing that by case-insensitive name"""
        shelf = self.collection.get_shelf(ref)
        if shelf is not None:
            return shelf
        wanted = ref.strip().lower()
        for shelf in self.collection.list_shelves():
            if shelf.name.lower() == wanted:
                return shelf
        raise NotFoundError(f"Shelf not found: {ref}")

    def _check_shelf_name(self, name: str, exclude_id: Optional[str] = None) -> str:
        name = (name or '').strip()
        if not name:
            raise ValidationError("Shelf name cannot be empty")
        for shelf in self.collection.list_shelves():
            if shelf.id != exclude_id and shelf.name.lower() == name.lower():
                raise ValidationError("A shelf with this name already exists!")
        return name

    def create_shelf(self, name: str, icon: Icon = DEFAULT_ICON) -> Shelf:
        shelf = Shelf(id=generate_id(), name=self._check_shelf_name(name), icon=icon)
        self.collection.add_shelf(shelf)
        logger.info(f"Created shelf {shelf.name} ({shelf.id})")
        return shelf

    def edit_shelf(self, shelf_id: str, name: Any = UNSET, icon: Any = UNSET) -> Shelf:
        shelf = self.require_shelf(shelf_id)
        update = {}
        if name is not UNSET:
            update['name'] = self._check_shelf_name(name, exclude_id=shelf.id)
        if icon is not UNSET:
            if icon is None:
                raise ValidationError("Shelf icon cannot be empty")
            update['icon'] = icon
        updated = shelf.model_copy(update=update)
        self.collection.update_shelf(updated)
        return updated

    def remove_shelf(self, shelf_id: str) -> int:
        """Delete a shelf and its items.

        Returns:
            The number of items deleted with the shelf
        """
        shelf = self.require_shelf(shelf_id)
        count = len(self.collection.items_for_shelf(shelf.id))
        self.collection.delete_shelf(shelf.id)
        logger.info(f"Deleted shelf {shelf.name} with {count} items")
        return count

    def move_shelf(self, old_index: int, new_index: int) -> None:
        size = len(self.collection.list_shelves())
        if not 0 <= old_index < size or not 0 <= new_index <= size:
            raise ValidationError(f"Shelf positions must be between 0 and {size}")
        self.collection.reorder_shelf(old_index, new_index)

    # Items

    def _check_title(self, title: str) -> str:
        title = (title or '').strip()
        if not title:
            raise ValidationError("Title cannot be empty")
        return title

    def _check_release_year(self, year: Optional[int]) -> Optional[int]:
        if year is None:
            return None
        latest = datetime.now().year + MAX_YEARS_AHEAD
        if isinstance(year, bool) or not MIN_RELEASE_YEAR <= year <= latest:
            raise ValidationError("Please enter a valid year (e.g., 2023)")
        return year

    def require_item(self, item_id: str) -> Item:
        item = self.collection.get_item(item_id)
        if item is None:
            raise NotFoundError(f"Item not found: {item_id}")
        return item

    def create_item(self, shelf_id: str, title: str, author: Optional[str] = None,
                    release_year: Optional[int] = None, notes: Optional[str] = None) -> Item:
        shelf = self.require_shelf(shelf_id)
        item = Item(
            id=generate_id(),
            title=self._check_title(title),
            shelf_id=shelf.id,
            author=_clean_optional(author),
            release_year=self._check_release_year(release_year),
            notes=_clean_optional(notes),
        )
        self.collection.add_item(item)
        return item

    def edit_item(self, item_id: str, title: Any = UNSET, shelf_id: Any = UNSET, author: Any = UNSET,
                  release_year: Any = UNSET, notes: Any = UNSET) -> Item:
        item = self.require_item(item_id)
        update = {}
        if title is not UNSET:
            update['title'] = self._check_title(title)
        if shelf_id is not UNSET:
            update['shelf_id'] = self.require_shelf(shelf_id).id
        if author is not UNSET:
            update['author'] = _clean_optional(author)
        if release_year is not UNSET:
            update['release_year'] = self._check_release_year(release_year)
        if notes is not UNSET:
            update['notes'] = _clean_optional(notes)
        updated = item.model_copy(update=update)
        self.collection.update_item(updated)
        return updated

    def remove_item(self, item_id: str) -> Item:
        item = self.require_item(item_id)
        self.collection.delete_item(item.id)
        return item

    # Import / export

    def export_shelf(self, shelf_id: str) -> str:
        """Items of a shelf as an indented JSON array"""
        shelf = self.require_shelf(shelf_id)
        return encode_items(self.collection.items_for_shelf(shelf.id))

    def import_items(self, shelf_id: str, payload: str) -> ImportResult:
        """Add items from a JSON array to a shelf.

        Every decoded element gets a new id and is filed on the target shelf.
        Elements that cannot be decoded are skipped.

        Raises:
            NotFoundError: if the shelf does not exist
            ImportFormatError: if the payload is empty, not JSON, or not an array
        """
        shelf = self.require_shelf(shelf_id)
        payload = (payload or '').strip()
        if not payload:
            raise ImportFormatError("No JSON data provided.")
        try:
            decoded = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ImportFormatError(f"JSON format error: {e.msg}") from e
        if not isinstance(decoded, list):
            raise ImportFormatError("Expected a JSON array of items.")

        new_items = []
        skipped = 0
        for index, data in enumerate(decoded):
            try:
                new_items.append(decode_import_item(data, shelf_id=shelf.id, item_id=generate_id()))
            except CodecError as e:
                logger.info(f"Skipping element {index}: {str(e)}")
                skipped += 1

        self.collection.add_items(new_items)
        logger.info(f"Imported {len(new_items)} items into {shelf.name}, skipped {skipped}")
        return ImportResult(imported=len(new_items), skipped=skipped)
