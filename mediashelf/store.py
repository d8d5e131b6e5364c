# mediashelf/store.py
"""In-memory collection of shelves and items.

``MediaCollection`` holds the state for the running process. Each effective
change notifies subscribed listeners and then hands a full snapshot of the
collection to the configured writer.
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from mediashelf.codec import decode_collection, encode_collection
from mediashelf.exceptions import CodecError
from mediashelf.models import Item, Shelf

logger = logging.getLogger(__name__)

Listener = Callable[['MediaCollection'], None]


class MediaCollection:
    """Shelves (in user order) and the items filed on them.

    Args:
        shelves: initial shelves, in display order
        items: initial items
        writer: receives the encoded snapshot after every change; None keeps
            the collection in memory only
    """

    def __init__(self, shelves: Iterable[Shelf] = (), items: Iterable[Item] = (), writer=None):
        self._shelves: List[Shelf] = list(shelves)
        self._items: List[Item] = list(items)
        self._listeners: List[Listener] = []
        self.writer = writer

    @classmethod
    def load(cls, storage, writer=None) -> 'MediaCollection':
        """Create a collection from the blob in storage.

        A missing blob gives an empty collection. So does a blob that cannot
        be decoded; its contents are discarded.
        """
        blob = storage.read()
        if blob is None:
            logger.info("No saved collection found, starting empty")
            return cls(writer=writer)
        try:
            shelves, items = decode_collection(blob)
        except CodecError as e:
            logger.warning(f"Discarding unreadable saved collection: {str(e)}")
            return cls(writer=writer)
        logger.info(f"Loaded {len(shelves)} shelves and {len(items)} items")
        return cls(shelves, items, writer=writer)

    # Listeners

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called after every change.

        Returns:
            A callable that unsubscribes the listener
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self) -> None:
        try:
            for listener in list(self._listeners):
                listener(self)
        finally:
            if self.writer is not None:
                self.writer.submit(self.snapshot())

    def snapshot(self) -> str:
        """Encode the full collection as a blob"""
        return encode_collection(self._shelves, self._items)

    # Queries

    def list_shelves(self) -> Tuple[Shelf, ...]:
        return tuple(self._shelves)

    def list_items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def items_for_shelf(self, shelf_id: str) -> Tuple[Item, ...]:
        return tuple(item for item in self._items if item.shelf_id == shelf_id)

    def get_shelf(self, shelf_id: str) -> Optional[Shelf]:
        return next((shelf for shelf in self._shelves if shelf.id == shelf_id), None)

    def get_item(self, item_id: str) -> Optional[Item]:
        return next((item for item in self._items if item.id == item_id), None)

    # Shelves

    def add_shelf(self, shelf: Shelf) -> None:
        self._shelves.append(shelf)
        self._changed()

    def update_shelf(self, shelf: Shelf) -> None:
        """Replace the shelf with the same id; unknown ids are ignored"""
        index = self._index_of(self._shelves, shelf.id)
        if index is None:
            return
        self._shelves[index] = shelf
        self._changed()

    def delete_shelf(self, shelf_id: str) -> None:
        """Remove a shelf together with every item filed on it"""
        shelves = [shelf for shelf in self._shelves if shelf.id != shelf_id]
        items = [item for item in self._items if item.shelf_id != shelf_id]
        if len(shelves) == len(self._shelves) and len(items) == len(self._items):
            return
        self._shelves = shelves
        self._items = items
        self._changed()

    def reorder_shelf(self, old_index: int, new_index: int) -> None:
        """Move the shelf at old_index so it lands before the shelf at new_index.

        new_index may equal the number of shelves to move a shelf to the end.
        Out of range indices are ignored.
        """
        if not 0 <= old_index < len(self._shelves):
            return
        if not 0 <= new_index <= len(self._shelves):
            return
        if old_index < new_index:
            new_index -= 1
        shelf = self._shelves.pop(old_index)
        self._shelves.insert(new_index, shelf)
        self._changed()

    # Items

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        self._changed()

    def add_items(self, items: Iterable[Item]) -> None:
        items = list(items)
        if not items:
            return
        self._items.extend(items)
        self._changed()

    def update_item(self, item: Item) -> None:
        """Replace the item with the same id; unknown ids are ignored"""
        index = self._index_of(self._items, item.id)
        if index is None:
            return
        self._items[index] = item
        self._changed()

    def delete_item(self, item_id: str) -> None:
        index = self._index_of(self._items, item_id)
        if index is None:
            return
        del self._items[index]
        self._changed()

    @staticmethod
    def _index_of(entries, entry_id: str) -> Optional[int]:
        for index, entry in enumerate(entries):
            if entry.id == entry_id:
                return index
        return None
