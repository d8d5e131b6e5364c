# mediashelf/codec.py
"""JSON encoding of shelves and items.

The blob written to storage has two arrays, ``mediaTypes`` (shelves) and
``mediaItems`` (items). Export files are a bare array of item objects with
the same per-item shape.
"""
import json
from typing import Any, Dict, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from mediashelf.exceptions import CodecError
from mediashelf.models import Icon, Item, Shelf


class ShelfRecord(BaseModel):
    id: str
    name: str
    icon_code_point: int = Field(alias='iconCodePoint')
    icon_font_family: Optional[str] = Field(default=None, alias='iconFontFamily')

    model_config = ConfigDict(strict=True, populate_by_name=True)

    @classmethod
    def from_shelf(cls, shelf: Shelf) -> 'ShelfRecord':
        return cls(
            id=shelf.id,
            name=shelf.name,
            icon_code_point=shelf.icon.code_point,
            icon_font_family=shelf.icon.font_family,
        )

    def to_shelf(self) -> Shelf:
        return Shelf(
            id=self.id,
            name=self.name,
            icon=Icon(code_point=self.icon_code_point, font_family=self.icon_font_family),
        )


class ItemRecord(BaseModel):
    id: str
    title: str
    notes: Optional[str] = None
    media_type_id: str = Field(alias='mediaTypeId')
    author: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias='releaseYear')

    model_config = ConfigDict(strict=True, populate_by_name=True)

    @classmethod
    def from_item(cls, item: Item) -> 'ItemRecord':
        return cls(
            id=item.id,
            title=item.title,
            notes=item.notes,
            media_type_id=item.shelf_id,
            author=item.author,
            release_year=item.release_year,
        )

    def to_item(self) -> Item:
        return Item(
            id=self.id,
            title=self.title,
            shelf_id=self.media_type_id,
            author=self.author,
            release_year=self.release_year,
            notes=self.notes,
        )


class ImportItemRecord(BaseModel):
    """Item shape accepted on import, where id and shelf are reassigned"""
    id: Optional[str] = None
    title: str
    notes: Optional[str] = None
    media_type_id: Optional[str] = Field(default=None, alias='mediaTypeId')
    author: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias='releaseYear')

    model_config = ConfigDict(strict=True)


class CollectionRecord(BaseModel):
    media_types: List[ShelfRecord] = Field(alias='mediaTypes')
    media_items: List[ItemRecord] = Field(alias='mediaItems')

    model_config = ConfigDict(strict=True, populate_by_name=True)


def encode_shelf(shelf: Shelf) -> Dict[str, Any]:
    return ShelfRecord.from_shelf(shelf).model_dump(by_alias=True)


def encode_item(item: Item) -> Dict[str, Any]:
    return ItemRecord.from_item(item).model_dump(by_alias=True)


def encode_collection(shelves: Iterable[Shelf], items: Iterable[Item]) -> str:
    """Serialize the whole collection into a single blob"""
    data = {
        'mediaTypes': [encode_shelf(shelf) for shelf in shelves],
        'mediaItems': [encode_item(item) for item in items],
    }
    return json.dumps(data)


def decode_collection(blob: str) -> Tuple[List[Shelf], List[Item]]:
    """Parse a blob produced by encode_collection.

    Any malformed entity fails the whole blob.

    Raises:
        CodecError: if the blob is not valid JSON of the expected shape
    """
    try:
        record = CollectionRecord.model_validate_json(blob)
    except PydanticValidationError as e:
        raise CodecError(f"Invalid collection data: {e.error_count()} error(s)") from e
    shelves = [r.to_shelf() for r in record.media_types]
    items = [r.to_item() for r in record.media_items]
    return shelves, items


def encode_items(items: Iterable[Item], indent: Optional[int] = 2) -> str:
    """Serialize items as a JSON array, as used for shelf export"""
    return json.dumps([encode_item(item) for item in items], indent=indent)


def decode_import_item(data: Any, shelf_id: str, item_id: str) -> Item:
    """Decode one element of an import array onto the given shelf and id.

    Raises:
        CodecError: if the element is not an object with a string title or
            carries a field of the wrong type
    """
    if not isinstance(data, dict):
        raise CodecError("Expected a JSON object")
    try:
        record = ImportItemRecord.model_validate(data)
    except PydanticValidationError as e:
        raise CodecError(f"Invalid item: {e.error_count()} error(s)") from e
    return Item(
        id=item_id,
        title=record.title,
        shelf_id=shelf_id,
        author=record.author,
        release_year=record.release_year,
        notes=record.notes,
    )
