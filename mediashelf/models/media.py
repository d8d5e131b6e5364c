# mediashelf/models/media.py

from pydantic import BaseModel, ConfigDict
from typing import Optional
from enum import Enum

MATERIAL_ICONS_FONT = "MaterialIcons"


class SortOrder(str, Enum):
    ADDED = "added"
    TITLE = "title"
    AUTHOR = "author"
    RELEASE_YEAR = "release_year"

    @property
    def display_name(self) -> str:
        return _SORT_ORDER_NAMES[self]


_SORT_ORDER_NAMES = {
    SortOrder.ADDED: "Added Order",
    SortOrder.TITLE: "Title (A-Z)",
    SortOrder.AUTHOR: "Author (A-Z)",
    SortOrder.RELEASE_YEAR: "Release Year (Asc)",
}


class Icon(BaseModel):
    """Glyph reference: a code point and the font family it comes from"""
    code_point: int
    font_family: Optional[str] = None

    model_config = ConfigDict(frozen=True)


DEFAULT_ICON = Icon(code_point=0xe2a3, font_family=MATERIAL_ICONS_FONT)  # folder_open


class Shelf(BaseModel):
    """A named category that items are filed under"""
    id: str
    name: str
    icon: Icon = DEFAULT_ICON

    model_config = ConfigDict(frozen=True)


class Item(BaseModel):
    """A single catalogued entry on a shelf"""
    id: str
    title: str
    shelf_id: str
    author: Optional[str] = None
    release_year: Optional[int] = None
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True)
