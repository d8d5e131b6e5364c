# mediashelf/models/__init__.py
from .media import Icon, Shelf, Item, SortOrder, DEFAULT_ICON, MATERIAL_ICONS_FONT

__all__ = [
    'Icon',
    'Shelf',
    'Item',
    'SortOrder',
    'DEFAULT_ICON',
    'MATERIAL_ICONS_FONT',
]
