# mediashelf/icons.py
from typing import Dict, Optional

from mediashelf.exceptions import ValidationError
from mediashelf.models import Icon, DEFAULT_ICON, MATERIAL_ICONS_FONT

# Shelf glyphs offered when creating or editing a shelf, keyed by their
# Material Icons name.
ICON_CATALOGUE: Dict[str, Icon] = {
    'movie_outlined': Icon(code_point=0xf1ac, font_family=MATERIAL_ICONS_FONT),
    'book_outlined': Icon(code_point=0xef24, font_family=MATERIAL_ICONS_FONT),
    'videogame_asset_outlined': Icon(code_point=0xf3f9, font_family=MATERIAL_ICONS_FONT),
    'album_outlined': Icon(code_point=0xee2d, font_family=MATERIAL_ICONS_FONT),
    'tv_outlined': Icon(code_point=0xf3b6, font_family=MATERIAL_ICONS_FONT),
    'newspaper_outlined': Icon(code_point=0xf0f8, font_family=MATERIAL_ICONS_FONT),
    'collections_bookmark_outlined': Icon(code_point=0xef6f, font_family=MATERIAL_ICONS_FONT),
    'photo_library_outlined': Icon(code_point=0xf1fe, font_family=MATERIAL_ICONS_FONT),
    'folder_open': DEFAULT_ICON,
    'architecture_outlined': Icon(code_point=0xee45, font_family=MATERIAL_ICONS_FONT),
    'devices_other_outlined': Icon(code_point=0xefb7, font_family=MATERIAL_ICONS_FONT),
    'audiotrack_outlined': Icon(code_point=0xee6e, font_family=MATERIAL_ICONS_FONT),
    'palette_outlined': Icon(code_point=0xf1ce, font_family=MATERIAL_ICONS_FONT),
    'fitness_center_outlined': Icon(code_point=0xf04c, font_family=MATERIAL_ICONS_FONT),
}

DEFAULT_ICON_NAME = 'folder_open'


def icon_by_name(name: str) -> Icon:
    """Look up a catalogue icon by name.

    Raises:
        ValidationError: if the name is not in the catalogue
    """
    try:
        return ICON_CATALOGUE[name.strip().lower()]
    except KeyError:
        raise ValidationError(f"Unknown icon: {name}") from None


def icon_name(icon: Icon) -> Optional[str]:
    """Name of a catalogue icon, or None for a glyph outside the catalogue"""
    for name, candidate in ICON_CATALOGUE.items():
        if candidate == icon:
            return name
    return None
