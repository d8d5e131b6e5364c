"""Media shelf: a catalogue of books, films and games organised on shelves"""
from .models import Icon, Shelf, Item, SortOrder
from .store import MediaCollection

__all__ = ['Icon', 'Shelf', 'Item', 'SortOrder', 'MediaCollection']
