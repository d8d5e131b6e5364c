# mediashelf/services/__init__.py
from .collection_service import CollectionService, ImportResult, UNSET

__all__ = ['CollectionService', 'ImportResult', 'UNSET']
