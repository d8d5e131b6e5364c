# mediashelf/sa/models/__init__.py
from .base import Base, TimestampMixin
from .preference import Preference

__all__ = [
    'Base',
    'TimestampMixin',
    'Preference',
]
