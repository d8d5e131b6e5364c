# mediashelf/sa/__init__.py
from .database import Database
from .models import Base, Preference

__all__ = [
    'Database',
    'Base',
    'Preference',
]
