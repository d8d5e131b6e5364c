# mediashelf/sa/repositories/__init__.py
from .preference import PreferenceRepository

__all__ = ['PreferenceRepository']
