# mediashelf/sa/models/preference.py
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from .base import Base, TimestampMixin

class Preference(Base, TimestampMixin):
    """A single string value stored under a key"""
    __tablename__ = 'preference'

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
