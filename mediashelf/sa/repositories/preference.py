# mediashelf/sa/repositories/preference.py

from typing import List, Optional
from sqlalchemy.orm import Session
from mediashelf.sa.models import Preference

class PreferenceRepository:
    """Repository for key/value preference entries."""

    def __init__(self, session: Session):
        """Initialize the repository with a database session.
        
        Args:
            session: SQLAlchemy session for database operations
        """
        self.session = session

    def get(self, key: str) -> Optional[Preference]:
        """Get a preference entry by its key.
        
        Args:
            key: The key of the entry to retrieve
            
        Returns:
            The Preference object if found, None otherwise
        """
        return self.session.query(Preference).filter(Preference.key == key).first()

    def get_value(self, key: str) -> Optional[str]:
        """Get the value stored under a key, or None if nothing is stored."""
        entry = self.get(key)
        return entry.value if entry else None

    def set_value(self, key: str, value: str) -> Preference:
        """Store a value under a key, replacing any previous value.
        
        Args:
            key: The key to store under
            value: The string value to store
            
        Returns:
            The created or updated Preference object
        """
        entry = self.get(key)
        if entry:
            entry.value = value
        else:
            entry = Preference(key=key, value=value)
            self.session.add(entry)
        self.session.flush()
        return entry

    def delete(self, key: str) -> bool:
        """Delete the entry stored under a key.
        
        Returns:
            True if an entry was deleted, False if none existed
        """
        entry = self.get(key)
        if not entry:
            return False
        self.session.delete(entry)
        self.session.flush()
        return True

    def list_keys(self) -> List[str]:
        """Get all stored keys in alphabetical order."""
        return [row.key for row in self.session.query(Preference.key).order_by(Preference.key).all()]
