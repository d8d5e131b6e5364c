# tests/utils.py
from mediashelf.exceptions import PersistenceError


class MemoryStorage:
    """Blob storage kept in a list, optionally failing every write"""

    def __init__(self, blob=None, fail=False):
        self.blob = blob
        self.fail = fail
        self.writes = []

    def read(self):
        return self.blob

    def write(self, blob):
        if self.fail:
            raise PersistenceError("disk full")
        self.writes.append(blob)
        self.blob = blob
