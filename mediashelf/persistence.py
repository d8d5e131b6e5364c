# mediashelf/persistence.py
"""Where collection snapshots go and when they are written.

A writer receives the encoded blob after every effective change to the
collection. ``SyncWriter`` writes before the change returns and raises on
failure. ``BackgroundWriter`` hands the blob to a worker thread, writes
snapshots in order, and keeps only the newest one when changes arrive
faster than storage can absorb them.
"""
import logging
import threading
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from mediashelf.exceptions import PersistenceError
from mediashelf.sa.database import Database
from mediashelf.sa.repositories import PreferenceRepository

logger = logging.getLogger(__name__)

STORAGE_KEY = 'mediaCollectionData'


class SqlBlobStorage:
    """Stores one blob under a fixed key in the preference table"""

    def __init__(self, database: Database, key: str = STORAGE_KEY):
        self.database = database
        self.key = key

    def read(self) -> Optional[str]:
        try:
            with self.database.get_db() as session:
                return PreferenceRepository(session).get_value(self.key)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to read '{self.key}': {e}") from e

    def write(self, blob: str) -> None:
        try:
            with self.database.get_db() as session:
                PreferenceRepository(session).set_value(self.key, blob)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to write '{self.key}': {e}") from e
        logger.debug("Wrote %d characters to '%s'", len(blob), self.key)

    def clear(self) -> bool:
        try:
            with self.database.get_db() as session:
                return PreferenceRepository(session).delete(self.key)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to clear '{self.key}': {e}") from e


class SyncWriter:
    """Write-through: every snapshot is stored before submit returns"""

    def __init__(self, storage):
        self.storage = storage

    def submit(self, blob: str) -> None:
        self.storage.write(blob)

    def flush(self, timeout: Optional[float] = None) -> bool:
        return True

    def close(self, timeout: Optional[float] = None) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


class BackgroundWriter:
    """Write-behind: snapshots are stored by a single worker thread.

    Args:
        storage: object with a ``write(blob)`` method
        on_error: called with the exception whenever a write fails
    """

    def __init__(self, storage, on_error: Optional[Callable[[Exception], None]] = None):
        self.storage = storage
        self.on_error = on_error
        self.errors: List[Exception] = []
        self.writes = 0
        self._condition = threading.Condition()
        self._pending: Optional[str] = None
        self._busy = False
        self._closed = False
        self._thread = threading.Thread(target=self._run, name='mediashelf-writer', daemon=True)
        self._thread.start()

    def submit(self, blob: str) -> None:
        with self._condition:
            if self._closed:
                raise PersistenceError("Writer is closed")
            if self._pending is not None:
                logger.debug("Replacing a snapshot that was not written yet")
            self._pending = blob
            self._condition.notify_all()

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait until every submitted snapshot has been handled.

        Returns:
            False if the timeout expired first
        """
        with self._condition:
            return self._condition.wait_for(
                lambda: self._pending is None and not self._busy, timeout
            )

    def close(self, timeout: Optional[float] = None) -> None:
        """Write any pending snapshot and stop the worker"""
        with self._condition:
            self._closed = True
            self._condition.notify_all()
        self._thread.join(timeout)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def _run(self) -> None:
        while True:
            with self._condition:
                while self._pending is None and not self._closed:
                    self._condition.wait()
                if self._pending is None:
                    return
                blob = self._pending
                self._pending = None
                self._busy = True
            try:
                self.storage.write(blob)
                self.writes += 1
            except Exception as e:
                logger.error(f"Failed to save collection: {str(e)}")
                self.errors.append(e)
                self._report(e)
            finally:
                with self._condition:
                    self._busy = False
                    self._condition.notify_all()

    def _report(self, error: Exception) -> None:
        if self.on_error is None:
            return
        try:
            self.on_error(error)
        except Exception:
            logger.exception("Error callback failed")
