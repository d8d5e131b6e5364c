# tests/test_persistence.py
import threading

import pytest
from mediashelf.exceptions import PersistenceError
from mediashelf.models import Item
from mediashelf.persistence import BackgroundWriter, SyncWriter, STORAGE_KEY
from mediashelf.sa.models import Preference
from mediashelf.sa.repositories import PreferenceRepository
from mediashelf.store import MediaCollection
from tests.utils import MemoryStorage


class BlockingStorage(MemoryStorage):
    """Holds the first write until released so later submissions pile up"""

    def __init__(self):
        super().__init__()
        self.started = threading.Event()
        self.release = threading.Event()

    def write(self, blob):
        self.started.set()
        self.release.wait(5)
        super().write(blob)


def test_sql_storage_round_trip(storage):
    assert storage.read() is None
    storage.write('{"a": 1}')
    storage.write('{"a": 2}')
    assert storage.read() == '{"a": 2}'


def test_sql_storage_uses_fixed_key(storage, db_session):
    storage.write("blob")
    assert PreferenceRepository(db_session).list_keys() == [STORAGE_KEY]


def test_sql_storage_clear(storage):
    storage.write("blob")
    assert storage.clear() is True
    assert storage.read() is None
    assert storage.clear() is False


def test_sql_storage_wraps_database_errors(database, storage):
    Preference.__table__.drop(database.engine)
    with pytest.raises(PersistenceError):
        storage.write("blob")
    with pytest.raises(PersistenceError):
        storage.read()


def test_sync_writer_writes_immediately(memory_storage):
    writer = SyncWriter(memory_storage)
    writer.submit("one")
    assert memory_storage.writes == ["one"]
    assert writer.flush() is True


def test_sync_writer_raises_failures():
    writer = SyncWriter(MemoryStorage(fail=True))
    with pytest.raises(PersistenceError):
        writer.submit("one")


def test_background_writer_writes_in_background(memory_storage):
    with BackgroundWriter(memory_storage) as writer:
        writer.submit("one")
        assert writer.flush(timeout=5)
    assert memory_storage.writes == ["one"]
    assert writer.writes == 1


def test_background_writer_coalesces_pending_snapshots():
    storage = BlockingStorage()
    writer = BackgroundWriter(storage)
    writer.submit("first")
    assert storage.started.wait(5)
    writer.submit("second")
    writer.submit("third")
    storage.release.set()
    assert writer.flush(timeout=5)
    writer.close()
    assert storage.writes == ["first", "third"]
    assert storage.blob == "third"


def test_background_writer_reports_failures():
    reported = []
    writer = BackgroundWriter(MemoryStorage(fail=True), on_error=reported.append)
    writer.submit("one")
    assert writer.flush(timeout=5)
    writer.close()
    assert len(writer.errors) == 1
    assert reported == writer.errors
    assert isinstance(reported[0], PersistenceError)


def test_background_writer_survives_failing_callback():
    def explode(error):
        raise RuntimeError("callback failed")

    storage = MemoryStorage(fail=True)
    with BackgroundWriter(storage, on_error=explode) as writer:
        writer.submit("one")
        assert writer.flush(timeout=5)
        storage.fail = False
        writer.submit("two")
        assert writer.flush(timeout=5)
    assert storage.writes == ["two"]


def test_background_writer_close_writes_pending(memory_storage):
    writer = BackgroundWriter(memory_storage)
    writer.submit("last")
    writer.close(timeout=5)
    assert memory_storage.blob == "last"
    with pytest.raises(PersistenceError):
        writer.submit("too late")


def test_collection_saved_through_background_writer(storage, films):
    with BackgroundWriter(storage) as writer:
        collection = MediaCollection(writer=writer)
        collection.add_shelf(films)
        collection.add_item(Item(id="1", title="Alien", shelf_id=films.id))
        collection.update_item(Item(id="1", title="Aliens", shelf_id=films.id))
        assert writer.flush(timeout=5)

    loaded = MediaCollection.load(storage)
    assert loaded.list_shelves() == (films,)
    assert [item.title for item in loaded.list_items()] == ["Aliens"]


def test_memory_state_kept_when_background_write_fails(films):
    writer = BackgroundWriter(MemoryStorage(fail=True))
    collection = MediaCollection(writer=writer)
    collection.add_shelf(films)
    assert writer.flush(timeout=5)
    writer.close()
    assert collection.list_shelves() == (films,)
    assert len(writer.errors) == 1


def test_memory_storage_fixture(memory_storage):
    assert memory_storage.read() is None
    memory_storage.write("blob")
    assert memory_storage.writes == ["blob"]
    assert memory_storage.read() == "blob"
