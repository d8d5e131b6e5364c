# tests/conftest.py
import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from mediashelf.models import Icon, Item, Shelf
from mediashelf.persistence import SqlBlobStorage
from mediashelf.sa.database import Database
from mediashelf.store import MediaCollection
from tests.utils import MemoryStorage


@pytest.fixture
def test_db_url(tmp_path):
    """URL of a fresh SQLite database file for one test."""
    return f"sqlite:///{tmp_path / 'test_mediashelf.db'}"

@pytest.fixture
def database(test_db_url):
    """Create a test database instance with the schema in place"""
    db = Database(test_db_url)
    db.init_db()
    yield db
    db.dispose()

@pytest.fixture
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def storage(database):
    return SqlBlobStorage(database)

@pytest.fixture
def memory_storage():
    return MemoryStorage()

@pytest.fixture
def films():
    return Shelf(id="100", name="Films", icon=Icon(code_point=0xf1ac, font_family="MaterialIcons"))

@pytest.fixture
def books():
    return Shelf(id="200", name="Books", icon=Icon(code_point=0xef24, font_family="MaterialIcons"))

@pytest.fixture
def games():
    return Shelf(id="300", name="Games", icon=Icon(code_point=0x1f3ae))

@pytest.fixture
def sample_items(films, books):
    return [
        Item(id="1001", title="Alien", shelf_id=films.id, author="Ridley Scott", release_year=1979),
        Item(id="1002", title="Heat", shelf_id=films.id, author="Michael Mann", release_year=1995,
             notes="Director's definitive edition"),
        Item(id="1003", title="Dune", shelf_id=books.id, author="Frank Herbert", release_year=1965),
        Item(id="1004", title="Untitled notebook", shelf_id=books.id),
    ]

@pytest.fixture
def collection(films, books, games, sample_items):
    """A collection with three shelves and four items, kept in memory"""
    return MediaCollection([films, books, games], sample_items)
