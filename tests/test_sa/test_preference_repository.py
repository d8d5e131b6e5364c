# tests/test_sa/test_preference_repository.py

import pytest
from sqlalchemy import inspect
from mediashelf.sa.models import Preference
from mediashelf.sa.repositories import PreferenceRepository

@pytest.fixture
def preference_repo(db_session):
    """Fixture to create a PreferenceRepository instance."""
    return PreferenceRepository(db_session)

def test_schema_has_preference_table(database):
    """Test the preference table is created with its columns"""
    inspector = inspect(database.engine)
    assert "preference" in inspector.get_table_names()
    columns = {col['name'] for col in inspector.get_columns("preference")}
    assert columns == {"key", "value", "created_at", "updated_at"}

def test_get_value_missing_key(preference_repo):
    """Test fetching a key that was never stored."""
    assert preference_repo.get_value("missing") is None
    assert preference_repo.get("missing") is None

def test_set_value_creates_entry(preference_repo, db_session):
    """Test storing a value under a new key."""
    entry = preference_repo.set_value("theme", "dark")
    db_session.commit()

    assert entry.key == "theme"
    assert entry.created_at is not None
    assert preference_repo.get_value("theme") == "dark"
    assert db_session.query(Preference).count() == 1

def test_set_value_replaces_existing(preference_repo, db_session):
    """Test storing a value under an existing key overwrites it."""
    preference_repo.set_value("theme", "dark")
    preference_repo.set_value("theme", "light")
    db_session.commit()

    assert preference_repo.get_value("theme") == "light"
    assert db_session.query(Preference).count() == 1

def test_delete(preference_repo, db_session):
    """Test deleting a stored key."""
    preference_repo.set_value("theme", "dark")
    db_session.commit()

    assert preference_repo.delete("theme") is True
    assert preference_repo.get_value("theme") is None
    assert preference_repo.delete("theme") is False

def test_list_keys_sorted(preference_repo):
    """Test keys come back in alphabetical order."""
    for key in ["zeta", "alpha", "mediaCollectionData"]:
        preference_repo.set_value(key, "x")
    assert preference_repo.list_keys() == ["alpha", "mediaCollectionData", "zeta"]

def test_large_value(preference_repo, db_session):
    """Test a blob larger than a string column fits."""
    blob = "x" * 100_000
    preference_repo.set_value("big", blob)
    db_session.commit()
    assert preference_repo.get_value("big") == blob

def test_database_get_db_rolls_back_on_error(database):
    """Test the session context manager discards failed work."""
    with pytest.raises(RuntimeError):
        with database.get_db() as session:
            PreferenceRepository(session).set_value("k", "v")
            raise RuntimeError("boom")

    with database.get_db() as session:
        assert PreferenceRepository(session).get_value("k") is None
