# mediashelf/sa/database.py
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import NullPool, QueuePool
import logging
import os

from mediashelf.sa.models import Base

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///mediashelf.db"

class Database:
    def __init__(self, connection_string: Optional[str] = None, **engine_kwargs):
        """Initialize database connection
        
        Args:
            connection_string: Database connection string (e.g., "sqlite:///path/to/mediashelf.db")
                              If None, will use the MEDIASHELF_DATABASE_URL environment variable or fall back to SQLite
            engine_kwargs: Additional keyword arguments to pass to create_engine
        """
        self.connection_string = connection_string or os.getenv("MEDIASHELF_DATABASE_URL", DEFAULT_DATABASE_URL)
        self.is_sqlite = self.connection_string.startswith("sqlite")
        
        # SQLite-specific settings
        if self.is_sqlite:
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            engine_kwargs.setdefault("poolclass", NullPool)
            
        else:
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
            engine_kwargs.setdefault("poolclass", QueuePool)
            
        self.engine = create_engine(
            self.connection_string,
            **engine_kwargs
        )
        
        self._SessionFactory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )
        logger.debug("Database configured for %s", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def get_db(self) -> Iterator[Session]:
        """Context manager for database sessions"""
        session: Session = self._SessionFactory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
            
    def init_db(self) -> None:
        """Initialize database schema"""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        return self._SessionFactory()

    def dispose(self) -> None:
        """Release pooled connections"""
        self.engine.dispose()
