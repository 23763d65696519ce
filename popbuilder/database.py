"""
Population store connection management.
"""
import logging
import os
from typing import Any, List, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import SQLAlchemyError

from popbuilder.exceptions import QueryError, StoreUnavailableError

logger = logging.getLogger(__name__)


def read_only_url(path: str) -> str:
    """SQLite URL that opens an existing file in read-only mode."""
    return f"sqlite:///file:{os.path.abspath(path)}?mode=ro&uri=true"


class PopulationDatabase:
    """
    Read-only handle on one population store.
    
    Opened once at startup and shared by every request. The stores are
    never written by the application, so no sessions or transactions
    are involved.
    """
    
    def __init__(self, path: str, name: str):
        self.path = path
        self.name = name
        self._engine: Optional[Engine] = None
    
    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise QueryError(f"The {self.name} store is not open")
        return self._engine
    
    @property
    def is_open(self) -> bool:
        return self._engine is not None
    
    def open(self) -> None:
        """
        Create the engine and check the store has a population table.
        
        Raises:
            StoreUnavailableError: If the file is missing or unreadable
        """
        if not os.path.exists(self.path):
            raise StoreUnavailableError(
                f"The {self.name} store was not found at {self.path}"
            )
        
        engine = create_engine(
            read_only_url(self.path),
            connect_args={"check_same_thread": False},
            echo=False,
            pool_pre_ping=True,
        )
        
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT count(*) FROM population"))
        except SQLAlchemyError as e:
            engine.dispose()
            raise StoreUnavailableError(
                f"The {self.name} store at {self.path} could not be opened: {e}"
            ) from e
        
        self._engine = engine
        logger.info(f"Opened {self.name} store: {self.path}")
    
    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            logger.info(f"Closed {self.name} store")
    
    def fetch_one(self, statement: Any) -> Row:
        """Execute a statement that must return exactly one row."""
        try:
            with self.engine.connect() as conn:
                return conn.execute(statement).one()
        except SQLAlchemyError as e:
            raise QueryError(f"Query on the {self.name} store failed: {e}") from e
    
    def fetch_all(self, statement: Any) -> List[Row]:
        """Execute a statement and return all of its rows."""
        try:
            with self.engine.connect() as conn:
                return conn.execute(statement).all()
        except SQLAlchemyError as e:
            raise QueryError(f"Query on the {self.name} store failed: {e}") from e
    
    def ping(self) -> bool:
        """Check the store answers a trivial query."""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, QueryError):
            return False


def get_results_db(request: Request) -> PopulationDatabase:
    """
    Dependency for the results (ten-year band) store.
    Use with FastAPI's Depends().
    """
    return request.app.state.results_db


def get_download_db(request: Request) -> PopulationDatabase:
    """
    Dependency for the download (five-year band) store.
    Use with FastAPI's Depends().
    """
    return request.app.state.download_db
