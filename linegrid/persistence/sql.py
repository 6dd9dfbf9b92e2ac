"""
Database-backed data access: tables are rows in saved_tables, keyed by path.
"""

import logging

from sqlalchemy.orm import sessionmaker

from linegrid.engine.table import GameTable
from linegrid.persistence import TableDataAccess
from linegrid.persistence.database import make_session_factory
from linegrid.persistence.models import SavedTable

logger = logging.getLogger(__name__)


class SqlDataAccess(TableDataAccess):
    def __init__(self, session_factory: sessionmaker | None = None):
        self._session_factory = session_factory or make_session_factory()

    def load(self, path: str) -> GameTable:
        db = self._session_factory()
        try:
            row = db.get(SavedTable, path)
            if row is None:
                raise FileNotFoundError(f"Saved table not found: {path}")
            logger.debug("Loaded table %s (saved %s)", path, row.saved_at)
            return GameTable.from_json(row.table_state)
        finally:
            db.close()

    def save(self, path: str, table: GameTable) -> None:
        """Insert or overwrite the row for `path`."""
        db = self._session_factory()
        try:
            row = db.get(SavedTable, path)
            if row is None:
                row = SavedTable(path=path)
                db.add(row)
            row.size = table.size
            row.table_state = table.to_json()
            db.commit()
            logger.debug("Saved table %s", path)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()
