"""
File-backed data access: one JSON document per path.
"""

import logging

from linegrid.engine.table import GameTable
from linegrid.persistence import TableDataAccess

logger = logging.getLogger(__name__)


class JsonFileDataAccess(TableDataAccess):
    """Stores each table as GameTable.to_json() in the file at `path`."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: str) -> GameTable:
        logger.debug("Reading table from %s", path)
        with open(path, "r", encoding=self.encoding) as f:
            return GameTable.from_json(f.read())

    def save(self, path: str, table: GameTable) -> None:
        logger.debug("Writing %dx%d table to %s", table.size, table.size, path)
        with open(path, "w", encoding=self.encoding) as f:
            f.write(table.to_json())
