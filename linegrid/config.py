"""
Single place for default game configuration.
Change DEFAULT_DIFFICULTY to switch the timer used when a model is created without one.
"""
import os

# One of "easy", "medium", "hard" (see linegrid.engine.definitions.GameDifficulty).
DEFAULT_DIFFICULTY = "medium"

# Cells per side of a new table.
DEFAULT_TABLE_SIZE = 9

# SQLAlchemy URL for SqlDataAccess. Falls back to a SQLite file next to the persistence package.
_raw_url = os.environ.get("LINEGRID_DATABASE_URL")
if _raw_url:
    DATABASE_URL = _raw_url
else:
    _DB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "persistence")
    DATABASE_URL = f"sqlite:///{os.path.join(_DB_DIR, 'linegrid.db')}"
