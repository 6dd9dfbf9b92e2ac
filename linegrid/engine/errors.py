"""
Errors raised by the engine.
Invalid user input (locked cells, moves after game over) is ignored rather than raised;
these cover programming and configuration mistakes only.
"""


class InvalidEdgeError(ValueError):
    """An edge was built from two identical nodes."""


class NoDataAccessError(RuntimeError):
    """Load or save was requested on a model created without a data access."""

    def __init__(self, message: str = "No data access is provided."):
        super().__init__(message)
