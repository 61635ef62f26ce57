from .editing_session import EditingSession
from .notebook import Notebook

__all__ = [
    "EditingSession",
    "Notebook",
]
