from .base import Base
from .submission import Submission


__all__ = [
    "Base",
    "Submission",
]
