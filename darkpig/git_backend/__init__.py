"""Git backend for reading repository history"""

from darkpig.git_backend.repository import DarkPigRepository

__all__ = ["DarkPigRepository"]
