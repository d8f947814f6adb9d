"""Storage layer for URL shortener."""

from .base import URLStorageBase
from .memory import MemoryStorage
from .models import ShortURL, Visit

__all__ = ["URLStorageBase", "MemoryStorage", "ShortURL", "Visit"]
