"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class ShortURL:
    """Represents a short URL mapping in storage."""

    url: str
    id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class Visit:
    """A single redirect served for a short URL."""

    url_id: str
    ip: str = ""
    referer: str = ""
    user_agent: str = ""
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "url_id": self.url_id,
            "ip": self.ip,
            "referer": self.referer,
            "user_agent": self.user_agent,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
