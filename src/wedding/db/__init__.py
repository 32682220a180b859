"""Database package for invites and guests."""

from wedding.db.base import Base
from wedding.db.manager import DatabaseManager
from wedding.db.models import Guest, Invite

__all__ = [
    "Base",
    "DatabaseManager",
    "Guest",
    "Invite",
]
