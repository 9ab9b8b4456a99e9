"""
Database models package.
"""

from jobtracker.models.document import Document
from jobtracker.models.user import User

__all__ = ["Document", "User"]
