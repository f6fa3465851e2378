"""
Database models package.
"""

from jobly.models.job import Job
from jobly.models.user import User

__all__ = ["Job", "User"]
