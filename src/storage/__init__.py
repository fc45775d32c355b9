"""Storage layer - plain CRUD repositories without business logic."""

from . import consecration_repo, journal_repo, session_repo, user_repo

__all__ = ["consecration_repo", "journal_repo", "session_repo", "user_repo"]
