"""Local persistence for fetched issues."""

from .cache import IssueCache

__all__ = ["IssueCache"]
