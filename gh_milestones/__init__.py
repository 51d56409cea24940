"""Milestone and component progress reports for GitHub issue trackers."""

__version__ = "0.1.0"
