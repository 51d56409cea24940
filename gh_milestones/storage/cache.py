"""Local JSON cache of a fetched issue set."""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from ..exceptions import CacheFormatError, CacheIOError
from ..github_client.models import GitHubIssue

logger = logging.getLogger(__name__)

_issue_list = TypeAdapter(list[GitHubIssue])


class IssueCache:
    """Stores a flat issue list as a single JSON file.

    The file holds a JSON array of issue objects using GitHub's REST field
    names, so caches produced from raw API output load as well.
    """

    def __init__(self, path: str | Path):
        """Initialize cache.

        Args:
            path: Location of the cache file
        """
        self.path = Path(path)

    def save(self, issues: list[GitHubIssue]) -> Path:
        """Write issues to the cache file, replacing any previous content.

        Args:
            issues: Issues to store, in the order they should be replayed

        Returns:
            Path to the written file

        Raises:
            CacheIOError: If the file cannot be written
        """
        data = _issue_list.dump_python(issues, mode="json")

        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise CacheIOError(f"Cannot write issue cache {self.path}: {e}") from e

        logger.info("Saved %d issues to %s", len(issues), self.path)
        return self.path

    def load(self) -> list[GitHubIssue]:
        """Read issues back from the cache file.

        Returns:
            Issues in stored order

        Raises:
            CacheIOError: If the file cannot be read
            CacheFormatError: If the content is not a valid issue list
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CacheFormatError(
                f"Issue cache {self.path} is not valid JSON: {e}"
            ) from e
        except OSError as e:
            raise CacheIOError(f"Cannot read issue cache {self.path}: {e}") from e

        try:
            issues = _issue_list.validate_python(data)
        except ValidationError as e:
            raise CacheFormatError(
                f"Issue cache {self.path} does not contain an issue list: {e}"
            ) from e

        logger.info("Loaded %d issues from %s", len(issues), self.path)
        return issues
