"""Exception hierarchy for milestone reports."""


class ReportError(Exception):
    """Base exception for report generation errors."""

    pass


class TransportError(ReportError):
    """Communication with the GitHub API failed."""

    pass


class CacheIOError(ReportError):
    """Issue cache file could not be read or written."""

    pass


class CacheFormatError(ReportError):
    """Issue cache file does not contain a valid issue list."""

    pass


class InputError(ReportError):
    """Command line input is malformed."""

    pass
