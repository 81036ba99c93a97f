# errors.py


class FetcherError(Exception):
    """Base class for failures in the fetch-all pipeline."""


class DatabaseConnectionError(FetcherError):
    """Cluster unreachable, credentials rejected or connect timed out."""


class QueryError(FetcherError):
    """Transport or server failure while reading documents."""
