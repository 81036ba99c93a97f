"""mongo_crud package initializer

Read path of the MongoDB CRUD tutorial: connect to a cluster, open a
database and collection, fetch every document and print it.

Import `run` for the whole pipeline, or the individual steps from
`connect_db` and `fetcher` when you need more control.
"""

from .errors import DatabaseConnectionError, FetcherError, QueryError
from .fetcher import fetch_all, report, run

__all__ = [
    "connect_db",
    "errors",
    "fetcher",
    "DatabaseConnectionError",
    "FetcherError",
    "QueryError",
    "fetch_all",
    "report",
    "run",
]
