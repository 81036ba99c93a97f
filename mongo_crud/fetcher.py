# fetcher.py
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .connect_db import open_collection
from .errors import FetcherError, QueryError

# Documents are schema-less: whatever keys the collection happens to hold.
Document = Dict[str, Any]


def fetch_all(collection: Collection) -> List[Document]:
    """Read every document in `collection` into a list, in server order."""
    try:
        return list(collection.find({}))
    except PyMongoError as e:
        raise QueryError(f"Failed to read collection '{collection.name}': {e}") from e


def report(documents: List[Document], stream: Optional[TextIO] = None) -> None:
    print("Found documents =>", documents, file=stream or sys.stdout)


def run(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
    collection_name: Optional[str] = None,
    client_factory=None,
    sink: Optional[Callable[[List[Document]], None]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """connect -> select db -> select collection -> fetch -> report -> close.

    Returns a process exit code. Connect and query failures are printed to
    `err` (stderr by default) instead of raised. The client is released on
    every path once connect has succeeded.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        with open_collection(uri, db_name, collection_name, client_factory, out) as collection:
            documents = fetch_all(collection)
            report(documents, out)
            if sink is not None:
                sink(documents)
    except FetcherError as e:
        print(f"❌ {type(e).__name__}: {e}", file=err)
        return 1

    print("done..", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(run())
