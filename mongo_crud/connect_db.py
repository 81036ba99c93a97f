# connect_db.py - open, scope and release the MongoDB client
import os
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, TextIO

from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .errors import DatabaseConnectionError

load_dotenv()
MONGO_URI = os.getenv("MONGO_URI")
DB_NAME = os.getenv("DB_NAME", "HelloWorld")
COLLECTION_NAME = os.getenv("COLLECTION_NAME", "User")

SERVER_SELECTION_TIMEOUT_MS = 5000


def connect(
    uri: Optional[str] = None,
    client_factory: Optional[Callable[..., MongoClient]] = None,
    out: Optional[TextIO] = None,
) -> MongoClient:
    """Open a client for `uri` (default: MONGO_URI) and check it with a ping.

    The driver connects lazily, so the ping is what actually proves the
    cluster is reachable and the credentials are accepted. Any driver error
    is raised as DatabaseConnectionError, including the ValueError the URI
    parser throws for a malformed connection string. Nothing is retried.
    """
    uri = uri or MONGO_URI
    if not uri:
        raise DatabaseConnectionError("No connection string given (set MONGO_URI)")

    factory = client_factory or MongoClient
    client = None
    try:
        client = factory(uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
        client.admin.command("ping")
    except (PyMongoError, ValueError) as e:
        # half-open client: release its monitor threads before giving up
        if client is not None:
            client.close()
        raise DatabaseConnectionError(f"Failed to connect to MongoDB: {e}") from e

    print("✅ Connected successfully to server", file=out or sys.stdout)
    return client


def select_database(client: MongoClient, name: str) -> Database:
    # no round trip; a missing database just reads as empty
    return client[name]


def select_collection(db: Database, name: str) -> Collection:
    return db[name]


def close(client: MongoClient) -> None:
    client.close()


@contextmanager
def open_collection(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
    collection_name: Optional[str] = None,
    client_factory: Optional[Callable[..., MongoClient]] = None,
    out: Optional[TextIO] = None,
) -> Iterator[Collection]:
    """Yield the named collection; the client is closed however the block exits."""
    client = connect(uri, client_factory=client_factory, out=out)
    try:
        db = select_database(client, db_name or DB_NAME)
        yield select_collection(db, collection_name or COLLECTION_NAME)
    finally:
        close(client)


if __name__ == "__main__":
    close(connect())
