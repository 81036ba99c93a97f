import mongomock
import pytest
from pymongo.errors import AutoReconnect


class _Admin:
    def __init__(self, client):
        self._client = client

    def command(self, name):
        self._client.commands.append(name)
        if self._client.ping_error is not None:
            raise self._client.ping_error
        return {"ok": 1.0}


class FakeClient:
    """Stands in for MongoClient: data from `backend`, counts close() calls."""

    def __init__(self, backend=None, ping_error=None):
        self._backend = backend if backend is not None else mongomock.MongoClient()
        self.ping_error = ping_error
        self.commands = []
        self.close_calls = 0
        self.admin = _Admin(self)

    def __getitem__(self, name):
        return self._backend[name]

    def close(self):
        self.close_calls += 1


class FailingCollection:
    """Drops the connection after yielding `before_failure` documents."""

    name = "User"

    def __init__(self, before_failure=0):
        self.before_failure = before_failure

    def find(self, *args, **kwargs):
        def cursor():
            for i in range(self.before_failure):
                yield {"n": i}
            raise AutoReconnect("connection reset by peer")

        return cursor()


class FailingDatabase:
    def __init__(self, before_failure=0):
        self.before_failure = before_failure

    def __getitem__(self, name):
        return FailingCollection(self.before_failure)


class FailingBackend:
    def __init__(self, before_failure=0):
        self.before_failure = before_failure

    def __getitem__(self, name):
        return FailingDatabase(self.before_failure)


@pytest.fixture
def mongo():
    return mongomock.MongoClient()


@pytest.fixture
def factory_for():
    """Build a client factory that hands out a prepared client and records calls."""

    def make(client):
        def factory(uri, **kwargs):
            factory.calls.append((uri, kwargs))
            return client

        factory.calls = []
        return factory

    return make
