"""
Shared fixtures for the blog service tests.

MongoDB is replaced by ``FakeCollection``, a small in-memory object
implementing the handful of ``pymongo.collection.Collection`` methods
the service uses.  It records every call so that tests can assert that
storage was (or was not) contacted, and can be told to fail with a
given exception.
"""

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId

from blog_client import BlogAPI
from blog_service.app.api.v1.endpoints.blogs import BlogServicer
from blog_service.app.core.config import Settings
from blog_service.app.main import create_server
from blog_service.app.services.blog_service import BlogService


class FakeCursor:
    def __init__(self, documents, fail_with=None):
        self._documents = documents
        self._fail_with = fail_with
        self.closed = False

    def __iter__(self):
        for document in self._documents:
            yield document
        if self._fail_with is not None:
            raise self._fail_with

    def close(self):
        self.closed = True


class FakeCollection:
    def __init__(self):
        self.documents = {}
        self.calls = []
        self.cursors = []
        self.fail_with = None
        self.cursor_fail_with = None
        self.inserted_id_override = None

    def _record(self, name):
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def insert_one(self, document):
        self._record("insert_one")
        stored = copy.deepcopy(document)
        stored["_id"] = ObjectId()
        self.documents[stored["_id"]] = stored
        inserted_id = stored["_id"]
        if self.inserted_id_override is not None:
            inserted_id = self.inserted_id_override
        return SimpleNamespace(inserted_id=inserted_id, acknowledged=True)

    def find_one(self, filter):
        self._record("find_one")
        document = self.documents.get(filter["_id"])
        return copy.deepcopy(document) if document is not None else None

    def replace_one(self, filter, replacement):
        self._record("replace_one")
        object_id = filter["_id"]
        if object_id not in self.documents:
            return SimpleNamespace(matched_count=0, modified_count=0)
        self.documents[object_id] = {"_id": object_id, **copy.deepcopy(replacement)}
        return SimpleNamespace(matched_count=1, modified_count=1)

    def delete_one(self, filter):
        self._record("delete_one")
        removed = self.documents.pop(filter["_id"], None)
        return SimpleNamespace(deleted_count=0 if removed is None else 1)

    def find(self, filter):
        self._record("find")
        cursor = FakeCursor(
            [copy.deepcopy(doc) for doc in self.documents.values()],
            fail_with=self.cursor_fail_with,
        )
        self.cursors.append(cursor)
        return cursor


class Aborted(Exception):
    """Raised by ``FakeContext.abort`` like grpc does on a real context."""

    def __init__(self, code, details):
        super().__init__(code, details)
        self.code = code
        self.details = details


class FakeContext:
    def __init__(self):
        self.code = None
        self.details = None

    def abort(self, code, details):
        self.code = code
        self.details = details
        raise Aborted(code, details)


@pytest.fixture
def collection():
    return FakeCollection()


@pytest.fixture
def service(collection):
    return BlogService(collection)


@pytest.fixture
def servicer(service):
    return BlogServicer(service)


@pytest.fixture
def context():
    return FakeContext()


@pytest.fixture
def test_settings():
    return Settings(app_env="test", max_workers=4)


@pytest.fixture
def running_server(collection, test_settings):
    """Start an in-process server on a free local port; yield its address."""
    server = create_server(collection, test_settings)
    port = server.add_insecure_port("localhost:0")
    server.start()
    try:
        yield f"localhost:{port}"
    finally:
        server.stop(None)


@pytest.fixture
def api(running_server):
    client = BlogAPI(target=running_server, timeout=5)
    try:
        yield client
    finally:
        client.close()
