"""
MongoDB integration.

This module provides ``create_client`` for opening a ``MongoClient``
from the configured URI, the ``mongo_client`` context manager that
closes it again, and ``get_collection`` which resolves the collection
holding blog posts.  ``pymongo`` keeps its own connection pool and the
client is safe to share between request threads, so one client is
opened per server process.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from .config import Settings, settings as default_settings


logger = logging.getLogger(__name__)


def create_client(uri: str, **kwargs) -> MongoClient:
    """Create a new ``MongoClient`` for ``uri``.

    ``MongoClient`` connects lazily; errors such as an unreachable
    server surface on the first operation rather than here.
    """
    return MongoClient(uri, **kwargs)


@contextmanager
def mongo_client(config: Optional[Settings] = None) -> Iterator[MongoClient]:
    """Context manager that yields a client and closes it on exit."""
    config = config or default_settings
    client = create_client(config.mongodb_uri)
    logger.info(
        "Using MongoDB collection %s.%s",
        config.mongodb_database,
        config.mongodb_collection,
    )
    try:
        yield client
    finally:
        client.close()
        logger.info("MongoDB client closed")


def get_collection(client: MongoClient, config: Optional[Settings] = None) -> Collection:
    """Return the collection that stores blog posts."""
    config = config or default_settings
    return client[config.mongodb_database][config.mongodb_collection]
