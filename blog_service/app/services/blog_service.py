"""
Service layer for blog posts.

``BlogService`` performs exactly one MongoDB operation per call:
``insert_one`` for creation, ``find_one`` for reads, ``replace_one``
for updates, ``delete_one`` for deletion and ``find`` for listing.
Identifiers are validated before storage is touched; a malformed
identifier raises ``InvalidBlogIdError``.  Missing posts are reported
as ``None`` (reads) or ``False`` (updates and deletes) so that the API
layer decides how to present them.  Driver errors
(``pymongo.errors.PyMongoError``) propagate unchanged, and documents
that cannot be decoded raise ``BlogStorageError``.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional

from bson import ObjectId
from pymongo.collection import Collection

from blog_service.app.schemas.blog import BlogCreate, BlogRead


logger = logging.getLogger(__name__)


class InvalidBlogIdError(ValueError):
    """The given identifier is not a valid ObjectId hex string."""


class BlogStorageError(RuntimeError):
    """The store returned something the service cannot interpret."""


def parse_blog_id(blog_id: str) -> ObjectId:
    """Convert a 24 character hex string into an ``ObjectId``."""
    if not isinstance(blog_id, str) or not ObjectId.is_valid(blog_id):
        raise InvalidBlogIdError(f"Invalid blog id {blog_id!r}")
    return ObjectId(blog_id)


class BlogService:
    """Service class for managing blog posts in a MongoDB collection."""

    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def create_blog(self, data: BlogCreate) -> str:
        """Insert a new post and return the identifier assigned by the store."""
        result = self.collection.insert_one(data.to_document())
        inserted_id = result.inserted_id
        if not isinstance(inserted_id, ObjectId):
            raise BlogStorageError(f"can not cast {inserted_id!r} to ObjectID")
        blog_id = str(inserted_id)
        logger.info("Created blog %s", blog_id)
        return blog_id

    def get_blog(self, blog_id: str) -> Optional[BlogRead]:
        """Retrieve a single post by its identifier."""
        object_id = parse_blog_id(blog_id)
        document = self.collection.find_one({"_id": object_id})
        if document is None:
            return None
        return self._decode(document)

    def update_blog(self, blog_id: str, data: BlogCreate) -> bool:
        """Replace the stored post with ``data``.

        The whole document is replaced; fields are never merged with
        the previous version.  Returns ``False`` if no post matched.
        """
        object_id = parse_blog_id(blog_id)
        result = self.collection.replace_one({"_id": object_id}, data.to_document())
        if result.matched_count < 1:
            return False
        logger.info("Updated blog %s", blog_id)
        return True

    def delete_blog(self, blog_id: str) -> bool:
        """Delete a post by identifier.

        Returns ``True`` if a document was deleted, ``False`` otherwise.
        """
        object_id = parse_blog_id(blog_id)
        result = self.collection.delete_one({"_id": object_id})
        if result.deleted_count < 1:
            return False
        logger.info("Deleted blog %s", blog_id)
        return True

    def list_blogs(self) -> Iterator[BlogRead]:
        """Yield every stored post in the store's natural order.

        The cursor is closed when iteration finishes, fails, or the
        caller stops consuming the generator early.
        """
        cursor = self.collection.find({})
        try:
            for document in cursor:
                yield self._decode(document)
        finally:
            cursor.close()

    @staticmethod
    def _decode(document: Mapping[str, Any]) -> BlogRead:
        try:
            return BlogRead.from_document(document)
        except ValueError as exc:
            raise BlogStorageError(f"Could not decode blog document: {exc}") from exc
