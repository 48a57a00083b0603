"""
Pydantic models for blog posts.

``BlogBase`` holds the fields an author controls; ``BlogCreate`` is
the payload for creating a post and for replacing one on update, and
``BlogRead`` adds the identifier assigned by the store.  The helpers
on these models translate to and from MongoDB documents, where the
identifier lives in ``_id`` as a ``bson.ObjectId``.
"""

from typing import Any, Mapping

from bson import ObjectId
from pydantic import BaseModel, Field


class BlogBase(BaseModel):
    # proto3 strings default to "", so an unset field arrives empty
    author_id: str = Field("", examples=["this is a sample ID"])
    title: str = Field("", examples=["This is a Sample Blog Post"])
    content: str = Field("", examples=["This is some content for the sample blog post."])


class BlogCreate(BlogBase):
    """Schema for creating a blog post or replacing its contents."""

    def to_document(self) -> dict:
        """Return the storage document for this post, without ``_id``."""
        return self.model_dump(include={"author_id", "title", "content"})


class BlogRead(BlogBase):
    """Schema for a stored blog post."""

    id: str

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "BlogRead":
        """Build a ``BlogRead`` from a MongoDB document.

        Raises ``ValueError`` if ``_id`` is missing or not an
        ``ObjectId``.  Missing and ``null`` fields read as empty
        strings; other field validation errors propagate as
        ``pydantic.ValidationError`` (itself a ``ValueError``).
        """
        object_id = document.get("_id")
        if not isinstance(object_id, ObjectId):
            raise ValueError(f"document has no ObjectId key: {object_id!r}")
        return cls(
            id=str(object_id),
            author_id=document.get("author_id") or "",
            title=document.get("title") or "",
            content=document.get("content") or "",
        )
