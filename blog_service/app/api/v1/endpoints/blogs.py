"""
Blog endpoints for API v1.

``BlogServicer`` implements the ``blog.BlogService`` gRPC service on
top of ``BlogService``.  Each handler converts the protobuf request
into a schema, performs one service call and converts the outcome
back.  Failures are reported through gRPC status codes:

* ``INVALID_ARGUMENT`` when the identifier is not a valid ObjectId;
* ``NOT_FOUND`` when no post has the given identifier;
* ``INTERNAL`` for any storage or decoding failure.  The details are
  logged here and the caller only receives a generic message.
"""

import logging

import grpc
from google.protobuf import empty_pb2
from pymongo.errors import PyMongoError

from blog_service.app.protos import blog_pb2, blog_pb2_grpc
from blog_service.app.schemas.blog import BlogCreate, BlogRead
from blog_service.app.services.blog_service import (
    BlogService,
    BlogStorageError,
    InvalidBlogIdError,
)


logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "given ID is invalid"
NOT_FOUND_MESSAGE = "blog post with given ID is not found"
INTERNAL_MESSAGE = "internal server error"
CAST_ERROR_MESSAGE = "can not cast to ObjectID"

# Failures that are the server's fault rather than the caller's.
STORAGE_ERRORS = (PyMongoError, BlogStorageError)


def blog_to_message(blog: BlogRead) -> blog_pb2.Blog:
    """Convert a stored post into its wire representation."""
    return blog_pb2.Blog(
        id=blog.id,
        author_id=blog.author_id,
        title=blog.title,
        content=blog.content,
    )


def blog_from_message(message: blog_pb2.Blog) -> BlogCreate:
    """Extract the author-controlled fields of a wire ``Blog``."""
    return BlogCreate(
        author_id=message.author_id,
        title=message.title,
        content=message.content,
    )


class BlogServicer(blog_pb2_grpc.BlogServiceServicer):
    """gRPC handlers for blog posts.

    ``context.abort`` raises, so code following an abort never runs.
    """

    def __init__(self, service: BlogService) -> None:
        self.service = service

    def CreateBlog(self, request, context):
        data = blog_from_message(request.blog)
        try:
            blog_id = self.service.create_blog(data)
        except BlogStorageError:
            logger.exception("Unexpected key type returned for new blog")
            context.abort(grpc.StatusCode.INTERNAL, CAST_ERROR_MESSAGE)
        except PyMongoError:
            logger.exception("Failed to create blog")
            context.abort(grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE)
        return blog_pb2.CreateBlogResponse(id=blog_id)

    def ReadBlog(self, request, context):
        try:
            blog = self.service.get_blog(request.id)
        except InvalidBlogIdError:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, INVALID_ID_MESSAGE)
        except STORAGE_ERRORS:
            logger.exception("Failed to read blog %s", request.id)
            context.abort(grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE)
        if blog is None:
            context.abort(grpc.StatusCode.NOT_FOUND, NOT_FOUND_MESSAGE)
        return blog_pb2.ReadBlogResponse(blog=blog_to_message(blog))

    def UpdateBlog(self, request, context):
        blog_id = request.blog.id
        try:
            updated = self.service.update_blog(blog_id, blog_from_message(request.blog))
        except InvalidBlogIdError:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, INVALID_ID_MESSAGE)
        except STORAGE_ERRORS:
            logger.exception("Failed to update blog %s", blog_id)
            context.abort(grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE)
        if not updated:
            context.abort(grpc.StatusCode.NOT_FOUND, NOT_FOUND_MESSAGE)
        return empty_pb2.Empty()

    def DeleteBlog(self, request, context):
        try:
            deleted = self.service.delete_blog(request.id)
        except InvalidBlogIdError:
            context.abort(grpc.StatusCode.INVALID_ARGUMENT, INVALID_ID_MESSAGE)
        except STORAGE_ERRORS:
            logger.exception("Failed to delete blog %s", request.id)
            context.abort(grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE)
        if not deleted:
            context.abort(grpc.StatusCode.NOT_FOUND, NOT_FOUND_MESSAGE)
        return empty_pb2.Empty()

    def ListBlog(self, request, context):
        blogs = self.service.list_blogs()
        try:
            for blog in blogs:
                yield blog_pb2.ListBlogResponse(blog=blog_to_message(blog))
        except STORAGE_ERRORS:
            logger.exception("Failed to list blogs")
            context.abort(grpc.StatusCode.INTERNAL, INTERNAL_MESSAGE)
        finally:
            blogs.close()
