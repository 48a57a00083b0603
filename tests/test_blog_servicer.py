"""
Tests for the gRPC handlers.

Handlers are called directly with a fake ``ServicerContext`` so that
the status code and message passed to ``abort`` can be inspected.
"""

import logging

import grpc
import pytest
from bson import ObjectId
from google.protobuf import empty_pb2
from pymongo.errors import AutoReconnect

from blog_service.app.api.v1.endpoints.blogs import (
    CAST_ERROR_MESSAGE,
    INTERNAL_MESSAGE,
    INVALID_ID_MESSAGE,
    NOT_FOUND_MESSAGE,
)
from blog_service.app.protos import blog_pb2
from conftest import Aborted


def make_blog(blog_id="", author_id="author", title="title", content="content"):
    return blog_pb2.Blog(id=blog_id, author_id=author_id, title=title, content=content)


def create(servicer, context, **fields):
    request = blog_pb2.CreateBlogRequest(blog=make_blog(**fields))
    return servicer.CreateBlog(request, context).id


class TestCreateBlog:

    def test_returns_new_id(self, servicer, context, collection):
        blog_id = create(servicer, context)

        assert ObjectId(blog_id) in collection.documents

    def test_client_supplied_id_is_ignored(self, servicer, context):
        supplied = str(ObjectId())

        blog_id = create(servicer, context, blog_id=supplied)

        assert blog_id != supplied

    def test_store_failure_is_internal_without_details(self, servicer, context, collection, caplog):
        collection.fail_with = AutoReconnect("secret connection detail")

        with caplog.at_level(logging.ERROR), pytest.raises(Aborted):
            create(servicer, context)

        assert context.code == grpc.StatusCode.INTERNAL
        assert context.details == INTERNAL_MESSAGE
        assert "secret connection detail" in caplog.text

    def test_unexpected_key_type_is_internal(self, servicer, context, collection):
        collection.inserted_id_override = 17

        with pytest.raises(Aborted):
            create(servicer, context)

        assert context.code == grpc.StatusCode.INTERNAL
        assert context.details == CAST_ERROR_MESSAGE


class TestReadBlog:

    def test_returns_stored_blog(self, servicer, context):
        blog_id = create(servicer, context, author_id="a", title="t", content="c")

        response = servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=blog_id), context)

        assert response.blog == make_blog(blog_id, "a", "t", "c")

    def test_malformed_id_is_invalid_argument(self, servicer, context, collection):
        with pytest.raises(Aborted):
            servicer.ReadBlog(blog_pb2.ReadBlogRequest(id="bad"), context)

        assert context.code == grpc.StatusCode.INVALID_ARGUMENT
        assert context.details == INVALID_ID_MESSAGE
        assert collection.calls == []

    def test_absent_id_is_not_found(self, servicer, context):
        with pytest.raises(Aborted):
            servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=str(ObjectId())), context)

        assert context.code == grpc.StatusCode.NOT_FOUND
        assert context.details == NOT_FOUND_MESSAGE

    def test_store_failure_is_internal(self, servicer, context, collection):
        collection.fail_with = AutoReconnect("down")

        with pytest.raises(Aborted):
            servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=str(ObjectId())), context)

        assert context.code == grpc.StatusCode.INTERNAL
        assert context.details == INTERNAL_MESSAGE

    def test_corrupt_document_is_internal(self, servicer, context, collection):
        object_id = ObjectId()
        collection.documents[object_id] = {"_id": object_id, "content": ["not", "text"]}

        with pytest.raises(Aborted):
            servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=str(object_id)), context)

        assert context.code == grpc.StatusCode.INTERNAL

    def test_null_title_is_returned_empty(self, servicer, context, collection):
        object_id = ObjectId()
        collection.documents[object_id] = {"_id": object_id, "author_id": "a", "title": None, "content": "c"}

        response = servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=str(object_id)), context)

        assert response.blog == make_blog(str(object_id), "a", "", "c")


class TestUpdateBlog:

    def test_replaces_fields_and_returns_empty(self, servicer, context):
        blog_id = create(servicer, context)
        request = blog_pb2.UpdateBlogRequest(blog=make_blog(blog_id, "new-a", "new-t", "new-c"))

        response = servicer.UpdateBlog(request, context)

        assert response == empty_pb2.Empty()
        read = servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=blog_id), context)
        assert read.blog == make_blog(blog_id, "new-a", "new-t", "new-c")

    def test_malformed_id_is_invalid_argument(self, servicer, context, collection):
        request = blog_pb2.UpdateBlogRequest(blog=make_blog("xyz"))

        with pytest.raises(Aborted):
            servicer.UpdateBlog(request, context)

        assert context.code == grpc.StatusCode.INVALID_ARGUMENT
        assert collection.calls == []

    def test_absent_id_is_not_found(self, servicer, context):
        request = blog_pb2.UpdateBlogRequest(blog=make_blog(str(ObjectId())))

        with pytest.raises(Aborted):
            servicer.UpdateBlog(request, context)

        assert context.code == grpc.StatusCode.NOT_FOUND


class TestDeleteBlog:

    def test_deletes_and_later_read_is_not_found(self, servicer, context):
        blog_id = create(servicer, context)

        assert servicer.DeleteBlog(blog_pb2.DeleteBlogRequest(id=blog_id), context) == empty_pb2.Empty()

        with pytest.raises(Aborted):
            servicer.ReadBlog(blog_pb2.ReadBlogRequest(id=blog_id), context)
        assert context.code == grpc.StatusCode.NOT_FOUND

    def test_malformed_id_is_invalid_argument(self, servicer, context, collection):
        with pytest.raises(Aborted):
            servicer.DeleteBlog(blog_pb2.DeleteBlogRequest(id=""), context)

        assert context.code == grpc.StatusCode.INVALID_ARGUMENT
        assert collection.calls == []

    def test_absent_id_is_not_found(self, servicer, context):
        with pytest.raises(Aborted):
            servicer.DeleteBlog(blog_pb2.DeleteBlogRequest(id=str(ObjectId())), context)

        assert context.code == grpc.StatusCode.NOT_FOUND


class TestListBlog:

    def test_streams_one_message_per_blog(self, servicer, context):
        ids = [create(servicer, context, title=f"post {i}") for i in range(3)]

        responses = list(servicer.ListBlog(empty_pb2.Empty(), context))

        assert [r.blog.id for r in responses] == ids
        assert [r.blog.title for r in responses] == ["post 0", "post 1", "post 2"]

    def test_empty_store_ends_stream_normally(self, servicer, context):
        assert list(servicer.ListBlog(empty_pb2.Empty(), context)) == []
        assert context.code is None

    def test_failure_mid_stream_is_internal(self, servicer, context, collection):
        create(servicer, context)
        collection.cursor_fail_with = AutoReconnect("lost")

        received = []
        with pytest.raises(Aborted):
            for response in servicer.ListBlog(empty_pb2.Empty(), context):
                received.append(response)

        assert len(received) == 1
        assert context.code == grpc.StatusCode.INTERNAL
        assert collection.cursors[-1].closed

    def test_failure_opening_cursor_is_internal(self, servicer, context, collection):
        collection.fail_with = AutoReconnect("down")

        with pytest.raises(Aborted):
            list(servicer.ListBlog(empty_pb2.Empty(), context))

        assert context.code == grpc.StatusCode.INTERNAL

    def test_cancelled_stream_closes_cursor(self, servicer, context, collection):
        create(servicer, context)
        create(servicer, context)

        stream = servicer.ListBlog(empty_pb2.Empty(), context)
        next(stream)
        stream.close()

        assert collection.cursors[-1].closed
