"""
Client and server classes for the ``blog.BlogService`` gRPC service.

The layout follows what ``grpcio-tools`` emits for ``blog.proto``: a
``BlogServiceStub`` for clients, a ``BlogServiceServicer`` base class
for implementations and ``add_BlogServiceServicer_to_server`` to
register an implementation with a ``grpc.Server``.
"""

import grpc
from google.protobuf import empty_pb2

from . import blog_pb2


SERVICE_NAME = "blog.BlogService"


def _method(name: str) -> str:
    return f"/{SERVICE_NAME}/{name}"


class BlogServiceStub:
    """Client-side stub for ``blog.BlogService``."""

    def __init__(self, channel: grpc.Channel) -> None:
        self.CreateBlog = channel.unary_unary(
            _method("CreateBlog"),
            request_serializer=blog_pb2.CreateBlogRequest.SerializeToString,
            response_deserializer=blog_pb2.CreateBlogResponse.FromString,
        )
        self.ReadBlog = channel.unary_unary(
            _method("ReadBlog"),
            request_serializer=blog_pb2.ReadBlogRequest.SerializeToString,
            response_deserializer=blog_pb2.ReadBlogResponse.FromString,
        )
        self.UpdateBlog = channel.unary_unary(
            _method("UpdateBlog"),
            request_serializer=blog_pb2.UpdateBlogRequest.SerializeToString,
            response_deserializer=empty_pb2.Empty.FromString,
        )
        self.DeleteBlog = channel.unary_unary(
            _method("DeleteBlog"),
            request_serializer=blog_pb2.DeleteBlogRequest.SerializeToString,
            response_deserializer=empty_pb2.Empty.FromString,
        )
        self.ListBlog = channel.unary_stream(
            _method("ListBlog"),
            request_serializer=empty_pb2.Empty.SerializeToString,
            response_deserializer=blog_pb2.ListBlogResponse.FromString,
        )


class BlogServiceServicer:
    """Base class for ``blog.BlogService`` implementations.

    Every method answers ``UNIMPLEMENTED`` until overridden.
    """

    def CreateBlog(self, request, context):
        self._unimplemented(context)

    def ReadBlog(self, request, context):
        self._unimplemented(context)

    def UpdateBlog(self, request, context):
        self._unimplemented(context)

    def DeleteBlog(self, request, context):
        self._unimplemented(context)

    def ListBlog(self, request, context):
        self._unimplemented(context)

    @staticmethod
    def _unimplemented(context):
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details("Method not implemented!")
        raise NotImplementedError("Method not implemented!")


def add_BlogServiceServicer_to_server(servicer: BlogServiceServicer, server: grpc.Server) -> None:
    """Register ``servicer`` as the ``blog.BlogService`` handler on ``server``."""
    rpc_method_handlers = {
        "CreateBlog": grpc.unary_unary_rpc_method_handler(
            servicer.CreateBlog,
            request_deserializer=blog_pb2.CreateBlogRequest.FromString,
            response_serializer=blog_pb2.CreateBlogResponse.SerializeToString,
        ),
        "ReadBlog": grpc.unary_unary_rpc_method_handler(
            servicer.ReadBlog,
            request_deserializer=blog_pb2.ReadBlogRequest.FromString,
            response_serializer=blog_pb2.ReadBlogResponse.SerializeToString,
        ),
        "UpdateBlog": grpc.unary_unary_rpc_method_handler(
            servicer.UpdateBlog,
            request_deserializer=blog_pb2.UpdateBlogRequest.FromString,
            response_serializer=empty_pb2.Empty.SerializeToString,
        ),
        "DeleteBlog": grpc.unary_unary_rpc_method_handler(
            servicer.DeleteBlog,
            request_deserializer=blog_pb2.DeleteBlogRequest.FromString,
            response_serializer=empty_pb2.Empty.SerializeToString,
        ),
        "ListBlog": grpc.unary_stream_rpc_method_handler(
            servicer.ListBlog,
            request_deserializer=empty_pb2.Empty.FromString,
            response_serializer=blog_pb2.ListBlogResponse.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(SERVICE_NAME, rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
