"""
Protocol definition for the blog service.

``blog.proto`` is the source of truth for the wire format.  The
``blog_pb2`` module exposes the message classes and ``blog_pb2_grpc``
the stub, servicer base class and registration helper.
"""
