"""
API package containing versioned gRPC services.

A version subpackage exposes ``add_services`` from its ``router``
module, which registers all of its servicers on a ``grpc.Server``.
"""
