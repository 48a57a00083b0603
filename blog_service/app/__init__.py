"""
Application package for the blog service.

``main`` assembles the gRPC server, ``api`` holds the versioned
servicers, ``services`` the storage logic, ``schemas`` the Pydantic
models and ``core`` configuration, logging, database and TLS helpers.
``protos`` contains the protocol definition shared with clients.
"""

from .main import create_server, serve  # noqa: F401
