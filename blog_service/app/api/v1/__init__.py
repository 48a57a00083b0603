"""
Version 1 of the API.

This subpackage bundles the gRPC servicers for the first public
version of the blog protocol.  Breaking changes to ``blog.proto``
should be introduced in a new version subpackage (e.g. ``v2``).
"""
