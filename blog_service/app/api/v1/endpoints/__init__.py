"""
Endpoint subpackage for API v1.

Each module in this package defines a gRPC servicer for a specific
domain.  The servicers are registered with the server in
``router.py`` at the package level.
"""
