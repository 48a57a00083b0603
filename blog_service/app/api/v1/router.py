"""
Top-level registration for version 1 of the API.

``add_services`` attaches every v1 servicer to a ``grpc.Server``.  When
new services are introduced, register them here and add their full
names to ``SERVICE_NAMES`` so that reflection advertises them.
"""

import grpc
from pymongo.collection import Collection

from blog_service.app.protos import blog_pb2, blog_pb2_grpc
from blog_service.app.services.blog_service import BlogService
from .endpoints.blogs import BlogServicer


SERVICE_NAMES = (
    blog_pb2.DESCRIPTOR.services_by_name["BlogService"].full_name,
)


def add_services(server: grpc.Server, collection: Collection) -> None:
    """Register the v1 servicers backed by ``collection`` on ``server``."""
    blog_pb2_grpc.add_BlogServiceServicer_to_server(
        BlogServicer(BlogService(collection)), server
    )
