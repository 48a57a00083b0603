"""Blog service client.

This module defines a small client wrapper around the
``blog.BlogService`` gRPC API.  It owns the channel and the generated
stub and exposes one high-level method per remote operation:

* :meth:`BlogAPI.create_blog` – store a new post and return its id.
* :meth:`BlogAPI.read_blog` – fetch a single post by its identifier.
* :meth:`BlogAPI.update_blog` – replace the contents of a stored post.
* :meth:`BlogAPI.delete_blog` – remove a post.
* :meth:`BlogAPI.list_blogs` – drain the server stream of all posts.

Every call carries the same deadline (``timeout`` seconds).  Methods do
not raise on RPC failures; like the rest of the project's clients they
return a ``(result, error)`` tuple where ``error`` is ``None`` on
success or a dictionary with ``code`` (the ``grpc.StatusCode`` name)
and ``message`` keys.  A deadline expiry is reported with the message
``"request timeout"``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import grpc
from google.protobuf import empty_pb2

from blog_service.app.protos import blog_pb2, blog_pb2_grpc


logger = logging.getLogger(__name__)

DEFAULT_TARGET = "localhost:50051"
DEFAULT_TIMEOUT = 1.0

Error = Dict[str, Any]


def blog_to_dict(blog: blog_pb2.Blog) -> Dict[str, str]:
    """Convert a wire ``Blog`` into a plain dictionary."""
    return {
        "id": blog.id,
        "author_id": blog.author_id,
        "title": blog.title,
        "content": blog.content,
    }


def blog_from_dict(data: Dict[str, Any]) -> blog_pb2.Blog:
    """Build a wire ``Blog`` from a dictionary, ignoring unknown keys."""
    return blog_pb2.Blog(
        id=data.get("id", ""),
        author_id=data.get("author_id", ""),
        title=data.get("title", ""),
        content=data.get("content", ""),
    )


class BlogAPI:
    """Client for interacting with the blog service."""

    def __init__(
        self,
        *,
        target: str = DEFAULT_TARGET,
        credentials: Optional[grpc.ChannelCredentials] = None,
        timeout: float = DEFAULT_TIMEOUT,
        stub: Optional[blog_pb2_grpc.BlogServiceStub] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            target: Server address, e.g. ``localhost:50051``.
            credentials: TLS credentials for the channel.  Without
                them an insecure channel is opened, which is only
                useful against local test servers.
            timeout: Deadline in seconds applied to every call.
            stub: Optional pre-built stub.  When given, no channel is
                created and :meth:`close` does nothing.
        """
        self.target = target
        self.timeout = timeout
        self.channel: Optional[grpc.Channel] = None
        if stub is None:
            if credentials is not None:
                self.channel = grpc.secure_channel(target, credentials)
            else:
                self.channel = grpc.insecure_channel(target)
            stub = blog_pb2_grpc.BlogServiceStub(self.channel)
        self.stub = stub

    def close(self) -> None:
        """Close the underlying channel, if this client created one."""
        if self.channel is not None:
            self.channel.close()
            self.channel = None

    def __enter__(self) -> "BlogAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Low level helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _error_from_rpc(exc: grpc.RpcError) -> Error:
        """Describe a failed call as an error dictionary."""
        code = exc.code() if callable(getattr(exc, "code", None)) else None
        if code == grpc.StatusCode.DEADLINE_EXCEEDED:
            message = "request timeout"
        else:
            details = exc.details() if callable(getattr(exc, "details", None)) else None
            message = details or str(exc)
        return {"code": code.name if code is not None else None, "message": message}

    def _call(self, method: str, request: Any) -> Tuple[Optional[Any], Optional[Error]]:
        """Invoke a unary RPC on the stub with the configured deadline.

        Returns:
            A tuple ``(response, error)``.  On failure ``response`` is
            ``None`` and ``error`` describes the status.
        """
        try:
            logger.debug("Calling %s on %s", method, self.target)
            return getattr(self.stub, method)(request, timeout=self.timeout), None
        except grpc.RpcError as exc:
            error = self._error_from_rpc(exc)
            logger.error("%s failed (%s): %s", method, error["code"], error["message"])
            return None, error

    # ------------------------------------------------------------------
    # Blog operations
    # ------------------------------------------------------------------
    def create_blog(self, author_id: str, title: str, content: str) -> Tuple[Optional[str], Optional[Error]]:
        """Create a post.

        Returns:
            A tuple ``(blog_id, error)``.
        """
        blog = blog_pb2.Blog(author_id=author_id, title=title, content=content)
        response, error = self._call("CreateBlog", blog_pb2.CreateBlogRequest(blog=blog))
        if error:
            return None, error
        return response.id, None

    def read_blog(self, blog_id: str) -> Tuple[Optional[Dict[str, str]], Optional[Error]]:
        """Retrieve a single post by id.

        Returns:
            A tuple ``(blog, error)``.
        """
        response, error = self._call("ReadBlog", blog_pb2.ReadBlogRequest(id=blog_id))
        if error:
            return None, error
        return blog_to_dict(response.blog), None

    def update_blog(self, blog: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace the author, title and content of ``blog["id"]``.

        Returns:
            A tuple ``(success, error)``.
        """
        request = blog_pb2.UpdateBlogRequest(blog=blog_from_dict(blog))
        _, error = self._call("UpdateBlog", request)
        if error:
            return False, error
        return True, None

    def delete_blog(self, blog_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a post by id.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._call("DeleteBlog", blog_pb2.DeleteBlogRequest(id=blog_id))
        if error:
            return False, error
        return True, None

    def list_blogs(self) -> Tuple[List[Dict[str, str]], Optional[Error]]:
        """Retrieve every stored post.

        The whole stream is drained before returning.  If the stream
        fails part way, the posts received so far are returned along
        with the error.

        Returns:
            A tuple ``(blogs, error)``.
        """
        blogs: List[Dict[str, str]] = []
        try:
            stream = self.stub.ListBlog(empty_pb2.Empty(), timeout=self.timeout)
            for response in stream:
                blogs.append(blog_to_dict(response.blog))
        except grpc.RpcError as exc:
            error = self._error_from_rpc(exc)
            logger.error("ListBlog failed (%s): %s", error["code"], error["message"])
            return blogs, error
        return blogs, None
