"""Demonstration client for the blog service.

The script walks one blog post through its whole life cycle against a
running server: it creates the post, reads it back, replaces its
contents, deletes it and finally lists whatever posts remain.  Each
step is printed to the console.  The first failed call (including a
call that exceeds its deadline) stops the run with exit status 1.

The script expects a small set of environment variables:

``SSL_CERT_FILE``
    Certificate the client trusts when connecting to the server.
    Required.

``BLOG_SERVER_ADDRESS``
    ``host:port`` of the server.  Defaults to ``localhost:50051``.

``BLOG_CLIENT_TIMEOUT``
    Deadline in seconds applied to every call.  Defaults to ``1``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, Optional

from blog_client import DEFAULT_TARGET, DEFAULT_TIMEOUT, BlogAPI
from blog_service.app.core.security import CredentialsError, load_channel_credentials


logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
logger = logging.getLogger(__name__)

SAMPLE_BLOG = {
    "author_id": "this is a sample ID",
    "title": "This is a Sample Blog Post",
    "content": "This is some content for the sample blog post.",
}

UPDATED_FIELDS = {
    "author_id": "Updated Author ID",
    "title": "This is an Updated Title",
    "content": "The content was also updated.",
}


class DemoFailed(Exception):
    """A remote call failed and the demonstration cannot continue."""


def _check(error: Optional[Dict[str, Any]]) -> None:
    if error:
        raise DemoFailed(error["message"])


def create_blog(api: BlogAPI) -> Dict[str, str]:
    blog_id, error = api.create_blog(**SAMPLE_BLOG)
    _check(error)
    blog = {"id": blog_id, **SAMPLE_BLOG}
    print(f"blog has been created:\n{blog}")
    return blog


def read_blog(api: BlogAPI, blog_id: str) -> Dict[str, str]:
    blog, error = api.read_blog(blog_id)
    _check(error)
    print(f"blog has been read:\n{blog}")
    return blog


def update_blog(api: BlogAPI, blog: Dict[str, str]) -> Dict[str, str]:
    updated = {**blog, **UPDATED_FIELDS}
    _, error = api.update_blog(updated)
    _check(error)
    print(f"blog has been updated:\n{updated}")
    return updated


def delete_blog(api: BlogAPI, blog: Dict[str, str]) -> None:
    _, error = api.delete_blog(blog["id"])
    _check(error)
    print(f"blog has been deleted:\n{blog}")


def list_blogs(api: BlogAPI) -> None:
    print("listing blogs:")
    blogs, error = api.list_blogs()
    for blog in blogs:
        print(blog)
    _check(error)


def run_demo(api: BlogAPI) -> None:
    """Run create, read, update, delete and list in order."""
    blog = create_blog(api)
    read_blog(api, blog["id"])
    blog = update_blog(api, blog)
    delete_blog(api, blog)
    list_blogs(api)


def main() -> int:
    cert_file = os.getenv("SSL_CERT_FILE")
    if not cert_file:
        logger.error("SSL_CERT_FILE environment variable is not set")
        return 1
    target = os.getenv("BLOG_SERVER_ADDRESS", DEFAULT_TARGET)
    raw_timeout = os.getenv("BLOG_CLIENT_TIMEOUT", str(DEFAULT_TIMEOUT))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        logger.error("BLOG_CLIENT_TIMEOUT must be a number of seconds, got %r", raw_timeout)
        return 1

    try:
        credentials = load_channel_credentials(cert_file)
    except CredentialsError as exc:
        logger.error("%s", exc)
        return 1

    with BlogAPI(target=target, credentials=credentials, timeout=timeout) as api:
        try:
            run_demo(api)
        except DemoFailed as exc:
            logger.error("%s", exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
