"""
Main entrypoint for the blog service.

This module assembles the gRPC server.  ``create_server`` builds a
``grpc.Server`` with the v1 services registered (and reflection when
running in development) without binding any port, which keeps it
usable from tests.  ``serve`` performs the full start-up: logging,
settings validation, TLS credentials, the MongoDB client, the secure
port, and blocking until the process is asked to stop::

    python run.py
"""

import logging
import signal
import threading
from concurrent import futures
from typing import Optional

import grpc
from grpc_reflection.v1alpha import reflection
from pymongo.collection import Collection

from .api.v1.router import SERVICE_NAMES, add_services
from .core.config import Settings, settings as default_settings
from .core.db import get_collection, mongo_client
from .core.logging_config import setup_logging
from .core.security import load_server_credentials


logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Required settings are missing."""


class ServerStartError(RuntimeError):
    """The server could not listen on its configured address."""


def create_server(collection: Collection, config: Optional[Settings] = None) -> grpc.Server:
    """Create a gRPC server with all services registered.

    No port is bound; callers add a secure or insecure port before
    calling ``start``.
    """
    config = config or default_settings
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=config.max_workers))
    add_services(server, collection)

    if config.is_development:
        reflection.enable_server_reflection(SERVICE_NAMES + (reflection.SERVICE_NAME,), server)
        logger.info("Server reflection enabled")

    return server


def check_settings(config: Settings) -> None:
    """Raise ``ConfigurationError`` naming the first unset required variable."""
    missing = config.missing_variables()
    if missing:
        raise ConfigurationError(f"{missing[0]} environment variable is not set")


def bind_secure_port(server: grpc.Server, address: str, credentials: grpc.ServerCredentials) -> int:
    """Bind ``address`` with TLS and return the port.

    Recent grpcio releases raise ``RuntimeError`` when the address is
    unusable; older ones return ``0``.  Both become ``ServerStartError``.
    """
    try:
        port = server.add_secure_port(address, credentials)
    except RuntimeError as exc:
        raise ServerStartError(f"can not listen on network tcp at address {address}: {exc}") from exc
    if not port:
        raise ServerStartError(f"can not listen on network tcp at address {address}")
    return port


def serve(config: Optional[Settings] = None, stop_event: Optional[threading.Event] = None) -> None:
    """Run the blog service until it is asked to stop.

    The server stops when ``stop_event`` is set.  When called from the
    main thread, SIGINT and SIGTERM set it as well; the previous signal
    handlers are restored on the way out.
    """
    config = config or default_settings
    setup_logging(config)
    check_settings(config)

    credentials = load_server_credentials(config.ssl_cert_file, config.ssl_key_file)
    stop_requested = stop_event or threading.Event()

    with mongo_client(config) as client:
        server = create_server(get_collection(client, config), config)
        bind_secure_port(server, config.address, credentials)

        def _request_stop(signum, frame) -> None:
            logger.info("Received signal %s, stopping the server", signum)
            stop_requested.set()

        previous_handlers = {}
        if threading.current_thread() is threading.main_thread():
            previous_handlers = {
                sig: signal.signal(sig, _request_stop) for sig in (signal.SIGINT, signal.SIGTERM)
            }
        try:
            server.start()
            logger.info("Starting %s on tcp at address %s", config.project_name, config.address)
            stop_requested.wait()
        finally:
            server.stop(config.shutdown_grace).wait()
            for sig, handler in previous_handlers.items():
                signal.signal(sig, handler)
            logger.info("Server stopped")
