"""Entry point for the blog gRPC server.

Configuration is read from environment variables (see
``blog_service.app.core.config``).  At minimum ``APP_ENV``,
``MONGODB_URI``, ``SSL_CERT_FILE`` and ``SSL_KEY_FILE`` must be set.

Usage:
    python run.py
"""
import logging
import sys

from blog_service.app.core.security import CredentialsError
from blog_service.app.main import ConfigurationError, ServerStartError, serve


def main() -> int:
    """Run the server and translate start-up failures into an exit status."""
    try:
        serve()
    except (ConfigurationError, CredentialsError, ServerStartError) as exc:
        logging.getLogger(__name__).critical("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
