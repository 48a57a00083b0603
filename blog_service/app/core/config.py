"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for optional fields;
the TLS material, the MongoDB connection string and the runtime
environment name have no sensible default and must be supplied by the
deployment.  ``missing_variables`` reports which of those are unset so
that the server can refuse to start with a clear message.
"""

import os
from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Blog Service")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")
    # Level for the grpc and pymongo loggers; empty follows LOG_LEVEL.
    library_log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "")

    # Runtime environment name.  ``development`` enables gRPC server
    # reflection so that tools such as grpcurl can introspect the API.
    app_env: str = os.getenv("APP_ENV", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "50051"))
    max_workers: int = int(os.getenv("GRPC_MAX_WORKERS", "10"))
    # Seconds in-flight calls are given to finish when the server stops.
    shutdown_grace: float = float(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))

    ssl_cert_file: str = os.getenv("SSL_CERT_FILE", "")
    ssl_key_file: str = os.getenv("SSL_KEY_FILE", "")

    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    mongodb_database: str = os.getenv("MONGODB_DATABASE", "blog")
    mongodb_collection: str = os.getenv("MONGODB_COLLECTION", "post")

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    def missing_variables(self) -> List[str]:
        """Return the names of required environment variables that are unset."""
        required = {
            "APP_ENV": self.app_env,
            "MONGODB_URI": self.mongodb_uri,
            "SSL_CERT_FILE": self.ssl_cert_file,
            "SSL_KEY_FILE": self.ssl_key_file,
        }
        return [name for name, value in required.items() if not value]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes its defaults when this module is first imported,
# environment variables should be set before importing it.
settings = Settings()
