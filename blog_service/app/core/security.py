"""
Transport security helpers.

The blog service only accepts TLS connections.  The server presents
the certificate and private key configured through ``SSL_CERT_FILE``
and ``SSL_KEY_FILE``; clients trust the certificate found at their own
``SSL_CERT_FILE``.  Both helpers read PEM files from disk and wrap them
in the matching ``grpc`` credentials object.
"""

from pathlib import Path

import grpc


class CredentialsError(RuntimeError):
    """TLS material could not be loaded."""


def _read_pem(path: str) -> bytes:
    return Path(path).read_bytes()


def load_server_credentials(cert_file: str, key_file: str) -> grpc.ServerCredentials:
    """Build server credentials from a PEM certificate chain and key.

    Raises ``CredentialsError`` when either file cannot be read.  If a
    file does not exist, the message lists both configured paths.
    """
    try:
        certificate_chain = _read_pem(cert_file)
        private_key = _read_pem(key_file)
    except FileNotFoundError as exc:
        raise CredentialsError(
            f"error creating server TLS:\n\n{exc}\n"
            f"certificate file: {cert_file}\nkey file: {key_file}"
        ) from exc
    except OSError as exc:
        raise CredentialsError(f"error creating server TLS:\n\n{exc}") from exc
    return grpc.ssl_server_credentials([(private_key, certificate_chain)])


def load_channel_credentials(cert_file: str) -> grpc.ChannelCredentials:
    """Build client credentials trusting the certificate in ``cert_file``."""
    try:
        root_certificates = _read_pem(cert_file)
    except OSError as exc:
        raise CredentialsError(f"error creating client TLS:\n\n{exc}") from exc
    return grpc.ssl_channel_credentials(root_certificates=root_certificates)
