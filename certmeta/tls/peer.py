# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Peer certificate resolution for a TLS session.

The peer certificate is normally available from the connection once the
handshake is done. On the server side a client certificate may only have
been seen by a custom verification callback; that callback stashes it on the
session context, and resolution falls back to it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .handle import CertificateHandle

logger = logging.getLogger(__name__)


class PeerCertificateSource(Protocol):
    """Anything exposing ssl.SSLSocket's getpeercert()."""

    def getpeercert(self, binary_form: bool = False):
        ...


@dataclass
class TLSSessionContext:
    """
    Per-session state needed to resolve the peer certificate.

    Attributes:
        connection: TLS connection (ssl.SSLSocket, ssl.SSLObject, ...)
        verified_client_cert: Certificate stashed by the verification callback
    """

    connection: Optional[PeerCertificateSource] = None
    verified_client_cert: Optional[CertificateHandle] = None

    def stash_client_certificate(self, handle: CertificateHandle) -> None:
        """
        Keep a reference to a certificate seen during verification.

        The session takes its own reference; a previously stashed handle is
        released.
        """
        previous = self.verified_client_cert
        self.verified_client_cert = handle.acquire()
        if previous is not None:
            previous.release()

    def close(self) -> None:
        """Release the stashed certificate, if any."""
        if self.verified_client_cert is not None:
            self.verified_client_cert.release()
            self.verified_client_cert = None


def _connection_peer_der(connection: Optional[PeerCertificateSource]) -> Optional[bytes]:
    if connection is None:
        return None
    try:
        return connection.getpeercert(binary_form=True)
    except ValueError as e:
        # Raised by ssl before the handshake completes
        logger.debug(f"Peer certificate not available from connection: {e}")
        return None


def get_peer_certificate(session: TLSSessionContext) -> Optional[CertificateHandle]:
    """
    Resolve the certificate of the other TLS endpoint.

    Resolution order:
    1. The certificate presented on the connection (new handle)
    2. The certificate stashed during verification (one more reference)

    The caller owns one reference of the returned handle and should
    release() it when done.

    Returns:
        Certificate handle, or None if neither source has a certificate
    """
    der = _connection_peer_der(session.connection)
    if der:
        logger.debug("Peer certificate resolved from connection")
        return CertificateHandle.from_der(der)

    stashed = session.verified_client_cert
    if stashed is not None:
        logger.debug("Peer certificate resolved from verification stash")
        return stashed.acquire()

    return None
