# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
certmeta TLS Utilities

Session-level helpers: peer certificate resolution, GREASE filtering and
OpenSSL version parsing.
"""

from .handle import CertificateHandle

from .peer import (
    PeerCertificateSource,
    TLSSessionContext,
    get_peer_certificate,
)

from .grease import (
    is_grease,
    is_grease_pair,
    exclude_tls_grease,
    strip_grease,
)

from .version import (
    parse_openssl_version,
    openssl_version_number,
)

__all__ = [
    # Peer certificates
    "CertificateHandle",
    "PeerCertificateSource",
    "TLSSessionContext",
    "get_peer_certificate",
    # GREASE
    "is_grease",
    "is_grease_pair",
    "exclude_tls_grease",
    "strip_grease",
    # Versions
    "parse_openssl_version",
    "openssl_version_number",
]
