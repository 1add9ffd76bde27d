"""
certmeta - X.509 and TLS Metadata Extraction

Extracts certificate metadata into caller-owned, capacity-bounded buffers,
parses OpenSSL version strings and filters GREASE values from TLS handshake
lists.

Modules:
    types: Bounded buffers, extraction results and value types
    certificates: Certificate field extractors
    tls: Peer certificate resolution, GREASE filtering, version parsing
    config: Settings and logging setup

Example:
    >>> from certmeta import BoundedBuffer, load_certificate, get_dn_oneline
    >>>
    >>> cert = load_certificate(open("server.pem", "rb").read())
    >>> out = BoundedBuffer(256)
    >>> if get_dn_oneline(cert.subject, out):
    ...     print(out.getvalue())
    b'/C=FR/O=Example/CN=example.com'
"""

__version__ = "0.1.0"
__author__ = "The Birthmark Standard Foundation"

from .types import (
    BoundedBuffer,
    ExtractResult,
    Outcome,
    Asn1Time,
    TimeForm,
    NameEntry,
    PackedVersion,
)

from .certificates import (
    load_certificate,
    not_before,
    not_after,
    get_pkey_algo,
    get_serial,
    get_der,
    get_time,
    get_dn_entry,
    get_dn_formatted,
    get_dn_oneline,
)

from .tls import (
    CertificateHandle,
    TLSSessionContext,
    get_peer_certificate,
    exclude_tls_grease,
    parse_openssl_version,
    openssl_version_number,
)

from .exceptions import (
    CertMetaError,
    CertificateLoadError,
    CertificateReleasedError,
)

__all__ = [
    # Types
    "BoundedBuffer",
    "ExtractResult",
    "Outcome",
    "Asn1Time",
    "TimeForm",
    "NameEntry",
    "PackedVersion",
    # Certificates
    "load_certificate",
    "not_before",
    "not_after",
    "get_pkey_algo",
    "get_serial",
    "get_der",
    "get_time",
    "get_dn_entry",
    "get_dn_formatted",
    "get_dn_oneline",
    # TLS
    "CertificateHandle",
    "TLSSessionContext",
    "get_peer_certificate",
    "exclude_tls_grease",
    "parse_openssl_version",
    "openssl_version_number",
    # Errors
    "CertMetaError",
    "CertificateLoadError",
    "CertificateReleasedError",
]
