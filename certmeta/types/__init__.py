"""
certmeta - Core Data Types

Value types shared by the certificate extractors and the TLS helpers.

Modules:
    buffer: Bounded output buffers and the tri-state ExtractResult
    time: Raw ASN.1 time values
    names: Distinguished name entries
    version: Packed OpenSSL-style version numbers

Example Usage:
    >>> from certmeta.types import BoundedBuffer
    >>>
    >>> out = BoundedBuffer(64)
    >>> result = out.write(b"RSA2048")
    >>> int(result), out.getvalue()
    (1, b'RSA2048')
"""

from .buffer import (
    BoundedBuffer,
    ExtractResult,
    Outcome,
)

from .time import (
    Asn1Time,
    TimeForm,
)

from .names import NameEntry

from .version import PackedVersion

__all__ = [
    # Buffers
    "BoundedBuffer",
    "ExtractResult",
    "Outcome",
    # Certificate fields
    "Asn1Time",
    "TimeForm",
    "NameEntry",
    # Versions
    "PackedVersion",
]
