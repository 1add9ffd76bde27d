# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Reference-counted certificate handles.

A client certificate seen during verification can be held by the TLS
session and by any number of callers resolving it later. Each holder owns
one reference and gives it back with release().
"""

import threading

from cryptography import x509

from ..exceptions import CertificateReleasedError
from ..certificates.parser import load_certificate, load_der_certificate


class CertificateHandle:
    """Shared, reference-counted wrapper around a parsed certificate."""

    def __init__(self, certificate: x509.Certificate):
        """
        Create a handle holding one reference.

        Args:
            certificate: Parsed X.509 certificate
        """
        self.certificate = certificate
        self._refcount = 1
        self._lock = threading.Lock()

    @classmethod
    def from_bytes(cls, cert_bytes: bytes) -> "CertificateHandle":
        """Create a handle from PEM or DER bytes."""
        return cls(load_certificate(cert_bytes))

    @classmethod
    def from_der(cls, der: bytes) -> "CertificateHandle":
        """Create a handle from DER bytes, as returned by getpeercert(binary_form=True)."""
        return cls(load_der_certificate(der))

    @property
    def refcount(self) -> int:
        with self._lock:
            return self._refcount

    def acquire(self) -> "CertificateHandle":
        """
        Take an additional reference.

        Returns:
            This handle, now shared by one more holder

        Raises:
            CertificateReleasedError: If every reference was already released
        """
        with self._lock:
            if self._refcount <= 0:
                raise CertificateReleasedError("Cannot acquire a released certificate")
            self._refcount += 1
        return self

    def release(self) -> int:
        """
        Drop one reference.

        Returns:
            Number of references still held

        Raises:
            CertificateReleasedError: If every reference was already released
        """
        with self._lock:
            if self._refcount <= 0:
                raise CertificateReleasedError("Certificate released more times than acquired")
            self._refcount -= 1
            return self._refcount

    def __repr__(self) -> str:
        return f"CertificateHandle(subject={self.certificate.subject.rfc4514_string()!r}, refcount={self.refcount})"
