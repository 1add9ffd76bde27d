# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Certificate loading and raw field access.

cryptography is used for the certificate itself. Validity bounds are read
again with asn1crypto, because the extractors need the time values exactly
as encoded (UTCTime vs GeneralizedTime), not as decoded datetimes.
"""

import logging

from asn1crypto import x509 as asn1_x509
from cryptography import x509
from cryptography.hazmat.primitives import serialization

from ..exceptions import CertificateLoadError
from ..types.time import Asn1Time

logger = logging.getLogger(__name__)

PEM_MARKER = b"-----BEGIN"


def load_certificate(cert_bytes: bytes) -> x509.Certificate:
    """
    Load a PEM or DER encoded certificate.

    DER is tried first. Attribute values may contain any text, including
    the PEM armor line, so the marker only decides whether a failed DER
    parse is retried as PEM.

    Args:
        cert_bytes: Certificate bytes, PEM armored or raw DER

    Returns:
        Parsed X.509 certificate

    Raises:
        CertificateLoadError: If the bytes cannot be parsed
    """
    try:
        return load_der_certificate(cert_bytes)
    except CertificateLoadError:
        if PEM_MARKER not in cert_bytes:
            raise

    try:
        return x509.load_pem_x509_certificate(cert_bytes)
    except ValueError as e:
        logger.debug(f"Certificate load failed ({len(cert_bytes)} bytes): {e}")
        raise CertificateLoadError(f"Failed to parse certificate: {e}") from e


def load_der_certificate(der: bytes) -> x509.Certificate:
    """
    Load a DER encoded certificate.

    Raises:
        CertificateLoadError: If the bytes are not a DER certificate
    """
    try:
        return x509.load_der_x509_certificate(der)
    except ValueError as e:
        logger.debug(f"Certificate load failed ({len(der)} bytes): {e}")
        raise CertificateLoadError(f"Failed to parse certificate: {e}") from e


def subject_name(cert: x509.Certificate) -> x509.Name:
    """Return the subject distinguished name."""
    return cert.subject


def issuer_name(cert: x509.Certificate) -> x509.Name:
    """Return the issuer distinguished name."""
    return cert.issuer


def _validity(cert: x509.Certificate) -> asn1_x509.Validity:
    der = cert.public_bytes(serialization.Encoding.DER)
    return asn1_x509.Certificate.load(der)['tbs_certificate']['validity']


def _raw_time(time_choice) -> Asn1Time:
    return Asn1Time(form=time_choice.name, raw=time_choice.chosen.contents or b"")


def not_before(cert: x509.Certificate) -> Asn1Time:
    """
    Return the notBefore bound as encoded in the certificate.

    Example:
        >>> not_before(cert)
        Asn1Time(form='utc_time', raw=b'250101000000Z')
    """
    return _raw_time(_validity(cert)['not_before'])


def not_after(cert: x509.Certificate) -> Asn1Time:
    """Return the notAfter bound as encoded in the certificate."""
    return _raw_time(_validity(cert)['not_after'])
