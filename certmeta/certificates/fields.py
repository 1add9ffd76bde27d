# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Verbatim certificate fields: serial number and DER encoding.
"""

import logging
from typing import Optional

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from ..types.buffer import BoundedBuffer, ExtractResult

logger = logging.getLogger(__name__)


def serial_bytes(cert: x509.Certificate) -> Optional[bytes]:
    """
    Return the serial number as big-endian magnitude bytes.

    This matches the content of OpenSSL's ASN1_INTEGER: no sign octet, and a
    zero serial is a single 0x00 byte.
    """
    serial = cert.serial_number
    if serial is None:
        return None

    magnitude = abs(serial)
    return magnitude.to_bytes(max(1, (magnitude.bit_length() + 7) // 8), "big")


def get_serial(cert: x509.Certificate, out: BoundedBuffer) -> ExtractResult:
    """
    Copy the certificate serial number into ``out``.

    Returns:
        SUCCESS, NOT_FOUND if there is no serial, or INSUFFICIENT_CAPACITY
    """
    serial = serial_bytes(cert)
    if serial is None:
        return ExtractResult.not_found()

    result = out.write(serial)
    if not result.ok:
        logger.debug(f"Serial ({len(serial)} bytes) exceeds buffer capacity {out.capacity}")
    return result


def get_der(cert: x509.Certificate, out: BoundedBuffer) -> ExtractResult:
    """
    Copy the DER encoding of the whole certificate into ``out``.

    Returns:
        SUCCESS, NOT_FOUND if encoding fails, or INSUFFICIENT_CAPACITY
    """
    try:
        der = cert.public_bytes(serialization.Encoding.DER)
    except ValueError as e:
        logger.debug(f"DER encoding failed: {e}")
        return ExtractResult.not_found()

    if not der:
        return ExtractResult.not_found()

    result = out.write(der)
    if not result.ok:
        logger.debug(f"DER ({len(der)} bytes) exceeds buffer capacity {out.capacity}")
    return result
