# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Public key algorithm descriptor ("RSA2048", "EC256", "DSA2048").
"""

import logging
from typing import Optional

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import dsa, ec, rsa

from ..types.buffer import BoundedBuffer, ExtractResult

logger = logging.getLogger(__name__)

KEY_FAMILIES = (
    (rsa.RSAPublicKey, "RSA"),
    (ec.EllipticCurvePublicKey, "EC"),
    (dsa.DSAPublicKey, "DSA"),
)


def describe_public_key(cert: x509.Certificate) -> Optional[str]:
    """
    Describe the certificate's public key as family and bit length.

    Returns:
        "RSA<bits>", "EC<bits>" or "DSA<bits>", or None for any other family
    """
    try:
        public_key = cert.public_key()
    except (ValueError, UnsupportedAlgorithm) as e:
        logger.debug(f"Public key not loadable: {e}")
        return None

    for key_type, family in KEY_FAMILIES:
        if isinstance(public_key, key_type):
            return f"{family}{public_key.key_size}"

    logger.debug(f"Unsupported public key family: {type(public_key).__name__}")
    return None


def get_pkey_algo(cert: x509.Certificate, out: BoundedBuffer) -> ExtractResult:
    """
    Write the public key algorithm and size into ``out``.

    A descriptor that does not fit is reported as NOT_FOUND, like an
    unknown key family: the formatted length is not known in advance.
    """
    descriptor = describe_public_key(cert)
    if descriptor is None:
        return ExtractResult.not_found()

    result = out.write(descriptor.encode("ascii"))
    if not result.ok:
        return ExtractResult.not_found()
    return result
