# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Raw ASN.1 time values as stored in a certificate.
"""

from dataclasses import dataclass
from enum import Enum


class TimeForm(str, Enum):
    """ASN.1 time encodings (names follow asn1crypto's Time choice)."""

    UTC = "utc_time"
    GENERALIZED = "general_time"


@dataclass(frozen=True)
class Asn1Time:
    """
    An ASN.1 time value before any decoding.

    Attributes:
        form: Encoding tag, "utc_time" or "general_time"
        raw: Content octets, e.g. b"250101120000Z" or b"20510101120000Z"
    """

    form: str
    raw: bytes
