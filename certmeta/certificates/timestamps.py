# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Normalization of ASN.1 time values to the two-digit-year UTCTime text form.

GeneralizedTime values are accepted for 20xx only and lose their century
prefix; UTCTime values are copied as is. The result always looks like
"YYMMDDhhmmss[Z]".
"""

import logging
from typing import Optional

from ..types.buffer import BoundedBuffer, ExtractResult
from ..types.time import Asn1Time, TimeForm

logger = logging.getLogger(__name__)

MIN_GENERALIZED_LENGTH = 12
MIN_UTC_LENGTH = 10
CENTURY_PREFIX = b"20"


def normalize_time(tm: Asn1Time) -> Optional[bytes]:
    """
    Return the normalized text of ``tm``, or None if it is not supported.

    NOTE: UTCTime years 50-99 are rejected as 1950-1999. A UTCTime written
    for 2050 or later is therefore misread as unsupported.
    """
    raw = tm.raw

    if tm.form == TimeForm.GENERALIZED:
        if len(raw) < MIN_GENERALIZED_LENGTH:
            return None
        if raw[:2] != CENTURY_PREFIX:
            return None
        return raw[2:]

    if tm.form == TimeForm.UTC:
        if len(raw) < MIN_UTC_LENGTH:
            return None
        if raw[0] >= ord("5"):
            return None
        return raw

    return None


def get_time(tm: Asn1Time, out: BoundedBuffer) -> ExtractResult:
    """
    Copy a normalized ASN.1 time into ``out``.

    Returns:
        SUCCESS, NOT_FOUND for unsupported values, or INSUFFICIENT_CAPACITY
    """
    text = normalize_time(tm)
    if text is None:
        logger.debug(f"Unsupported {tm.form} value: {tm.raw!r}")
        return ExtractResult.not_found()

    return out.write(text)
