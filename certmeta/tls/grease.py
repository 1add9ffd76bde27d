# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
GREASE (RFC 8701) filtering for raw TLS handshake value lists.

GREASE code points are the sixteen values 0x0A0A, 0x1A1A, ... 0xFAFA. Clients
sprinkle them into cipher suite, extension and group lists; they carry no
meaning and are removed before the lists are compared or fingerprinted.
"""

from ..types.buffer import BoundedBuffer


def is_grease_pair(b0: int, b1: int) -> bool:
    """Check whether two bytes form a GREASE code point."""
    return b0 == b1 and (b0 & 0x0F) == 0x0A


def is_grease(value: int) -> bool:
    """Check whether a 16-bit code point is a GREASE value."""
    return is_grease_pair((value >> 8) & 0xFF, value & 0xFF)


def exclude_tls_grease(data: bytes, out: BoundedBuffer) -> None:
    """
    Append ``data`` to ``out`` with GREASE pairs removed.

    The input is read as consecutive byte pairs. An odd trailing byte is
    always kept. Copying stops silently once ``out`` has no room for the
    next pair; the rest of the input is dropped.
    """
    end = len(data) - len(data) % 2
    for ptr in range(0, end, 2):
        if is_grease_pair(data[ptr], data[ptr + 1]):
            continue
        if not out.append(data[ptr:ptr + 2]):
            return

    if end < len(data):
        out.append(data[end:])


def strip_grease(data: bytes) -> bytes:
    """
    Return a copy of ``data`` without GREASE pairs.

    Example:
        >>> strip_grease(bytes([0x0A, 0x0A, 0x13, 0x01, 0x1A, 0x1A]))
        b'\\x13\\x01'
    """
    out = BoundedBuffer(len(data))
    exclude_tls_grease(data, out)
    return out.getvalue()
