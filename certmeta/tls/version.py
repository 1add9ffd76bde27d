# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
OpenSSL version string parsing.

Turns a textual OpenSSL version into the packed number OpenSSL reports as
OPENSSL_VERSION_NUMBER (MNNFFPPS: major minor fix patch status):

    0x0090821f     0.9.8zh
    0x1000215f     1.0.2u
    0x30000000     3.0.0-alpha17
    0x30000002     3.0.0-beta2
    0x3000000e     3.0.0-beta14
    0x3000000f     3.0.0

Only "-beta<N>" sets the status nibble to N. Any other hyphenated suffix is
a development build (status 0). Letters directly after the fix number are a
patch release: each letter adds its alphabet offset to a patch counter that
starts at 1.
"""

import re
from typing import Optional

from ..types.version import (
    MAX_BETA,
    STATUS_DEVELOPMENT,
    STATUS_RELEASE,
    PackedVersion,
)

_NUMBER = re.compile(r"[0-9]*")

MAX_MAJOR = 0xF
MAX_MINOR = 0xFF
MAX_FIX = 0xFF
BETA_PREFIX = "beta"


def _read_number(text: str, pos: int) -> tuple[int, int]:
    """Read decimal digits at ``pos``; no digits reads as 0."""
    match = _NUMBER.match(text, pos)
    digits = match.group()
    return (int(digits) if digits else 0), match.end()


def _letter_patch(letters: str) -> int:
    patch = 1
    for byte in letters.encode("utf-8"):
        patch += (byte & ~0x20) - ord("A")
    return patch & 0xFF


def parse_openssl_version(version: Optional[str]) -> Optional[PackedVersion]:
    """
    Parse "major.minor.fix[suffix]" into version fields.

    Args:
        version: Version string, e.g. "1.1.1w" or "3.0.0-beta2"

    Returns:
        PackedVersion, or None if the string is empty, malformed or a field
        is out of range
    """
    if not version:
        return None

    major, pos = _read_number(version, 0)
    if not version.startswith(".", pos) or major > MAX_MAJOR:
        return None

    minor, pos = _read_number(version, pos + 1)
    if not version.startswith(".", pos) or minor > MAX_MINOR:
        return None

    fix, pos = _read_number(version, pos + 1)
    if fix > MAX_FIX:
        return None

    suffix = version[pos:]
    if not suffix:
        return PackedVersion(major, minor, fix, 0, STATUS_RELEASE)

    if suffix.startswith("-"):
        suffix = suffix[1:]
        if suffix.startswith(BETA_PREFIX):
            status, _ = _read_number(suffix, len(BETA_PREFIX))
            if status > MAX_BETA:
                return None
            return PackedVersion(major, minor, fix, 0, status)
        return PackedVersion(major, minor, fix, 0, STATUS_DEVELOPMENT)

    return PackedVersion(major, minor, fix, _letter_patch(suffix), STATUS_RELEASE)


def openssl_version_number(version: Optional[str]) -> int:
    """
    Parse a version string straight to its packed number.

    Returns 0 when parsing fails, which is also the packed value of a
    "0.0.0-dev" style version. Use parse_openssl_version() to tell them apart.
    """
    parsed = parse_openssl_version(version)
    if parsed is None:
        return 0
    return parsed.pack()
