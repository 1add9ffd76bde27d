# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Distinguished name entries.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NameEntry:
    """
    One attribute of a distinguished name.

    Attributes:
        oid: Dotted object identifier (e.g. "2.5.4.3")
        short_name: OpenSSL short name ("CN"), or the dotted OID if unknown
        value: Raw content octets of the attribute value
    """

    oid: str
    short_name: str
    value: bytes

    def matches(self, name: str) -> bool:
        """Case-insensitive comparison against a short name."""
        return self.short_name.lower() == name.lower()
