# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Packed OpenSSL-style version numbers.

Layout (MNNFFPPS, most significant first):

    major   4 bits
    minor   8 bits
    fix     8 bits
    patch   8 bits
    status  4 bits  (0 = development, 1-14 = beta, 15 = release)
"""

from dataclasses import dataclass

STATUS_DEVELOPMENT = 0x0
STATUS_RELEASE = 0xF
MAX_BETA = 14


@dataclass(frozen=True)
class PackedVersion:
    """Version fields before packing."""

    major: int
    minor: int
    fix: int
    patch: int = 0
    status: int = STATUS_RELEASE

    def pack(self) -> int:
        """
        Pack the fields into a 32-bit integer.

        Each field is masked to its width, so packing never fails.
        """
        return (
            ((self.major & 0xF) << 28)
            | ((self.minor & 0xFF) << 20)
            | ((self.fix & 0xFF) << 12)
            | ((self.patch & 0xFF) << 4)
            | (self.status & 0xF)
        )

    @classmethod
    def unpack(cls, value: int) -> "PackedVersion":
        """Split a packed 32-bit integer back into its fields."""
        return cls(
            major=(value >> 28) & 0xF,
            minor=(value >> 20) & 0xFF,
            fix=(value >> 12) & 0xFF,
            patch=(value >> 4) & 0xFF,
            status=value & 0xF,
        )

    @property
    def is_release(self) -> bool:
        return self.status == STATUS_RELEASE

    @property
    def is_beta(self) -> bool:
        return 1 <= self.status <= MAX_BETA

    def __int__(self) -> int:
        return self.pack()

    def __str__(self) -> str:
        return f"0x{self.pack():08x}"
