# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Bounded output buffers and extraction results.

Every extractor in certmeta writes through a BoundedBuffer. The buffer owns
the capacity check, so a value that does not fit is rejected here and never
partially copied.
"""

from dataclasses import dataclass
from enum import IntEnum


class Outcome(IntEnum):
    """Integer codes reported by every extraction."""

    INSUFFICIENT_CAPACITY = -1
    NOT_FOUND = 0
    SUCCESS = 1


@dataclass(frozen=True)
class ExtractResult:
    """
    Tagged result of an extraction.

    Attributes:
        outcome: NOT_FOUND, SUCCESS or INSUFFICIENT_CAPACITY
        length: Number of bytes written (only meaningful on SUCCESS)
    """

    outcome: Outcome
    length: int = 0

    @classmethod
    def not_found(cls) -> "ExtractResult":
        return cls(Outcome.NOT_FOUND)

    @classmethod
    def success(cls, length: int) -> "ExtractResult":
        return cls(Outcome.SUCCESS, length)

    @classmethod
    def insufficient_capacity(cls) -> "ExtractResult":
        return cls(Outcome.INSUFFICIENT_CAPACITY)

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.SUCCESS

    def __int__(self) -> int:
        return int(self.outcome)

    def __bool__(self) -> bool:
        return self.ok


class BoundedBuffer:
    """
    Caller-owned output storage with a fixed capacity.

    The storage is allocated once by the caller; extractors only ever set
    ``length`` and overwrite bytes below ``capacity``.
    """

    def __init__(self, capacity: int):
        """
        Initialize an empty buffer.

        Args:
            capacity: Maximum number of bytes the buffer can hold

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"Invalid buffer capacity: {capacity}")
        self.capacity = capacity
        self.length = 0
        self.storage = bytearray(capacity)

    @property
    def remaining(self) -> int:
        return self.capacity - self.length

    def fits(self, size: int) -> bool:
        """Check whether ``size`` bytes fit into an empty buffer."""
        return size <= self.capacity

    def getvalue(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self.storage[:self.length])

    def reset(self) -> None:
        self.length = 0

    def write(self, payload: bytes) -> ExtractResult:
        """
        Replace the buffer content with ``payload``.

        Nothing is written when the payload is larger than the capacity.

        Returns:
            SUCCESS with the payload length, or INSUFFICIENT_CAPACITY
        """
        size = len(payload)
        if not self.fits(size):
            return ExtractResult.insufficient_capacity()

        self.storage[:size] = payload
        self.length = size
        return ExtractResult.success(size)

    def write_truncated(self, payload: bytes) -> ExtractResult:
        """
        Copy as much of ``payload`` as fits, dropping the rest.

        Returns:
            SUCCESS with the copied length, or NOT_FOUND if nothing was copied
        """
        size = min(len(payload), self.capacity)
        if size <= 0:
            return ExtractResult.not_found()

        self.storage[:size] = payload[:size]
        self.length = size
        return ExtractResult.success(size)

    def append(self, payload: bytes) -> bool:
        """
        Append ``payload`` after the current content.

        Returns:
            True if the payload was appended, False if it did not fit
            (in which case nothing is written)
        """
        size = len(payload)
        if size > self.remaining:
            return False

        self.storage[self.length:self.length + size] = payload
        self.length += size
        return True

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"BoundedBuffer(capacity={self.capacity}, length={self.length})"
