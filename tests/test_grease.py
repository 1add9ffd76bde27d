# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Unit tests for GREASE filtering.
"""

import pytest

from certmeta.tls import exclude_tls_grease, is_grease, strip_grease
from certmeta.types import BoundedBuffer

GREASE_VALUES = [0x0A0A + 0x1010 * i for i in range(16)]


class TestIsGrease:
    """Test GREASE code point detection."""

    @pytest.mark.parametrize("value", GREASE_VALUES)
    def test_grease_values(self, value):
        """Test all sixteen RFC 8701 values."""
        assert is_grease(value)

    @pytest.mark.parametrize("value", [0x0000, 0x1301, 0x0A1A, 0x0B0B, 0xAAAA - 0x0100, 0xFF01])
    def test_regular_values(self, value):
        """Test values that only look similar."""
        assert not is_grease(value)


class TestExcludeTlsGrease:
    """Test filtering into a bounded buffer."""

    def test_placeholder_pairs_dropped(self):
        """Test that both placeholder pairs are dropped and the middle kept."""
        out = BoundedBuffer(16)
        exclude_tls_grease(bytes([0x0A, 0x0A, 0x01, 0x02, 0x1A, 0x1A]), out)

        assert out.getvalue() == bytes([0x01, 0x02])

    def test_odd_trailing_byte_kept(self):
        """Test that an odd trailing byte is always copied."""
        out = BoundedBuffer(16)
        exclude_tls_grease(bytes([0x0A, 0x0A, 0x05]), out)

        assert out.getvalue() == bytes([0x05])

    def test_odd_trailing_grease_like_byte_kept(self):
        """Test that the trailing byte skips the placeholder test."""
        out = BoundedBuffer(16)
        exclude_tls_grease(bytes([0x13, 0x01, 0x0A]), out)

        assert out.getvalue() == bytes([0x13, 0x01, 0x0A])

    def test_pairs_are_aligned(self):
        """Test that a placeholder straddling two pairs is not dropped."""
        out = BoundedBuffer(16)
        exclude_tls_grease(bytes([0x01, 0x0A, 0x0A, 0x02]), out)

        assert out.getvalue() == bytes([0x01, 0x0A, 0x0A, 0x02])

    def test_stops_when_full(self):
        """Test that copying stops silently once the buffer is full."""
        out = BoundedBuffer(3)
        exclude_tls_grease(bytes([0x01, 0x02, 0x03, 0x04, 0x05]), out)

        assert out.getvalue() == bytes([0x01, 0x02])

    def test_appends_to_existing_content(self):
        """Test that output goes after what the buffer already holds."""
        out = BoundedBuffer(8)
        out.append(b"\xff")
        exclude_tls_grease(bytes([0x2A, 0x2A, 0x13, 0x02]), out)

        assert out.getvalue() == bytes([0xFF, 0x13, 0x02])

    def test_empty_input(self):
        """Test that empty input writes nothing."""
        out = BoundedBuffer(8)
        exclude_tls_grease(b"", out)

        assert out.length == 0

    def test_strip_grease(self):
        """Test the buffer-free convenience wrapper."""
        data = bytes.fromhex("dada130113021a1a0017")

        assert strip_grease(data) == bytes.fromhex("130113020017")
