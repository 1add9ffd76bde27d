# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Unit tests for ASN.1 time extraction.

cryptography encodes validity dates from 1950 to 2049 as UTCTime and
everything else as GeneralizedTime, which lets the tests cover both forms
with real certificates.
"""

import datetime

from certmeta.certificates import get_time, normalize_time, not_after, not_before
from certmeta.types import Asn1Time, BoundedBuffer, ExtractResult, Outcome, TimeForm

UTC = datetime.timezone.utc


class TestValidityBounds:
    """Test reading validity bounds in their original encoding."""

    def test_utc_time_bound(self, rsa_cert):
        """Test that a 2025 date is read as UTCTime."""
        tm = not_before(rsa_cert)

        assert tm.form == TimeForm.UTC
        assert tm.raw == b"250101120000Z"

    def test_generalized_time_bound(self, cert_factory, ec_key):
        """Test that a 2051 date is read as GeneralizedTime."""
        cert = cert_factory(
            ec_key,
            not_after=datetime.datetime(2051, 6, 30, 8, 15, 0, tzinfo=UTC),
        )
        tm = not_after(cert)

        assert tm.form == TimeForm.GENERALIZED
        assert tm.raw == b"20510630081500Z"


class TestGetTime:
    """Test time normalization into an output buffer."""

    def test_utc_copied_verbatim(self, rsa_cert):
        """Test that UTCTime is copied as is."""
        out = BoundedBuffer(32)
        result = get_time(not_before(rsa_cert), out)

        assert result == ExtractResult.success(13)
        assert out.getvalue() == b"250101120000Z"

    def test_generalized_century_stripped(self, cert_factory, ec_key):
        """Test that GeneralizedTime loses its "20" century prefix."""
        cert = cert_factory(
            ec_key,
            not_after=datetime.datetime(2051, 6, 30, 8, 15, 0, tzinfo=UTC),
        )
        out = BoundedBuffer(32)

        assert get_time(not_after(cert), out).ok
        assert out.getvalue() == b"510630081500Z"

    def test_utc_year_fifty_or_later_rejected(self, cert_factory, ec_key):
        """Test that UTCTime years 50-99 are NOT_FOUND."""
        cert = cert_factory(
            ec_key,
            not_before=datetime.datetime(1970, 1, 1, tzinfo=UTC),
        )
        out = BoundedBuffer(32)
        result = get_time(not_before(cert), out)

        assert result.outcome is Outcome.NOT_FOUND
        assert out.length == 0

    def test_generalized_other_century_rejected(self):
        """Test that GeneralizedTime outside 20xx is NOT_FOUND."""
        tm = Asn1Time(form=TimeForm.GENERALIZED, raw=b"19491231235959Z")

        assert not get_time(tm, BoundedBuffer(32))

    def test_generalized_too_short(self):
        """Test that GeneralizedTime shorter than 12 bytes is NOT_FOUND."""
        tm = Asn1Time(form=TimeForm.GENERALIZED, raw=b"20250101001")

        assert normalize_time(tm) is None

    def test_generalized_minimum_length(self):
        """Test GeneralizedTime of exactly 12 bytes."""
        tm = Asn1Time(form=TimeForm.GENERALIZED, raw=b"202501011200")

        assert normalize_time(tm) == b"2501011200"

    def test_utc_too_short(self):
        """Test that UTCTime shorter than 10 bytes is NOT_FOUND."""
        tm = Asn1Time(form=TimeForm.UTC, raw=b"250101120")

        assert normalize_time(tm) is None

    def test_utc_minimum_length(self):
        """Test UTCTime of exactly 10 bytes."""
        tm = Asn1Time(form=TimeForm.UTC, raw=b"4901011200")

        assert normalize_time(tm) == b"4901011200"

    def test_other_form(self):
        """Test that any other ASN.1 tag is NOT_FOUND."""
        tm = Asn1Time(form="printable_string", raw=b"250101120000Z")

        assert get_time(tm, BoundedBuffer(32)).outcome is Outcome.NOT_FOUND

    def test_insufficient_capacity(self, rsa_cert):
        """Test that a short buffer is reported and left untouched."""
        out = BoundedBuffer(12)
        out.write(b"old")

        result = get_time(not_before(rsa_cert), out)

        assert result.outcome is Outcome.INSUFFICIENT_CAPACITY
        assert out.getvalue() == b"old"

    def test_generalized_capacity_uses_stripped_length(self):
        """Test that capacity is checked against the stripped length."""
        tm = Asn1Time(form=TimeForm.GENERALIZED, raw=b"20510630081500Z")
        out = BoundedBuffer(13)

        assert get_time(tm, out) == ExtractResult.success(13)
