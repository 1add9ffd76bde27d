# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Pytest configuration and fixtures."""

import datetime
from typing import Optional

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import dsa, ec, ed25519, rsa
from cryptography.x509.oid import NameOID


UTC = datetime.timezone.utc
NOT_BEFORE = datetime.datetime(2025, 1, 1, 12, 0, 0, tzinfo=UTC)
NOT_AFTER = datetime.datetime(2035, 1, 1, 12, 0, 0, tzinfo=UTC)


def make_name(*attributes: tuple[x509.ObjectIdentifier, str]) -> x509.Name:
    """Build a name from (oid, value) pairs, one attribute per RDN."""
    return x509.Name([x509.NameAttribute(oid, value) for oid, value in attributes])


def build_certificate(
    private_key,
    subject: Optional[x509.Name] = None,
    issuer: Optional[x509.Name] = None,
    serial_number: int = 0x01AB,
    not_before: datetime.datetime = NOT_BEFORE,
    not_after: datetime.datetime = NOT_AFTER,
) -> x509.Certificate:
    """Build a self-signed certificate for ``private_key``."""
    subject = subject or make_name((NameOID.COMMON_NAME, "test.example.com"))
    algorithm = None if isinstance(private_key, ed25519.Ed25519PrivateKey) else hashes.SHA256()

    return (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer or subject)
        .public_key(private_key.public_key())
        .serial_number(serial_number)
        .not_valid_before(not_before)
        .not_valid_after(not_after)
        .sign(private_key, algorithm)
    )


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def dsa_key():
    return dsa.generate_private_key(key_size=2048)


@pytest.fixture(scope="session")
def ed25519_key():
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="session")
def subject():
    """Subject with repeated OU and CN attributes."""
    return make_name(
        (NameOID.COUNTRY_NAME, "FR"),
        (NameOID.ORGANIZATION_NAME, "Example"),
        (NameOID.ORGANIZATIONAL_UNIT_NAME, "first-unit"),
        (NameOID.COMMON_NAME, "first.example.com"),
        (NameOID.ORGANIZATIONAL_UNIT_NAME, "second-unit"),
        (NameOID.COMMON_NAME, "second.example.com"),
    )


@pytest.fixture(scope="session")
def issuer():
    return make_name(
        (NameOID.COUNTRY_NAME, "FR"),
        (NameOID.ORGANIZATION_NAME, "Example CA"),
        (NameOID.COMMON_NAME, "Example Root CA"),
    )


@pytest.fixture(scope="session")
def rsa_cert(rsa_key, subject, issuer):
    return build_certificate(rsa_key, subject=subject, issuer=issuer)


@pytest.fixture(scope="session")
def ec_cert(ec_key):
    return build_certificate(ec_key)


@pytest.fixture
def cert_factory():
    """Expose build_certificate() to tests."""
    return build_certificate


@pytest.fixture
def name_factory():
    """Expose make_name() to tests."""
    return make_name
