# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Exceptions raised by certmeta."""


class CertMetaError(Exception):
    """Base exception for certmeta."""


class CertificateLoadError(CertMetaError, ValueError):
    """Input bytes are not a PEM or DER encoded certificate."""


class CertificateReleasedError(CertMetaError):
    """A certificate handle was used after its last reference was released."""
