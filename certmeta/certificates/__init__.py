# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
certmeta Certificate Utilities

Bounded extraction of X.509 certificate metadata: public key algorithm,
serial number, DER encoding, validity times and distinguished names.
"""

from .oids import (
    NameAttributeOIDs,
    SHORT_NAMES,
    short_name,
)

from .parser import (
    load_certificate,
    load_der_certificate,
    subject_name,
    issuer_name,
    not_before,
    not_after,
)

from .algorithm import (
    describe_public_key,
    get_pkey_algo,
)

from .fields import (
    serial_bytes,
    get_serial,
    get_der,
)

from .timestamps import (
    normalize_time,
    get_time,
)

from .names import (
    RFC2253,
    name_entries,
    format_rfc2253,
    get_dn_entry,
    get_dn_formatted,
    get_dn_oneline,
)

__all__ = [
    # OIDs
    "NameAttributeOIDs",
    "SHORT_NAMES",
    "short_name",
    # Loading
    "load_certificate",
    "load_der_certificate",
    "subject_name",
    "issuer_name",
    "not_before",
    "not_after",
    # Extractors
    "describe_public_key",
    "get_pkey_algo",
    "serial_bytes",
    "get_serial",
    "get_der",
    "normalize_time",
    "get_time",
    "RFC2253",
    "name_entries",
    "format_rfc2253",
    "get_dn_entry",
    "get_dn_formatted",
    "get_dn_oneline",
]
