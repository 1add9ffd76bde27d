# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Distinguished name extraction.

Three renderings of an X.509 name:

- get_dn_entry: one attribute value, selected by short name and occurrence
- get_dn_formatted: the whole name in RFC 2253 form
- get_dn_oneline: the whole name as "/C=FR/O=Example/CN=example.com"

Attribute values are taken as raw content octets. cryptography decodes
them to str, so the name is re-read with asn1crypto using value-agnostic
structures that keep each value's bytes exactly as encoded.
"""

import logging

from asn1crypto import core
from cryptography import x509

from ..types.buffer import BoundedBuffer, ExtractResult
from ..types.names import NameEntry
from .oids import SHORT_NAMES, short_name

logger = logging.getLogger(__name__)

RFC2253 = "rfc2253"


class _RawAttribute(core.Sequence):
    _fields = [
        ('type', core.ObjectIdentifier),
        ('value', core.Any),
    ]


class _RawRelativeName(core.SetOf):
    _child_spec = _RawAttribute


class _RawName(core.SequenceOf):
    _child_spec = _RawRelativeName


def name_entries(name: x509.Name) -> list[NameEntry]:
    """
    Decode a name into its entries, in stored order.

    Multi-valued RDNs are flattened into consecutive entries.
    """
    entries = []
    for rdn in _RawName.load(name.public_bytes()):
        for attribute in rdn:
            oid = attribute['type'].dotted
            entries.append(
                NameEntry(
                    oid=oid,
                    short_name=short_name(oid),
                    value=attribute['value'].contents or b"",
                )
            )
    return entries


def get_dn_entry(
    name: x509.Name,
    entry: str,
    pos: int,
    out: BoundedBuffer,
) -> ExtractResult:
    """
    Copy the value of one attribute occurrence into ``out``.

    Only entries whose short name matches ``entry`` (case-insensitive) are
    counted. ``pos`` works like a list index over those matches: 0 is the
    first, 1 the second, -1 the last, -2 the one before the last.

    Args:
        name: Distinguished name to search
        entry: Attribute short name (e.g. "CN") or dotted OID
        pos: Occurrence index
        out: Output buffer

    Returns:
        SUCCESS, NOT_FOUND if no such occurrence, or INSUFFICIENT_CAPACITY
    """
    entries = name_entries(name)
    if pos < 0:
        entries.reverse()
        wanted = -pos - 1
    else:
        wanted = pos

    seen = 0
    for candidate in entries:
        if not candidate.matches(entry):
            continue
        if seen == wanted:
            return out.write(candidate.value)
        seen += 1

    logger.debug(f"No occurrence {pos} of {entry} in distinguished name")
    return ExtractResult.not_found()


def format_rfc2253(name: x509.Name) -> str:
    """
    Render a name in RFC 2253 order and escaping, with OpenSSL short names.

    Differs from OpenSSL's XN_FLAG_RFC2253 output in two ways: non-ASCII
    characters are emitted as UTF-8 instead of \\XX escapes, and attributes
    with an unknown OID are rendered as "1.2.3.4=value" instead of
    "1.2.3.4=#<hex DER>".
    """
    return name.rfc4514_string(attr_name_overrides=SHORT_NAMES)


def get_dn_formatted(name: x509.Name, fmt: str, out: BoundedBuffer) -> ExtractResult:
    """
    Render the whole name in the requested format.

    Only "rfc2253" is supported. The rendering is truncated to the buffer
    capacity instead of failing.

    Returns:
        SUCCESS, or NOT_FOUND for an unsupported format or an empty rendering
    """
    if fmt != RFC2253:
        logger.debug(f"Unsupported distinguished name format: {fmt}")
        return ExtractResult.not_found()

    return out.write_truncated(format_rfc2253(name).encode("utf-8"))


def get_dn_oneline(name: x509.Name, out: BoundedBuffer) -> ExtractResult:
    """
    Render the whole name as "/<name>=<value>" segments.

    Values are copied without escaping. The length is checked before each
    segment; if the total exceeds the buffer capacity nothing is written.

    Returns:
        SUCCESS, NOT_FOUND if the name has no entries, or INSUFFICIENT_CAPACITY
    """
    segments = []
    total = 0
    for entry in name_entries(name):
        label = entry.short_name.encode("ascii")
        total += 1 + len(label) + 1 + len(entry.value)
        if total > out.capacity:
            logger.debug(f"Oneline name exceeds buffer capacity {out.capacity}")
            return ExtractResult.insufficient_capacity()
        segments.append(b"/" + label + b"=" + entry.value)

    if not segments:
        return ExtractResult.not_found()

    return out.write(b"".join(segments))
