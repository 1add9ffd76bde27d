# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Command line interface for certmeta.

    certmeta inspect server.pem --dn-entry CN:-1
    certmeta version 1.1.1w
    certmeta grease 0a0a13011a1a
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .certificates import (
    get_der,
    get_dn_entry,
    get_dn_formatted,
    get_dn_oneline,
    get_pkey_algo,
    get_serial,
    get_time,
    issuer_name,
    load_certificate,
    not_after,
    not_before,
    subject_name,
)
from .config import configure_logging, settings
from .exceptions import CertificateLoadError
from .tls import exclude_tls_grease, parse_openssl_version
from .types import BoundedBuffer, ExtractResult, Outcome

logger = logging.getLogger(__name__)

NOT_FOUND = "<not found>"
INSUFFICIENT = "<insufficient capacity>"


def render(result: ExtractResult, out: BoundedBuffer, as_hex: bool = False) -> str:
    """Render an extraction result for display."""
    if result.outcome is Outcome.INSUFFICIENT_CAPACITY:
        return INSUFFICIENT
    if not result.ok:
        return NOT_FOUND

    value = out.getvalue()
    if as_hex:
        return value.hex()
    return value.decode("utf-8", errors="replace")


def parse_dn_entry(spec: str) -> tuple[str, int]:
    """
    Split "NAME[:POS]" into a short name and occurrence index.

    Example:
        >>> parse_dn_entry("CN:-1")
        ('CN', -1)
    """
    name, sep, pos = spec.rpartition(":")
    if sep and name:
        try:
            return name, int(pos)
        except ValueError:
            pass
    return spec, 0


def inspect_certificate(path: Path, buffer_size: int, dn_entries: list[str]) -> int:
    """Print every extractable field of a certificate."""
    try:
        cert = load_certificate(path.read_bytes())
    except (OSError, CertificateLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    subject = subject_name(cert)
    issuer = issuer_name(cert)

    def extract(extractor, *args, as_hex: bool = False) -> str:
        out = BoundedBuffer(buffer_size)
        return render(extractor(*args, out), out, as_hex=as_hex)

    fields = [
        ("serial", extract(get_serial, cert, as_hex=True)),
        ("algorithm", extract(get_pkey_algo, cert)),
        ("not_before", extract(get_time, not_before(cert))),
        ("not_after", extract(get_time, not_after(cert))),
        ("subject", extract(get_dn_oneline, subject)),
        ("subject_dn", extract(get_dn_formatted, subject, settings.dn_format)),
        ("issuer", extract(get_dn_oneline, issuer)),
        ("issuer_dn", extract(get_dn_formatted, issuer, settings.dn_format)),
    ]

    der_out = BoundedBuffer(buffer_size)
    der_result = get_der(cert, der_out)
    fields.append(("der_length", str(der_result.length) if der_result.ok else render(der_result, der_out)))

    for spec in dn_entries:
        name, pos = parse_dn_entry(spec)
        fields.append((f"subject {name}[{pos}]", extract(get_dn_entry, subject, name, pos)))

    width = max(len(label) for label, _ in fields)
    for label, value in fields:
        print(f"{label.ljust(width)}  {value}")
    return 0


def show_version(text: str) -> int:
    """Print the packed form of an OpenSSL version string."""
    parsed = parse_openssl_version(text)
    if parsed is None:
        print(f"Error: invalid version string: {text!r}", file=sys.stderr)
        return 1

    print(f"0x{parsed.pack():08x}")
    print(
        f"major={parsed.major} minor={parsed.minor} fix={parsed.fix} "
        f"patch={parsed.patch} status={parsed.status}"
    )
    return 0


def filter_grease(hex_data: str, buffer_size: int) -> int:
    """Print a hex byte list with GREASE values removed."""
    try:
        data = bytes.fromhex(hex_data)
    except ValueError as e:
        print(f"Error: invalid hex input: {e}", file=sys.stderr)
        return 1

    out = BoundedBuffer(buffer_size)
    exclude_tls_grease(data, out)
    print(out.getvalue().hex())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="certmeta",
        description="Extract X.509 certificate and TLS handshake metadata"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Log level (default: {settings.log_level})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Print certificate metadata"
    )
    inspect_parser.add_argument(
        "path",
        type=Path,
        help="PEM or DER certificate file"
    )
    inspect_parser.add_argument(
        "--buffer-size",
        type=int,
        default=settings.buffer_size,
        help=f"Output buffer capacity in bytes (default: {settings.buffer_size})"
    )
    inspect_parser.add_argument(
        "--dn-entry",
        action="append",
        default=[],
        metavar="NAME[:POS]",
        help="Subject attribute to extract, e.g. CN or OU:-1 (repeatable)"
    )

    version_parser = subparsers.add_parser(
        "version",
        help="Pack an OpenSSL version string"
    )
    version_parser.add_argument(
        "text",
        help="Version string, e.g. 1.1.1w or 3.0.0-beta2"
    )

    grease_parser = subparsers.add_parser(
        "grease",
        help="Remove GREASE values from a hex byte list"
    )
    grease_parser.add_argument(
        "hex",
        help="Hex encoded bytes, e.g. 0a0a13011a1a"
    )
    grease_parser.add_argument(
        "--buffer-size",
        type=int,
        default=settings.buffer_size,
        help=f"Output buffer capacity in bytes (default: {settings.buffer_size})"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug(f"Running command: {args.command}")

    if getattr(args, "buffer_size", 0) < 0:
        parser.error("--buffer-size must not be negative")

    if args.command == "inspect":
        return inspect_certificate(args.path, args.buffer_size, args.dn_entry)
    if args.command == "version":
        return show_version(args.text)
    return filter_grease(args.hex, args.buffer_size)


if __name__ == "__main__":
    sys.exit(main())
