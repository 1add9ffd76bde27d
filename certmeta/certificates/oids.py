# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Short names for distinguished name attribute OIDs.

Names follow OpenSSL's short-name table (OBJ_nid2sn), so DN lookups and
renderings use the same identifiers as `openssl x509 -subject`:

    /C=FR/ST=Paris/O=Example/CN=example.com/emailAddress=admin@example.com

An OID that is not listed here is rendered as its dotted form.
"""

from cryptography import x509
from cryptography.x509.oid import NameOID


class NameAttributeOIDs:
    """Distinguished name attribute OIDs known by short name."""

    COMMON_NAME = NameOID.COMMON_NAME
    SURNAME = NameOID.SURNAME
    SERIAL_NUMBER = NameOID.SERIAL_NUMBER
    COUNTRY_NAME = NameOID.COUNTRY_NAME
    LOCALITY_NAME = NameOID.LOCALITY_NAME
    STATE_OR_PROVINCE_NAME = NameOID.STATE_OR_PROVINCE_NAME
    STREET_ADDRESS = NameOID.STREET_ADDRESS
    ORGANIZATION_NAME = NameOID.ORGANIZATION_NAME
    ORGANIZATIONAL_UNIT_NAME = NameOID.ORGANIZATIONAL_UNIT_NAME
    TITLE = NameOID.TITLE
    BUSINESS_CATEGORY = NameOID.BUSINESS_CATEGORY
    POSTAL_ADDRESS = NameOID.POSTAL_ADDRESS
    POSTAL_CODE = NameOID.POSTAL_CODE
    GIVEN_NAME = NameOID.GIVEN_NAME
    INITIALS = NameOID.INITIALS
    GENERATION_QUALIFIER = NameOID.GENERATION_QUALIFIER
    X500_UNIQUE_IDENTIFIER = NameOID.X500_UNIQUE_IDENTIFIER
    DN_QUALIFIER = NameOID.DN_QUALIFIER
    PSEUDONYM = NameOID.PSEUDONYM
    ORGANIZATION_IDENTIFIER = NameOID.ORGANIZATION_IDENTIFIER
    DESCRIPTION = x509.ObjectIdentifier("2.5.4.13")
    USER_ID = NameOID.USER_ID
    DOMAIN_COMPONENT = NameOID.DOMAIN_COMPONENT
    EMAIL_ADDRESS = NameOID.EMAIL_ADDRESS
    UNSTRUCTURED_NAME = NameOID.UNSTRUCTURED_NAME
    JURISDICTION_COUNTRY_NAME = NameOID.JURISDICTION_COUNTRY_NAME
    JURISDICTION_STATE_OR_PROVINCE_NAME = NameOID.JURISDICTION_STATE_OR_PROVINCE_NAME
    JURISDICTION_LOCALITY_NAME = NameOID.JURISDICTION_LOCALITY_NAME


SHORT_NAMES: dict[x509.ObjectIdentifier, str] = {
    NameAttributeOIDs.COMMON_NAME: "CN",
    NameAttributeOIDs.SURNAME: "SN",
    NameAttributeOIDs.SERIAL_NUMBER: "serialNumber",
    NameAttributeOIDs.COUNTRY_NAME: "C",
    NameAttributeOIDs.LOCALITY_NAME: "L",
    NameAttributeOIDs.STATE_OR_PROVINCE_NAME: "ST",
    NameAttributeOIDs.STREET_ADDRESS: "street",
    NameAttributeOIDs.ORGANIZATION_NAME: "O",
    NameAttributeOIDs.ORGANIZATIONAL_UNIT_NAME: "OU",
    NameAttributeOIDs.TITLE: "title",
    NameAttributeOIDs.BUSINESS_CATEGORY: "businessCategory",
    NameAttributeOIDs.POSTAL_ADDRESS: "postalAddress",
    NameAttributeOIDs.POSTAL_CODE: "postalCode",
    NameAttributeOIDs.GIVEN_NAME: "GN",
    NameAttributeOIDs.INITIALS: "initials",
    NameAttributeOIDs.GENERATION_QUALIFIER: "generationQualifier",
    NameAttributeOIDs.X500_UNIQUE_IDENTIFIER: "x500UniqueIdentifier",
    NameAttributeOIDs.DN_QUALIFIER: "dnQualifier",
    NameAttributeOIDs.PSEUDONYM: "pseudonym",
    NameAttributeOIDs.ORGANIZATION_IDENTIFIER: "organizationIdentifier",
    NameAttributeOIDs.DESCRIPTION: "description",
    NameAttributeOIDs.USER_ID: "UID",
    NameAttributeOIDs.DOMAIN_COMPONENT: "DC",
    NameAttributeOIDs.EMAIL_ADDRESS: "emailAddress",
    NameAttributeOIDs.UNSTRUCTURED_NAME: "unstructuredName",
    NameAttributeOIDs.JURISDICTION_COUNTRY_NAME: "jurisdictionC",
    NameAttributeOIDs.JURISDICTION_STATE_OR_PROVINCE_NAME: "jurisdictionST",
    NameAttributeOIDs.JURISDICTION_LOCALITY_NAME: "jurisdictionL",
}

_SHORT_NAMES_BY_DOTTED = {oid.dotted_string: name for oid, name in SHORT_NAMES.items()}


def short_name(dotted_oid: str) -> str:
    """
    Resolve a dotted OID to its short name.

    Args:
        dotted_oid: OID in dotted form (e.g. "2.5.4.3")

    Returns:
        Short name ("CN"), or the dotted OID itself if it is not known
    """
    return _SHORT_NAMES_BY_DOTTED.get(dotted_oid, dotted_oid)
