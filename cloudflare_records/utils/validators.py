"""
Validators - Pre-flight checks for DNS record configuration

This module validates record content against the syntax of its record type,
and the record type against the provider's proxying rules, so that invalid
configuration is rejected before any remote call is made.
"""

import ipaddress
import logging
import re
from typing import Tuple

import dns.exception
import dns.name
import dns.rdata
import dns.rdataclass
import dns.rdatatype

logger = logging.getLogger(__name__)

# Record types that may be routed through the provider's edge network.
PROXIABLE_TYPES = ("A", "AAAA", "CNAME")

# Record types that are only valid when not proxied.
UNPROXIABLE_TYPES = ("TXT", "SRV", "LOC", "MX", "NS", "SPF", "CAA")

HOSTNAME_TYPES = ("CNAME", "NS", "MX")
RDATA_TYPES = ("CAA", "LOC")


def validate_fqdn(fqdn: str) -> bool:
    """
    Validate a domain name such as a zone apex.

    Args:
        fqdn: The domain name to validate

    Returns:
        True if valid, False otherwise
    """
    if not fqdn or not isinstance(fqdn, str):
        return False

    if fqdn.endswith("."):
        logger.warning(f"Domain ends with dot: {fqdn}")
        return False

    if len(fqdn) > 253:
        logger.warning(f"Domain too long: {fqdn}")
        return False

    labels = fqdn.split(".")

    if len(labels) < 2:
        logger.warning(f"Domain must have at least 2 labels: {fqdn}")
        return False

    for label in labels:
        if not _validate_label(label):
            logger.warning(f"Invalid label '{label}' in domain: {fqdn}")
            return False

    return True


def _validate_label(label: str) -> bool:
    """Validate a single domain label."""
    if len(label) == 0 or len(label) > 63:
        return False

    # Letters, digits, hyphens and underscores; no leading or trailing hyphen
    return bool(re.match(r"^[a-zA-Z0-9_]([a-zA-Z0-9_-]*[a-zA-Z0-9_])?$", label))


def validate_record_content(record_type: str, content: str) -> Tuple[bool, str]:
    """
    Validate record content against the syntax of its type.

    Args:
        record_type: DNS record type, e.g. "A" or "CNAME"
        content: The record value

    Returns:
        Tuple of (is_valid, reason); reason is empty when valid
    """
    if record_type == "A":
        try:
            ipaddress.IPv4Address(content)
            return True, ""
        except ipaddress.AddressValueError:
            return False, f"A record must be a valid IPv4 address, got: {content!r}"

    if record_type == "AAAA":
        try:
            ipaddress.IPv6Address(content)
            return True, ""
        except ipaddress.AddressValueError:
            return False, f"AAAA record must be a valid IPv6 address, got: {content!r}"

    if record_type in ("TXT", "SPF"):
        return True, ""

    if not content:
        return False, f"{record_type} record must have a value"

    if record_type in HOSTNAME_TYPES:
        try:
            dns.name.from_text(content)
        except dns.exception.DNSException as e:
            return False, f"{record_type} record must be a valid host name, got: {content!r} ({e})"

        # A single trailing root dot is allowed
        host = content[:-1] if content.endswith(".") else content
        if not all(_validate_label(label) for label in host.split(".")):
            return False, f"{record_type} record must be a valid host name, got: {content!r}"
        return True, ""

    if record_type in RDATA_TYPES:
        try:
            dns.rdata.from_text(
                dns.rdataclass.IN, dns.rdatatype.from_text(record_type), content
            )
            return True, ""
        except dns.exception.DNSException as e:
            return False, f"{record_type} record has invalid content {content!r} ({e})"

    return True, ""


def validate_record_type(record_type: str, proxied: bool) -> Tuple[bool, str]:
    """
    Check that a record type is supported and compatible with proxying.

    Args:
        record_type: DNS record type
        proxied: Whether the record is routed through the provider's edge

    Returns:
        Tuple of (is_valid, reason); reason is empty when valid
    """
    if record_type in PROXIABLE_TYPES:
        return True, ""

    if record_type in UNPROXIABLE_TYPES:
        if not proxied:
            return True, ""
        return False, f"Type {record_type!r} cannot be proxied"

    valid = ", ".join(f'"{t}"' for t in PROXIABLE_TYPES + UNPROXIABLE_TYPES)
    return False, f"Invalid type {record_type!r}. Valid types are {valid}"
