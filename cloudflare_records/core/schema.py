"""
Record schema - Fields the host may set on a Cloudflare record resource

The schema declares each field's type, whether the user must, may or cannot
set it, its default, and whether changing it forces a new record.
"""

import logging
from typing import Dict, List

from ..exceptions import ConfigurationError
from ..utils.validators import validate_fqdn

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

RECORD_SCHEMA: Dict[str, Dict] = {
    "domain": {"type": str, "required": True, "force_new": True},
    "subdomain": {"type": str, "optional": True, "default": ""},
    "name": {
        "type": str,
        "optional": True,
        "deprecated": "Please use 'subdomain' instead",
    },
    "type": {"type": str, "required": True, "force_new": True},
    "value": {"type": str, "required": True},
    "ttl": {"type": int, "optional": True, "computed": True},
    "priority": {"type": int, "optional": True},
    "proxied": {"type": bool, "optional": True, "default": False},
    "zone_id": {"type": str, "computed": True},
}


def zero_value(field: Dict):
    """Return the empty value for a field's type."""
    return field["type"]()


def is_user_settable(field: Dict) -> bool:
    return field.get("required", False) or field.get("optional", False)


def validate_config(config: Dict, schema: Dict[str, Dict] = RECORD_SCHEMA) -> List[str]:
    """
    Validate a record configuration against the schema.

    Args:
        config: Field values authored by the user

    Returns:
        Names of deprecated fields that were set

    Raises:
        ConfigurationError: If a field is missing, unknown, read-only or mistyped
    """
    errors = []
    deprecated = []

    for key, value in config.items():
        field = schema.get(key)
        if field is None:
            errors.append(f"{key}: unknown field")
            continue

        if not is_user_settable(field):
            errors.append(f"{key}: computed field cannot be set")
            continue

        if value is None:
            continue

        # bool is a subclass of int; reject it for integer fields
        expected = field["type"]
        if not isinstance(value, expected) or (
            expected is int and isinstance(value, bool)
        ):
            errors.append(f"{key}: expected {expected.__name__}, got {type(value).__name__}")
            continue

        if "deprecated" in field:
            logger.warning(f"Field '{key}' is deprecated: {field['deprecated']}")
            deprecated.append(key)

    for key, field in schema.items():
        if field.get("required") and config.get(key) in (None, ""):
            errors.append(f"{key}: required field is not set")

    domain = config.get("domain")
    if isinstance(domain, str) and domain and not validate_fqdn(domain):
        errors.append(f"domain: invalid domain name {domain!r}")

    if errors:
        raise ConfigurationError("Invalid record configuration: " + "; ".join(errors))

    return deprecated


def requires_replacement(
    current: Dict, desired: Dict, schema: Dict[str, Dict] = RECORD_SCHEMA
) -> List[str]:
    """Return the immutable fields whose value differs between two configurations."""
    return [
        key
        for key, field in schema.items()
        if field.get("force_new") and current.get(key) != desired.get(key)
    ]
