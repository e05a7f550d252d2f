"""
Record translator - Map local resource fields to and from provider records

The provider addresses records by fully-qualified name, while the local
configuration splits it into a subdomain and the zone's domain.
"""

import logging
from typing import Dict

from .resource_data import ResourceData

logger = logging.getLogger(__name__)


def record_name(subdomain: str, domain: str) -> str:
    """Compose the fully-qualified record name."""
    if not subdomain:
        return domain
    return f"{subdomain}.{domain}"


def subdomain_name(full_name: str, domain: str) -> str:
    """Strip the domain and one trailing separator from a record name."""
    name = full_name
    if domain and name.endswith(domain):
        name = name[: -len(domain)]
    if name.endswith("."):
        name = name[:-1]
    return name


def build_record(data: ResourceData, update: bool = False) -> Dict:
    """
    Build the provider's record representation from local fields.

    Priority and TTL are only sent when set, leaving provider defaults in
    effect otherwise. On create the proxied flag is sent as configured; on
    update it is sent as False unless it is set to a non-zero value.

    Args:
        data: Local resource state
        update: Build the record for an in-place update

    Returns:
        Record dictionary in the provider's shape
    """
    domain = data.get("domain")
    record = {
        "type": data.get("type"),
        "name": record_name(data.get("subdomain"), domain),
        "content": data.get("value"),
        "zone_name": domain,
    }

    if update:
        record["id"] = data.id
        record["proxied"] = False
        proxied, ok = data.get_ok("proxied")
        if ok:
            record["proxied"] = proxied
    else:
        record["proxied"] = data.get("proxied")

    priority, ok = data.get_ok("priority")
    if ok:
        record["priority"] = priority

    ttl, ok = data.get_ok("ttl")
    if ok:
        record["ttl"] = ttl

    return record


def apply_record(data: ResourceData, record: Dict, zone_id: str):
    """Project a fetched provider record back onto local fields."""
    domain = data.get("domain")

    data.set_id(record.get("id", ""))
    data.set("type", record.get("type"))
    data.set("subdomain", subdomain_name(record.get("name", ""), domain))
    data.set("value", record.get("content"))
    data.set("ttl", record.get("ttl"))
    data.set("priority", record.get("priority"))
    data.set("proxied", record.get("proxied", False))
    data.set("zone_id", zone_id)
