"""
Record resource - Lifecycle operations for a Cloudflare DNS record

Each operation receives the resource's local state and the client handle to
the remote API. Every call resolves the zone, translates fields, talks to the
provider and writes the result back into the local state. A record that the
provider reports as unknown is treated as already absent on read and delete.
"""

import logging
from typing import List

from ..exceptions import (
    ConfigurationError,
    ImportAmbiguityError,
    ImportFormatError,
    ProviderError,
    RecordImportError,
    is_record_not_found,
)
from ..utils.validators import validate_record_content, validate_record_type
from .record_translator import apply_record, build_record, record_name
from .resource_data import ResourceData
from .zone_resolver import resolve_zone

logger = logging.getLogger(__name__)

IMPORT_SEPARATOR = "|"


def validate(data: ResourceData) -> dict:
    """
    Build the record to create and check it without contacting the provider.

    Raises:
        ConfigurationError: If the content or the type/proxy combination is invalid
    """
    new_record = build_record(data)

    is_valid, reason = validate_record_content(new_record["type"], new_record["content"])
    if not is_valid:
        raise ConfigurationError(f"Error validating record name {new_record['name']!r}: {reason}")

    is_valid, reason = validate_record_type(new_record["type"], new_record["proxied"])
    if not is_valid:
        raise ConfigurationError(f"Error validating record type {new_record['type']!r}: {reason}")

    return new_record


def create(data: ResourceData, client):
    """Create the record and refresh local state from the provider's copy."""
    new_record = validate(data)

    zone_id = resolve_zone(client, new_record["zone_name"])
    data.set("zone_id", zone_id)
    new_record["zone_id"] = zone_id

    logger.debug(f"Cloudflare record create configuration: {new_record}")

    try:
        result = client.create_record(zone_id, new_record)
    except ProviderError as e:
        logger.error(f"Failed to create record {new_record['name']}: {e}")
        raise ProviderError(f"Failed to create record: {e}") from e

    # An empty response means the provider did not persist the record
    if not result or not result.get("id"):
        raise ProviderError("Failed to find record in create response; record was empty")

    data.set_id(result["id"])
    logger.info(f"Cloudflare record ID: {data.id}")

    read(data, client)


def read(data: ResourceData, client):
    """Refresh local state; clear the id if the record no longer exists."""
    domain = data.get("domain")
    zone_id = resolve_zone(client, domain)

    try:
        record = client.get_record(zone_id, data.id)
    except ProviderError as e:
        if is_record_not_found(e):
            logger.warning(f"Cloudflare record {data.id} not found, removing from state")
            data.set_id("")
            return
        raise

    apply_record(data, record, zone_id)


def update(data: ResourceData, client):
    """Update the record in place and refresh local state."""
    update_record = build_record(data, update=True)

    zone_id = resolve_zone(client, update_record["zone_name"])
    update_record["zone_id"] = zone_id

    logger.debug(f"Cloudflare record update configuration: {update_record}")

    try:
        client.update_record(zone_id, data.id, update_record)
    except ProviderError as e:
        logger.error(f"Failed to update record {data.id}: {e}")
        raise ProviderError(f"Failed to update Cloudflare record: {e}") from e

    read(data, client)


def delete(data: ResourceData, client):
    """Delete the record; a record that is already gone counts as deleted."""
    domain = data.get("domain")
    zone_id = resolve_zone(client, domain)

    logger.info(f"Deleting Cloudflare record: {domain}, {data.id}")

    try:
        client.delete_record(zone_id, data.id)
    except ProviderError as e:
        if not is_record_not_found(e):
            logger.error(f"Failed to delete record {data.id}: {e}")
            raise ProviderError(f"Error deleting Cloudflare record: {e}") from e
        logger.info(f"Cloudflare record {data.id} was already deleted")

    data.set_id("")


def import_record(data: ResourceData, client) -> List[ResourceData]:
    """
    Adopt an existing record identified by ``subdomain|domain|type``.

    The identifier is read from ``data.id``. Exactly one remote record must
    match the composed name and type.

    Returns:
        List holding the seeded resource state

    Raises:
        ImportFormatError: If the identifier does not have three tokens
        ImportAmbiguityError: If zero or several records match
    """
    tokens = data.id.split(IMPORT_SEPARATOR)
    if len(tokens) != 3:
        raise ImportFormatError(f"expecting subdomain|domain|type, got {data.id!r}")

    subdomain, domain, record_type = tokens
    zone_id = resolve_zone(client, domain)

    record_filter = {"name": record_name(subdomain, domain), "type": record_type}
    try:
        records = client.list_records(zone_id, record_filter)
    except ProviderError as e:
        raise ProviderError(f"error filtering DNS records: {e}") from e

    if len(records) != 1:
        raise ImportAmbiguityError(f"expected 1 record, got {len(records)}")

    data.set_id(records[0]["id"])
    data.set("domain", domain)

    try:
        read(data, client)
    except ProviderError as e:
        raise RecordImportError(f"error importing record {records[0]['id']!r}: {e}") from e

    return [data]
