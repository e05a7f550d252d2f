"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that stores zones and records in
memory and reports errors the way the Cloudflare API does.
"""

import logging
import uuid
from typing import Dict, List

from .base_provider import DNSProvider
from ..exceptions import RECORD_NOT_FOUND_MESSAGE, RecordNotFoundError, ZoneNotFoundError

logger = logging.getLogger(__name__)

RECORD_FIELDS = ("type", "name", "content", "ttl", "priority", "proxied")

# Cloudflare's value for an automatic TTL
AUTOMATIC_TTL = 1


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider."""
        config = config or {}
        self.zones: Dict[str, str] = {}
        self.records: Dict[str, Dict[str, Dict]] = {}
        for zone_name, zone_id in (config.get("zones") or {}).items():
            self.add_zone(zone_name, zone_id)
        logger.info("Mock DNS provider initialized")

    def add_zone(self, zone_name: str, zone_id: str = None) -> str:
        """Register a zone and return its id."""
        zone_id = zone_id or uuid.uuid4().hex
        self.zones[zone_name] = zone_id
        self.records.setdefault(zone_id, {})
        return zone_id

    def get_zone_id(self, zone_name: str) -> str:
        if zone_name not in self.zones:
            raise ZoneNotFoundError("Zone could not be found")
        return self.zones[zone_name]

    def create_record(self, zone_id: str, record: Dict) -> Dict:
        """Create a new DNS record."""
        stored = {key: record.get(key) for key in RECORD_FIELDS}
        stored["id"] = uuid.uuid4().hex
        stored["zone_id"] = zone_id
        stored["zone_name"] = self._zone_name(zone_id)
        stored["ttl"] = stored["ttl"] or AUTOMATIC_TTL
        stored["proxied"] = bool(stored["proxied"])
        self._zone_records(zone_id)[stored["id"]] = stored
        logger.info(f"Mock: Created record {stored['name']} -> {stored['content']}")
        return dict(stored)

    def get_record(self, zone_id: str, record_id: str) -> Dict:
        records = self._zone_records(zone_id)
        if record_id not in records:
            raise RecordNotFoundError(f"81044: {RECORD_NOT_FOUND_MESSAGE}")
        return dict(records[record_id])

    def list_records(self, zone_id: str, record_filter: Dict) -> List[Dict]:
        matches = []
        for record in self._zone_records(zone_id).values():
            if all(
                record.get(key) == value
                for key, value in record_filter.items()
                if value
            ):
                matches.append(dict(record))
        logger.info(f"Mock: Found {len(matches)} records matching {record_filter}")
        return matches

    def update_record(self, zone_id: str, record_id: str, record: Dict) -> None:
        """Update an existing DNS record."""
        stored = self.get_record(zone_id, record_id)
        for key in RECORD_FIELDS:
            if key in record:
                stored[key] = record[key]
        stored["ttl"] = stored["ttl"] or AUTOMATIC_TTL
        self._zone_records(zone_id)[record_id] = stored
        logger.info(f"Mock: Updated record {stored['name']} -> {stored['content']}")

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        records = self._zone_records(zone_id)
        if record_id not in records:
            raise RecordNotFoundError(f"81044: {RECORD_NOT_FOUND_MESSAGE}")
        record = records.pop(record_id)
        logger.info(f"Mock: Deleted record {record['name']}")

    def _zone_records(self, zone_id: str) -> Dict[str, Dict]:
        if zone_id not in self.records:
            raise ZoneNotFoundError(f"Invalid zone identifier {zone_id}")
        return self.records[zone_id]

    def _zone_name(self, zone_id: str) -> str:
        for name, known_id in self.zones.items():
            if known_id == zone_id:
                return name
        return ""
