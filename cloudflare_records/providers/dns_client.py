"""
DNS Client - Unified interface for DNS provider APIs

This module provides a common interface for the remote DNS providers,
currently supporting Cloudflare and an in-memory mock.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider

logger = logging.getLogger(__name__)


class DNSClient(DNSProvider):
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_name = self.config.get("default_provider", "cloudflare")
        provider_config = self.config.get("dns_providers", {}).get(provider_name, {})

        if provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{provider_name}', using mock provider")
            return MockDNSProvider()

    def get_zone_id(self, zone_name: str) -> str:
        return self.provider.get_zone_id(zone_name)

    def create_record(self, zone_id: str, record: Dict) -> Dict:
        return self.provider.create_record(zone_id, record)

    def get_record(self, zone_id: str, record_id: str) -> Dict:
        return self.provider.get_record(zone_id, record_id)

    def list_records(self, zone_id: str, record_filter: Dict) -> List[Dict]:
        return self.provider.list_records(zone_id, record_filter)

    def update_record(self, zone_id: str, record_id: str, record: Dict) -> None:
        self.provider.update_record(zone_id, record_id, record)

    def delete_record(self, zone_id: str, record_id: str) -> None:
        self.provider.delete_record(zone_id, record_id)
