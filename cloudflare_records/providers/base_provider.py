"""
Base DNS provider interface.

This module defines the abstract base class that remote DNS clients must
implement. Records are dictionaries in the provider's JSON shape.
"""

from abc import ABC, abstractmethod
from typing import Dict, List


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def get_zone_id(self, zone_name: str) -> str:
        """Get the zone id for a domain name."""
        pass

    @abstractmethod
    def create_record(self, zone_id: str, record: Dict) -> Dict:
        """Create a new DNS record and return the stored copy."""
        pass

    @abstractmethod
    def get_record(self, zone_id: str, record_id: str) -> Dict:
        """Get a DNS record by id."""
        pass

    @abstractmethod
    def list_records(self, zone_id: str, record_filter: Dict) -> List[Dict]:
        """List DNS records matching the filter's name and type."""
        pass

    @abstractmethod
    def update_record(self, zone_id: str, record_id: str, record: Dict) -> None:
        """Update an existing DNS record."""
        pass

    @abstractmethod
    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        pass
