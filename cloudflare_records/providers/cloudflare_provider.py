"""
Cloudflare DNS provider implementation.

This module talks to the Cloudflare v4 REST API using requests and turns
failed responses into tagged provider errors.
"""

import logging
from typing import Dict, List, Optional

import requests

from .base_provider import DNSProvider
from ..exceptions import (
    RECORD_NOT_FOUND_MESSAGE,
    ProviderError,
    RecordNotFoundError,
    ZoneNotFoundError,
)

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.cloudflare.com/client/v4"

# Cloudflare error code for an unknown DNS record id
RECORD_NOT_FOUND_CODE = 81044

# Fields accepted by the dns_records endpoints
PAYLOAD_FIELDS = ("type", "name", "content", "ttl", "priority", "proxied")


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider using the v4 REST API."""

    def __init__(self, config: Dict):
        """Initialize Cloudflare provider."""
        self.config = config
        self.base_url = config.get("base_url", API_BASE_URL).rstrip("/")
        self.timeout = config.get("timeout", 30)
        self.per_page = config.get("per_page", 100)

        self.session = requests.Session()
        self.session.headers.update(self._build_headers())

        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def _build_headers(self) -> Dict[str, str]:
        """Build authentication headers from an API token or a global API key."""
        headers = {"Content-Type": "application/json"}

        api_token = self.config.get("api_token", "")
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        elif self.config.get("email") and self.config.get("api_key"):
            headers["X-Auth-Email"] = self.config["email"]
            headers["X-Auth-Key"] = self.config["api_key"]
        else:
            logger.warning("No Cloudflare credentials configured")

        return headers

    def get_zone_id(self, zone_name: str) -> str:
        """Get the zone id for a domain name."""
        payload = self._request("GET", "/zones", params={"name": zone_name})
        zones = payload.get("result") or []
        if not zones:
            raise ZoneNotFoundError("Zone could not be found")
        if len(zones) > 1:
            raise ProviderError(f"More than one zone matches {zone_name!r}")
        return zones[0]["id"]

    def create_record(self, zone_id: str, record: Dict) -> Dict:
        """Create a new DNS record."""
        payload = self._request(
            "POST", f"/zones/{zone_id}/dns_records", json=self._record_payload(record)
        )
        return payload.get("result") or {}

    def get_record(self, zone_id: str, record_id: str) -> Dict:
        """Get a DNS record by id."""
        payload = self._request("GET", f"/zones/{zone_id}/dns_records/{record_id}")
        record = payload.get("result")
        if not record or not record.get("id"):
            raise ProviderError(f"Empty response for record {record_id}")
        return record

    def list_records(self, zone_id: str, record_filter: Dict) -> List[Dict]:
        """List DNS records matching the filter, following pagination."""
        params = {key: value for key, value in record_filter.items() if value}
        params["per_page"] = self.per_page

        records = []
        page = 1
        while True:
            params["page"] = page
            payload = self._request("GET", f"/zones/{zone_id}/dns_records", params=params)
            records.extend(payload.get("result") or [])

            total_pages = (payload.get("result_info") or {}).get("total_pages", 1)
            if page >= total_pages:
                break
            page += 1

        logger.debug(f"Retrieved {len(records)} records from zone {zone_id}")
        return records

    def update_record(self, zone_id: str, record_id: str, record: Dict) -> None:
        """Update an existing DNS record."""
        self._request(
            "PUT",
            f"/zones/{zone_id}/dns_records/{record_id}",
            json=self._record_payload(record),
        )

    def delete_record(self, zone_id: str, record_id: str) -> None:
        """Delete a DNS record."""
        self._request("DELETE", f"/zones/{zone_id}/dns_records/{record_id}")

    def _record_payload(self, record: Dict) -> Dict:
        return {
            key: record[key]
            for key in PAYLOAD_FIELDS
            if record.get(key) is not None
        }

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        json: Optional[Dict] = None,
    ) -> Dict:
        """Send an API request and return the decoded response envelope."""
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Cloudflare request {method} {path} failed: {e}")
            raise ProviderError(f"HTTP request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError:
            raise ProviderError(
                f"Unexpected response (HTTP {response.status_code}): {response.text}"
            )

        if not payload.get("success", False):
            self._handle_api_error(payload, response.status_code)

        return payload

    def _handle_api_error(self, payload: Dict, status_code: int) -> None:
        """Raise a tagged error for a failed API response."""
        errors = payload.get("errors") or []
        message = "; ".join(
            f"{error.get('code')}: {error.get('message')}" for error in errors
        ) or f"HTTP {status_code}"

        logger.debug(f"Cloudflare API error response: {message}")

        if RECORD_NOT_FOUND_MESSAGE in message or any(
            error.get("code") == RECORD_NOT_FOUND_CODE for error in errors
        ):
            raise RecordNotFoundError(message)
        raise ProviderError(message)
