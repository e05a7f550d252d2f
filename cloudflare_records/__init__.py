"""
Cloudflare Records - Declarative Cloudflare DNS record resource

Maps a declarative DNS record configuration onto the Cloudflare API and
reconciles the remote record back into local state.
"""

__version__ = "1.0.0"
__author__ = "Cloudflare Records Team"
__description__ = "Declarative Cloudflare DNS record resource"

from .core.record_manager import RecordManager
from .core.resource_data import ResourceData
from .providers.dns_client import DNSClient

__all__ = [
    "RecordManager",
    "ResourceData",
    "DNSClient",
]
