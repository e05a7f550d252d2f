"""
Core record resource functionality.

This package contains the lifecycle operations of the Cloudflare record
resource and the state-file orchestration built on them.
"""

from .record_manager import RecordManager
from .resource_data import ResourceData
from .schema import RECORD_SCHEMA, SCHEMA_VERSION

__all__ = ["RecordManager", "ResourceData", "RECORD_SCHEMA", "SCHEMA_VERSION"]
