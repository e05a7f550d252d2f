"""
Utility functions and helpers.

This package contains validation helpers for record configuration.
"""

from .validators import validate_fqdn, validate_record_content, validate_record_type

__all__ = ["validate_fqdn", "validate_record_content", "validate_record_type"]
