"""
Exceptions raised by the Cloudflare record resource.

Provider errors carry a ``kind`` tag so callers can tell a missing record
apart from any other API failure without inspecting the message.
"""

# Text the Cloudflare API returns when a record id does not exist.
RECORD_NOT_FOUND_MESSAGE = "Invalid dns record identifier"


class ConfigurationError(ValueError):
    """Local configuration is invalid; nothing was sent to the provider."""


class ProviderError(RuntimeError):
    """The remote DNS provider rejected or failed a call."""

    kind = "api_error"


class ZoneNotFoundError(ProviderError):
    """No zone matches the requested domain."""

    kind = "zone_not_found"


class RecordNotFoundError(ProviderError):
    """The record id is unknown to the provider."""

    kind = "record_not_found"


class RecordImportError(ValueError):
    """An existing record could not be adopted."""


class ImportFormatError(RecordImportError):
    """The import identifier is not of the form subdomain|domain|type."""


class ImportAmbiguityError(RecordImportError):
    """The import lookup matched zero or several records."""


def is_record_not_found(error: Exception) -> bool:
    """
    Check whether an error means the record no longer exists.

    Clients that do not classify their errors are matched on the
    provider's message text.
    """
    if isinstance(error, RecordNotFoundError):
        return True
    return RECORD_NOT_FOUND_MESSAGE in str(error)
