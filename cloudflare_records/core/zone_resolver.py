"""
Zone resolver - Translate a domain name to the provider's zone id.
"""

import logging

from ..exceptions import ProviderError, ZoneNotFoundError

logger = logging.getLogger(__name__)


def resolve_zone(client, domain: str) -> str:
    """
    Look up the zone id for a domain. Nothing is cached between calls.

    Raises:
        ZoneNotFoundError: If no zone matches the domain
        ProviderError: If the lookup itself fails
    """
    try:
        zone_id = client.get_zone_id(domain)
    except ProviderError as e:
        logger.error(f"Error finding zone {domain!r}: {e}")
        raise type(e)(f'Error finding zone "{domain}": {e}') from e

    if not zone_id:
        raise ZoneNotFoundError(f'Error finding zone "{domain}": zone could not be found')

    logger.debug(f"Resolved zone {domain} -> {zone_id}")
    return zone_id
