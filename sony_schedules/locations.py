"""
Supported regional feeds of the SetAsia schedule site.
"""
from types import MappingProxyType

from sony_schedules.exceptions import InvalidLocation


LOCATIONS = MappingProxyType({
    "en-au": "Australia",
    "en-ca": "Canada",
    "en-nz": "New Zealand",
    "en-pk": "Pakistan",
    "en-za": "South Africa",
    "en-gb": "UK & Europe",
    "en-ae": "United Arab Emirates",
    "en-us": "USA",
})


def is_supported(code: object) -> bool:
    """Check whether a location code is one of the supported feeds"""
    return isinstance(code, str) and code in LOCATIONS


def resolve(code: object) -> str:
    """
    Resolve a location code to its display name

    Args:
        code: Location code such as 'en-gb'

    Returns:
        Display name of the feed (e.g. 'UK & Europe')

    Raises:
        InvalidLocation: If the code is empty, not a string or unknown
    """
    if not is_supported(code):
        raise InvalidLocation(code)
    return LOCATIONS[code]
