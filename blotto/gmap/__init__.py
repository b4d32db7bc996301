"""
Generic chained hash map with pluggable key strategies.

Provides:
- GMap: The map itself
- PutResult / PutStatus: Outcome of a put
- String key strategies: duplicate, compare_keys, hash29, release_key
"""

from blotto.gmap.gmap import (
    GMap,
    GMapError,
    PutResult,
    PutStatus,
    INITIAL_CAPACITY,
    gmap_size,
    gmap_destroy,
)
from blotto.gmap.string_key import duplicate, compare_keys, hash29, release_key


def string_gmap(initial_capacity: int = INITIAL_CAPACITY) -> GMap:
    """Create a GMap keyed by strings."""
    return GMap(duplicate, compare_keys, hash29, release_key, initial_capacity)


__all__ = [
    'GMap',
    'GMapError',
    'PutResult',
    'PutStatus',
    'INITIAL_CAPACITY',
    'gmap_size',
    'gmap_destroy',
    'string_gmap',
    'duplicate',
    'compare_keys',
    'hash29',
    'release_key',
]
