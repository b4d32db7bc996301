"""
Key strategies for GMaps keyed by strings.
"""

from typing import Optional

# Multiplier for the polynomial string hash
HASH_MULTIPLIER = 29

# Hash values wrap like an unsigned 64-bit accumulator
_HASH_MASK = (1 << 64) - 1


def duplicate(key: Optional[str]) -> Optional[str]:
    """Return an owned copy of key, or None if key is None."""
    if key is None:
        return None
    return str(key)


def compare_keys(key1: str, key2: str) -> bool:
    """Return True if the two string keys are equal."""
    return key1 == key2


def hash29(key: Optional[str]) -> int:
    """
    Polynomial hash of a string.

    Sums ord(c) * 29^(i+1) over the characters, wrapping at 64 bits so the
    result matches an unsigned accumulator.

    Args:
        key: String to hash; None hashes to 0

    Returns:
        Non-negative hash value
    """
    total = 0
    factor = HASH_MULTIPLIER
    for ch in key or "":
        total = (total + ord(ch) * factor) & _HASH_MASK
        factor = (factor * HASH_MULTIPLIER) & _HASH_MASK
    return total


def release_key(key: str):
    """Destructor hook for string keys; nothing to release."""
    return None
