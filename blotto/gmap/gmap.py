"""
Generic associative map built on separate chaining.

The map is parameterized by four key strategies supplied at construction:
a copy function, an equality comparison, a hash function and a destructor.
Keys are copied on insertion and owned by the map until they are removed or
the map is destroyed. Values are stored by reference and never touched.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Tuple

# Initial number of chains in a new map
INITIAL_CAPACITY = 100


class GMapError(Exception):
    """Raised when a map is used after it has been destroyed."""
    pass


class PutStatus(Enum):
    """Outcome of a put operation."""
    INSERTED = "inserted"        # New key copied and linked
    REPLACED = "replaced"        # Existing key, value swapped
    COPY_FAILED = "copy_failed"  # Key copy failed, map unchanged


@dataclass
class PutResult:
    """Result of GMap.put: the outcome and the value it displaced, if any."""
    status: PutStatus
    previous: Any = None

    @property
    def ok(self) -> bool:
        return self.status != PutStatus.COPY_FAILED


class _Entry:
    """A node in a bucket chain."""

    __slots__ = ('key', 'value', 'next')

    def __init__(self, key, value, next_entry: Optional['_Entry'] = None):
        self.key = key
        self.value = value
        self.next = next_entry


class GMap:
    """
    Separately-chained hash map with pluggable key strategies.

    Usage:
        m = GMap(duplicate, compare_keys, hash29, release_key)
        m.put("a", 1)
        m.get("a")   # -> 1
        m.destroy()

    Growth doubles the number of chains whenever a new key arrives while
    size == capacity, so the load factor never exceeds 1.0.
    """

    def __init__(
        self,
        copy: Callable[[Any], Any],
        compare: Callable[[Any, Any], bool],
        hash: Callable[[Any], int],
        destroy: Callable[[Any], None],
        initial_capacity: int = INITIAL_CAPACITY
    ):
        """
        Create an empty map.

        Args:
            copy: Returns an independently owned duplicate of a key,
                  or None if the duplicate could not be made
            compare: Returns True when two keys are equal
            hash: Pure hash function over key contents
            destroy: Releases a key produced by copy
            initial_capacity: Number of chains to start with

        Raises:
            ValueError: If a strategy is missing or the capacity is not positive
        """
        for name, fn in (('copy', copy), ('compare', compare),
                         ('hash', hash), ('destroy', destroy)):
            if fn is None or not callable(fn):
                raise ValueError(f"GMap requires a callable '{name}' function")
        if initial_capacity < 1:
            raise ValueError(f"Initial capacity must be positive, got {initial_capacity}")

        self._copy = copy
        self._compare = compare
        self._hash = hash
        self._destroy = destroy

        self._capacity = initial_capacity
        self._size = 0
        self._table: Optional[List[Optional[_Entry]]] = [None] * initial_capacity

    def _check_alive(self):
        if self._table is None:
            raise GMapError("GMap has been destroyed")

    def _index(self, key, capacity: int) -> int:
        return self._hash(key) % capacity

    def _find(self, key) -> Optional[_Entry]:
        """Sequential search of the chain key hashes to."""
        curr = self._table[self._index(key, self._capacity)]
        while curr is not None and not self._compare(curr.key, key):
            curr = curr.next
        return curr

    def _link(self, table: List[Optional[_Entry]], entry: _Entry, capacity: int):
        """Push entry onto the front of its chain in table."""
        index = self._index(entry.key, capacity)
        entry.next = table[index]
        table[index] = entry

    def _embiggen(self, new_capacity: int):
        """Rehash every entry into a fresh table of new_capacity chains."""
        new_table: List[Optional[_Entry]] = [None] * new_capacity

        for chain in self._table:
            curr = chain
            while curr is not None:
                following = curr.next
                self._link(new_table, curr, new_capacity)
                curr = following

        self._capacity = new_capacity
        self._table = new_table

    @property
    def capacity(self) -> int:
        """Current number of chains."""
        self._check_alive()
        return self._capacity

    def size(self) -> int:
        """Number of entries in the map."""
        self._check_alive()
        return self._size

    def put(self, key, value) -> PutResult:
        """
        Associate value with key.

        An existing key keeps its owned copy and only the value is swapped.
        A new key is copied first; if the copy fails the map is unchanged.

        Args:
            key: Key to store (must not be None)
            value: Value to associate; the map does not take ownership

        Returns:
            PutResult describing whether the key was inserted or replaced,
            with the displaced value on replacement

        Raises:
            ValueError: If key is None
        """
        self._check_alive()
        if key is None:
            raise ValueError("GMap keys cannot be None")

        entry = self._find(key)
        if entry is not None:
            previous = entry.value
            entry.value = value
            return PutResult(PutStatus.REPLACED, previous)

        owned = self._copy(key)
        if owned is None:
            return PutResult(PutStatus.COPY_FAILED)

        if self._size >= self._capacity:
            self._embiggen(self._capacity * 2)

        self._link(self._table, _Entry(owned, value), self._capacity)
        self._size += 1
        return PutResult(PutStatus.INSERTED)

    def get(self, key, default=None):
        """Return the value stored for key, or default if it is absent."""
        self._check_alive()
        if key is None:
            return default

        entry = self._find(key)
        return entry.value if entry is not None else default

    def contains_key(self, key) -> bool:
        """Return True if an entry exists for key, even when its value is None."""
        self._check_alive()
        if key is None:
            return False
        return self._find(key) is not None

    def remove(self, key):
        """
        Remove key from the map.

        The owned key copy is released through the destroy strategy. The
        value is handed back to the caller.

        Returns:
            The removed value, or None if key was absent
        """
        self._check_alive()
        if key is None:
            return None

        index = self._index(key, self._capacity)
        prev = None
        curr = self._table[index]
        while curr is not None and not self._compare(curr.key, key):
            prev = curr
            curr = curr.next

        if curr is None:
            return None

        if prev is None:
            self._table[index] = curr.next
        else:
            prev.next = curr.next

        self._destroy(curr.key)
        curr.next = None
        self._size -= 1
        return curr.value

    def for_each(self, visitor: Callable[[Any, Any, Any], None], context=None):
        """
        Call visitor(key, value, context) once for every entry.

        The map must not be modified while the traversal is running.
        """
        self._check_alive()
        for chain in self._table:
            curr = chain
            while curr is not None:
                visitor(curr.key, curr.value, context)
                curr = curr.next

    def keys(self) -> List[Any]:
        """
        Return a list of the keys in the map.

        The list holds the map's own key objects; callers must not release
        them.
        """
        keys: List[Any] = []
        self.for_each(lambda key, value, out: out.append(key), keys)
        return keys

    def values(self) -> List[Any]:
        values: List[Any] = []
        self.for_each(lambda key, value, out: out.append(value), values)
        return values

    def items(self) -> List[Tuple[Any, Any]]:
        items: List[Tuple[Any, Any]] = []
        self.for_each(lambda key, value, out: out.append((key, value)), items)
        return items

    def destroy(self):
        """
        Release every owned key and drop all storage.

        Values are left alone. Calling destroy again is a no-op; any other
        operation afterwards raises GMapError.
        """
        if self._table is None:
            return

        for i, chain in enumerate(self._table):
            curr = chain
            while curr is not None:
                self._destroy(curr.key)
                following = curr.next
                curr.next = None
                curr = following
            self._table[i] = None

        self._table = None
        self._size = 0
        self._capacity = 0

    @property
    def destroyed(self) -> bool:
        return self._table is None

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __enter__(self) -> 'GMap':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.destroy()
        return False

    def __repr__(self) -> str:
        if self._table is None:
            return "GMap(destroyed)"
        return f"GMap(size={self._size}, capacity={self._capacity})"


def gmap_size(m: Optional[GMap]) -> int:
    """Return the size of m, or 0 if m is None."""
    if m is None:
        return 0
    return m.size()


def gmap_destroy(m: Optional[GMap]):
    """Destroy m if it is not None."""
    if m is not None:
        m.destroy()
