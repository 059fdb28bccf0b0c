"""Identity registry: short, stable names for anonymous style descriptions."""

from __future__ import annotations

import itertools
import threading

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def encode(number: int) -> str:
    """Encode *number* in base 52, least significant digit first.

    Zero encodes to the first letter instead of an empty string.
    """
    if number == 0:
        return ALPHABET[0]
    base = len(ALPHABET)
    digits = []
    while number:
        number, digit = divmod(number, base)
        digits.append(ALPHABET[digit])
    return "".join(digits)


class IdentityRegistry:
    """Maps objects, by identity, to names assigned on first lookup.

    Lookups are protected by a lock so concurrent first use of the same
    object assigns exactly one name. Registered objects are kept alive so
    their ``id()`` can never be reused by another object.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = itertools.count()
        self._names: dict[int, tuple[object, str]] = {}

    def name_of(self, obj: object) -> str:
        key = id(obj)
        with self._lock:
            entry = self._names.get(key)
            if entry is None:
                entry = (obj, encode(next(self._counter)))
                self._names[key] = entry
            return entry[1]

    def objects(self) -> list[object]:
        """Return registered objects in assignment order."""
        with self._lock:
            return [obj for obj, _ in self._names.values()]

    def __contains__(self, obj: object) -> bool:
        with self._lock:
            return id(obj) in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)


REGISTRY = IdentityRegistry()


def name_of(obj: object) -> str:
    """Return the process-wide name for *obj*."""
    return REGISTRY.name_of(obj)
