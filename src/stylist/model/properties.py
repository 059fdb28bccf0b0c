"""Ordered property collection with override, rename and compaction."""

from __future__ import annotations

from typing import Callable, Iterator, Mapping, Sequence

from stylist.model.value import Value, of, same

NameMapping = Callable[[Value], object] | Mapping[str, str]


class Properties:
    """Ordered ``(name, value)`` entries, unique by canonical name text.

    Order is emission order. Setting an existing name replaces its value in
    place; a new name is appended.
    """

    def __init__(self) -> None:
        self._names: list[Value] = []
        self._values: list[Value] = []

    # --- lookup ---------------------------------------------------------------

    def _index(self, name: object) -> int:
        key = of(name).render()
        for i, existing in enumerate(self._names):
            if existing.render() == key:
                return i
        return -1

    def get(self, name: object) -> Value | None:
        index = self._index(name)
        return None if index == -1 else self._values[index]

    def contains(self, name: object, value: object) -> bool:
        """Return True if *name* is present with the same canonical value."""
        index = self._index(name)
        return index != -1 and same(self._values[index], of(value))

    def __contains__(self, name: object) -> bool:
        return self._index(name) != -1

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[tuple[Value, Value]]:
        return iter(list(zip(self._names, self._values)))

    def name(self, index: int) -> Value:
        return self._names[index]

    def value(self, index: int) -> Value:
        return self._values[index]

    def names(self) -> list[Value]:
        return list(self._names)

    def values(self) -> list[Value]:
        return list(self._values)

    # --- mutation -------------------------------------------------------------

    def set(self, name: object, value: object) -> Properties:
        """Replace the value of *name* in place, or append a new entry."""
        name, value = of(name), of(value)
        index = self._index(name)
        if index == -1:
            self._names.append(name)
            self._values.append(value)
        else:
            # a newly declared name may carry different vendor targets
            self._names[index] = name
            self._values[index] = value
        return self

    def remove(self, name: object) -> Value | None:
        """Remove *name* and return its value, or None if it was absent."""
        index = self._index(name)
        if index == -1:
            return None
        del self._names[index]
        return self._values.pop(index)

    def clear(self) -> None:
        self._names.clear()
        self._values.clear()

    def rename(self, mapping: NameMapping) -> Properties:
        """Rename every entry through *mapping*.

        *mapping* is either a callable receiving the name value or a dict of
        canonical names. When two entries collide on a new name, the later
        value wins and the earlier position is kept.
        """
        if isinstance(mapping, Mapping):
            table = mapping

            def mapping(name: Value) -> object:
                text = name.render()
                return table.get(text, name) if text is not None else name

        entries = list(zip(self._names, self._values))
        self.clear()
        for name, value in entries:
            self.set(of(mapping(name)), value)
        return self

    def revalue(self, name: object, mapping: Mapping[str, object]) -> Properties:
        """Replace the value of *name* when its canonical text is in *mapping*."""
        index = self._index(name)
        if index != -1:
            text = self._values[index].render()
            if text in mapping:
                self._values[index] = of(mapping[text])
        return self

    def compact_to(self, target: object, default: object, sources: Sequence[object]) -> Properties:
        """Fold *sources* into a single *target* entry when they all agree.

        All sources present with equal values: they are removed and *target*
        takes the position of the first one. Any source missing or differing:
        nothing changes. *default* never creates an entry by itself.

        When *target* is already present it keeps its own position and takes
        the folded value, so names stay unique.
        """
        indexes = [self._index(source) for source in sources]
        if not indexes or -1 in indexes:
            return self

        first = self._values[indexes[0]]
        if not all(same(self._values[i], first) for i in indexes[1:]):
            return self

        position = min(indexes)
        for i in sorted(indexes, reverse=True):
            del self._names[i]
            del self._values[i]

        target = of(target)
        existing = self._index(target)
        if existing != -1:
            self._values[existing] = first
        else:
            self._names.insert(position, target)
            self._values.insert(position, first)
        return self

    def copy(self) -> Properties:
        clone = Properties()
        clone._names = list(self._names)
        clone._values = list(self._values)
        return clone

    def __repr__(self) -> str:
        body = ", ".join(f"{n}={v}" for n, v in zip(self._names, self._values))
        return f"Properties[{body}]"
