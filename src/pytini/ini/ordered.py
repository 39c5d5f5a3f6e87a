# -*- encoding: utf-8 -*-
# @File   : ordered.py
# @Time   : 2024/10/11 23:02:48
# @Author : Kariko Lin

"""An insertion ordered hash map.

Yes, `dict` keeps insertion order since 3.7. But an INI round trip
relies on it *hard*, so the order is kept explicitly here:

- `__index` maps a key to its slot number,
- `__keys` and `__values` are append-only arrays, one slot per key.

A slot never moves once assigned, so re-setting a key
(or assigning through `iter_mut()`) never reorders anything.
There is no deletion, since INI documents here only grow.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import overload


class OrderedHashMap[K, V](Mapping[K, V]):
    """Hashed lookup, insertion ordered iteration.

    `__setitem__` is an upsert: a new key goes to the tail,
    an existing key keeps its slot and only gets the value replaced.
    """

    def __init__(
        self, pairs: Mapping[K, V] | Iterable[tuple[K, V]] | None = None
    ) -> None:
        self.__index: dict[K, int] = {}
        self.__keys: list[K] = []
        self.__values: list[V] = []
        if pairs:
            self.update(pairs)

    # slot level helpers, shared with `Entry`.
    def _slot(self, key: K) -> int | None:
        return self.__index.get(key)

    def _append(self, key: K, value: V) -> int:
        slot = len(self.__keys)
        self.__index[key] = slot
        self.__keys.append(key)
        self.__values.append(value)
        return slot

    def _load(self, slot: int) -> V:
        return self.__values[slot]

    def _store(self, slot: int, value: V) -> V:
        old, self.__values[slot] = self.__values[slot], value
        return old

    def __getitem__(self, key: K) -> V:
        try:
            return self.__values[self.__index[key]]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(self, key: K, value: V) -> None:
        self.insert(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.__index

    def __len__(self) -> int:
        return len(self.__keys)

    def __iter__(self) -> Iterator[K]:
        return iter(self.__keys)

    def __repr__(self) -> str:
        return '%s(%r)' % (type(self).__name__, dict(self.iter()))

    def insert(self, key: K, value: V) -> V | None:
        """Upsert `key`.

        Returns:
            The replaced value, or `None` if `key` is new.
        """
        if (slot := self.__index.get(key)) is not None:
            return self._store(slot, value)
        self._append(key, value)
        return None

    def entry(self, key: K) -> 'Entry[K, V]':
        """Get a handle to the slot of `key`, which may not exist yet."""
        return Entry(self, key)

    def setdefault(self, key: K, default: V) -> V:
        return self.entry(key).or_insert(default)

    def update(self, pairs: Mapping[K, V] | Iterable[tuple[K, V]]) -> None:
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for k, v in items:
            self.insert(k, v)

    def iter(self) -> Iterator[tuple[K, V]]:
        """Walk `(key, value)` pairs in insertion order.

        Each call starts over from the very first key.
        """
        for k in self.__keys:
            yield k, self.__values[self.__index[k]]

    def iter_mut(self) -> Iterator[tuple[K, 'Entry[K, V]']]:
        """Like `iter()`, but yields writable handles instead of values.

        Assigning `handle.value` replaces the value in place,
        the order is untouched.
        """
        for k in self.__keys:
            yield k, Entry(self, k)


class Entry[K, V]:
    """A handle bound to one key of an `OrderedHashMap`.

    A vacant entry takes no slot until `or_insert()`, `or_insert_with()`
    or a `value` assignment, then it is appended exactly once.
    """

    def __init__(self, owner: OrderedHashMap[K, V], key: K) -> None:
        self._owner = owner
        self.key = key

    @property
    def occupied(self) -> bool:
        return self._owner._slot(self.key) is not None

    @property
    def value(self) -> V:
        if (slot := self._owner._slot(self.key)) is None:
            raise KeyError(self.key)
        return self._owner._load(slot)

    @value.setter
    def value(self, value: V) -> None:
        if (slot := self._owner._slot(self.key)) is None:
            self._owner._append(self.key, value)
        else:
            self._owner._store(slot, value)

    @overload
    def get(self) -> V | None: ...
    @overload
    def get(self, default: V) -> V: ...

    def get(self, default: V | None = None) -> V | None:
        if (slot := self._owner._slot(self.key)) is None:
            return default
        return self._owner._load(slot)

    def or_insert(self, default: V) -> V:
        if (slot := self._owner._slot(self.key)) is None:
            slot = self._owner._append(self.key, default)
        return self._owner._load(slot)

    def or_insert_with(self, factory: Callable[[], V]) -> V:
        """Same as `or_insert()`, but `factory` only gets called
        if the key is vacant."""
        if (slot := self._owner._slot(self.key)) is None:
            slot = self._owner._append(self.key, factory())
        return self._owner._load(slot)

    def __repr__(self) -> str:
        state = 'occupied' if self.occupied else 'vacant'
        return f'Entry({self.key!r}, {state})'
