# -*- encoding: utf-8 -*-
# @File   : builder.py
# @Time   : 2024/10/12 15:48:20
# @Author : Kariko Lin

from collections.abc import Iterable
from typing import Self

from .model import Ini, IniSection


class IniBuilder:
    """Constructs an `Ini` in code, section by section.

        ```python
        ini = (IniBuilder()
               .section('floats').item_vec('consts', [3.1416, 2.7183])
               .section('integers').item('answer', 42)
               .build())
        ```

    Chaining is optional; every call just mutates the document.
    Declaring a section again goes back to the existing one.
    """

    def __init__(self, base: Ini | None = None) -> None:
        self._ini = Ini() if base is None else base
        self._cursor = ''

    @property
    def cursor(self) -> str:
        """Name of the section that `item()` currently writes to."""
        return self._cursor

    @property
    def current(self) -> IniSection | None:
        """The section under the cursor, `None` before anything is written."""
        return self._ini.get(self._cursor)

    def section(self, name: str) -> Self:
        self._cursor = name
        # like a parsed header, recorded even if no item follows.
        self._ini.add_section(name)
        return self

    def item(self, key: str, value: object) -> Self:
        self._ini.set(self._cursor, key, str(value))
        return self

    def item_vec(
        self, key: str, values: Iterable[object], sep: str = ', '
    ) -> Self:
        """Store `values` as one list value joined by `sep`.

        Note: separators inside the values are NOT escaped.
        Pick a `sep` that none of the values contain.
        """
        return self.item(key, sep.join(str(v) for v in values))

    def build(self) -> Ini:
        return self._ini
