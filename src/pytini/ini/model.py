# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 02:05:16
# @Author : Kariko Lin

"""
INI document structure, basically an ordered dict of ordered dicts.

Values are always kept as raw (trimmed) strings.
Conversions happen only when you `get()` them.
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from os import PathLike
from typing import TypeVar

from .ordered import Entry, OrderedHashMap
from .parser import Empty, KeyValue, Malformed, SectionHeader, parse_line
from .tokenizer import SEPARATOR, Tokenizer

T = TypeVar('T')

# (0-based line number, reason)
type ErrorSink = Callable[[int, str], None]


def _log_malformed(lineno: int, message: str) -> None:
    logging.warning(f'line {lineno}: error: {message}')


def parse_bool(raw: str) -> bool:
    """`bool('false')` is `True`, so we couldn't take `bool` as is."""
    match raw.strip().lower():
        case 'true':
            return True
        case 'false':
            return False
    raise ValueError(f'invalid literal for bool: {raw!r}')


# returned by `_convert()` on failure, since `None` may be a converted value.
_FAILED = object()


def _convert(raw: str, converter: Callable[[str], T]) -> T | object:
    if converter is bool:
        converter = parse_bool  # type: ignore[assignment]
    try:
        return converter(raw)
    except (ValueError, TypeError, ArithmeticError):
        # ArithmeticError: `Decimal` and `Fraction` fail with it.
        return _FAILED


class IniSection(OrderedHashMap[str, str]):
    """... is an ordered `key: value` dict of one INI section.

    Re-setting a key replaces its value *in place*,
    i.e. the key stays where it was first defined.
    """

    def __str__(self) -> str:
        return '\n'.join(f'{k}{Ini.PAIRING}{v}' for k, v in self.iter())


class Ini(Mapping[str, IniSection]):
    """... is simply an ordered group of `IniSection`,
    representing a whole INI file.

        ```ini
        orphan = 1  ; goes to the "" section, since no header yet.

        [search]
        g = google.com
        dd = duckduckgo.com
        ```

    Sections (and keys) are iterated in the order they first appeared.
    """
    PAIRING = ' = '

    def __init__(self) -> None:
        self.__raw: OrderedHashMap[str, IniSection] = OrderedHashMap()

    # --- reading ---

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], on_error: ErrorSink | None = None
    ) -> 'Ini':
        """Fold text lines into a new document.

        Malformed lines are reported to `on_error` (or logged
        as warnings if not given) and then skipped.
        """
        sink = _log_malformed if on_error is None else on_error
        ret = cls()
        cursor = ''
        for lineno, line in enumerate(lines):
            match parse_line(line):
                case SectionHeader(name):
                    cursor = name
                    ret.add_section(name)
                case KeyValue(key, value):
                    ret.set(cursor, key, value)
                case Malformed(message):
                    sink(lineno, message)
                case Empty():
                    pass
        return ret

    @classmethod
    def from_buffer(
        cls, buf: str, on_error: ErrorSink | None = None
    ) -> 'Ini':
        # only `\n` (or `\r\n`) ends a line, `\x0c` and friends are value text.
        return cls.from_lines(
            (ln.removesuffix('\r') for ln in buf.split('\n')), on_error)

    @classmethod
    def from_file(
        cls, path: str | PathLike[str], encoding: str | None = None
    ) -> 'Ini':
        """Shortcut of `IniFileHandler(path, encoding).read()`.

        Raises:
            IniFileError: the file is missing, unreadable or undecodable.
        """
        from .handler import IniFileHandler
        return IniFileHandler(path, encoding).read()

    # --- mapping protocol ---

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __repr__(self) -> str:
        return 'Ini { .sections = %d }' % len(self)

    # --- building ---

    def add_section(self, name: str) -> IniSection:
        """Get section `name`, create an empty one if absent.

        An existing section keeps both its place and its pairs.
        """
        return self.__raw.entry(name).or_insert_with(IniSection)

    def set(self, section: str, key: str, value: str) -> str | None:
        """Upsert `key` into `section` (created if absent).

        Returns:
            The replaced raw value, if any.
        """
        return self.add_section(section).insert(key, value)

    def update(self, another: 'Ini') -> None:
        """To merge `another` into self.

        Pairs of `another` win, but sections and keys
        already in self keep their places.
        """
        for name, pairs in another.iter():
            self.add_section(name).update(pairs)

    # --- typed access ---

    def get_raw(self, section: str, key: str) -> str | None:
        if (sect := self.__raw.get(section)) is None:
            return None
        return sect.get(key)

    def get(  # type: ignore[override]
        self, section: str, key: str | None = None,
        converter: Callable[[str], T] = str  # type: ignore[assignment]
    ) -> T | IniSection | None:
        """Get a value converted by `converter`.

        Returns `None` if the section or key is missing,
        *or* the conversion failed. No way to tell them apart.

        Without `key`, acts like `dict.get()`: the section itself, or `None`.
        """
        if key is None:
            return self.__raw.get(section)
        if (raw := self.get_raw(section, key)) is None:
            return None
        val = _convert(raw, converter)
        return None if val is _FAILED else val  # type: ignore[return-value]

    def get_vec(
        self, section: str, key: str,
        converter: Callable[[str], T] = str,  # type: ignore[assignment]
        sep: str = SEPARATOR
    ) -> list[T] | None:
        """Split a value with `sep` (backslash escapable), then convert
        each token.

        Returns `None` if anything is missing, or *any* token
        fails to convert. Never a partial list.
        """
        if (raw := self.get_raw(section, key)) is None:
            return None
        ret: list[T] = []
        for token in Tokenizer(raw, sep):
            if (val := _convert(token, converter)) is _FAILED:
                return None
            ret.append(val)  # type: ignore[arg-type]
        return ret

    def get_or(
        self, section: str, key: str, default: T,
        converter: Callable[[str], T] | None = None
    ) -> T:
        """`get()` with a fallback. `converter` defaults to `type(default)`."""
        if converter is None:
            converter = str if default is None else type(default)
        val = self.get(section, key, converter)
        return default if val is None else val

    def get_vec_or(
        self, section: str, key: str, default: list[T],
        converter: Callable[[str], T] = str,  # type: ignore[assignment]
        sep: str = SEPARATOR
    ) -> list[T]:
        val = self.get_vec(section, key, converter, sep)
        return default if val is None else val

    # --- iterating ---

    def iter_section(
        self, section: str
    ) -> Iterator[tuple[str, str]] | None:
        if (sect := self.__raw.get(section)) is None:
            return None
        return sect.iter()

    def iter(self) -> Iterator[tuple[str, Iterator[tuple[str, str]]]]:
        """Yield `(section name, pairs iterator)` in order."""
        for name, sect in self.__raw.iter():
            yield name, sect.iter()

    def iter_mut(
        self
    ) -> Iterator[tuple[str, Iterator[tuple[str, Entry[str, str]]]]]:
        """Like `iter()`, but pairs come with writable handles:

            ```python
            for _, pairs in ini.iter_mut():
                for _, handle in pairs:
                    handle.value = handle.value.upper()
            ```
        """
        for name, sect in self.__raw.iter():
            yield name, sect.iter_mut()

    # --- writing ---

    def to_buffer(self) -> str:
        """Serialize as INI text.

        A blank line goes between sections, but not after the last one.
        """
        blocks = []
        for name, sect in self.__raw.iter():
            block = f'[{name}]'
            if sect:
                block += '\n' + str(sect)
            blocks.append(block)
        return '\n\n'.join(blocks)

    def to_file(
        self, path: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        from .handler import IniFileHandler
        IniFileHandler(path, encoding).write(self)

    def __str__(self) -> str:
        return self.to_buffer()
