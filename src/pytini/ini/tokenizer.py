# -*- encoding: utf-8 -*-
# @File   : tokenizer.py
# @Time   : 2024/10/12 01:17:33
# @Author : Kariko Lin

"""Splits list values like `1, 2, 3\\,4` into tokens.

A backslash escapes whatever follows it, separators included.
Escapes are NOT unescaped here: `3\\,4` comes out as is,
and it's up to the converter to deal with it.
"""

from collections.abc import Iterator

SEPARATOR = ','
ESCAPE = '\\'


class Tokenizer:
    """Lazy token sequence of a list value.

    Iterating twice walks the string twice, each from the beginning.

    ```python
    >>> list(Tokenizer('1,,2,'))
    ['1', '', '2']
    ```
    """

    def __init__(self, string: str, separator: str = SEPARATOR) -> None:
        if len(separator) != 1:
            raise ValueError(
                f'separator should be a single character, got {separator!r}')
        self.string = string
        self.separator = separator

    def __iter__(self) -> Iterator[str]:
        s, sep = self.string, self.separator
        start = i = 0
        while i < len(s):
            if s[i] == ESCAPE:
                # a lone backslash at the tail escapes nothing.
                i += 2
                continue
            if s[i] == sep:
                yield s[start:i].strip()
                start = i + 1
            i += 1
        # trailing separator gives no trailing empty token.
        if start < len(s):
            yield s[start:].strip()

    def __repr__(self) -> str:
        return f'Tokenizer({self.string!r}, {self.separator!r})'


def tokenize(string: str, separator: str = SEPARATOR) -> list[str]:
    return list(Tokenizer(string, separator))
