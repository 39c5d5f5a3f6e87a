# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/12 00:31:52
# @Author : Kariko Lin

"""Line level INI grammar. Each line is one of:

    ```ini
    ; comment, or blank line
    [section]
    key = value  ; trailing comments are fine
    ```

Anything else is malformed. `parse_line()` only classifies,
folding the lines into a document is `model.Ini`'s job.
"""

from dataclasses import dataclass

COMMENT = ';'
PAIRING = '='


@dataclass(frozen=True, slots=True)
class Empty:
    """Blank line, or a line with comment only."""


@dataclass(frozen=True, slots=True)
class SectionHeader:
    name: str


@dataclass(frozen=True, slots=True)
class KeyValue:
    key: str
    value: str


@dataclass(frozen=True, slots=True)
class Malformed:
    message: str


type ParsedLine = Empty | SectionHeader | KeyValue | Malformed


def parse_line(line: str) -> ParsedLine:
    # no escape for ';', it always starts a comment.
    content = line.split(COMMENT, 1)[0].strip()
    if not content:
        return Empty()

    if content[0] == '[':
        if content[-1] != ']':
            return Malformed('incorrect section syntax')
        # `[]` is valid, and names the "" section.
        return SectionHeader(content.strip('[]').strip())

    if PAIRING in content:
        key, val = content.split(PAIRING, 1)
        if not (key := key.strip()):
            return Malformed('empty key')
        return KeyValue(key, val.strip())

    return Malformed('incorrect syntax')
