# -*- encoding: utf-8 -*-
# @File   : handler.py
# @Time   : 2024/10/12 16:20:41
# @Author : Kariko Lin

"""File IO of INIs. The models never touch files,
they get a whole decoded text and give back a whole text.
"""

import logging
from collections.abc import Iterable
from io import TextIOBase
from os import PathLike

from chardet import detect as guess_codec

from ..abstract import FileHandler
from ..errors import IniFileError
from .model import ErrorSink, Ini


class IniFileHandler(FileHandler[Ini]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase | Iterable[str], on_error: ErrorSink | None = None
    ) -> Ini:
        """Parse an already decoded text stream.

        If nothing special, just call `self.read()`.
        """
        return Ini.from_lines(buf, on_error)

    @staticmethod
    def _decode_file(filename: str) -> str:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = guess_codec(raw)
        if not codec['encoding'] or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            pass
        try:
            return raw.decode('gbk')
        except UnicodeDecodeError as e:
            raise IniFileError(filename, 'unable to decode') from e

    def _read_text(self) -> str:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return fp.read()
        except UnicodeDecodeError:
            logging.debug(f'{self._fn} is not {self._codec}, guessing codec')
            return self._decode_file(self._fn)

    def read(self, on_error: ErrorSink | None = None) -> Ini:
        """Read the INI file this handler points to.

        Raises:
            IniFileError: when the file is missing, not readable,
                or could not be decoded at all.
        """
        logging.debug(f'reading INI: {self._fn}')
        try:
            text = self._read_text()
        except IniFileError:
            raise
        except OSError as e:
            raise IniFileError(
                self._fn, e.strerror or str(e), e.errno) from e
        return Ini.from_buffer(text, on_error)

    def write(self, instance: Ini) -> None:
        """Save as *one* INI file, overwriting it if exists."""
        logging.debug(f'writing INI: {self._fn}')
        try:
            with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
                fp.write(instance.to_buffer())
        except OSError as e:
            raise IniFileError(
                self._fn, e.strerror or str(e), e.errno) from e

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'
