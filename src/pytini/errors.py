# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:40:07
# @Author : Kariko Lin

class IniFileError(OSError):
    """Raised when an INI file could not be read or written.

    Wraps the underlying `OSError` (see `__cause__`), keeping its `errno`,
    so callers may still catch it as an `OSError`.
    """
    def __init__(
        self, path: str, reason: str, errno: int | None = None
    ) -> None:
        if errno is None:
            # e.g. undecodable content, no OS level error at all.
            super().__init__(f'{path}: {reason}')
        else:
            super().__init__(errno, reason, path)
        self.path = path
        self.reason = reason
