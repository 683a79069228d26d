"""Splitting text on a single delimiter, skipping empty fields."""

from __future__ import annotations

from typing import AnyStr, Generic


class StringSplitter(Generic[AnyStr]):
    """Iterate over the non-empty fields of ``text`` separated by ``delimiter``."""

    def __init__(self, text: AnyStr, delimiter: AnyStr) -> None:
        if len(delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
        self._text = text
        self._delimiter = delimiter
        self._pos = 0

    def __iter__(self) -> StringSplitter[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        text = self._text
        end = len(text)
        while self._pos < end:
            start = self._pos
            stop = text.find(self._delimiter, start)
            if stop == -1:
                stop = end
                self._pos = end
            else:
                self._pos = stop + 1
            if stop > start:
                return text[start:stop]
        raise StopIteration