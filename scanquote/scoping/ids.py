"""IdSequence — per-run line item id counter."""

from __future__ import annotations

from scanquote.config import LINE_ITEM_ID_PREFIX


class IdSequence:
    """Sequential ``li-1``, ``li-2``, ... ids.

    One instance belongs to one generation run.  Reset it (or build a new
    one) to reproduce the same ids for the same input.
    """

    def __init__(self, start: int = 0, prefix: str = LINE_ITEM_ID_PREFIX) -> None:
        self._start = start
        self._value = start
        self.prefix = prefix

    def next(self) -> str:
        self._value += 1
        return f"{self.prefix}{self._value}"

    def reset(self) -> None:
        self._value = self._start

    @property
    def issued(self) -> int:
        """Number of ids handed out since the last reset."""
        return self._value - self._start
