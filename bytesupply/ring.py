# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Wrapping byte supply: the window repeats forever.

A ring buffer turns a finite input into an infinite amount of
not-very-random data. The first `virtual_len` bytes of the region are read
as a cycle; `shrink` shortens the cycle and `reset` restores the full one.
"""

from __future__ import annotations

import logging

from .errors import EmptyInputError
from .unstructured import BytesLike, Unstructured

logger = logging.getLogger(__name__)


class RingBuffer(Unstructured):
    """Cyclic source of unstructured data that never exhausts."""

    def __init__(self, region: BytesLike):
        super().__init__(region)
        if not self._virtual_len:
            raise EmptyInputError("cannot build a ring buffer over an empty region")
        logger.debug("ring buffer over %d bytes", self._virtual_len)

    def fill(self, out: bytearray | memoryview) -> None:
        """Copy `len(out)` bytes into `out`, wrapping at the window end."""
        size = len(out)
        window = self._region[: self._virtual_len]
        pos = 0
        cursor = self._offset
        while pos < size:
            chunk = min(self._virtual_len - cursor, size - pos)
            out[pos : pos + chunk] = window[cursor : cursor + chunk]
            pos += chunk
            cursor = 0
        self._offset = (self._offset + size) % self._virtual_len

    def skip(self, total: int) -> None:
        """Advance the cursor by `total` bytes modulo the window length."""
        if total < 0:
            raise ValueError("skip length must be non-negative")
        self._offset = (self._offset + total) % self._virtual_len

    def reset(self) -> None:
        """Rewind to the start and restore the full window."""
        self._offset = 0
        self._virtual_len = len(self._region)
        logger.debug("ring buffer reset (virtual_len=%d)", self._virtual_len)

    def shrink(self) -> int:
        """Halve the cycle length and return it.

        The cycle never drops below one byte. The cursor is folded into the
        new cycle.
        """
        self._virtual_len = max(self._virtual_len // 2, 1)
        self._offset %= self._virtual_len
        logger.debug("ring buffer shrunk to %d bytes", self._virtual_len)
        return self._virtual_len
