# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Bounded byte supply: a one-shot window that stays exhausted once consumed."""

from __future__ import annotations

import logging

from .errors import InsufficientBytesError
from .unstructured import BytesLike, Unstructured

logger = logging.getLogger(__name__)


class FiniteBuffer(Unstructured):
    """Finite source of unstructured data.

    Bytes are copied strictly from `[offset, offset + n)` of the logical
    window. Once the window is consumed every further request fails until
    `reset`. `shrink` only pulls in the logical end of the window, and its
    effect survives `reset`. An empty region is accepted and is exhausted
    from the start.
    """

    def __init__(self, region: BytesLike):
        super().__init__(region)
        logger.debug("finite buffer over %d bytes", self._virtual_len)

    @property
    def remaining(self) -> int:
        """Bytes left in the logical window."""
        return max(self._virtual_len - self._offset, 0)

    def fill(self, out: bytearray | memoryview) -> None:
        """Copy `len(out)` bytes from the window into `out`.

        Raises:
            InsufficientBytesError: If fewer than `len(out)` bytes remain; the
                cursor is left untouched.
        """
        size = len(out)
        if self.remaining < size:
            raise InsufficientBytesError(size, self.remaining)
        end = self._offset + size
        out[:] = self._region[self._offset : end]
        self._offset = end

    def skip(self, total: int) -> None:
        """Advance the cursor by `total` bytes without copying."""
        if total < 0:
            raise ValueError("skip length must be non-negative")
        if self.remaining < total:
            raise InsufficientBytesError(total, self.remaining)
        self._offset += total

    def reset(self) -> None:
        """Rewind to the start; the shrunk window length is kept."""
        self._offset = 0
        logger.debug("finite buffer reset (virtual_len=%d)", self._virtual_len)

    def shrink(self) -> int:
        """Halve the logical window and return its new length."""
        self._virtual_len //= 2
        logger.debug("finite buffer shrunk to %d bytes", self._virtual_len)
        return self._virtual_len
