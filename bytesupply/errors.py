# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Errors surfaced by byte-supply buffers.

Both families are terminal for the value being generated: buffers never retry,
backfill or substitute bytes. Callers that want to continue must `reset` and
restart generation of the current value.
"""

from __future__ import annotations


class ByteSupplyError(Exception):
    """Base class for bytesupply errors."""


class ConstructionError(ByteSupplyError):
    """Raised when a buffer cannot be built from its input."""


class EmptyInputError(ConstructionError):
    """Raised when a cyclic buffer is requested over zero bytes."""


class ShiftFailureError(ConstructionError):
    """Raised when a shift cannot be satisfied for want of room.

    Reserved: no current buffer strategy raises it.
    """


class InsufficientBytesError(ByteSupplyError):
    """Raised when a bounded buffer has too few bytes left for a request."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"insufficient bytes: requested {requested}, {available} available"
        )
        self.requested = requested
        self.available = available
