# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Byte-supply contract shared by every buffer strategy.

Decoders consume an `Unstructured` source through five hooks:

  - `fill`: copy exactly `len(out)` bytes into `out` and advance the cursor.
  - `size_hint`: decode an integer through `fill` and bound it by the
    container size limit.
  - `reset`: return the cursor to the start of the window.
  - `skip`: advance the cursor without copying.
  - `shrink`: halve the logical window and return its new length.

Strategies differ only in what happens at the end of the window (see
`FiniteBuffer` and `RingBuffer`). Instances are single-owner and not
thread-safe; build one per generation pass.
"""

from __future__ import annotations

from typing import TypeVar, Union

# Width of the unsigned integer decoded by `size_hint`.
USIZE_BYTES = 8

BytesLike = Union[bytes, bytearray, memoryview]

_U = TypeVar("_U", bound="Unstructured")


def _as_region(region: BytesLike) -> memoryview:
    """Return a read-only byte view over `region` without copying it."""
    if not isinstance(region, (bytes, bytearray, memoryview)):
        raise TypeError(f"backing region must be bytes-like, got {type(region).__name__}")
    return memoryview(region).cast("B").toreadonly()


def decode_usize(source: Unstructured) -> int:
    """Decode an unsigned machine-width integer (little-endian) from `source`."""
    raw = bytearray(USIZE_BYTES)
    source.fill(raw)
    return int.from_bytes(raw, "little")


class Unstructured:
    """Base byte supply over a borrowed backing region.

    Subclasses implement `fill`, `skip`, `reset` and `shrink`; construction,
    the size-limit builder and `size_hint` are shared.
    """

    def __init__(self, region: BytesLike):
        self._region = _as_region(region)
        self._offset = 0
        self._virtual_len = len(self._region)
        self._container_size_limit = len(self._region)

    @classmethod
    def from_bytes(cls: type[_U], region: BytesLike) -> _U:
        """Build a buffer over `region`.

        Raises:
            ConstructionError: If the strategy cannot be built from `region`.
        """
        return cls(region)

    def with_container_size_limit(self: _U, limit: int) -> _U:
        """Override the size limit used by `size_hint` and return self."""
        if limit <= 0:
            raise ValueError("container size limit must be positive")
        self._container_size_limit = limit
        return self

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def virtual_len(self) -> int:
        return self._virtual_len

    @property
    def container_size_limit(self) -> int:
        return self._container_size_limit

    def fill(self, out: bytearray | memoryview) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def skip(self, total: int) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def reset(self) -> None:  # pragma: no cover - base hook
        raise NotImplementedError

    def shrink(self) -> int:  # pragma: no cover - base hook
        raise NotImplementedError

    def read(self, size: int) -> bytes:
        """Return `size` bytes pulled through `fill`."""
        if size < 0:
            raise ValueError("size must be non-negative")
        out = bytearray(size)
        self.fill(out)
        return bytes(out)

    def size_hint(self) -> int:
        """Return a container size in `[0, container_size_limit)`.

        The value is a decoded integer reduced modulo the limit, so this call
        consumes bytes and fails exactly like `fill`.
        """
        # Decode-then-modulo follows the upstream generator; whether it is the
        # intended size semantics is still unsettled.
        return decode_usize(self) % self._container_size_limit
