# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial

"""Byte-supply buffers for fuzz-driven value generation."""

from .errors import (
    ByteSupplyError,
    ConstructionError,
    EmptyInputError,
    InsufficientBytesError,
    ShiftFailureError,
)
from .finite import FiniteBuffer
from .ring import RingBuffer
from .unstructured import USIZE_BYTES, Unstructured, decode_usize

__all__ = [
    "ByteSupplyError",
    "ConstructionError",
    "EmptyInputError",
    "FiniteBuffer",
    "InsufficientBytesError",
    "RingBuffer",
    "ShiftFailureError",
    "USIZE_BYTES",
    "Unstructured",
    "decode_usize",
]
