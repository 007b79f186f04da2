"""Behavioral word-addressable memory model."""

from .config import MemoryConfig
from .constants import READ_SENTINEL
from .errors import (
    HexFileNotFoundError,
    MemoryAccessError,
    MemoryModelError,
    OutOfBoundsError,
    UnalignedAddressError,
)
from .hardware.addressing import AddressMode, Resolution, resolve_address
from .hardware.memory import WordMemory

__all__ = [
    "AddressMode",
    "HexFileNotFoundError",
    "MemoryAccessError",
    "MemoryConfig",
    "MemoryModelError",
    "OutOfBoundsError",
    "READ_SENTINEL",
    "Resolution",
    "UnalignedAddressError",
    "WordMemory",
    "resolve_address",
]
