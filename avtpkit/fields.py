"""Bit-field access to big-endian AVTP headers laid out in 32-bit quadlets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Mapping, Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


class FieldError(ValueError):
    """Raised when a field cannot be read from or written to a buffer."""


@dataclass(frozen=True)
class FieldDescriptor:
    """Position of a header field: quadlet index, bit offset within it, width."""

    quadlet: int
    offset: int
    bits: int

    @property
    def is_valid(self) -> bool:
        return self.bits <= 64 and self.offset <= 31

    @property
    def quadlet_count(self) -> int:
        """Number of quadlets the field touches."""
        if self.bits == 0:
            return 0
        return (self.offset + self.bits + 31) // 32


def _lookup(descriptors: Mapping[int, FieldDescriptor], field: int) -> FieldDescriptor:
    try:
        descriptor = descriptors[field]
    except (KeyError, TypeError):
        raise FieldError(f"unknown field {field!r}") from None
    if not descriptor.is_valid:
        raise FieldError(f"invalid descriptor for field {field!r}: {descriptor}")
    return descriptor


def _window(descriptor: FieldDescriptor, data: Buffer, field: int) -> tuple[int, int]:
    start = descriptor.quadlet * 4
    end = start + descriptor.quadlet_count * 4
    if len(data) < end:
        raise FieldError(
            f"buffer of {len(data)} bytes is too short for field {field!r} "
            f"(needs {end})"
        )
    return start, end


def get_field(descriptors: Mapping[int, FieldDescriptor], data: Buffer, field: int) -> int:
    """Return the unsigned value of ``field`` read from ``data``."""
    descriptor = _lookup(descriptors, field)
    if descriptor.bits == 0:
        return 0
    start, end = _window(descriptor, data, field)
    word = int.from_bytes(bytes(data[start:end]), "big")
    shift = (end - start) * 8 - descriptor.offset - descriptor.bits
    return (word >> shift) & ((1 << descriptor.bits) - 1)


def set_field(
    descriptors: Mapping[int, FieldDescriptor], data: Buffer, field: int, value: int
) -> None:
    """Write ``value`` into ``field`` of the mutable buffer ``data``.

    Bits of ``value`` beyond the field width are dropped; neighbouring
    fields are left untouched.
    """
    descriptor = _lookup(descriptors, field)
    if descriptor.bits == 0:
        return
    start, end = _window(descriptor, data, field)
    width = (end - start) * 8
    shift = width - descriptor.offset - descriptor.bits
    mask = ((1 << descriptor.bits) - 1) << shift
    word = int.from_bytes(bytes(data[start:end]), "big")
    word = (word & ~mask) | ((int(value) << shift) & mask)
    data[start:end] = word.to_bytes(end - start, "big")


class Pdu:
    """A header over a byte buffer, with fields addressed by enum members.

    Subclasses set ``DESCRIPTORS`` and ``SIZE`` (header length in bytes) and
    may override ``_initialize`` to fill in defaults for a fresh header.
    """

    DESCRIPTORS: ClassVar[Mapping[int, FieldDescriptor]] = {}
    SIZE: ClassVar[int] = 0

    def __init__(self, data: Optional[Buffer] = None) -> None:
        if data is None:
            self.data: Union[bytearray, memoryview] = bytearray(self.SIZE)
            self._initialize()
            return
        if isinstance(data, (bytearray, memoryview)):
            self.data = data
        else:
            self.data = bytearray(data)
        if len(self.data) < self.SIZE:
            raise FieldError(
                f"{type(self).__name__} needs at least {self.SIZE} bytes, "
                f"got {len(self.data)}"
            )

    def _initialize(self) -> None:
        """Fill in the defaults of a freshly zeroed header."""

    def get(self, field: int) -> int:
        return get_field(self.DESCRIPTORS, self.data, field)

    def set(self, field: int, value: int) -> None:
        set_field(self.DESCRIPTORS, self.data, field, value)

    @property
    def payload(self) -> memoryview:
        """Writable view of the bytes that follow the header."""
        return memoryview(self.data)[self.SIZE:]

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self.data)!r})"