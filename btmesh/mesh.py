"""Common Bluetooth Mesh values: TTLs, 24-bit counters, key and element indices."""
from __future__ import annotations

import string
from dataclasses import dataclass
from typing import ClassVar, Optional

TTL_MASK = 0x7F
NID_MASK = 0x7F
U24_MAX = (1 << 24) - 1
U32_MAX = 0xFFFF_FFFF
U16_MAX = 0xFFFF
U8_MAX = 0xFF
KEY_INDEX_MAX = (1 << 12) - 1
TRANSMIT_COUNT_MAX = 0b111
TRANSMIT_STEPS_MAX = (1 << 5) - 1


def _check(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} {value} is out of range 0..={maximum}")


def _int_from_bytes(data: bytes, size: int, byteorder: str) -> int:
    if len(data) != size:
        raise ValueError(f"expected {size} bytes, got {len(data)}")
    return int.from_bytes(bytes(data), byteorder)


@dataclass(frozen=True, order=True)
class TTL:
    """7-bit time to live."""

    value: int

    def __post_init__(self) -> None:
        _check("TTL", self.value, TTL_MASK)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"TTL({self.value})"

    def with_flag(self, flag: bool) -> int:
        """Return a byte with the TTL in the low 7 bits and `flag` in the top bit."""
        return self.value | (int(bool(flag)) << 7)

    @classmethod
    def new_with_flag(cls, v: int) -> tuple[TTL, bool]:
        """Split a byte into a 7-bit TTL and its top-bit flag."""
        return cls(v & TTL_MASK), bool(v & ~TTL_MASK & U8_MAX)

    @classmethod
    def from_masked_u8(cls, v: int) -> TTL:
        return cls(v & TTL_MASK)

    def should_relay(self) -> bool:
        return 2 <= self.value <= 127


@dataclass(frozen=True, order=True)
class NID:
    """7-bit network identifier (not the same as the Network ID)."""

    value: int

    def __post_init__(self) -> None:
        _check("NID", self.value, NID_MASK)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def with_flag(self, flag: bool) -> int:
        return self.value | (int(bool(flag)) << 7)

    @classmethod
    def new_with_flag(cls, v: int) -> tuple[NID, bool]:
        return cls(v & NID_MASK), bool(v & 0x80)

    @classmethod
    def from_masked_u8(cls, v: int) -> NID:
        return cls(v & NID_MASK)


@dataclass(frozen=True, order=True)
class U24:
    """24-bit unsigned integer."""

    value: int = 0

    def __post_init__(self) -> None:
        _check("U24", self.value, U24_MAX)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def new_masked(cls, v: int) -> U24:
        return cls(v & U24_MAX)

    @classmethod
    def max_value(cls) -> U24:
        return cls(U24_MAX)

    @classmethod
    def parse(cls, text: str) -> U24:
        """Parse a decimal string, raising ValueError if it is not a valid 24-bit value."""
        digits = text[1:] if text.startswith("+") else text
        if not digits or any(c not in string.digits for c in digits):
            raise ValueError(f"invalid U24 literal {text!r}")
        return cls(int(digits))

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(3, "little")

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(3, "big")

    @classmethod
    def from_bytes_le(cls, data: bytes) -> U24:
        return cls(_int_from_bytes(data, 3, "little"))

    @classmethod
    def from_bytes_be(cls, data: bytes) -> U24:
        return cls(_int_from_bytes(data, 3, "big"))

    def __add__(self, other: U24) -> U24:
        if not isinstance(other, U24):
            return NotImplemented
        return U24.new_masked(self.value + other.value)

    def __sub__(self, other: U24) -> U24:
        if not isinstance(other, U24):
            return NotImplemented
        return U24.new_masked(self.value - other.value)


@dataclass(frozen=True, order=True)
class IVIndex:
    """32-bit IV Index."""

    BYTE_LEN: ClassVar[int] = 4

    value: int = 0

    def __post_init__(self) -> None:
        _check("IVIndex", self.value, U32_MAX)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"IVIndex({self.value})"

    def ivi(self) -> bool:
        """The least significant bit of the index."""
        return self.value & 1 == 1

    def next(self) -> Optional[IVIndex]:
        return IVIndex(self.value + 1) if self.value < U32_MAX else None

    def prev(self) -> Optional[IVIndex]:
        return IVIndex(self.value - 1) if self.value > 0 else None

    def matching_flags(self, ivi: bool, update: bool) -> Optional[IVIndex]:
        """Return the index matching `ivi` given the IV update flag, or None if none exists."""
        if self.ivi() == bool(ivi):
            return self
        return self.next() if update else self.prev()

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(4, "little")

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(4, "big")

    @classmethod
    def from_bytes_le(cls, data: bytes) -> IVIndex:
        return cls(_int_from_bytes(data, 4, "little"))

    @classmethod
    def from_bytes_be(cls, data: bytes) -> IVIndex:
        return cls(_int_from_bytes(data, 4, "big"))


@dataclass(frozen=True, order=True)
class SequenceNumber:
    """24-bit sequence number sent with each network PDU."""

    value: int = 0

    def __post_init__(self) -> None:
        _check("SequenceNumber", self.value, U24_MAX)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"SequenceNumber({self.value})"

    def next(self) -> SequenceNumber:
        """The following sequence number; raises OverflowError at the 24-bit maximum."""
        if self.value >= U24_MAX:
            raise OverflowError("sequence number exhausted")
        return SequenceNumber(self.value + 1)

    def __add__(self, other: SequenceNumber) -> int:
        if not isinstance(other, SequenceNumber):
            return NotImplemented
        return (self.value + other.value) & U24_MAX

    def __sub__(self, other: SequenceNumber) -> int:
        if not isinstance(other, SequenceNumber):
            return NotImplemented
        return (self.value - other.value) & U24_MAX

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(3, "little")

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(3, "big")

    @classmethod
    def from_bytes_le(cls, data: bytes) -> SequenceNumber:
        return cls(_int_from_bytes(data, 3, "little"))

    @classmethod
    def from_bytes_be(cls, data: bytes) -> SequenceNumber:
        return cls(_int_from_bytes(data, 3, "big"))


@dataclass(frozen=True, order=True)
class ModelID:
    """16-bit model identifier."""

    BYTE_LEN: ClassVar[int] = 2

    value: int

    def __post_init__(self) -> None:
        _check("ModelID", self.value, U16_MAX)

    def __int__(self) -> int:
        return self.value

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(2, "little")

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(2, "big")

    @classmethod
    def from_bytes_le(cls, data: bytes) -> ModelID:
        return cls(_int_from_bytes(data, 2, "little"))

    @classmethod
    def from_bytes_be(cls, data: bytes) -> ModelID:
        return cls(_int_from_bytes(data, 2, "big"))


@dataclass(frozen=True, order=True)
class KeyIndex:
    """12-bit key index."""

    value: int

    def __post_init__(self) -> None:
        _check("KeyIndex", self.value, KEY_INDEX_MAX)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def new_maybe(cls, key_index: int) -> Optional[KeyIndex]:
        """Return a KeyIndex, or None if `key_index` does not fit in 12 bits."""
        if 0 <= key_index <= KEY_INDEX_MAX:
            return cls(key_index)
        return None

    @classmethod
    def new_masked(cls, key_index: int) -> KeyIndex:
        return cls(key_index & KEY_INDEX_MAX)

    def to_bytes_le(self) -> bytes:
        return self.value.to_bytes(2, "little")

    def to_bytes_be(self) -> bytes:
        return self.value.to_bytes(2, "big")

    @classmethod
    def from_bytes_le(cls, data: bytes) -> KeyIndex:
        return cls(_int_from_bytes(data, 2, "little"))

    @classmethod
    def from_bytes_be(cls, data: bytes) -> KeyIndex:
        return cls(_int_from_bytes(data, 2, "big"))


@dataclass(frozen=True, order=True)
class NetKeyIndex:
    """Index of a network key."""

    index: KeyIndex


@dataclass(frozen=True, order=True)
class AppKeyIndex:
    """Index of an application key."""

    index: KeyIndex


@dataclass(frozen=True, order=True)
class ElementIndex:
    """Offset of an element from the node's primary element."""

    value: int

    def __post_init__(self) -> None:
        _check("ElementIndex", self.value, U8_MAX)

    def __int__(self) -> int:
        return self.value

    def is_primary(self) -> bool:
        return self.value == 0


@dataclass(frozen=True, order=True)
class ElementCount:
    """Number of elements in a node."""

    value: int

    def __post_init__(self) -> None:
        _check("ElementCount", self.value, U8_MAX)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class TransmitCount:
    """Zero-based 3-bit transmit count."""

    value: int

    def __post_init__(self) -> None:
        _check("TransmitCount", self.value, TRANSMIT_COUNT_MAX)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def new_clamped(cls, count: int) -> TransmitCount:
        return cls(min(count, TRANSMIT_COUNT_MAX))


@dataclass(frozen=True, order=True)
class TransmitSteps:
    """5-bit transmit interval steps."""

    value: int

    def __post_init__(self) -> None:
        _check("TransmitSteps", self.value, TRANSMIT_STEPS_MAX)

    def __int__(self) -> int:
        return self.value

    def to_milliseconds(self, step_worth_ms: int) -> int:
        return (self.value + 1) * step_worth_ms


@dataclass(frozen=True, order=True)
class TransmitInterval:
    """Transmit count and interval steps, packed together in one byte."""

    count: TransmitCount
    steps: TransmitSteps

    def pack(self) -> int:
        return int(self.count) | (int(self.steps) << 3)

    @classmethod
    def unpack(cls, b: int) -> TransmitInterval:
        _check("byte", b, U8_MAX)
        return cls(TransmitCount(b & TRANSMIT_COUNT_MAX), TransmitSteps(b >> 3))


def bytes_str_to_buf(s: str, length: int) -> bytes:
    """Decode a hex string of exactly `length` bytes; raise ValueError otherwise."""
    if length == 0 or length * 2 != len(s):
        raise ValueError(f"expected {length * 2} hex digits, got {len(s)}")
    if any(c not in string.hexdigits for c in s):
        raise ValueError(f"invalid hex string {s!r}")
    return bytes.fromhex(s)