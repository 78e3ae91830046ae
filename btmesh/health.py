"""Health model fault identifiers."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

LAST_ASSIGNED_FAULT = 0x32
FIRST_VENDOR_FAULT = 0x80


class FaultKind(IntEnum):
    """Assigned fault identifiers. Odd values are warnings and even values are errors."""

    NO_FAULT = 0x00
    BATTERY_LOW_WARNING = 0x01
    BATTERY_LOW_ERROR = 0x02
    SUPPLY_VOLTAGE_TOO_LOW_WARNING = 0x03
    SUPPLY_VOLTAGE_TOO_LOW_ERROR = 0x04
    SUPPLY_VOLTAGE_TOO_HIGH_WARNING = 0x05
    SUPPLY_VOLTAGE_TOO_HIGH_ERROR = 0x06
    POWER_SUPPLY_INTERRUPTED_WARNING = 0x07
    POWER_SUPPLY_INTERRUPTED_ERROR = 0x08
    NO_LOAD_WARNING = 0x09
    NO_LOAD_ERROR = 0x0A
    OVERLOAD_WARNING = 0x0B
    OVERLOAD_ERROR = 0x0C
    OVERHEAT_WARNING = 0x0D
    OVERHEAT_ERROR = 0x0E
    CONDENSATION_WARNING = 0x0F
    CONDENSATION_ERROR = 0x10
    VIBRATION_WARNING = 0x11
    VIBRATION_ERROR = 0x12
    CONFIGURATION_WARNING = 0x13
    CONFIGURATION_ERROR = 0x14
    ELEMENT_NOT_CALIBRATED_WARNING = 0x15
    ELEMENT_NOT_CALIBRATED_ERROR = 0x16
    MEMORY_WARNING = 0x17
    MEMORY_ERROR = 0x18
    SELF_TEST_WARNING = 0x19
    SELF_TEST_ERROR = 0x1A
    INPUT_TOO_LOW_WARNING = 0x1B
    INPUT_TOO_LOW_ERROR = 0x1C
    INPUT_TOO_HIGH_WARNING = 0x1D
    INPUT_TOO_HIGH_ERROR = 0x1E
    INPUT_NO_CHANGE_WARNING = 0x1F
    INPUT_NO_CHANGE_ERROR = 0x20
    ACTUATOR_BLOCKED_WARNING = 0x21
    ACTUATOR_BLOCKED_ERROR = 0x22
    HOUSING_OPENED_WARNING = 0x23
    HOUSING_OPENED_ERROR = 0x24
    TAMPER_WARNING = 0x25
    TAMPER_ERROR = 0x26
    DEVICE_MOVED_WARNING = 0x27
    DEVICE_MOVED_ERROR = 0x28
    DEVICE_DROPPED_WARNING = 0x29
    DEVICE_DROPPED_ERROR = 0x2A
    OVERFLOW_WARNING = 0x2B
    OVERFLOW_ERROR = 0x2C
    EMPTY_WARNING = 0x2D
    EMPTY_ERROR = 0x2E
    INTERNAL_BUS_WARNING = 0x2F
    INTERNAL_BUS_ERROR = 0x30
    MECHANISM_JAMMED_WARNING = 0x31
    MECHANISM_JAMMED_ERROR = 0x32


@dataclass(frozen=True, order=True)
class FaultID:
    """A one-byte fault identifier: assigned, reserved for future use, or vendor specific."""

    value: int

    def __post_init__(self) -> None:
        value = int(self.value)
        if not 0 <= value <= 0xFF:
            raise ValueError(f"fault id {value} is not a byte")
        object.__setattr__(self, "value", value)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_byte(cls, b: int) -> FaultID:
        return cls(b)

    def to_byte(self) -> int:
        return self.value

    @property
    def kind(self) -> Optional[FaultKind]:
        """The assigned fault this identifies, or None for reserved and vendor values."""
        if self.value <= LAST_ASSIGNED_FAULT:
            return FaultKind(self.value)
        return None

    def is_rfu(self) -> bool:
        return LAST_ASSIGNED_FAULT < self.value < FIRST_VENDOR_FAULT

    def is_vendor(self) -> bool:
        return self.value >= FIRST_VENDOR_FAULT