"""Model publication period and retransmit parameters."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import IntEnum

from btmesh.mesh import TransmitInterval

STEPS_MAX = 0x3F

_RESOLUTION_MS = {
    0b00: 100,
    0b01: 1000,
    0b10: 10 * 1000,
    0b11: 10 * 60 * 1000,
}


class StepResolution(IntEnum):
    """2-bit step resolution used by publish periods."""

    MILLISECONDS_100 = 0b00
    SECOND_1 = 0b01
    SECOND_10 = 0b10
    MINUTE_10 = 0b11

    def to_milliseconds(self) -> int:
        return _RESOLUTION_MS[self.value]


@dataclass(frozen=True, order=True)
class Steps:
    """6-bit, non-zero number of steps."""

    value: int

    def __post_init__(self) -> None:
        if not 0 < self.value <= STEPS_MAX:
            raise ValueError(f"steps {self.value} is out of range 1..={STEPS_MAX}")

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class PublishPeriod:
    """Publish period: a number of steps of a given resolution."""

    resolution: StepResolution
    steps: Steps

    def to_milliseconds(self) -> int:
        return self.resolution.to_milliseconds() * int(self.steps)

    def to_duration(self) -> timedelta:
        return timedelta(milliseconds=self.to_milliseconds())

    def packed(self) -> int:
        """Pack as resolution in the top 2 bits and steps in the low 6 bits."""
        return int(self.steps) | (int(self.resolution) << 6)

    @classmethod
    def unpack(cls, b: int) -> PublishPeriod:
        """Unpack a byte; raises ValueError if the step count is zero."""
        if not 0 <= b <= 0xFF:
            raise ValueError(f"{b} is not a byte")
        return cls(StepResolution(b >> 6), Steps(b & STEPS_MAX))


@dataclass(frozen=True, order=True)
class PublishRetransmit:
    """Retransmit count and interval for published messages."""

    interval: TransmitInterval

    def pack(self) -> int:
        return self.interval.pack()

    @classmethod
    def unpack(cls, b: int) -> PublishRetransmit:
        return cls(TransmitInterval.unpack(b))