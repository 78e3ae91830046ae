"""Foundation model states: relay, beacon, proxy, friend, key refresh, TTL and transmit."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Optional

from btmesh.mesh import TransmitCount, TransmitInterval, TransmitSteps

DEFAULT_TTL = 5
NETWORK_TRANSMIT_STEP_MS = 10


class FoundationStateError(ValueError):
    """A byte does not encode a valid foundation state."""


class _ByteState(IntEnum):
    @classmethod
    def _missing_(cls, value: object) -> None:
        raise FoundationStateError(f"{value!r} is not a valid {cls.__name__}")


class RelayState(_ByteState):
    DISABLED = 0x00
    ENABLED = 0x01
    NOT_SUPPORTED = 0x02

    def is_enabled(self) -> bool:
        return self is RelayState.ENABLED


@dataclass(frozen=True, order=True)
class RelayRetransmit:
    """Retransmit parameters for relayed messages."""

    interval: TransmitInterval


class SecureNetworkBeaconState(_ByteState):
    NOT_BROADCASTING = 0x00
    BROADCASTING = 0x01


class GATTProxyState(_ByteState):
    DISABLED = 0x00
    ENABLED = 0x01
    NOT_SUPPORTED = 0x02


class NodeIdentityState(_ByteState):
    STOPPED = 0x00
    RUNNING = 0x01
    NOT_SUPPORTED = 0x02


class FriendState(_ByteState):
    DISABLED = 0x00
    ENABLED = 0x01
    NOT_SUPPORTED = 0x02


class KeyRefreshPhaseState(_ByteState):
    NORMAL = 0x00
    FIRST = 0x01
    SECOND = 0x02


@dataclass(frozen=True, order=True)
class AttentionTimer:
    """Seconds left for an element to draw a person's attention (flashing, beeping...)."""

    seconds_remaining: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.seconds_remaining <= 0xFF:
            raise ValueError(f"attention timer {self.seconds_remaining} is not a byte")

    def is_off(self) -> bool:
        return self.seconds_remaining == 0

    def is_on(self) -> bool:
        return not self.is_off()


def _valid_default_ttl(v: int) -> bool:
    return 0 <= v < 0x80 and v != 0x01


@dataclass(frozen=True, order=True)
class DefaultTTLState:
    """Default TTL: 0x00 or 0x02..=0x7F."""

    value: int = DEFAULT_TTL

    def __post_init__(self) -> None:
        if not _valid_default_ttl(self.value):
            raise FoundationStateError(f"bad default TTL {self.value}")

    def __int__(self) -> int:
        return self.value

    @classmethod
    def try_new(cls, v: int) -> Optional[DefaultTTLState]:
        """Return the state, or None if `v` is 0x01 or 0x80 and above."""
        return cls(v) if _valid_default_ttl(v) else None


def _default_network_transmit() -> TransmitInterval:
    return TransmitInterval(TransmitCount(3), TransmitSteps(3))


@dataclass(frozen=True, order=True)
class NetworkTransmit:
    """Transmit count and interval for network PDUs originating from this node."""

    transmit: TransmitInterval = field(default_factory=_default_network_transmit)

    def interval(self) -> timedelta:
        """Time between transmissions (10 ms per step)."""
        return timedelta(
            milliseconds=self.transmit.steps.to_milliseconds(NETWORK_TRANSMIT_STEP_MS)
        )