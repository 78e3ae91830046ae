"""Persistent node state: configuration states and per-element sequence counters."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Iterator, Optional

from btmesh.foundation_state import (
    DefaultTTLState,
    GATTProxyState,
    NetworkTransmit,
    RelayState,
    SecureNetworkBeaconState,
)
from btmesh.mesh import U24_MAX, SequenceNumber
from btmesh.segments import SegO


@dataclass
class ConfigStates:
    """Configuration server states of a node."""

    relay_state: RelayState = RelayState.DISABLED
    gatt_proxy_state: GATTProxyState = GATTProxyState.DISABLED
    secure_network_beacon_state: SecureNetworkBeaconState = (
        SecureNetworkBeaconState.NOT_BROADCASTING
    )
    default_ttl: DefaultTTLState = field(default_factory=DefaultTTLState)
    network_transmit: NetworkTransmit = field(default_factory=NetworkTransmit)


class SeqRange:
    """Half-open range of sequence numbers, consumed as it is iterated."""

    def __init__(self, start: SequenceNumber, end: SequenceNumber) -> None:
        if start > end:
            raise ValueError(f"range start {start} is after its end {end}")
        self._start = int(start)
        self._end = int(end)

    @classmethod
    def _from_ints(cls, start: int, end: int) -> SeqRange:
        seq_range = cls.__new__(cls)
        seq_range._start = start
        seq_range._end = end
        return seq_range

    @classmethod
    def new_segs(cls, start: SequenceNumber, seg_o: SegO) -> SeqRange:
        """The sequence numbers needed by segments 0 up to and including `seg_o`."""
        return cls(start, SequenceNumber(int(start) + int(seg_o) + 1))

    @classmethod
    def from_sequence(cls, seq: SequenceNumber) -> SeqRange:
        """A range holding only `seq`."""
        return cls._from_ints(int(seq), int(seq) + 1)

    def start(self) -> SequenceNumber:
        return SequenceNumber(self._start)

    def end(self) -> SequenceNumber:
        return SequenceNumber(self._end)

    def seqs_left(self) -> int:
        return max(self._end - self._start, 0)

    def is_empty(self) -> bool:
        return self._start >= self._end

    def __len__(self) -> int:
        return self.seqs_left()

    def __iter__(self) -> Iterator[SequenceNumber]:
        return self

    def __next__(self) -> SequenceNumber:
        if self.is_empty():
            raise StopIteration
        out = self._start
        self._start = out + 1
        return SequenceNumber(out)

    def __repr__(self) -> str:
        return f"SeqRange({self._start}..{self._end})"


class SeqCounter:
    """Thread-safe, monotonically increasing sequence number counter for one element."""

    def __init__(self, start_seq: SequenceNumber = SequenceNumber()) -> None:
        self._lock = threading.Lock()
        self._next = int(start_seq)

    def inc_seq(self, amount: int) -> Optional[SeqRange]:
        """Allocate `amount` consecutive sequence numbers.

        Returns None once the 24-bit sequence space is exhausted.
        """
        if amount < 0:
            raise ValueError(f"negative amount {amount}")
        with self._lock:
            current = self._next
            self._next = current + amount
            if current >= U24_MAX:
                self._next = U24_MAX
                return None
        return SeqRange._from_ints(current, current + amount)

    def set_seq(self, new_seq: SequenceNumber) -> None:
        """Reset the counter. Going backwards may cause recipients to drop PDUs."""
        with self._lock:
            self._next = int(new_seq)

    def check(self) -> SequenceNumber:
        """The next sequence number that would be allocated."""
        with self._lock:
            return SequenceNumber(self._next)

    def __copy__(self) -> SeqCounter:
        return SeqCounter(self.check())

    def __repr__(self) -> str:
        return f"SeqCounter({self._next})"