# btmesh

This package holds value types for a Bluetooth Mesh stack, written in plain
Python. It has no runtime dependencies.

Every value is an immutable, ordered dataclass or an `IntEnum`, with two
exceptions: `SeqRange` and `SeqCounter` are stateful. Each constructor checks
its range. For example, `TTL` must fit in 7 bits, `U24` in 24 bits and
`KeyIndex` in 12 bits.

## Modules

- `btmesh.mesh`: core mesh values.
  - `TTL` and `NID`: 7-bit values with a flag bit. Each has
    `with_flag`, `new_with_flag` and `from_masked_u8`. `TTL` also has
    `should_relay`.
  - `U24`: a 24-bit integer. Addition and subtraction wrap at 24 bits.
    It has `parse`, `new_masked` and `max_value`.
  - `IVIndex`: has `ivi`, `next`, `prev` and `matching_flags`.
  - `SequenceNumber`: a 24-bit number. Adding or subtracting two of them
    gives an `int` that wraps at 24 bits.
  - `ModelID`, `KeyIndex`, `NetKeyIndex`, `AppKeyIndex`, `ElementIndex` and
    `ElementCount`.
  - `TransmitCount`, `TransmitSteps` and `TransmitInterval`:
    `TransmitInterval` packs into one byte.
  - `bytes_str_to_buf`: decodes a hex string of an exact byte length.

  The integer types have `to_bytes_le`, `to_bytes_be`, `from_bytes_le` and
  `from_bytes_be`.
- `btmesh.segments`: lower transport segmentation values.
  - `SeqZero`, `SeqAuth`, `SegO` and `SegN`.
  - `SegmentHeader`: packs into and unpacks from a `U24` laid out as
    flag(1), SeqZero(13), SegO(5) and SegN(5).
  - `seg_flag`: reads the SEG bit.
- `btmesh.foundation_state`: foundation model states.
  - `RelayState`, `SecureNetworkBeaconState`, `GATTProxyState`,
    `NodeIdentityState`, `FriendState` and `KeyRefreshPhaseState`.
  - `RelayRetransmit` and `AttentionTimer`.
  - `DefaultTTLState`: defaults to 5.
  - `NetworkTransmit`: defaults to count 3 and steps 3, at 10 ms per step.
- `btmesh.publication`: model publication timing.
  - `StepResolution` and `Steps`.
  - `PublishPeriod`: packs into one byte and converts to milliseconds or a
    `timedelta`.
  - `PublishRetransmit`.
- `btmesh.health`:
  - `FaultID`: a one-byte fault code with `kind`, `is_rfu` and `is_vendor`.
  - `FaultKind`: the assigned fault codes.
- `btmesh.device`:
  - `ConfigStates`: the configuration server states of a node, with their
    defaults.
  - `SeqRange`: an iterable, consumable range of sequence numbers.
  - `SeqCounter`: a thread-safe counter that hands out sequence numbers.

## Example

```python
from btmesh.mesh import TTL, IVIndex, U24
from btmesh.segments import SegmentHeader, SeqZero, SegO, SegN
from btmesh.publication import PublishPeriod
from btmesh.health import FaultID, FaultKind
from btmesh.device import SeqCounter

assert TTL(5).should_relay()
assert IVIndex(2).matching_flags(True, False) == IVIndex(1)
assert U24.max_value() + U24(1) == U24(0)

header = SegmentHeader(True, SeqZero(100), SegO(1), SegN(3))
assert SegmentHeader.unpack_from_u24(header.pack_into_u24()) == header

assert PublishPeriod.unpack(0x45).to_milliseconds() == 5000

assert FaultID.from_byte(0x01).kind is FaultKind.BATTERY_LOW_WARNING
assert FaultID.from_byte(0x90).is_vendor()

counter = SeqCounter()
segments = counter.inc_seq(3)
assert [int(seq) for seq in segments] == [0, 1, 2]
assert int(counter.check()) == 3
```

## Errors

Out-of-range values raise `ValueError`. A byte that is not a valid foundation
state raises `FoundationStateError`, a subclass of `ValueError`. An invalid
default TTL raises the same error. `SequenceNumber.next` raises
`OverflowError` once it reaches the 24-bit maximum. `SeqCounter.inc_seq`
returns `None` once the sequence space is used up.

## What it does not do

This package holds values only. It does not do any of the following:

- encrypt, decrypt, send or receive network PDUs;
- reassemble segmented messages or handle acknowledgements;
- encode configuration model messages or opcodes;
- provision nodes or store keys.

It has no command-line tool.

## Running the tests

```
pip install -e .[test]
pytest
```