"""Lower transport segmentation values: SeqZero, SeqAuth, SegO, SegN and segment headers."""
from __future__ import annotations

from dataclasses import dataclass

from btmesh.mesh import IVIndex, SequenceNumber, U24

SEQ_ZERO_MAX = (1 << 13) - 1
SEG_MAX = 0x1F
SEQ_AUTH_WINDOW = 8192


def _check(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} {value} is out of range 0..={maximum}")


def seg_flag(v: int) -> bool:
    """Return the SEG flag held in the top bit of the first byte of a lower transport PDU."""
    return bool(v & 0x80)


@dataclass(frozen=True, order=True)
class SeqZero:
    """13-bit SeqZero, the low bits of the first sequence number of a segmented message."""

    value: int

    def __post_init__(self) -> None:
        _check("SeqZero", self.value, SEQ_ZERO_MAX)

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_sequence(cls, seq: SequenceNumber) -> SeqZero:
        """Take the low 13 bits of a sequence number."""
        return cls(int(seq) & SEQ_ZERO_MAX)

    def original_seq(self, seq: SequenceNumber) -> SequenceNumber:
        """Rebuild the full first sequence number from `seq`'s upper bits and this SeqZero."""
        return SequenceNumber((int(seq) & ~SEQ_ZERO_MAX) | self.value)


@dataclass(frozen=True, order=True)
class SeqAuth:
    """Sequence authentication: the first sequence number of a message and its IV index."""

    first_seq: SequenceNumber
    iv_index: IVIndex

    @classmethod
    def from_seq_zero(
        cls, seq_zero: SeqZero, seq: SequenceNumber, iv_index: IVIndex
    ) -> SeqAuth:
        return cls(seq_zero.original_seq(seq), iv_index)

    def valid_seq(self, new_seq: SequenceNumber) -> bool:
        """Whether `new_seq` can belong to the message started at `first_seq`."""
        return new_seq >= self.first_seq and (new_seq - self.first_seq) < SEQ_AUTH_WINDOW

    def seq_zero(self) -> SeqZero:
        return SeqZero.from_sequence(self.first_seq)


@dataclass(frozen=True, order=True)
class SegO:
    """5-bit segment offset."""

    value: int

    def __post_init__(self) -> None:
        _check("SegO", self.value, SEG_MAX)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, order=True)
class SegN:
    """5-bit number of the last segment."""

    value: int

    def __post_init__(self) -> None:
        _check("SegN", self.value, SEG_MAX)

    def __int__(self) -> int:
        return self.value

    def next(self) -> SegN:
        """Return SegN + 1, staying at the maximum once reached."""
        if self.value >= SEG_MAX:
            return self
        return SegN(self.value + 1)


@dataclass(frozen=True, order=True)
class SegmentHeader:
    """Header shared by segmented access and control PDUs; `flag` is SZMIC or OBO."""

    flag: bool
    seq_zero: SeqZero
    seg_o: SegO
    seg_n: SegN

    def pack_into_u24(self) -> U24:
        """Pack as flag(1) | SeqZero(13) | SegO(5) | SegN(5), most significant first."""
        packed = (
            int(self.seg_n)
            | (int(self.seg_o) << 5)
            | (int(self.seq_zero) << 10)
            | (int(bool(self.flag)) << 23)
        )
        return U24(packed)

    @classmethod
    def unpack_from_u24(cls, value: U24) -> SegmentHeader:
        packed = int(value)
        return cls(
            flag=bool(packed & (1 << 23)),
            seq_zero=SeqZero((packed >> 10) & SEQ_ZERO_MAX),
            seg_o=SegO((packed >> 5) & SEG_MAX),
            seg_n=SegN(packed & SEG_MAX),
        )