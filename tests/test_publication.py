from datetime import timedelta

import pytest

from btmesh.mesh import TransmitCount, TransmitInterval, TransmitSteps
from btmesh.publication import (
    PublishPeriod,
    PublishRetransmit,
    StepResolution,
    Steps,
)


@pytest.mark.parametrize(
    "resolution, ms",
    [
        (StepResolution.MILLISECONDS_100, 100),
        (StepResolution.SECOND_1, 1000),
        (StepResolution.SECOND_10, 10 * 1000),
        (StepResolution.MINUTE_10, 10 * 60 * 1000),
    ],
)
def test_resolution_milliseconds(resolution, ms):
    assert resolution.to_milliseconds() == ms
    assert PublishPeriod(resolution, Steps(1)).to_milliseconds() == ms


def test_steps_range():
    assert int(Steps(0x3F)) == 0x3F
    with pytest.raises(ValueError):
        Steps(0)
    with pytest.raises(ValueError):
        Steps(0x40)


def test_period_scales_with_steps():
    one = PublishPeriod(StepResolution.SECOND_10, Steps(1))
    many = PublishPeriod(StepResolution.SECOND_10, Steps(7))
    assert many.to_milliseconds() == 7 * one.to_milliseconds()


def test_to_duration_matches_milliseconds():
    period = PublishPeriod(StepResolution.MINUTE_10, Steps(1))
    assert period.to_duration() == timedelta(minutes=10)


def test_packed_layout():
    period = PublishPeriod(StepResolution.MINUTE_10, Steps(0x3F))
    assert period.packed() == 0xFF
    assert PublishPeriod(StepResolution.MILLISECONDS_100, Steps(1)).packed() == 0x01


@pytest.mark.parametrize("b", [b for b in range(256) if b & 0x3F])
def test_period_round_trip(b):
    assert PublishPeriod.unpack(b).packed() == b


def test_period_unpack_zero_steps():
    with pytest.raises(ValueError):
        PublishPeriod.unpack(0x40)


def test_period_unpack_not_a_byte():
    with pytest.raises(ValueError):
        PublishPeriod.unpack(0x100)


@pytest.mark.parametrize("b", range(256))
def test_retransmit_round_trip(b):
    assert PublishRetransmit.unpack(b).pack() == b


def test_retransmit_fields():
    retransmit = PublishRetransmit(TransmitInterval(TransmitCount(2), TransmitSteps(4)))
    unpacked = PublishRetransmit.unpack(retransmit.pack())
    assert unpacked == retransmit
    assert int(unpacked.interval.count) == 2
    assert int(unpacked.interval.steps) == 4