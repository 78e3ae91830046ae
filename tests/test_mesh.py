import pytest

from btmesh.mesh import (
    NID,
    TTL,
    U24,
    AppKeyIndex,
    ElementCount,
    ElementIndex,
    IVIndex,
    KeyIndex,
    ModelID,
    NetKeyIndex,
    SequenceNumber,
    TransmitCount,
    TransmitInterval,
    TransmitSteps,
    bytes_str_to_buf,
)


@pytest.mark.parametrize("value,expected", [(0, False), (1, False), (2, True), (65, True), (126, True), (127, True)])
def test_ttl_should_relay(value, expected):
    assert TTL(value).should_relay() is expected


def test_ttl_out_of_range():
    with pytest.raises(ValueError):
        TTL(128)


def test_ttl_flag_round_trip():
    packed = TTL(5).with_flag(True)
    assert packed == 0x85
    assert TTL.new_with_flag(packed) == (TTL(5), True)
    assert TTL.new_with_flag(5) == (TTL(5), False)


def test_ttl_masked_and_str():
    assert TTL.from_masked_u8(0xFF) == TTL(127)
    assert str(TTL(3)) == "TTL(3)"


def test_nid_flags():
    assert NID(0x12).with_flag(True) == 0x92
    assert NID.new_with_flag(0x92) == (NID(0x12), True)
    assert NID.from_masked_u8(0x80) == NID(0)
    with pytest.raises(ValueError):
        NID(0x80)


def test_u24_limits():
    assert U24.max_value().value == 16777215
    with pytest.raises(ValueError):
        U24(1 << 24)
    assert U24.new_masked(0x1234_5678) == U24(0x34_5678)


def test_u24_bytes_round_trip():
    v = U24(0x010203)
    assert v.to_bytes_be() == b"\x01\x02\x03"
    assert v.to_bytes_le() == b"\x03\x02\x01"
    assert U24.from_bytes_be(v.to_bytes_be()) == v
    assert U24.from_bytes_le(v.to_bytes_le()) == v
    with pytest.raises(ValueError):
        U24.from_bytes_be(b"\x01\x02")


def test_u24_parse():
    assert U24.parse("1234") == U24(1234)
    assert U24.parse("+7") == U24(7)
    for bad in ["", "-1", "abc", "16777216", " 1"]:
        with pytest.raises(ValueError):
            U24.parse(bad)


def test_u24_arithmetic_wraps():
    assert U24.max_value() + U24(1) == U24(0)
    assert U24(0) - U24(1) == U24.max_value()
    assert U24(10) + U24(5) == U24(15)


def test_iv_index_matching_flags_doc_examples():
    assert IVIndex(0).matching_flags(True, False) is None
    assert IVIndex(0xFFFF_FFFF).matching_flags(False, True) is None
    assert IVIndex(2).matching_flags(True, False) == IVIndex(1)


def test_iv_index_matching_same_ivi():
    assert IVIndex(3).matching_flags(True, True) == IVIndex(3)
    assert IVIndex(2).matching_flags(True, True) == IVIndex(3)


def test_iv_index_next_prev_and_bytes():
    assert IVIndex(0).prev() is None
    assert IVIndex(5).next() == IVIndex(6)
    assert IVIndex(5).ivi() is True
    v = IVIndex(0x01020304)
    assert v.to_bytes_be() == b"\x01\x02\x03\x04"
    assert IVIndex.from_bytes_le(v.to_bytes_le()) == v
    assert str(IVIndex(9)) == "IVIndex(9)"


def test_sequence_number():
    assert SequenceNumber(5).next() == SequenceNumber(6)
    with pytest.raises(OverflowError):
        SequenceNumber(U24.max_value().value).next()
    assert SequenceNumber(10) - SequenceNumber(3) == 7
    assert SequenceNumber(1) + SequenceNumber(2) == 3
    s = SequenceNumber(0xABCDEF)
    assert SequenceNumber.from_bytes_be(s.to_bytes_be()) == s
    assert SequenceNumber.from_bytes_le(s.to_bytes_le()) == s
    assert SequenceNumber(1) < SequenceNumber(2)


def test_model_id_bytes():
    m = ModelID(0x1001)
    assert m.to_bytes_le() == b"\x01\x10"
    assert ModelID.from_bytes_be(m.to_bytes_be()) == m


def test_key_index():
    assert KeyIndex.new_maybe(0x1000) is None
    assert KeyIndex.new_maybe(0xFFF) == KeyIndex(0xFFF)
    assert KeyIndex.new_masked(0x1FFF) == KeyIndex(0xFFF)
    with pytest.raises(ValueError):
        KeyIndex(0x1000)
    with pytest.raises(ValueError):
        KeyIndex.from_bytes_le(b"\x00\x10")
    assert KeyIndex.from_bytes_le(KeyIndex(0x123).to_bytes_le()) == KeyIndex(0x123)
    assert NetKeyIndex(KeyIndex(1)) != AppKeyIndex(KeyIndex(1))


def test_element_index_and_count():
    assert ElementIndex(0).is_primary()
    assert not ElementIndex(1).is_primary()
    with pytest.raises(ValueError):
        ElementCount(256)


def test_transmit_values():
    assert TransmitCount.new_clamped(20) == TransmitCount(7)
    assert TransmitCount.new_clamped(2) == TransmitCount(2)
    with pytest.raises(ValueError):
        TransmitCount(8)
    with pytest.raises(ValueError):
        TransmitSteps(32)
    assert TransmitSteps(3).to_milliseconds(10) == 40


def test_transmit_interval_round_trip():
    interval = TransmitInterval(TransmitCount(3), TransmitSteps(3))
    assert interval.pack() == 0x1B
    assert TransmitInterval.unpack(0x1B) == interval
    for b in range(256):
        assert TransmitInterval.unpack(b).pack() == b


def test_bytes_str_to_buf():
    assert bytes_str_to_buf("0a1B", 2) == bytes([0x0A, 0x1B])
    with pytest.raises(ValueError):
        bytes_str_to_buf("0a1", 2)
    with pytest.raises(ValueError):
        bytes_str_to_buf("zz", 1)
    with pytest.raises(ValueError):
        bytes_str_to_buf("", 0)