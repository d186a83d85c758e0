import pytest

from bleapi.bdaddr import (
    BDAddr,
    IncorrectByteCountError,
    InvalidDigitError,
    ParseBDAddrError,
    deserialize_bytes,
    deserialize_colon_delim,
    deserialize_no_delim,
    serialize_bytes,
    serialize_colon_delim,
    serialize_no_delim,
)

ADDR = BDAddr(bytes([0x1F, 0x2A, 0x00, 0xCC, 0x22, 0xF1]))
HEX = 0x00_00_1F_2A_00_CC_22_F1


def test_parse_addr():
    addr = BDAddr.from_bytes([0x2A, 0x00, 0xAA, 0xBB, 0xCC, 0xDD])
    assert BDAddr.parse("2a:00:aa:bb:cc:dd") == addr
    assert BDAddr.parse("2a00AabbCcdd") == addr
    with pytest.raises(IncorrectByteCountError):
        BDAddr.parse("2A:00:00")
    with pytest.raises(InvalidDigitError):
        BDAddr.parse("2A:00:AA:BB:CC:ZZ")
    with pytest.raises(InvalidDigitError):
        BDAddr.parse("2A00aABbcCZz")


def test_parse_errors_are_value_errors():
    with pytest.raises(ValueError):
        BDAddr.parse("nonsense")
    with pytest.raises(ParseBDAddrError):
        BDAddr.parse("00:11:22:33:44:100")


def test_no_delim_wrong_length():
    with pytest.raises(IncorrectByteCountError):
        BDAddr.from_str_no_delim("2a00aabbcc")


def test_display_addr():
    assert f"{ADDR}" == "1F:2A:00:CC:22:F1"
    assert str(ADDR) == "1F:2A:00:CC:22:F1"
    assert f"{ADDR:x}" == "1f:2a:00:cc:22:f1"
    assert f"{ADDR:X}" == "1F:2A:00:CC:22:F1"
    assert ADDR.to_string_no_delim() == "1f2a00cc22f1"


def test_from_array_display():
    addr = BDAddr.from_bytes([0x2A, 0xCC, 0x00, 0x34, 0xFA, 0x00])
    assert str(addr) == "2A:CC:00:34:FA:00"


def test_u64_to_addr():
    hex_addr = BDAddr.from_int(HEX)
    assert hex_addr == ADDR
    assert hex_addr.to_int() == HEX
    assert int(hex_addr) == HEX


def test_invalid_u64_to_addr():
    with pytest.raises(IncorrectByteCountError):
        BDAddr.from_int(0x1122334455667788)


def test_addr_to_u64():
    addr_as_hex = ADDR.to_int()
    assert addr_as_hex == HEX
    assert BDAddr.from_int(addr_as_hex) == ADDR


def test_from_bytes_wrong_length():
    with pytest.raises(IncorrectByteCountError):
        BDAddr.from_bytes([1, 2, 3])


def test_default_and_bytes():
    assert BDAddr().to_bytes() == bytes(6)
    assert bytes(ADDR) == bytes([0x1F, 0x2A, 0x00, 0xCC, 0x22, 0xF1])


def test_ordering():
    low = BDAddr.from_int(1)
    high = BDAddr.from_int(2)
    assert low < high
    assert sorted([high, low]) == [low, high]


@pytest.mark.parametrize(
    ("last", "expected"),
    [(0x03, True), (0xFF, True), (0x01, False), (0x02, False), (0x00, False)],
)
def test_is_random_static(last, expected):
    assert BDAddr.from_bytes([0, 0, 0, 0, 0, last]).is_random_static() is expected


def test_deserialize_delim():
    expect = BDAddr.from_bytes([0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00])
    assert deserialize_colon_delim("ff:00:ff:00:ff:00") == expect
    with pytest.raises(TypeError, match="A colon seperated Bluetooth address"):
        deserialize_colon_delim(0)


def test_deserialize_no_delim():
    expect = BDAddr.from_bytes([0xFF, 0x00, 0xFF, 0x00, 0xFF, 0x00])
    assert deserialize_no_delim("ff00ff00ff00") == expect
    with pytest.raises(TypeError, match="without any delimiters"):
        deserialize_no_delim(0)


def test_serde_examples():
    expect = BDAddr.from_bytes([0x00, 0xDE, 0xAD, 0xBE, 0xEF, 0x00])
    assert deserialize_colon_delim("00:DE:AD:BE:EF:00") == expect
    assert deserialize_no_delim("00deadbeef00") == expect
    assert deserialize_bytes([0, 1, 2, 3, 4, 5]) == BDAddr.from_bytes([0, 1, 2, 3, 4, 5])


def test_serialize_round_trips():
    assert serialize_colon_delim(ADDR) == "1F:2A:00:CC:22:F1"
    assert serialize_no_delim(ADDR) == "1f2a00cc22f1"
    assert serialize_bytes(ADDR) == [0x1F, 0x2A, 0x00, 0xCC, 0x22, 0xF1]
    assert deserialize_colon_delim(serialize_colon_delim(ADDR)) == ADDR
    assert deserialize_no_delim(serialize_no_delim(ADDR)) == ADDR
    assert deserialize_bytes(serialize_bytes(ADDR)) == ADDR


def test_deserialize_bytes_errors():
    with pytest.raises(IncorrectByteCountError):
        deserialize_bytes([1, 2, 3])
    with pytest.raises(ValueError):
        deserialize_bytes([0, 0, 0, 0, 0, 256])
    with pytest.raises(TypeError):
        deserialize_bytes(6)