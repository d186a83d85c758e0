"""Bluetooth device addresses (the 6-byte MAC address)."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_COLON_DELIM_EXPECTING = "A colon seperated Bluetooth address, like `00:11:22:33:44:55`"
_NO_DELIM_EXPECTING = "A Bluetooth address without any delimiters, like `001122334455`"


class ParseBDAddrError(ValueError):
    """Raised when a Bluetooth address cannot be built from the given input."""


class IncorrectByteCountError(ParseBDAddrError):
    """The input does not describe exactly 6 bytes."""

    def __init__(self) -> None:
        super().__init__("Bluetooth address has to be 6 bytes long")


class InvalidDigitError(ParseBDAddrError):
    """A part of the input is not a valid hexadecimal byte."""

    def __init__(self, part: str) -> None:
        super().__init__(f"Invalid digit in address: {part!r}")
        self.part = part


def _parse_hex_byte(part: str) -> int:
    """Parse one byte written in hexadecimal, with an optional leading '+'."""
    digits = part[1:] if part.startswith("+") else part
    if not digits or not all(ch in _HEX_DIGITS for ch in digits):
        raise InvalidDigitError(part)
    value = int(digits, 16)
    if value > 0xFF:
        raise InvalidDigitError(part)
    return value


@dataclass(frozen=True, order=True)
class BDAddr:
    """The 6-byte address identifying a Bluetooth device.

    ``address[0]`` is the most significant byte, ``address[5]`` the least.
    """

    address: bytes = field(default=bytes(6))

    def __post_init__(self) -> None:
        raw = bytes(self.address)
        if len(raw) != 6:
            raise IncorrectByteCountError()
        object.__setattr__(self, "address", raw)

    @classmethod
    def from_bytes(cls, data: Iterable[int]) -> BDAddr:
        """Build an address from exactly 6 bytes."""
        return cls(bytes(data))

    @classmethod
    def from_int(cls, value: int) -> BDAddr:
        """Build an address from an integer whose top 16 of 64 bits are zero."""
        if not 0 <= value < 1 << 48:
            raise IncorrectByteCountError()
        return cls(value.to_bytes(6, "big"))

    @classmethod
    def parse(cls, text: str) -> BDAddr:
        """Parse ``aa:bb:cc:dd:ee:ff`` or ``aabbccddeeff``."""
        if ":" in text:
            return cls.from_str_delim(text)
        return cls.from_str_no_delim(text)

    @classmethod
    def from_str_delim(cls, text: str) -> BDAddr:
        """Parse an address with colons as delimiters."""
        values = [_parse_hex_byte(part) for part in text.split(":")]
        if len(values) != 6:
            raise IncorrectByteCountError()
        return cls(bytes(values))

    @classmethod
    def from_str_no_delim(cls, text: str) -> BDAddr:
        """Parse an address of 12 hex digits without delimiters."""
        if len(text.encode("utf-8")) != 12:
            raise IncorrectByteCountError()
        if not text.isascii():
            raise InvalidDigitError(text)
        return cls(bytes(_parse_hex_byte(text[i : i + 2]) for i in range(0, 12, 2)))

    def to_bytes(self) -> bytes:
        """Return the 6 underlying bytes."""
        return self.address

    def to_int(self) -> int:
        """Return the address as an integer, MSB first."""
        return int.from_bytes(self.address, "big")

    def is_random_static(self) -> bool:
        """Whether this is a randomly generated static address."""
        return self.address[5] & 0b11 == 0b11

    def to_string_no_delim(self) -> str:
        """Return the address as 12 lower-case hex digits without colons."""
        return self.address.hex()

    def __bytes__(self) -> bytes:
        return self.address

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return format(self, "X")

    def __repr__(self) -> str:
        return f"BDAddr('{self}')"

    def __format__(self, spec: str) -> str:
        if spec == "x":
            return ":".join(f"{b:02x}" for b in self.address)
        if spec in ("X", ""):
            return ":".join(f"{b:02X}" for b in self.address)
        return format(str(self), spec)


def _require_str(value: object, expecting: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"invalid type {type(value).__name__}, expected {expecting}")
    return value


def serialize_colon_delim(addr: BDAddr) -> str:
    """Serialize as upper-case hex digits separated by colons."""
    return format(addr, "X")


def deserialize_colon_delim(value: object) -> BDAddr:
    """Deserialize a colon-separated address string."""
    return BDAddr.from_str_delim(_require_str(value, _COLON_DELIM_EXPECTING))


def serialize_no_delim(addr: BDAddr) -> str:
    """Serialize as lower-case hex digits without delimiters."""
    return addr.to_string_no_delim()


def deserialize_no_delim(value: object) -> BDAddr:
    """Deserialize an address string without delimiters."""
    return BDAddr.from_str_no_delim(_require_str(value, _NO_DELIM_EXPECTING))


def serialize_bytes(addr: BDAddr) -> list[int]:
    """Serialize as a list of 6 integers."""
    return list(addr.address)


def deserialize_bytes(value: object) -> BDAddr:
    """Deserialize from a sequence of 6 integers in 0..255."""
    if isinstance(value, (str, int)) or not isinstance(value, Iterable):
        raise TypeError(f"invalid type {type(value).__name__}, expected an array of 6 bytes")
    return BDAddr.from_bytes(bytes(value))