"""
Value types for the fixed-width identifiers carried by embedded contract
calls: account addresses, token standards and hashes.

Addresses and token standards are rendered as bech32 strings
(``z1...`` and ``zts1...``); hashes are rendered as lowercase hex.
"""
import bech32

from znn_abi.exceptions import InvalidEncodingLength, InvalidLiteral, TypeMismatch
from znn_abi.utils import hex_to_bytes


class _FixedBytes:
    """Immutable wrapper around a fixed number of raw bytes."""

    __slots__ = ("_raw",)

    LENGTH: int

    def __init__(self, raw):
        if not isinstance(raw, (bytes, bytearray)):
            raise TypeMismatch(f"{type(self).__name__} requires bytes, got {type(raw).__name__}")
        if len(raw) != self.LENGTH:
            raise InvalidEncodingLength(
                f"{type(self).__name__} must be {self.LENGTH} bytes, got {len(raw)}"
            )
        object.__setattr__(self, "_raw", bytes(raw))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bytes__(self):
        return self._raw

    def __eq__(self, other):
        if type(other) is type(self):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self):
        return hash((type(self), self._raw))

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"


class _Bech32Identifier(_FixedBytes):
    __slots__ = ()

    HRP: str

    @classmethod
    def parse(cls, text: str):
        if not isinstance(text, str):
            raise TypeMismatch(f"{cls.__name__} text must be a string, got {type(text).__name__}")
        hrp, data = bech32.bech32_decode(text)
        if hrp is None or hrp != cls.HRP:
            raise InvalidLiteral(f"invalid {cls.__name__} string: {text!r}")
        raw = bech32.convertbits(data, 5, 8, False)
        if raw is None or len(raw) != cls.LENGTH:
            raise InvalidLiteral(f"invalid {cls.__name__} string: {text!r}")
        return cls(bytes(raw))

    def __str__(self):
        return bech32.bech32_encode(self.HRP, bech32.convertbits(self._raw, 8, 5))


class Address(_Bech32Identifier):
    __slots__ = ()

    LENGTH = 20
    HRP = "z"

    # first byte of the raw address tells user accounts and embedded contracts apart
    USER_BYTE = 0
    CONTRACT_BYTE = 1

    @property
    def is_embedded(self) -> bool:
        return self._raw[0] == self.CONTRACT_BYTE


class TokenStandard(_Bech32Identifier):
    __slots__ = ()

    LENGTH = 10
    HRP = "zts"


class Hash(_FixedBytes):
    __slots__ = ()

    LENGTH = 32

    @classmethod
    def parse(cls, text: str):
        if not isinstance(text, str):
            raise TypeMismatch(f"Hash text must be a string, got {type(text).__name__}")
        raw = hex_to_bytes(text.strip())
        if len(raw) != cls.LENGTH:
            raise InvalidEncodingLength(
                f"invalid hash string length: expected {cls.LENGTH * 2} hex digits, "
                f"got {len(raw) * 2}"
            )
        return cls(raw)

    def __str__(self):
        return self._raw.hex()
