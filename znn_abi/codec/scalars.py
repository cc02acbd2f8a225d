"""
Encoders and decoders for values that occupy exactly one 32-byte word.
"""
from znn_abi.exceptions import (
    InsufficientBytes,
    InvalidEncodingLength,
    InvalidLiteral,
    NegativeValueForUnsigned,
    TypeMismatch,
    UnimplementedException,
)
from znn_abi.primitives import Address, Hash, TokenStandard
from znn_abi.utils import WORD_SIZE, hex_to_bytes, signed_to_unsigned, unsigned_to_signed

_HEX_LETTERS = frozenset("abcdef")


def _strict_slice(payload, start, length):
    if start < 0:
        raise InsufficientBytes(f"OOB {start}")

    end = start + length
    if end > len(payload):
        raise InsufficientBytes(f"OOB {start} + {length} (=={end}) > {len(payload)}")
    return payload[start:end]


def read_word(payload, offset) -> bytes:
    return bytes(_strict_slice(payload, offset, WORD_SIZE))


def coerce_int(value) -> int:
    """
    Convert the accepted Python representations of a number to ``int``.

    Strings are decimal unless they carry a ``0x`` prefix or contain one
    of the letters a-f, in which case they are read as base 16. Bytes are
    read as a big-endian magnitude.
    """
    # bool is an int subclass, but True is not a number we want to guess at
    if isinstance(value, bool):
        raise TypeMismatch("unsupported value type for numeric encoding: bool")

    if isinstance(value, int):
        return value

    if isinstance(value, str):
        s = value.strip().lower()
        radix = 10
        if s.startswith("0x"):
            s = s[2:]
            radix = 16
        elif _HEX_LETTERS.intersection(s):
            radix = 16
        # int() would otherwise accept "1_000", a second "0x" prefix and non-ascii digits
        if s == "" or "_" in s or "x" in s or not s.isascii():
            raise InvalidLiteral(f"invalid numeric string: {value!r}")
        try:
            return int(s, radix)
        except ValueError:
            raise InvalidLiteral(f"invalid numeric string: {value!r}") from None

    if isinstance(value, (bytes, bytearray)):
        return int.from_bytes(value, "big")

    raise TypeMismatch(f"unsupported value type for numeric encoding: {type(value).__name__}")


# signed integers

def encode_int(value) -> bytes:
    # two's complement, truncated to the low 256 bits
    return signed_to_unsigned(coerce_int(value), 256).to_bytes(WORD_SIZE, "big")


def decode_int(payload, offset) -> int:
    return unsigned_to_signed(decode_uint(payload, offset), 256)


# unsigned integers

def encode_uint(value) -> bytes:
    int_ = coerce_int(value)
    if int_ < 0:
        raise NegativeValueForUnsigned(f"cannot encode negative value as unsigned integer: {int_}")
    return signed_to_unsigned(int_, 256).to_bytes(WORD_SIZE, "big")


def decode_uint(payload, offset) -> int:
    return int.from_bytes(read_word(payload, offset), "big")


# booleans

def encode_bool(value) -> bytes:
    if isinstance(value, bool):
        flag = value
    elif isinstance(value, str):
        flag = value.strip().lower() in ("true", "1")
    elif isinstance(value, int):
        flag = value != 0
    else:
        raise TypeMismatch(f"unsupported value type for boolean encoding: {type(value).__name__}")
    return encode_int(1 if flag else 0)


def decode_bool(payload, offset) -> bool:
    return decode_int(payload, offset) != 0


# fixed-width identifiers, left-padded to a full word

def _left_pad(raw: bytes) -> bytes:
    return raw.rjust(WORD_SIZE, b"\x00")


def encode_address(value) -> bytes:
    if isinstance(value, str):
        value = Address.parse(value)
    if not isinstance(value, Address):
        raise TypeMismatch(f"unsupported value type for address encoding: {type(value).__name__}")
    return _left_pad(bytes(value))


def decode_address(payload, offset) -> Address:
    return Address(read_word(payload, offset)[WORD_SIZE - Address.LENGTH :])


def encode_hash(value) -> bytes:
    if isinstance(value, str):
        value = Hash.parse(value)
    elif isinstance(value, (bytes, bytearray)):
        value = Hash(bytes(value))
    if not isinstance(value, Hash):
        raise TypeMismatch(f"unsupported value type for hash encoding: {type(value).__name__}")
    return bytes(value)


def decode_hash(payload, offset) -> Hash:
    return Hash(read_word(payload, offset))


def encode_token_standard(value) -> bytes:
    if isinstance(value, str):
        value = TokenStandard.parse(value)
    if not isinstance(value, TokenStandard):
        raise TypeMismatch(
            f"unsupported value type for token standard encoding: {type(value).__name__}"
        )
    return _left_pad(bytes(value))


def decode_token_standard(payload, offset) -> TokenStandard:
    return TokenStandard(read_word(payload, offset)[WORD_SIZE - TokenStandard.LENGTH :])


# raw words

def encode_bytes32(value) -> bytes:
    if isinstance(value, str):
        digits = value[2:] if value[:2] in ("0x", "0X") else value
        if len(digits) != 64:
            raise InvalidEncodingLength(
                f"invalid hex string length: expected 64 chars, got {len(digits)}"
            )
        return hex_to_bytes(digits)

    if isinstance(value, (bytes, bytearray)):
        if len(value) > WORD_SIZE:
            raise InvalidEncodingLength(
                f"byte string too long: expected max {WORD_SIZE} bytes, got {len(value)}"
            )
        return bytes(value).ljust(WORD_SIZE, b"\x00")

    if isinstance(value, int) and not isinstance(value, bool):
        return encode_int(value)

    raise TypeMismatch(f"unsupported value type for bytes32 encoding: {type(value).__name__}")


def decode_bytes32(payload, offset) -> bytes:
    return read_word(payload, offset)


FUNCTION_SELECTOR_LENGTH = 24


def encode_function(value) -> bytes:
    if isinstance(value, str):
        value = hex_to_bytes(value)
    if not isinstance(value, (bytes, bytearray)):
        raise TypeMismatch(f"unsupported value type for function encoding: {type(value).__name__}")
    if len(value) != FUNCTION_SELECTOR_LENGTH:
        raise InvalidEncodingLength(
            f"function selector must be {FUNCTION_SELECTOR_LENGTH} bytes, got {len(value)}"
        )
    return encode_bytes32(bytes(value))


def decode_function(payload, offset):
    # no decoding scheme is defined for function selectors
    raise UnimplementedException("decoding of function selectors is not supported")
