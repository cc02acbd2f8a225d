"""
Length-prefixed encoding for variable-length byte strings and text:
``[32-byte length][data right-padded to a multiple of 32 bytes]``.
"""
from znn_abi.codec.scalars import _strict_slice, decode_uint, encode_uint
from znn_abi.exceptions import DecodeError, InsufficientBytes, TypeMismatch
from znn_abi.utils import WORD_SIZE, ceil32, hex_to_bytes


def encode_bytes(value) -> bytes:
    if isinstance(value, str):
        value = hex_to_bytes(value)
    if not isinstance(value, (bytes, bytearray)):
        raise TypeMismatch(f"unsupported value type for bytes encoding: {type(value).__name__}")

    data = bytes(value)
    return encode_uint(len(data)) + data.ljust(ceil32(len(data)), b"\x00")


def decode_bytes(payload, offset) -> bytes:
    length = decode_uint(payload, offset)
    try:
        return bytes(_strict_slice(payload, offset + WORD_SIZE, length))
    except InsufficientBytes as e:
        raise e.with_context("insufficient bytes for decoding bytes data") from None


def encode_string(value) -> bytes:
    if not isinstance(value, str):
        raise TypeMismatch(f"unsupported value type for string encoding: {type(value).__name__}")
    return encode_bytes(value.encode("utf-8"))


def decode_string(payload, offset) -> str:
    data = decode_bytes(payload, offset)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"string payload is not valid UTF-8: {e.reason}") from None
