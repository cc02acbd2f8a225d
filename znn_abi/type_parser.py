import functools

from znn_abi.abi_types import (
    ABI_Address,
    ABI_Bool,
    ABI_Bytes,
    ABI_Bytes32,
    ABI_DynamicArray,
    ABI_Function,
    ABI_Hash,
    ABI_Int,
    ABI_StaticArray,
    ABI_String,
    ABI_TokenStandard,
    ABI_UInt,
    ABIType,
)
from znn_abi.exceptions import InvalidArrayType, UnknownType
from znn_abi.utils import get_levenshtein_error_suggestions

KEYWORD_TYPES = {
    "bool": ABI_Bool,
    "address": ABI_Address,
    "hash": ABI_Hash,
    "bytes32": ABI_Bytes32,
    "tokenStandard": ABI_TokenStandard,
    "bytes": ABI_Bytes,
    "string": ABI_String,
    "function": ABI_Function,
}


def _known_type_names():
    return [*KEYWORD_TYPES, "int", "uint", "int256", "uint256"]


def parse_type(type_str: str) -> ABIType:
    """
    Parse an ABI type name such as ``"uint256"``, ``"address[3]"`` or
    ``"string[][2]"`` into an ``ABIType``.

    Array suffixes are stripped one bracket pair at a time from the right,
    so the last pair is the outermost dimension and the canonical name of
    the result reproduces the input.
    """
    if not isinstance(type_str, str):
        raise UnknownType(f"type name must be a string, got {type(type_str).__name__}")

    return _parse_type(type_str)


@functools.lru_cache(maxsize=256)
def _parse_type(type_str: str) -> ABIType:
    if type_str.endswith("]"):
        return _parse_array(type_str)
    if "[" in type_str or "]" in type_str:
        raise InvalidArrayType(f"invalid array type: {type_str}")

    return _parse_base(type_str)


def _parse_array(type_str: str) -> ABIType:
    idx = type_str.rfind("[")
    if idx <= 0:
        raise InvalidArrayType(f"invalid array type: {type_str}")

    size_str = type_str[idx + 1 : -1]
    subtyp = _parse_type(type_str[:idx])

    if size_str == "":
        return ABI_DynamicArray(subtyp)

    # only plain decimal digits, so "0x3", "+3" or " 3" are rejected
    if not (size_str.isascii() and size_str.isdigit()):
        raise InvalidArrayType(f"invalid array size: {size_str!r} in {type_str}")

    return ABI_StaticArray(subtyp, int(size_str))


def _parse_base(type_str: str) -> ABIType:
    if type_str in KEYWORD_TYPES:
        return KEYWORD_TYPES[type_str]()

    for prefix, ctor in (("int", ABI_Int), ("uint", ABI_UInt)):
        if not type_str.startswith(prefix):
            continue
        bits_str = type_str[len(prefix) :]
        if bits_str == "":
            return ctor(256)
        if bits_str.isascii() and bits_str.isdigit():
            return ctor(int(bits_str))

    raise UnknownType(
        f"unknown type: {type_str}",
        hint=lambda: get_levenshtein_error_suggestions(type_str, _known_type_names(), 0.3)
        or None,
    )
