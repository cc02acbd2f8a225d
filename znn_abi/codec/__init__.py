from znn_abi.abi_types import (
    ABI_Address,
    ABI_Bool,
    ABI_Bytes,
    ABI_Bytes32,
    ABI_DynamicArray,
    ABI_Function,
    ABI_GIntM,
    ABI_Hash,
    ABI_StaticArray,
    ABI_String,
    ABI_TokenStandard,
    ABIType,
)
from znn_abi.codec import arrays, dynamic, scalars
from znn_abi.exceptions import CodecPanic


def abi_encode(typ: ABIType, value) -> bytes:
    """
    Encode ``value`` as ``typ``.

    Static types produce exactly ``typ.static_size()`` bytes; dynamic types
    produce their full tail encoding (always a multiple of 32 bytes).
    """
    # subclasses (function, string) must be matched before their bases
    match typ:
        case ABI_GIntM(signed=True):
            return scalars.encode_int(value)
        case ABI_GIntM(signed=False):
            return scalars.encode_uint(value)
        case ABI_Bool():
            return scalars.encode_bool(value)
        case ABI_Address():
            return scalars.encode_address(value)
        case ABI_Hash():
            return scalars.encode_hash(value)
        case ABI_TokenStandard():
            return scalars.encode_token_standard(value)
        case ABI_Function():
            return scalars.encode_function(value)
        case ABI_Bytes32():
            return scalars.encode_bytes32(value)
        case ABI_String():
            return dynamic.encode_string(value)
        case ABI_Bytes():
            return dynamic.encode_bytes(value)
        case ABI_StaticArray():
            return arrays.encode_static_array(typ, value)
        case ABI_DynamicArray():
            return arrays.encode_dynamic_array(typ, value)

    raise CodecPanic(f"no encoder for {typ!r}")


def abi_decode(typ: ABIType, payload, offset: int = 0):
    """
    Decode a value of type ``typ`` whose encoding starts at ``offset``.
    """
    match typ:
        case ABI_GIntM(signed=True):
            return scalars.decode_int(payload, offset)
        case ABI_GIntM(signed=False):
            return scalars.decode_uint(payload, offset)
        case ABI_Bool():
            return scalars.decode_bool(payload, offset)
        case ABI_Address():
            return scalars.decode_address(payload, offset)
        case ABI_Hash():
            return scalars.decode_hash(payload, offset)
        case ABI_TokenStandard():
            return scalars.decode_token_standard(payload, offset)
        case ABI_Function():
            return scalars.decode_function(payload, offset)
        case ABI_Bytes32():
            return scalars.decode_bytes32(payload, offset)
        case ABI_String():
            return dynamic.decode_string(payload, offset)
        case ABI_Bytes():
            return dynamic.decode_bytes(payload, offset)
        case ABI_StaticArray():
            return arrays.decode_static_array(typ, payload, offset)
        case ABI_DynamicArray():
            return arrays.decode_dynamic_array(typ, payload, offset)

    raise CodecPanic(f"no decoder for {typ!r}")


__all__ = ["abi_encode", "abi_decode"]
