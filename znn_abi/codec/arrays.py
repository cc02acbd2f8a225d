"""
Tuple-style encoding shared by arrays and function arguments.

A tuple is a "head" holding one slot per member (the value itself for
static members, an offset for dynamic ones) followed by a "tail" holding the
payloads of the dynamic members in order. Offsets are measured from the
start of the tuple's own encoding.
"""
from typing import Optional, Sequence

from znn_abi.abi_types import ABI_DynamicArray, ABI_StaticArray, ABIType
from znn_abi.codec.scalars import decode_uint, encode_uint
from znn_abi.exceptions import AbiException, ArityMismatch, InsufficientBytes, TypeMismatch
from znn_abi.utils import WORD_SIZE, ceil32


def _labels(types, labels):
    if labels is None:
        return [f"element {i}" for i in range(len(types))]
    return labels


def encode_tuple(
    types: Sequence[ABIType], values: Sequence, labels: Optional[Sequence[str]] = None
) -> bytes:
    # circular: the element encoder dispatches back into this module
    from znn_abi.codec import abi_encode

    assert len(types) == len(values)  # sanity, callers check arity
    labels = _labels(types, labels)

    heads = []
    tails = []
    dyn_ofst = sum(t.embedded_static_size() for t in types)

    for typ, value, label in zip(types, values, labels):
        try:
            encoded = abi_encode(typ, value)
        except AbiException as e:
            raise e.with_context(label) from None

        if typ.is_dynamic():
            heads.append(encode_uint(dyn_ofst))
            tails.append(encoded)
            dyn_ofst += ceil32(len(encoded))
        else:
            heads.append(encoded)

    return b"".join(heads + tails)


def decode_tuple(
    types: Sequence[ABIType], payload, outer_offset: int, labels: Optional[Sequence[str]] = None
) -> list:
    from znn_abi.codec import abi_decode

    labels = _labels(types, labels)

    ret = []
    static_ofst = outer_offset

    for sub_t, label in zip(types, labels):
        try:
            if sub_t.is_dynamic():
                # the head slot holds the offset of the tail
                head = decode_uint(payload, static_ofst)
                ofst = outer_offset + head
            else:
                ofst = static_ofst

            ret.append(abi_decode(sub_t, payload, ofst))
        except AbiException as e:
            raise e.with_context(label) from None

        static_ofst += sub_t.embedded_static_size()

    return ret


def _as_sequence(typ, value) -> Sequence:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatch(
            f"unsupported value type for {typ.selector_name()} encoding: "
            f"{type(value).__name__} (expected list or tuple)"
        )
    return value


def encode_static_array(typ: ABI_StaticArray, value) -> bytes:
    values = _as_sequence(typ, value)
    if len(values) != typ.m_elems:
        raise ArityMismatch(
            f"array size mismatch: got {len(values)} elements, expected {typ.m_elems}"
        )
    return encode_tuple([typ.subtyp] * typ.m_elems, values)


def decode_static_array(typ: ABI_StaticArray, payload, offset) -> list:
    return decode_tuple([typ.subtyp] * typ.m_elems, payload, offset)


def encode_dynamic_array(typ: ABI_DynamicArray, value) -> bytes:
    values = _as_sequence(typ, value)
    return encode_uint(len(values)) + encode_tuple([typ.subtyp] * len(values), values)


def decode_dynamic_array(typ: ABI_DynamicArray, payload, offset) -> list:
    n = decode_uint(payload, offset)

    # offsets in a dynamic array start from after the length word
    offset += WORD_SIZE

    # every element needs at least its head slot
    if n * typ.subtyp.embedded_static_size() > len(payload) - offset:
        raise InsufficientBytes(
            f"array length {n} exceeds the {len(payload) - offset} remaining bytes"
        )

    return decode_tuple([typ.subtyp] * n, payload, offset)
