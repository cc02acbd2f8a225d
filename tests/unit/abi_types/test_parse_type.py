import pytest

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
)
from znn_abi.exceptions import InvalidArrayType, InvalidSize, TypeParseError, UnknownType
from znn_abi.type_parser import parse_type

valid_types = [
    ("bool", ABI_Bool()),
    ("address", ABI_Address()),
    ("hash", ABI_Hash()),
    ("tokenStandard", ABI_TokenStandard()),
    ("bytes32", ABI_Bytes32()),
    ("function", ABI_Function()),
    ("bytes", ABI_Bytes()),
    ("string", ABI_String()),
    ("int8", ABI_Int(8)),
    ("int64", ABI_Int(64)),
    ("int256", ABI_Int(256)),
    ("uint8", ABI_UInt(8)),
    ("uint32", ABI_UInt(32)),
    ("uint256", ABI_UInt(256)),
    ("address[]", ABI_DynamicArray(ABI_Address())),
    ("uint256[3]", ABI_StaticArray(ABI_UInt(), 3)),
    ("string[][2]", ABI_StaticArray(ABI_DynamicArray(ABI_String()), 2)),
    ("uint32[2][]", ABI_DynamicArray(ABI_StaticArray(ABI_UInt(32), 2))),
    ("hash[1][2][3]", ABI_StaticArray(ABI_StaticArray(ABI_StaticArray(ABI_Hash(), 1), 2), 3)),
]


@pytest.mark.parametrize("type_str,expected", valid_types)
def test_parse_type(type_str, expected):
    typ = parse_type(type_str)
    assert typ == expected
    assert type(typ) is type(expected)
    # canonical names reproduce the input
    assert typ.selector_name() == type_str


@pytest.mark.parametrize("type_str,canonical", [("int", "int256"), ("uint", "uint256")])
def test_integer_aliases(type_str, canonical):
    assert parse_type(type_str).selector_name() == canonical
    assert parse_type(f"{type_str}[]").selector_name() == f"{canonical}[]"


def test_last_bracket_is_outer_dimension():
    typ = parse_type("string[][2]")
    assert isinstance(typ, ABI_StaticArray)
    assert typ.m_elems == 2
    assert isinstance(typ.subtyp, ABI_DynamicArray)


def test_parse_type_is_cached():
    assert parse_type("uint64[4]") is parse_type("uint64[4]")


invalid_types = [
    ("uint7", InvalidSize),
    ("uint0", InvalidSize),
    ("int264", InvalidSize),
    ("uint512", InvalidSize),
    ("int4[]", InvalidSize),
    ("foo", UnknownType),
    ("", UnknownType),
    ("Uint256", UnknownType),
    ("uint256x", UnknownType),
    ("uint 8", UnknownType),
    ("int-8", UnknownType),
    ("bytes16", UnknownType),
    ("fixed128x18", UnknownType),
    ("tuple", UnknownType),
    ("uint256[0]", InvalidArrayType),
    ("uint256[", InvalidArrayType),
    ("uint256]", InvalidArrayType),
    ("[3]", InvalidArrayType),
    ("uint256[abc]", InvalidArrayType),
    ("uint256[-1]", InvalidArrayType),
    ("uint256[0x2]", InvalidArrayType),
    ("uint256[ 2]", InvalidArrayType),
    ("uint256[2]x", InvalidArrayType),
    ("uint256[[2]]", InvalidArrayType),
]


@pytest.mark.parametrize("type_str,exc", invalid_types)
def test_parse_invalid_type(type_str, exc):
    with pytest.raises(exc):
        parse_type(type_str)


@pytest.mark.parametrize("bad_input", [None, 256, b"uint256"])
def test_parse_non_string(bad_input):
    with pytest.raises(UnknownType):
        parse_type(bad_input)


def test_unknown_type_suggestion():
    with pytest.raises(UnknownType) as e:
        parse_type("unit256")

    assert "Did you mean" in str(e.value)
    assert "'uint256'" in str(e.value)


def test_type_parse_errors_share_a_base():
    for type_str in ("uint7", "foo", "uint256[0]"):
        with pytest.raises(TypeParseError):
            parse_type(type_str)


def test_cached_types_cannot_be_modified():
    typ = parse_type("uint256")
    with pytest.raises(AttributeError):
        typ.extra = 1
    assert not hasattr(parse_type("uint256"), "extra")


@pytest.mark.parametrize("bad_input", [["uint256"], {"type": "uint256"}])
def test_parse_unhashable_input(bad_input):
    with pytest.raises(UnknownType):
        parse_type(bad_input)
