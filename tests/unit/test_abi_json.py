import json

import pytest

from znn_abi.abi import Abi
from znn_abi.exceptions import (
    InsufficientBytes,
    InvalidArrayType,
    InvalidSize,
    MalformedJson,
    MissingField,
    NoMatchingSignature,
    UnknownFunction,
    UnknownType,
    UnsupportedEntryType,
)
from znn_abi.function import FunctionEntry, Param
from znn_abi.warnings import DuplicateSelector

PLASMA_JSON = """
[
  {"type":"function","name":"Fuse","inputs":[{"name":"address","type":"address"}]},
  {"type":"function","name":"CancelFuse","inputs":[{"name":"id","type":"hash"}]}
]
"""


@pytest.fixture
def plasma():
    return Abi.from_json(PLASMA_JSON)


def test_from_json(plasma):
    assert len(plasma) == 2
    assert [str(e) for e in plasma] == ["Fuse(address)", "CancelFuse(hash)"]
    assert plasma.entries[0].inputs[0].name == "address"


def test_from_json_bytes():
    assert Abi.from_json(PLASMA_JSON.encode()) == Abi.from_json(PLASMA_JSON)


def test_from_entries(plasma):
    assert Abi.from_entries(plasma.entries) == plasma
    assert Abi() == Abi.from_json("[]")
    assert len(Abi()) == 0


def test_abi_is_immutable(plasma):
    with pytest.raises(AttributeError):
        plasma._entries = ()
    assert hash(plasma) == hash(Abi.from_json(PLASMA_JSON))


def test_inputs_optional():
    abi = Abi.from_json(
        '[{"type":"function","name":"A"},{"type":"function","name":"B","inputs":null}]'
    )
    assert [str(e) for e in abi] == ["A()", "B()"]


def test_input_name_optional():
    abi = Abi.from_json('[{"type":"function","name":"f","inputs":[{"type":"uint8"}]}]')
    assert abi.entries[0].inputs[0].name == ""


def test_extra_fields_ignored():
    abi = Abi.from_json(
        '[{"type":"function","name":"f","stateMutability":"view","outputs":[],'
        '"inputs":[{"name":"x","type":"bool","internalType":"bool"}]}]'
    )
    assert str(abi.entries[0]) == "f(bool)"


def test_get_function(plasma):
    assert plasma.get_function("CancelFuse").format_signature() == "CancelFuse(hash)"


def test_get_function_unknown(plasma):
    with pytest.raises(UnknownFunction) as e:
        plasma.get_function("Fusee")
    assert "Did you mean 'Fuse'?" in str(e.value)


def test_get_function_by_selector(plasma):
    assert plasma.get_function_by_selector(bytes.fromhex("5ac942e8")).name == "Fuse"
    # anything after the selector is ignored
    assert plasma.get_function_by_selector(bytes.fromhex("f9ca9dc3ffff")).name == "CancelFuse"
    with pytest.raises(NoMatchingSignature):
        plasma.get_function_by_selector(b"\x00\x00\x00\x00")


def test_encode_decode_function(plasma, user_address, word):
    data = plasma.encode_function("Fuse", [str(user_address)])
    assert data == bytes.fromhex("5ac942e8") + word(bytes(user_address).hex())
    assert plasma.decode_function(data) == [user_address]


def test_encode_unknown_function(plasma):
    with pytest.raises(UnknownFunction):
        plasma.encode_function("Burn", [])


@pytest.mark.parametrize("data", [b"", b"\x5a\xc9\x42"])
def test_decode_too_short(plasma, data):
    with pytest.raises(InsufficientBytes):
        plasma.decode_function(data)


def test_decode_unknown_selector(plasma):
    with pytest.raises(NoMatchingSignature):
        plasma.decode_function(b"\xde\xad\xbe\xef" + b"\x00" * 32)


def test_first_entry_wins():
    entries = [
        {"type": "function", "name": "f", "inputs": [{"name": "a", "type": "uint256"}]},
        {"type": "function", "name": "f", "inputs": [{"name": "b", "type": "uint256"}]},
    ]
    with pytest.warns(DuplicateSelector):
        abi = Abi.from_json(json.dumps(entries))

    assert abi.get_function("f").inputs[0].name == "a"
    data = abi.encode_function("f", [1])
    assert abi.get_function_by_selector(data).inputs[0].name == "a"


def test_overloads_by_name():
    entries = [
        {"type": "function", "name": "f", "inputs": [{"name": "a", "type": "uint256"}]},
        {"type": "function", "name": "f", "inputs": [{"name": "a", "type": "string"}]},
    ]
    abi = Abi.from_json(json.dumps(entries))
    # lookup by name always finds the first overload
    assert str(abi.get_function("f")) == "f(uint256)"
    # both are reachable by selector
    second = abi.entries[1]
    assert abi.decode_function(second.encode(["x"])) == ["x"]


def test_repr(plasma):
    assert repr(plasma) == "Abi(['Fuse(address)', 'CancelFuse(hash)'])"


malformed_cases = [
    ("", MalformedJson),
    ("{", MalformedJson),
    ('{"type":"function","name":"f"}', MalformedJson),
    ("42", MalformedJson),
    ("[42]", MalformedJson),
    ('[{"type":"function"}]', MissingField),
    ('[{"type":"function","name":7}]', MissingField),
    ('[{"name":"f"}]', MissingField),
    ('[{"name":"f","type":1}]', MissingField),
    ('[{"type":"event","name":"Transfer"}]', UnsupportedEntryType),
    ('[{"type":"constructor","name":""}]', UnsupportedEntryType),
    ('[{"type":"function","name":"f","inputs":{}}]', MalformedJson),
    ('[{"type":"function","name":"f","inputs":["uint256"]}]', MalformedJson),
    ('[{"type":"function","name":"f","inputs":[{"name":"a"}]}]', MissingField),
    ('[{"type":"function","name":"f","inputs":[{"name":"a","type":"uint7"}]}]', InvalidSize),
    ('[{"type":"function","name":"f","inputs":[{"name":"a","type":"foo"}]}]', UnknownType),
    ('[{"type":"function","name":"f","inputs":[{"name":"a","type":"uint[0]"}]}]', InvalidArrayType),
]


@pytest.mark.parametrize("text,exc", malformed_cases)
def test_malformed_json(text, exc):
    with pytest.raises(exc):
        Abi.from_json(text)


def test_from_json_non_text():
    with pytest.raises(MalformedJson):
        Abi.from_json(None)


def test_type_error_context():
    with pytest.raises(UnknownType) as e:
        Abi.from_json('[{"type":"function","name":"f","inputs":[{"name":"a","type":"foo"}]}]')
    assert str(e.value).startswith("entry 0 (f), param 'a': unknown type: foo")


def test_abi_holds_function_entries(plasma):
    assert plasma.entries[1] == FunctionEntry("CancelFuse", [Param.from_type_name("id", "hash")])


def test_from_entries_warns_on_duplicate_selector():
    entry = FunctionEntry("f", [Param.from_type_name("a", "uint256")])
    twin = FunctionEntry("f", [Param.from_type_name("b", "uint")])
    with pytest.warns(DuplicateSelector):
        abi = Abi.from_entries([entry, twin])
    assert abi.get_function_by_selector(twin.selector()) is abi.entries[0]
