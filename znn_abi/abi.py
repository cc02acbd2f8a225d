import json
from typing import Iterable, Optional, Sequence, Tuple

from znn_abi.exceptions import (
    InsufficientBytes,
    MalformedJson,
    MissingField,
    NoMatchingSignature,
    TypeParseError,
    UnknownFunction,
    UnsupportedEntryType,
)
from znn_abi.function import SELECTOR_LENGTH, EntryKind, FunctionEntry, Param
from znn_abi.utils import get_levenshtein_error_suggestions
from znn_abi.warnings import DuplicateSelector, abi_warn


class Abi:
    """
    An ordered, immutable collection of function entries.

    Lookups scan the entries in order and the first match wins, both by
    name (``encode_function``) and by selector (``decode_function``).
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[FunctionEntry] = ()):
        object.__setattr__(self, "_entries", tuple(entries))

    def __setattr__(self, name, value):
        raise AttributeError("Abi is immutable")

    @property
    def entries(self) -> Tuple[FunctionEntry, ...]:
        return self._entries

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other):
        if isinstance(other, Abi):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return f"Abi({[str(e) for e in self._entries]})"

    @classmethod
    def from_entries(cls, entries: Iterable[FunctionEntry]) -> "Abi":
        ret = cls(entries)
        ret._check_selectors()
        return ret

    @classmethod
    def from_json(cls, text) -> "Abi":
        """
        Generate an ``Abi`` from a JSON ABI description.

        Arguments
        ---------
        text : str | bytes
            A JSON array of function objects, each with a ``name``, a
            ``type`` of ``"function"`` and an optional ``inputs`` list of
            ``{"name": ..., "type": ...}`` objects.

        Returns
        -------
        Abi object.
        """
        try:
            raw_entries = json.loads(text)
        except (TypeError, ValueError) as e:
            raise MalformedJson(f"failed to parse JSON: {e}") from None

        if not isinstance(raw_entries, list):
            raise MalformedJson(
                f"ABI must be a JSON array of entries, got {type(raw_entries).__name__}"
            )

        ret = cls(_entry_from_json(i, raw) for i, raw in enumerate(raw_entries))
        ret._check_selectors()
        return ret

    def _check_selectors(self):
        seen = {}
        for entry in self._entries:
            selector = entry.selector()
            if selector in seen:
                abi_warn(
                    DuplicateSelector(
                        f"{entry} shares selector 0x{selector.hex()} with {seen[selector]}, "
                        "it can never be decoded"
                    )
                )
            else:
                seen[selector] = entry

    def get_function(self, name: str) -> FunctionEntry:
        for entry in self._entries:
            if entry.name == name:
                return entry

        names = [e.name for e in self._entries]
        raise UnknownFunction(
            f"function '{name}' not found in ABI",
            hint=lambda: get_levenshtein_error_suggestions(name, names, 0.3) or None,
        )

    def get_function_by_selector(self, selector: bytes) -> FunctionEntry:
        selector = bytes(selector[:SELECTOR_LENGTH])
        for entry in self._entries:
            if entry.selector() == selector:
                return entry

        raise NoMatchingSignature(f"no matching function found for signature: {selector.hex()}")

    def encode_function(self, name: str, args: Sequence, *, strict: Optional[bool] = None) -> bytes:
        return self.get_function(name).encode(args, strict=strict)

    def decode_function(self, data) -> list:
        if len(data) < SELECTOR_LENGTH:
            raise InsufficientBytes(f"encoded data too short: {len(data)} bytes")
        return self.get_function_by_selector(data[:SELECTOR_LENGTH]).decode(data)


def _entry_from_json(index, raw) -> FunctionEntry:
    if not isinstance(raw, dict):
        raise MalformedJson(f"entry {index}: expected an object, got {json.dumps(raw)}")

    name = raw.get("name")
    if not isinstance(name, str):
        raise MissingField(f"entry {index}: missing 'name' field")

    entry_type = raw.get("type")
    if not isinstance(entry_type, str):
        raise MissingField(f"entry {index} ({name}): missing 'type' field")
    if entry_type != EntryKind.FUNCTION.value:
        raise UnsupportedEntryType(
            f"entry {index} ({name}): only ABI functions are supported, got '{entry_type}'"
        )

    raw_inputs = raw.get("inputs")
    if raw_inputs is None:
        raw_inputs = []
    if not isinstance(raw_inputs, list):
        raise MalformedJson(f"entry {index} ({name}): 'inputs' must be a list")

    inputs = []
    for raw_input in raw_inputs:
        if not isinstance(raw_input, dict):
            raise MalformedJson(f"entry {index} ({name}): invalid input format")

        param_name = raw_input.get("name")
        if not isinstance(param_name, str):
            param_name = ""

        param_type = raw_input.get("type")
        if not isinstance(param_type, str):
            raise MissingField(f"entry {index} ({name}): input missing 'type' field")

        try:
            inputs.append(Param.from_type_name(param_name, param_type))
        except TypeParseError as e:
            raise e.with_context(f"entry {index} ({name}), param '{param_name}'") from None

    return FunctionEntry(name, tuple(inputs), EntryKind.FUNCTION)
