import enum
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from znn_abi.abi_types import ABIType
from znn_abi.codec.arrays import decode_tuple, encode_tuple
from znn_abi.exceptions import ArityMismatch, InsufficientBytes
from znn_abi.settings import resolve_strict
from znn_abi.type_parser import parse_type
from znn_abi.utils import method_id, sha3_256
from znn_abi.warnings import MissingArguments, abi_warn

# length of the selector prefix of an encoded call
SELECTOR_LENGTH = 4


class EntryKind(enum.Enum):
    FUNCTION = "function"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Param:
    name: str
    type: ABIType
    indexed: bool = False

    @classmethod
    def from_type_name(cls, name: str, type_name: str) -> "Param":
        return cls(name=name, type=parse_type(type_name))


@dataclass(frozen=True)
class FunctionEntry:
    """
    A named function and its ordered parameters.

    The signature, fingerprint and selector are derived from the canonical
    type names of the inputs every time they are requested.
    """

    name: str
    inputs: Tuple[Param, ...] = ()
    kind: EntryKind = EntryKind.FUNCTION

    def __post_init__(self):
        # accept any sequence, but store a tuple so the entry stays immutable
        object.__setattr__(self, "inputs", tuple(self.inputs))

    @property
    def input_types(self) -> Tuple[ABIType, ...]:
        return tuple(p.type for p in self.inputs)

    def format_signature(self) -> str:
        type_names = ",".join(t.selector_name() for t in self.input_types)
        return f"{self.name}({type_names})"

    def fingerprint(self) -> bytes:
        return sha3_256(self.format_signature().encode("utf-8"))

    def selector(self) -> bytes:
        return method_id(self.format_signature())

    def _labels(self, params):
        return [f"argument {i} ({p.name or p.type})" for i, p in enumerate(params)]

    def encode_arguments(self, args: Sequence, *, strict: Optional[bool] = None) -> bytes:
        """
        Pack ``args`` into the head/tail layout: one 32-byte slot per
        parameter (offsets for dynamic parameters, counted from the start of
        the block) followed by the dynamic payloads.

        Fewer arguments than inputs leaves the trailing parameters out of the
        block; this raises ``ArityMismatch`` in strict mode and warns otherwise.
        """
        if len(args) > len(self.inputs):
            raise ArityMismatch(
                f"too many arguments for {self.format_signature()}: "
                f"got {len(args)}, expected {len(self.inputs)}"
            )
        if len(args) < len(self.inputs):
            msg = (
                f"too few arguments for {self.format_signature()}: "
                f"got {len(args)}, expected {len(self.inputs)}"
            )
            if resolve_strict(strict):
                raise ArityMismatch(msg)
            abi_warn(MissingArguments(msg))

        params = self.inputs[: len(args)]
        return encode_tuple([p.type for p in params], list(args), self._labels(params))

    def decode_arguments(self, data) -> list:
        return decode_tuple(list(self.input_types), data, 0, self._labels(self.inputs))

    def encode(self, args: Sequence, *, strict: Optional[bool] = None) -> bytes:
        return self.selector() + self.encode_arguments(args, strict=strict)

    def decode(self, data) -> list:
        if len(data) < SELECTOR_LENGTH:
            raise InsufficientBytes(f"encoded data too short: {len(data)} bytes")
        return self.decode_arguments(data[SELECTOR_LENGTH:])

    def __str__(self):
        return self.format_signature()
