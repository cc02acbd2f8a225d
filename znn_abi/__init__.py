from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _version

from znn_abi.abi import Abi
from znn_abi.builtin_contracts import load_builtin_abi
from znn_abi.codec import abi_decode, abi_encode
from znn_abi.function import EntryKind, FunctionEntry, Param
from znn_abi.primitives import Address, Hash, TokenStandard
from znn_abi.type_parser import parse_type

__version__: str
try:
    __version__ = _version("znn-abi")
except PackageNotFoundError:
    from znn_abi.version import version

    __version__ = version

__all__ = [
    "Abi",
    "Address",
    "EntryKind",
    "FunctionEntry",
    "Hash",
    "Param",
    "TokenStandard",
    "abi_decode",
    "abi_encode",
    "load_builtin_abi",
    "parse_type",
]
