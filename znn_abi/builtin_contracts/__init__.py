"""
ABI definitions of the protocol-level (embedded) contracts.

Definitions ship as JSON files next to this module and are only parsed when
requested through ``load_builtin_abi``.
"""
import functools
from importlib import resources
from typing import List

from znn_abi.abi import Abi
from znn_abi.exceptions import UnknownContract
from znn_abi.utils import get_levenshtein_error_suggestions


def get_builtin_contracts() -> List[str]:
    files = resources.files(__name__).iterdir()
    return sorted(f.name[: -len(".json")] for f in files if f.name.endswith(".json"))


def get_builtin_definition(name: str) -> str:
    contracts = get_builtin_contracts()
    key = name.lower()
    if key not in contracts:
        raise UnknownContract(
            f"unknown embedded contract: {name}",
            hint=lambda: get_levenshtein_error_suggestions(key, contracts, 0.5) or None,
        )
    return resources.files(__name__).joinpath(f"{key}.json").read_text(encoding="utf-8")


@functools.lru_cache(maxsize=None)
def load_builtin_abi(name: str) -> Abi:
    return Abi.from_json(get_builtin_definition(name))
