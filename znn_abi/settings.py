import dataclasses
import os
from dataclasses import dataclass
from typing import Optional

ZNN_ABI_STRICT_ARITY = os.environ.get("ZNN_ABI_STRICT_ARITY", "0") == "1"

ZNN_ABI_WARNINGS: Optional[str] = os.environ.get("ZNN_ABI_WARNINGS") or None

VALID_WARNINGS_CONTROL = ("error", "none")


@dataclass(frozen=True)
class Settings:
    # raise instead of warning when a call has fewer arguments than inputs
    strict_arity: bool = False
    # one of VALID_WARNINGS_CONTROL, or None for python's default handling
    warnings_control: Optional[str] = None

    def __post_init__(self):
        # sanity check inputs
        assert isinstance(self.strict_arity, bool)
        control = self.warnings_control
        if control is not None and control not in VALID_WARNINGS_CONTROL:
            raise ValueError(f"unrecognized warnings control: {self.warnings_control}")

    @classmethod
    def from_env(cls):
        return cls(strict_arity=ZNN_ABI_STRICT_ARITY, warnings_control=ZNN_ABI_WARNINGS)

    def as_dict(self):
        ret = dataclasses.asdict(self)
        return {k: v for (k, v) in ret.items() if v is not None}

    @classmethod
    def from_dict(cls, data):
        return cls(**data)


DEFAULT_SETTINGS = Settings.from_env()


def resolve_strict(strict: Optional[bool]) -> bool:
    if strict is None:
        return DEFAULT_SETTINGS.strict_arity
    return strict
