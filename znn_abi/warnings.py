import contextlib
import warnings
from typing import Optional

from znn_abi.exceptions import _BaseAbiException


class AbiWarning(_BaseAbiException, Warning):
    pass


# print a warning
def abi_warn(warning: AbiWarning | str):
    if isinstance(warning, str):
        warning = AbiWarning(warning)
    warnings.warn(warning, stacklevel=3)


@contextlib.contextmanager
def warnings_filter(warnings_control: Optional[str]):
    # note: using warnings.catch_warnings() since it saves and restores
    # the warnings filter
    with warnings.catch_warnings():
        set_warnings_filter(warnings_control)
        yield


def set_warnings_filter(warnings_control: Optional[str]):
    if warnings_control == "error":
        warnings_filter = "error"
    elif warnings_control == "none":
        warnings_filter = "ignore"
    else:
        assert warnings_control is None  # sanity
        warnings_filter = "default"

    if warnings_control is not None:
        # warnings.simplefilter only adds to the warnings filters,
        # so we should clear warnings filter between calls to simplefilter()
        warnings.resetwarnings()

    warnings.simplefilter(warnings_filter, category=AbiWarning)  # type: ignore[arg-type]


class MissingArguments(AbiWarning):
    """
    Warn when a call is encoded with fewer arguments than the function declares;
    the trailing parameters are left out of the payload
    """

    pass


class DuplicateSelector(AbiWarning):
    """
    Warn when two entries of one ABI share a selector; only the first one
    can ever be matched when decoding
    """

    pass
