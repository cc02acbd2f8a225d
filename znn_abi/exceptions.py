import copy


class _BaseAbiException(Exception):
    """
    Base znn-abi exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to share message and hint formatting.
    """

    def __init__(self, message="Error Message not found.", *, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        hint : str | Callable[[], str], optional
            Additional help displayed after the message. May be a callable,
            in which case it is only evaluated when the message is rendered.
        """
        super().__init__(message)
        self._message = message
        self._hint = hint

    def with_context(self, context):
        """
        Creates a copy of this exception whose message is prefixed by
        ``context`` (e.g. the argument or element that failed).

        Returns
        -------
        A copy of the exception with the new message applied.
        """
        exc = copy.copy(self)
        exc._message = f"{context}: {self._message}"
        exc.args = (exc._message,)
        return exc

    @property
    def hint(self):
        # some hints are expensive to compute, so we wait until the last
        # minute when the formatted message is actually requested to compute
        # them.
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        if self.hint:
            msg += f"\n\n  (hint: {self.hint})"
        return msg

    def __str__(self):
        return self.message


class AbiException(_BaseAbiException):
    pass


class TypeParseError(AbiException):
    """A type name could not be turned into an ABI type."""


class UnknownType(TypeParseError):
    """Reference to a type that does not exist."""


class InvalidSize(TypeParseError):
    """Integer width outside of 8..256 or not a multiple of 8."""


class InvalidArrayType(TypeParseError):
    """Malformed array suffix, or a static array of size zero."""


class EncodeError(AbiException):
    """A Python value could not be encoded."""


class ArityMismatch(EncodeError):
    """Wrong element count for a fixed array, or wrong argument count for a function."""


class NegativeValueForUnsigned(EncodeError):
    """Attempt to encode a negative value as an unsigned integer."""


class InvalidEncodingLength(EncodeError):
    """A fixed-width payload has the wrong length."""


class TypeMismatch(EncodeError):
    """The Python value is of a kind the ABI type cannot encode."""


class InvalidLiteral(EncodeError):
    """Invalid literal value (numeric string, hex string or identifier text)."""


class DecodeError(AbiException):
    """An encoded payload could not be decoded."""


class InsufficientBytes(DecodeError):
    """The buffer is shorter than required at a given offset."""


class LookupFailure(AbiException):
    """A lookup in an ABI container failed."""


class UnknownFunction(LookupFailure):
    """No entry with the requested name."""


class NoMatchingSignature(LookupFailure):
    """No entry whose selector matches the payload."""


class UnknownContract(LookupFailure):
    """No built-in contract definition with the requested name."""


class MalformedJson(AbiException):
    """Invalid ABI JSON description."""


class MissingField(MalformedJson):
    """A required field is absent from an ABI JSON entry."""


class UnsupportedEntryType(MalformedJson):
    """An ABI JSON entry has a type other than ``function``."""


class UnimplementedException(AbiException):
    """Some feature is known to be not implemented"""


class AbiInternalException(_BaseAbiException):
    """
    Base znn-abi internal exception class.

    This exception is not raised directly, it is subclassed by other internal
    exceptions.

    Internal exceptions are raised as a means of telling the user that the
    codec has panicked, and that filing a bug report would be appropriate.
    """

    def __str__(self):
        return (
            f"{super().__str__()}\n\n"
            "This is an unhandled internal codec error. "
            "Please create an issue to notify the developers!"
        )


class CodecPanic(AbiInternalException):
    """An ABI type reached a dispatch branch that should be unreachable."""
