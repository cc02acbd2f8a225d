from znn_abi.exceptions import InvalidArrayType, InvalidSize

# Every ABI type is an immutable value: equality and hashing are structural,
# so parsed types can be memoized and shared between threads.


class _FrozenOnInit(type):
    # instances refuse any attribute change once the constructor returns
    def __call__(cls, *args, **kwargs):
        obj = super().__call__(*args, **kwargs)
        object.__setattr__(obj, "_frozen", True)
        return obj


class ABIType(metaclass=_FrozenOnInit):
    _frozen = False

    # aka has tail
    def is_dynamic(self):
        raise NotImplementedError("ABIType.is_dynamic")

    # size (in bytes) in the static section (aka 'head')
    # when embedded in a complex type.
    def embedded_static_size(self):
        if self.is_dynamic():
            return 32
        return self.static_size()

    # size (in bytes) of the static section
    def static_size(self):
        raise NotImplementedError("ABIType.static_size")

    # The canonical name of the type for calculating the function selector
    def selector_name(self):
        raise NotImplementedError("ABIType.selector_name")

    def _fields(self):
        return {k: v for (k, v) in vars(self).items() if k != "_frozen"}

    def _key(self):
        return tuple(sorted(self._fields().items()))

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError(f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        return type(self) is type(other) and self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __str__(self):
        return self.selector_name()

    def __repr__(self):
        return str({type(self).__name__: self._fields()})


class _ABI_Word(ABIType):
    """A static type occupying exactly one 32-byte word."""

    def is_dynamic(self):
        return False

    def static_size(self):
        return 32


# int<M>: two's complement signed integer type of M bits, 8 <= M <= 256, M % 8 == 0.
# uint<M>: unsigned variant of int<M>.
# int, uint: synonyms for int256, uint256.
class ABI_GIntM(_ABI_Word):
    def __init__(self, m_bits, signed):
        if not (8 <= m_bits <= 256 and 0 == m_bits % 8):
            raise InvalidSize(
                f"invalid integer size: {m_bits} (must be 8-256 in increments of 8)"
            )

        self.m_bits = m_bits
        self.signed = signed

    def selector_name(self):
        return ("" if self.signed else "u") + f"int{self.m_bits}"


class ABI_Int(ABI_GIntM):
    def __init__(self, m_bits=256):
        super().__init__(m_bits, True)


class ABI_UInt(ABI_GIntM):
    def __init__(self, m_bits=256):
        super().__init__(m_bits, False)


# bool: encoded exactly like int256 restricted to the values 0 and 1.
class ABI_Bool(_ABI_Word):
    def selector_name(self):
        return "bool"


# identifiers: a fixed number of raw bytes, left-padded with zeroes to
# fill the word.
class _ABI_Identifier(_ABI_Word):
    m_bytes: int


# address: 20 bytes (1 byte kind + 19 bytes core), bech32 with the "z" prefix.
class ABI_Address(_ABI_Identifier):
    m_bytes = 20

    def selector_name(self):
        return "address"


# hash: 32 bytes, rendered as hex.
class ABI_Hash(_ABI_Identifier):
    m_bytes = 32

    def selector_name(self):
        return "hash"


# tokenStandard: 10 bytes, bech32 with the "zts" prefix.
class ABI_TokenStandard(_ABI_Identifier):
    m_bytes = 10

    def selector_name(self):
        return "tokenStandard"


# bytes32: 32 raw bytes, shorter values are right-padded with zeroes.
class ABI_Bytes32(_ABI_Word):
    m_bytes = 32

    def selector_name(self):
        return "bytes32"


# function: an address-sized target (20 bytes) followed by a
# 4 byte selector, right-padded with zeroes to 32 bytes.
class ABI_Function(ABI_Bytes32):
    m_bytes = 24

    def selector_name(self):
        return "function"


# <type>[M]: a fixed-length array of M elements, M > 0, of the given type.
class ABI_StaticArray(ABIType):
    def __init__(self, subtyp, m_elems):
        if not m_elems > 0:
            raise InvalidArrayType(f"invalid static array size: {m_elems}")

        self.subtyp = subtyp
        self.m_elems = m_elems

    def is_dynamic(self):
        return self.subtyp.is_dynamic()

    def static_size(self):
        return self.m_elems * self.subtyp.embedded_static_size()

    def selector_name(self):
        return f"{self.subtyp.selector_name()}[{self.m_elems}]"


class ABI_Bytes(ABIType):
    def is_dynamic(self):
        return True

    # note that static_size for dynamic types is always 0
    # (and embedded_static_size is always 32)
    def static_size(self):
        return 0

    def selector_name(self):
        return "bytes"


class ABI_String(ABI_Bytes):
    def selector_name(self):
        return "string"


# <type>[]: a variable-length array of elements of the given type.
class ABI_DynamicArray(ABIType):
    def __init__(self, subtyp):
        self.subtyp = subtyp

    def is_dynamic(self):
        return True

    def static_size(self):
        return 0

    def selector_name(self):
        return f"{self.subtyp.selector_name()}[]"
