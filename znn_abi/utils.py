import binascii
from typing import Any, Dict

from Crypto.Hash import SHA3_256  # type: ignore

from znn_abi.exceptions import InvalidLiteral

# every value on the wire occupies one or more words of this many bytes
WORD_SIZE = 32

sha3_256 = lambda x: SHA3_256.new(data=x).digest()  # noqa: E731


# converts a signature like Register(string,address,address,uint8,uint8)
# to its 4 byte method ID
def method_id(method_str: str) -> bytes:
    return sha3_256(bytes(method_str, "utf-8"))[:4]


# Returns lowest multiple of 32 >= the input
def ceil32(x):
    return x if x % 32 == 0 else x + 32 - (x % 32)


def signed_to_unsigned(int_, bits):
    """
    Reinterpret a signed integer as an unsigned integer of ``bits`` bits.
    Values wider than ``bits`` wrap around, i.e. only the low ``bits`` bits
    of the two's complement representation are kept.
    """
    return int_ % (2**bits)


def unsigned_to_signed(int_, bits):
    """
    Reinterpret an unsigned integer with n bits as a signed integer.
    """
    if int_ > (2 ** (bits - 1)) - 1:
        return int_ - (2**bits)
    return int_


def hex_to_bytes(inp: str) -> bytes:
    """
    Converts a hex string, with or without a ``0x`` prefix, to bytes.
    """
    if inp[:2] in ("0x", "0X"):
        inp = inp[2:]
    if len(inp) % 2 != 0:
        raise InvalidLiteral(f"invalid hex string: odd length ({len(inp)} digits)")
    try:
        return binascii.unhexlify(inp)
    except (binascii.Error, ValueError):
        raise InvalidLiteral(f"invalid hex string: {inp!r}") from None


def levenshtein_norm(source: str, target: str) -> float:
    """Calculates the normalized Levenshtein distance between two string
    arguments. The result will be a float in the range [0.0, 1.0], with 1.0
    signifying the biggest possible distance between strings with these lengths

    From jazzband/docopt-ng
    https://github.com/jazzband/docopt-ng/blob/bbed40a2335686d2e14ac0e6c3188374dc4784da/docopt.py
    """
    distance = levenshtein(source, target)
    return float(distance) / max(len(source), len(target))


def levenshtein(source: str, target: str) -> int:
    """Computes the Levenshtein distance between two strings using the
    Wagner-Fischer algorithm
    (https://en.wikipedia.org/wiki/Wagner%E2%80%93Fischer_algorithm).

    From jazzband/docopt-ng
    """
    # row 0 and column 0 hold the cost of building a prefix from the empty string
    s_range = range(len(source) + 1)
    t_range = range(len(target) + 1)
    matrix = [[(i if j == 0 else j) for j in t_range] for i in s_range]

    for i in s_range[1:]:
        for j in t_range[1:]:
            del_dist = matrix[i - 1][j] + 1
            ins_dist = matrix[i][j - 1] + 1
            sub_trans_cost = 0 if source[i - 1] == target[j - 1] else 1
            sub_dist = matrix[i - 1][j - 1] + sub_trans_cost

            matrix[i][j] = min(del_dist, ins_dist, sub_dist)

    return matrix[len(source)][len(target)]


def get_levenshtein_error_suggestions(key: str, namespace: Dict[str, Any], threshold: float) -> str:
    """
    Generate an error message snippet for the suggested closest values in the provided namespace
    with the shortest normalized Levenshtein distance from the given key if that distance
    is below the threshold. Otherwise, return an empty string.

    :param key: A string of the identifier being accessed
    :param namespace: A dictionary (or any iterable) of the possible identifiers
    :param threshold: A floating value between 0.0 and 1.0

    :return: The error message snippet if the Levenshtein value is below the threshold,
        or an empty string.
    """

    if key is None or key == "":
        return ""

    distances = sorted([(i, levenshtein_norm(key, i)) for i in namespace], key=lambda k: k[1])
    if len(distances) > 0 and distances[0][1] <= threshold:
        if len(distances) > 1 and distances[1][1] <= threshold:
            return f"Did you mean '{distances[0][0]}', or maybe '{distances[1][0]}'?"
        return f"Did you mean '{distances[0][0]}'?"
    return ""
