from math import gcd, inf
from operator import add, mul
from typing import Any, Callable, NamedTuple, Sequence, TypeVar

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)


class Monoid(NamedTuple):
    """An associative `combine` function together with its neutral element `identity`,
    ie. `combine(identity, x) == combine(x, identity) == x` for every `x`.
    """

    combine: Callable[[Any, Any], Any]
    identity: Any


def bit_or(x: Any, y: Any) -> Any:
    return x | y


def bit_and(x: Any, y: Any) -> Any:
    return x & y


def bit_xor(x: Any, y: Any) -> Any:
    return x ^ y


def concat(a: S, b: S) -> S:
    """Concatenates two sequences of the same type.
    Associative but not commutative, so it is useful to check that order is preserved.
    """

    return a + b  # type: ignore[operator]


def first(a: T, b: T) -> T:
    # left-most value wins, `None` is the identity

    return b if a is None else a


def last(a: T, b: T) -> T:
    return a if b is None else b


SUM = Monoid(add, 0)
PRODUCT = Monoid(mul, 1)
MIN = Monoid(min, inf)
MAX = Monoid(max, -inf)
GCD = Monoid(gcd, 0)
OR = Monoid(bit_or, 0)
AND = Monoid(bit_and, -1)
XOR = Monoid(bit_xor, 0)
CONCAT = Monoid(concat, ())
FIRST = Monoid(first, None)
LAST = Monoid(last, None)
