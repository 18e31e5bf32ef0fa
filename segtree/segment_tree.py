import logging
from typing import Callable, Generic, Iterator, List, Optional, Sequence, TextIO, Tuple, TypeVar, Union

from .exceptions import InvalidRange, OutOfBounds, assert_type
from .ops import MAX, MIN, SUM, Monoid
from .typing import SupportsMonoid

T = TypeVar("T")

logger = logging.getLogger(__name__)

RangeType = Union[int, slice, range]


def next_power_of_two(n: int) -> int:
    """Returns the smallest power of two which is greater or equal to `n`.
    The result is at least 1, so `next_power_of_two(0) == 1`.
    """

    p = 1
    while p < n:
        p <<= 1
    return p


class SegmentTree(Generic[T]):
    """Array backed segment tree with point assignment and range aggregation.

    The tree holds `capacity` leaves, where `capacity` is the smallest power of two
    which fits `size`. Storage uses the 1-based heap layout: the root is at index 1,
    the children of `v` are `2v` and `2v+1` and logical slot `i` is stored at
    `capacity + i`. Index 0 is unused.

    `combine` must be associative and `identity` must be its neutral element.
    Commutativity is not required, partial results are always combined left to right.

    The padding slots `[size, capacity)` are addressable like any other slot.
    Instances are not thread-safe.
    """

    storage: List[T]

    def __init__(self, size: int, combine: Callable[[T, T], T], identity: T) -> None:
        assert_type("size", size, int)
        if size < 0:
            raise ValueError(f"size must be non-negative, not {size}")
        if not callable(combine):
            raise TypeError(f"combine must be callable, not {type(combine)}")

        self.size = size
        self.capacity = next_power_of_two(size)
        self.combine = combine
        self.identity = identity
        self.storage = [identity] * (2 * self.capacity)

        logger.debug("Created %s with size=%d capacity=%d", type(self).__name__, self.size, self.capacity)

    @classmethod
    def from_monoid(cls, size: int, monoid: SupportsMonoid) -> "SegmentTree":
        return cls(size, monoid.combine, monoid.identity)

    @classmethod
    def from_iterable(cls, values: Sequence[T], combine: Callable[[T, T], T], identity: T) -> "SegmentTree[T]":
        """Creates a tree of size `len(values)` with the leaves set to `values`.
        Faster than assigning the values one by one since every internal node is computed only once.
        """

        values = list(values)
        st = cls(len(values), combine, identity)
        st._fill(values)
        return st

    def _fill(self, values: List[T]) -> None:
        self.storage[self.capacity : self.capacity + len(values)] = values
        self.build()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, capacity={self.capacity})"

    def __len__(self) -> int:
        return self.capacity

    def __iter__(self) -> Iterator[T]:
        return iter(self.storage[self.capacity :])

    @staticmethod
    def parent(v: int) -> int:
        return v >> 1

    @staticmethod
    def left_child(v: int) -> int:
        return v << 1

    @staticmethod
    def right_child(v: int) -> int:
        return (v << 1) | 1

    @property
    def total(self) -> T:
        """Aggregate over all slots."""

        return self.storage[1]

    def _check_index(self, i: int) -> None:
        assert_type("index", i, int)
        if not 0 <= i < self.capacity:
            raise OutOfBounds(i, self.capacity)

    def build(self) -> None:
        """Recomputes all internal nodes from the leaves."""

        for v in range(self.capacity - 1, 0, -1):
            self.storage[v] = self.combine(self.storage[self.left_child(v)], self.storage[self.right_child(v)])

        logger.debug("Built %d internal nodes", self.capacity - 1)

    def assign(self, i: int, x: T) -> None:
        """Sets slot `i` to `x` and repairs all ancestors up to the root."""

        self._check_index(i)

        v = self.capacity + i
        self.storage[v] = x
        v = self.parent(v)
        while v > 0:
            self.storage[v] = self.combine(self.storage[self.left_child(v)], self.storage[self.right_child(v)])
            v = self.parent(v)

    def __setitem__(self, i: int, x: T) -> None:
        self.assign(i, x)

    def __getitem__(self, key: RangeType) -> T:
        """`st[i]` returns the value of slot `i`, `st[a:b]` or `st[range(a, b)]` aggregates the half-open range `[a, b)`."""

        if isinstance(key, (slice, range)):
            return self.range_sum(key)

        self._check_index(key)
        return self.storage[self.capacity + key]

    def normalize(self, start: RangeType, end: Optional[int] = None) -> Tuple[int, int]:
        """Converts the arguments accepted by `range_sum` to a closed interval `(i, j)`
        and validates it. Nothing is clamped.
        """

        if isinstance(start, (slice, range)):
            if end is not None:
                raise TypeError("end cannot be given together with a slice or range")
            if start.step not in (None, 1):
                raise ValueError(f"Only contiguous ranges are supported, got step {start.step}")

            i = 0 if start.start is None else start.start
            j = self.capacity - 1 if start.stop is None else start.stop - 1
        else:
            i = start
            j = start if end is None else end

        assert_type("start", i, int)
        assert_type("end", j, int)

        if i > j:
            raise InvalidRange(i, j)

        if i < 0:
            raise OutOfBounds(i, self.capacity)
        if j >= self.capacity:
            raise OutOfBounds(j, self.capacity)

        return i, j

    def range_sum(self, start: RangeType, end: Optional[int] = None) -> T:
        """Returns the aggregate `combine(A[i], ..., A[j])` over a contiguous range.

        `range_sum(i, j)` queries the closed interval `[i, j]`, `range_sum(i)` a single slot.
        A `slice` or `range` is interpreted as half-open and missing bounds extend
        to the first or last slot, so `range_sum(slice(None))` covers the whole tree.

        Raises `InvalidRange` if the start is after the end and `OutOfBounds`
        if either bound lies outside `[0, capacity)`.
        """

        i, j = self.normalize(start, end)
        return self._query(1, 0, self.capacity - 1, i, j)

    def _query(self, v: int, l: int, r: int, i: int, j: int) -> T:
        # node `v` covers the block [l, r], which contains the query [i, j]

        if l == i and r == j:
            return self.storage[v]

        m = (l + r) // 2

        if i <= m:
            left = self._query(self.left_child(v), l, m, i, min(m, j))
        else:
            left = self.identity

        if j > m:
            right = self._query(self.right_child(v), m + 1, r, max(i, m + 1), j)
        else:
            right = self.identity

        return self.combine(left, right)

    def check_invariant(self) -> bool:
        """Returns True if every internal node equals the combination of its children."""

        for v in range(1, self.capacity):
            if self.storage[v] != self.combine(self.storage[self.left_child(v)], self.storage[self.right_child(v)]):
                return False
        return True

    def print_storage(self, file: Optional[TextIO] = None) -> None:
        """Prints every storage slot including the unused slot 0, for debugging.
        Writes to `sys.stdout` if `file` is None.
        """

        for k, value in enumerate(self.storage):
            print(f"A[{k}] = {value}", file=file)


class FixedSegmentTree(SegmentTree[T]):
    """Base for trees whose combine function and identity are set by the class attribute `monoid`.
    The alternative constructors only accept that same monoid.
    """

    monoid: Monoid

    def __init__(self, size: int) -> None:
        SegmentTree.__init__(self, size, self.monoid.combine, self.monoid.identity)

    @classmethod
    def _check_monoid(cls, combine: Optional[Callable], identity: Optional[T]) -> None:
        if combine is not None and combine is not cls.monoid.combine:
            raise ValueError(f"{cls.__name__} only supports {cls.monoid.combine} as combine function")
        if identity is not None and identity != cls.monoid.identity:
            raise ValueError(f"{cls.__name__} only supports {cls.monoid.identity} as identity")

    @classmethod
    def from_monoid(cls, size: int, monoid: Optional[SupportsMonoid] = None) -> "FixedSegmentTree":
        if monoid is not None:
            cls._check_monoid(monoid.combine, monoid.identity)
        return cls(size)

    @classmethod
    def from_iterable(
        cls, values: Sequence[T], combine: Optional[Callable[[T, T], T]] = None, identity: Optional[T] = None
    ) -> "FixedSegmentTree[T]":
        cls._check_monoid(combine, identity)
        values = list(values)
        st = cls(len(values))
        st._fill(values)
        return st


class SumSegmentTree(FixedSegmentTree[int]):
    monoid = SUM

    def sum(self, start: int = 0, end: Optional[int] = None) -> int:
        """Returns A[start] + ... + A[end]. `end` defaults to the last slot."""

        if end is None:
            end = self.capacity - 1
        return self.range_sum(start, end)


class MinSegmentTree(FixedSegmentTree[float]):
    monoid = MIN

    def min(self, start: int = 0, end: Optional[int] = None) -> float:
        if end is None:
            end = self.capacity - 1
        return self.range_sum(start, end)


class MaxSegmentTree(FixedSegmentTree[float]):
    monoid = MAX

    def max(self, start: int = 0, end: Optional[int] = None) -> float:
        if end is None:
            end = self.capacity - 1
        return self.range_sum(start, end)
