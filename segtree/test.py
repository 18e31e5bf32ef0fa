from functools import reduce, wraps
from itertools import product, zip_longest
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar
from unittest import TestCase

from .segment_tree import SegmentTree

T = TypeVar("T")


def fold(combine: Callable[[T, T], T], identity: T, values: Iterable[T]) -> T:
    """Reference aggregation by linear scan, left to right."""

    return reduce(combine, values, identity)


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        suffix = f": {msg}" if msg else ""
        for i, (a, b) in enumerate(zip_longest(first, second)):
            self.assertEqual(a, b, msg=f"in iteration index {i}{suffix}")

    def assertTreeValid(self, st: SegmentTree, msg: Optional[str] = None) -> None:
        """Checks the structural invariants: power of two capacity, storage length
        and every internal node equal to the combination of its children.
        """

        self.assertGreaterEqual(st.capacity, 1, msg)
        self.assertEqual(st.capacity & (st.capacity - 1), 0, msg)
        self.assertEqual(len(st.storage), 2 * st.capacity, msg)
        self.assertTrue(st.check_invariant(), msg)

    def assertRangeEqual(self, st: SegmentTree, values: Sequence[Any], i: int, j: int) -> None:
        """Compares `st.range_sum(i, j)` to a linear fold over `values[i : j + 1]`."""

        truth = fold(st.combine, st.identity, values[i : j + 1])
        self.assertEqual(truth, st.range_sum(i, j), f"range [{i}, {j}]")


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def parametrize_product(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in product(*args_list):
                with self.subTest(str(args)):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def repeat(number: int) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for i in range(number):
                if func(self) is not None:  # no self.subTest(str(i))
                    raise AssertionError

        return inner

    return decorator
