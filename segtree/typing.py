from typing import Any

from typing_extensions import Protocol


class Combine(Protocol):
    def __call__(self, a: Any, b: Any) -> Any:
        ...


class SupportsMonoid(Protocol):

    """Anything with a `combine` function and an `identity` element,
    for example `segtree.ops.Monoid`.
    """

    @property
    def combine(self) -> Combine:
        ...

    @property
    def identity(self) -> Any:
        ...
