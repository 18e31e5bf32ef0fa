from typing import Any, Tuple, Type, Union


class OutOfBounds(IndexError):
    """Raised when an index or a range bound lies outside of the addressable slots `[0, capacity)`.
    Negative indices are never wrapped around like they are for Python sequences.
    """

    def __init__(self, index: int, capacity: int) -> None:
        IndexError.__init__(self, f"Index {index} out of range [0, {capacity})")
        self.index = index
        self.capacity = capacity


class InvalidRange(ValueError):
    """Raised when a query range starts after it ends. Empty ranges are invalid as well."""

    def __init__(self, start: int, end: int) -> None:
        ValueError.__init__(self, f"Invalid range [{start}, {end}]: start is after end")
        self.start = start
        self.end = end


def assert_type(name: str, value: Any, types: Union[Type[Any], Tuple[Type[Any], ...]]) -> None:

    if not isinstance(value, types):
        if not isinstance(types, tuple):
            types = (types,)
        raise TypeError(
            "{} must be one of these types: {}. Not: {}".format(name, ", ".join(map(str, types)), type(value))
        )
