from typing import TypeVar, Generic

T = TypeVar("T")


class Terminated(Generic[T]):
    """
    Wraps the final accumulation of a reduction.
    A step which returns Terminated tells the driver to stop pulling values.
    The driver unwraps it before completion, callers never see one.
    """
    __slots__ = ('value',)

    def __init__(self, value: T):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Terminated) and self.value == other.value

    def __hash__(self):
        return hash((Terminated, self.value))

    def __repr__(self):
        return "Terminated(%r)" % (self.value,)


def is_terminated(x) -> bool:
    return isinstance(x, Terminated)


def unwrap(x):
    """Returns the accumulation carried by a Terminated, or x itself."""
    if isinstance(x, Terminated):
        return x.value
    return x


def ensure_terminated(x) -> Terminated:
    if isinstance(x, Terminated):
        return x
    return Terminated(x)
