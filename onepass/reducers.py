from typing import TypeVar, Generic, Callable, Optional
from func_prototypes import typed

Acc = TypeVar("Acc")
In = TypeVar("In")


class ReducingFunction(Generic[Acc, In]):
    """
    The fold step capability.
    init is () -> Acc, optional.
    step is (Acc -> In -> Acc), it may return Terminated(Acc) to stop the fold.
    complete is (Acc -> Acc), called once per run.
    """

    def init(self) -> Acc:
        raise NotImplementedError(
            "%s has no init, supply an initial accumulation." % type(self).__name__)

    def step(self, acc: Acc, input: In):
        raise NotImplementedError()

    def complete(self, acc: Acc) -> Acc:
        return acc

    def is_exhausted(self) -> bool:
        """True when no further step could change the result."""
        return False


def exhausted(rf) -> bool:
    """
    is_exhausted is optional. Reducing functions which only provide
    init, step and complete are never exhausted.
    """
    check = getattr(rf, 'is_exhausted', None)
    if check is None:
        return False
    return check()


class Completing(ReducingFunction[Acc, In]):
    """Lifts loose callables into a ReducingFunction."""

    def __init__(self,
                 step: Callable[[Acc, In], Acc],
                 init: Optional[Callable[[], Acc]] = None,
                 complete: Optional[Callable[[Acc], Acc]] = None):
        self._step = step
        self._init = init
        self._complete = complete

    def init(self) -> Acc:
        if self._init is None:
            return super().init()
        return self._init()

    def step(self, acc: Acc, input: In):
        return self._step(acc, input)

    def complete(self, acc: Acc) -> Acc:
        if self._complete is None:
            return acc
        return self._complete(acc)

    def __repr__(self):
        return "Completing(%s)" % getattr(self._step, '__name__', repr(self._step))


def reducing_function(step, init=None, complete=None) -> ReducingFunction:
    return Completing(step, init, complete)


def as_reducing_function(reducer) -> ReducingFunction:
    """
    Plain binary functions (b -> a -> b) are accepted anywhere a reducing
    function is, they get identity completion and no init.
    Objects providing init, step and complete are used as they are.
    """
    if isinstance(reducer, ReducingFunction) or hasattr(reducer, "step"):
        return reducer
    if callable(reducer):
        return Completing(reducer)
    raise TypeError("Can't reduce with object of type %s" % type(reducer))


class Appending(ReducingFunction[list, In]):
    """
    Optimized list accumulator which doesn't reallocate on every step.
    The accumulation is owned by the run, step appends to the list it is handed.
    """

    def init(self) -> list:
        return []

    def step(self, acc: list, input: In) -> list:
        acc.append(input)
        return acc


class Summing(ReducingFunction):
    """Reducer which computes a sum"""

    def init(self):
        return 0

    def step(self, acc, input):
        return acc + input


class Counting(ReducingFunction):

    def init(self) -> int:
        return 0

    def step(self, acc: int, input) -> int:
        return acc + 1


class _Joined(str):
    """A joined string which has taken at least one value."""


class Joining(ReducingFunction[str, In]):
    """
    An empty seed means no separator before the first value.
    Any other seed is treated as already joined text.
    """

    def __init__(self, separator: str):
        self.separator = separator

    def init(self) -> str:
        return ''

    def step(self, acc: str, input: In) -> str:
        if acc == '' and not isinstance(acc, _Joined):
            return _Joined(input)
        else:
            return _Joined("%s%s%s" % (acc, self.separator, input))

    def complete(self, acc: str) -> str:
        return str(acc)


appending = Appending()
summing = Summing()
counting = Counting()


@typed(str)
def joining(separator):
    return Joining(separator)
