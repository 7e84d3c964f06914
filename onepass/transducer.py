from typing import TypeVar, Generic, Callable, Hashable
from func_prototypes import typed
from onepass.reduced import Terminated, ensure_terminated, unwrap
from onepass.reducers import ReducingFunction, exhausted

Acc = TypeVar("Acc")
A = TypeVar("A")
B = TypeVar("B")
Transducer = Callable[[ReducingFunction], ReducingFunction]


class Wrapping(ReducingFunction[Acc, A], Generic[Acc, A, B]):
    """
    A ReducingFunction over A built around an inner ReducingFunction over B.
    Every call is delegated to the inner function unchanged.
    """

    def __init__(self, rf: ReducingFunction[Acc, B]):
        self.rf = rf

    def init(self) -> Acc:
        return self.rf.init()

    def step(self, acc: Acc, input: A):
        return self.rf.step(acc, input)

    def complete(self, acc: Acc) -> Acc:
        return self.rf.complete(acc)

    def is_exhausted(self) -> bool:
        return exhausted(self.rf)


def identity(rf: ReducingFunction) -> ReducingFunction:
    return rf


class Mapping(Wrapping[Acc, A, B]):

    def __init__(self, f: Callable[[A], B], rf: ReducingFunction[Acc, B]):
        super().__init__(rf)
        self.f = f

    def step(self, acc: Acc, input: A):
        return self.rf.step(acc, self.f(input))


def mapping(f: Callable[[A], B]) -> Transducer:
    def mapped(rf):
        return Mapping(f, rf)
    mapped.__name__ = "mapping_" + getattr(f, '__name__', 'fn')
    return mapped


class Filtering(Wrapping):
    """
    pred is (a -> Bool)
    Dropped values never reach the inner function.
    """

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, input):
        if self.pred(input):
            return self.rf.step(acc, input)
        return acc


def filtering(pred: Callable[[A], bool]) -> Transducer:
    def filtered(rf):
        return Filtering(pred, rf)
    filtered.__name__ = "filtering_" + getattr(pred, '__name__', 'pred')
    return filtered


class Taking(Wrapping):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.taken = 0

    def step(self, acc, input):
        if self.taken >= self.n:
            return Terminated(acc)
        self.taken += 1
        result = self.rf.step(acc, input)
        if self.taken >= self.n:
            return ensure_terminated(result)
        return result

    def is_exhausted(self):
        return self.taken >= self.n or exhausted(self.rf)


def _check_count(name, n, least=0):
    if n < least:
        raise ValueError("%s requires a count of at least %d, got %d" % (name, least, n))


@typed(int)
def taking(n):
    _check_count("taking", n)

    def taker(rf):
        return Taking(n, rf)
    taker.__name__ = "taking_%d" % n
    return taker


class TakingWhile(Wrapping):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred

    def step(self, acc, input):
        if self.pred(input):
            return self.rf.step(acc, input)
        return Terminated(acc)


def taking_while(pred: Callable[[A], bool]) -> Transducer:
    def taker(rf):
        return TakingWhile(pred, rf)
    taker.__name__ = "taking_while_" + getattr(pred, '__name__', 'pred')
    return taker


class Dropping(Wrapping):

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.dropped = 0

    def step(self, acc, input):
        if self.dropped < self.n:
            self.dropped += 1
            return acc
        return self.rf.step(acc, input)


@typed(int)
def dropping(n):
    _check_count("dropping", n)

    def dropper(rf):
        return Dropping(n, rf)
    dropper.__name__ = "dropping_%d" % n
    return dropper


class DroppingWhile(Wrapping):

    def __init__(self, pred, rf):
        super().__init__(rf)
        self.pred = pred
        self.dropping = True

    def step(self, acc, input):
        if self.dropping and self.pred(input):
            return acc
        self.dropping = False
        return self.rf.step(acc, input)


def dropping_while(pred: Callable[[A], bool]) -> Transducer:
    def dropper(rf):
        return DroppingWhile(pred, rf)
    dropper.__name__ = "dropping_while_" + getattr(pred, '__name__', 'pred')
    return dropper


class Deduplicating(Wrapping):

    def __init__(self, rf):
        super().__init__(rf)
        self.seen = set()

    def step(self, acc, input: Hashable):
        if input in self.seen:
            return acc
        self.seen.add(input)
        return self.rf.step(acc, input)


def deduplicating() -> Transducer:
    def uniq(rf):
        return Deduplicating(rf)
    return uniq


class Cat(Wrapping):
    """Steps each item of an iterable input into the inner function."""

    def step(self, acc, input):
        for item in input:
            acc = self.rf.step(acc, item)
            if isinstance(acc, Terminated):
                return acc
        return acc


def cat(rf: ReducingFunction) -> ReducingFunction:
    return Cat(rf)


def mapcat(f: Callable[[A], B]) -> Transducer:
    """mapcat(f) is compose(mapping(f), cat)."""
    def concat_mapped(rf):
        return Mapping(f, Cat(rf))
    concat_mapped.__name__ = "mapcat_" + getattr(f, '__name__', 'fn')
    return concat_mapped


class Batching(Wrapping):
    """
    Groups inputs into lists of n. The last, possibly short, batch is flushed
    into the inner function on completion.
    """

    def __init__(self, n, rf):
        super().__init__(rf)
        self.n = n
        self.batch = []

    def step(self, acc, input):
        self.batch.append(input)
        if len(self.batch) < self.n:
            return acc
        batch, self.batch = self.batch, []
        return self.rf.step(acc, batch)

    def complete(self, acc):
        if self.batch:
            batch, self.batch = self.batch, []
            acc = unwrap(self.rf.step(acc, batch))
        return self.rf.complete(acc)


@typed(int)
def batching(n):
    _check_count("batching", n, least=1)

    def batcher(rf):
        return Batching(n, rf)
    batcher.__name__ = "batching_%d" % n
    return batcher
