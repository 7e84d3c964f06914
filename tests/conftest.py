import pytest
from onepass.reducers import ReducingFunction
from onepass.transducer import Wrapping


def irange(start, increment):
    while True:
        yield start
        start += increment


class PullCounter:
    """
    Source which records how many values were pulled from it.
    """
    def __init__(self, values):
        self.values = iter(values)
        self.pulled = []

    def __iter__(self):
        return self

    def __next__(self):
        value = next(self.values)
        self.pulled.append(value)
        return value


class CompletionCounter(ReducingFunction):
    """
    Collects into a tuple and counts complete calls.
    """
    def __init__(self):
        self.completions = 0
        self.steps = 0

    def init(self):
        return ()

    def step(self, acc, input):
        self.steps += 1
        return acc + (input,)

    def complete(self, acc):
        self.completions += 1
        return list(acc)


@pytest.fixture
def probe():
    return CompletionCounter()


@pytest.fixture
def naturals():
    return PullCounter(irange(1, 1))


def build_source(values):
    """
    Helper function to build a source which counts pulls.
    """
    return PullCounter(values)


class CompletionTally:
    """
    Transducer whose wrappers count complete calls, across all the runs it is used in.
    """
    def __init__(self):
        self.completions = 0

    def __call__(self, rf):
        tally = self

        class Tallied(Wrapping):
            def complete(self, acc):
                tally.completions += 1
                return self.rf.complete(acc)

        return Tallied(rf)


@pytest.fixture
def tallies():
    return [CompletionTally() for _ in range(3)]
