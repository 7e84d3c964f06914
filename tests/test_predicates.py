from onepass.predicates import and_, or_, not_
from onepass.reducers import appending
from onepass.transduce import transduce
from onepass.transducer import filtering

def even(x):
    return x % 2 == 0

def positive(x):
    return x > 0

class Recorder:
    def __init__(self, result):
        self.result = result
        self.calls = 0

    def __call__(self, x):
        self.calls += 1
        return self.result

def test_and():
    assert and_(even, positive)(2) is True
    assert and_(even, positive)(-2) is False
    assert and_(even, positive)(3) is False

def test_or():
    assert or_(even, positive)(3) is True
    assert or_(even, positive)(-2) is True
    assert or_(even, positive)(-3) is False

def test_and_short_circuits():
    fail = Recorder(False)
    later = Recorder(True)
    assert and_(fail, later)(1) is False
    assert fail.calls == 1
    assert later.calls == 0

def test_or_short_circuits():
    succeed = Recorder(True)
    later = Recorder(False)
    assert or_(succeed, later)(1) is True
    assert later.calls == 0

def test_truthiness_is_normalized():
    assert and_(lambda x: [x])(1) is True
    assert or_(lambda x: 0)(1) is False

def test_vacuous():
    assert transduce([1, 2, 3], filtering(and_()), appending, []) == [1, 2, 3]
    assert transduce([1, 2, 3], filtering(or_()), appending, []) == []

def test_not():
    assert not_(even)(1) is True
    assert not_(even)(2) is False
    assert transduce([1, 2, 3, 4], filtering(not_(even)), appending, []) == [1, 3]
