from onepass.reduced import Terminated, is_terminated, unwrap, ensure_terminated

def test_terminated():
    t = Terminated([1, 2])
    assert t.value == [1, 2]
    assert t == Terminated([1, 2])
    assert t != [1, 2]
    assert repr(t) == "Terminated([1, 2])"

def test_is_terminated():
    assert is_terminated(Terminated(0)) is True
    assert is_terminated(0) is False
    assert is_terminated(None) is False

def test_unwrap():
    assert unwrap(Terminated(5)) == 5
    assert unwrap(5) == 5

def test_ensure_terminated():
    t = Terminated(3)
    assert ensure_terminated(t) is t
    assert ensure_terminated(3) == Terminated(3)
