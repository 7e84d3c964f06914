"""
Transducer composition.
compose(t1, t2, ..., tk) processes each value with t1 first, then t2, ...
Because each transducer wraps the reducing function downstream of it, the
wrapping runs the other way round: t1(t2(...tk(rf)...)).
"""
from delnone import delnone
from onepass.transducer import identity


def _name(xforms):
    return "_".join(getattr(x, '__name__', 'xform') for x in xforms)


def _comp_0():
    return identity


def _comp_1(a):
    return a


def _comp_2(a, b):
    def _combined2(rf):
        return a(b(rf))

    return _combined2


def _comp_3(a, b, c):
    def _combined3(rf):
        return a(b(c(rf)))

    return _combined3


def _comp_4(a, b, c, d):
    def _combined4(rf):
        return a(b(c(d(rf))))

    return _combined4


def _comp_5(a, b, c, d, e):
    def _combined5(rf):
        return a(b(c(d(e(rf)))))

    return _combined5


def _comp_6(a, b, c, d, e, f):
    def _combined6(rf):
        return a(b(c(d(e(f(rf))))))

    return _combined6


def _comp_7(a, b, c, d, e, f, g):
    def _combined7(rf):
        return a(b(c(d(e(f(g(rf)))))))

    return _combined7


def _comp_8(a, b, c, d, e, f, g, h):
    def _combined8(rf):
        return a(b(c(d(e(f(g(h(rf))))))))

    return _combined8


_comp_fns = [
    _comp_0,
    _comp_1,
    _comp_2,
    _comp_3,
    _comp_4,
    _comp_5,
    _comp_6,
    _comp_7,
    _comp_8,
]


def _comp_n(*xforms):
    stages = tuple(reversed(xforms))

    def _combinedn(rf):
        for xform in stages:
            rf = xform(rf)
        return rf

    return _combinedn


def compose(*xforms):
    """
    None stages are skipped, so pipelines can be assembled conditionally:
    compose(mapping(f), taking(n) if n is not None else None)
    """
    xforms = delnone(list(xforms))
    n = len(xforms)
    if n < len(_comp_fns):
        combined = _comp_fns[n](*xforms)
    else:
        combined = _comp_n(*xforms)
    if n > 1:
        combined.__name__ = _name(xforms)
    return combined
