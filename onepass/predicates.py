"""
Short circuiting predicate combinators.
Fusing filters: filtering(and_(p, q)) keeps what filtering(p) then filtering(q) keeps.
"""


def and_(*preds):
    """True when every pred holds. Stops at the first failing pred. and_() is True."""
    def every(x):
        for pred in preds:
            if not pred(x):
                return False
        return True
    every.__name__ = "and_" + "_".join(getattr(p, '__name__', 'pred') for p in preds)
    return every


def or_(*preds):
    """True when some pred holds. Stops at the first passing pred. or_() is False."""
    def some(x):
        for pred in preds:
            if pred(x):
                return True
        return False
    some.__name__ = "or_" + "_".join(getattr(p, '__name__', 'pred') for p in preds)
    return some


def not_(pred):
    def inverted(x):
        return not pred(x)
    inverted.__name__ = "not_" + getattr(pred, '__name__', 'pred')
    return inverted
