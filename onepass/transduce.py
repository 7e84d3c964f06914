# Worked out from https://raganwald.com/2017/04/30/transducers.html
import logging
from onepass.reduced import Terminated
from onepass.reducers import as_reducing_function, exhausted
from onepass.transducer import identity

log = logging.getLogger(__name__)

_missing = object()


def _prepare(xform, reducer, init):
    rf = xform(as_reducing_function(reducer))
    if init is _missing:
        acc = rf.init()
    else:
        acc = init
    log.debug("transduce %s started", getattr(xform, '__name__', xform))
    return rf, acc


def _finish(xform, rf, acc, pulled, terminated):
    if terminated:
        log.debug("transduce %s terminated after %d values", getattr(xform, '__name__', xform), pulled)
    else:
        log.debug("transduce %s exhausted its source after %d values", getattr(xform, '__name__', xform), pulled)
    return rf.complete(acc)


def transduce(source, xform, reducer, init=_missing):
    """
    source is [a], possibly infinite.
    xform is a transducer, it turns a reducing function over b into one over a.
    reducer is a reducing function over b, or a plain (acc -> b -> acc).
    init is acc. Defaults to init() of the transformed reducing function.

    Values are pulled one at a time. Once a step returns Terminated, or the
    reducing function reports it is exhausted, no further values are pulled.
    complete is called exactly once, its result is returned.
    """
    rf, acc = _prepare(xform, reducer, init)
    values = iter(source)
    pulled = 0
    terminated = False
    while not exhausted(rf):
        try:
            value = next(values)
        except StopIteration:
            break
        pulled += 1
        acc = rf.step(acc, value)
        if isinstance(acc, Terminated):
            acc = acc.value
            terminated = True
            break
    return _finish(xform, rf, acc, pulled, terminated)


async def atransduce(source, xform, reducer, init=_missing):
    """
    transduce for async iterable sources.
    Only pulling the next value suspends, steps and completion run synchronously.
    """
    rf, acc = _prepare(xform, reducer, init)
    values = source.__aiter__()
    pulled = 0
    terminated = False
    while not exhausted(rf):
        try:
            value = await values.__anext__()
        except StopAsyncIteration:
            break
        pulled += 1
        acc = rf.step(acc, value)
        if isinstance(acc, Terminated):
            acc = acc.value
            terminated = True
            break
    return _finish(xform, rf, acc, pulled, terminated)


def reduce_with(reducer, seed, iterable):
    """
    reduce_with takes reducer as first argument, computes a reduction over iterable.
    Think foldl from Haskell, which stops early on Terminated.
    reducer is (b -> a -> b)
    seed is b
    iterable is [a]
    """
    return transduce(iterable, identity, reducer, seed)
