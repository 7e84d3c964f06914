from onepass.reduced import Terminated, is_terminated, unwrap, ensure_terminated
from onepass.reducers import \
    ReducingFunction,     \
    appending,            \
    as_reducing_function, \
    counting,             \
    joining,              \
    reducing_function,    \
    summing
from onepass.transducer import \
    batching,       \
    cat,            \
    deduplicating,  \
    dropping,       \
    dropping_while, \
    filtering,      \
    identity,       \
    mapcat,         \
    mapping,        \
    taking,         \
    taking_while
from onepass.predicates import and_, or_, not_
from onepass.compose import compose
from onepass.transduce import transduce, atransduce, reduce_with
from onepass.progress import progressing
