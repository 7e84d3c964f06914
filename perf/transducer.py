import timeit
from functools import partial
from itertools import islice
from tabulate import tabulate
from onepass import transduce, compose, mapping, filtering, taking, appending, summing

def isEven(n):
    return n % 2 == 0

def inc(x):
    return x + 1

def square(x):
    return x * x

# args example: partial(inc_square_comprehension, hundredK)
# kwargs example number=1000
def performance_compare(*cases, case_args=[], timeit_kwargs={}):
    results = {}
    for case in cases:
        name = case.__name__
        case = partial(case, *case_args)
        time = timeit.timeit(case, **timeit_kwargs)
        results[name] = time
    lowest = min([time for time in results.values()])
    table = [(name, time, "%.2f" % (time / lowest)) for (name, time) in results.items()]
    print(tabulate(table, headers=['case', 'time', 'scale']))

def sum_even_loop(ns):
    total = 0
    for n in ns:
        if isEven(n):
            total += n
    return total

def sum_even_comprehension(ns):
    return sum([n for n in ns if isEven(n)])

def sum_even_filter(ns):
    return sum(filter(isEven, ns))

def sum_even_transduce(ns):
    return transduce(ns, filtering(isEven), summing, 0)

def inc_square_comprehension(nums):
    return [(num + 1) * (num + 1) for num in nums]

def inc_square_loop(nums):
    out = []
    for n in nums:
        out.append((n + 1) * (n + 1))
    return out

def inc_square_map(nums):
    return list(map(square, map(inc, nums)))

incs_squares = compose(mapping(inc), mapping(square))

def inc_square_transduce(nums):
    return transduce(nums, incs_squares, appending, [])

def first_even_squares_islice(nums):
    return list(islice(filter(isEven, map(square, nums)), 100))

first_even_squares = compose(mapping(square), filtering(isEven), taking(100))

def first_even_squares_transduce(nums):
    return transduce(nums, first_even_squares, appending, [])


hundredK = range(100000)

def test_sum_even():
    performance_compare(sum_even_loop,
                        sum_even_comprehension,
                        sum_even_filter,
                        sum_even_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def test_inc_square():
    performance_compare(inc_square_comprehension,
                        inc_square_loop,
                        inc_square_map,
                        inc_square_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 10})

def test_early_termination():
    performance_compare(first_even_squares_islice,
                        first_even_squares_transduce,
                        case_args=[hundredK],
                        timeit_kwargs={'number': 1000})
