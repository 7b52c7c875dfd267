"""
Reference values of the partition function p(n), see OEIS A000041.
"""
from sympy.functions.combinatorial.numbers import partition

from partition_generator.partitions import _check_n

_cache = [1]


def partition_number(n):
    """
    Compute p(n) with Euler's pentagonal number recurrence,
    p(n) = sum_{k >= 1} (-1)^{k+1} [p(n - k(3k-1)/2) + p(n - k(3k+1)/2)].
    Values are memoized across calls.
    :param n: a non-negative integer
    :return: the number of partitions of n
    """
    _check_n(n)

    for m in range(len(_cache), n + 1):
        total = 0
        k = 1
        while True:
            g1 = k * (3 * k - 1) // 2
            if g1 > m:
                break
            sign = 1 if k % 2 else -1
            total += sign * _cache[m - g1]
            g2 = g1 + k
            if g2 <= m:
                total += sign * _cache[m - g2]
            k += 1
        _cache.append(total)

    return _cache[n]


def sympy_partition_number(n):
    """ p(n) evaluated by sympy, converted to a Python int. """
    _check_n(n)
    return int(partition(n))
