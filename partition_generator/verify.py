"""
Consumer harness: enumerate the partitions of 0, 1, ..., max_n and check them against p(n).

usage: python -m partition_generator.verify [max_n]
"""
import sys

from partition_generator.helper.partition_number import partition_number
from partition_generator.helper.timer import Timer
from partition_generator.partitions import Partitions, _check_n


def check_partition(n, part):
    """
    Check that part is a partition of n: positive parts in non-decreasing order summing to n.
    :param n: the partitioned integer
    :param part: a sequence of parts
    """
    if sum(part) != n:
        raise ValueError(f"Invalid partition of {n}: {list(part)} sums to {sum(part)}.")
    if any(i <= 0 for i in part):
        raise ValueError(f"Invalid partition of {n}: {list(part)} has non-positive parts.")
    if any(part[i] > part[i + 1] for i in range(len(part) - 1)):
        raise ValueError(f"Invalid partition of {n}: {list(part)} is not in non-decreasing order.")


def enumerate_and_check(n):
    """ Enumerate all partitions of n with invariant checks and return their count. """
    p = Partitions(n)
    count = 0
    part = p.next_view()
    while part is not None:
        check_partition(n, part)
        count += 1
        part = p.next_view()
    return count


def verify_partition_counts(max_n, verbose=False):
    """
    Verify the generator for all n from 0 to max_n.
    :param max_n: the largest integer to be partitioned
    :param verbose: time and print each n
    :return: a dictionary of {n: number of partitions}
    """
    _check_n(max_n)

    counts = {}
    for n in range(max_n + 1):
        if verbose:
            with Timer(f"n = {n}") as t:
                count = enumerate_and_check(n)
                t.items = count
        else:
            count = enumerate_and_check(n)

        expected = partition_number(n)
        if count != expected:
            raise ValueError(f"Wrong number of partitions of {n}: generated {count}, expected {expected}.")
        counts[n] = count

    return counts


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    max_n = int(argv[0]) if argv else 30
    counts = verify_partition_counts(max_n, verbose=True)
    print(f"Verified {sum(counts.values())} partitions for n = 0 to {max_n}.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
