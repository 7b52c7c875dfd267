"""
Enumerate integer partitions with Kelleher's accelerated ascending composition algorithm.
see J. Kelleher and B. O'Sullivan, Generating All Partitions: A Comparison Of Two Encodings,
arXiv:0909.2331, and http://jeromekelleher.net/generating-integer-partitions.html

Each partition costs amortized constant time: a single working buffer of length n + 1 is
mutated in place and the next partition is synthesized from the previous one.
"""
from collections import namedtuple
from collections.abc import Sequence

OUTER = 'outer'
Inner = namedtuple('Inner', ['x', 'l'])


def _check_n(n):
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Invalid input for n, given '{type(n).__name__}', required 'int'.")
    if n < 0:
        raise ValueError(f"Cannot partition a negative integer: {n}.")


class PartitionView(Sequence):
    """
    Read-only view of the live prefix of a working buffer.
    The view is valid only until the next call that advances the owning Partitions object.
    """

    __slots__ = ('_buffer', '_size')

    def __init__(self, buffer, size):
        self._buffer = buffer
        self._size = size

    def __len__(self):
        return self._size

    def __getitem__(self, item):
        if isinstance(item, slice):
            return self._buffer[:self._size][item]
        if item < 0:
            item += self._size
        if not 0 <= item < self._size:
            raise IndexError('PartitionView index out of range')
        return self._buffer[item]

    def __eq__(self, other):
        if isinstance(other, PartitionView):
            other = list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return f"PartitionView({self._buffer[:self._size]})"


class Partitions:
    def __init__(self, n, buffer=None):
        """
        Iterator over all partitions of a non-negative integer n.
        :param n: the integer to be partitioned
        :param buffer: a list to be used as working buffer, see Partitions.recycle
        """
        _check_n(n)

        if buffer is None:
            buffer = [0] * (n + 1)
        else:
            if not isinstance(buffer, list):
                raise TypeError(f"Invalid buffer, given '{type(buffer).__name__}', required 'list'.")
            buffer.clear()
            buffer.extend([0] * (n + 1))

        self._n = n
        self._a = buffer
        self._k = 1 if n > 0 else 0
        self._y = n - 1 if n > 0 else 0
        self._phase = OUTER

    @classmethod
    def recycle(cls, n, buffer):
        """
        Make a new iterator on top of an existing list to avoid allocations.
        The contents of buffer are cleared and replaced by n + 1 zeros.
        :param n: the integer to be partitioned
        :param buffer: any list, typically the result of Partitions.end of another iterator
        :return: a Partitions object owning buffer
        """
        return cls(n, buffer)

    def end(self):
        """
        Detach and return the working buffer for further use.
        Its contents are stale algorithm state and cannot be relied upon.
        The iterator cannot be advanced afterwards.
        """
        a = self._buffer()
        self._a = None
        return a

    @property
    def n(self):
        return self._n

    @property
    def k(self):
        return self._k

    @property
    def y(self):
        return self._y

    @property
    def phase(self):
        return self._phase

    def _buffer(self):
        if self._a is None:
            raise RuntimeError("Partitions iterator has been ended, its buffer was handed back.")
        return self._a

    def _advance(self):
        """
        Move the state machine forward by one partition.
        :return: the length of the live prefix, or None if exhausted
        """
        a = self._buffer()
        k, y = self._k, self._y

        if self._phase is OUTER:
            if k == 0:
                # only n = 0 leaves a buffer of length one; popping it marks exhaustion
                if len(a) == 1:
                    a.pop()
                    return 0
                return None

            k -= 1
            x = a[k] + 1
            while 2 * x <= y:
                a[k] = x
                y -= x
                k += 1
            l = k + 1
        else:
            x, l = self._phase
            x += 1
            y -= 1

        if x <= y:
            a[k] = x
            a[l] = y
            self._phase = Inner(x, l)
            size = k + 2
        else:
            a[k] = x + y
            y = x + y - 1
            self._phase = OUTER
            size = k + 1

        self._k, self._y = k, y
        return size

    def next_view(self):
        """
        Advance and return a read-only view of the live prefix of the working buffer.
        The view is invalidated by the next call advancing this iterator.
        :return: a PartitionView, or None if all partitions have been produced
        """
        size = self._advance()
        if size is None:
            return None
        return PartitionView(self._a, size)

    def next_partition(self):
        """
        Advance and return a copy of the new partition.
        :return: a list of parts in non-decreasing order, or None if exhausted
        """
        size = self._advance()
        if size is None:
            return None
        return self._a[:size]

    def __iter__(self):
        return self

    def __next__(self):
        out = self.next_partition()
        if out is None:
            raise StopIteration
        return out

    def __repr__(self):
        return f"Partitions(n={self._n}, k={self._k}, y={self._y}, phase={self._phase})"


def integer_partitions(n, copy=True):
    """
    Generate all partitions of n in the order of the accelerated ascending composition algorithm.
    :param n: a non-negative integer
    :param copy: yield fresh lists if True, otherwise views valid until the next partition is requested
    """
    p = Partitions(n)
    advance = p.next_partition if copy else p.next_view
    part = advance()
    while part is not None:
        yield part
        part = advance()


def count_partitions(n):
    """ Count the partitions of n by enumeration, without copying any partition. """
    p = Partitions(n)
    count = 0
    while p.next_view() is not None:
        count += 1
    return count
