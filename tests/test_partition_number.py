import pytest

from partition_generator.helper.partition_number import partition_number, sympy_partition_number
from tests.test_partitions import A000041


def test_partition_number():
    assert [partition_number(n) for n in range(51)] == A000041
    assert partition_number(100) == 190569292
    assert partition_number(5) == 7


def test_partition_number_sympy():
    for n in range(0, 120, 7):
        assert sympy_partition_number(n) == partition_number(n)
    assert isinstance(sympy_partition_number(10), int)


def test_partition_number_input():
    with pytest.raises(ValueError):
        partition_number(-3)
    with pytest.raises(TypeError):
        partition_number(2.5)
    with pytest.raises(ValueError):
        sympy_partition_number(-1)
