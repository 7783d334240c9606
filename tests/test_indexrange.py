import pytest

from sweepcad.indexrange import index_range, select


def test_full_range():
    assert index_range(5) == [0, 1, 2, 3, 4]
    assert index_range('abc') == [0, 1, 2]


def test_stride():
    assert index_range(5, stride=2) == [0, 2, 4]
    assert index_range(7, 1, 0, 3) == [1, 4]


def test_end_trims_back_or_counts_from_front():
    assert index_range(5, 1, -1) == [1, 2, 3]
    assert index_range(5, 0, 3) == [0, 1, 2]
    assert index_range(3, 0, 10) == [0, 1, 2]


def test_negative_stride_replicates():
    assert index_range(['a', 'b', 'c'], stride=-2) == [0, 0, 1, 1, 2, 2]
    assert index_range(3, 1, -1, -2) == [0, 1, 1, 2]
    assert index_range(2, 0, 3, -3) == [0, 0, 0]


def test_empty_and_clamped():
    assert index_range(0) == []
    assert index_range([]) == []
    assert index_range(4, -3) == [0, 1, 2, 3]
    assert index_range(4, 3, -2) == []


def test_zero_stride_rejected():
    with pytest.raises(ValueError):
        index_range(3, stride=0)


def test_select():
    assert select('abcde', 0, 0, 2) == ['a', 'c', 'e']
    assert select([10, 20, 30], 0, -1) == [10, 20]
