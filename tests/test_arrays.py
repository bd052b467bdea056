import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.arrays import (
    common_elements,
    find_duplicate,
    kth_smallest,
    longest_zero_sum_subarray,
    max_subarray_sum,
    merge_intervals,
    merge_sorted_in_place,
    min_max,
    negatives_first,
    reverse_range,
    rotate_right,
    unique_paths,
)

ints = st.lists(st.integers(min_value=-100, max_value=100), max_size=30)
non_empty_ints = st.lists(st.integers(min_value=-100, max_value=100), min_size=1, max_size=30)


def test_common_elements_source_example():
    first = [1, 5, 10, 20, 40, 80]
    second = [6, 7, 20, 80, 100]
    third = [3, 4, 15, 20, 30, 70, 80, 120]
    assert common_elements(first, second, third) == [20, 80]


def test_common_elements_with_empty_input():
    assert common_elements([1, 2], [], [1, 2]) == []


@given(ints, ints, ints)
def test_common_elements_are_in_all_three(a, b, c):
    a, b, c = sorted(a), sorted(b), sorted(c)
    result = common_elements(a, b, c)
    assert result == sorted(result)
    assert all(x in a and x in b and x in c for x in result)
    assert set(result) == set(a) & set(b) & set(c)


def test_find_duplicate_found():
    assert find_duplicate([3, 1, 3, 4, 2]) == 3


def test_find_duplicate_smallest_wins():
    assert find_duplicate([5, 5, 2, 2]) == 2


def test_find_duplicate_none():
    assert find_duplicate([4, 1, 2]) is None


def test_unique_paths_known_value():
    assert unique_paths(3, 7) == 28


def test_unique_paths_single_row_or_column():
    assert unique_paths(1, 9) == 1
    assert unique_paths(9, 1) == 1


@given(st.integers(min_value=2, max_value=15), st.integers(min_value=2, max_value=15))
def test_unique_paths_recurrence_and_symmetry(rows, cols):
    assert unique_paths(rows, cols) == unique_paths(cols, rows)
    assert unique_paths(rows, cols) == unique_paths(rows - 1, cols) + unique_paths(rows, cols - 1)


def test_unique_paths_rejects_empty_grid():
    with pytest.raises(ValueError):
        unique_paths(0, 3)


@given(st.lists(st.integers(min_value=0, max_value=50), min_size=1, max_size=20))
def test_max_subarray_sum_non_negative_takes_all(items):
    assert max_subarray_sum(items) == sum(items)


@given(st.lists(st.integers(min_value=-50, max_value=-1), min_size=1, max_size=20))
def test_max_subarray_sum_all_negative_takes_largest(items):
    assert max_subarray_sum(items) == max(items)


@given(non_empty_ints)
def test_max_subarray_sum_bounds(items):
    result = max_subarray_sum(items)
    assert result >= max(items)
    assert result >= sum(items)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_kth_smallest_source_array():
    data = [12, 3, 5, 7, 19]
    assert kth_smallest(data, 1) == 3
    assert kth_smallest(data, 3) == 7
    assert kth_smallest(data, 5) == 19


@pytest.mark.parametrize("k", [0, 6, -1])
def test_kth_smallest_out_of_range(k):
    with pytest.raises(IndexError):
        kth_smallest([12, 3, 5, 7, 19], k)


def test_longest_zero_sum_example():
    assert longest_zero_sum_subarray([15, -2, 2, -8, 1, 7, 10, 23]) == 5


@given(st.lists(st.integers(min_value=1, max_value=20), max_size=20))
def test_longest_zero_sum_positive_is_zero(items):
    assert longest_zero_sum_subarray(items) == 0


@given(ints)
def test_longest_zero_sum_whole_when_total_zero(items):
    items = items + [-sum(items)]
    assert longest_zero_sum_subarray(items) == len(items)


def test_min_max_source_array():
    assert min_max([12, 3, 5, 7, 19]) == (3, 19)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_merge_intervals_overlapping():
    assert merge_intervals([[8, 10], [1, 3], [2, 6]]) == [(1, 6), (8, 10)]


def test_merge_intervals_touching_and_contained():
    assert merge_intervals([[1, 4], [4, 5]]) == [(1, 5)]
    assert merge_intervals([[1, 10], [2, 3]]) == [(1, 10)]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


@given(st.lists(st.tuples(st.integers(0, 50), st.integers(0, 20)), max_size=20))
def test_merge_intervals_disjoint_and_covering(raw):
    intervals = [(s, s + w) for s, w in raw]
    merged = merge_intervals(intervals)
    for (_, end), (start, _) in zip(merged, merged[1:]):
        assert end < start
    for s, e in intervals:
        assert any(ms <= s and e <= me for ms, me in merged)


def test_merge_sorted_in_place_example():
    first = [1, 5, 9, 10, 15, 20]
    second = [2, 3, 8, 13]
    assert merge_sorted_in_place(first, second) is None
    assert first == [1, 2, 3, 5, 8, 9]
    assert second == [10, 13, 15, 20]


@given(ints, ints)
def test_merge_sorted_in_place_invariant(a, b):
    first, second = sorted(a), sorted(b)
    merge_sorted_in_place(first, second)
    assert len(first) == len(a)
    assert len(second) == len(b)
    assert first + second == sorted(a + b)


def test_negatives_first_source_example():
    data = [-1, 2, -3, 4, 5, 6, -7, 8, 9]
    assert negatives_first(data) == [-7, -3, -1, 2, 4, 5, 6, 8, 9]


@given(ints)
def test_negatives_first_partition(items):
    result = negatives_first(items)
    assert sorted(result) == sorted(items)
    count = sum(1 for x in items if x < 0)
    assert all(x < 0 for x in result[:count])
    assert all(x >= 0 for x in result[count:])


def test_reverse_range_whole_source_array():
    data = [2, 99, 5, 6, 9, 75, 3]
    assert reverse_range(data, 0, len(data) - 1) == [3, 75, 9, 6, 5, 99, 2]
    assert data == [2, 99, 5, 6, 9, 75, 3]


def test_reverse_range_part():
    assert reverse_range([1, 2, 3, 4, 5], 1, 3) == [1, 4, 3, 2, 5]


def test_reverse_range_empty_range_unchanged():
    assert reverse_range([1, 2, 3], 2, 1) == [1, 2, 3]


def test_reverse_range_out_of_bounds():
    with pytest.raises(IndexError):
        reverse_range([1, 2, 3], 0, 3)


@given(ints)
def test_reverse_range_twice_is_identity(items):
    end = len(items) - 1
    assert reverse_range(reverse_range(items, 0, end), 0, end) == items


def test_rotate_right_example():
    assert rotate_right([1, 2, 3, 4]) == [4, 1, 2, 3]


def test_rotate_right_empty():
    assert rotate_right([]) == []


@given(ints)
def test_rotate_right_full_cycle(items):
    result = items
    for _ in range(len(items)):
        result = rotate_right(result)
    assert result == items