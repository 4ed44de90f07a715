import pytest

from algokit.subarrays import (
    count_subarrays_with_sum,
    longest_alternating_subarray,
    longest_positive_subarray_with_sum,
    longest_subarray_with_sum,
)


def test_alternating_source_example():
    assert longest_alternating_subarray([3, 2, 5, 4], 5) == 3


def test_alternating_all_odd_is_zero():
    assert longest_alternating_subarray([1, 3, 5], 10) == 0


def test_alternating_single_even():
    assert longest_alternating_subarray([2], 2) == 1


def test_alternating_threshold_blocks_everything():
    assert longest_alternating_subarray([2, 3, 4], 1) == 0


def test_alternating_full_run():
    nums = [2, 3, 4, 5, 6]
    assert longest_alternating_subarray(nums, max(nums)) == len(nums)


def test_alternating_threshold_cuts_run():
    nums = [2, 3, 4, 5, 6]
    assert longest_alternating_subarray(nums, 4) == len(nums[:3])


def test_alternating_same_parity_breaks_run():
    assert longest_alternating_subarray([2, 2, 2], 5) == 1


def test_alternating_empty():
    assert longest_alternating_subarray([], 5) == 0


def test_longest_with_sum_source_example():
    assert longest_subarray_with_sum([2, 3, 5, 1, 9], 10) == 3


def test_longest_with_sum_whole_array():
    nums = [4, -1, 2, -3, 6]
    assert longest_subarray_with_sum(nums, sum(nums)) == len(nums)


def test_longest_with_sum_handles_negatives():
    nums = [1, -1, 5, -2, 3]
    assert longest_subarray_with_sum(nums, 3) == len(nums[:4])


def test_longest_with_sum_absent():
    assert longest_subarray_with_sum([1, 2, 3], 100) == 0


@pytest.mark.parametrize(
    "nums, k",
    [
        ([2, 3, 5, 1, 9], 10),
        ([1, 2, 3, 1, 1, 1, 1], 3),
        ([5, 5, 5], 10),
        ([1, 1, 1, 1], 2),
        ([7], 7),
    ],
)
def test_sliding_window_agrees_with_prefix_map_on_positive_input(nums, k):
    assert longest_positive_subarray_with_sum(nums, k) == longest_subarray_with_sum(nums, k)


def test_positive_window_whole_array():
    nums = [1, 2, 3, 4]
    assert longest_positive_subarray_with_sum(nums, sum(nums)) == len(nums)


def test_positive_window_empty():
    assert longest_positive_subarray_with_sum([], 3) == 0


def test_count_with_sum_source_example_all_zeros():
    assert count_subarrays_with_sum([0] * 10, 0) == 55


def test_count_with_sum_single_match():
    assert count_subarrays_with_sum([4], 4) == 1


def test_count_with_sum_no_match():
    assert count_subarrays_with_sum([1, 2, 3], 100) == 0


def test_count_with_sum_whole_array_counts_at_least_once():
    nums = [3, -1, 2, 5]
    assert count_subarrays_with_sum(nums, sum(nums)) >= 1
    assert count_subarrays_with_sum([1, 1, 1], 1) == len([1, 1, 1])