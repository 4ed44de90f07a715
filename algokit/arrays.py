"""Algorithms on integer sequences: ordering checks, merges and in-place edits."""

from __future__ import annotations

from heapq import merge
from itertools import pairwise
from typing import MutableSequence, Sequence

_INT_MAX = 2**31 - 1


def is_sorted(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is in non-decreasing order."""
    return all(prev <= cur for prev, cur in pairwise(nums))


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a non-decreasing sequence rotated by some amount."""
    if not nums:
        raise ValueError("is_sorted_rotated() requires a non-empty sequence")
    drops = sum(prev > cur for prev, cur in pairwise(nums))
    if nums[-1] > nums[0]:
        drops += 1
    return drops <= 1


def sorted_intersection(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the common elements of two sorted sequences, keeping multiplicity."""
    result: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        a, b = first[i], second[j]
        if a == b:
            result.append(a)
            i += 1
            j += 1
        elif a > b:
            j += 1
        else:
            i += 1
    return result


def sorted_union(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Return the distinct elements of two sorted sequences, in sorted order."""
    result: list[int] = []
    for value in merge(first, second):
        if not result or result[-1] != value:
            result.append(value)
    return result


def largest_element(nums: Sequence[int]) -> int:
    """Return the largest element of a non-empty sequence."""
    if not nums:
        raise ValueError("largest_element() requires a non-empty sequence")
    return max(nums)


def second_largest(nums: Sequence[int]) -> int:
    """Return the second largest distinct element, or -1 when there is none."""
    if not nums:
        raise ValueError("second_largest() requires a non-empty sequence")
    largest = nums[0]
    runner_up = -1
    for value in nums[1:]:
        if value > largest:
            runner_up = largest
            largest = value
        elif value != largest and runner_up < value:
            runner_up = value
    return runner_up


def second_smallest(nums: Sequence[int]) -> int:
    """Return the second smallest distinct element, or 2**31 - 1 when there is none."""
    if not nums:
        raise ValueError("second_smallest() requires a non-empty sequence")
    smallest = nums[0]
    runner_up = _INT_MAX
    for value in nums[1:]:
        if value < smallest:
            runner_up = smallest
            smallest = value
        elif value != smallest and runner_up > value:
            runner_up = value
    return runner_up


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the other elements."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted sequence in place so its first k items are distinct; return k."""
    if not nums:
        return 0
    last = 0
    for value in nums[1:]:
        if value != nums[last]:
            last += 1
            nums[last] = value
    return last + 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` positions, in place."""
    if not nums:
        raise ValueError("rotate() requires a non-empty sequence")
    shift = k % len(nums)
    if shift:
        nums[:] = list(nums[-shift:]) + list(nums[:-shift])