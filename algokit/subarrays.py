"""Searches over contiguous subarrays: alternating runs and target sums."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate
from typing import Sequence


def longest_alternating_subarray(nums: Sequence[int], threshold: int) -> int:
    """Length of the longest run that starts even, alternates parity and stays <= threshold."""
    best = 0
    current = 0
    previous_parity = 0
    for value in nums:
        parity = value % 2
        if value > threshold:
            current = 0
        elif current and parity != previous_parity:
            current += 1
        elif parity == 0:
            current = 1
        else:
            current = 0
        previous_parity = parity
        best = max(best, current)
    return best


def longest_subarray_with_sum(nums: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to ``k``; works with negative numbers."""
    first_seen: dict[int, int] = {}
    longest = 0
    for index, total in enumerate(accumulate(nums)):
        if total == k:
            longest = max(longest, index + 1)
        start = first_seen.get(total - k)
        if start is not None:
            longest = max(longest, index - start)
        first_seen.setdefault(total, index)
    return longest


def longest_positive_subarray_with_sum(nums: Sequence[int], k: int) -> int:
    """Length of the longest subarray summing to ``k`` using a sliding window.

    Only correct for non-negative numbers.
    """
    left = 0
    total = 0
    longest = 0
    for right, value in enumerate(nums):
        total += value
        while left <= right and total > k:
            total -= nums[left]
            left += 1
        if total == k:
            longest = max(longest, right - left + 1)
    return longest


def count_subarrays_with_sum(nums: Sequence[int], k: int) -> int:
    """Number of subarrays whose elements sum to ``k``."""
    seen = Counter({0: 1})
    count = 0
    for total in accumulate(nums):
        count += seen[total - k]
        seen[total] += 1
    return count