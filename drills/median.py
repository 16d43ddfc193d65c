"""Median of two sorted arrays by binary search over a partition."""

from __future__ import annotations

import math
from collections.abc import Sequence


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted sequences.

    Runs in O(log(min(m, n))) time.
    """
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1

    m, n = len(nums1), len(nums2)
    if m + n == 0:
        raise ValueError("cannot take the median of no numbers")

    half = (m + n + 1) // 2
    left, right = 0, m
    while left <= right:
        i = (left + right) // 2
        j = half - i

        a_left = nums1[i - 1] if i > 0 else -math.inf
        a_right = nums1[i] if i < m else math.inf
        b_left = nums2[j - 1] if j > 0 else -math.inf
        b_right = nums2[j] if j < n else math.inf

        if a_left <= b_right and b_left <= a_right:
            max_of_left = float(max(a_left, b_left))
            if (m + n) % 2 == 1:
                return max_of_left
            return (max_of_left + float(min(a_right, b_right))) / 2.0

        if a_left > b_right:
            right = i - 1
        else:
            left = i + 1

    raise ValueError("input arrays are not sorted")