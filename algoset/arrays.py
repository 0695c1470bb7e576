"""Algorithms that rearrange or examine lists."""

from __future__ import annotations

import heapq
from collections import Counter
from math import prod
from typing import Sequence


def rotate(nums: list[int], k: int) -> None:
    """Rotate the list, in place, k steps to the right."""
    if k < 0:
        raise ValueError("k must not be negative")
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of a sorted list to its front and return their count."""
    if not nums:
        return 0
    write = 0
    for read, value in enumerate(nums[1:], start=1):
        if value != nums[write]:
            write += 1
            nums[write], nums[read] = value, nums[write]
    return write + 1


def move_zeroes(nums: list[int]) -> None:
    """Move every zero to the end, in place, keeping the order of the rest."""
    non_zero = [value for value in nums if value != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def next_permutation(nums: list[int]) -> None:
    """Rearrange, in place, into the next permutation in lexicographic order."""
    pivot = next(
        (i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None
    )
    if pivot is None:
        nums.reverse()
        return
    successor = next(j for j in range(len(nums) - 1, pivot, -1) if nums[j] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def wiggle_sort(nums: list[int]) -> None:
    """Reorder, in place, so that nums[0] < nums[1] > nums[2] < nums[3] ..."""
    ordered = sorted(nums)
    half = (len(nums) - 1) // 2 + 1
    nums[::2] = ordered[:half][::-1]
    nums[1::2] = ordered[half:][::-1]


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge nums2 into the first m values of nums1, which has room for them."""
    if n != len(nums2):
        raise ValueError("n must be the length of nums2")
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for nums2")
    nums1[m : m + n] = nums2
    nums1.sort()


def rearrange_array(nums: Sequence[int]) -> list[int]:
    """Alternate non-negative and negative values, keeping each group's order."""
    positives = [value for value in nums if value >= 0]
    negatives = [value for value in nums if value < 0]
    if len(positives) != len(negatives):
        raise ValueError("there must be as many negative values as non-negative ones")
    return [value for pair in zip(positives, negatives) for value in pair]


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of all the other values, as a new list."""
    zeros = sum(1 for value in nums if value == 0)
    product = 0 if zeros > 1 else prod(value for value in nums if value != 0)
    return [
        product if value == 0 else product // value if zeros == 0 else 0
        for value in nums
    ]


def decrypt(code: Sequence[int], k: int) -> list[int]:
    """Replace each value of the circular code by the sum of its next k (or previous -k) values."""
    size = len(code)
    if k == 0 or not code:
        return [0] * size
    if abs(k) >= size:
        raise ValueError("|k| must be smaller than the length of the code")
    offsets = range(1, k + 1) if k > 0 else range(k, 0)
    return [sum(code[(i + offset) % size] for offset in offsets) for i in range(size)]


def find_length_of_shortest_subarray(arr: Sequence[int]) -> int:
    """Length of the shortest subarray whose removal leaves the list non-decreasing."""
    size = len(arr)
    if not size:
        return 0
    right = size - 1
    while right > 0 and arr[right] >= arr[right - 1]:
        right -= 1
    best = right
    left = 0
    while left < right and (left == 0 or arr[left - 1] <= arr[left]):
        while right < size and arr[left] > arr[right]:
            right += 1
        best = min(best, right - left - 1)
        left += 1
    return best


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether the list is a rotation of a non-decreasing list."""
    descents = sum(a > b for a, b in zip(nums, list(nums[1:]) + list(nums[:1])))
    return descents <= 1


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    middle = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:middle])
    right, right_count = _sort_and_count(values[middle:])
    cross = 0
    j = 0
    for value in left:
        while j < len(right) and value > 2 * right[j]:
            j += 1
        cross += j
    return list(heapq.merge(left, right)), left_count + right_count + cross


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count(list(nums))[1]


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Values common to both lists, with multiplicity, in ascending order."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())