"""Counting, prefix-sum and two-pointer algorithms on lists of numbers."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import accumulate
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair of values, in scan order, that add up to target."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return [seen[partner], index]
        seen[value] = index
    raise ValueError("no two values add up to target")


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from buying once and selling later, or 0."""
    best = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def three_consecutive_odds(arr: Sequence[int]) -> bool:
    """Tell whether three odd values stand next to each other."""
    run = 0
    for value in arr:
        run = run + 1 if value % 2 else 0
        if run == 3:
            return True
    return False


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    most = max([0, *candies])
    return [count + extra_candies >= most for count in candies]


def min_difference(nums: Sequence[int]) -> int:
    """Smallest max-minus-min after changing at most three values."""
    if len(nums) <= 4:
        return 0
    ordered = sorted(nums)
    size = len(ordered)
    return min(ordered[size - 4 + i] - ordered[i] for i in range(4))


def majority_element(nums: Sequence[int]) -> int:
    """The value holding more than half the list, found by majority voting."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 0
    for value in nums:
        if count == 0:
            candidate, count = value, 1
        elif value == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Distinct sorted quadruples of values that add up to target, in the order found."""
    ordered = sorted(nums)
    size = len(ordered)
    found: list[list[int]] = []
    seen: set[tuple[int, int, int, int]] = set()
    for i in range(size - 3):
        for j in range(i + 1, size - 2):
            low, high = j + 1, size - 1
            while low < high:
                total = ordered[i] + ordered[j] + ordered[low] + ordered[high]
                if total == target:
                    quad = (ordered[i], ordered[j], ordered[low], ordered[high])
                    if quad not in seen:
                        seen.add(quad)
                        found.append(list(quad))
                    low += 1
                    high -= 1
                elif total < target:
                    low += 1
                else:
                    high -= 1
    return found


def max_frequency(nums: Sequence[int], k: int) -> int:
    """Highest count of one value reachable with at most k increments."""
    ordered = sorted(nums)
    left = 0
    window_sum = 0
    best = 0
    for right, value in enumerate(ordered):
        window_sum += value
        while (right - left + 1) * value - window_sum > k:
            window_sum -= ordered[left]
            left += 1
        best = max(best, right - left + 1)
    return best


def majority_element_ii(nums: Sequence[int]) -> list[int]:
    """Values that occur more than len(nums) // 3 times."""
    first = second = 0
    first_count = second_count = 0
    for value in nums:
        if first_count == 0 and second != value:
            first, first_count = value, 1
        elif second_count == 0 and first != value:
            second, second_count = value, 1
        elif value == first:
            first_count += 1
        elif value == second:
            second_count += 1
        else:
            first_count -= 1
            second_count -= 1

    first_count = second_count = 0
    for value in nums:
        if value == first:
            first_count += 1
        elif value == second:
            second_count += 1

    threshold = len(nums) // 3
    result: list[int] = []
    if first_count > threshold:
        result.append(first)
    if second_count > threshold:
        result.append(second)
    return result


def ways_to_split_array(nums: Sequence[int]) -> int:
    """Number of split points where the left sum is at least the right sum."""
    total = sum(nums)
    prefixes = list(accumulate(nums))[:-1]
    return sum(1 for left in prefixes if left >= total - left)


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Number of pairs i < j whose sum lies in [lower, upper]."""
    ordered = sorted(nums)
    size = len(ordered)
    count = 0
    for i, value in enumerate(ordered[:-1]):
        high = bisect_right(ordered, upper - value, i + 1, size)
        low = bisect_left(ordered, lower - value, i + 1, size)
        count += high - low
    return count


def min_moves2(nums: Sequence[int]) -> int:
    """Fewest unit steps to make every value equal."""
    if not nums:
        raise ValueError("nums must not be empty")
    ordered = sorted(nums)
    median = ordered[len(ordered) // 2]
    return sum(abs(value - median) for value in ordered)


def check_subarray_sum(nums: Sequence[int], k: int) -> bool:
    """Tell whether a run of at least two values sums to a multiple of k."""
    if k <= 0:
        raise ValueError("k must be positive")
    first_seen = {0: -1}
    running = 0
    for index, value in enumerate(nums):
        running += value
        remainder = running % k
        if remainder not in first_seen:
            first_seen[remainder] = index
        elif index - first_seen[remainder] > 1:
            return True
    return False


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Tell whether exactly n more flowers fit with no two adjacent."""
    previous = 0
    for current, following in zip(flowerbed, [*flowerbed[1:], 0]):
        if n <= 0:
            break
        if previous == current == following == 0:
            n -= 1
            previous = 1
        else:
            previous = current
    return n == 0


def results_array(nums: Sequence[int], k: int) -> list[int]:
    """Power of each window of size k: its last value if ascending by one, else -1."""
    if not 1 <= k <= len(nums):
        raise ValueError("k must be between 1 and the length of nums")
    result: list[int] = []
    run = 0
    previous: int | None = None
    for index, value in enumerate(nums):
        run = run + 1 if previous is not None and value == previous + 1 else 1
        previous = value
        if index >= k - 1:
            result.append(value if run >= k else -1)
    return result