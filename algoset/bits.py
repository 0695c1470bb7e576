"""Bit-manipulation algorithms."""

from __future__ import annotations

from typing import Iterator, Sequence

_WORD_BITS = 32


def _set_bits(value: int) -> Iterator[int]:
    return (bit for bit in range(_WORD_BITS) if value >> bit & 1)


def get_maximum_xor(nums: Sequence[int], maximum_bit: int) -> list[int]:
    """For each prefix, longest first, the value below 2**maximum_bit maximising its XOR."""
    mask = (1 << maximum_bit) - 1
    answers: list[int] = []
    running = 0
    for value in nums:
        running ^= value
        answers.append(running ^ mask)
    answers.reverse()
    return answers


def largest_combination(candidates: Sequence[int]) -> int:
    """Size of the largest subset whose bitwise AND is non-zero."""
    return max(
        (sum(1 for num in candidates if num & (1 << bit)) for bit in range(24)),
        default=0,
    )


def maximum_value_sum(nums: Sequence[int], k: int, edges: Sequence[Sequence[int]]) -> int:
    """Largest sum after XOR-ing pairs of tree nodes (an even number of nodes) with k."""
    even, odd = 0, float("-inf")
    for value in reversed(nums):
        flipped = value ^ k
        even, odd = max(value + even, flipped + odd), max(value + odd, flipped + even)
    return even


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose OR is at least k, or -1."""
    counts = [0] * _WORD_BITS
    current = 0
    best: int | None = None
    left = 0
    for right, value in enumerate(nums):
        current |= value
        for bit in _set_bits(value):
            counts[bit] += 1
        while left <= right and current >= k:
            length = right - left + 1
            best = length if best is None else min(best, length)
            for bit in _set_bits(nums[left]):
                counts[bit] -= 1
                if counts[bit] == 0:
                    current &= ~(1 << bit)
            left += 1
    return -1 if best is None else best


def min_end(n: int, x: int) -> int:
    """Smallest last element of a strictly increasing run of n values whose AND is x."""
    if n < 1:
        raise ValueError("n must be positive")
    result = x
    remaining = n - 1
    bit = 1
    while remaining:
        if not x & bit:
            if remaining & 1:
                result |= bit
            remaining >>= 1
        bit <<= 1
    return result