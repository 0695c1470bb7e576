"""Algorithms on intervals and ordered pairs."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping (or touching) intervals, returned in order of start."""
    merged: list[list[int]] = []
    for start, end in sorted((iv[0], iv[1]) for iv in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest groups such that no two closed intervals in a group intersect."""
    starts = sorted(iv[0] for iv in intervals)
    ends = sorted(iv[1] for iv in intervals)
    end_index = 0
    groups = 0
    for start in starts:
        if start > ends[end_index]:
            end_index += 1
        else:
            groups += 1
    return groups


def average_waiting_time(customers: Sequence[Sequence[int]]) -> float:
    """Mean wait of customers served in order by a single cook."""
    if not customers:
        raise ValueError("there must be at least one customer")
    total = 0
    clock = 0
    for arrival, service in customers:
        clock = max(clock, arrival)
        total += clock - arrival + service
        clock += service
    return total / len(customers)


def maximum_beauty(items: Sequence[Sequence[int]], queries: Sequence[int]) -> list[int]:
    """For each query price, the best beauty among items costing at most that much."""
    steps: list[tuple[int, int]] = [(0, 0)]
    for price, beauty in sorted((item[0], item[1]) for item in items):
        if beauty > steps[-1][1]:
            steps.append((price, beauty))
    prices = [price for price, _ in steps]
    answers: list[int] = []
    for query in queries:
        index = bisect_right(prices, query) - 1
        if index >= 0:
            answers.append(steps[index][1])
    return answers


def max_envelopes(envelopes: Sequence[Sequence[int]]) -> int:
    """Most envelopes that can be nested strictly inside one another."""
    ordered = sorted(envelopes, key=lambda env: (env[0], -env[1]))
    tails: list[int] = []
    for _, height in ordered:
        index = bisect_left(tails, height)
        if index == len(tails):
            tails.append(height)
        else:
            tails[index] = height
    return len(tails)