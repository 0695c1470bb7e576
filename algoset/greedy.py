"""Greedy, heap and binary-search algorithms."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from itertools import combinations
from typing import Sequence


def mincost_to_hire_workers(quality: Sequence[int], wage: Sequence[int], k: int) -> float:
    """Least cost of hiring exactly k workers, each paid in proportion to quality."""
    if len(quality) != len(wage):
        raise ValueError("quality and wage must have the same length")
    if not 1 <= k <= len(quality):
        raise ValueError("k must be between 1 and the number of workers")
    workers = sorted((w / q, q) for q, w in zip(quality, wage))
    chosen: list[int] = []  # max-heap of qualities, stored negated
    total = 0
    best: float | None = None
    for ratio, q in workers:
        heapq.heappush(chosen, -q)
        total += q
        if len(chosen) > k:
            total += heapq.heappop(chosen)
        if len(chosen) == k:
            cost = total * ratio
            best = cost if best is None else min(best, cost)
    return best


def _stores_needed(limit: int, quantities: Sequence[int]) -> float:
    if limit == 0:
        return len(quantities) if all(q == 0 for q in quantities) else float("inf")
    return sum(max(1, -(-q // limit)) for q in quantities)


def minimized_maximum(n: int, quantities: Sequence[int]) -> int:
    """Smallest possible largest share when products are spread over n stores."""
    if not quantities:
        raise ValueError("quantities must not be empty")
    low, high = 0, max(quantities)
    while low < high:
        middle = (low + high) // 2
        if _stores_needed(middle, quantities) <= n:
            high = middle
        else:
            low = middle + 1
    return low


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Fewest boats, each carrying at most two people within the weight limit."""
    weights = sorted(people)
    left, right = 0, len(weights) - 1
    boats = 0
    while left <= right:
        if weights[left] + weights[right] <= limit:
            left += 1
        right -= 1
        boats += 1
    return boats


def is_n_straight_hand(hand: Sequence[int], group_size: int) -> bool:
    """Tell whether the cards split into runs of group_size consecutive values."""
    if group_size < 1:
        raise ValueError("group_size must be positive")
    if len(hand) % group_size:
        return False
    counts = Counter(hand)
    for card in sorted(counts):
        needed = counts[card]
        if not needed:
            continue
        for value in range(card, card + group_size):
            if counts[value] < needed:
                return False
            counts[value] -= needed
    return True


@dataclass
class _Robot:
    index: int
    health: int
    direction: str


def survived_robots_healths(
    positions: Sequence[int], healths: Sequence[int], directions: str
) -> list[int]:
    """Healths of the robots left after all collisions, in their original order."""
    if not len(positions) == len(healths) == len(directions):
        raise ValueError("positions, healths and directions must have the same length")
    if set(directions) - {"L", "R"}:
        raise ValueError("directions may only hold 'L' and 'R'")
    robots = [
        _Robot(index, health, direction)
        for index, (health, direction) in enumerate(zip(healths, directions))
    ]
    robots.sort(key=lambda robot: positions[robot.index])
    stack: list[_Robot] = []
    for robot in robots:
        if robot.direction == "R" or not stack or stack[-1].direction == "L":
            stack.append(robot)
            continue
        survives = True
        while survives and stack and stack[-1].direction == "R":
            top = stack[-1]
            if robot.health > top.health:
                stack.pop()
                robot.health -= 1
            elif robot.health < top.health:
                top.health -= 1
                survives = False
            else:
                stack.pop()
                survives = False
        if survives:
            stack.append(robot)
    return [robot.health for robot in sorted(stack, key=lambda robot: robot.index)]


def kth_smallest_prime_fraction(arr: Sequence[int], k: int) -> list[int]:
    """Numerator and denominator of the k-th smallest fraction arr[i] / arr[j], i < j."""
    pair_count = len(arr) * (len(arr) - 1) // 2
    if not 1 <= k <= pair_count:
        raise ValueError("k must be between 1 and the number of fractions")
    smallest = heapq.nsmallest(
        k, combinations(arr, 2), key=lambda pair: (Fraction(pair[0], pair[1]), pair)
    )
    numerator, denominator = smallest[-1]
    return [numerator, denominator]


def maximum_happiness_sum(happiness: Sequence[int], k: int) -> int:
    """Most happiness from picking k children, each pick lowering the rest by one."""
    total = 0
    for turn, value in enumerate(sorted(happiness, reverse=True)[: max(k, 0)]):
        gain = value - turn
        if gain <= 0:
            break
        total += gain
    return total


def divide_players(skill: Sequence[int]) -> int:
    """Sum of team chemistries when players pair into equal-skill teams, or -1."""
    if not skill:
        raise ValueError("skill must not be empty")
    ordered = sorted(skill)
    target = ordered[0] + ordered[-1]
    chemistry = 0
    for low, high in zip(ordered[: len(ordered) // 2], reversed(ordered)):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry