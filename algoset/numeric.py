"""Small numeric algorithms."""

from __future__ import annotations

from math import isqrt
from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def check_overlap(
    radius: int, x_center: int, y_center: int, x1: int, y1: int, x2: int, y2: int
) -> bool:
    """Tell whether a circle and an axis-aligned rectangle share a point."""
    nearest_x = min(max(x_center, x1), x2)
    nearest_y = min(max(y_center, y1), y2)
    dx = x_center - nearest_x
    dy = y_center - nearest_y
    return dx * dx + dy * dy <= radius * radius


def num_water_bottles(num_bottles: int, num_exchange: int) -> int:
    """Total bottles drunk when num_exchange empties buy one full bottle."""
    if num_bottles < num_exchange:
        return num_bottles
    if num_exchange < 2:
        raise ValueError("num_exchange must be at least 2")
    drunk = 0
    while num_bottles >= num_exchange:
        num_bottles -= num_exchange
        drunk += num_exchange
        num_bottles += 1
    return drunk + num_bottles


def find_the_winner(n: int, k: int) -> int:
    """Last friend left when every k-th one round the circle leaves."""
    if n < 1 or k < 1:
        raise ValueError("n and k must be positive")
    circle = list(range(1, n + 1))
    start = 0
    while len(circle) > 1:
        start = (start + k - 1) % len(circle)
        del circle[start]
    return circle[0]


def pass_the_pillow(n: int, time: int) -> int:
    """Who holds the pillow after time seconds of passing it back and forth along n people."""
    if time < 0:
        raise ValueError("time must not be negative")
    if time == 0:
        return 1
    if n < 2:
        raise ValueError("at least two people are needed to pass the pillow")
    step = time % (2 * (n - 1))
    return 1 + step if step < n else 2 * n - 1 - step


def my_pow(x: float, n: int) -> float:
    """x raised to the integer power n by repeated squaring."""
    result = 1.0
    exponent = abs(n)
    while exponent > 0:
        if exponent % 2 == 0:
            x *= x
            exponent //= 2
        else:
            result *= x
            exponent -= 1
    return result if n > 0 else 1 / result


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of x, or 0 if the result leaves the 32-bit range."""
    sign = -1 if x < 0 else 1
    reversed_value = sign * int(str(abs(x))[::-1])
    return reversed_value if INT_MIN <= reversed_value <= INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether x reads the same backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def is_prime(x: int) -> bool:
    """Trial-division primality test."""
    if x < 2:
        return False
    return all(x % d for d in range(2, isqrt(x) + 1))


def prime_sub_operation(nums: Sequence[int]) -> bool:
    """Tell whether subtracting a smaller prime from some elements can make the list strictly increasing."""
    if not nums:
        raise ValueError("nums must not be empty")
    largest = max(nums)
    previous_prime = [0] * (largest + 1) if largest >= 0 else []
    for value in range(2, largest + 1):
        previous_prime[value] = value if is_prime(value) else previous_prime[value - 1]
    prior = 0
    for value in nums:
        bound = value - prior
        if bound <= 0:
            return False
        prior = value - previous_prime[bound - 1]
    return True