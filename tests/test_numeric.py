import pytest

from algoset.numeric import (
    check_overlap,
    find_the_winner,
    is_palindrome_number,
    is_prime,
    my_pow,
    num_water_bottles,
    pass_the_pillow,
    prime_sub_operation,
    reverse_integer,
)


def test_check_overlap_touching_edge():
    assert check_overlap(1, 0, 0, 1, -1, 3, 1)


def test_check_overlap_apart():
    assert not check_overlap(1, 1, 1, 1, -3, 2, -1)


def test_check_overlap_center_inside():
    assert check_overlap(1, 0, 0, -1, 0, 0, 1)


def test_num_water_bottles_worked_example():
    assert num_water_bottles(9, 3) == 13


def test_num_water_bottles_too_few_to_exchange():
    assert num_water_bottles(5, 6) == 5


def test_num_water_bottles_never_below_start():
    for bottles in range(1, 30):
        assert num_water_bottles(bottles, 4) >= bottles


def test_num_water_bottles_rejects_exchange_of_one():
    with pytest.raises(ValueError):
        num_water_bottles(5, 1)


def test_find_the_winner_k_one_is_last():
    assert find_the_winner(7, 1) == 7


def test_find_the_winner_single_player():
    assert find_the_winner(1, 5) == 1


def test_find_the_winner_in_range():
    for n in range(1, 12):
        for k in range(1, 6):
            assert 1 <= find_the_winner(n, k) <= n


def test_find_the_winner_rejects_bad_input():
    with pytest.raises(ValueError):
        find_the_winner(0, 2)


def test_pass_the_pillow_reaches_end():
    n = 6
    assert pass_the_pillow(n, n - 1) == n


def test_pass_the_pillow_symmetry():
    n = 5
    for t in range(n):
        assert pass_the_pillow(n, t) + pass_the_pillow(n, n - 1 - t) == n + 1


def test_pass_the_pillow_periodic():
    n = 4
    for t in range(20):
        assert pass_the_pillow(n, t) == pass_the_pillow(n, t + 2 * (n - 1))


def test_pass_the_pillow_needs_two_people():
    with pytest.raises(ValueError):
        pass_the_pillow(1, 3)


@pytest.mark.parametrize("x, n", [(2.0, 10), (2.1, 3), (2.0, -2), (0.5, 0), (-3.0, 5)])
def test_my_pow_matches_builtin(x, n):
    assert my_pow(x, n) == pytest.approx(x**n)


def test_reverse_integer_round_trip():
    for value in (123, -4567, 1, 908070601):
        assert reverse_integer(reverse_integer(value)) == value


def test_reverse_integer_sign_symmetry():
    assert reverse_integer(-1234) == -reverse_integer(1234)


def test_reverse_integer_trailing_zeros_dropped():
    assert reverse_integer(120) == reverse_integer(12)


def test_reverse_integer_overflow_gives_zero():
    assert reverse_integer(1534236469) == 0


def test_is_palindrome_number():
    assert is_palindrome_number(121)
    assert not is_palindrome_number(-121)
    assert not is_palindrome_number(10)
    assert is_palindrome_number(0)


@pytest.mark.parametrize("value", [2, 3, 5, 7, 11, 13, 97])
def test_is_prime_primes(value):
    assert is_prime(value)


@pytest.mark.parametrize("value", [0, 1, 4, 9, 15, 100])
def test_is_prime_non_primes(value):
    assert not is_prime(value)


def test_prime_sub_operation_possible():
    assert prime_sub_operation([4, 9, 6, 10])
    assert prime_sub_operation([6, 8, 11, 12])


def test_prime_sub_operation_impossible():
    assert not prime_sub_operation([5, 8, 3])


def test_prime_sub_operation_does_not_mutate():
    nums = [4, 9, 6, 10]
    prime_sub_operation(nums)
    assert nums == [4, 9, 6, 10]


def test_prime_sub_operation_empty():
    with pytest.raises(ValueError):
        prime_sub_operation([])