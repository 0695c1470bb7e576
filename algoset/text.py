"""String algorithms."""

from __future__ import annotations

from collections import Counter
from math import gcd
from typing import Iterable


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the largest string that divides both inputs, or an empty string."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]


def reverse_parentheses(s: str) -> str:
    """Reverse each bracketed part, innermost first, and drop the brackets."""
    chars = list(s)
    openings: list[int] = []
    for index, ch in enumerate(chars):
        if ch == "(":
            openings.append(index)
        elif ch == ")":
            if not openings:
                raise ValueError(f"unmatched ')' at position {index}")
            start = openings.pop() + 1
            chars[start:index] = chars[start:index][::-1]
    return "".join(ch for ch in chars if ch not in "()")


def make_fancy_string(s: str) -> str:
    """Remove characters so that no three consecutive ones are equal."""
    out: list[str] = []
    for ch in s:
        if len(out) >= 2 and out[-1] == out[-2] == ch:
            continue
        out.append(ch)
    return "".join(out)


def reverse_words(s: str) -> str:
    """Reverse the order of whitespace-separated words."""
    return " ".join(reversed(s.split()))


def max_split_score(s: str) -> int:
    """Best count of zeros on the left plus ones on the right over all non-empty splits."""
    if len(s) < 2:
        raise ValueError("string must have at least two characters")
    ones = zeros = 0
    best = None
    for ch in s[:-1]:
        if ch == "1":
            ones += 1
        else:
            zeros += 1
        best = zeros - ones if best is None else max(best, zeros - ones)
    if s[-1] == "1":
        ones += 1
    return best + ones


def crawler_depth(logs: Iterable[str]) -> int:
    """Folder depth after following the change-directory operations."""
    depth = 0
    for operation in logs:
        if operation == "../":
            depth = max(depth - 1, 0)
        elif operation != "./":
            depth += 1
    return depth


def maximum_gain(s: str, x: int, y: int) -> int:
    """Most points from removing "ab" (worth x) and "ba" (worth y)."""
    a_count = b_count = 0
    lesser = min(x, y)
    result = 0
    for ch in s:
        if ch > "b":
            result += min(a_count, b_count) * lesser
            a_count = b_count = 0
        elif ch == "a":
            if x < y and b_count > 0:
                b_count -= 1
                result += y
            else:
                a_count += 1
        else:
            if x > y and a_count > 0:
                a_count -= 1
                result += x
            else:
                b_count += 1
    return result + min(a_count, b_count) * lesser


def append_characters(s: str, t: str) -> int:
    """Number of characters to append to s so that t becomes a subsequence."""
    matched = 0
    for ch in s:
        if matched < len(t) and ch == t[matched]:
            matched += 1
    return len(t) - matched


def is_circular_sentence(sentence: str) -> bool:
    """Tell whether each word ends with the letter the next one starts with, wrapping round."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    if sentence[0] != sentence[-1]:
        return False
    return all(
        before == after
        for before, ch, after in zip(sentence, sentence[1:], sentence[2:])
        if ch == " "
    )


def min_length(s: str) -> int:
    """Length left after repeatedly removing "AB" and "CD"."""
    while "AB" in s or "CD" in s:
        if "AB" in s:
            s = s.replace("AB", "", 1)
        else:
            s = s.replace("CD", "", 1)
    return len(s)


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    left = 0
    longest = 0
    for right, ch in enumerate(s):
        if ch in last_seen:
            left = max(last_seen[ch] + 1, left)
        last_seen[ch] = right
        longest = max(longest, right - left + 1)
    return longest


def min_changes(s: str) -> int:
    """Changes needed so the string splits into equal-character pairs."""
    if len(s) % 2:
        raise ValueError("string length must be even")
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def score_of_string(s: str) -> int:
    """Sum of absolute code differences between adjacent characters."""
    return sum(abs(ord(a) - ord(b)) for a, b in zip(s, s[1:]))


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s is a subsequence of t."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def longest_palindrome(s: str) -> int:
    """Length of the longest palindrome that can be built from the characters of s."""
    length = 0
    has_odd = False
    for freq in Counter(s).values():
        length += freq - freq % 2
        has_odd = has_odd or freq % 2 == 1
    return length + 1 if has_odd else length


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of s1 is a substring of s2."""
    if len(s1) > len(s2):
        return False
    wanted = Counter(s1)
    window: Counter[str] = Counter()
    size = len(s1)
    for index, ch in enumerate(s2):
        window[ch] += 1
        if index >= size:
            leaving = s2[index - size]
            window[leaving] -= 1
            if window[leaving] == 0:
                del window[leaving]
        if window == wanted:
            return True
    return False


def replace_words(dictionary: Iterable[str], sentence: str) -> str:
    """Replace each word by its shortest root from the dictionary."""
    roots = set(dictionary)
    words = sentence.split(" ")
    if sentence.endswith(" "):
        words.pop()

    def shortest_root(word: str) -> str:
        return next(
            (word[:end] for end in range(1, len(word) + 1) if word[:end] in roots),
            word,
        )

    return " ".join(shortest_root(word) for word in words)


def min_add_to_make_valid(s: str) -> int:
    """Fewest brackets to add to make the string balanced."""
    open_count = close_count = 0
    for ch in s:
        if ch == "(":
            open_count += 1
        elif open_count > 0:
            open_count -= 1
        else:
            close_count += 1
    return open_count + close_count