"""String algorithms: palindromes, reversals, merging and compression."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable
from itertools import groupby, zip_longest

_VOWELS = frozenset("aeiouAEIOU")


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == text[::-1]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def frequency_count(text: str) -> Counter[str]:
    """Return how often each character occurs in ``text``."""
    return Counter(text)


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words, appending whatever is left of the longer one."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both, or an empty string."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: math.gcd(len(str1), len(str2))]


def reverse_vowels(text: str) -> str:
    """Return ``text`` with only its vowels in reverse order."""
    chars = list(text)
    left, right = 0, len(chars) - 1
    while left < right:
        while left < right and chars[left] not in _VOWELS:
            left += 1
        while left < right and chars[right] not in _VOWELS:
            right -= 1
        chars[left], chars[right] = chars[right], chars[left]
        left += 1
        right -= 1
    return "".join(chars)


def reverse_words(text: str) -> str:
    """Return the space-separated words of ``text`` in reverse order, singly spaced."""
    return " ".join(reversed([word for word in text.split(" ") if word]))


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length encode characters: each run becomes the character and, if longer than one, its count's digits."""
    result: list[str] = []
    for char, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(char)
        if count > 1:
            result.extend(str(count))
    return result


def is_subsequence(s: str, t: str) -> bool:
    """Return True if ``s`` can be formed by deleting characters from ``t``."""
    remaining = iter(t)
    return all(char in remaining for char in s)