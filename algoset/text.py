"""Puzzles on strings: brackets, palindromes, anagrams and reversals."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator

_PAIRS = {")": "(", "]": "[", "}": "{"}
_VOWELS = frozenset("aeiouAEIOU")


def min_remove_to_make_valid(s: str) -> str:
    """Drop the fewest parentheses needed to balance ``s``."""
    open_positions: list[int] = []
    dropped: set[int] = set()
    for position, char in enumerate(s):
        if char == "(":
            open_positions.append(position)
        elif char == ")":
            if open_positions:
                open_positions.pop()
            else:
                dropped.add(position)
    dropped.update(open_positions)
    return "".join(char for position, char in enumerate(s) if position not in dropped)


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    letters = [char.lower() for char in s if _is_ascii_alnum(char)]
    return letters == letters[::-1]


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` consists of correctly nested ``()``, ``[]`` and ``{}``."""
    stack: list[str] = []
    for char in s:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
        else:
            return False
    return not stack


def _parentheses(prefix: str, opened: int, closed: int, n: int) -> Iterator[str]:
    if opened + closed == 2 * n:
        yield prefix
    if opened < n:
        yield from _parentheses(prefix + "(", opened + 1, closed, n)
    if closed < opened:
        yield from _parentheses(prefix + ")", opened, closed + 1, n)


def generate_parentheses(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in order."""
    if n < 0:
        raise ValueError(f"number of pairs must not be negative, got {n}")
    return list(_parentheses("", 0, 0, n))


def is_anagram(s: str, t: str) -> bool:
    """Tell whether ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def word_pattern(pattern: str, s: str) -> bool:
    """Tell whether the words of ``s`` follow ``pattern`` one-to-one."""
    words = s.split()
    if len(words) != len(pattern):
        return False
    pairs = set(zip(pattern, words))
    return len(pairs) == len(set(pattern)) == len(set(words))


def reverse_vowels(s: str) -> str:
    """Reverse the order of the vowels in ``s``, leaving other characters in place."""
    chars = list(s)
    positions = [position for position, char in enumerate(chars) if char in _VOWELS]
    vowels = [chars[position] for position in reversed(positions)]
    for position, vowel in zip(positions, vowels):
        chars[position] = vowel
    return "".join(chars)


def first_uniq_char(s: str) -> int:
    """Return the index of the first character occurring once in ``s``, or -1."""
    counts = Counter(s)
    return next((i for i, char in enumerate(s) if counts[char] == 1), -1)


def find_the_difference(s: str, t: str) -> str:
    """Return the character that ``t`` holds beyond the characters of ``s``."""
    remaining = Counter(s)
    for char in t:
        if remaining[char]:
            remaining[char] -= 1
        else:
            return char
    raise ValueError(f"{t!r} holds no character beyond those of {s!r}")


def longest_palindrome_length(s: str) -> int:
    """Return the length of the longest palindrome buildable from the letters of ``s``."""
    counts = Counter(s).values()
    paired = sum(count - count % 2 for count in counts)
    has_odd = any(count % 2 for count in counts)
    return paired + (1 if has_odd else 0)


def reverse_words(s: str) -> str:
    """Reverse each space-separated word of ``s`` while keeping word order."""
    return " ".join(word[::-1] for word in s.split(" "))


def reverse_string(chars: list[str]) -> None:
    """Reverse a list of characters in place."""
    chars.reverse()