"""Puzzles on substrings: prefixes, windows, palindromes and partitions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import takewhile

_DNA_WINDOW = 10


def _common_length(a: str, b: str) -> int:
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(a, b)))


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string of ``strs``."""
    if not strs:
        raise ValueError("no strings given")
    prefix = strs[0]
    for other in strs[1:]:
        prefix = prefix[: _common_length(prefix, other)]
        if not prefix:
            break
    return prefix


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Return every ten-letter substring occurring more than once.

    Sequences are listed in the order in which they are first seen again.
    """
    seen: set[str] = set()
    repeated: dict[str, None] = {}
    for start in range(len(s) - _DNA_WINDOW + 1):
        window = s[start : start + _DNA_WINDOW]
        if window in seen:
            repeated.setdefault(window)
        else:
            seen.add(window)
    return list(repeated)


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = 0
    best = 0
    for position, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = position
        best = max(best, position - start + 1)
    return best


def frequency_sort(s: str) -> str:
    """Regroup the characters of ``s`` by frequency, most frequent first.

    Characters of equal frequency come in descending order.
    """
    ranked = sorted(
        Counter(s).items(), key=lambda item: (item[1], item[0]), reverse=True
    )
    return "".join(char * count for char, count in ranked)


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another.

    Groups are ordered by their sorted letters; each keeps input order.
    """
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return [groups[key] for key in sorted(groups)]


def longest_palindromic_substring(s: str) -> str:
    """Return the first longest palindromic substring of ``s``."""

    def expand(left: int, right: int) -> str:
        while left >= 0 and right < len(s) and s[left] == s[right]:
            left -= 1
            right += 1
        return s[left + 1 : right]

    best = ""
    for centre in range(len(s)):
        for candidate in (expand(centre, centre), expand(centre, centre + 1)):
            if len(candidate) > len(best):
                best = candidate
    return best


def check_inclusion(s1: str, s2: str) -> bool:
    """Tell whether some permutation of a non-empty ``s1`` is a substring of ``s2``."""
    size = len(s1)
    if not size or len(s2) < size:
        return False
    needed = Counter(s1)
    window = Counter(s2[:size])
    if window == needed:
        return True
    for entering, leaving in zip(s2[size:], s2):
        window[entering] += 1
        window[leaving] -= 1
        if window == needed:
            return True
    return False


def zigzag_convert(s: str, num_rows: int) -> str:
    """Write ``s`` in a zigzag over ``num_rows`` rows and read it row by row."""
    if num_rows <= 1:
        return s
    rows: list[list[str]] = [[] for _ in range(num_rows)]
    cycle = 2 * num_rows - 2
    for position, char in enumerate(s):
        phase = position % cycle
        rows[phase if phase < num_rows else cycle - phase].append(char)
    return "".join("".join(row) for row in rows)


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of ``s`` holding every character of ``t``.

    The leftmost window wins ties; "" is returned when there is none.
    """
    if not t:
        return ""
    needed = Counter(t)
    missing = len(t)
    start = 0
    best: tuple[int, int] | None = None
    for end, char in enumerate(s, start=1):
        if needed[char] > 0:
            missing -= 1
        needed[char] -= 1
        if missing:
            continue
        while needed[s[start]] < 0:
            needed[s[start]] += 1
            start += 1
        if best is None or end - start < best[1] - best[0]:
            best = (start, end)
        needed[s[start]] += 1
        missing += 1
        start += 1
    return s[best[0] : best[1]] if best else ""


def partition_labels(s: str) -> list[int]:
    """Split ``s`` into as many parts as possible, each letter in one part only.

    Returns the sizes of the parts in order.
    """
    last = {char: position for position, char in enumerate(s)}
    sizes = []
    start = end = 0
    for position, char in enumerate(s):
        end = max(end, last[char])
        if position == end:
            sizes.append(position - start + 1)
            start = position + 1
    return sizes


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is a rotation of ``s``."""
    return len(s) == len(goal) and s in goal + goal