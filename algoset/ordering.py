"""Searching, selecting and sorting integer sequences."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Callable, Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return where ``target`` is, or would be inserted, in sorted ``nums``."""
    return bisect_left(nums, target)


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the peak of a strictly rising then falling sequence."""
    if not arr:
        raise ValueError("empty sequence has no peak")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = (low + high) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def first_bad_version(n: int, is_bad: Callable[[int], bool]) -> int:
    """Return the first of versions 1..n for which ``is_bad`` holds."""
    first, last = 1, n
    while first < last:
        mid = first + (last - first) // 2
        if is_bad(mid):
            last = mid
        else:
            first = mid + 1
    return first


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest element (1-based) of ``nums``."""
    if not 1 <= k <= len(nums):
        raise IndexError(f"no element number {k} among {len(nums)}")
    return heapq.nlargest(k, nums)[-1]


def k_closest(points: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the ``k`` points nearest the origin; ties keep input order."""
    by_distance = sorted(points, key=lambda p: p[0] * p[0] + p[1] * p[1])
    return [list(point) for point in by_distance[:k]]


def _sift_down(items: list[int], root: int, end: int) -> None:
    while True:
        child = 2 * root + 1
        if child >= end:
            return
        if child + 1 < end and items[child + 1] > items[child]:
            child += 1
        if items[child] <= items[root]:
            return
        items[root], items[child] = items[child], items[root]
        root = child


def heap_sort(nums: list[int]) -> list[int]:
    """Sort ``nums`` ascending in place with heap sort and return it."""
    size = len(nums)
    for root in reversed(range(size // 2)):
        _sift_down(nums, root, size)
    for end in reversed(range(1, size)):
        nums[0], nums[end] = nums[end], nums[0]
        _sift_down(nums, 0, end)
    return nums


def sort_colors(nums: list[int]) -> None:
    """Sort a list of the values 0, 1 and 2 in place by counting them."""
    counts = Counter(nums)
    unexpected = set(counts) - {0, 1, 2}
    if unexpected:
        raise ValueError(f"unexpected colours: {sorted(unexpected)}")
    nums[:] = [colour for colour in (0, 1, 2) for _ in range(counts[colour])]


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return the ``k`` most frequent values, most frequent first.

    Equal frequencies are ordered by the larger value first.
    """
    counts = Counter(nums)
    ranked = heapq.nlargest(k, counts.items(), key=lambda item: (item[1], item[0]))
    return [value for value, _ in ranked]