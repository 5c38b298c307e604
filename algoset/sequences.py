"""Puzzles on integer sequences: rearranging, scanning and merging."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from itertools import count, groupby


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` steps in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = nums[len(nums) - k :] + nums[: len(nums) - k]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(nums)) < len(nums)


def max_sliding_window(nums: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every window of ``k`` consecutive values."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    window: deque[int] = deque()
    result = []
    for i, value in enumerate(nums):
        while window and value >= nums[window[-1]]:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(nums[window[0]])
    return result


def remove_duplicates(nums: list[int]) -> int:
    """Move the distinct values of sorted ``nums`` to its front and return their count."""
    distinct = [value for value, _ in groupby(nums)]
    nums[: len(distinct)] = distinct
    return len(distinct)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping the others in order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def increasing_triplet(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k have nums[i] < nums[j] < nums[k]."""
    first = second = None
    for value in nums:
        if first is None or value <= first:
            first = value
        elif second is None or value <= second:
            second = value
        else:
            return True
    return False


def intersect(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """Return the common values of both sequences with multiplicity, sorted."""
    return sorted((Counter(nums1) & Counter(nums2)).elements())


def first_missing_positive(nums: Sequence[int]) -> int:
    """Return the smallest positive integer absent from ``nums``."""
    present = set(nums)
    return next(i for i in count(1) if i not in present)


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, return the next greater one after it in ``nums2``, or -1."""
    greater: dict[int, int] = {}
    stack: list[int] = []
    for value in nums2:
        while stack and value > stack[-1]:
            greater[stack.pop()] = value
        stack.append(value)
    return [greater.get(value, -1) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Return the next greater value of each element, wrapping around, or -1."""
    stack = list(reversed(nums))
    result = []
    for value in reversed(nums):
        while stack and value >= stack[-1]:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    result.reverse()
    return result


def can_jump(nums: Sequence[int]) -> bool:
    """Tell whether the last index can be reached by jumps of at most nums[i]."""
    last = len(nums) - 1
    reach = 0
    for i, step in enumerate(nums):
        if i > reach:
            return False
        reach = max(reach, i + step)
        if reach >= last:
            return True
    return True


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping closed intervals and return them sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Return the squares of a sorted sequence, sorted ascending."""
    result = [0] * len(nums)
    left, right = 0, len(nums) - 1
    for position in reversed(range(len(nums))):
        if abs(nums[right]) > abs(nums[left]):
            result[position] = nums[right] * nums[right]
            right -= 1
        else:
            result[position] = nums[left] * nums[left]
            left += 1
    return result


def find_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person trusted by all others who trusts nobody, or -1."""
    score = [0] * (n + 1)
    for truster, trusted in trust:
        for person in (truster, trusted):
            if not 1 <= person <= n:
                raise ValueError(f"person {person} is outside 1..{n}")
        score[truster] -= 1
        score[trusted] += 1
    return next((person for person in range(1, n + 1) if score[person] == n - 1), -1)