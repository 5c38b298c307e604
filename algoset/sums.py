"""Puzzles on sums, products and totals over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return ``[i, j]`` with j < i and nums[i] + nums[j] == target, or [].

    ``i`` is the first index that completes a pair; ``j`` is the earliest
    index holding the complement.
    """
    first_index: dict[int, int] = {}
    for position, value in enumerate(nums):
        complement = target - value
        if complement in first_index:
            return [position, first_index[complement]]
        first_index.setdefault(value, position)
    return []


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values summing to zero, sorted."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for first in range(len(ordered) - 2):
        low, high = first + 1, len(ordered) - 1
        while low < high:
            total = ordered[first] + ordered[low] + ordered[high]
            if total == 0:
                found.add((ordered[first], ordered[low], ordered[high]))
                low += 1
                high -= 1
            elif total > 0:
                high -= 1
            else:
                low += 1
    return [list(triple) for triple in sorted(found)]


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three values closest to ``target``; 0 for fewer than three."""
    if len(nums) < 3:
        return 0
    closest = sum(nums[:3])
    ordered = sorted(nums)
    for first in range(len(ordered) - 2):
        if first > 0 and ordered[first] == ordered[first - 1]:
            continue
        low, high = first + 1, len(ordered) - 1
        while low < high:
            total = ordered[first] + ordered[low] + ordered[high]
            if total == target:
                return total
            if abs(target - total) < abs(target - closest):
                closest = total
            if total > target:
                high -= 1
            else:
                low += 1
    return closest


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two values of sorted ``numbers`` adding to ``target``, or []."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total > target:
            high -= 1
        else:
            low += 1
    return []


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of positive values summing to at least ``target``, or 0."""
    best = None
    start = 0
    total = 0
    for end, value in enumerate(nums, start=1):
        total += value
        while total >= target:
            best = end - start if best is None else min(best, end - start)
            total -= nums[start]
            start += 1
    return best or 0


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Count the contiguous runs of ``nums`` summing to ``k``."""
    prefix_counts = Counter({0: 1})
    running = 0
    matches = 0
    for value in nums:
        running += value
        matches += prefix_counts[running - k]
        prefix_counts[running] += 1
    return matches


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of every other value."""
    result = [1] * len(nums)
    left = 1
    for position, value in enumerate(nums):
        result[position] = left
        left *= value
    right = 1
    for position in reversed(range(len(nums))):
        result[position] *= right
        right *= nums[position]
    return result


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy-then-sell trades."""
    return sum(max(today - yesterday, 0) for yesterday, today in zip(prices, prices[1:]))


def rob(nums: Sequence[int]) -> int:
    """Return the largest sum of values of which no two are adjacent."""
    if not nums:
        return 0
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(best, before + value)
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water an elevation map holds."""
    left, right = 0, len(height) - 1
    max_left = max_right = 0
    water = 0
    while left < right:
        if height[left] <= height[right]:
            max_left = max(max_left, height[left])
            water += max_left - height[left]
            left += 1
        else:
            max_right = max(max_right, height[right])
            water += max_right - height[right]
            right -= 1
    return water


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Return the fewest boats, each carrying at most two people within ``limit``."""
    weights = sorted(people)
    light, heavy = 0, len(weights) - 1
    boats = 0
    while light <= heavy:
        if weights[light] + weights[heavy] <= limit:
            light += 1
        heavy -= 1
        boats += 1
    return boats


def single_number(nums: Sequence[int]) -> int:
    """Return the value that appears once when every other value appears twice."""
    return reduce(xor, nums, 0)


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that fills more than half of ``nums``."""
    if nums:
        value, count = Counter(nums).most_common(1)[0]
        if count > len(nums) // 2:
            return value
    raise ValueError("no value fills more than half of the sequence")