import pytest

from algoset.sequences import (
    can_jump,
    contains_duplicate,
    find_judge,
    first_missing_positive,
    increasing_triplet,
    intersect,
    max_sliding_window,
    merge_intervals,
    move_zeroes,
    next_greater_element,
    next_greater_elements,
    remove_duplicates,
    remove_element,
    rotate,
    sorted_squares,
)


def test_rotate_by_one_moves_last_to_front():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 1)
    assert nums == [7, 1, 2, 3, 4, 5, 6]


@pytest.mark.parametrize("k", [0, 1, 3, 7, 10])
def test_rotate_round_trip(k):
    original = [1, 2, 3, 4, 5, 6, 7]
    nums = list(original)
    rotate(nums, k)
    assert sorted(nums) == original
    rotate(nums, len(original) - k % len(original))
    assert nums == original


def test_rotate_full_length_is_identity():
    nums = [-1, -100, 3, 99]
    rotate(nums, 4)
    assert nums == [-1, -100, 3, 99]


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1])
    assert not contains_duplicate([1, 2, 3, 4])
    assert not contains_duplicate([])


@pytest.mark.parametrize("k", [1, 2, 3, 8])
def test_max_sliding_window_invariants(k):
    nums = [1, 3, -1, -3, 5, 3, 6, 7]
    result = max_sliding_window(nums, k)
    assert len(result) == len(nums) - k + 1
    for start, value in enumerate(result):
        window = nums[start : start + k]
        assert value in window
        assert all(value >= x for x in window)


def test_max_sliding_window_single_element_windows():
    assert max_sliding_window([4, -2, 9], 1) == [4, -2, 9]


def test_max_sliding_window_bad_size():
    with pytest.raises(ValueError):
        max_sliding_window([1, 2], 0)


def test_remove_duplicates():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    original = list(nums)
    size = remove_duplicates(nums)
    assert size == len(set(original))
    assert nums[:size] == sorted(set(original))
    assert len(nums) == len(original)


def test_remove_element():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    size = remove_element(nums, 2)
    assert size == len(nums)
    assert 2 not in nums
    assert nums == [0, 1, 3, 0, 4]


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    move_zeroes(nums)
    assert nums == [1, 3, 12, 0, 0]


def test_move_zeroes_keeps_length_and_order():
    original = [4, 0, 0, -1, 0, 7]
    nums = list(original)
    move_zeroes(nums)
    nonzero = [x for x in original if x]
    assert nums[: len(nonzero)] == nonzero
    assert set(nums[len(nonzero) :]) == {0}


@pytest.mark.parametrize("nums", [[1, 2, 3, 4, 5], [2, 1, 5, 0, 4, 6], [5, 1, 6, 2, 3]])
def test_increasing_triplet_found(nums):
    assert increasing_triplet(nums)


@pytest.mark.parametrize("nums", [[5, 4, 3, 2, 1], [], [1, 1, 1, 1], [2, 1]])
def test_increasing_triplet_absent(nums):
    assert not increasing_triplet(nums)


def test_intersect():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [4, 9]
    assert intersect([1], []) == []


@pytest.mark.parametrize("nums", [[1, 2, 0], [3, 4, -1, 1], [7, 8, 9, 11, 12], []])
def test_first_missing_positive_invariant(nums):
    result = first_missing_positive(nums)
    assert result >= 1
    assert result not in nums
    assert all(i in nums for i in range(1, result))


def test_first_missing_positive_example():
    assert first_missing_positive([1, 2, 0]) == 3


def test_next_greater_element_example():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]


def test_next_greater_element_invariant():
    nums2 = [2, 7, 1, 8, 3, 5]
    result = next_greater_element(nums2, nums2)
    for i, (value, greater) in enumerate(zip(nums2, result)):
        later = [x for x in nums2[i + 1 :] if x > value]
        assert greater == (later[0] if later else -1)


def test_next_greater_elements_example():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]


def test_next_greater_elements_wraps():
    nums = [5, 4, 3, 2, 1]
    result = next_greater_elements(nums)
    assert result[0] == -1
    assert all(value == 5 for value in result[1:])


def test_can_jump():
    assert can_jump([2, 3, 1, 1, 4])
    assert not can_jump([3, 2, 1, 0, 4])
    assert can_jump([0])
    assert not can_jump([0, 1])


def test_merge_intervals():
    assert merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]]) == [[1, 6], [8, 10], [15, 18]]
    assert merge_intervals([[1, 4], [4, 5]]) == [[1, 5]]
    assert merge_intervals([[4, 5], [1, 2]]) == [[1, 2], [4, 5]]


def test_sorted_squares_example():
    assert sorted_squares([-4, -1, 0, 3, 10]) == [0, 1, 9, 16, 100]


@pytest.mark.parametrize("nums", [[-7, -3, 2, 3, 11], [-5, -2], [1, 2, 3], [0]])
def test_sorted_squares_invariants(nums):
    result = sorted_squares(nums)
    assert result == sorted(result)
    assert len(result) == len(nums)
    assert all(any(x * x == r for x in nums) for r in result)


def test_find_judge():
    assert find_judge(2, [[1, 2]]) == 2
    assert find_judge(3, [[1, 3], [2, 3]]) == 3
    assert find_judge(3, [[1, 3], [2, 3], [3, 1]]) == -1
    assert find_judge(1, []) == 1


def test_find_judge_rejects_unknown_person():
    with pytest.raises(ValueError):
        find_judge(2, [[1, 3]])