import pytest

from algoset.linkedlist import (
    ListNode,
    add_two_numbers,
    delete_duplicates,
    detect_cycle,
    from_values,
    get_intersection_node,
    is_palindrome_list,
    middle_node,
    odd_even_list,
    remove_nth_from_end,
    reorder_list,
    reverse_list,
    swap_pairs,
    to_values,
)


def _nodes(head):
    nodes = []
    while head is not None:
        nodes.append(head)
        head = head.next
    return nodes


def _as_int(digits):
    return int("".join(str(d) for d in reversed(digits))) if digits else 0


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [5, 5, 0, -3]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_detect_cycle_finds_entry():
    head = from_values([3, 2, 0, -4])
    nodes = _nodes(head)
    nodes[-1].next = nodes[1]
    assert detect_cycle(head) is nodes[1]


def test_detect_cycle_self_loop():
    node = ListNode(1)
    node.next = node
    assert detect_cycle(node) is node


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4]])
def test_detect_cycle_acyclic(values):
    assert detect_cycle(from_values(values)) is None


def test_reorder_list_example():
    head = from_values([1, 2, 3, 4])
    reorder_list(head)
    assert to_values(head) == [1, 4, 2, 3]


@pytest.mark.parametrize("n", range(0, 9))
def test_reorder_list_preserves_values(n):
    values = list(range(n))
    head = from_values(values)
    reorder_list(head)
    result = to_values(head)
    assert sorted(result) == values
    if n:
        assert result[0] == values[0]
    if n >= 2:
        assert result[1] == values[-1]


def test_intersection_found():
    shared = from_values([8, 4, 5])
    a = from_values([4, 1])
    _nodes(a)[-1].next = shared
    b = from_values([5, 6, 1])
    _nodes(b)[-1].next = shared
    assert get_intersection_node(a, b) is shared


def test_intersection_absent():
    assert get_intersection_node(from_values([1, 2]), from_values([3])) is None
    assert get_intersection_node(None, from_values([3])) is None


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_remove_nth_from_end(n):
    values = [10, 20, 30, 40, 50]
    pos = len(values) - n
    result = to_values(remove_nth_from_end(from_values(values), n))
    assert result == values[:pos] + values[pos + 1 :]


def test_remove_only_node():
    assert remove_nth_from_end(from_values([1]), 1) is None


@pytest.mark.parametrize("n", [0, 4])
def test_remove_nth_out_of_range(n):
    with pytest.raises(ValueError):
        remove_nth_from_end(from_values([1, 2, 3]), n)


def test_add_two_numbers_example():
    result = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 4]))
    assert to_values(result) == [7, 0, 8]


@pytest.mark.parametrize(
    "a,b", [([9, 9, 9, 9, 9, 9, 9], [9, 9, 9, 9]), ([0], [0]), ([1], []), ([5], [5])]
)
def test_add_two_numbers_matches_int_sum(a, b):
    result = to_values(add_two_numbers(from_values(a), from_values(b)))
    assert _as_int(result) == _as_int(a) + _as_int(b)
    assert all(0 <= d <= 9 for d in result)


def test_add_two_empty():
    assert add_two_numbers(None, None) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == values[::-1]


@pytest.mark.parametrize(
    "values,expected",
    [([1, 2, 2, 1], True), ([1, 2], False), ([1], True), ([], True), ([1, 2, 1], True), ([1, 2, 3], False)],
)
def test_is_palindrome_list(values, expected):
    head = from_values(values)
    assert is_palindrome_list(head) is expected
    assert to_values(head) == values


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 6])
def test_swap_pairs(n):
    values = list(range(n))
    result = to_values(swap_pairs(from_values(values)))
    assert sorted(result) == values
    even = n - n % 2
    assert result[0:even:2] == values[1:even:2]
    assert result[1:even:2] == values[0:even:2]
    assert to_values(swap_pairs(from_values(result))) == values


@pytest.mark.parametrize("n", range(0, 8))
def test_odd_even_list(n):
    values = list(range(1, n + 1))
    result = to_values(odd_even_list(from_values(values)))
    assert result == values[::2] + values[1::2]


def test_delete_duplicates_example():
    result = delete_duplicates(from_values([1, 2, 3, 3, 4, 4, 5]))
    assert to_values(result) == [1, 2, 5]


@pytest.mark.parametrize("values", [[1, 1, 1, 2, 3], [1, 1], [], [1, 2, 2], [4]])
def test_delete_duplicates_keeps_unique(values):
    result = to_values(delete_duplicates(from_values(values)))
    assert result == [v for v in values if values.count(v) == 1]


@pytest.mark.parametrize("n", range(1, 8))
def test_middle_node(n):
    values = list(range(n))
    assert middle_node(from_values(values)).val == values[n // 2]


def test_middle_node_empty():
    assert middle_node(None) is None