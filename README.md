# algoset

A library of classic algorithm exercises, grouped by theme into plain
functions and a few small classes. It uses only the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `algoset.linkedlist`

`ListNode` (fields `val` and `next`) plus `from_values` and `to_values` to
build a list from an iterable and read it back. Operations:
`detect_cycle`, `reorder_list`, `get_intersection_node`,
`remove_nth_from_end`, `add_two_numbers`, `reverse_list`,
`is_palindrome_list` (restores the list after checking), `swap_pairs`,
`odd_even_list`, `delete_duplicates` (drops every value that repeats in a
sorted list) and `middle_node`. `remove_nth_from_end` raises `ValueError`
when `n` is not positive or the list is too short.

### `algoset.trees`

`TreeNode` (fields `val`, `left`, `right`) with an `inorder()` generator,
plus `max_depth`, `sorted_array_to_bst`, `kth_smallest` (1-based; raises
`IndexError` when there is no such element), `is_identical` and
`is_subtree`.

### `algoset.designs`

- `MinStack`: `push`, `pop`, `top`, `get_min`; the last three raise
  `IndexError` on an empty stack.
- `QueueStack`: a stack kept in one queue, with `push`, `pop`, `top`, `empty`.
- `IntHashMap`: `put`, `get` (returns -1 for a missing key), `remove`.
- `SinglyLinkedList`: optionally built from an iterable; `get` (returns -1
  out of range), `add_at_head`, `add_at_tail`, `add_at_index`,
  `delete_at_index` (out-of-range positions are ignored). Supports `len()`
  and iteration.
- `Calendar`: `book(start, end)` accepts a half-open booking unless it
  overlaps an earlier one.

### `algoset.grids`

`find_ball`, `live_neighbours`, `game_of_life`, `rotate_image`,
`spiral_order`, `generate_spiral_matrix`, `max_area_of_island`,
`flood_fill` and `word_exists`.

### `algoset.numbers`

`day_of_year` (takes `YYYY-MM-DD`), `pascal_row`, `roman_to_int`,
`digit_square_sum`, `is_happy`, `missing_number`, `is_power_of_three`,
`count_bits`, `fizz_buzz`, `multiply_strings`, `plus_one`, `climb_stairs`
and `powerful_integers` (returned sorted). Malformed input such as a bad
date, an invalid Roman numeral or a non-digit string raises `ValueError`.

### `algoset.ordering`

`search_insert`, `binary_search`, `peak_index_in_mountain`,
`first_bad_version(n, is_bad)` (takes the predicate as a callable),
`find_kth_largest`, `k_closest`, `heap_sort`, `sort_colors` and
`top_k_frequent`.

### `algoset.text`

`min_remove_to_make_valid`, `is_palindrome`, `is_valid_parentheses`,
`generate_parentheses`, `is_anagram`, `word_pattern`, `reverse_vowels`,
`first_uniq_char`, `find_the_difference`, `longest_palindrome_length`,
`reverse_words` and `reverse_string`.

### `algoset.sequences`

`rotate`, `contains_duplicate`, `max_sliding_window`, `remove_duplicates`,
`remove_element`, `move_zeroes`, `increasing_triplet`, `intersect`,
`first_missing_positive`, `next_greater_element`, `next_greater_elements`,
`can_jump`, `merge_intervals`, `sorted_squares` and `find_judge`.

### `algoset.substrings`

`longest_common_prefix`, `find_repeated_dna_sequences`,
`length_of_longest_substring`, `frequency_sort`, `group_anagrams`,
`longest_palindromic_substring`, `check_inclusion`, `zigzag_convert`,
`min_window`, `partition_labels` and `rotate_string`.

### `algoset.sums`

`two_sum`, `three_sum`, `three_sum_closest`, `two_sum_sorted`,
`min_subarray_len`, `subarray_sum`, `product_except_self`, `max_profit`,
`rob`, `trap`, `num_rescue_boats`, `single_number` and `majority_element`
(raises `ValueError` when no value fills more than half).

## Example

    from algoset.linkedlist import from_values, reverse_list, to_values
    from algoset.sums import two_sum
    from algoset.designs import MinStack

    to_values(reverse_list(from_values([1, 2, 3])))   # [3, 2, 1]
    two_sum([2, 7, 11, 15], 9)                        # [1, 0]

    stack = MinStack()
    stack.push(3)
    stack.push(1)
    stack.get_min()                                   # 1

Functions that work in place, such as `rotate_image`, `game_of_life`,
`sort_colors`, `heap_sort`, `rotate`, `move_zeroes` and `reverse_string`,
change the list you pass in.