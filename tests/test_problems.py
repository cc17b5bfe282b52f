import math

import pytest

from dsakit.problems import (
    apply_letter_swaps,
    circle_points,
    consecutive_pairs,
    count_consistent_strings,
    count_occurrences,
    delete_greatest_value,
    diagonal_sum,
    find_occurrences,
    largest_cycle_sum,
    num_jewels_in_stones,
    odd_cells,
    truncate_sentence,
)


def test_count_consistent_strings_example():
    assert count_consistent_strings("ab", ["ad", "bd", "aaab", "baa", "badab"]) == 2


def test_count_consistent_strings_bounds():
    words = ["abc", "b", "", "cab"]
    assert count_consistent_strings("abc", words) == len(words)
    assert count_consistent_strings("", ["a", "b"]) == 0


def test_delete_greatest_value_example():
    assert delete_greatest_value([[1, 2, 4], [3, 3, 1]]) == 8


def test_delete_greatest_value_single_row_is_row_sum():
    row = [4, 9, 1, 7]
    assert delete_greatest_value([row]) == sum(row)


def test_delete_greatest_value_does_not_mutate():
    grid = [[3, 1], [2, 5]]
    delete_greatest_value(grid)
    assert grid == [[3, 1], [2, 5]]


def test_delete_greatest_value_errors():
    with pytest.raises(ValueError):
        delete_greatest_value([])
    with pytest.raises(ValueError):
        delete_greatest_value([[1, 2], [3]])


def test_diagonal_sum_example():
    assert diagonal_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 25


def test_diagonal_sum_even_counts_all_diagonal_cells():
    assert diagonal_sum([[1, 1], [1, 1]]) == 4
    assert diagonal_sum([[5]]) == 5


def test_diagonal_sum_rejects_non_square():
    with pytest.raises(ValueError):
        diagonal_sum([[1, 2, 3], [4, 5, 6]])


def test_num_jewels_in_stones_example():
    assert num_jewels_in_stones("aA", "aAAbbbb") == 3


def test_num_jewels_is_case_sensitive():
    assert num_jewels_in_stones("z", "ZZZ") == 0
    assert num_jewels_in_stones("Z", "ZZZ") == len("ZZZ")


def test_largest_cycle_sum_two_cycle():
    assert largest_cycle_sum([1, 0]) == 1


def test_largest_cycle_sum_no_cycle():
    assert largest_cycle_sum([-1, -1]) is None
    assert largest_cycle_sum([1, 2, -1]) is None
    assert largest_cycle_sum([]) is None


def test_largest_cycle_sum_extra_cycle_never_lowers_result():
    assert largest_cycle_sum([1, 0, 3, 2]) >= largest_cycle_sum([1, 0])


def test_odd_cells_example():
    assert odd_cells(2, 3, [[0, 1], [1, 1]]) == 6


def test_odd_cells_repeated_index_cancels():
    assert odd_cells(3, 3, []) == 0
    assert odd_cells(3, 3, [[1, 2], [1, 2]]) == 0


def test_odd_cells_out_of_range():
    with pytest.raises(IndexError):
        odd_cells(2, 2, [[2, 0]])


def test_truncate_sentence_example():
    assert truncate_sentence("Hello how are you Contestant", 4) == "Hello how are you"


def test_truncate_sentence_all_and_none():
    sentence = "Hello how are you Contestant"
    assert truncate_sentence(sentence, 5) == sentence
    assert truncate_sentence(sentence, 0) == ""


def test_truncate_sentence_too_many_words():
    with pytest.raises(ValueError):
        truncate_sentence("one two", 3)


def test_consecutive_pairs():
    assert consecutive_pairs([1, 2, 3, 4, 5]) == [(1, 2), (2, 3), (3, 4), (4, 5)]
    assert consecutive_pairs([1]) == []
    assert consecutive_pairs([]) == []


def test_count_occurrences_invariants():
    values = [2, 5, 6, 8, 6]
    counts = count_occurrences(values)
    assert list(counts) == sorted(set(values))
    assert sum(counts.values()) == len(values)
    assert counts[6] == values.count(6)


def test_find_occurrences():
    text = "geeksforgeeks a computer science"
    found = find_occurrences(text, "g")
    assert found[0] == text.find("g")
    assert found[1] == text.find("g", found[0] + 1)
    assert len(found) == text.count("g")
    assert all(text[i] == "g" for i in found)


def test_find_occurrences_rejects_long_char():
    with pytest.raises(ValueError):
        find_occurrences("abc", "ab")


def test_circle_points_lie_on_or_inside_circle():
    cx, cy, r = 320, 240, 100
    points = circle_points(cx, cy, r)
    assert len(points) == 4 * (r + 1)
    assert (cx, cy + r) in points
    assert (cx + r, cy) in points
    for x, y in points:
        distance = math.hypot(x - cx, y - cy)
        assert distance <= r


def test_circle_points_negative_radius():
    with pytest.raises(ValueError):
        circle_points(0, 0, -1)


def test_apply_letter_swaps_identity_without_swaps():
    text = "Hello, World 123!"
    assert apply_letter_swaps([], text) == text


def test_apply_letter_swaps_twice_restores():
    text = "Abc ab!"
    assert apply_letter_swaps([("A", "B"), ("A", "B")], text) == text


def test_apply_letter_swaps_keeps_case():
    assert apply_letter_swaps([("A", "B")], "AB ab") == "BA ba"


def test_apply_letter_swaps_rejects_lowercase_swap():
    with pytest.raises(ValueError):
        apply_letter_swaps([("a", "B")], "ab")