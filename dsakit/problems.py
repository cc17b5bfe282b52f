"""Small array, matrix and string problems."""

from __future__ import annotations

import math
from collections import Counter
from string import ascii_uppercase
from typing import Any, Hashable, Iterable, Optional, Sequence


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Count the words made only of characters found in ``allowed``."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def delete_greatest_value(grid: Sequence[Sequence[int]]) -> int:
    """Sum, round by round, the largest value removed from each row.

    Rows are sorted and column maxima added up; a column whose values are all
    negative contributes 0. The grid is not modified.
    """
    if not grid:
        raise ValueError("grid must have at least one row")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    sorted_rows = [sorted(row) for row in grid]
    return sum(max(0, *column) for column in zip(*sorted_rows))


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    total = sum(row[i] + row[size - i - 1] for i, row in enumerate(matrix))
    if size % 2:
        total -= matrix[size // 2][size // 2]
    return total


def num_jewels_in_stones(jewels: str, stones: str) -> int:
    """Count the characters of ``stones`` that appear in ``jewels``."""
    jewel_set = set(jewels)
    return sum(1 for stone in stones if stone in jewel_set)


def largest_cycle_sum(arr: Sequence[int]) -> Optional[int]:
    """Return the largest cycle sum in a graph where ``i`` points to ``arr[i]``.

    A walk starts from each unvisited vertex and adds up the indices it
    visits; if it comes back to its start, the start is added once more and
    the total counts as a cycle sum. A target outside the array (such as -1)
    ends the walk. None is returned when no walk closes a cycle.
    """
    size = len(arr)
    visited = [False] * size
    best: Optional[int] = None
    for start in range(size):
        current = start
        total = 0
        while 0 <= current < size and not visited[current]:
            visited[current] = True
            total += current
            current = arr[current]
            if current == start:
                total += current
                best = total if best is None else max(best, total)
                break
    return best


def odd_cells(rows: int, cols: int, indices: Iterable[Sequence[int]]) -> int:
    """Count odd cells after incrementing a whole row and column per index pair."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    row_hits = [0] * rows
    col_hits = [0] * cols
    for row, col in indices:
        if not (0 <= row < rows and 0 <= col < cols):
            raise IndexError(f"index ({row}, {col}) is outside a {rows}x{cols} matrix")
        row_hits[row] += 1
        col_hits[col] += 1
    return sum(1 for r in row_hits for c in col_hits if (r + c) % 2)


def truncate_sentence(sentence: str, k: int) -> str:
    """Keep the first ``k`` space-separated words of ``sentence``."""
    words = sentence.split(" ")
    if not 0 <= k <= len(words):
        raise ValueError(f"k must lie between 0 and {len(words)}")
    return " ".join(words[:k])


def consecutive_pairs(values: Iterable[Any]) -> list[tuple[Any, Any]]:
    """Pair each value with the one after it."""
    items = list(values)
    return list(zip(items, items[1:]))


def count_occurrences(values: Iterable[Hashable]) -> dict:
    """Count each distinct value, with keys in ascending order."""
    return dict(sorted(Counter(values).items()))


def find_occurrences(text: str, char: str) -> list[int]:
    """Return every index at which ``char`` occurs in ``text``."""
    if len(char) != 1:
        raise ValueError("char must be a single character")
    return [index for index, found in enumerate(text) if found == char]


def circle_points(center_x: int, center_y: int, radius: int) -> list[tuple[int, int]]:
    """Return the integer points that trace a circle, four per column offset.

    For each horizontal offset ``x`` from 0 up to the radius the height is
    the integer square root of ``radius**2 - x**2``, mirrored into all four
    quadrants. Points on an axis appear more than once.
    """
    if radius < 0:
        raise ValueError("radius must not be negative")
    limit = min(math.floor(radius * math.sqrt(2)), radius)
    points = []
    for x in range(limit + 1):
        y = math.isqrt(radius * radius - x * x)
        points.extend(
            [
                (center_x + x, center_y + y),
                (center_x + x, center_y - y),
                (center_x - x, center_y + y),
                (center_x - x, center_y - y),
            ]
        )
    return points


def _letter_index(letter: str) -> int:
    if len(letter) != 1 or letter not in ascii_uppercase:
        raise ValueError(f"swap letters must be single uppercase A-Z, got {letter!r}")
    return ord(letter) - ord("A")


def apply_letter_swaps(swaps: Iterable[Sequence[str]], text: str) -> str:
    """Apply a sequence of pairwise letter swaps to ``text``.

    Each swap exchanges what two uppercase letters map to. Letters in the text
    are replaced through the final mapping with their case kept; anything
    that is not an ASCII letter is left alone.
    """
    mapping = list(ascii_uppercase)
    for first, second in swaps:
        i, j = _letter_index(first), _letter_index(second)
        mapping[i], mapping[j] = mapping[j], mapping[i]
    table = {}
    for upper, target in zip(ascii_uppercase, mapping):
        table[upper] = target
        table[upper.lower()] = target.lower()
    return text.translate(str.maketrans(table))