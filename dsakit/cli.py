"""Command-line front end that reads problem input from standard input."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Optional, Sequence

from dsakit.graphs import (
    adjacency_list,
    bfs_order,
    compromised_neighbours,
    dfs_order,
    is_reachable,
    nearest_meeting_node,
    rotting_time,
)
from dsakit.problems import apply_letter_swaps

_WORD_PATTERN = re.compile(r"\S+")
_NON_SPACE = re.compile(r"\S")


class _Scanner:
    """Pulls whitespace-separated words, single characters and lines from text."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def word(self) -> str:
        match = _WORD_PATTERN.search(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of input")
        self._pos = match.end()
        return match.group()

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError(f"count must not be negative, got {value}")
        return value

    def char(self) -> str:
        match = _NON_SPACE.search(self._text, self._pos)
        if match is None:
            raise ValueError("unexpected end of input")
        self._pos = match.end()
        return match.group()

    def next_line(self) -> str:
        """Skip the rest of the current line and return the one after it."""
        newline = self._text.find("\n", self._pos)
        if newline == -1:
            self._pos = len(self._text)
            return ""
        start = newline + 1
        end = self._text.find("\n", start)
        if end == -1:
            end = len(self._text)
        self._pos = end
        return self._text[start:end].rstrip("\r")

    def edges(self, count: int) -> list[tuple[int, int]]:
        return [(self.integer(), self.integer()) for _ in range(count)]


def _traverse(scanner: _Scanner) -> list[str]:
    node_count = scanner.count()
    edge_count = scanner.count()
    if node_count < 1:
        raise ValueError("the graph needs at least vertex 1 to start from")
    adjacency = adjacency_list(node_count, scanner.edges(edge_count))
    lines = ["adj list"]
    for vertex, neighbours in enumerate(adjacency):
        lines.append(" ".join([f"{vertex} ->", *map(str, neighbours)]))
    lines.append("BFS")
    lines.append(" ".join(map(str, bfs_order(adjacency, 1))))
    lines.append("DFS")
    lines.append(" ".join(map(str, dfs_order(adjacency, 1))))
    return lines


def _nearest(scanner: _Scanner) -> list[str]:
    count = scanner.count()
    edges = [scanner.integer() for _ in range(count)]
    first = scanner.integer()
    second = scanner.integer()
    # Vertices are numbered from 1 on input and output; 0 means no meeting node.
    node = nearest_meeting_node(edges, first - 1, second - 1)
    return [str(0 if node is None else node + 1)]


def _reach(scanner: _Scanner) -> list[str]:
    members = scanner.count()
    for _ in range(members):
        scanner.integer()
    edges = scanner.edges(scanner.count())
    sender = scanner.integer()
    recipient = scanner.integer()
    return ["1" if is_reachable(edges, sender, recipient) else "0"]


def _rot(scanner: _Scanner) -> list[str]:
    rows = scanner.count()
    cols = scanner.count()
    grid = [[scanner.integer() for _ in range(cols)] for _ in range(rows)]
    minutes = rotting_time(grid)
    return [str(-1 if minutes is None else minutes)]


def _compromised(scanner: _Scanner) -> list[str]:
    nodes = [scanner.integer() for _ in range(scanner.count())]
    edges = scanner.edges(scanner.count())
    enemy = scanner.integer()
    person = scanner.integer()
    return [" ".join(map(str, compromised_neighbours(nodes, edges, enemy, person)))]


def _swap(scanner: _Scanner) -> list[str]:
    count = scanner.count()
    swaps = [(scanner.char(), scanner.char()) for _ in range(count)]
    text = scanner.next_line()
    return [apply_letter_swaps(swaps, text)]


def _xor(scanner: _Scanner) -> list[str]:
    return [str(scanner.integer() ^ scanner.integer() ^ scanner.integer())]


def _subtract(scanner: _Scanner) -> list[str]:
    return [str(scanner.integer() - scanner.integer())]


_COMMANDS: dict[str, tuple[Callable[[_Scanner], list[str]], str]] = {
    "traverse": (_traverse, "print an adjacency list and BFS/DFS orders from vertex 1"),
    "nearest": (_nearest, "nearest node reachable from two starts in a functional graph"),
    "reach": (_reach, "tell whether a message can reach a recipient (1 or 0)"),
    "rot": (_rot, "minutes until every fresh orange rots, or -1"),
    "compromised": (_compromised, "contacts of a person through which the enemy is reached"),
    "swap": (_swap, "apply letter swaps to a line of text"),
    "xor": (_xor, "exclusive-or of three integers"),
    "subtract": (_subtract, "difference of two integers"),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit", description="Solve small graph, grid and text problems read from stdin."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one problem command on standard input; return the exit status."""
    args = _build_parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    scanner = _Scanner(sys.stdin.read())
    try:
        lines = handler(scanner)
    except (ValueError, IndexError) as error:
        print(f"dsakit {args.command}: error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())