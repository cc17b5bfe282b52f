# dsakit

A small collection of classic data structures and algorithms, written as
plain, dependency-free Python, with a command-line tool for a handful of
graph, grid and text problems.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularSinglyLinkedList`, `CircularDoublyLinkedList`, plus `ListNode`, `build_list`, `list_values` and `delete_node` for working with raw node chains |
| `dsakit.stacks` | `ArrayStack` (fixed capacity, 100 by default) and `LinkedStack` (unbounded) |
| `dsakit.queues` | `LinearQueue` and `CircularQueue`, both fixed capacity (6 by default) |
| `dsakit.hashmap` | `HashMap`, a separately chained integer hash map |
| `dsakit.disjoint_set` | `DisjointSet`, union by rank with path compression |
| `dsakit.bst` | `BinarySearchTree` with insertion, deletion, `minimum` and the three depth-first traversals |
| `dsakit.graphs` | `adjacency_list`, `bfs_order`, `dfs_order`, `bfs_distances`, `nearest_meeting_node`, `compromised_neighbours`, `is_reachable`, `prim_mst`, `rotting_time` |
| `dsakit.sorting` | `binary_search` and `merge_sort` |
| `dsakit.problems` | `count_consistent_strings`, `delete_greatest_value`, `diagonal_sum`, `num_jewels_in_stones`, `largest_cycle_sum`, `odd_cells`, `truncate_sentence`, `consecutive_pairs`, `count_occurrences`, `find_occurrences`, `circle_points`, `apply_letter_swaps` |
| `dsakit.pairs` | `IntPair`, a frozen pair of integers that adds component-wise |
| `dsakit.cli` | the `dsakit` command |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Linked lists are iterable and sized; the doubly linked ones also support
`reversed()`. Popping from an empty list raises `IndexError`.

```python
from dsakit.linked_lists import SinglyLinkedList

items = SinglyLinkedList()
for value in range(1, 7):
    items.push_front(value)
for value in range(7, 11):
    items.push_back(value)

print(list(items))   # [6, 5, 4, 3, 2, 1, 7, 8, 9, 10]
print(len(items))    # 10
```

`CircularSinglyLinkedList.insert(value, position)` accepts positions from 0
to `len(list)` and raises `IndexError` for anything else.

Stacks and queues raise `OverflowError` when full and `IndexError` when
empty:

```python
from dsakit.stacks import LinkedStack

stack = LinkedStack()
for value in (10, 20, 30):
    stack.push(value)
print(list(stack))   # [30, 20, 10]  (top first)
print(stack.pop())   # 30
print(stack.peek())  # 20
```

`HashMap.get` returns -1 for a key that is not stored:

```python
from dsakit.hashmap import HashMap

table = HashMap()
table.put(1, 100)
print(table.get(1))  # 100
print(table.get(2))  # -1
```

Searching and sorting:

```python
from dsakit.sorting import binary_search, merge_sort

print(binary_search([1, 3, 5, 7, 9], 7))     # 3
print(merge_sort([12, 11, 13, 5, 6, 7]))     # [5, 6, 7, 11, 12, 13]
```

A binary search tree keeps its values in order:

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (6, 15, 1, 20, 3, 5):
    tree.insert(value)

print(list(tree))    # [1, 3, 5, 6, 15, 20]
print(15 in tree)    # True
```

Disjoint sets:

```python
from dsakit.disjoint_set import DisjointSet

sets = DisjointSet()
for item in range(1, 5):
    sets.make_set(item)
sets.union(1, 2)
sets.union(3, 4)

print(sets.find(1) == sets.find(2))   # True
print(sets.find(1) == sets.find(3))   # False
```

A few of the problem solvers:

```python
from dsakit.problems import diagonal_sum, num_jewels_in_stones, truncate_sentence

print(diagonal_sum([[1, 2, 3], [4, 5, 6], [7, 8, 9]]))      # 25
print(num_jewels_in_stones("aA", "aAAbbbb"))                # 3
print(truncate_sentence("Hello how are you Contestant", 4)) # Hello how are you
```

```python
from dsakit.pairs import IntPair

print(IntPair(10, 5) + IntPair(2, 4))   # 12 + i9
```

## Command line

Installing the package provides a `dsakit` command. Each subcommand reads
whitespace-separated input from standard input and prints its answer:

```
dsakit --help
```

| Command | Input | Output |
| --- | --- | --- |
| `traverse` | vertex count `n`, edge count, then that many `u v` pairs | the adjacency list for vertices `0..n`, then BFS and DFS orders from vertex 1 |
| `nearest` | count `n`, `n` edge targets (0-based, -1 for none), then two 1-based start vertices | the 1-based nearest meeting node, or 0 if there is none |
| `reach` | member count, the member ids, edge count, edges, sender, recipient | `1` if the recipient is reachable, else `0` |
| `rot` | rows, columns, then the grid of 0/1/2 cells | minutes until every fresh cell rots, or -1 |
| `compromised` | node count, node ids, edge count, edges `u v` (u is a contact of v), enemy, person | the person's contacts through which the enemy is reached |
| `swap` | swap count, that many pairs of uppercase letters, then the text on the following line | the text with the swaps applied |
| `xor` | three integers | their exclusive-or |
| `subtract` | two integers | the first minus the second |

For example:

```
echo "3 5 2" | dsakit xor
```

prints `4`. Malformed input prints an error to standard error and the
command exits with status 1.

## What it does not do

`circle_points` only computes the points of a circle; nothing in the package
opens a window or draws them. The data structures live in memory only and
are not saved anywhere.