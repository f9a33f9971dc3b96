# classic_algos

Textbook algorithms written as plain Python functions and classes:
sorting, graph traversal, minimum spanning trees, binary search trees,
a head-growing linked list and a handful of numeric and string puzzles.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `classic_algos.sorting`

Every sort takes any iterable of integers and returns a new list. The
input is left as it was.

- `insertion_sort`, `bubble_sort`, `heap_sort`, `merge_sort`, `quick_sort`.
- `radix_sort`: base-10 least-significant-digit sort. It raises
  `ValueError` for negative numbers.
- `bucket_sort(values, interval=10, bucket_count=6)`: puts values into
  buckets of width `interval` and sorts each bucket. `fill_buckets` with the
  same arguments returns the unsorted buckets. In each bucket the newest
  value comes first. A value that falls outside the buckets raises
  `ValueError`.
- `merge(left, right)`: merges two sorted sequences. When two elements are
  equal, the one from `left` comes first.
- `partition(values, low, high)`: partitions `values[low:high + 1]` in place
  around its last element and returns the pivot's final index. A range
  outside the sequence raises `IndexError`.

### `classic_algos.bfs`

- `matrix_breadth_first(matrix, start)`: breadth-first order over a square
  adjacency matrix. Neighbours are visited in ascending index order.
- `ListGraph(vertex_count)`: an undirected graph stored as adjacency lists,
  kept in the order the edges were added. It has `add_edge`, `neighbours`,
  `breadth_first` and `is_bipartite`. `is_bipartite` checks the component
  that contains the start vertex.

### `classic_algos.dfs`

- `Graph(vertex_count)`: an undirected graph whose adjacency lists hold the
  newest edge first. It has `add_edge`, `neighbours`, `depth_first`
  (preorder) and `describe`, which returns the adjacency lists as text.

Vertices out of range raise `ValueError` in both graph modules.

### `classic_algos.spanning_tree`

- `prim_mst(matrix)`: returns each vertex's parent in a minimum spanning
  tree rooted at vertex 0. The root's parent is `None`. A weight of zero
  means there is no edge. A disconnected graph raises `ValueError`.
- `format_mst(parents, matrix)`: returns an `Edge`/`Weight` table as text.

### `classic_algos.bst`

- `TreeNode(data, left=None, right=None)`.
- `pre_order`, `in_order`, `post_order`: each returns a list of values.
- `get_level(node, data)`: the level of the first matching node, with the
  root at level 1, or `None` if no node matches.
- `insert`, `delete`, `minimum_value_node`: editing for binary search
  trees. `insert` and `delete` return the new root.
- `table_rows(node)`: a tuple `(item, left, right)` for every node that has
  at least one child, in pre-order. A missing child is given as `None`.

### `classic_algos.linked_list`

- `LinkedList`: `push(data)` adds to the head. `nth_from_last(n)` counts
  from 1 at the tail and raises `IndexError` when `n` is out of range. The
  list supports `len()` and iteration from head to tail.

### `classic_algos.puzzles`

- `is_power_of_four(n)`.
- `swap_bits(x, p1, p2, n)`: swaps two `n`-bit fields of a 32-bit
  unsigned word.
- `count_squares(a, b)`: the number of perfect squares in `[a, b]`.
- `segment_union_length(segments)`: the total length covered by a union of
  segments (Klee's algorithm).
- `longest_increasing_subsequence(values)`: the length of the longest
  strictly increasing subsequence.
- `anagram_deletions(first, second)`: how many characters must be deleted
  to make the two strings anagrams.

## Examples

```python
from classic_algos.sorting import merge_sort, radix_sort
from classic_algos.puzzles import segment_union_length, swap_bits

merge_sort([12, 11, 13, 5, 6, 7])                # [5, 6, 7, 11, 12, 13]
radix_sort([170, 45, 75, 90, 802, 24, 2, 66])    # [2, 24, 45, 66, 75, 90, 170, 802]
segment_union_length([(2, 5), (4, 8), (9, 12)])  # 9
swap_bits(28, 0, 3, 2)                           # 7
```

```python
from classic_algos.dfs import Graph

graph = Graph(4)
graph.add_edge(0, 1)
graph.add_edge(0, 2)
graph.add_edge(1, 3)
graph.depth_first(0)                             # [0, 2, 1, 3]
```

```python
from classic_algos.bst import insert, in_order, delete

root = None
for value in (1, 2, 3, 4, 5):
    root = insert(root, value)
root = delete(root, 3)
in_order(root)                                   # [1, 2, 4, 5]
```

## What it does not include

The package has no routines for searching within a sequence, and none for
shortest paths in a weighted graph. It has no command-line tools. Every
algorithm is used by calling it from Python.