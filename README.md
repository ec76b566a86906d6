# dsakit

A compact collection of classic data structures and algorithms written in
plain Python with no third-party dependencies. Everything is a library
function or class; there is no command-line program.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `naive_find`, `kmp_find`, `prefix_table`, `binary_search`, `linear_search` |
| `dsakit.strings` | `length`, `substring`, `char_at`, `concatenate`, `insert`, `delete`, `replace` |
| `dsakit.bst` | `Node`, `BinarySearchTree`, `is_bst`, `smallest_value`, `sorted_array_to_bst` |
| `dsakit.bst_problems` | `distance_k_sum`, `recover_tree`, `largest_bst_subtree` |
| `dsakit.tree_traversal` | `preorder`, `inorder`, `postorder`, `level_order`, `build_level_order`, `complete_tree`, `kth_inorder`, `invert_tree`, `boundary_traversal`, `count_paths_with_sum`, `NaryNode`, `nary_preorder` |
| `dsakit.tree_build` | `Traversal`, `build_from_preorder_inorder`, `build_from_postorder_inorder`, `postorder_from_preorder_inorder`, `convert_traversal` |
| `dsakit.heaps` | `MaxHeap`, `kth_largest`, `kth_smallest`, `top_k_frequent` |
| `dsakit.provinces` | `count_provinces` |
| `dsakit.components` | `DisjointSet`, `merge_accounts`, `count_complete_components` |
| `dsakit.graph_traversal` | `build_adjacency`, `bfs`, `bfs_all`, `dfs` |
| `dsakit.graph_properties` | `greedy_coloring`, `all_topological_orders`, `is_bipartite`, `has_directed_cycle`, `has_undirected_cycle`, `can_finish` |
| `dsakit.connectivity` | `valid_path`, `can_visit_all_rooms`, `find_judge` |
| `dsakit.shortest_paths` | `shortest_path`, `network_delay_time`, `find_city`, `has_negative_cycle` |

## Examples

Searching and strings:

```python
from dsakit.searching import kmp_find, binary_search
from dsakit.strings import insert, replace

kmp_find("Hello, this is a simple example.", "simple")   # 17
binary_search([1, 3, 5, 7, 9], 7)                         # 3
insert("Hello, World!", " Amazing", 7)                    # 'Hello,  AmazingWorld!'
replace("Hello, World!", "Python", 7, 5)                  # 'Hello, Python!'
```

Binary search trees and traversals:

```python
from dsakit.bst import BinarySearchTree
from dsakit.tree_build import postorder_from_preorder_inorder, convert_traversal

tree = BinarySearchTree([20, 8, 22, 4, 12, 10, 14])
tree.inorder()                                 # [4, 8, 10, 12, 14, 20, 22]
8 in tree                                      # True
tree.lowest_common_ancestor(8, 14).key         # 8
tree.kth_smallest(3)                           # 10

postorder_from_preorder_inorder("DBACEGF", "ABCDEFG")                 # 'ACBFGED'
convert_traversal("preorder", [1, 2, 3], [2, 1, 3], "postorder")      # [2, 3, 1]
```

Heaps:

```python
from dsakit.heaps import MaxHeap, top_k_frequent

heap = MaxHeap([3, 9, 4])
heap.push(12)
heap.pop()                                     # 12
top_k_frequent([3, 1, 4, 4, 5, 2, 6, 1], 2)    # [4, 1]
```

Graphs:

```python
from dsakit.graph_traversal import build_adjacency, bfs
from dsakit.shortest_paths import shortest_path, network_delay_time

adjacency = build_adjacency(4, [(0, 1), (0, 2), (2, 3)])
bfs(adjacency, 0)                                             # [0, 1, 2, 3]

shortest_path(3, [(0, 1, 4), (0, 2, 1), (2, 1, 2)], 0, 1)     # (3, [0, 2, 1])
network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)   # 2
```

Account merging groups addresses that appear together:

```python
from dsakit.components import merge_accounts

merge_accounts([
    ["John", "john@example.com", "john.work@example.com"],
    ["John", "john@example.com", "jd@example.com"],
    ["Mary", "mary@example.com"],
])
# [['John', 'jd@example.com', 'john.work@example.com', 'john@example.com'],
#  ['Mary', 'mary@example.com']]
```

## Errors

Functions that reject their input raise standard Python exceptions rather
than returning sentinel values: `IndexError` for positions, indices or
vertices out of range (and for `MaxHeap.pop` or `MaxHeap.peek` on an empty
heap), and `ValueError` for things such as an empty tree's minimum, a
missing heap value, or mismatched traversals. A few functions keep a
documented result for "nothing found": `naive_find`, `kmp_find`,
`binary_search` and `linear_search` return -1, `find_judge` and
`network_delay_time` return -1, and `shortest_path` returns `None` when the
destination cannot be reached.

## What it does not do

- There are no sorting routines; use Python's built-in `sorted`.
- There are no range-query structures (range sums, range minimums, distinct
  counts over ranges).
- There are no minimum spanning tree algorithms. `DisjointSet` in
  `dsakit.components` is available as a building block for one.
- There is no command-line program or interactive menu; everything is used
  from Python code.