# dsakit

A small library of classic data structures and algorithms in plain Python. It has no
runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## What is included

| Module | Contents |
| --- | --- |
| `dsakit.nodes` | `TreeNode`, `ListNode`, plus the helpers `inorder_values`, `preorder_values` and `clone_tree` |
| `dsakit.bst` | `BinarySearchTree` with insert, remove, min/max and four traversals |
| `dsakit.bst_algorithms` | `sorted_list_to_bst`, `sorted_array_to_bst`, `kth_smallest`, `bst_lowest_common_ancestor`, `values_in_range`, `num_trees`, `generate_trees` |
| `dsakit.traversal` | `level_order`, `level_order_bottom`, `zigzag_level_order`, `right_side_view`, `left_view`, `right_view`, `vertical_order`, `max_depth`, `connect` with `NextNode` |
| `dsakit.construction` | `build_tree_from_preorder_inorder`, `build_tree_from_inorder_postorder`, `all_possible_full_binary_trees` |
| `dsakit.tree_properties` | `diameter`, `largest_subtree_sum`, `leaf_to_leaf_max_sum`, `lowest_common_ancestor`, `is_mirror`, `is_symmetric`, `find_ancestors`, `root_to_leaf_paths`, `max_root_to_leaf_sum`, `is_leaf` |
| `dsakit.codec` | `serialize_bst` / `deserialize_bst` and `serialize_tree` / `deserialize_tree` |
| `dsakit.disjoint_set` | `QuickFindSet` (the naive version) and `DisjointSet` (union by size with path compression) |
| `dsakit.graph` | `DirectedGraph` (BFS, DFS, all paths, cycle detection, topological sort) and `UndirectedGraph` |
| `dsakit.graph_problems` | `GraphNode`, `clone_graph`, `all_paths_source_target`, `can_finish`, `find_order` |
| `dsakit.dp_strings` | edit distance, LCS, palindromic substrings and subsequences |
| `dsakit.dp_sequences` | `can_jump`, `length_of_lis`, `max_sum_increasing_subsequence`, `longest_increasing_path`, `min_path_sum` |
| `dsakit.dp_combinatorics` | `knapsack`, `binomial_coefficient`, `catalan_number`, `coin_change`, `min_coins`, `rod_cutting`, `subset_sum`, `subset_sum_unbounded` |

## Examples

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40):
    tree.insert(value)
tree.remove(30)
print(tree.inorder())      # [20, 40, 50, 70]
print(tree.level_order())  # [50, 20, 70, 40]
print(len(tree), tree.min(), tree.max())
```

```python
from dsakit.bst_algorithms import sorted_array_to_bst, kth_smallest
from dsakit.traversal import level_order, zigzag_level_order

root = sorted_array_to_bst([1, 2, 3, 4, 5, 6, 7])
print(level_order(root))         # [[4], [2, 6], [1, 3, 5, 7]]
print(zigzag_level_order(root))  # [[4], [6, 2], [1, 3, 5, 7]]
print(kth_smallest(root, 3))     # 3
```

```python
from dsakit.codec import serialize_tree, deserialize_tree

text = serialize_tree(root)
copy = deserialize_tree(text)
```

```python
from dsakit.graph import DirectedGraph

g = DirectedGraph(4)
for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(u, v)
print(g.bfs(2))        # [2, 0, 3, 1]
print(g.dfs())         # [0, 1, 2, 3]
print(g.has_cycle())   # True
```

```python
from dsakit.disjoint_set import DisjointSet

ds = DisjointSet(5)
ds.union(1, 2)
print(ds.find(1) == ds.find(2))  # True
```

```python
from dsakit.dp_strings import edit_distance, longest_common_subsequence

print(edit_distance("kitten", "sitting"))                  # 3
print(longest_common_subsequence("AGGTAB", "GXTXAYB"))     # 4
```

Operations that have no answer, such as asking for the minimum of an empty
`BinarySearchTree`, raise an exception and never return a sentinel value.