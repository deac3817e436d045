# treekit

Tree data structures written in plain Python, with no dependencies:

- `treekit.bst.BinarySearchTree` is an unbalanced binary search tree. Each
  node links to its parent. Equal keys go into the right subtree.
- `treekit.avl.AVLTree` is a self-balancing AVL tree. By default it keeps
  duplicate keys, and `allow_duplicates=False` makes it refuse them. It can
  draw its shape as text.
- `treekit.priority_queue.PriorityQueue` is a min-priority queue stored in a
  binary search tree ordered by priority. The lowest priority number is served
  first. Among equal priorities, the most recently inserted entry comes first.
- `treekit.benchmark` times insertion sort against sorting through an AVL
  tree.

## Installation

```
pip install .
```

To install the test dependencies as well, add the `test` extra:

```
pip install .[test]
```

## Binary search tree

```python
from treekit.bst import BinarySearchTree

tree = BinarySearchTree([4, 3, 7, 10, 6, 2, 5, 1, 8, 9])
tree.delete(7)
print(tree.inorder())      # [1, 2, 3, 4, 5, 6, 8, 9, 10]
print(tree.preorder(), tree.postorder())
print(5 in tree, len(tree), tree.minimum())

node = tree.search(5)      # node with .key, .parent, .left, .right, or None
```

- `delete(key)` removes one occurrence of the key. It raises `KeyError` if the
  key is absent.
- `minimum()` raises `ValueError` on an empty tree.
- Iterating over the tree yields its keys in order.

## AVL tree

```python
from treekit.avl import AVLTree

avl = AVLTree([10, 20, 30, 5, 4, 15, 25, 27])
avl.delete(20)             # True if a key was removed
print(list(avl), len(avl), avl.height())
print(avl.render())        # sideways drawing, larger keys above
```

- `insert(key)` returns `False` when the tree was built with
  `allow_duplicates=False` and the key is already present.
- `delete(key)` returns `False` when the key is absent.
- `render(indent=6)` shows one line per node as `key(h=height, p=parent)`.
  The root is shown with `p=-1`.

## Priority queue

```python
from treekit.priority_queue import PriorityQueue

pq = PriorityQueue()
pq.insert(50, 3)           # insert(value, priority)
pq.insert(20, 1)
pq.insert(10, 0)
print(pq.peek_min())       # (10, 0)
print(pq.pop_min())        # (10, 0)
print(pq.items())          # [(20, 1), (50, 3)]
print(pq.items_descending())
print(pq.search(50))       # SearchResult(found=True, comparisons=..., priority=3)
```

- `peek_min()` and `pop_min()` raise `IndexError` on an empty queue.
- `search(value)` walks the tree in order and stops once the value has been
  found. The result records how many nodes were visited.

## Benchmark

To run the sorting comparison:

```
treekit-bench
```

For each size `n` from `--start` to `--stop` in steps of `--step` (default
10 to 5000 by 10), the benchmark sorts a shuffled permutation of `1..n` with
insertion sort and with an AVL tree. It prints both times. It then reports
the smallest `n` at which the AVL sort was faster. Pass `--seed` to get
repeatable shuffles.

The same functions are available from Python:

- `insertion_sort`
- `avl_sort`
- `time_sorts(n, rng)`, which returns a `Timing`
- `find_crossover(start, stop, step, seed)`

## Not included

The trees are library objects only. There is no interactive prompt for
entering keys, and nothing is saved to disk.

## Tests

```
pytest
```