# dstructs

Small, readable implementations of classic data structures. Each one can be
used as a library and can also be run as a command.

## What is inside

| Module | Contents |
| --- | --- |
| `dstructs.double_hashing` | `DoubleHashTable`: open addressing where a second hash gives the probe step. Deleted slots become tombstones |
| `dstructs.linear_probing` | `LinearProbingTable`: open addressing with linear probing. `len()` gives the number of keys |
| `dstructs.open_hashing` | `ChainedHashTable`: separate chaining with new keys at the head of a chain. `chain(index)` returns one bucket |
| `dstructs.heap_sort` | `heap_sort(values)` returns a sorted list. `sift_down(heap, size, root)` works on a list in place |
| `dstructs.priority_queue` | `build_max_heap(values)`, and `MaxHeap` with `extract_max()`, `to_list()` and `len()` |
| `dstructs.avl` | `AVLTree` with `insert`, `preorder` and `height`. Duplicate keys are ignored |
| `dstructs.bst` | `BinarySearchTree` with `insert`, `delete` (returns whether a node was removed), `preorder`, `inorder` and `postorder` |
| `dstructs.binary_tree` | `TreeNode` with `insert_left` and `insert_right`, plus `inorder`, `count_nodes`, `height` (-1 for an empty tree), `leaf_nodes` and `nonleaf_nodes` |
| `dstructs.expression_tree` | `from_infix` and `from_postfix` for single-character operands, `precedence`, and the `preorder` and `inorder` string traversals |
| `dstructs.right_threaded` | `RightThreadedNode` and a generator `inorder` that walks the tree without a stack |
| `dstructs.left_threaded` | `LeftThreadedNode` and a generator `reverse_inorder` that walks the tree without a stack |

### Errors

The hash tables raise exceptions from `dstructs.errors`:

- `TableFullError`: `DoubleHashTable` or `LinearProbingTable` has no free slot for a new key.
- `KeyNotFoundError`, a subclass of `LookupError`: the key passed to `delete` is not in the table.

The other modules use built-in exceptions:

- `MaxHeap.extract_max` raises `IndexError` when the heap is empty.
- `from_infix` and `from_postfix` raise `ValueError` for malformed expressions.
- The threaded nodes raise `ValueError` when the child slot is already taken.

## Installing

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from dstructs.linear_probing import LinearProbingTable
from dstructs.heap_sort import heap_sort
from dstructs.bst import BinarySearchTree
from dstructs.expression_tree import from_infix, preorder

table = LinearProbingTable(10)
table.insert(12)             # 2
table.insert(22)             # 3, because slot 2 is taken
print(table.search(22))      # 3
print(table.render())        # "Index 0: ~" ... one line per slot

print(heap_sort([5, 1, 4, 2, 3]))  # [1, 2, 3, 4, 5]

tree = BinarySearchTree()
for item in (50, 30, 70, 20, 40):
    tree.insert(item)
tree.delete(30)
print(tree.inorder())        # [20, 40, 50, 70]

print(preorder(from_infix("(4+6)*2")))  # *+462
```

## Commands

Every command takes `-h` for help.

### Menus on standard input

These commands read whitespace-separated numbers from standard input. They
stop when the input runs out.

- `dstructs-double-hashing`, `dstructs-linear-probing` and `dstructs-open-hashing`
  - Each runs a table of size 10.
  - The menu is 1 Insert, 2 Search, 3 Delete, 4 Display, 5 Exit.
  - Any other number prints "Invalid choice! Please try again."
- `dstructs-priority-queue`
  - The menu is 1 Create Heap (a count, then that many elements), 2 Extractmax, and any other choice to exit.
- `dstructs-bst`
  - The menu is 1 Insert, 2 Preorder, 3 Inorder, 4 Postorder, 5 Delete, and any other choice to exit.

### Other commands

- `dstructs-heap-sort`
  - Reads a count and then that many integers from standard input.
  - Prints them sorted, separated by tabs.
  - Exits with status 1 if the input is malformed or too short.
- `dstructs-avl [KEYS ...]`
  - Inserts the given integer keys, or `1 2 4 5 6 3` if none are given.
  - Prints the tree in preorder.
- `dstructs-expression-tree [EXPRESSION] [--postfix]`
  - Without `--postfix`, parses an infix expression (default `(4+6)*2`) and prints its preorder form.
  - With `--postfix`, parses a postfix expression (default `ab+c*`) and prints its inorder symbols separated by spaces.
- `dstructs-binary-tree`
  - Builds a fixed sample tree.
  - Prints its inorder traversal, node count, height, leaf count and non-leaf count.
- `dstructs-right-threaded` and `dstructs-left-threaded`
  - Build a fixed sample threaded tree and print its inorder (right-threaded) or reverse inorder (left-threaded) traversal.

## What it does not do

- The structures live in memory only. Nothing is saved between runs.
- The hash tables hold integer keys with no associated values.
- The open-addressing tables have a fixed size and never grow.
- Expression trees are built but not evaluated.