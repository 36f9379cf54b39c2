# dsalgo

dsalgo is a small library of textbook data structures and algorithms. It uses only the standard library.

- **Structures:** a binary search tree, a binary tree with the four traversals, a doubly linked list and a stack.
- **Algorithms:** binary and sequential search, and insertion, quick and selection sort.
- **Problem solvers:** three array puzzles, also available as a command.
- **Pattern:** a singleton.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Data structures

### Binary search tree (`dsalgo.bst`)

`BinarySearchTree` holds each key at most once. Inserting a key that is already present does nothing. Deleting a node with two children puts the largest key of its left subtree in its place. Deleting a key that is not in the tree raises `KeyError`.

```python
from dsalgo.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])

tree.inorder()      # [20, 30, 40, 50, 60, 70, 80]
40 in tree          # True
tree.search(40)     # the BSNode holding 40
tree.search(99)     # None
tree.delete(50)
list(tree)          # [20, 30, 40, 60, 70, 80]
tree.delete(99)     # raises KeyError
```

The tree's nodes are `BSNode` objects with `data`, `left` and `right` attributes. The root node is available as `tree.root`.

### Binary tree traversals (`dsalgo.binary_tree`)

`BinaryTree.custom()` builds a fixed sample tree. `'C'` is the root, `'B'` is its left child and `'A'` is the left child of `'B'`. On the right of `'C'` is the chain `'D'`, `'E'`, `'F'`, `'G'`, each a right child of the one before.

```python
from dsalgo.binary_tree import BinaryTree

tree = BinaryTree.custom()
tree.preorder()     # ['C', 'B', 'A', 'D', 'E', 'F', 'G']
tree.inorder()      # ['A', 'B', 'C', 'D', 'E', 'F', 'G']
tree.postorder()    # ['A', 'B', 'G', 'F', 'E', 'D', 'C']
tree.level_order()  # ['C', 'B', 'D', 'A', 'E', 'F', 'G']
```

You can also build a tree of your own with `BinaryTree.insert`. A larger value goes to the right and any other value goes to the left. Inserting a value that is already in the tree raises `ValueError`.

### Doubly linked list (`dsalgo.linked_list`)

```python
from dsalgo.linked_list import LinkedList

items = LinkedList([2, 5, 9, 4])

node = items.find(9)     # the first LinkedNode holding 9, or None
items.remove_node(node)
list(items)              # [2, 5, 4]
list(reversed(items))    # [4, 5, 2]
len(items)               # 3
str(items)               # '2\t5\t4'
```

- `append(value)` adds a value at the tail and returns its node.
- `remove_node(None)` raises `ValueError`.

### Stack (`dsalgo.stack`)

```python
from dsalgo.stack import Stack

stack = Stack([3, 5, 6, 2, 4])

list(stack)       # [4, 2, 6, 5, 3], from top to bottom
stack.pop()       # 4
stack.top()       # 2
len(stack)        # 4
stack.is_empty()  # False
```

`pop()` on an empty stack returns `None`. `top()` on an empty stack raises `IndexError`.

## Searching (`dsalgo.searching`)

Both searches return a `SearchResult` with three fields:

- `found`
- `index`: the position of the match, or `None`
- `comparisons`: the number of elements the search looked at

A result is truthy when the target was found. `binary_search` expects its input to be sorted already.

```python
from dsalgo.searching import binary_search, sequential_search

binary_search([1, 2, 8, 9, 11, 19, 29], 9)
# SearchResult(found=True, index=3, comparisons=1)
binary_search([1, 2, 8, 9, 11, 19, 29], 29)
# SearchResult(found=True, index=6, comparisons=3)
binary_search([1, 2, 8, 9, 11, 19, 29], 777)
# SearchResult(found=False, index=None, comparisons=3)

sequential_search([8, 30, 1, 9, 11, 19, 2], 9)
# SearchResult(found=True, index=3, comparisons=4)
```

## Sorting (`dsalgo.sorting`)

Each sort returns a new list in ascending order and leaves its input unchanged.

```python
from dsalgo.sorting import insertion_sort, quick_sort, selection_sort

quick_sort([38, 27, 43, 9, 3, 82, 10])   # [3, 9, 10, 27, 38, 43, 82]
insertion_sort([8, 5, 6, 2, 4])          # [2, 4, 5, 6, 8]
selection_sort([69, 10, 30, 2, 16])      # [2, 10, 16, 30, 69]
```

## Array puzzles (`dsalgo.problems`)

- `bubble_sort_passes(values)` counts how many passes a bubble sort makes over the values. The last pass, which only finds nothing left to swap, is counted too.
- `count_subarrays_with_sum(values, target)` counts the contiguous runs whose sum is `target`. It uses a sliding window, so the values should be positive.
- `count_good_numbers(values)` counts the values that equal the sum of two other elements of the list.

The same solvers run from the command line. The command takes the problem number as its argument and reads whitespace-separated integers from standard input:

| Problem | Input | Output |
| --- | --- | --- |
| `1377` | N, then N values | the number of bubble-sort passes |
| `2003` | N and M, then N values | how many contiguous runs sum to M |
| `1253` | N, then N values | how many values are good |

```
$ echo "5  10 1 5 2 3" | dsalgo-problems 1377
3
$ echo "4 2  1 1 1 1" | dsalgo-problems 2003
3
```

If the input holds too few numbers, the command reports an error and exits.

## Singleton (`dsalgo.singleton`)

```python
from dsalgo.singleton import Singleton

first = Singleton.get_instance()   # creates the instance
again = Singleton.get_instance()   # None: an instance already exists
Singleton.release_instance()       # drops it, so it can be created again
Singleton()                        # raises TypeError
```

## Running the tests

```
pytest
```