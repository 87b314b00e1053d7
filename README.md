# dsalgos

A compact collection of classic data structures and algorithms, written in
plain Python with no third-party dependencies.

## What is inside

| Module                | Contents |
|-----------------------|----------|
| `dsalgos.arrays`      | `array_sum`, `largest`, `insert_at`, `delete_at`, `merge_sorted` |
| `dsalgos.matrix`      | `shape`, `add`, `multiply`, `transpose` for dense matrices held as lists of rows |
| `dsalgos.sparse`      | `SparseMatrix` in triplet form: `from_dense`, `from_triplets`, `to_triplets`, `to_dense`, `add`, `transpose` |
| `dsalgos.expressions` | `precedence`, `infix_to_postfix`, `is_balanced`, `evaluate_postfix` |
| `dsalgos.singly`      | `SinglyLinkedList` with `prepend`, `append`, `insert`, `delete`, `sort`, `reverse`, `extend` and `in` |
| `dsalgos.doubly`      | `DoublyLinkedList` with `prepend`, `append`, `insert`, `delete` and reverse iteration |
| `dsalgos.polynomial`  | `Term`, `Polynomial` with addition |
| `dsalgos.graphs`      | `vertex_count`, `adjacency_matrix`, `incidence_matrix`, `path_matrix`, `bfs`, `dfs` |
| `dsalgos.trees`       | `TreeNode`, `BinaryTree`, `BinarySearchTree`, `preorder`, `inorder`, `postorder` |

Errors are raised as ordinary Python exceptions: `IndexError` for a position
out of range, `ValueError` for malformed input, `KeyError` when a value to
delete from a search tree is missing.

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

Arrays (every function returns a new list):

```python
from dsalgos.arrays import insert_at, delete_at, merge_sorted

insert_at([1, 2, 3], 1, 9)      # [1, 9, 2, 3]
delete_at([1, 2, 3], 0)         # [2, 3]
merge_sorted([1, 4], [2, 3])    # [1, 2, 3, 4]
```

Expressions over single-letter operands:

```python
from dsalgos.expressions import evaluate_postfix, infix_to_postfix, is_balanced

infix_to_postfix("a+b*c")                              # "abc*+"
evaluate_postfix("abc*+", {"a": 2, "b": 3, "c": 4})    # 14
is_balanced("{[()]}")                                  # True
is_balanced("([)]")                                    # False
```

Sparse matrices:

```python
from dsalgos.sparse import SparseMatrix

m = SparseMatrix.from_dense([[0, 5], [0, 0]])
m.to_triplets()               # [(2, 2, 1), (0, 1, 5)]
m.transpose().to_dense()      # [[0, 0], [5, 0]]
```

Linked lists use positions that start at 1:

```python
from dsalgos.singly import SinglyLinkedList

items = SinglyLinkedList([3, 1, 2])
items.sort()
list(items)                   # [1, 2, 3]
items.insert(2, 7)
list(items)                   # [1, 7, 2, 3]
```

Polynomials, with terms in descending order of exponent:

```python
from dsalgos.polynomial import Polynomial

total = Polynomial([(3, 2), (2, 1)]) + Polynomial([(4, 1), (5, 0)])
str(total)                    # "3x^2+6x^1+5x^0"
```

Graphs are given as lists of directed edges between vertices numbered from 0:

```python
from dsalgos.graphs import adjacency_matrix, bfs, dfs

edges = [(0, 1), (0, 2), (1, 3)]
adjacency_matrix(edges)
bfs(edges, 0)                 # [0, 1, 2, 3]
dfs(edges, 0)                 # [0, 1, 3, 2]
```

Binary search trees:

```python
from dsalgos.trees import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.inorder()      # [20, 30, 40, 50, 70]
40 in tree          # True
tree.delete(30)
tree.min()          # 20
```

## What the package does not do

It is a library only: there is no command-line tool. It offers no sorting or
binary search routines, no stack or queue types, and no circular linked
lists.