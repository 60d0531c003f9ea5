# edakit

A small collection of the classic data structures and algorithms taught in
a first course on data structures, written in plain Python with no
third-party dependencies.

## What is inside

| Module               | Contents                                                              |
|----------------------|-----------------------------------------------------------------------|
| `edakit.linked_list` | `Node`, `LinkedList`, `Stack`, `Queue`                                |
| `edakit.parenthesis` | `validate_parenthesis`, returning a `ParenthesisCheck`                |
| `edakit.misc`        | `is_prime`, `format_array`, `mss_cubic`, `mss_quadratic`, `mss_linear` |
| `edakit.textfile`    | `read_text_file`                                                      |
| `edakit.sorting`     | `selection_sort`, `quick_sort`, `split`, `k_smallest`, `random_int`, `create_random_array`, `create_random_int_array`, `linspace` |
| `edakit.bst`         | `BST` binary search tree with subtree sizes and `k_element`           |
| `edakit.tree`        | general `Tree` whose `TreeNode`s keep a list of children, newest first |
| `edakit.avl`         | self-balancing `AVL` tree that records the rotations it performs      |
| `edakit.rbtree`      | `RBTree` red-black tree and `read_keys` for binary key files          |
| `edakit.maze`        | random `Maze` generation by depth-first carving                       |
| `edakit.labyrinth`   | `path_exists` and `find_path` through a grid of open cells            |
| `edakit.image`       | `read_image` for 8-bit BMP files, thresholding and text rendering     |

## Installation

From a checkout of the project:

```
pip install .
```

Python 3.10 or newer is required.

## Examples

Linked structures:

```python
from edakit.linked_list import LinkedList, Stack, Queue

items = LinkedList()
for value in (1, 3, 5, 15, 5, 17):
    items.insert_first(value)
items.remove(5)
print(list(items))        # [17, 15, 3, 1]
print(items)              # 17 -> 15 -> 3 -> 1 ->

stack = Stack()
for value in (0, 10, 20, 30):
    stack.push(value)
print(stack.pop())        # 30

queue = Queue()
queue.push(1)
queue.push(2)
print(queue.pop())        # 1
```

Parentheses:

```python
from edakit.parenthesis import validate_parenthesis

print(validate_parenthesis("(a(b)c)").valid)   # True
print(validate_parenthesis("a)b"))             # ParenthesisCheck(valid=False, position=1)
```

Search trees:

```python
from edakit.bst import BST
from edakit.avl import AVL
from edakit.rbtree import RBTree

bst = BST()
for value in (16, 4, 2, 20, 15, 18, 35, 50):
    bst.insert(value)
bst.update_sizes()
print(list(bst))              # [2, 4, 15, 16, 18, 20, 35, 50]
print(bst.k_element(3).data)  # 15

avl = AVL()
for value in (16, 32, 45, 8, 10, 15):
    avl.insert(value)
print(avl.traverse())

rb = RBTree()
for value in range(100):
    rb.insert(value)
print(rb.find(42) is not None)  # True
```

Maximum subsequence sum, three ways:

```python
from edakit.misc import mss_cubic, mss_quadratic, mss_linear

data = [-2, 11, -1, 3, -3, -2]
print(mss_linear(data))   # MSSResult(start=1, end=3, total=13)
```

Sorting functions take an optional `random.Random` for reproducible runs:

```python
import random
from edakit.sorting import quick_sort

values = [5.0, 1.0, 4.0, 2.0]
quick_sort(values, random.Random(0))
print(values)             # [1.0, 2.0, 4.0, 5.0]
```

## Command-line tools

Installing the package provides these commands:

```
edakit-parenthesis [EXPR]            check the parentheses of EXPR (asked for when omitted)
edakit-cat [FILE]                    print a text file (default ../data/ej1.html)
edakit-sort [N]                      make N random integers (default 10), print them and their k=2 smallest
edakit-rbtree [KEYS] [QUERIES]       time red-black tree insertions and lookups from binary key files
edakit-maze [HEIGHT] [WIDTH]         generate and print a random maze (default 21 x 21)
edakit-labyrinth [R1 C1 R2 C2]       search for a path through the built-in 8 x 8 labyrinth
edakit-image [FILE]                  read an 8-bit BMP image (default images/image_1.bmp) and print it as text
```

The commands take positional arguments only; there are no option flags.

## What it does not do

- `edakit.image` reads, thresholds and draws images; it does not find or
  label connected regions of an image.
- Key files for `edakit-rbtree` are not shipped; the command reads the
  files it is given.

## Running the tests

```
pip install ".[test]"
pytest
```