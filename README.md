# algokit

A collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

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
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `quick_sort`, `shell_sort` for any comparable values; `counting_sort`, `radix_sort` for non-negative integers. Each returns a new list. |
| `algokit.searching` | `linear_search`, `binary_search` (index of the match, or `None`) |
| `algokit.numbers` | `is_armstrong`, `binary_to_decimal`, `digit_square_sum`, `is_happy`, `is_palindrome_number`, `is_prime`, `binomial_coefficient`, `pascal_triangle`, `fibonacci`, bit helpers (`get_bit`, `set_bit`, `clear_bit`, `update_bit`, `count_ones`, `is_power_of_two`), `max_of_three`, `min_of_three`, `net_salary`, `find_unpaired` |
| `algokit.strings` | `is_balanced`, `num_decodings`, `word_frequencies`, `max_expression`, `is_palindrome_string`, `star_pattern`, `alternating_pattern` |
| `algokit.arrays` | `two_sum_pairs`, `three_sum`, `longest_mountain`, `max_sum_subarray`, `smallest_subarray_sum`, `trap_rain_water`, `josephus` |
| `algokit.backtracking` | `solve_n_queens`, `solve_maze`, `count_rooms` |
| `algokit.graph` | `Graph` with `add_edge` and `articulation_points` |
| `algokit.containers` | `LinkedStack`, `BoundedQueue`, and the `main` entry point of the queue command |
| `algokit.linked_list` | `ListNode`, `build_list`, `to_list`, `append`, `has_cycle`, `merge_k_lists` |
| `algokit.bst` | `Node` and functions `insert`, `search`, `delete`, `min_value_node`, `inorder`, `preorder`, `from_preorder`, `is_bst`, `from_sorted` |
| `algokit.avl` | `AVLNode` and functions `height`, `balance_factor`, `rotate_left`, `rotate_right`, `insert`, `preorder` |
| `algokit.binary_tree` | `BinaryTreeNode`, `right_view`, `build_level_order`, `describe_levels` |
| `algokit.nary_tree` | `TreeNode`, `parse_level_order`, `are_identical`, `max_node` |

## Examples

```python
from algokit.sorting import bubble_sort
from algokit.strings import is_balanced, num_decodings, max_expression
from algokit.arrays import three_sum, trap_rain_water, josephus
from algokit.numbers import pascal_triangle
from algokit.graph import Graph

bubble_sort([5, 1, 4, 2, 8])        # [1, 2, 4, 5, 8]
is_balanced("((()))()()")           # True
is_balanced("())((())")             # False
num_decodings("226")                # 3
max_expression("1+2-3")             # '3+2-1'
three_sum([-1, 0, 1, 2, -1, -4])    # [[-1, -1, 2], [-1, 0, 1]]
trap_rain_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])  # 6
josephus(14, 2)                     # 13
pascal_triangle(4)                  # [[1], [1, 1], [1, 2, 1], [1, 3, 3, 1]]

graph = Graph(5)
for u, v in [(1, 2), (3, 1), (0, 2), (2, 3), (0, 4)]:
    graph.add_edge(u, v)
graph.articulation_points()         # [0, 2]
```

Trees are built from plain nodes and module-level functions:

```python
from algokit import avl, bst
from algokit.binary_tree import build_level_order, right_view

root = None
for value in (1, 2, 4, 5, 6, 3):
    root = avl.insert(root, value)
avl.preorder(root)                  # [4, 2, 1, 3, 5, 6]

bst.preorder(bst.from_sorted([10, 20, 30, 40, 50]))  # [30, 10, 20, 40, 50]

tree = build_level_order([1, 2, 3, -1, -1, -1, -1])
right_view(tree)                    # [1, 3]
```

Containers behave like ordinary Python collections:

```python
from algokit.containers import LinkedStack, BoundedQueue

stack = LinkedStack()
for value in (11, 22, 33, 44):
    stack.push(value)
list(stack)       # [44, 33, 22, 11]
stack.peek()      # 44
len(stack)        # 4

queue = BoundedQueue(capacity=2)
queue.insert(1)
queue.insert(2)
queue.delete()    # 1
```

`LinkedStack.pop` and `peek` on an empty stack raise `IndexError`.
`BoundedQueue.insert` raises `OverflowError` once all its slots are used;
slots freed at the front are reused only after the queue has emptied.
`BoundedQueue.delete` on an empty queue raises `IndexError`.

## Interactive queue

The package installs a menu-driven program for the bounded queue:

```
algokit-queue
algokit-queue --capacity 10
```

It prints a menu of 1 (insert), 2 (delete), 3 (display) and 4 (exit) and
reads choices and integer elements from standard input, one per line. It
stops on choice 4 or at the end of input. The default capacity is 50.

## What it does not do

Apart from the queue command, everything here is a library: the functions
take Python values and return results. They do not prompt for input, read
from standard input or print; building any such front end is left to the
caller.