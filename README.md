# algokit

A collection of classic data structures and algorithms. Each one has a plain
Python interface. The package needs only the standard library.

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
| `algokit.linked_list` | `Node` and `LinkedList`, a singly linked list. It supports `push`, `reverse`, `reverse_in_groups`, `rotate`, `swap_nodes`, `union`, `intersection` and `render` |
| `algokit.list_merge` | `merge_sorted`, `front_back_split` and `merge_sort` for `LinkedList`. These work by relinking nodes |
| `algokit.doubly_linked_list` | `DoublyLinkedList`, with in-place `reverse` and `quicksort`, and `XorLinkedList`. In an `XorLinkedList` each node stores the XOR of its neighbours' addresses |
| `algokit.circular_list` | `CircularList`, with `push`, `sorted_insert` and `split` into two circular halves |
| `algokit.unrolled_list` | `UnrolledLinkedList`. Each block holds up to `max_elements` values |
| `algokit.stacks` | `ArrayStack` (bounded), `LinkedStack`, `MiddleStack` (finds the middle item in constant time) and `TwoStacks` (two stacks in one array). Also `reverse_stack`, `sort_stack` and `reverse_string` |
| `algokit.queues` | `ArrayQueue` (bounded ring buffer), `LinkedQueue`, and `StackQueue`, which is built from two stacks |
| `algokit.expressions` | `is_matching_pair`, `is_balanced`, `evaluate_postfix` (single-digit operands), `evaluate_postfix_multi` (space-separated multi-digit operands), `precedence` and `infix_to_postfix` |
| `algokit.sequences` | `next_greater_elements`, `stock_span`, `sliding_window_max`, and the circular petrol-pump tour through `PetrolPump` and `find_tour_start` |
| `algokit.pattern_search` | `naive_search`, `distinct_search` (for patterns with all-different characters), `rabin_karp_search` and `permutations` |
| `algokit.dynamic` | `lcs_length`, `lis_length`, `matrix_chain_cost`, `min_cost_path` and `fibonacci` |
| `algokit.backtracking` | `solve_n_queens`, `solve_maze` and `solve_sudoku` |
| `algokit.bits` | `is_power_of_four`, `unset_rightmost_bit`, `count_set_bits` (over 32-bit two's complement words), `smallest_of_three` (non-negative integers) and `swap_bits` |
| `algokit.sorting` | `insertion_sort`, a stable in-place sort that suits nearly sorted input |
| `algokit.bst` | `BinarySearchTree`, with `insert`, `delete`, `min_key`, membership tests and in-order iteration |

## Behaviour worth knowing

- The bounded containers report a full container without raising:
  - `ArrayStack.push` returns `False` when the stack is full.
  - `ArrayQueue.enqueue` returns `False` when the queue is full.
- Taking from an empty container raises `IndexError`. `TwoStacks.push1` and `TwoStacks.push2` raise `OverflowError` when their half of the array is full.
- Some functions move nodes rather than copy them:
  - `merge_sorted` and `front_back_split` leave their input lists empty.
  - `CircularList.split` leaves the list it splits empty.
- `LinkedList.union` and `LinkedList.intersection` build their results by pushing to the front, so values come out in reverse order.
- `find_tour_start` returns `None` when no start pump can complete the circle.
- `solve_n_queens`, `solve_maze` and `solve_sudoku` return `None` when there is no solution. `solve_sudoku` does not modify the grid it is given.
- Division in the postfix evaluators truncates towards zero.

## Examples

```python
from algokit.linked_list import LinkedList

numbers = LinkedList([1, 2, 3, 4, 5, 6, 7, 8, 9])
numbers.reverse_in_groups(3)
print(list(numbers))          # [3, 2, 1, 6, 5, 4, 9, 8, 7]
```

```python
from algokit.expressions import is_balanced, infix_to_postfix, evaluate_postfix_multi

is_balanced("{()}[]")                            # True
infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i")        # "abcd^e-fgh*+^*+i-"
evaluate_postfix_multi("100 200 + 2 / 5 * 7 +")  # 757
```

```python
from algokit.pattern_search import rabin_karp_search

rabin_karp_search("GEEK", "GEEKS FOR GEEKS", 101)  # [0, 10]
```

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.delete(50)
list(tree)                    # [20, 30, 40, 60, 70, 80]
```

```python
from algokit.dynamic import lcs_length, matrix_chain_cost

lcs_length("AGGTAB", "GXTXAYB")        # 4
matrix_chain_cost([1, 2, 3, 4, 3])     # 30
```

## What it does not do

algokit is a library only. It has no command-line program. Its functions return their results and print nothing.