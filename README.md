# dsakit

A small library of classic data structures and algorithms in plain Python.
It has no runtime dependencies and needs Python 3.10 or later.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra and call pytest from the
project directory:

```
pip install "dsakit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.stack` | `Stack` with a fixed capacity, `StackFullError`, `StackEmptyError`, and `is_valid_parentheses` |
| `dsakit.boundedqueue` | `CircularQueue` with a fixed capacity, `QueueFullError`, `QueueEmptyError` |
| `dsakit.linked_list` | `ListNode`, `LinkedList`, `from_values`, `to_values`, `delete_duplicates`, `swap_pairs` |
| `dsakit.graph` | Undirected `Graph` and `WeightedGraph` stored as adjacency lists |
| `dsakit.tree` | `TreeNode`, `build_tree`, recursive and iterative traversals, `level_order`, `max_depth`, `max_depth_bfs`, `is_balanced`, `leaves`, `leaf_similar` |
| `dsakit.searching` | `linear_search`, `binary_search`, `exponential_search`, `interpolation_search`, `jump_search`, `ternary_search` |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `bucket_sort`, `counting_sort`, `heap_sort`, `merge_sort`, `quick_sort`, `radix_sort`, `intro_sort`, `tim_sort` |
| `dsakit.arrays` | Totals, prefix and suffix sums, range sums, Kadane's algorithm, next greater element and other array problems |
| `dsakit.strings` | Palindromes, reversal, character counts, merging, string GCD, vowel and word reversal, run-length compression, subsequences |

## Data structures

`Stack(capacity=100)` and `CircularQueue(capacity=100)` hold at most
`capacity` items. Pushing onto a full stack raises `StackFullError` (an
`OverflowError`); popping or peeking an empty one raises `StackEmptyError`
(an `IndexError`). The queue raises `QueueFullError` and `QueueEmptyError` in
the same way. Both support `len()`; iterating a stack goes from top to
bottom, iterating a queue from front to rear. A negative capacity raises
`ValueError`.

```python
from dsakit.stack import Stack, StackEmptyError, is_valid_parentheses
from dsakit.boundedqueue import CircularQueue

st = Stack(3)
st.push(10)
st.push(20)
st.push(30)
st.is_full()     # True
st.peek()        # 30
st.pop()         # 30
list(st)         # [20, 10]

try:
    Stack(1).pop()
except StackEmptyError:
    ...

is_valid_parentheses("{{{{({[]})}}}}")   # True
is_valid_parentheses(" {{{{({)}}}}")     # False

q = CircularQueue(2)
q.enqueue(1)
q.enqueue(2)
q.dequeue()      # 1
q.front()        # 2
```

`is_valid_parentheses` treats any character that does not close the bracket
before it as unmatched, so text holding anything other than brackets is
reported invalid.

`LinkedList` keeps its length and appends in constant time. The free
functions work on bare `ListNode` chains:

```python
from dsakit.linked_list import LinkedList, from_values, to_values
from dsakit.linked_list import delete_duplicates, swap_pairs

lst = LinkedList([20])
lst.insert_front(10)
lst.insert_front(5)
str(lst)         # "5 -> 10 -> 20 -> NULL"
len(lst)         # 3

to_values(swap_pairs(from_values([1, 2, 3, 4])))          # [2, 1, 4, 3]
to_values(delete_duplicates(from_values([1, 1, 2, 3, 3])))  # [1, 2, 3]
```

`Graph(n)` and `WeightedGraph(n)` have vertices `0 .. n-1`. `add_edge` links
both ends; `neighbors` returns neighbours (or `(neighbour, weight)` pairs) in
insertion order. An unknown vertex raises `IndexError`.

```python
from dsakit.graph import Graph

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(0, 2)
g.neighbors(0)   # [1, 2]
print(g)         # one "vertex -> neighbours" line per vertex
```

## Trees

`build_tree` takes values level by level, with `None` marking a missing
child. Every traversal returns a list of values.

```python
from dsakit.tree import build_tree, preorder, inorder, postorder
from dsakit.tree import level_order, max_depth, is_balanced, leaves

root = build_tree([1, 2, 3, 4, 5])
preorder(root)       # [1, 2, 4, 5, 3]
inorder(root)        # [4, 2, 5, 1, 3]
postorder(root)      # [4, 5, 2, 3, 1]
level_order(root)    # [[1], [2, 3], [4, 5]]
max_depth(root)      # 3
is_balanced(root)    # True
leaves(root)         # [4, 5, 3]
```

`preorder_iterative`, `inorder_iterative` and `postorder_iterative` give the
same results using explicit stacks; `max_depth_bfs` counts levels
breadth-first. `leaf_similar` compares two trees' leaf sequences.

## Searching and sorting

All searches except `linear_search` expect ascending input.
`exponential_search` and `interpolation_search` return an index or `-1`; the
others return a bool. `binary_search` and `ternary_search` take optional
inclusive `low` and `high` bounds, defaulting to the whole sequence.

```python
from dsakit.searching import binary_search, exponential_search

nums = [1, 3, 6, 8, 9, 12, 23, 34, 45, 55, 56, 89, 100]
binary_search(nums, 55)                                   # True
exponential_search([2, 4, 6, 8, 10, 12, 14, 16, 18], 14)  # 6
```

Every sort takes any iterable and returns a new ascending list, leaving the
input unchanged. `bucket_sort` accepts only numbers in `[0, 1)`, and
`counting_sort` and `radix_sort` only non-negative integers; other values
raise `ValueError`. `intro_sort` and `tim_sort` use Python's built-in sort.

```python
from dsakit.sorting import merge_sort, radix_sort

merge_sort([38, 27, 43, 3, 9, 82, 10])          # [3, 9, 10, 27, 38, 43, 82]
radix_sort([170, 45, 75, 90, 802, 24, 2, 66])   # [2, 24, 45, 66, 75, 90, 170, 802]
```

## Arrays and strings

Functions that would otherwise modify their input (`move_zeroes`,
`can_place_flowers`, `compress`) work on a copy. `largest`,
`max_subarray_sum`, `max_subarray` and `min_subarray_sum` raise `ValueError`
on empty input; `range_sum` raises `IndexError` for an out-of-bounds range.

```python
from dsakit.arrays import max_subarray_sum, max_subarray, prefix_sums, range_sum
from dsakit.arrays import move_zeroes, next_greater_elements
from dsakit.strings import merge_alternately, gcd_of_strings, compress

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])       # (6, [4, -1, 2, 1])
prefix = prefix_sums([2, 4, 6, 8, 10])               # [2, 6, 12, 20, 30]
range_sum(prefix, 1, 3)                              # 18
move_zeroes([0, 1, 0, 3, 12])                        # [1, 3, 12, 0, 0]
next_greater_elements([4, 1, 2], [1, 3, 4, 2])       # [-1, 3, -1]

merge_alternately("abc", "pqrasd")    # "apbqcrasd"
gcd_of_strings("ABCABC", "ABC")       # "ABC"
compress(list("aabbccc"))             # ["a", "2", "b", "2", "c", "3"]
```

## What it does not do

dsakit is a library only: it has no command-line program, reads no input
and prints nothing except through `str()` on a linked list or graph.
`LinkedList` is singly linked; there is no doubly linked list.