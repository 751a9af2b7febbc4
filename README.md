# dsakit

A small library of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.searching` | `linear_search`, `binary_search` |
| `dsakit.expressions` | `infix_to_postfix`, `evaluate_postfix`, `is_operator`, `precedence`, `ExpressionError` |
| `dsakit.stacks` | `ArrayStack`, `LinkedStack`, `TwinStack`, `stack_until_nonpositive`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.bst` | `BinarySearchTree` |
| `dsakit.students` | `Student`, `StudentList`, `format_student` |
| `dsakit.doubly_linked` | `DoublyLinkedList` |
| `dsakit.circular` | `CircularSinglyLinkedList`, `CircularDoublyLinkedList` |

## Searching

`linear_search` tells whether a value occurs in any iterable.
`binary_search` looks in an ascending sequence and returns an index of the
value, or `None` when it is absent.

```python
from dsakit.searching import linear_search, binary_search

linear_search([4, 7, 1], 7)      # True
binary_search([1, 3, 5, 7], 5)   # 2
binary_search([1, 3, 5, 7], 4)   # None
```

## Expressions

`infix_to_postfix` converts an infix expression of single letters or digits
and the operators `^ * / + -` (with parentheses) to postfix; operators of
equal precedence associate to the left. `evaluate_postfix` evaluates a
postfix expression of single digits and `+ - * /`, with division truncating
toward zero. Malformed input raises `ExpressionError`, a `ValueError`;
dividing by zero raises `ZeroDivisionError`.

```python
from dsakit.expressions import infix_to_postfix, evaluate_postfix, precedence

infix_to_postfix("a+b*c")     # "abc*+"
evaluate_postfix("231*+9-")   # -4
precedence("^")               # 3
```

## Stacks

`ArrayStack` has a fixed capacity (5 by default) and raises
`StackOverflowError` when pushed while full. `LinkedStack` is unbounded.
`TwinStack` holds two stacks, A and B, that share one capacity (9 by
default). Popping or peeking an empty stack raises `StackUnderflowError`.
Iterating a stack goes from the top to the bottom.

```python
from dsakit.stacks import ArrayStack, TwinStack, StackOverflowError, stack_until_nonpositive

stack = ArrayStack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    pass
list(stack)            # [2, 1]

twin = TwinStack(3)
twin.push_a(1)
twin.push_b(2)
twin.stack_a()         # [1]

list(stack_until_nonpositive([3, 5, 0, 7]))   # [5, 3]
```

## Binary search tree

Equal items go into the right subtree; iteration and `inorder()` give the
items in ascending order.

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([5, 3, 8, 1])
list(tree)       # [1, 3, 5, 8]
3 in tree        # True
```

## Student records

```python
from dsakit.students import Student, StudentList, format_student

students = StudentList([Student(2, "Ravi", 7.9, "ECE"), Student(1, "Asha", 8.5, "CSE")])
students.sort_by_regno()
print(format_student(students.find(1)))
# Registration no.: 1
# Name: Asha
# CGPA: 8.500000
# Branch: CSE
students.find(99)   # None
```

## Linked lists

Positions are node numbers counted from 1. Operations keyed on a value act
on its first occurrence and raise `ValueError` when it is absent; positions
out of range raise `IndexError`.

```python
from dsakit.doubly_linked import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.insert_first(0)
items.insert_after_key(2, 9)
list(items)               # [0, 1, 2, 9, 3]
items.delete_middle()     # 2
list(items.backward())    # [3, 9, 1, 0]
```

```python
from dsakit.circular import CircularSinglyLinkedList, CircularDoublyLinkedList

ring = CircularSinglyLinkedList([1, 2, 3])
ring.insert_before_position(1, 0)
list(ring)                # [0, 1, 2, 3]

dring = CircularDoublyLinkedList([1, 2])
dring.insert_first(0)
list(dring.backward())    # [2, 1, 0]
```

## What it does not do

dsakit is a library only. It has no command-line program or interactive
menu, keeps everything in memory with no storage, and offers no sorting
routines, queues, singly linked (non-circular) list or polynomial
arithmetic. The circular lists support insertion and lookup but no
deletion.

## Tests

The `test` extra lists the libraries the test suite uses: pytest and
hypothesis.