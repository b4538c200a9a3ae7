# edatos

Classic data structures and algorithms in plain Python, with no
dependencies beyond the standard library.

## What is inside

| Module                    | Contents                                                          |
|---------------------------|-------------------------------------------------------------------|
| `edatos.cdarray`          | `CDArray`, a circular dynamic array that doubles its capacity     |
| `edatos.dnode`            | `DNode`, a doubly linked node with dummy-node support             |
| `edatos.linked_list`      | `LinkedList`, a doubly linked list with splice, merge and sort    |
| `edatos.stack`            | `Stack`, a last-in first-out stack built on `LinkedList`          |
| `edatos.heap`             | `Heap` over a caller-supplied list, and `heapsort`                |
| `edatos.priority_queue`   | `PriorityQueue` backed by a `Heap`                                |
| `edatos.btree`            | `BTNode` and `BTree`, a binary tree with text fold/unfold         |
| `edatos.avltree_node`     | `AVLTNode`, a node that tracks its height, parent and balance     |
| `edatos.hash_table_entry` | `HashTableEntry` and `EntryState`, a slot for open addressing     |
| `edatos.graph`            | `Item`, `Vertex` and `Edge` for weighted graphs                   |
| `edatos.dijkstra`         | `dijkstra_algorithm` and `dijkstra_path`                          |

Operations on an empty structure (popping, reading the front or top)
raise `IndexError`; misuse such as a bad position, a malformed text form
or a direction other than 0 or 1 raises `IndexError` or `ValueError`.
The removing operations (`pop_front`, `pop_back`, `remove`, `pop`,
`dequeue`) return the item they removed.

## Installing

```
pip install .
```

## Examples

### Circular array

`CDArray.unfold` reads integers in the bracketed form `[ item1 item2 ... ]`
and `fold` writes the same form:

```python
from edatos.cdarray import CDArray

arr = CDArray.unfold("[ 1 2 3 ]")
arr.push_front(0)
print(arr.fold())        # [ 0 1 2 3 ]
print(len(arr), arr[0])  # 4 0
print(arr.capacity())    # 4
```

### Linked list

Positions in a `LinkedList` are its nodes: `begin()` is the first node and
`end()` the dummy node after the last. They stay valid across insertions
and splices.

```python
from edatos.linked_list import LinkedList

items = LinkedList([3, 1, 2])
pos = items.find(1)
items.insert(pos, 7)
print(items.fold())      # [ 3 7 1 2 ]
items.sort()
print(list(items))       # [1, 2, 3, 7]
```

### Heap and heapsort

A heap arranges the list you give it in place. The comparison function
returns true when its first argument should come before its second:

```python
import operator
from edatos.heap import Heap, heapsort

data = [5, 1, 4]
heap = Heap(data, operator.ge)   # max-heap
print(heap.item())               # 5

values = [3, 1, 2]
heapsort(values, operator.ge)
print(values)                    # [1, 2, 3]
```

### Priority queue

The buffer given to a new `PriorityQueue` must be empty; with no arguments
it uses its own list and `operator.ge`, so the greatest item is at the front.

```python
import operator
from edatos.priority_queue import PriorityQueue

queue = PriorityQueue([], operator.le)
for v in (7, 3, 9):
    queue.enqueue(v)
print(queue.front())             # 3
print(queue.dequeue())           # 3
```

### Binary tree

Binary trees fold to and unfold from text of the form
`[ item left right ]`, where `[]` is the empty tree. Subtrees returned by
`left()` and `right()` share nodes with the tree they come from.

```python
from edatos.btree import BTree

tree = BTree.unfold("[ 2 [ 1 [] [] ] [ 3 [] [] ] ]")
print(tree.item(), tree.left().item())   # 2 1
print(tree.fold())                       # [ 2 [ 1 [] [] ] [ 3 [] [] ] ]
```

### Shortest paths

`dijkstra_algorithm` takes the vertices (labelled 0..n-1), the edges
(whose items are their weights) and the source vertex, and returns the
predecessor and distance lists indexed by label:

```python
from edatos.graph import Item, Vertex, Edge
from edatos.dijkstra import dijkstra_algorithm, dijkstra_path

a, b, c = (Vertex(i, Item(name)) for i, name in enumerate("abc"))
edges = [Edge(a, b, 1.0), Edge(b, c, 2.0), Edge(a, c, 5.0)]
predecessors, distances = dijkstra_algorithm([a, b, c], edges, a)
print(dijkstra_path(0, 2, predecessors))   # [0, 1, 2]
print(distances[2])                        # 3.0
```

Unreachable vertices keep an infinite distance and `dijkstra_path` returns
an empty list for them.

## What the package does not do

- There is no AVL tree, only `AVLTNode`: nodes keep their heights and
  parent links, but nothing inserts, removes or rebalances.
- There is no hash table, only `HashTableEntry`, the slot such a table
  would be made of.
- There is no graph container: a graph is given to `dijkstra_algorithm` as
  plain lists of `Vertex` and `Edge` objects.
- There is no command-line program; everything is used as a library.

## Running the tests

```
pip install .[test]
pytest
```