"""Data structures and algorithms: circular arrays, linked lists, stacks, heaps,
priority queues, binary trees, AVL nodes, hash table entries and Dijkstra's
shortest paths on weighted graphs."""

__version__ = "1.0.0"