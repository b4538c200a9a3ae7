"""Shortest paths from one vertex with Dijkstra's algorithm."""

from __future__ import annotations

import math
import operator
from collections import deque
from typing import Dict, Iterable, List, Sequence, Tuple

from .graph import Edge, Vertex
from .priority_queue import PriorityQueue


def dijkstra_algorithm(
    vertices: Iterable[Vertex], edges: Iterable[Edge], source: Vertex
) -> Tuple[List[int], List[float]]:
    """Run Dijkstra's algorithm over an undirected weighted graph.

    Vertex labels must be 0..n-1, each used once; edge items are the weights.
    Returns ``(predecessors, distances)`` indexed by label. The source and any
    unreachable vertex are their own predecessors; unreachable vertices keep
    an infinite distance. Visited flags are reset and then set on every
    reached vertex.
    """
    vertices = list(vertices)
    count = len(vertices)
    by_label: Dict[int, Vertex] = {}
    for vertex in vertices:
        if not 0 <= vertex.label < count or vertex.label in by_label:
            raise ValueError("vertex labels must be 0..n-1, each used once")
        by_label[vertex.label] = vertex
    if by_label.get(source.label) is not source:
        raise ValueError("the source vertex is not in the graph")

    incident: Dict[int, List[Edge]] = {label: [] for label in by_label}
    for edge in edges:
        for end in (edge.first, edge.second):
            if by_label.get(end.label) is not end:
                raise ValueError("an edge links a vertex that is not in the graph")
        incident[edge.first.label].append(edge)
        if edge.second is not edge.first:
            incident[edge.second.label].append(edge)

    for vertex in vertices:
        vertex.visited = False

    predecessors = list(range(count))
    distances = [math.inf] * count

    # Tuples (distance, vertex label, predecessor label) compare lexicographically.
    queue = PriorityQueue(comp=operator.lt)
    queue.enqueue((0.0, source.label, source.label))
    while not queue.is_empty():
        distance, label, predecessor = queue.dequeue()
        u = by_label[label]
        if u.visited:
            continue
        predecessors[label] = predecessor
        distances[label] = distance
        u.visited = True
        for edge in incident[label]:
            v = edge.other(u)
            if not v.visited:
                queue.enqueue((distance + edge.item, v.label, label))
    return predecessors, distances


def dijkstra_path(src: int, dst: int, predecessors: Sequence[int]) -> List[int]:
    """Labels of the path from ``src`` to ``dst``; empty if ``dst`` is unreachable."""
    count = len(predecessors)
    if not (0 <= src < count and 0 <= dst < count):
        raise IndexError("vertex label out of range")
    if predecessors[src] != src:
        raise ValueError("src must be its own predecessor")
    if dst == src:
        return [src]
    if predecessors[dst] == dst:
        return []
    path: deque = deque()
    node = dst
    while predecessors[node] != node:
        if len(path) > count:
            raise ValueError("the predecessors contain a cycle")
        path.appendleft(node)
        node = predecessors[node]
    path.appendleft(src)
    return list(path)