import operator

import pytest

from edatos.priority_queue import PriorityQueue


def test_create_is_empty():
    pq = PriorityQueue([], operator.le)
    assert pq.is_empty()
    assert len(pq) == 0


def test_asc_front_is_smallest():
    pq = PriorityQueue([], operator.le)
    for v in [5, 3, 8, 1]:
        pq.enqueue(v)
    assert pq.front() == 1
    assert len(pq) == 4
    assert not pq.is_empty()


def test_desc_front_is_largest():
    pq = PriorityQueue([], operator.ge)
    for v in [5, 3, 8, 1]:
        pq.enqueue(v)
    assert pq.front() == 8


def test_default_comparison_is_greater_first():
    pq = PriorityQueue()
    for v in [2, 7, 4]:
        pq.enqueue(v)
    assert pq.front() == 7


def test_dequeue_order_asc():
    pq = PriorityQueue([], operator.le)
    values = [6, 2, 9, 2, 5]
    for v in values:
        pq.enqueue(v)
    out = [pq.dequeue() for _ in range(len(values))]
    assert out == sorted(values)
    assert pq.is_empty()


def test_dequeue_then_enqueue():
    pq = PriorityQueue([], operator.le)
    for v in [3, 1, 2]:
        pq.enqueue(v)
    pq.dequeue()
    assert pq.front() == 2
    pq.enqueue(0)
    assert pq.front() == 0
    assert len(pq) == 3


def test_tuples_ordered_lexicographically():
    pq = PriorityQueue([], operator.lt)
    pq.enqueue((2.0, 1, 0))
    pq.enqueue((1.5, 3, 0))
    pq.enqueue((1.5, 2, 0))
    assert pq.dequeue() == (1.5, 2, 0)
    assert pq.dequeue() == (1.5, 3, 0)
    assert pq.dequeue() == (2.0, 1, 0)


def test_non_empty_buffer_rejected():
    with pytest.raises(ValueError):
        PriorityQueue([1, 2], operator.le)


def test_front_on_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().front()


def test_dequeue_on_empty_raises():
    with pytest.raises(IndexError):
        PriorityQueue().dequeue()