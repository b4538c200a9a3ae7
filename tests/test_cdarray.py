import pytest

from edatos.cdarray import CDArray


def make(values, capacity=1):
    array = CDArray(capacity)
    for v in values:
        array.push_back(v)
    return array


def test_new_array_is_empty():
    array = CDArray(5)
    assert array.is_empty()
    assert len(array) == 0
    assert array.capacity() == 5
    assert not array.is_full()


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CDArray(0)


def test_push_back_and_front_order():
    array = CDArray(2)
    array.push_back(2)
    array.push_back(3)
    array.push_front(1)
    assert list(array) == [1, 2, 3]
    assert array[0] == 1
    assert array[len(array) - 1] == 3


def test_growth_doubles_capacity():
    array = CDArray(2)
    array.push_back(1)
    array.push_back(2)
    assert array.is_full()
    array.push_back(3)
    assert array.capacity() == 4
    assert not array.is_full()
    array.push_front(0)
    assert array.is_full()
    assert list(array) == [0, 1, 2, 3]


def test_wrap_around_without_growth():
    array = CDArray(4)
    array.push_back(1)
    array.push_back(2)
    assert array.pop_front() == 1
    for v in (3, 4, 5):
        array.push_back(v)
    assert array.capacity() == 4
    assert array.is_full()
    assert list(array) == [2, 3, 4, 5]


def test_pops():
    array = make([1, 2, 3, 4])
    assert array.pop_front() == 1
    assert array.pop_back() == 4
    assert list(array) == [2, 3]
    assert len(array) == 2


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CDArray(1).pop_front()
    with pytest.raises(IndexError):
        CDArray(1).pop_back()


def test_get_and_set():
    array = make([1, 2, 3])
    array[1] = 20
    assert array[1] == 20
    assert list(array) == [1, 20, 3]
    with pytest.raises(IndexError):
        array[3]


def test_insert_middle_and_front():
    array = make([1, 3])
    array.insert(1, 2)
    assert list(array) == [1, 2, 3]
    array.insert(0, 0)
    assert list(array) == [0, 1, 2, 3]


def test_insert_out_of_range_raises():
    array = make([1, 2])
    with pytest.raises(IndexError):
        array.insert(2, 9)


def test_remove():
    array = make([1, 2, 3, 4])
    assert array.remove(1) == 2
    assert list(array) == [1, 3, 4]
    assert array.remove(2) == 4
    assert list(array) == [1, 3]
    with pytest.raises(IndexError):
        array.remove(5)


def test_fold_format():
    assert make([1, 2, 3]).fold() == "[ 1 2 3 ]"
    assert CDArray(3).fold() == "[ ]"


def test_unfold_round_trip():
    array = CDArray.unfold("[ 4 5 6 ]")
    assert list(array) == [4, 5, 6]
    assert array.fold() == "[ 4 5 6 ]"


def test_unfold_empty():
    array = CDArray.unfold("[ ]")
    assert array.is_empty()


@pytest.mark.parametrize("text", ["", "1 2 ]", "[ 1 2", "[ a ]"])
def test_unfold_wrong_format(text):
    with pytest.raises(ValueError, match="Wrong input format."):
        CDArray.unfold(text)