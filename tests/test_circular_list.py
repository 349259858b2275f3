import pytest

from dsapractice.circular_list import CircularLinkedList, DoublyCircularLinkedList


def test_singly_insert_and_iterate():
    lst = CircularLinkedList()
    lst.insert_at_end(45)
    lst.insert_at_end(456)
    assert list(lst) == [45, 456]
    assert len(lst) == 2


def test_singly_str_matches_print_format():
    assert str(CircularLinkedList([45, 456])) == "45  456"


def test_singly_empty():
    lst = CircularLinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert str(lst) == ""


@pytest.mark.parametrize("values", [[1], [1, 2, 3], list(range(50))])
def test_singly_preserves_order(values):
    lst = CircularLinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_singly_iteration_repeatable():
    lst = CircularLinkedList([7, 8, 9])
    assert list(lst) == [7, 8, 9]
    assert list(lst) == [7, 8, 9]


def test_doubly_insert_and_iterate():
    lst = DoublyCircularLinkedList()
    for value in (10, 20, 30):
        lst.insert_at_end(value)
    assert list(lst) == [10, 20, 30]
    assert len(lst) == 3


@pytest.mark.parametrize("values", [[], [1], [1, 2], list(range(25))])
def test_doubly_reverse_is_mirror(values):
    lst = DoublyCircularLinkedList(values)
    assert list(reversed(lst)) == list(lst)[::-1]
    assert list(lst) == values


def test_doubly_single_element():
    lst = DoublyCircularLinkedList(["x"])
    assert list(lst) == ["x"]
    assert list(reversed(lst)) == ["x"]


def test_doubly_insert_after_reverse_walk():
    lst = DoublyCircularLinkedList([1, 2])
    list(reversed(lst))
    lst.insert_at_end(3)
    assert list(reversed(lst)) == [3, 2, 1]