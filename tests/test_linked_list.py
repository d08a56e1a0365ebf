import pytest

from dsakit.linked_list import (
    LinkedList,
    ListNode,
    delete_duplicates,
    from_values,
    swap_pairs,
    to_values,
)


def test_insert_front_and_back_display():
    linked = LinkedList()
    linked.insert_front(10)
    linked.insert_front(5)
    linked.insert_back(20)
    assert str(linked) == "5 -> 10 -> 20 -> NULL"
    assert len(linked) == 3


def test_insert_back_keeps_order():
    linked = LinkedList()
    for value in (10, 20, 30):
        linked.insert_back(value)
    assert list(linked) == [10, 20, 30]
    assert str(linked) == "10 -> 20 -> 30 -> NULL"


def test_empty_list():
    linked = LinkedList()
    assert len(linked) == 0
    assert list(linked) == []
    assert str(linked) == "NULL"
    assert linked.head is None


def test_constructor_values_round_trip():
    values = [7, 8, 9, 10]
    linked = LinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)
    assert linked.head.val == values[0]


def test_insert_back_after_front_on_empty():
    linked = LinkedList()
    linked.insert_front(1)
    linked.insert_back(2)
    assert list(linked) == [1, 2]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], ["a", "b"]])
def test_from_values_to_values_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_nodes_are_linked():
    head = from_values([1, 2])
    assert isinstance(head, ListNode)
    assert head.next.val == 2
    assert head.next.next is None


@pytest.mark.parametrize(
    "values",
    [[1, 1, 2], [1, 1, 2, 3, 3], [], [4], [5, 5, 5, 5], [1, 2, 3]],
)
def test_delete_duplicates_on_sorted_lists(values):
    result = to_values(delete_duplicates(from_values(values)))
    assert result == sorted(set(values))


def test_delete_duplicates_keeps_same_head():
    head = from_values([2, 2, 3])
    assert delete_duplicates(head) is head


def test_swap_pairs_example():
    assert to_values(swap_pairs(from_values([1, 2, 3, 4]))) == [2, 1, 4, 3]


def test_swap_pairs_odd_length_keeps_last():
    values = [1, 2, 3, 4, 5]
    result = to_values(swap_pairs(from_values(values)))
    assert result[-1] == values[-1]
    assert sorted(result) == values


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5, 6, 7]])
def test_swap_pairs_twice_restores(values):
    head = swap_pairs(swap_pairs(from_values(values)))
    assert to_values(head) == values