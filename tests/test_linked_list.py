import pytest

from leetsolve.linked_list import (
    ListNode,
    build_list,
    list_values,
    reorder_list,
    reverse_list,
)


def test_reorder_list_source_case():
    head = build_list([1, 2, 3, 4])
    reorder_list(head)
    assert list_values(head) == [1, 4, 2, 3]


def test_reorder_list_odd_length():
    head = build_list([1, 2, 3, 4, 5])
    reorder_list(head)
    assert list_values(head) == [1, 5, 2, 4, 3]


def test_reorder_list_single_node():
    head = build_list([7])
    reorder_list(head)
    assert list_values(head) == [7]


def test_reorder_list_keeps_values():
    values = list(range(10))
    head = build_list(values)
    reorder_list(head)
    result = list_values(head)
    assert sorted(result) == values
    assert result[0] == values[0]
    assert result[1] == values[-1]


def test_reorder_empty_raises():
    with pytest.raises(ValueError):
        reorder_list(None)


def test_build_and_collect_round_trip():
    values = [5, -1, 3, 3, 0]
    assert list_values(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


def test_node_iteration():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert list(head) == [1, 2, 3]


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [9, 9, 8]])
def test_reverse_list(values):
    assert list_values(reverse_list(build_list(values))) == list(reversed(values))


def test_reverse_twice_restores():
    values = [4, 8, 15, 16, 23, 42]
    head = reverse_list(reverse_list(build_list(values)))
    assert list_values(head) == values


def test_reverse_empty():
    assert reverse_list(None) is None