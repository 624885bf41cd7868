import pytest

from algokit.linked_list import (
    ListNode,
    append,
    build_list,
    has_cycle,
    merge_k_lists,
    to_list,
)


@pytest.mark.parametrize("values", [[], [1], [10, 4, 15, 20]])
def test_build_round_trip(values):
    assert to_list(build_list(values)) == values


def test_build_empty_is_none():
    assert build_list([]) is None


def test_append_round_trip():
    head = None
    values = [10, 4, 15, 20]
    for value in values:
        head = append(head, value)
    assert to_list(head) == values


def test_append_keeps_head():
    head = build_list([1, 2])
    assert append(head, 3) is head


def test_acyclic_list_has_no_cycle():
    assert not has_cycle(build_list([10, 4, 15, 20]))
    assert not has_cycle(None)


def test_source_cycle_detected():
    head = ListNode(1)
    head.next = ListNode(2)
    head.next.next = ListNode(3)
    head.next.next = head.next
    assert has_cycle(head)


def test_self_loop_detected():
    node = ListNode(7)
    node.next = node
    assert has_cycle(node)


def test_cyclic_list_refused():
    head = build_list([1, 2, 3])
    head.next.next.next = head
    with pytest.raises(ValueError):
        to_list(head)
    with pytest.raises(ValueError):
        append(head, 4)


def test_merge_k_lists_sorted():
    sources = [[1, 4, 5], [1, 3, 4], [2, 6]]
    merged = merge_k_lists([build_list(values) for values in sources])
    assert to_list(merged) == sorted(v for values in sources for v in values)


def test_merge_k_lists_skips_empty():
    merged = merge_k_lists([None, build_list([3, 8]), None])
    assert to_list(merged) == [3, 8]


@pytest.mark.parametrize("lists", [[], [None, None]])
def test_merge_k_lists_nothing(lists):
    assert merge_k_lists(lists) is None


def test_merge_reuses_nodes():
    first = build_list([1, 3])
    second = build_list([2])
    merged = merge_k_lists([first, second])
    assert merged is first
    assert merged.next is second