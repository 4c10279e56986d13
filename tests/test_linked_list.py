import copy

import pytest

from cs8lab.linked_list import LinkedList


def _filled(*items):
    linked = LinkedList()
    for item in items:
        linked.push_back(item)
    return linked


def _check_links(linked):
    forward = list(linked)
    assert list(reversed(linked)) == forward[::-1]
    assert len(linked) == len(forward)


def test_constructor_pushes_to_front():
    linked = LinkedList([1, 2, 3])
    assert list(linked) == [3, 2, 1]
    assert len(linked) == 3


def test_push_back_keeps_order():
    linked = _filled("a", "b", "c")
    assert list(linked) == ["a", "b", "c"]
    assert linked.front() == "a"
    assert linked.back() == "c"
    _check_links(linked)


def test_push_front_on_empty_sets_both_ends():
    linked = LinkedList()
    linked.push_front(7)
    assert linked.front() == 7
    assert linked.back() == 7
    assert linked.head is linked.tail


def test_pop_front_and_back():
    linked = _filled(1, 2, 3, 4)
    linked.pop_front()
    linked.pop_back()
    assert list(linked) == [2, 3]
    _check_links(linked)


def test_pop_to_empty():
    linked = _filled(1)
    linked.pop_back()
    assert linked.empty()
    assert linked.head is None and linked.tail is None
    assert len(linked) == 0


def test_pop_on_empty_does_nothing():
    linked = LinkedList()
    linked.pop_front()
    linked.pop_back()
    assert linked.empty()
    assert len(linked) == 0


def test_front_and_back_of_empty_raise():
    linked = LinkedList()
    with pytest.raises(IndexError):
        linked.front()
    with pytest.raises(IndexError):
        linked.back()


def test_insert_before_head_and_middle():
    linked = _filled(1, 3)
    linked.insert_before(linked.head, 0)
    linked.insert_before(linked.find(3), 2)
    assert list(linked) == [0, 1, 2, 3]
    _check_links(linked)


def test_insert_after_tail_and_middle():
    linked = _filled(1, 3)
    linked.insert_after(linked.tail, 4)
    linked.insert_after(linked.find(1), 2)
    assert list(linked) == [1, 2, 3, 4]
    assert linked.back() == 4
    _check_links(linked)


def test_find_returns_node_or_none():
    linked = _filled("x", "y", "z")
    node = linked.find("y")
    assert node.data == "y"
    assert node.prev.data == "x"
    assert linked.find("missing") is None


def test_remove_head_middle_tail():
    linked = _filled(1, 2, 3, 4, 5)
    linked.remove(1)
    linked.remove(3)
    linked.remove(5)
    assert list(linked) == [2, 4]
    assert linked.front() == 2
    assert linked.back() == 4
    _check_links(linked)


def test_remove_only_node():
    linked = _filled(9)
    linked.remove(9)
    assert linked.empty()
    assert linked.tail is None


def test_remove_missing_leaves_list():
    linked = _filled(1, 2)
    linked.remove(42)
    assert list(linked) == [1, 2]


def test_remove_first_match_only():
    linked = _filled(1, 2, 1)
    linked.remove(1)
    assert list(linked) == [2, 1]


def test_clear():
    linked = _filled(1, 2, 3)
    linked.clear()
    assert linked.empty()
    assert list(linked) == []
    assert len(linked) == 0


def test_iadd_appends():
    linked = _filled(1)
    linked += 2
    assert list(linked) == [1, 2]


def test_str_format():
    assert str(_filled(1, 2)) == "1 2 "


def test_copy_keeps_order_and_is_independent():
    original = _filled(1, 2, 3)
    duplicate = copy.copy(original)
    assert list(duplicate) == list(original)
    duplicate.push_back(4)
    assert list(original) == [1, 2, 3]


def test_nodes_yields_in_order():
    linked = _filled("a", "b")
    assert [node.data for node in linked.nodes()] == ["a", "b"]