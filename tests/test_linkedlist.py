import pytest

from pyftls.linkedlist import LinkedList, Node


def test_iteration_keeps_insertion_order():
    assert list(LinkedList([1, 2, 3])) == [1, 2, 3]


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList(["b", "c"])
    node = lst.push_front("a")
    assert list(lst) == ["a", "b", "c"]
    assert lst.head is node


def test_push_back_appends_and_updates_last():
    lst = LinkedList()
    lst.push_back("x")
    node = lst.push_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() is node
    assert node.next is None


def test_len_counts_elements():
    items = list(range(7))
    assert len(LinkedList(items)) == len(items)


def test_last_returns_node_with_final_content():
    lst = LinkedList(["a", "b", "c"])
    tail = lst.last()
    assert isinstance(tail, Node) and tail.content == "c"


def test_for_each_visits_in_order():
    seen = []
    LinkedList(["p", "q", "r"]).for_each(seen.append)
    assert seen == ["p", "q", "r"]


def test_map_builds_new_list_and_leaves_original():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda v: v * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_propagates_errors():
    def boom(value):
        raise RuntimeError("bad")

    with pytest.raises(RuntimeError):
        LinkedList([1]).map(boom)


def test_clear_disposes_every_element_in_order():
    disposed = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(disposed.append)
    assert disposed == ["a", "b", "c"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_dispose_empties_list():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []