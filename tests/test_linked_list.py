import pytest

from minirt.linked_list import LinkedList, Node


def test_init_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    node = lst.push_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.push_front("x")
    assert lst.last() is node
    assert len(lst) == 1


def test_push_back_appends():
    lst = LinkedList([1])
    node = lst.push_back(2)
    assert lst.last() is node
    assert list(lst) == [1, 2]


def test_len_counts_nodes():
    lst = LinkedList(range(5))
    lst.push_front(-1)
    lst.push_back(5)
    assert len(lst) == 7


def test_last_is_final_node():
    lst = LinkedList(["p", "q"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "q"
    assert last.next is None


def test_clear_calls_delete_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert lst.head is None
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.push_back(9)
    assert list(lst) == [9]
    assert lst.last().content == 9


def test_for_each_visits_all():
    seen = []
    LinkedList(["a", "b"]).for_each(seen.append)
    assert seen == ["a", "b"]


def test_for_each_on_empty_calls_nothing():
    seen = []
    LinkedList().for_each(seen.append)
    assert seen == []


def test_map_builds_new_list():
    original = LinkedList([1, 2, 3])
    mapped = original.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(original) == [1, 2, 3]
    assert mapped.head is not original.head


def test_map_failure_deletes_built_contents():
    deleted = []
    lst = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        lst.map(lambda x: None if x == 3 else str(x), deleted.append)
    assert deleted == ["1", "2"]
    assert list(lst) == [1, 2, 3]