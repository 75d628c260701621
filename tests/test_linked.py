from minishkit.linked import LinkedList


def test_init_preserves_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_add_front_prepends():
    lst = LinkedList([2, 3])
    lst.add_front(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("only")
    assert lst.last() == "only"
    assert list(lst) == ["only"]


def test_add_back_appends_and_updates_last():
    lst = LinkedList(["x"])
    lst.add_back("y")
    assert list(lst) == ["x", "y"]
    assert lst.last() == "y"


def test_mixed_insertions():
    lst = LinkedList()
    lst.add_back(2)
    lst.add_front(1)
    lst.add_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == len(list(lst))


def test_clear_calls_delete_for_each_content():
    items = ["a", None, "b"]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_list_usable_after_clear():
    lst = LinkedList([1])
    lst.clear()
    lst.add_back(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_iterate_visits_in_order():
    items = [3, 1, 2]
    seen = []
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list():
    items = ["a", "bb", "ccc"]
    lst = LinkedList(items)
    mapped = lst.map(len)
    assert list(mapped) == [len(s) for s in items]
    assert list(lst) == items
    assert mapped is not lst


def test_map_of_empty_is_empty():
    assert len(LinkedList().map(str)) == 0