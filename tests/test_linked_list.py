import pytest

from questkit.linked_list import LinkedList


def test_construct_from_iterable_keeps_order():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items
    assert len(LinkedList(items)) == len(items)


def test_empty_list():
    ll = LinkedList()
    assert len(ll) == 0
    assert list(ll) == []
    assert list(reversed(ll)) == []


def test_push_front_and_back():
    ll = LinkedList()
    ll.push_back(2)
    ll.push_front(1)
    ll.push_back(3)
    assert list(ll) == [1, 2, 3]
    assert list(reversed(ll)) == [3, 2, 1]


def test_getitem_positive_and_negative():
    items = [10, 20, 30, 40, 50]
    ll = LinkedList(items)
    for position, value in enumerate(items):
        assert ll[position] == value
        assert ll[position - len(items)] == value


@pytest.mark.parametrize("index", [5, -6, 100])
def test_getitem_out_of_range(index):
    with pytest.raises(IndexError):
        LinkedList([1, 2, 3, 4, 5])[index]


def test_pop_front_and_back_return_values():
    ll = LinkedList([1, 2, 3])
    assert ll.pop_front() == 1
    assert ll.pop_back() == 3
    assert list(ll) == [2]
    assert ll.pop_back() == 2
    assert len(ll) == 0
    assert list(reversed(ll)) == []


def test_pop_from_empty_raises():
    ll = LinkedList()
    with pytest.raises(IndexError):
        ll.pop_front()
    with pytest.raises(IndexError):
        ll.pop_back()


@pytest.mark.parametrize("index", [0, 1, 2, -1])
def test_insert_matches_list_insert(index):
    reference = [1, 2, 3]
    ll = LinkedList(reference)
    ll.insert(index, 99)
    reference.insert(index, 99)
    assert list(ll) == reference
    assert list(reversed(ll)) == reference[::-1]
    assert len(ll) == len(reference)


def test_insert_out_of_range_raises():
    ll = LinkedList([1])
    with pytest.raises(IndexError):
        ll.insert(1, 5)
    with pytest.raises(IndexError):
        LinkedList().insert(0, 5)


@pytest.mark.parametrize("index", [0, 1, 2, -1])
def test_erase_matches_list_pop(index):
    reference = ["x", "y", "z"]
    ll = LinkedList(reference)
    assert ll.erase(index) == reference.pop(index)
    assert list(ll) == reference
    assert list(reversed(ll)) == reference[::-1]


def test_erase_only_element_empties_list():
    ll = LinkedList(["only"])
    assert ll.erase(0) == "only"
    assert len(ll) == 0
    ll.push_back("again")
    assert list(ll) == ["again"]


def test_erase_out_of_range_raises():
    with pytest.raises(IndexError):
        LinkedList().erase(0)