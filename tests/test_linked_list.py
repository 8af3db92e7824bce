import pytest

from dsakit.linked_list import LinkedList, Node, build_nodes


def _walk(head):
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def test_build_nodes_preserves_order():
    values = [1, 2, 3, 4, 5]
    assert _walk(build_nodes(values)) == values


def test_build_nodes_empty_returns_none():
    assert build_nodes([]) is None


def test_node_links():
    third = Node(30)
    head = Node(10, Node(20, third))
    assert _walk(head) == [10, 20, 30]


def test_constructor_and_len():
    values = [7, 8, 9]
    ll = LinkedList(values)
    assert list(ll) == values
    assert len(ll) == len(values)
    assert len(LinkedList()) == 0


def test_insert_at_head_reverses_input():
    values = [1, 2, 3, 4, 5]
    ll = LinkedList()
    for v in values:
        ll.insert_at_head(v)
    assert list(ll) == values[::-1]


def test_append_keeps_input_order():
    values = [1, 2, 3, 4, 5]
    ll = LinkedList()
    for v in values:
        ll.append(v)
    assert list(ll) == values


def test_source_walkthrough():
    ll = LinkedList()
    for v in (10, 20, 30):
        ll.insert_at_head(v)
    ll.insert_at_position(40, 2)
    ll.insert_at_position(50, 5)
    assert list(ll) == [30, 40, 20, 10, 50]
    assert ll.delete_at_head() == 30
    assert ll.delete_at_tail() == 50
    assert ll.delete_at_position(2) == 20
    ll.delete_by_value(10)
    assert list(ll) == [40]
    ll.clear()
    assert list(ll) == [] and len(ll) == 0


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_insert_at_position_lands_there(position):
    ll = LinkedList([1, 2, 3])
    ll.insert_at_position(99, position)
    assert list(ll)[position - 1] == 99
    assert len(ll) == 4


def test_insert_at_position_invalid():
    ll = LinkedList([1, 2])
    with pytest.raises(ValueError):
        ll.insert_at_position(5, 0)
    with pytest.raises(IndexError):
        ll.insert_at_position(5, 4)
    with pytest.raises(IndexError):
        LinkedList().insert_at_position(5, 2)


def test_delete_on_empty_raises():
    ll = LinkedList()
    with pytest.raises(IndexError):
        ll.delete_at_head()
    with pytest.raises(IndexError):
        ll.delete_at_tail()
    with pytest.raises(IndexError):
        ll.delete_at_position(1)
    with pytest.raises(IndexError):
        ll.delete_by_value(1)


def test_delete_at_tail_single_element():
    ll = LinkedList([5])
    assert ll.delete_at_tail() == 5
    assert list(ll) == []


def test_delete_at_position_errors():
    ll = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        ll.delete_at_position(-1)
    with pytest.raises(IndexError):
        ll.delete_at_position(4)
    assert list(ll) == [1, 2, 3]


def test_delete_at_position_middle():
    values = [1, 2, 3, 4]
    ll = LinkedList(values)
    assert ll.delete_at_position(3) == values[2]
    assert list(ll) == values[:2] + values[3:]


def test_delete_by_value_first_occurrence_only():
    values = [1, 2, 3, 2]
    ll = LinkedList(values)
    ll.delete_by_value(2)
    assert list(ll) == values[:1] + values[2:]
    assert len(ll) == 3


def test_delete_by_value_missing():
    ll = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        ll.delete_by_value(7)
    assert len(ll) == 3