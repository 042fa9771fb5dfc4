import pytest

from algokit.circular_list import CircularList


@pytest.mark.parametrize("values", [[], [1], [12, 56, 2, 11]])
def test_construction_iterates_once(values):
    circular = CircularList(values)
    assert list(circular) == values
    assert len(circular) == len(values)


def test_last_node_links_back_to_head():
    circular = CircularList([1, 2, 3])
    node = circular.head
    for _ in range(len(circular)):
        node = node.next
    assert node is circular.head


def test_push_inserts_at_front():
    circular = CircularList()
    for value in [12, 56, 2, 11]:
        circular.push(value)
    assert list(circular) == [11, 2, 56, 12]


def test_push_into_empty_is_self_linked():
    circular = CircularList()
    circular.push(5)
    assert circular.head.next is circular.head
    assert list(circular) == [5]


@pytest.mark.parametrize(
    "values",
    [[12, 56, 2, 11, 1, 90], [], [3], [5, 5, 1, 5], [9, 8, 7, 6], [1, 2, 3]],
)
def test_sorted_insert_keeps_order(values):
    circular = CircularList()
    for value in values:
        circular.sorted_insert(value)
    assert list(circular) == sorted(values)
    assert len(circular) == len(values)


def test_sorted_insert_into_sorted_list():
    circular = CircularList([1, 4, 9])
    circular.sorted_insert(5)
    circular.sorted_insert(0)
    circular.sorted_insert(10)
    assert list(circular) == sorted([1, 4, 9, 5, 0, 10])


@pytest.mark.parametrize("size", range(8))
def test_split_halves(size):
    values = list(range(size))
    circular = CircularList(values)
    first, second = circular.split()
    assert list(first) + list(second) == values
    assert len(first) - len(second) in (0, 1)
    assert list(circular) == []


def test_split_halves_are_circular():
    first, second = CircularList([12, 56, 2, 11, 7]).split()
    for half in (first, second):
        node = half.head
        for _ in range(len(half)):
            node = node.next
        assert node is half.head