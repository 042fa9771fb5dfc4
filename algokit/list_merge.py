"""Merging and merge sort for singly linked lists, done by relinking nodes."""

from __future__ import annotations

from algokit.linked_list import LinkedList, Node


def _wrap(head: Node | None) -> LinkedList:
    result = LinkedList()
    result.head = head
    return result


def _merge_nodes(a: Node | None, b: Node | None) -> Node | None:
    dummy = Node(None)
    tail = dummy
    while a is not None and b is not None:
        if a.data <= b.data:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def _split_nodes(source: Node) -> tuple[Node, Node | None]:
    slow = source
    fast = source.next
    while fast is not None:
        fast = fast.next
        if fast is not None:
            slow = slow.next
            fast = fast.next
    back = slow.next
    slow.next = None
    return source, back


def _sort_nodes(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    front, back = _split_nodes(head)
    return _merge_nodes(_sort_nodes(front), _sort_nodes(back))


def merge_sorted(a: LinkedList, b: LinkedList) -> LinkedList:
    """Splice two ascending lists into one ascending list.

    On ties the node from ``a`` comes first. The nodes are moved into the
    result, so both inputs are left empty.
    """
    head = _merge_nodes(a.head, b.head)
    a.head = None
    b.head = None
    return _wrap(head)


def front_back_split(linked_list: LinkedList) -> tuple[LinkedList, LinkedList]:
    """Split a list into front and back halves; an odd extra node goes to the front.

    The nodes are moved into the halves, so the input is left empty.
    """
    head = linked_list.head
    linked_list.head = None
    if head is None:
        return LinkedList(), LinkedList()
    front, back = _split_nodes(head)
    return _wrap(front), _wrap(back)


def merge_sort(linked_list: LinkedList) -> None:
    """Sort a list in place by changing links, not data."""
    linked_list.head = _sort_nodes(linked_list.head)