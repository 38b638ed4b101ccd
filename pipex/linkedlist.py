"""A singly linked list of arbitrary contents.

Operations that would change a caller's head pointer return the new head
instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One list element holding ``content`` and a link to the next node."""

    content: Any
    next: Node | None = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the contents of this node and of every node after it."""
        node: Node | None = self
        while node is not None:
            yield node.content
            node = node.next

    def _nodes(self) -> Iterator[Node]:
        node: Node | None = self
        while node is not None:
            yield node
            node = node.next


def lst_new(content: Any) -> Node:
    """Return a single, unlinked node holding ``content``."""
    return Node(content)


def lst_add_front(head: Node | None, node: Node) -> Node:
    """Put ``node`` in front of ``head`` and return it as the new head."""
    node.next = head
    return node


def lst_last(head: Node | None) -> Node | None:
    """Return the last node of the list, or None for an empty list."""
    last = None
    if head is not None:
        for last in head._nodes():
            pass
    return last


def lst_add_back(head: Node | None, node: Node | None) -> Node | None:
    """Append ``node`` after the last node and return the head of the list."""
    last = lst_last(head)
    if last is None:
        return node
    last.next = node
    return head


def lst_size(head: Node | None) -> int:
    """Return the number of nodes in the list."""
    return 0 if head is None else sum(1 for _ in head._nodes())


def lst_delone(node: Node, delete: Callable[[Any], Any]) -> None:
    """Release one node: pass its content to ``delete`` and unlink it."""
    delete(node.content)
    node.content = None
    node.next = None


def lst_clear(head: Node | None, delete: Callable[[Any], Any] | None) -> Node | None:
    """Release every node in order and return the new, empty head.

    Without a ``delete`` callable nothing is released and ``head`` is
    returned as it was.
    """
    if delete is None:
        return head
    node = head
    while node is not None:
        following = node.next
        lst_delone(node, delete)
        node = following
    return None


def lst_iter(head: Node | None, f: Callable[[Any], Any]) -> None:
    """Call ``f`` on the content of every node, front to back."""
    if head is not None:
        for content in head:
            f(content)


def lst_map(
    head: Node | None,
    f: Callable[[Any], Any] | None,
    delete: Callable[[Any], Any] | None,
) -> Node | None:
    """Return a new list holding ``f(content)`` for every node.

    Returns None when the list, ``f`` or ``delete`` is missing. If ``f``
    raises, the contents built so far are passed to ``delete`` and the
    error propagates.
    """
    if head is None or f is None or delete is None:
        return None
    result: Node | None = None
    tail: Node | None = None
    try:
        for content in head:
            node = Node(f(content))
            if tail is None:
                result = node
            else:
                tail.next = node
            tail = node
    except BaseException:
        lst_clear(result, delete)
        raise
    return result