"""Doubly-linked list of integers with O(1) end operations."""

import logging
from collections.abc import Iterable, Iterator
from typing import NoReturn, TextIO

from intlinkedlist.errors import CapacityError, UnderflowError

logger = logging.getLogger(__name__)


class Node:
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: int) -> None:
        self.value = value
        self.prev: Node | None = None
        self.next: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


def _check_value(value: object) -> None:
    # bool is an int subclass but not a payload
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected int, got {type(value).__name__}")


class DoublyLinkedList:
    """
    Doubly-linked list of integers.

    Owns a chain of nodes between ``head`` and ``tail``. Pushes and pops at
    either end are O(1). Callers only ever receive integer payloads; nodes
    are never handed out for mutation.

    The list cannot be copied or pickled. Use it as a context manager to
    release every node on exit::

        with DoublyLinkedList([1, 2, 3]) as lst:
            lst.push_front(0)
    """

    def __init__(self, values: Iterable[int] = (), *, max_size: int | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Integers appended in order via push_back.
            max_size: Maximum number of elements. None (default) means
                unbounded, in which case pushes never fail.

        Raises:
            TypeError: If max_size is not an int or None
            ValueError: If max_size is negative
            TypeError: If an element of values is not an int
            CapacityError: If values has more than max_size elements
        """
        if max_size is not None and (not isinstance(max_size, int) or isinstance(max_size, bool)):
            raise TypeError(f"max_size must be an int or None, got {type(max_size).__name__}")
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        self._max_size = max_size

        for value in values:
            self.push_back(value)

    @property
    def head(self) -> Node | None:
        """First node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Node | None:
        """Last node, or None when empty."""
        return self._tail

    @property
    def max_size(self) -> int | None:
        """Maximum number of elements, or None when unbounded."""
        return self._max_size

    def _check_capacity(self, op: str) -> None:
        if self._max_size is not None and self._size >= self._max_size:
            logger.debug("%s rejected: list is at capacity (%d)", op, self._max_size)
            raise CapacityError(f"{op} on full list (max_size={self._max_size})")

    def push_front(self, value: int) -> None:
        """Prepend value, making it the new head. O(1)."""
        _check_value(value)
        self._check_capacity("push_front")
        node = Node(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            # List was empty
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append value, making it the new tail. O(1)."""
        _check_value(value)
        self._check_capacity("push_back")
        node = Node(value)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def pop_front(self) -> int:
        """
        Remove the head node and return its value. O(1).

        Raises:
            UnderflowError: If the list is empty (the list is left unchanged)
        """
        node = self._head
        if node is None:
            logger.debug("pop_front on empty list")
            raise UnderflowError("pop_front on empty list")

        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            # List became empty
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def pop_back(self) -> int:
        """
        Remove the tail node and return its value. O(1).

        Raises:
            UnderflowError: If the list is empty (the list is left unchanged)
        """
        node = self._tail
        if node is None:
            logger.debug("pop_back on empty list")
            raise UnderflowError("pop_back on empty list")

        self._tail = node.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        node.prev = None
        self._size -= 1
        return node.value

    def size(self) -> int:
        """Return the number of elements. O(1)."""
        return self._size

    def empty(self) -> bool:
        """Return True if the list holds no elements. O(1)."""
        return self._size == 0

    def clear(self) -> None:
        """Unlink and release every node, walking from head. O(n)."""
        if self._size:
            logger.debug("Releasing %d nodes", self._size)
        node = self._head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def format_forward(self) -> str:
        """Return the head-to-tail traversal line, e.g. ``[head] 1 2 [null]``."""
        return "[head] " + "".join(f"{value} " for value in self) + "[null]"

    def format_backward(self) -> str:
        """Return the tail-to-head traversal line, e.g. ``[tail] 2 1 [null]``."""
        return "[tail] " + "".join(f"{value} " for value in reversed(self)) + "[null]"

    def print_forward(self, file: TextIO | None = None) -> None:
        """Write the head-to-tail traversal to file (default: stdout)."""
        print(self.format_forward(), file=file)

    def print_backward(self, file: TextIO | None = None) -> None:
        """Write the tail-to-head traversal to file (default: stdout)."""
        print(self.format_backward(), file=file)

    def __iter__(self) -> Iterator[int]:
        """Yield values from head to tail."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        """Yield values from tail to head."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        """Return the number of elements."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(str(value) for value in self)}])"

    def __enter__(self) -> "DoublyLinkedList":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit. Releases all nodes."""
        self.clear()

    def __copy__(self) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict[int, object]) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce_ex__(self, protocol: object) -> NoReturn:
        raise TypeError(f"{type(self).__name__} cannot be pickled")
