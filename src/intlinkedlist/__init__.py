"""intlinkedlist - Doubly-linked list of integers with O(1) end operations."""

from intlinkedlist.errors import CapacityError, LinkedListError, UnderflowError
from intlinkedlist.linkedlist import DoublyLinkedList, Node

__version__ = "0.1.0"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "LinkedListError",
    "UnderflowError",
    "CapacityError",
]
