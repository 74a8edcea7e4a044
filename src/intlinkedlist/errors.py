"""Exception classes for intlinkedlist."""


class LinkedListError(Exception):
    """Base exception for all intlinkedlist errors."""


class UnderflowError(LinkedListError, IndexError):
    """Raised when popping from an empty list."""


class CapacityError(LinkedListError, OverflowError):
    """Raised when pushing onto a list that has reached its max_size."""
