"""Basic usage example for intlinkedlist."""

from intlinkedlist import DoublyLinkedList, UnderflowError


def main() -> None:
    """Demonstrate pushes, pops and traversals at both ends."""
    print("=== Deque-style usage ===\n")

    with DoublyLinkedList([10, 20, 30]) as dll:
        dll.push_front(5)
        dll.push_back(40)
        dll.print_forward()
        dll.print_backward()
        print(f"Size: {dll.size()}\n")

        # Drain from alternating ends
        while not dll.empty():
            print(f"  front -> {dll.pop_front()}")
            if dll:
                print(f"  back  -> {dll.pop_back()}")

        try:
            dll.pop_back()
        except UnderflowError as exc:
            print(f"\nUnderflow: {exc}")

    print("\n=== Bounded list ===\n")
    bounded = DoublyLinkedList(max_size=2)
    bounded.push_back(1)
    bounded.push_back(2)
    print(f"Full at {len(bounded)}: {bounded!r}")


if __name__ == "__main__":
    main()
