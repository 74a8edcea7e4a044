"""Demo driver: builds a list, prints it after each step, then pops from both ends."""

import argparse
import logging
import sys

from intlinkedlist.linkedlist import DoublyLinkedList


def main(argv: list[str] | None = None) -> int:
    """Run the push/pop walkthrough and return the exit code."""
    parser = argparse.ArgumentParser(
        prog="intlinkedlist",
        description="Walk through push/pop operations on a doubly-linked list.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    with DoublyLinkedList() as dll:
        print("Pushing 3, 2, 1 at the front...")
        dll.push_front(3)
        dll.push_front(2)
        dll.push_front(1)
        dll.print_forward()
        dll.print_backward()

        print("\nPushing 4, 5 at the back...")
        dll.push_back(4)
        dll.push_back(5)
        dll.print_forward()
        dll.print_backward()

        print(f"\nPopping front:  {dll.pop_front()}")
        print(f"Popping back:   {dll.pop_back()}")
        dll.print_forward()
        print(f"\nSize now: {dll.size()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
