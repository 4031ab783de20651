"""A short walk through inserting, finding and removing keys."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from bptree.config import DEFAULT_DEGREE, InvalidDegree
from bptree.tree import BTree

_ENTRIES = [
    (1, "one"),
    (2, "two"),
    (3, "three"),
    (4, "four"),
    (5, "five"),
    (6, "six"),
    (7, "seven"),
    (9, "nine"),
    (11, "eleven"),
    (8, "eight"),
    (10, "ten"),
]
_LOOKUPS = (5, 15)
_REMOVALS = (1, 5, 3, 8)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration and return the exit status."""
    parser = argparse.ArgumentParser(description="Demonstrate a B+ tree.")
    parser.add_argument(
        "--degree",
        type=int,
        default=DEFAULT_DEGREE,
        help=f"node degree (default {DEFAULT_DEGREE})",
    )
    args = parser.parse_args(argv)

    try:
        btree = BTree(args.degree)
    except InvalidDegree as error:
        parser.error(str(error))

    print("Inserting values into B-tree...")
    for key, value in _ENTRIES:
        btree.set(key, value)

    print("\nB-tree structure after insertions:")
    btree.print_tree()

    print("\nTesting find operations:")
    for key in _LOOKUPS:
        value = btree.find(key)
        if value is None:
            print(f"Key {key} not found")
        else:
            print(f"Key {key}: {value}")

    print(f"\nRemoving keys: {', '.join(str(key) for key in _REMOVALS)}")
    for key in _REMOVALS:
        btree.remove(key)

    print("\nB-tree structure after removals:")
    btree.print_tree()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())