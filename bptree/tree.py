"""A B+ tree mapping integer keys to values."""

from __future__ import annotations

from typing import Any, Iterator, Optional, TextIO

from bptree.config import (
    DEFAULT_DEGREE,
    TREE_NODE_SYMBOL,
    TREE_PREFIX_CONT,
    TREE_PREFIX_LAST,
    InvalidDegree,
)
from bptree.node import Node, NodeType


class BTree:
    """A B+ tree whose nodes split once they hold ``degree`` keys.

    Values live in the leaves, which are chained in key order.  A node
    that drops below ``degree // 2`` keys after a removal borrows from,
    or merges with, a sibling under the same parent.
    """

    def __init__(self, degree: int = DEFAULT_DEGREE) -> None:
        if degree < 2:
            raise InvalidDegree(degree)
        self.degree = degree
        self.depth = 1
        self.root = Node(type=NodeType.LEAF)

    def __repr__(self) -> str:
        return f"BTree(degree={self.degree}, depth={self.depth})"

    # Lookup

    def _find_leaf(self, key: int) -> Node:
        node = self.root
        while node.type is not NodeType.LEAF:
            node = node.children[node.key_insert_index(key)]
        return node

    def _leftmost_leaf(self) -> Node:
        node = self.root
        while node.type is not NodeType.LEAF:
            node = node.children[0]
        return node

    def find(self, key: int) -> Optional[Any]:
        """Return the value stored under ``key``, or None if it is absent."""
        leaf = self._find_leaf(key)
        index = leaf.find_key(key)
        if index is None:
            return None
        return leaf.values[index]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._find_leaf(key).find_key(key) is not None

    def items(self) -> Iterator[tuple[int, Any]]:
        """Yield ``(key, value)`` pairs in ascending key order."""
        leaf: Optional[Node] = self._leftmost_leaf()
        while leaf is not None:
            yield from zip(leaf.keys, leaf.values)
            leaf = leaf.next

    def __len__(self) -> int:
        return sum(1 for _ in self.items())

    def is_empty(self) -> bool:
        """Return True when the tree holds no keys."""
        return next(self.items(), None) is None

    # Insertion

    def set(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        leaf = self._find_leaf(key)
        existed = leaf.find_key(key) is not None
        leaf.set(key, value)
        if existed:
            return

        node: Optional[Node] = leaf
        while node is not None and node.size >= self.degree:
            new_root = node.split_node()
            if new_root is not None:
                self.depth += 1
                self.root = new_root
            node = node.parent

    # Removal

    def remove(self, key: int) -> None:
        """Remove ``key`` and its value; an absent key is ignored."""
        leaf = self._find_leaf(key)
        if leaf.find_key(key) is None:
            return

        min_capacity = self.degree >> 1
        node: Optional[Node] = leaf
        while node is not None:
            if node.type is NodeType.LEAF:
                node.remove_from_leaf(key)
            else:
                self._replace_separator(node, key)
            if node.size < min_capacity:
                node = self._rebalance(node, min_capacity)
            node = node.parent

    @staticmethod
    def _replace_separator(node: Node, key: int) -> None:
        # A separator equal to a removed key is moved to the smallest key of
        # the subtree on its right; when that leaf is empty the old key still
        # routes searches correctly and is left in place.
        index = node.find_key(key)
        if index is None:
            return
        leaf = node.children[index + 1]
        while leaf.type is not NodeType.LEAF:
            leaf = leaf.children[0]
        if leaf.keys:
            node.keys[index] = leaf.keys[0]

    def _rebalance(self, node: Node, min_capacity: int) -> Node:
        """Fix an underfull node; return the node the walk upwards continues from."""
        if node.type is NodeType.ROOT:
            if node.size == 0 and node.children:
                return self._collapse_root(node)
            return node

        parent = node.parent
        if parent is None:
            return node

        if node.type is NodeType.INTERNAL:
            index = parent.index_of_child(node)
            right = parent.children[index + 1] if index + 1 < len(parent.children) else None
            left = parent.children[index - 1] if index > 0 else None
            if right is not None and right.size > min_capacity:
                node.borrow_from_right_internal(right)
            elif left is not None and left.size > min_capacity:
                node.borrow_from_left_internal(left)
            elif right is not None:
                node.merge_with_right_internal(right)
            elif left is not None:
                node.merge_with_left_internal(left)
                return left
            return node

        right = node.next if node.next is not None and node.next.parent is parent else None
        left = node.prev if node.prev is not None and node.prev.parent is parent else None
        if right is not None and right.size > min_capacity:
            node.borrow_from_right_leaf()
        elif left is not None and left.size > min_capacity:
            node.borrow_from_left_leaf()
        elif right is not None:
            node.merge_with_right_leaf()
        elif left is not None:
            node.merge_with_left_leaf()
            return left
        return node

    def _collapse_root(self, old_root: Node) -> Node:
        new_root = old_root.children[0]
        old_root.children.clear()
        new_root.parent = None
        new_root.type = NodeType.ROOT if new_root.children else NodeType.LEAF
        self.root = new_root
        self.depth -= 1
        return new_root

    def clear(self) -> None:
        """Drop every key, leaving an empty tree of the same degree."""
        self.root = Node(type=NodeType.LEAF)
        self.depth = 1

    # Rendering

    def format_tree(self) -> str:
        """Render the tree's keys level by level, one node per line."""
        lines: list[str] = []

        def walk(node: Node, prefix: str, last: bool) -> None:
            keys = ", ".join(str(key) for key in node.keys)
            lines.append(f"{prefix}{TREE_NODE_SYMBOL}[{keys}]")
            if node.type is NodeType.LEAF:
                return
            child_prefix = prefix + (TREE_PREFIX_LAST if last else TREE_PREFIX_CONT)
            count = len(node.children)
            for position, child in enumerate(node.children, 1):
                walk(child, child_prefix, position == count)

        walk(self.root, "", True)
        return "\n".join(lines)

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        """Write :meth:`format_tree` to ``file`` (standard output by default)."""
        print(self.format_tree(), file=file)