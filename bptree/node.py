"""Nodes of a B+ tree: sorted keys, child links and the leaf chain."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Optional


class NodeType(Enum):
    """The role a node plays in the tree."""

    ROOT = auto()
    INTERNAL = auto()
    LEAF = auto()


@dataclass(eq=False, repr=False)
class Node:
    """A tree node.

    Leaves hold ``values`` alongside ``keys`` and are chained through
    ``prev``/``next``; other nodes hold ``children``.  ``size`` is the
    key count the tree balances on.
    """

    type: NodeType = NodeType.LEAF
    keys: list[int] = field(default_factory=list)
    values: list[Any] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = None
    prev: Optional[Node] = None
    next: Optional[Node] = None
    size: int = 0

    def __repr__(self) -> str:
        return f"Node({self.type.name}, keys={self.keys!r}, size={self.size})"

    # Key lookup

    def find_key(self, key: int) -> Optional[int]:
        """Return the position of ``key`` in this node, or None."""
        index = bisect_left(self.keys, key)
        if index < len(self.keys) and self.keys[index] == key:
            return index
        return None

    def key_insert_index(self, key: int) -> int:
        """Return the position after every key not greater than ``key``."""
        return bisect_right(self.keys, key)

    def index_of_child(self, child: Node) -> int:
        """Return the position of ``child`` among this node's children."""
        for index, candidate in enumerate(self.children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of {self!r}")

    # Removal

    def remove_from_leaf(self, key: int) -> None:
        """Drop ``key`` and its value, refreshing the parent's separator."""
        index = self.find_key(key)
        if index is None:
            return
        del self.keys[index]
        del self.values[index]
        self.size -= 1
        if self.parent is not None and self.keys:
            separator = self.parent.find_key(key)
            if separator is not None:
                self.parent.keys[separator] = self.keys[0]

    def remove_from_internal(self, key: int) -> None:
        """Replace separator ``key`` with the first key of its subtree's leftmost leaf."""
        index = self.find_key(key)
        if index is None:
            return
        leaf = self.children[index]
        while leaf.type is not NodeType.LEAF:
            leaf = leaf.children[0]
        self.keys[index] = leaf.keys[0]
        self.size -= 1

    # Leaf rebalancing

    def borrow_from_right_leaf(self) -> None:
        """Take the first entry of the next leaf."""
        right = self.next
        right_parent = right.parent
        self.keys.append(right.keys.pop(0))
        self.values.append(right.values.pop(0))
        self.size += 1
        right.size -= 1
        right_parent.keys[right_parent.index_of_child(right) - 1] = right.keys[0]

    def borrow_from_left_leaf(self) -> None:
        """Take the last entry of the previous leaf."""
        left = self.prev
        parent = self.parent
        self.keys.insert(0, left.keys.pop())
        self.values.insert(0, left.values.pop())
        self.size += 1
        left.size -= 1
        parent.keys[parent.index_of_child(self) - 1] = self.keys[0]

    def merge_with_right_leaf(self) -> None:
        """Absorb the next leaf and unlink it from its parent."""
        right = self.next
        right_parent = right.parent
        for key, value in zip(right.keys, right.values):
            self.set(key, value)

        self.next = right.next
        if self.next is not None:
            self.next.prev = self

        index = right_parent.index_of_child(right)
        del right_parent.keys[index - 1]
        del right_parent.children[index]
        right_parent.size -= 1
        right._detach()

    def merge_with_left_leaf(self) -> None:
        """Pour this leaf into the previous one and unlink it from its parent."""
        left = self.prev
        parent = self.parent
        for key, value in zip(self.keys, self.values):
            left.set(key, value)

        left.next = self.next
        if left.next is not None:
            left.next.prev = left

        index = parent.index_of_child(self)
        del parent.keys[index - 1]
        del parent.children[index]
        parent.size -= 1
        self._detach()

    # Internal rebalancing

    def borrow_from_right_internal(self, next_node: Node) -> None:
        """Rotate a key and the first child of ``next_node`` through the parent."""
        parent = self.parent
        index = parent.index_of_child(self)
        self.keys.append(parent.keys[index])
        parent.keys[index] = next_node.keys.pop(0)
        self.size += 1
        next_node.size -= 1

        child = next_node.children.pop(0)
        self.children.append(child)
        child.parent = self

    def borrow_from_left_internal(self, prev_node: Node) -> None:
        """Rotate a key and the last child of ``prev_node`` through the parent."""
        parent = self.parent
        index = parent.index_of_child(self)
        self.keys.insert(0, parent.keys[index - 1])
        parent.keys[index - 1] = prev_node.keys.pop()
        self.size += 1
        prev_node.size -= 1

        child = prev_node.children.pop()
        self.children.insert(0, child)
        child.parent = self

    def merge_with_right_internal(self, next_node: Node) -> None:
        """Absorb ``next_node`` together with the separating parent key."""
        parent = self.parent
        index = parent.index_of_child(self)
        self.keys.append(parent.keys.pop(index))
        del parent.children[index + 1]
        self.size += next_node.size + 1
        parent.size -= 1

        self.keys.extend(next_node.keys)
        for child in next_node.children:
            self.children.append(child)
            child.parent = self
        next_node._detach()

    def merge_with_left_internal(self, prev_node: Node) -> None:
        """Pour this node and the separating parent key into ``prev_node``."""
        parent = self.parent
        index = parent.index_of_child(self)
        prev_node.keys.append(parent.keys.pop(index - 1))
        del parent.children[index]
        prev_node.size += self.size + 1
        parent.size -= 1

        prev_node.keys.extend(self.keys)
        for child in self.children:
            prev_node.children.append(child)
            child.parent = prev_node
        self._detach()

    # Insertion

    def set(self, key: int, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any existing value."""
        index = self.find_key(key)
        if index is not None:
            self.values[index] = value
            return
        position = self.key_insert_index(key)
        self.keys.insert(position, key)
        self.values.insert(position, value)
        self.size += 1

    def split_node(self) -> Optional[Node]:
        """Split this node in two, pushing the middle key up.

        Returns the new root when this node had no parent, otherwise None.
        """
        split_at = self.size >> 1
        parent_key = self.keys[split_at]

        if self.type is NodeType.LEAF:
            sibling = self._split_leaf(split_at)
        else:
            sibling = self._split_internal(split_at)

        if self.parent is not None:
            parent = self.parent
            index = parent.key_insert_index(parent_key)
            parent.keys.insert(index, parent_key)
            parent.size += 1
            parent.children.insert(index + 1, sibling)
            sibling.parent = parent
            return None

        new_root = Node(
            type=NodeType.ROOT,
            keys=[parent_key],
            children=[self, sibling],
            size=1,
        )
        if self.type is NodeType.ROOT:
            self.type = NodeType.INTERNAL
        self.parent = new_root
        sibling.parent = new_root
        return new_root

    def _split_leaf(self, split_at: int) -> Node:
        sibling = Node(type=NodeType.LEAF, prev=self, next=self.next)
        self.next = sibling
        if sibling.next is not None:
            sibling.next.prev = sibling

        sibling.keys = self.keys[split_at:]
        sibling.values = self.values[split_at:]
        del self.keys[split_at:]
        del self.values[split_at:]

        sibling.size = len(sibling.keys)
        self.size = len(self.keys)
        return sibling

    def _split_internal(self, split_at: int) -> Node:
        sibling = Node(type=NodeType.INTERNAL)

        sibling.children = self.children[split_at + 1:]
        del self.children[split_at + 1:]
        for child in sibling.children:
            child.parent = sibling

        # The middle key moves up to the parent and stays in neither half.
        sibling.keys = self.keys[split_at + 1:]
        del self.keys[split_at:]

        sibling.size = len(sibling.keys)
        self.size = len(self.keys)
        return sibling

    def _detach(self) -> None:
        self.parent = None
        self.prev = None
        self.next = None