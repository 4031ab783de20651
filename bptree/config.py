"""Tree defaults, rendering symbols and the exceptions the tree raises."""

from __future__ import annotations

DEFAULT_DEGREE = 6

TREE_PREFIX_LAST = "   "
TREE_PREFIX_CONT = "╎  "
TREE_NODE_SYMBOL = "├ "


class InvalidDegree(ValueError):
    """Raised when a tree is given a degree it cannot work with."""

    def __init__(self, degree: int) -> None:
        super().__init__(f"Invalid B-tree degree: {degree}")
        self.degree = degree


class KeyNotFound(KeyError):
    """Raised when a key is looked up that the tree does not hold."""

    def __init__(self, key: int) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Key not found: {self.key}"


class TreeCorrupted(RuntimeError):
    """Raised when the tree's structure is found to be inconsistent."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Tree corruption detected: {message}")
        self.detail = message