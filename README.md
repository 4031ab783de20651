# bptree

An in-memory B+ tree that maps integer keys to arbitrary values. All values
live in the leaves, the leaves are chained to their neighbours in key order,
and removals borrow from or merge with sibling nodes to keep the tree
balanced.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bptree.tree import BTree

tree = BTree(6)          # a node splits once it holds 6 keys; 6 is also the default
tree.set(1, "one")
tree.set(2, "two")
tree.set(3, "three")
tree.set(2, "TWO")       # setting an existing key replaces its value

tree.find(2)             # -> "TWO"
tree.find(15)            # -> None
3 in tree                # -> True
len(tree)                # -> 3
list(tree.items())       # -> [(1, "one"), (2, "TWO"), (3, "three")]

tree.remove(1)           # removing a missing key does nothing
tree.is_empty()          # -> False

print(tree.format_tree())
tree.print_tree()        # writes the same drawing to standard output
tree.clear()             # empties the tree, keeping its degree
```

`print_tree` takes an optional `file` argument to write somewhere other than
standard output.

`find` returns `None` for an absent key, so a stored value of `None` cannot be
told apart from a missing key that way; use `in` for that.

After a removal, a node that holds fewer than `degree // 2` keys borrows a key
from a sibling under the same parent, or merges with it when the sibling has
none to spare. When the root is left with no keys, its only child becomes the
new root and `tree.depth` drops by one.

## Drawing

`format_tree` shows one node per line with its keys, children indented below
their parent. A degree-6 tree holding the keys 1 to 11, inserted in the order
1, 2, 3, 4, 5, 6, 7, 9, 11, 8, 10, is drawn as:

```
├ [4, 7]
   ├ [1, 2, 3]
   ├ [4, 5, 6]
   ├ [7, 8, 9, 10, 11]
```

## Errors

A degree below 2 raises `bptree.config.InvalidDegree`, a subclass of
`ValueError`. The module `bptree.config` also defines `KeyNotFound` (a
`KeyError`) and `TreeCorrupted` (a `RuntimeError`) for callers that want them;
the tree itself does not raise either.

The node type is available as `bptree.node.Node`, with `bptree.node.NodeType`
telling root, internal and leaf nodes apart.

## Demo

```
bptree-demo
```

or `python -m bptree.demo`, builds a tree from the keys 1 to 11 shown above,
prints it, looks up keys 5 and 15, removes 1, 5, 3 and 8, and prints the tree
again. `--degree N` picks another node degree (default 6).

## What it does not do

The tree lives in memory only: there is no saving to or loading from disk,
keys must be integers, and nothing is safe for use from several threads at
once.