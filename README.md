# qydra

Pure-Python building blocks for a tree-based group key agreement protocol.
There are no runtime dependencies.

## Modules

- `qydra.treemath` works out node and leaf indices in a left-balanced
  binary tree stored as an array. It provides `root`, `left`, `right`,
  `parent`, `sibling`, `dirpath`, `copath`, `ancestor`, `level`,
  `is_in_subtree` and the conversions between leaf and node spaces.
  Invalid requests raise subclasses of `TreeMathError`.
- `qydra.secret_tree` holds `SecretTree`. It derives a separate secret for
  each leaf from a root secret and forgets each secret once it has been
  handed out. `hkdf_tree(size, root_secret)` builds a tree that uses
  HKDF-SHA256 for the derivation.
- `qydra.roster` holds `Roster`, an ordered set of group members keyed by
  id. Its SHA-256 `hash()` does not depend on the order in which members
  were added.
- `qydra.welcome`, `qydra.transport` and `qydra.update` define the data
  carried by invitations, commits, proposals and pending key updates.

## Example

```python
from qydra import treemath
from qydra.secret_tree import SecretTree, SecretUsedError

treemath.root(8)          # 7
treemath.dirpath(4, 4)    # [5, 3]
treemath.copath(16, 11)   # [18, 20, 7]

tree = SecretTree(8, 0, lambda secret, idx, info: idx)
tree.get(0)               # 0
try:
    tree.get(0)
except SecretUsedError:
    pass                  # every leaf secret can be taken only once
```

## Running the tests

```
pip install -e ".[test]"
pytest
```