"""Building blocks for tree-based group key agreement."""

__version__ = "0.1.0"

__all__ = ["roster", "secret_tree", "transport", "treemath", "update", "welcome"]