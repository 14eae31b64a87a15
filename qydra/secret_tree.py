"""A tree of one-time secrets, derived lazily from a single root secret.

Each leaf's secret can be taken exactly once. Intermediate secrets are
derived on demand and erased as soon as they have been consumed.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Callable, Generic, TypeVar

from qydra import treemath

__all__ = [
    "SecretTreeError",
    "LeafOutOfRangeError",
    "EmptySecretTreeError",
    "SecretUsedError",
    "SecretTree",
    "hkdf",
    "hkdf_tree",
]

Secret = TypeVar("Secret")
Kdf = Callable[[Secret, int, bytes], Secret]

HASH_SIZE = 32
_HKDF_SALT = b"SecretTreeSecretTreeSecretTreeSe"


class SecretTreeError(Exception):
    """Base class for secret tree errors."""


class LeafOutOfRangeError(SecretTreeError):
    """The requested leaf does not exist in a group of this size."""

    def __init__(self, idx: int, group_size: int) -> None:
        super().__init__(f"leaf {idx} out of range for group of {group_size}")
        self.idx = idx
        self.group_size = group_size


class EmptySecretTreeError(SecretTreeError):
    """A secret tree must have at least one leaf."""

    def __init__(self) -> None:
        super().__init__("no empty tree allowed")


class SecretUsedError(SecretTreeError):
    """The secret of this leaf has already been taken."""

    def __init__(self, idx: int) -> None:
        super().__init__(f"secret for leaf {idx} has been used")
        self.idx = idx


class SecretTree(Generic[Secret]):
    """Secrets for ``size`` leaves, derived from ``root_secret`` with ``kdf``.

    ``kdf(secret, node, info)`` derives a child's secret from its parent's,
    where ``node`` is the child's node index and ``info`` is ``b"left"`` or
    ``b"right"``.
    """

    def __init__(self, size: int, root_secret: Secret, kdf: Kdf) -> None:
        try:
            root = treemath.root(size)
        except treemath.EmptyTreeError:
            raise EmptySecretTreeError() from None
        self.group_size = size
        self.root = root
        self.secrets: dict[int, Secret] = {root: root_secret}
        self.kdf = kdf

    def get(self, leaf: int) -> Secret:
        """Take the secret of ``leaf``; each leaf's secret can be taken once."""
        sender = treemath.leaf_to_node(leaf)
        try:
            path = [sender, *treemath.dirpath(sender, self.group_size)]
        except treemath.NodeOutOfRangeError as err:
            raise LeafOutOfRangeError(
                treemath.node_to_leaf(err.node), treemath.leaf_count(err.node_count)
            ) from None

        start = next((i for i, node in enumerate(path) if node in self.secrets), None)
        if start is None:
            raise SecretUsedError(leaf)

        for node in reversed(path[1 : start + 1]):
            secret = self.secrets[node]
            left = treemath.left(node)
            right = treemath.right(node, self.group_size)
            self.secrets[left] = self.kdf(secret, left, b"left")
            self.secrets[right] = self.kdf(secret, right, b"right")

        out = self.secrets[sender]
        for node in path:
            self.secrets.pop(node, None)
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretTree):
            return NotImplemented
        return (
            self.group_size == other.group_size
            and self.root == other.root
            and self.secrets == other.secrets
        )

    def __repr__(self) -> str:
        return (
            f"SecretTree(group_size={self.group_size!r}, root={self.root!r}, "
            f"secrets={dict(sorted(self.secrets.items()))!r})"
        )


def _hmac_sha256(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha256).digest()


def hkdf(ikm: bytes, idx: int, info: bytes) -> bytes:
    """HKDF-SHA256 with a fixed salt; ``info`` is suffixed with the node's low byte."""
    prk = _hmac_sha256(_HKDF_SALT, ikm)
    full_info = bytes(info) + bytes([idx & 0xFF])
    okm = b""
    block = b""
    counter = 1
    while len(okm) < HASH_SIZE:
        block = _hmac_sha256(prk, block + full_info + bytes([counter]))
        okm += block
        counter += 1
    return okm[:HASH_SIZE]


def hkdf_tree(size: int, root_secret: bytes) -> SecretTree[bytes]:
    """A secret tree of 32-byte secrets derived with :func:`hkdf`."""
    return SecretTree(size, root_secret, hkdf)