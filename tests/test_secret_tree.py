import pytest

from qydra.secret_tree import (
    EmptySecretTreeError,
    LeafOutOfRangeError,
    SecretTree,
    SecretUsedError,
    hkdf,
    hkdf_tree,
)


def nokdf(_secret, idx, _info):
    return idx


def values(tree):
    return [tree.secrets[k] for k in sorted(tree.secrets)]


def test_node_derivation_on_get_size_8():
    s = SecretTree(8, 0, nokdf)

    assert s.get(0) == 0
    assert values(s) == [2, 5, 11]
    with pytest.raises(SecretUsedError) as exc:
        s.get(0)
    assert exc.value.idx == 0

    with pytest.raises(LeafOutOfRangeError) as exc:
        s.get(20)
    assert (exc.value.idx, exc.value.group_size) == (20, 8)

    assert s.get(1) == 2
    assert values(s) == [5, 11]
    with pytest.raises(SecretUsedError):
        s.get(1)

    assert s.get(4) == 8
    assert values(s) == [5, 10, 13]
    with pytest.raises(SecretUsedError):
        s.get(4)

    assert s.get(2) == 4
    assert values(s) == [6, 10, 13]

    assert s.get(3) == 6
    assert values(s) == [10, 13]

    assert s.get(7) == 14
    assert values(s) == [10, 12]

    assert s.get(6) == 12
    assert values(s) == [10]

    assert s.get(5) == 10
    assert values(s) == []
    with pytest.raises(SecretUsedError) as exc:
        s.get(5)
    assert exc.value.idx == 5


def test_node_derivation_on_get_size_2():
    s = SecretTree(2, 0, nokdf)

    assert s.get(1) == 2
    assert values(s) == [0]
    with pytest.raises(SecretUsedError):
        s.get(1)

    assert s.get(0) == 0
    assert values(s) == []


def test_node_derivation_on_get_size_1():
    s = SecretTree(1, 0, nokdf)

    assert s.get(0) == 0
    assert values(s) == []
    with pytest.raises(SecretUsedError):
        s.get(0)


def test_empty_tree_is_rejected():
    with pytest.raises(EmptySecretTreeError):
        SecretTree(0, 0, nokdf)


def test_node_derivation_on_get_size_5():
    s = SecretTree(5, 0, nokdf)

    assert s.get(1) == 2
    assert values(s) == [0, 5, 8]
    with pytest.raises(SecretUsedError):
        s.get(1)

    assert s.get(0) == 0
    assert values(s) == [5, 8]

    assert s.get(3) == 6
    assert values(s) == [4, 8]

    assert s.get(4) == 8
    assert values(s) == [4]


def test_hkdf_tree_ensures_unique_secrets_for_leaves():
    rs = bytes([42] * 32)

    s = hkdf_tree(1, rs)
    assert s.get(0) == rs

    s_one = hkdf_tree(5, rs)
    n0_one = s_one.get(0)
    n1_one = s_one.get(1)
    n2_one = s_one.get(2)

    assert len({n0_one, n1_one, n2_one}) == 3
    assert n1_one != rs
    assert n2_one != rs
    assert len(n0_one) == 32

    s_two = hkdf_tree(5, bytes([41] * 32))
    assert s_two.get(0) != n0_one


def test_hkdf_is_deterministic_and_depends_on_inputs():
    ikm = bytes(32)
    out = hkdf(ikm, 3, b"left")
    assert len(out) == 32
    assert hkdf(ikm, 3, b"left") == out
    assert hkdf(ikm, 4, b"left") != out
    assert hkdf(ikm, 3, b"right") != out
    # only the low byte of the node index is mixed in
    assert hkdf(ikm, 3 + 256, b"left") == out


def test_trees_compare_by_state():
    rs = bytes([7] * 32)
    a = hkdf_tree(4, rs)
    b = hkdf_tree(4, rs)
    assert a == b
    a.get(0)
    assert a != b
    b.get(0)
    assert a == b