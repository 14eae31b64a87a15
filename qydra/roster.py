"""The ordered set of members of a group."""

from __future__ import annotations

import hashlib
from typing import Any, Hashable, Iterator

__all__ = ["RosterError", "MemberExistsError", "MemberNotFoundError", "Roster"]


class RosterError(Exception):
    """Base class for roster errors."""


class MemberExistsError(RosterError):
    """A member with this id is already in the roster."""


class MemberNotFoundError(RosterError):
    """No member with this id is in the roster."""


class Roster:
    """Members keyed by id and always kept in id order.

    A member is any object with an orderable ``id``, a ``kp`` key package
    with a ``verify()`` method and a ``hash()`` method returning bytes.
    """

    def __init__(self) -> None:
        self._members: dict[Hashable, Any] = {}

    @classmethod
    def from_member(cls, member: Any) -> Roster:
        """A roster holding just ``member``."""
        roster = cls()
        roster.add(member)
        return roster

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members

    def __iter__(self) -> Iterator[Any]:
        return (self._members[k] for k in self.ids())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Roster):
            return NotImplemented
        return self._members == other._members

    def __repr__(self) -> str:
        return f"Roster({list(self)!r})"

    def idx(self, member_id: Hashable) -> int:
        """Position of ``member_id`` in id order."""
        try:
            return self.ids().index(member_id)
        except ValueError:
            raise MemberNotFoundError(member_id) from None

    def add(self, member: Any) -> None:
        """Add ``member``; on a duplicate id it replaces the old one and raises."""
        existed = member.id in self._members
        self._members[member.id] = member
        if existed:
            raise MemberExistsError(member.id)

    def remove(self, member_id: Hashable) -> None:
        """Remove the member with ``member_id``."""
        try:
            del self._members[member_id]
        except KeyError:
            raise MemberNotFoundError(member_id) from None

    def get(self, member_id: Hashable) -> Any | None:
        """The member with ``member_id``, or None."""
        return self._members.get(member_id)

    def set_kp(self, member_id: Hashable, kp: Any) -> None:
        """Replace the key package of ``member_id``, if it is present."""
        member = self._members.get(member_id)
        if member is not None:
            member.kp = kp

    def ids(self) -> list[Hashable]:
        """Member ids in ascending order."""
        return sorted(self._members)

    def verify_keys(self) -> bool:
        """Whether every member's key package verifies."""
        return all(m.kp.verify() for m in self._members.values())

    def hash(self) -> bytes:
        """SHA-256 of the members' hashes concatenated in id order."""
        return hashlib.sha256(b"".join(m.hash() for m in self)).digest()