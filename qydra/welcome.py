"""Welcome messages that bring invitees into a group."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

__all__ = ["WlcmCti", "WlcmCtd", "Info"]


def _as_bytes(value: Any) -> bytes:
    """Raw bytes of a bytes-like value or of an object exposing ``as_bytes()``."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    return bytes(value.as_bytes())


@dataclass
class WlcmCti:
    """The part of a welcome shared by all invitees."""

    cti: Any
    # Info hash signed with the inviter's current signing key.
    roster_sig: Any
    # Hash of the info hash and roster_sig, signed with the inviter's identity keys.
    identity_sig: Any

    def id(self) -> bytes:
        """SHA-256 of the roster signature; unique content and key give unique ids."""
        return hashlib.sha256(_as_bytes(self.roster_sig)).digest()


@dataclass
class WlcmCtd:
    """The part of a welcome addressed to a single invitee."""

    user_id: Any
    kp_id: Any
    ctd: Any


@dataclass
class Info:
    """Group state sent to each invitee, encrypted to them."""

    guid: Any
    epoch: int
    roster: Any
    conf_trans_hash: bytes
    conf_tag: Any
    inviter: Any
    joiner: bytes
    description: bytes

    def hash(self) -> bytes:
        """SHA-256 over all fields, the epoch as 8 big-endian bytes."""
        return hashlib.sha256(
            b"".join(
                (
                    _as_bytes(self.guid),
                    self.epoch.to_bytes(8, "big"),
                    self.roster.hash(),
                    bytes(self.conf_trans_hash),
                    _as_bytes(self.conf_tag),
                    _as_bytes(self.inviter),
                    bytes(self.joiner),
                    bytes(self.description),
                )
            )
        ).digest()