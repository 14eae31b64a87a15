"""Messages a group member hands to, and receives from, the delivery service."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any, Optional, Union

__all__ = [
    "EMPTY_ID",
    "SendCommit",
    "SendAdd",
    "SendInvite",
    "SendRemove",
    "SendEdit",
    "SendProposal",
    "SendMsg",
    "SendLeave",
    "SendAdmit",
    "Send",
    "ReceivedWelcome",
    "ReceivedCommit",
    "ReceivedProposal",
    "ReceivedAdd",
    "ReceivedRemove",
    "ReceivedEdit",
    "ReceivedAdmit",
    "ReceivedLeave",
    "ReceivedMsg",
    "Received",
]

ID_SIZE = 32
# Id of a proposal batch that carries no proposals.
EMPTY_ID = bytes(ID_SIZE)


def _random_id() -> bytes:
    return secrets.token_bytes(ID_SIZE)


@dataclass
class SendCommit:
    cti: Any
    ctds: list = field(default_factory=list)


@dataclass
class SendAdd:
    props: list
    commit: SendCommit


@dataclass
class SendInvite:
    wcti: Any
    wctds: list
    add: Optional[SendAdd] = None


@dataclass
class SendRemove:
    props: list
    commit: SendCommit


@dataclass
class SendEdit:
    props: list
    commit: SendCommit


@dataclass
class SendProposal:
    props: list
    recipients: list


@dataclass
class SendMsg:
    payload: Any
    recipients: list


@dataclass
class SendLeave:
    """A farewell; gets a fresh random id unless one is given."""

    farewell: SendMsg
    id: bytes = field(default_factory=_random_id)


@dataclass
class SendAdmit:
    """A greeting; gets a fresh random id unless one is given."""

    greeting: SendMsg
    id: bytes = field(default_factory=_random_id)


Send = Union[
    SendInvite,
    SendAdmit,
    SendRemove,
    SendEdit,
    SendProposal,
    SendCommit,
    SendLeave,
    SendMsg,
]


@dataclass
class ReceivedWelcome:
    cti: Any
    ctd: Any
    kp_id: Any

    def id(self) -> bytes:
        return self.cti.id()


@dataclass
class ReceivedCommit:
    cti: Any
    ctd: Any

    def id(self) -> bytes:
        return self.cti.content_id


@dataclass
class ReceivedProposal:
    props: list

    def id(self) -> bytes:
        """Content id of the first proposal, or EMPTY_ID if there is none."""
        return self.props[0].content_id if self.props else EMPTY_ID


@dataclass
class ReceivedAdd:
    props: ReceivedProposal
    commit: ReceivedCommit

    def id(self) -> bytes:
        return self.commit.cti.content_id


@dataclass
class ReceivedRemove:
    props: ReceivedProposal
    cti: Any
    ctd: Any = None

    def id(self) -> bytes:
        return self.cti.content_id


@dataclass
class ReceivedEdit:
    props: ReceivedProposal
    commit: ReceivedCommit

    def id(self) -> bytes:
        return self.commit.cti.content_id


@dataclass
class ReceivedAdmit:
    id_: bytes
    welcome: Any

    def id(self) -> bytes:
        return self.id_


@dataclass
class ReceivedLeave:
    id_: bytes
    farewell: Any

    def id(self) -> bytes:
        return self.id_


@dataclass
class ReceivedMsg:
    ciphertext: Any

    def id(self) -> bytes:
        return self.ciphertext.content_id


Received = Union[
    ReceivedWelcome,
    ReceivedAdd,
    ReceivedAdmit,
    ReceivedRemove,
    ReceivedEdit,
    ReceivedProposal,
    ReceivedCommit,
    ReceivedLeave,
    ReceivedMsg,
]