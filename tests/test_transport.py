from dataclasses import dataclass

from qydra.transport import (
    EMPTY_ID,
    ReceivedAdd,
    ReceivedAdmit,
    ReceivedCommit,
    ReceivedEdit,
    ReceivedLeave,
    ReceivedMsg,
    ReceivedProposal,
    ReceivedRemove,
    ReceivedWelcome,
    SendAdmit,
    SendCommit,
    SendInvite,
    SendLeave,
    SendMsg,
)
from qydra.welcome import WlcmCti


@dataclass
class Ct:
    content_id: bytes


def cid(n: int) -> bytes:
    return bytes([n]) * 32


def test_commit_id():
    assert ReceivedCommit(Ct(cid(1)), "ctd").id() == cid(1)


def test_proposal_id_is_first_content_id():
    props = ReceivedProposal([Ct(cid(2)), Ct(cid(3))])
    assert props.id() == cid(2)


def test_empty_proposal_id():
    assert ReceivedProposal([]).id() == EMPTY_ID


def test_add_and_edit_use_commit_id():
    props = ReceivedProposal([Ct(cid(4))])
    commit = ReceivedCommit(Ct(cid(5)), "ctd")
    assert ReceivedAdd(props, commit).id() == cid(5)
    assert ReceivedEdit(props, commit).id() == cid(5)


def test_remove_id():
    rmv = ReceivedRemove(ReceivedProposal([Ct(cid(6))]), Ct(cid(7)))
    assert rmv.id() == cid(7)
    assert rmv.ctd is None


def test_admit_and_leave_ids():
    assert ReceivedAdmit(cid(8), Ct(cid(9))).id() == cid(8)
    assert ReceivedLeave(cid(10), Ct(cid(11))).id() == cid(10)


def test_msg_id():
    assert ReceivedMsg(Ct(cid(12))).id() == cid(12)


def test_welcome_id_matches_cti():
    cti = WlcmCti(cti="c", roster_sig=b"sig", identity_sig="i")
    wlcm = ReceivedWelcome(cti, "ctd", cid(13))
    assert wlcm.id() == cti.id()


def test_send_leave_and_admit_get_random_ids():
    msg = SendMsg(Ct(cid(1)), [b"abcdefgh"])
    a, b = SendLeave(msg), SendLeave(msg)
    assert len(a.id) == 32
    assert a.id != b.id
    assert a != b
    c, d = SendAdmit(msg), SendAdmit(msg)
    assert len(c.id) == 32 and c.id != d.id


def test_send_leave_explicit_id_equality():
    msg = SendMsg(Ct(cid(1)), [])
    leave = SendLeave(msg, cid(2))
    assert leave.id == cid(2)
    assert leave.farewell == msg
    assert leave == SendLeave(msg, cid(2))
    assert (leave == SendLeave(msg, cid(3))) is False


def test_send_invite_without_add():
    invite = SendInvite("wcti", ["wctd"])
    assert invite.add is None
    assert SendCommit("cti").ctds == []