"""RPC messages of the replicated key/value service."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..labgob import register


class Err(str, enum.Enum):
    """Outcome of a request to a replicated key/value server."""

    OK = "OK"
    NO_KEY = "ErrNoKey"
    WRONG_LEADER = "ErrWrongLeader"
    TIMEOUT = "ErrTimeOut"


@dataclass
class PutAppendArgs:
    """Arguments of a Put or Append; ``op`` is ``"Put"`` or ``"Append"``."""

    key: str = ""
    value: str = ""
    op: str = ""
    msg_id: int = 0
    client_id: int = 0


@dataclass
class PutAppendReply:
    """Reply to a Put or Append."""

    err: Err = Err.OK


@dataclass
class GetArgs:
    """Arguments of a Get."""

    key: str = ""
    msg_id: int = 0
    client_id: int = 0


@dataclass
class GetReply:
    """Reply to a Get."""

    err: Err = Err.OK
    value: str = ""


for _cls in (Err, PutAppendArgs, PutAppendReply, GetArgs, GetReply):
    register(_cls)