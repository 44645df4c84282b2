"""RPC messages of the single-server key/value service."""

from __future__ import annotations

from dataclasses import dataclass

from ..labgob import register


@dataclass
class PutAppendArgs:
    """Arguments of a Put or Append request."""

    key: str = ""
    value: str = ""
    client_id: int = 0
    req_seq_num: int = 0


@dataclass
class PutAppendReply:
    """Reply to a Put or Append: the value the key held before."""

    value: str = ""


@dataclass
class GetArgs:
    """Arguments of a Get request."""

    key: str = ""
    client_id: int = 0
    req_seq_num: int = 0


@dataclass
class GetReply:
    """Reply to a Get: the key's value, or an empty string."""

    value: str = ""


for _cls in (PutAppendArgs, PutAppendReply, GetArgs, GetReply):
    register(_cls)