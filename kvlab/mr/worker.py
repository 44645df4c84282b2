"""MapReduce worker-side helpers: key/value pairs, hashing and RPC calls."""

from __future__ import annotations

import socket
from dataclasses import dataclass
from typing import Any

from ..labgob import LabDecoder, LabEncoder
from .rpc import ExampleArgs, coordinator_sock

_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


@dataclass
class KeyValue:
    """A key/value pair emitted by a map function."""

    key: str
    value: str


def ihash(key: str) -> int:
    """Hash ``key`` to a non-negative int; use ``ihash(key) % n_reduce`` to pick a reduce task."""
    h = _FNV_OFFSET
    for byte in key.encode("utf-8"):
        h ^= byte
        h = (h * _FNV_PRIME) & 0xFFFFFFFF
    return h & 0x7FFFFFFF


def call(rpcname: str, args: Any) -> Any:
    """Send an RPC to the coordinator and return its reply.

    Raises ConnectionError if the coordinator cannot be reached and
    RuntimeError if the call fails on the coordinator's side.
    """
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(coordinator_sock())
    except OSError as exc:
        sock.close()
        raise ConnectionError(f"dialing: {exc}") from exc
    with sock, sock.makefile("rwb") as stream:
        LabEncoder(stream).encode((rpcname, args))
        stream.flush()
        ok, payload = LabDecoder(stream).decode()
    if not ok:
        raise RuntimeError(payload)
    return payload


def call_example() -> None:
    """Send the example RPC to the coordinator and print the reply."""
    try:
        reply = call("Coordinator.Example", ExampleArgs(x=99))
    except RuntimeError as exc:
        print(exc)
        print("call failed!")
        return
    print(f"reply.Y {reply.y}")