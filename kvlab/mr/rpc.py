"""RPC messages shared by the MapReduce coordinator and workers."""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..labgob import register


@dataclass
class ExampleArgs:
    """Arguments of the example RPC."""

    x: int = 0


@dataclass
class ExampleReply:
    """Reply of the example RPC."""

    y: int = 0


register(ExampleArgs)
register(ExampleReply)


def coordinator_sock() -> str:
    """Return the UNIX-domain socket path the coordinator listens on."""
    return "/var/tmp/5840-mr-" + str(os.getuid())