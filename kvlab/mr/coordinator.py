"""MapReduce coordinator serving RPCs to workers over a UNIX-domain socket."""

from __future__ import annotations

import contextlib
import os
import socketserver
import sys
import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ..labgob import LabDecoder, LabEncoder
from .rpc import ExampleArgs, ExampleReply, coordinator_sock


class _Handler(socketserver.StreamRequestHandler):
    def handle(self) -> None:
        decoder = LabDecoder(self.rfile)
        encoder = LabEncoder(self.wfile)
        while True:
            try:
                rpcname, args = decoder.decode()
            except EOFError:
                return
            try:
                response = (True, self.server.coordinator._dispatch(rpcname, args))
            except Exception as exc:
                response = (False, str(exc))
            encoder.encode(response)
            self.wfile.flush()


class _RPCServer(socketserver.ThreadingUnixStreamServer):
    daemon_threads = True
    coordinator: "Coordinator"


class Coordinator:
    """Hands out work to workers and tracks whether the job has finished."""

    def __init__(
        self,
        files: Iterable[str] = (),
        n_reduce: int = 0,
        sockname: Optional[str] = None,
    ) -> None:
        self.files: List[str] = list(files)
        self.n_reduce = n_reduce
        self.sockname = sockname if sockname is not None else coordinator_sock()
        self._server: Optional[_RPCServer] = None
        self._finished = threading.Event()
        self._handlers: Dict[str, Callable[[Any], Any]] = {"Example": self.example}

    def example(self, args: ExampleArgs) -> ExampleReply:
        """Example RPC handler: reply with ``args.x + 1``."""
        return ExampleReply(y=args.x + 1)

    def _dispatch(self, rpcname: str, args: Any) -> Any:
        service, _, method = rpcname.rpartition(".")
        if service != "Coordinator":
            raise LookupError(f"rpc: can't find service {rpcname}")
        handler = self._handlers.get(method)
        if handler is None:
            raise LookupError(f"rpc: can't find method {rpcname}")
        return handler(args)

    def serve(self) -> None:
        """Start listening for worker RPCs in a background thread."""
        if self._server is not None:
            raise RuntimeError("coordinator is already serving")
        with contextlib.suppress(FileNotFoundError):
            os.remove(self.sockname)
        server = _RPCServer(self.sockname, _Handler)
        server.coordinator = self
        self._server = server
        threading.Thread(target=server.serve_forever, daemon=True).start()

    def done(self) -> bool:
        """Return whether the job has finished."""
        return self._finished.is_set()

    def close(self) -> None:
        """Stop serving, remove the socket and mark the job finished."""
        server, self._server = self._server, None
        if server is not None:
            server.shutdown()
            server.server_close()
            with contextlib.suppress(FileNotFoundError):
                os.remove(self.sockname)
        self._finished.set()

    def __enter__(self) -> "Coordinator":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


def make_coordinator(files: Sequence[str], n_reduce: int) -> Coordinator:
    """Create a coordinator for ``files`` with ``n_reduce`` reduce tasks and start serving."""
    coordinator = Coordinator(files, n_reduce)
    coordinator.serve()
    return coordinator


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a coordinator over the input files until the job is done."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: mrcoordinator inputfiles...", file=sys.stderr)
        return 1
    coordinator = make_coordinator(args, 10)
    while not coordinator.done():
        time.sleep(1)
    time.sleep(1)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())