# kvlab

A small toolkit for testing distributed systems in pure Python. It has no
third-party runtime dependencies.

## What is inside

### `kvlab.porcupine`: linearizability checking

- `kvlab.porcupine.model` holds the data types:
  - `Operation`: input, output, call and return times, and an optional
    `client_id`.
  - `Event`, with `EventKind.CALL` and `EventKind.RETURN`.
  - `Model`: a sequential specification with `init` and `step`. It can also
    take `partition`, `partition_event`, `equal`, `describe_operation` and
    `describe_state`. Any of these left as `None` is replaced by
    `no_partition`, `no_partition_event`, `shallow_equal`,
    `default_describe_operation` or `default_describe_state`.
  - `CheckResult`: `OK`, `ILLEGAL`, or `UNKNOWN` when the check timed out.
- `kvlab.porcupine.api` holds the entry points:
  - `check_operations` and `check_events` return a boolean.
  - `check_operations_timeout` and `check_events_timeout` return a
    `CheckResult`.
  - `check_operations_verbose` and `check_events_verbose` also return a
    `LinearizationInfo` with the longest linearizable prefixes of each
    partition.

  Timeouts are in seconds; `None` or `0` means no timeout. A timed-out check
  may accept a history that is not linearizable.
- `kvlab.porcupine.checker` exposes the underlying `check_operations_info` and
  `check_events_info`.
- `kvlab.porcupine.bitset.Bitset` is a fixed-size bit set. It offers `set`,
  `clear`, `get`, `popcount` and `clone`.

```python
from kvlab.models import KV_MODEL, KvInput, KvOutput
from kvlab.porcupine.api import check_operations
from kvlab.porcupine.model import Operation

history = [
    Operation(KvInput(1, "x", "a"), 0, KvOutput(), 10),
    Operation(KvInput(0, "x"), 20, KvOutput("a"), 30),
]
assert check_operations(KV_MODEL, history)
```

### `kvlab.models`: a key/value model

`KvInput` uses these `op` codes:

- 0: get
- 1: put
- 2: append
- 3: append that returns the old value

`KvOutput` carries the value. The functions `kv_partition`, `kv_init`,
`kv_step` and `kv_describe_operation` split histories by key and model the
value of a single key. They are combined in `KV_MODEL`.

### `kvlab.labgob`: value serialization

`dumps` and `loads` convert values to and from bytes. Supported values:

- `None`, bool, int, float, str and bytes
- lists, tuples, sets, frozensets and dicts
- dataclasses and enums

`LabEncoder` and `LabDecoder` write and read length-prefixed values on a
binary stream. `decode` raises `EOFError` at the end of the stream.

Dataclasses and enums are registered under their qualified name the first
time they are encoded. You can also register them with `register`, or under
a chosen name with `register_name`.

Dataclass fields whose names start with an underscore are not sent, and a
warning is printed. `error_count()` returns how many such warnings have been
issued.

### Message types

- `kvlab.kvsrv.common`: `PutAppendArgs`, `PutAppendReply`, `GetArgs` and
  `GetReply` for a single-server key/value service.
- `kvlab.kvraft.common`: the same four message types for a replicated
  key/value service, plus the `Err` enum (`OK`, `NO_KEY`, `WRONG_LEADER`,
  `TIMEOUT`).

### `kvlab.mr`: MapReduce skeleton

- `kvlab.mr.rpc` defines `ExampleArgs`, `ExampleReply` and
  `coordinator_sock()`. The socket path is `/var/tmp/5840-mr-<uid>`.
- `kvlab.mr.coordinator.Coordinator` serves RPCs over that UNIX-domain
  socket. It answers `Coordinator.Example` with `x + 1`.
  - `make_coordinator(files, n_reduce)` creates a coordinator and starts it.
  - `done()` becomes true once `close()` has been called.
  - It can be used as a context manager.
- `kvlab.mr.worker` provides:
  - `KeyValue`;
  - `ihash(key)`, a 32-bit FNV-1a hash masked to 31 bits;
  - `call(rpcname, args)`, which raises `ConnectionError` if the coordinator
    is unreachable and `RuntimeError` if the call fails on its side;
  - `call_example()`.
- `kvlab.mr.sequential` provides `load_app(name)`, which accepts `wc` or a
  path such as `apps/wc.so`, and `run_sequential(map_func, reduce_func,
  filenames, output)`.

### `kvlab.mrapps`: applications

Each application exposes `map_func` and `reduce_func`.

- `wc`: word count.
- `indexer`: inverted index.
- `nocrash`: file metadata.
- `crash`: like `nocrash`, but a third of calls exit the process and another
  third stall for up to ten seconds.
- `early_exit`: sleeps three seconds for keys containing `sherlock` or `tom`.
- `jobcount`: writes marker files to count map invocations.
- `mtiming` and `rtiming`: use marker files and process ids to count workers
  running in parallel.

The last four write files in the current directory.

```python
from kvlab.mrapps import wc
from kvlab.mr.worker import ihash

pairs = wc.map_func("doc.txt", "the cat and the hat")
count = wc.reduce_func("the", ["1", "1"])   # "2"
bucket = ihash("hello") % 10
```

## Installing

```
pip install .
pip install ".[test]"   # to run the tests
pytest
```

## Command-line tools

Run an application sequentially over input files. The result goes to
`mr-out-0`, with one `key result` line per distinct key in sorted order:

```
kvlab-mrsequential wc pg-*.txt
```

Start a coordinator for a set of input files, with 10 reduce tasks:

```
kvlab-mrcoordinator pg-*.txt
```

## What the package does not do

- There is no simulated RPC network.
- There is no key/value server or client. `kvlab.kvsrv` and `kvlab.kvraft`
  contain only message types.
- There is no MapReduce worker loop. The coordinator does not assign map or
  reduce tasks and never finishes a job by itself. `kvlab-mrcoordinator`
  therefore runs until it is interrupted.