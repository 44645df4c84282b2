"""Serialization of values sent over RPC or stored in snapshots.

Values are encoded to a self-describing byte form. Dataclasses and enums are
identified by a registered name; classes are registered automatically the
first time they are encoded. Dataclass fields whose names start with an
underscore are private: a warning is printed and they are not sent.
"""

from __future__ import annotations

import base64
import dataclasses
import enum
import json
import struct
import threading
from typing import Any, BinaryIO, Dict, Set

_lock = threading.Lock()
_errors = 0
_checked: Set[type] = set()
_classes_by_name: Dict[str, type] = {}
_names_by_class: Dict[type, str] = {}

_HEADER = struct.Struct(">I")


def error_count() -> int:
    """Return how many warnings about private fields have been issued."""
    with _lock:
        return _errors


def _check_type(cls: type) -> None:
    global _errors
    with _lock:
        if cls in _checked:
            return
        _checked.add(cls)
    if dataclasses.is_dataclass(cls):
        for field in dataclasses.fields(cls):
            if field.name.startswith("_"):
                print(
                    f"labgob error: private field {field.name} of {cls.__name__} "
                    "in RPC or persist/snapshot will break your Raft"
                )
                with _lock:
                    _errors += 1


def _register(cls: type, name: str) -> None:
    with _lock:
        existing = _classes_by_name.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(f"labgob: registering duplicate types for name {name!r}")
        current = _names_by_class.get(cls)
        if current is not None and current != name:
            raise ValueError(
                f"labgob: registering duplicate names for {cls.__name__}: {current!r} != {name!r}"
            )
        _classes_by_name[name] = cls
        _names_by_class[cls] = name


def _validate_class(cls: Any) -> None:
    if not isinstance(cls, type):
        raise TypeError(f"labgob: expected a class, got {cls!r}")
    if not (dataclasses.is_dataclass(cls) or issubclass(cls, enum.Enum)):
        raise TypeError(f"labgob: {cls.__name__} is neither a dataclass nor an enum")


def register(cls: type) -> None:
    """Register a dataclass or enum under its qualified name."""
    _validate_class(cls)
    _check_type(cls)
    _register(cls, f"{cls.__module__}.{cls.__qualname__}")


def register_name(name: str, cls: type) -> None:
    """Register a dataclass or enum under ``name``."""
    _validate_class(cls)
    _check_type(cls)
    _register(cls, name)


def _type_name(cls: type) -> str:
    _check_type(cls)
    with _lock:
        name = _names_by_class.get(cls)
    if name is None:
        name = f"{cls.__module__}.{cls.__qualname__}"
        _register(cls, name)
    return name


def _encode(value: Any) -> Any:
    if value is None:
        return ["n"]
    if isinstance(value, enum.Enum):
        return ["e", _type_name(type(value)), _encode(value.value)]
    if isinstance(value, bool):
        return ["b", value]
    if isinstance(value, int):
        return ["i", int(value)]
    if isinstance(value, float):
        return ["f", value]
    if isinstance(value, str):
        return ["s", str(value)]
    if isinstance(value, (bytes, bytearray)):
        return ["y", base64.b64encode(bytes(value)).decode("ascii")]
    if isinstance(value, list):
        return ["l", [_encode(item) for item in value]]
    if isinstance(value, tuple):
        return ["u", [_encode(item) for item in value]]
    if isinstance(value, frozenset):
        return ["z", [_encode(item) for item in value]]
    if isinstance(value, set):
        return ["t", [_encode(item) for item in value]]
    if isinstance(value, dict):
        return ["d", [[_encode(k), _encode(v)] for k, v in value.items()]]
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        name = _type_name(type(value))
        fields = {
            field.name: _encode(getattr(value, field.name))
            for field in dataclasses.fields(value)
            if not field.name.startswith("_")
        }
        return ["o", name, fields]
    raise TypeError(f"labgob: cannot encode value of type {type(value).__name__}")


def _build(cls: type, payload: Dict[str, Any]) -> Any:
    obj = object.__new__(cls)
    for field in dataclasses.fields(cls):
        if field.name in payload:
            value = _decode(payload[field.name])
        elif field.default is not dataclasses.MISSING:
            value = field.default
        elif field.default_factory is not dataclasses.MISSING:
            value = field.default_factory()
        else:
            value = None
        object.__setattr__(obj, field.name, value)
    return obj


def _lookup(name: str) -> type:
    with _lock:
        cls = _classes_by_name.get(name)
    if cls is None:
        raise ValueError(f"labgob: type not registered for name {name!r}")
    return cls


def _decode(node: Any) -> Any:
    if not isinstance(node, list) or not node:
        raise ValueError(f"labgob: malformed value {node!r}")
    tag = node[0]
    if tag == "n":
        return None
    if tag in ("b", "i", "f", "s"):
        return node[1]
    if tag == "y":
        return base64.b64decode(node[1])
    if tag == "l":
        return [_decode(item) for item in node[1]]
    if tag == "u":
        return tuple(_decode(item) for item in node[1])
    if tag == "z":
        return frozenset(_decode(item) for item in node[1])
    if tag == "t":
        return {_decode(item) for item in node[1]}
    if tag == "d":
        return {_decode(k): _decode(v) for k, v in node[1]}
    if tag == "e":
        return _lookup(node[1])(_decode(node[2]))
    if tag == "o":
        return _build(_lookup(node[1]), node[2])
    raise ValueError(f"labgob: unknown value tag {tag!r}")


def dumps(value: Any) -> bytes:
    """Encode ``value`` to bytes."""
    return json.dumps(_encode(value), separators=(",", ":")).encode("utf-8")


def loads(data: bytes) -> Any:
    """Decode a value produced by :func:`dumps`."""
    return _decode(json.loads(data))


class LabEncoder:
    """Writes length-prefixed encoded values to a binary stream."""

    def __init__(self, writer: BinaryIO) -> None:
        self._writer = writer

    def encode(self, value: Any) -> None:
        """Encode ``value`` and write it to the stream."""
        payload = dumps(value)
        self._writer.write(_HEADER.pack(len(payload)) + payload)


class LabDecoder:
    """Reads values written by :class:`LabEncoder` from a binary stream."""

    def __init__(self, reader: BinaryIO) -> None:
        self._reader = reader

    def _read(self, size: int) -> bytes:
        chunks = []
        remaining = size
        while remaining > 0:
            chunk = self._reader.read(remaining)
            if not chunk:
                break
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def decode(self) -> Any:
        """Read and return the next value; raise EOFError at end of stream."""
        header = self._read(_HEADER.size)
        if not header:
            raise EOFError("labgob: no more values")
        if len(header) < _HEADER.size:
            raise EOFError("labgob: truncated header")
        (length,) = _HEADER.unpack(header)
        body = self._read(length)
        if len(body) < length:
            raise EOFError("labgob: truncated value")
        return loads(body)