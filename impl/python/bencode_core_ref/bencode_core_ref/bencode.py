
import io
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import List, Optional, Union

TOKEN_INT   = ord("i")
TOKEN_LIST  = ord("l")
TOKEN_DICT  = ord("d")
TOKEN_END   = ord("e")
TOKEN_COLON = ord(":")

_STREAM_CHUNK = 64 * 1024
_MAX_LENGTH_DIGITS = len(str(sys.maxsize))

class Error(Exception):
    """Base class for decode failures; args[0] is the source offset."""

    @property
    def offset(self) -> Optional[int]:
        return self.args[0] if self.args else None

class Truncated(Error): pass
class InvalidCharacter(Error): pass
class InvalidLength(Error): pass
class OutOfOrderKey(Error): pass

# ---- Value model ----
@dataclass
class Integer:
    raw: bytes

    def __post_init__(self):
        self.raw = bytes(self.raw)
        if not all(_is_digit(c) for c in self.raw):
            raise ValueError(f"integer payload must be ASCII digits: {self.raw!r}")

    @classmethod
    def from_int(cls, n: int) -> "Integer":
        if n < 0:
            raise ValueError("negative integers are not representable")
        return cls(str(n).encode("ascii"))

    def __int__(self) -> int:
        return int(self.raw)

@dataclass
class Bytes:
    data: bytes

    def __post_init__(self):
        self.data = bytes(self.data)

@dataclass
class Array:
    items: list

class Object(Mapping):
    """Read-only bytes-keyed mapping that always iterates in ascending key order."""

    __slots__ = ("_entries", "_keys")

    def __init__(self, entries=()):
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        self._entries = {}
        for key, value in pairs:
            if not isinstance(key, (bytes, bytearray, memoryview)):
                raise TypeError(f"object keys must be bytes, not {type(key).__name__}")
            self._entries[bytes(key)] = value
        self._keys = sorted(self._entries)

    def __getitem__(self, key):
        return self._entries[key]

    def __iter__(self):
        return iter(self._keys)

    def __len__(self):
        return len(self._keys)

    def __eq__(self, other):
        if not isinstance(other, Object):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None

    def __repr__(self):
        inner = ", ".join(f"{k!r}: {self._entries[k]!r}" for k in self._keys)
        return f"Object({{{inner}}})"

Value = Union[Integer, Bytes, Array, Object]

# ---- Byte source ----
class ByteSource:
    """Forward-only cursor with one byte of lookahead.

    Wraps an in-memory buffer or a blocking binary stream (anything with
    ``read(n)``). ``peek`` and ``next`` return the byte as an int, or None at
    end of input.
    """

    def __init__(self, data):
        if isinstance(data, (bytes, bytearray, memoryview)):
            self._buf = bytes(data)
            self._stream = None
        else:
            self._buf = None
            self._stream = data
        self._pending = None
        self._eof = False
        self.position = 0

    def peek(self) -> Optional[int]:
        if self._buf is not None:
            if self.position < len(self._buf):
                return self._buf[self.position]
            return None
        if self._pending is None and not self._eof:
            b = self._stream.read(1)
            if b:
                self._pending = b[0]
            else:
                self._eof = True
        return self._pending

    def next(self) -> Optional[int]:
        c = self.peek()
        if c is not None:
            self._pending = None
            self.position += 1
        return c

    def read(self, n: int) -> bytes:
        """Consume up to n bytes; fewer are returned only at end of input."""
        if self._buf is not None:
            chunk = self._buf[self.position:self.position + n]
            self.position += len(chunk)
            return chunk
        out = bytearray()
        if n > 0 and self.peek() is not None:
            out.append(self.next())
        while len(out) < n and not self._eof:
            chunk = self._stream.read(min(n - len(out), _STREAM_CHUNK))
            if not chunk:
                self._eof = True
                break
            out += chunk
            self.position += len(chunk)
        return bytes(out)

# ---- Decoder ----
def _is_digit(c: int) -> bool:
    return 0x30 <= c <= 0x39

def _expect(src: ByteSource, token: int):
    off = src.position
    c = src.next()
    if c is None:
        raise Truncated(off)
    if c != token:
        raise InvalidCharacter(off)

def _extract_digits(src: ByteSource) -> bytes:
    run = bytearray()
    while True:
        c = src.peek()
        if c is None:
            raise Truncated(src.position)
        if not _is_digit(c):
            return bytes(run)
        run.append(src.next())

def _decode_integer(src: ByteSource) -> Integer:
    _expect(src, TOKEN_INT)
    raw = _extract_digits(src)
    _expect(src, TOKEN_END)
    return Integer(raw)

def _decode_bytestring(src: ByteSource) -> bytes:
    start = src.position
    run = _extract_digits(src)
    if not run:
        raise InvalidLength(start)
    # length must fit a Py_ssize_t
    if len(run.lstrip(b"0")) > _MAX_LENGTH_DIGITS:
        raise InvalidLength(start)
    length = int(run)
    if length > sys.maxsize:
        raise InvalidLength(start)
    _expect(src, TOKEN_COLON)
    data = src.read(length)
    if len(data) != length:
        raise Truncated(src.position)
    return data

def _decode_list(src: ByteSource) -> Array:
    _expect(src, TOKEN_LIST)
    items: List[Value] = []
    while True:
        c = src.peek()
        if c is None:
            raise Truncated(src.position)
        if c == TOKEN_END:
            src.next()
            return Array(items)
        items.append(decode_from(src))

def _decode_dict(src: ByteSource) -> Object:
    _expect(src, TOKEN_DICT)
    entries = {}
    prev_key = b""
    while True:
        c = src.peek()
        if c is None:
            raise Truncated(src.position)
        if c == TOKEN_END:
            src.next()
            return Object(entries)
        start = src.position
        key = _decode_bytestring(src)
        # equal keys pass; the later value replaces the earlier one
        if key < prev_key:
            raise OutOfOrderKey(start)
        prev_key = key
        entries[key] = decode_from(src)

def decode_from(src: ByteSource) -> Value:
    """Parse one value, leaving src positioned just past it."""
    c = src.peek()
    if c is None:
        raise Truncated(src.position)
    if c == TOKEN_INT:
        return _decode_integer(src)
    if c == TOKEN_LIST:
        return _decode_list(src)
    if c == TOKEN_DICT:
        return _decode_dict(src)
    if _is_digit(c):
        return Bytes(_decode_bytestring(src))
    raise InvalidCharacter(src.position)

def decode(data) -> Value:
    src = data if isinstance(data, ByteSource) else ByteSource(data)
    return decode_from(src)

# ---- Encoder ----
def _encode_bytestring(data: bytes, sink):
    sink.write(str(len(data)).encode("ascii") + b":")
    sink.write(data)

def encode_to(value: Value, sink):
    if isinstance(value, Integer):
        sink.write(b"i")
        sink.write(value.raw)
        sink.write(b"e")
    elif isinstance(value, Bytes):
        _encode_bytestring(value.data, sink)
    elif isinstance(value, Array):
        sink.write(b"l")
        for item in value.items:
            encode_to(item, sink)
        sink.write(b"e")
    elif isinstance(value, Object):
        sink.write(b"d")
        for key, item in value.items():
            _encode_bytestring(key, sink)
            encode_to(item, sink)
        sink.write(b"e")
    else:
        raise TypeError(f"unsupported type: {type(value)}")

def encode(value: Value) -> bytes:
    out = io.BytesIO()
    encode_to(value, out)
    return out.getvalue()
