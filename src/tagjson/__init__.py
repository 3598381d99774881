"""
Minimal JSON decoder and encoder built around a tagged value tree.

Parses bytes pulled from a one-byte-pushback source into ``Value`` nodes and
writes those nodes back out as compact, single-line JSON text.
"""

import io
import logging
import math
import os
import time
from collections.abc import Callable
from collections.abc import ItemsView
from collections.abc import Iterable
from collections.abc import KeysView
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from enum import Enum
from typing import IO
from typing import Any
from typing import Final
from typing import TypeAlias

from ._byte_source import BufferSource
from ._byte_source import ByteSource
from ._byte_source import StreamSource
from ._byte_source import as_source
from ._errors import EndOfStreamError
from ._errors import ErrorKind
from ._errors import InvalidNumberError
from ._errors import JsonError
from ._errors import JsonSyntaxError
from ._errors import OutOfMemoryError

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

# Python-side payloads of the six value kinds
Payload = bool | float | bytes | list["Value"] | dict[bytes, "Value"] | None
Position: TypeAlias = tuple[int, int, int]

# Byte classes driving dispatch and the greedy token loops
WHITESPACE: Final = frozenset(b" \t\r\n")
BOOL_ALPHABET: Final = frozenset(b"truefals")
NULL_ALPHABET: Final = frozenset(b"nul")
NUMBER_START: Final = frozenset(b"0123456789-.e")
NUMBER_ALPHABET: Final = frozenset(b"0123456789-.eE+")

QUOTE: Final = ord('"')
BACKSLASH: Final = ord("\\")
COMMA: Final = ord(",")
COLON: Final = ord(":")

# Escapes decoded inside strings; any other escaped byte is kept verbatim
ESCAPE_MAP: Final = {
    ord("n"): ord("\n"),
    ord("r"): ord("\r"),
    ord("t"): ord("\t"),
    BACKSLASH: BACKSLASH,
    QUOTE: QUOTE,
}

# Flat per-node charge against an arena, on top of owned string bytes
NODE_SIZE: Final = 16
DEFAULT_MAX_DEPTH: Final = 256

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "TAGJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing and encoding."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0

    def record_call(self, duration_ns: int) -> None:
        """Records a function call with its duration."""
        self.call_count += 1
        self.total_time_ns += duration_ns


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str):
            self.func_name = func_name
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    ``lenient_object_separator`` accepts any byte other than ``}`` between
    object members, not only ``,``. ``max_depth`` bounds container nesting;
    None leaves it to the interpreter's recursion limit.
    """

    lenient_object_separator: bool = False
    max_depth: int | None = DEFAULT_MAX_DEPTH
    logger: logging.Logger | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.lenient_object_separator, bool):
            raise TypeError("lenient_object_separator must be a boolean")
        if self.max_depth is not None and (
            isinstance(self.max_depth, bool)
            or not isinstance(self.max_depth, int)
            or self.max_depth < 1
        ):
            raise ValueError("max_depth must be a positive integer or None")


@dataclass(frozen=True)
class EncodeConfig:
    """Configures serialization; non-finite numbers are written as-is by default."""

    allow_nan: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.allow_nan, bool):
            raise TypeError("allow_nan must be a boolean")


class Arena:
    """
    Accounts for the storage owned by the values of one parse.

    Every node charges a flat ``NODE_SIZE`` and strings and object keys add
    their byte length. Releasing a value refunds what it charged, so an
    arena returns to zero once every tree built against it is released.
    """

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must be a non-negative integer or None")
        self.limit = limit
        self.used = 0
        self.peak = 0

    def reserve(self, size: int) -> None:
        """Charges ``size`` bytes, failing when the limit would be exceeded."""
        if self.limit is not None and self.used + size > self.limit:
            logger.debug(
                "Arena limit reached: used=%d requested=%d limit=%d",
                self.used,
                size,
                self.limit,
            )
            raise OutOfMemoryError(f"Arena limit of {self.limit} bytes exceeded")
        self.used += size
        self.peak = max(self.peak, self.used)

    def refund(self, size: int) -> None:
        self.used = max(0, self.used - size)

    def reset(self) -> None:
        self.used = 0
        self.peak = 0


class ValueKind(Enum):
    """The six variants a JSON value can take."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _as_bytes(data: str | bytes | bytearray) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, bytes | bytearray):
        return bytes(data)
    msg = f"expected str or bytes, not {type(data).__name__}"
    raise TypeError(msg)


@dataclass
class Value:
    """
    Tagged JSON value owning its subtree.

    Object payloads are plain dicts keyed by bytes: insertion order is
    iteration order, and re-inserting a key replaces the value in place.
    Equality is structural over ``kind`` and ``payload``.
    """

    kind: ValueKind
    payload: Payload = None
    arena: Arena | None = field(default=None, compare=False, repr=False)

    @classmethod
    def _charged(
        cls, kind: ValueKind, payload: Payload, size: int, arena: Arena | None
    ) -> "Value":
        value = cls(kind, payload, arena)
        # Charge last: nothing may fail between the charge and the caller
        if arena is not None:
            arena.reserve(size)
        return value

    @classmethod
    def null(cls, arena: Arena | None = None) -> "Value":
        return cls._charged(ValueKind.NULL, None, NODE_SIZE, arena)

    @classmethod
    def boolean(cls, flag: bool, arena: Arena | None = None) -> "Value":
        return cls._charged(ValueKind.BOOL, bool(flag), NODE_SIZE, arena)

    @classmethod
    def number(cls, number: float, arena: Arena | None = None) -> "Value":
        return cls._charged(ValueKind.NUMBER, float(number), NODE_SIZE, arena)

    @classmethod
    def string(
        cls, data: str | bytes | bytearray, arena: Arena | None = None
    ) -> "Value":
        raw = _as_bytes(data)
        return cls._charged(ValueKind.STRING, raw, NODE_SIZE + len(raw), arena)

    @classmethod
    def array(
        cls, items: Iterable["Value"] = (), arena: Arena | None = None
    ) -> "Value":
        value = cls._charged(ValueKind.ARRAY, [], NODE_SIZE, arena)
        for item in items:
            value.append(item)
        return value

    @classmethod
    def object(
        cls,
        pairs: Mapping[Any, "Value"] | Iterable[tuple[Any, "Value"]] = (),
        arena: Arena | None = None,
    ) -> "Value":
        value = cls._charged(ValueKind.OBJECT, {}, NODE_SIZE, arena)
        items = pairs.items() if isinstance(pairs, Mapping) else pairs
        for key, child in items:
            value.put(key, child)
        return value

    @classmethod
    def from_python(cls, obj: Any, arena: Arena | None = None) -> "Value":  # noqa: PLR0911
        """Builds a value tree from plain Python data."""
        if isinstance(obj, Value):
            return obj
        if obj is None:
            return cls.null(arena)
        if isinstance(obj, bool):
            return cls.boolean(obj, arena)
        if isinstance(obj, int | float):
            return cls.number(obj, arena)
        if isinstance(obj, str | bytes | bytearray):
            return cls.string(obj, arena)
        if isinstance(obj, Mapping):
            return cls.object(
                ((key, cls.from_python(child, arena)) for key, child in obj.items()),
                arena,
            )
        if isinstance(obj, list | tuple):
            return cls.array((cls.from_python(item, arena) for item in obj), arena)

        msg = f"Object of type {type(obj).__name__} is not JSON serializable"
        raise TypeError(msg)

    def to_python(self, encoding: str = "utf-8") -> Any:
        """Converts the tree to dicts, lists, str, float, bool and None."""
        if self.kind is ValueKind.STRING:
            return self.payload.decode(encoding)  # type: ignore[union-attr]
        if self.kind is ValueKind.ARRAY:
            return [item.to_python(encoding) for item in self.payload]  # type: ignore[union-attr]
        if self.kind is ValueKind.OBJECT:
            return {
                key.decode(encoding): child.to_python(encoding)
                for key, child in self.payload.items()  # type: ignore[union-attr]
            }
        return self.payload

    def put(self, key: str | bytes, value: "Value") -> None:
        """
        Inserts a member into an object value.

        A new key is appended after the existing ones; an existing key keeps
        its position and only has its value replaced. The replaced value is
        released.
        """
        members = self._members()
        raw = _as_bytes(key)
        previous = members.get(raw)
        if previous is None:
            if self.arena is not None:
                self.arena.reserve(len(raw))
        elif previous is not value:
            previous.release()
        members[raw] = value

    def append(self, value: "Value") -> None:
        if self.kind is not ValueKind.ARRAY:
            msg = f"cannot append to a {self.kind.value} value"
            raise TypeError(msg)
        self.payload.append(value)  # type: ignore[union-attr]

    def release(self) -> None:
        """
        Recursively frees the subtree and refunds the owning arena.

        The value is left as a null node; releasing twice is a no-op.
        """
        size = NODE_SIZE
        if self.kind is ValueKind.STRING:
            size += len(self.payload)  # type: ignore[arg-type]
        elif self.kind is ValueKind.ARRAY:
            for item in self.payload:  # type: ignore[union-attr]
                item.release()
            self.payload.clear()  # type: ignore[union-attr]
        elif self.kind is ValueKind.OBJECT:
            for key, child in self.payload.items():  # type: ignore[union-attr]
                size += len(key)
                child.release()
            self.payload.clear()  # type: ignore[union-attr]

        if self.arena is not None:
            self.arena.refund(size)
            self.arena = None
        self.kind = ValueKind.NULL
        self.payload = None

    def _members(self) -> dict[bytes, "Value"]:
        if self.kind is not ValueKind.OBJECT:
            msg = f"a {self.kind.value} value has no members"
            raise TypeError(msg)
        return self.payload  # type: ignore[return-value]

    def keys(self) -> KeysView[bytes]:
        return self._members().keys()

    def items(self) -> ItemsView[bytes, "Value"]:
        return self._members().items()

    @property
    def is_null(self) -> bool:
        return self.kind is ValueKind.NULL

    def __len__(self) -> int:
        if self.kind in (ValueKind.STRING, ValueKind.ARRAY, ValueKind.OBJECT):
            return len(self.payload)  # type: ignore[arg-type]
        msg = f"a {self.kind.value} value has no length"
        raise TypeError(msg)

    def __getitem__(self, index: int | str | bytes) -> "Value":
        if self.kind is ValueKind.ARRAY and isinstance(index, int):
            return self.payload[index]  # type: ignore[index]
        if self.kind is ValueKind.OBJECT and isinstance(index, str | bytes):
            return self._members()[_as_bytes(index)]
        kind = type(index).__name__
        msg = f"cannot index a {self.kind.value} value with {kind}"
        raise TypeError(msg)


class Parser:
    """
    Recursive-descent parser over a byte source.

    Peeks one byte to pick a production, then lets the matching sub-parser
    consume the token. Containers release themselves when a nested parse
    fails with any exception, so a failure deep in the tree leaves nothing
    charged.
    """

    def __init__(
        self,
        source: ByteSource,
        arena: Arena | None = None,
        config: ParseConfig | None = None,
    ):
        self.source = source
        self.arena = arena
        self.config = config or ParseConfig()
        self.logger = self.config.logger or logger
        self.depth = 0
        # Containers still being filled, outermost first
        self._open: list[Value] = []

    def _mark(self) -> Position:
        return (self.source.pos, self.source.lineno, self.source.colno)

    def _error(
        self, error_type: type[JsonError], msg: str, at: Position | None = None
    ) -> JsonError:
        pos, lineno, colno = at or self._mark()
        return error_type(msg, pos, lineno, colno)

    def _allocate(self, build: Callable[..., Any], *args: Any) -> Any:
        """Runs an arena-charging call, re-raising failures with a position."""
        try:
            return build(*args)
        except OutOfMemoryError as exc:
            raise self._error(OutOfMemoryError, exc.msg) from None

    def _enter(self) -> None:
        self.depth += 1
        if self.config.max_depth is not None and self.depth > self.config.max_depth:
            raise self._error(JsonSyntaxError, "Maximum nesting depth exceeded")

    def parse_root(self) -> Value:
        """
        Parses one top-level value.

        Containers release themselves as a failure unwinds. A release that
        itself fails near the recursion limit is retried here, once the
        stack is shallow again.
        """
        try:
            return self.parse_value()
        except BaseException:
            while self._open:
                self._open.pop().release()
            raise

    def skip_whitespace(self) -> None:
        """Discards whitespace, leaving the next other byte unread."""
        with ProfileContext("skip_whitespace"):
            while (byte := self.source.peek()) is not None and byte in WHITESPACE:
                self.source.read_byte()

    def _take_run(self, alphabet: frozenset[int]) -> bytes:
        """Greedily consumes the longest run of bytes drawn from alphabet."""
        run = bytearray()
        while (byte := self.source.peek()) is not None and byte in alphabet:
            run.append(self.source.read_byte())
        return bytes(run)

    def parse_value(self) -> Value:
        """Parses any JSON value, dispatching on its first byte."""
        self.skip_whitespace()
        byte = self.source.peek()

        if byte is None:
            raise self._error(EndOfStreamError, "Expecting value")
        if byte == ord("{"):
            return self.parse_object()
        if byte == ord("["):
            return self.parse_array()
        if byte == QUOTE:
            return self._allocate(Value.string, self.parse_string(), self.arena)
        if byte in (ord("t"), ord("f")):
            return self._allocate(Value.boolean, self.parse_bool(), self.arena)
        if byte == ord("n"):
            self.parse_null()
            return self._allocate(Value.null, self.arena)
        if byte in NUMBER_START:
            return self._allocate(Value.number, self.parse_number(), self.arena)

        raise self._error(JsonSyntaxError, "Expecting value")

    def _expect(self, expected: int, msg: str) -> None:
        at = self._mark()
        if self.source.read_byte() != expected:
            raise self._error(JsonSyntaxError, msg, at)

    def parse_object(self) -> Value:
        """Parses an object; duplicate keys keep their first position."""
        with ProfileContext("parse_object"):
            self._expect(ord("{"), "Expecting '{'")
            self._enter()
            obj = self._allocate(Value.object, (), self.arena)
            self._open.append(obj)
            try:
                self.skip_whitespace()
                if self.source.peek() == ord("}"):
                    self.source.read_byte()
                else:
                    self._parse_members(obj)
            except BaseException:
                obj.release()
                raise
            self._open.pop()
            self.depth -= 1
            return obj

    def _parse_members(self, obj: Value) -> None:
        while True:
            self.skip_whitespace()
            if self.source.peek() not in (QUOTE, None):
                raise self._error(
                    JsonSyntaxError,
                    "Expecting property name enclosed in double quotes",
                )
            key = self.parse_string()
            self.skip_whitespace()
            self._expect(COLON, "Expecting ':' delimiter")
            self.skip_whitespace()

            value = self.parse_value()
            try:
                self._allocate(obj.put, key, value)
            except BaseException:
                value.release()
                raise

            self.skip_whitespace()
            at = self._mark()
            byte = self.source.read_byte()
            if byte == ord("}"):
                return
            if byte != COMMA and not self.config.lenient_object_separator:
                raise self._error(JsonSyntaxError, "Expecting ',' delimiter", at)

    def parse_array(self) -> Value:
        """Parses an array of comma-separated values."""
        with ProfileContext("parse_array"):
            self._expect(ord("["), "Expecting '['")
            self._enter()
            arr = self._allocate(Value.array, (), self.arena)
            self._open.append(arr)
            try:
                self.skip_whitespace()
                if self.source.peek() == ord("]"):
                    self.source.read_byte()
                else:
                    self._parse_items(arr)
            except BaseException:
                arr.release()
                raise
            self._open.pop()
            self.depth -= 1
            return arr

    def _parse_items(self, arr: Value) -> None:
        while True:
            self.skip_whitespace()
            arr.append(self.parse_value())

            self.skip_whitespace()
            at = self._mark()
            byte = self.source.read_byte()
            if byte == ord("]"):
                return
            if byte != COMMA:
                raise self._error(JsonSyntaxError, "Expecting ',' delimiter", at)

    def parse_string(self) -> bytes:
        """
        Parses a quoted string and returns its decoded bytes.

        Recognized escapes are ``\\\\``, ``\\"``, ``\\n``, ``\\r`` and
        ``\\t``; for any other escaped byte the backslash is dropped.
        """
        with ProfileContext("parse_string"):
            start = self._mark()
            self._expect(QUOTE, "Expecting '\"'")

            out = bytearray()
            try:
                while (byte := self.source.read_byte()) != QUOTE:
                    if byte == BACKSLASH:
                        escaped = self.source.read_byte()
                        byte = ESCAPE_MAP.get(escaped, escaped)
                    out.append(byte)
            except EndOfStreamError:
                raise self._error(
                    EndOfStreamError, "Unterminated string starting at", start
                ) from None
            return bytes(out)

    def parse_bool(self) -> bool:
        with ProfileContext("parse_literal"):
            start = self._mark()
            token = self._take_run(BOOL_ALPHABET)
            if token == b"true":
                return True
            if token == b"false":
                return False
            raise self._error(JsonSyntaxError, "Invalid literal", start)

    def parse_null(self) -> None:
        with ProfileContext("parse_literal"):
            start = self._mark()
            if self._take_run(NULL_ALPHABET) != b"null":
                raise self._error(JsonSyntaxError, "Invalid literal", start)

    def parse_number(self) -> float:
        """Parses the longest numeric run as a double."""
        with ProfileContext("parse_number"):
            start = self._mark()
            token = self._take_run(NUMBER_ALPHABET)
            try:
                return float(token.decode("ascii"))
            except ValueError as e:
                raise self._error(InvalidNumberError, "Invalid number", start) from e


def parse(
    source: Any, arena: Arena | None = None, config: ParseConfig | None = None
) -> Value:
    """
    Reads exactly one JSON value from a byte source.

    Bytes after the value are left unconsumed. ``source`` may also be raw
    bytes, a str, or a readable stream, which are wrapped as needed.

    A wrapped stream is read ahead in chunks, so bytes following the value
    are only reachable through the same source. To read several values
    from one stream, wrap it once in a ``StreamSource`` and pass that
    source to every call.
    """
    parser = Parser(as_source(source), arena, config)
    try:
        return parser.parse_root()
    except JsonError as exc:
        parser.logger.debug("Parse failed (%s): %s", exc.kind.value, exc)
        raise


def _parse_document(
    source: ByteSource, config: ParseConfig, arena: Arena | None
) -> Value:
    """Parses a value that must be followed only by whitespace."""
    parser = Parser(source, arena, config)
    try:
        result = parser.parse_root()
        try:
            parser.skip_whitespace()
            if source.peek() is not None:
                raise parser._error(JsonSyntaxError, "Extra data")
        except BaseException:
            result.release()
            raise
    except JsonError as exc:
        parser.logger.debug("Parse failed (%s): %s", exc.kind.value, exc)
        raise
    return result


def loads(
    data: str | bytes | bytearray, arena: Arena | None = None, **kwargs: Any
) -> Value:
    """
    Parses a complete JSON document held in memory.

    Unlike ``parse``, anything other than whitespace after the value is
    rejected as extra data.
    """
    if not isinstance(data, str | bytes | bytearray):
        msg = f"the JSON object must be str or bytes, not {type(data).__name__}"
        raise TypeError(msg)

    config = ParseConfig(**kwargs)
    return _parse_document(as_source(data), config, arena)


def load(fp: IO[Any], arena: Arena | None = None, **kwargs: Any) -> Value:
    """
    Parses a complete JSON document from a file-like object in chunks.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    config = ParseConfig(**kwargs)
    return _parse_document(StreamSource(fp), config, arena)


def _encode_string(data: bytes) -> bytes:
    """Quotes a byte string; tabs and other control bytes pass through raw."""
    escaped = (
        data.replace(b"\\", b"\\\\")
        .replace(b'"', b'\\"')
        .replace(b"\n", b"\\n")
        .replace(b"\r", b"\\r")
    )
    return b'"' + escaped + b'"'


def _encode_number(number: float, config: EncodeConfig) -> bytes:
    if not math.isfinite(number) and not config.allow_nan:
        msg = "Out of range float values are not JSON compliant"
        raise ValueError(msg)
    return repr(number).encode("ascii")


def _write_value(value: Value, w: IO[bytes], config: EncodeConfig) -> None:
    kind = value.kind
    if kind is ValueKind.NULL:
        w.write(b"null")
    elif kind is ValueKind.BOOL:
        w.write(b"true" if value.payload else b"false")
    elif kind is ValueKind.NUMBER:
        w.write(_encode_number(value.payload, config))  # type: ignore[arg-type]
    elif kind is ValueKind.STRING:
        w.write(_encode_string(value.payload))  # type: ignore[arg-type]
    elif kind is ValueKind.ARRAY:
        w.write(b"[")
        for i, item in enumerate(value.payload):  # type: ignore[arg-type]
            if i > 0:
                w.write(b",")
            _write_value(item, w, config)
        w.write(b"]")
    else:
        w.write(b"{")
        for i, (key, child) in enumerate(value.payload.items()):  # type: ignore[union-attr]
            if i > 0:
                w.write(b",")
            w.write(_encode_string(key))
            w.write(b":")
            _write_value(child, w, config)
        w.write(b"}")


def stringify(
    value: Value, writer: IO[bytes], config: EncodeConfig | None = None
) -> None:
    """
    Writes compact JSON text for a value to a byte sink.

    No whitespace is emitted. Errors raised by ``writer`` propagate as-is.
    """
    if not isinstance(value, Value):
        msg = f"expected a Value, not {type(value).__name__}"
        raise TypeError(msg)

    with ProfileContext("stringify"):
        _write_value(value, writer, config or EncodeConfig())


def dumps(value: Value | Any, **kwargs: Any) -> bytes:
    """
    Serializes a value, or plain Python data, to JSON bytes.
    """
    config = EncodeConfig(**kwargs)
    buffer = io.BytesIO()
    stringify(Value.from_python(value), buffer, config)
    return buffer.getvalue()


def dump(value: Value | Any, fp: IO[bytes], **kwargs: Any) -> None:
    """
    Serializes a value to a binary file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    config = EncodeConfig(**kwargs)
    stringify(Value.from_python(value), fp, config)


__all__ = [
    "Arena",
    "BufferSource",
    "ByteSource",
    "EncodeConfig",
    "EndOfStreamError",
    "ErrorKind",
    "HotPathStats",
    "InvalidNumberError",
    "JsonError",
    "JsonSyntaxError",
    "OutOfMemoryError",
    "ParseConfig",
    "Parser",
    "StreamSource",
    "Value",
    "ValueKind",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "loads",
    "parse",
    "stringify",
]
