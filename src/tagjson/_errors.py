"""Error kinds raised while decoding and encoding JSON values."""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure categories a parse can end with."""

    SYNTAX = "syntax"
    END_OF_STREAM = "end_of_stream"
    OUT_OF_MEMORY = "out_of_memory"
    INVALID_NUMBER = "invalid_number"


class JsonError(ValueError):
    """
    Handles JSON parsing failures with precise position information.

    Carries the byte offset plus line/column numbers of the point where the
    parser gave up, so callers can report the failure without re-scanning
    the input.
    """

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(
        self, msg: str, pos: int = 0, lineno: int = 1, colno: int | None = None
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.pos = pos
        self.lineno = lineno
        self.colno = colno if colno is not None else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


class JsonSyntaxError(JsonError):
    """A token does not match the grammar production being parsed."""

    kind = ErrorKind.SYNTAX


class EndOfStreamError(JsonError):
    """Input ran out in the middle of a token or structure."""

    kind = ErrorKind.END_OF_STREAM


class OutOfMemoryError(JsonError):
    """The arena could not satisfy an allocation."""

    kind = ErrorKind.OUT_OF_MEMORY


class InvalidNumberError(JsonError):
    """Accumulated numeral text is not a valid float."""

    kind = ErrorKind.INVALID_NUMBER
