"""Plain text serialisation of render settings as '|'-separated fields."""

from __future__ import annotations

from .colour import Colour

VERSION = 1
MAIN_SEPARATOR = "|"
AUX_SEPARATOR = "§"


class SerializationError(RuntimeError):
    """Raised on writing to a reader, reading from a writer or reading bad data."""


class Serializer:
    """Writes values when built without a stream, reads them back from one."""

    def __init__(self, stream: str | None = None) -> None:
        self._storing = stream is None
        self._stream = "" if stream is None else stream
        tokens = self._stream.split(MAIN_SEPARATOR) if self._stream else []
        if tokens and tokens[-1] == "":
            tokens.pop()
        self._tokens = iter(tokens)

    def is_storing(self) -> bool:
        return self._storing

    def getvalue(self) -> str:
        """Return the serialised text."""
        return self._stream

    def write(self, value: bool | int | str | Colour) -> Serializer:
        """Append one value followed by the separator."""
        if not self._storing:
            raise SerializationError("serializer is in reading mode")
        if isinstance(value, bool):
            text = str(int(value))
        elif isinstance(value, int):
            text = str(value)
        elif isinstance(value, str):
            text = value
        elif isinstance(value, Colour):
            text = value.to_css()
        else:
            raise TypeError(f"cannot serialise {type(value).__name__}")
        self._stream += text + MAIN_SEPARATOR
        return self

    def _next_token(self) -> str:
        if self._storing:
            raise SerializationError("serializer is in writing mode")
        if not self._stream:
            raise SerializationError("nothing to read, stream empty")
        try:
            return next(self._tokens)
        except StopIteration:
            raise SerializationError("no more fields to read") from None

    def read_str(self) -> str:
        return self._next_token()

    def read_int(self) -> int:
        token = self._next_token()
        try:
            return int(token.strip())
        except ValueError:
            raise SerializationError(f"not an integer: {token!r}") from None

    def read_bool(self) -> bool:
        return self.read_int() > 0

    def read_colour(self) -> Colour | None:
        """Read a colour; None when the field holds no valid colour."""
        token = self._next_token()
        try:
            return Colour.from_string(token)
        except ValueError:
            return None