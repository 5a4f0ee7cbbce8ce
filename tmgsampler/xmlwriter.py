"""A small streaming XML writer driven by tag, attribute and character-data calls."""

from __future__ import annotations

import enum
from typing import Any, TextIO

VERSION_MAJOR = 1
VERSION_MINOR = 0


class _State(enum.Enum):
    NONE = enum.auto()
    TAG = enum.auto()
    ATTRIBUTE = enum.auto()


def _format(value: Any) -> str:
    """Render a value the way a default-precision text stream would."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


class XmlStream:
    """Writes indented XML to a text stream.

    Each call returns the stream itself so calls can be chained::

        xml.tag("Node").attr("x").write(1).endtag("Node")

    After ``attr(name)`` the next written value becomes the attribute's
    value. After ``chardata()`` written values become the contents of the
    current element.
    """

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._state = _State.NONE
        self._tags: list[str] = []
        self._prolog_written = False

    def prolog(self) -> XmlStream:
        """Write the XML declaration, once, and only before any tag."""
        if not self._prolog_written and self._state is _State.NONE:
            self.stream.write(f'<?xml version="{VERSION_MAJOR}.{VERSION_MINOR}"?>\n')
            self._prolog_written = True
        return self

    def tag(self, name: str) -> XmlStream:
        """Open a new element nested in the current one."""
        self._close_tag_start()
        self.stream.write("  " * len(self._tags))
        self.stream.write(f"<{name}")
        self._tags.append(name)
        self._state = _State.TAG
        return self

    def endtag(self, name: str) -> XmlStream:
        """Close open elements up to and including the one called ``name``.

        An empty name closes only the innermost open element.
        """
        self._end_tag(name)
        return self

    def attr(self, name: str) -> XmlStream:
        """Start an attribute; the next written value is its value."""
        if self._state is _State.ATTRIBUTE:
            self.stream.write('"')
        if self._state is not _State.NONE:
            self.stream.write(f' {name}="')
            self._state = _State.ATTRIBUTE
        return self

    def chardata(self) -> XmlStream:
        """Switch to writing the contents of the current element."""
        self._close_tag_start()
        self._state = _State.NONE
        return self

    def write(self, value: Any) -> XmlStream:
        """Write a value to the underlying stream."""
        self.stream.write(_format(value))
        return self

    def close(self) -> None:
        """Close every element still open. The underlying stream stays open."""
        while self._tags:
            self._end_tag(self._tags[-1])

    def __enter__(self) -> XmlStream:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _close_tag_start(self, self_closed: bool = False) -> None:
        if self._state is _State.ATTRIBUTE:
            self.stream.write('"')
        if self._state in (_State.ATTRIBUTE, _State.TAG):
            if self_closed:
                self.stream.write("/")
            self.stream.write(">\n")

    def _end_tag(self, name: str) -> None:
        done = False
        while self._tags and not done:
            top = self._tags[-1]
            if self._state is _State.NONE:
                self.stream.write("  " * (len(self._tags) - 1))
                self.stream.write(f"</{top}>\n")
            else:
                self._close_tag_start(self_closed=True)
                self._state = _State.NONE
            done = not name or name == top
            self._tags.pop()