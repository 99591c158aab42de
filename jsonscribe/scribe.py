"""
JSON Scribe - The streaming writing engine.

The scribe owns the sink and a stack of open contexts. Each primitive
writes its characters straight to the sink; the stack only records what
separator or closing delimiter is owed next. Nothing is buffered.
"""

import logging
from typing import List, Optional

from .errors import StructuralMisuseError
from .escape import escape
from .frames import ContextFrame, FrameKind

logger = logging.getLogger(__name__)


class JsonScribe:
    """
    Write JSON text incrementally to a sink.

    The sink only needs a write(str) method. The scribe never flushes or
    closes it.

    Only end_current() defends against misuse. Writing a key where a value
    is due (or the reverse) is not detected and produces invalid output;
    the builder handles in jsonscribe.nodes are shaped so that cannot
    happen through them.
    """

    def __init__(self, sink, *, ensure_ascii: bool = False):
        self._sink = sink
        self._ensure_ascii = ensure_ascii
        self._stack: List[ContextFrame] = []
        self._cursor: int = 0

    @property
    def sink(self):
        """The sink characters are written to."""
        return self._sink

    @property
    def ensure_ascii(self) -> bool:
        return self._ensure_ascii

    @property
    def cursor(self) -> int:
        """Current nesting depth; always equal to the number of open frames."""
        return self._cursor

    @property
    def top(self) -> Optional[ContextFrame]:
        """The innermost open frame, or None at top level."""
        return self._stack[-1] if self._stack else None

    def in_array(self) -> bool:
        return bool(self._stack) and self._stack[-1].kind is FrameKind.ARRAY

    def in_object(self) -> bool:
        return bool(self._stack) and self._stack[-1].kind is FrameKind.OBJECT

    def in_string_value(self) -> bool:
        return bool(self._stack) and self._stack[-1].kind is FrameKind.STRING_VALUE

    # ========================================================================
    # SEPARATORS
    # ========================================================================

    def _write_value_separator(self) -> None:
        """Write whatever must precede a value in the current frame."""
        if not self._stack:
            return
        frame = self._stack[-1]
        if frame.kind is FrameKind.ARRAY:
            if frame.has_emitted_first_child:
                self._sink.write(',')
            frame.has_emitted_first_child = True
        elif frame.kind is FrameKind.OBJECT:
            # The key already wrote the colon.
            frame.awaiting_key = True

    def _push(self, kind: FrameKind, opener: str) -> None:
        self._write_value_separator()
        self._sink.write(opener)
        self._stack.append(ContextFrame(kind))
        self._cursor += 1

    # ========================================================================
    # PRIMITIVES
    # ========================================================================

    def begin_array(self) -> None:
        """Open an array in value position."""
        self._push(FrameKind.ARRAY, '[')

    def begin_object(self) -> None:
        """Open an object in value position."""
        self._push(FrameKind.OBJECT, '{')

    def begin_string_value(self, prefix: Optional[str] = None) -> None:
        """
        Open a string literal in value position.

        Args:
            prefix: Optional first characters of the string, escaped.
        """
        self._push(FrameKind.STRING_VALUE, '"')
        if prefix is not None:
            self._sink.write(escape(prefix, self._ensure_ascii))

    def append_to_string_value(self, text: str) -> None:
        """Write escaped characters into the open string literal."""
        self._sink.write(escape(text, self._ensure_ascii))

    def write_key(self, key: str) -> None:
        """Write an object member name and its colon."""
        frame = self._stack[-1]
        if frame.has_emitted_first_child:
            self._sink.write(',')
        self._sink.write('"' + escape(key, self._ensure_ascii) + '":')
        frame.has_emitted_first_child = True
        frame.awaiting_key = False

    def write_value_literal(self, token: str) -> None:
        """Write a pre-rendered literal (null, true, false, a number) verbatim."""
        self._write_value_separator()
        self._sink.write(token)

    def end_current(self, expected_cursor: Optional[int] = None) -> None:
        """
        Close the innermost open construct.

        Args:
            expected_cursor: Depth the caller believes it is closing at. When
                given and different from the cursor, nothing is written.

        Raises:
            StructuralMisuseError: If nothing is open or the depth is wrong.
        """
        if not self._stack:
            logger.debug("end_current with no open context (expected %s)", expected_cursor)
            raise StructuralMisuseError("no open context", cursor=self._cursor,
                                        expected=expected_cursor)
        if expected_cursor is not None and expected_cursor != self._cursor:
            logger.debug("end_current at depth %d, handle expected %d",
                         self._cursor, expected_cursor)
            raise StructuralMisuseError(
                f"closing at depth {expected_cursor} but the innermost open "
                f"construct is at depth {self._cursor}",
                cursor=self._cursor, expected=expected_cursor)

        frame = self._stack[-1]
        self._sink.write(frame.closer)
        self._stack.pop()
        self._cursor -= 1

        if self._stack:
            self._stack[-1].has_emitted_first_child = True
        else:
            logger.debug("outermost %s closed", frame.kind.name.lower())

    def __repr__(self) -> str:
        kinds = ', '.join(frame.kind.name for frame in self._stack)
        return f"JsonScribe(cursor={self._cursor}, stack=[{kinds}])"


class ClosedScribe:
    """
    Stand-in scribe for handles that have already been closed.

    Every primitive raises, so a stale handle fails on first use instead of
    writing into whatever construct is open now.
    """

    def __init__(self, cursor: int):
        self.cursor = cursor

    def _closed(self, *args, **kwargs):
        logger.debug("write through a closed handle (depth %d)", self.cursor)
        raise StructuralMisuseError("handle is already closed", expected=self.cursor)

    begin_array = _closed
    begin_object = _closed
    begin_string_value = _closed
    append_to_string_value = _closed
    write_key = _closed
    write_value_literal = _closed
    end_current = _closed

    def __repr__(self) -> str:
        return f"ClosedScribe(cursor={self.cursor})"
