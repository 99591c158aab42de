"""
Builder Handles - Fluent, typed wrappers over a JsonScribe.

Each handle stands for one open construct. Its methods turn into one or two
scribe primitives and return the handle itself; its then() closes the
construct and returns whatever was given as the parent when it was opened.

A handle is single-use. After then(), its scribe is replaced by a
ClosedScribe, so any further call raises StructuralMisuseError. Calling
methods on a parent while one of its children is still open is caller error
and is not detected.
"""

from collections.abc import Mapping
from typing import Any, Generic, Iterable, Optional, TypeVar

from .literals import FALSE, NULL, TRUE, is_scalar, render_literal
from .scribe import ClosedScribe, JsonScribe

P = TypeVar('P')


# ========================================================================
# SHARED HELPER FUNCTIONS
# ========================================================================

def write_string(scribe: JsonScribe, text: str) -> None:
    """Write a complete string literal in value position."""
    scribe.begin_string_value(text)
    scribe.end_current()


def write_scalar(scribe: JsonScribe, value: Any) -> None:
    """Write a string, number, bool or None in value position."""
    if isinstance(value, str):
        write_string(scribe, value)
    else:
        scribe.write_value_literal(render_literal(value))


def write_nested(scribe: JsonScribe, value: Any) -> None:
    """
    Write a scalar, or a Mapping / list / tuple of them, in value position.

    Raises:
        TypeError: For any other type, or a non-string member name. Members
            written before the bad one stay written.
    """
    if isinstance(value, str) or is_scalar(value):
        write_scalar(scribe, value)
    elif isinstance(value, Mapping):
        scribe.begin_object()
        for key, member in value.items():
            if not isinstance(key, str):
                raise TypeError(f"keys must be str, not {type(key).__name__}")
            scribe.write_key(key)
            write_nested(scribe, member)
        scribe.end_current()
    elif isinstance(value, (list, tuple)):
        scribe.begin_array()
        for item in value:
            write_nested(scribe, item)
        scribe.end_current()
    else:
        raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


# ========================================================================
# BASE HANDLE CLASS
# ========================================================================

class JsonNode(Generic[P]):
    """Base class for handles; binds a scribe, a parent and a depth."""

    def __init__(self, scribe: JsonScribe, parent: P):
        self._scribe = scribe
        self._parent = parent
        self._depth = scribe.cursor

    @property
    def depth(self) -> int:
        """Cursor value of the construct this handle closes."""
        return self._depth

    @property
    def closed(self) -> bool:
        return isinstance(self._scribe, ClosedScribe)

    def then(self) -> P:
        """Close this construct and return the parent."""
        self._scribe.end_current(self._depth)
        self._scribe = ClosedScribe(self._depth)
        return self._parent

    def __repr__(self) -> str:
        state = 'closed' if self.closed else 'open'
        return f"{type(self).__name__}(depth={self._depth}, {state})"


# ========================================================================
# CONCRETE HANDLE CLASSES
# ========================================================================

class JsonValue(JsonNode[P]):
    """
    An open string literal that characters can be streamed into.

    Also usable as a text sink (it has write()), e.g. print(..., file=value).
    """

    def append(self, text: Optional[str], start: Optional[int] = None,
               end: Optional[int] = None) -> 'JsonValue[P]':
        """
        Append escaped characters to the string.

        Args:
            text: Characters to append. None appends the characters "null".
            start: Optional start index into text.
            end: Optional end index into text.
        """
        if text is None:
            text = NULL
        if start is not None or end is not None:
            text = text[start:end]
        self._scribe.append_to_string_value(text)
        return self

    def write(self, text: str) -> int:
        self._scribe.append_to_string_value(text)
        return len(text)


class JsonArrayNode(JsonNode[P]):
    """An open JSON array."""

    def with_null(self) -> 'JsonArrayNode[P]':
        self._scribe.write_value_literal(NULL)
        return self

    def with_true(self) -> 'JsonArrayNode[P]':
        self._scribe.write_value_literal(TRUE)
        return self

    def with_false(self) -> 'JsonArrayNode[P]':
        self._scribe.write_value_literal(FALSE)
        return self

    def with_(self, element: Any) -> 'JsonArrayNode[P]':
        """
        Append a string, bool, number or None element.

        Strings are quoted and escaped. Non-finite floats and None become
        null literals.
        """
        write_scalar(self._scribe, element)
        return self

    def with_all(self, *elements: Any) -> 'JsonArrayNode[P]':
        """Append each element; mappings and lists become nested constructs."""
        return self.with_all_from(elements)

    def with_all_from(self, elements: Optional[Iterable[Any]]) -> 'JsonArrayNode[P]':
        """
        Append every element of an iterable. None has no effect.

        Raises:
            TypeError: If elements is a str; use with_() for a string element.
        """
        if elements is None:
            return self
        if isinstance(elements, str):
            raise TypeError("with_all_from() takes an iterable of elements, not a str")
        for element in elements:
            write_nested(self._scribe, element)
        return self

    def with_empty_array(self) -> 'JsonArrayNode[P]':
        self._scribe.begin_array()
        self._scribe.end_current()
        return self

    def with_empty_object(self) -> 'JsonArrayNode[P]':
        self._scribe.begin_object()
        self._scribe.end_current()
        return self

    def element(self, prefix: Optional[str] = None) -> 'JsonValue[JsonArrayNode[P]]':
        """
        Open a string element and return a handle to stream into it.

        When this returns, the opening quote (and comma, if one is due) has
        already been written. Call then() on the returned value before
        using this array again.
        """
        self._scribe.begin_string_value(prefix)
        return JsonValue(self._scribe, self)

    def array(self) -> 'JsonArrayNode[JsonArrayNode[P]]':
        """Open a nested array element."""
        self._scribe.begin_array()
        return JsonArrayNode(self._scribe, self)

    def object(self) -> 'JsonObjectNode[JsonArrayNode[P]]':
        """Open a nested object element."""
        self._scribe.begin_object()
        return JsonObjectNode(self._scribe, self)


class JsonObjectNode(JsonNode[P]):
    """An open JSON object. Every method takes the member name first."""

    def with_null(self, key: str) -> 'JsonObjectNode[P]':
        self._scribe.write_key(key)
        self._scribe.write_value_literal(NULL)
        return self

    def with_true(self, key: str) -> 'JsonObjectNode[P]':
        self._scribe.write_key(key)
        self._scribe.write_value_literal(TRUE)
        return self

    def with_false(self, key: str) -> 'JsonObjectNode[P]':
        self._scribe.write_key(key)
        self._scribe.write_value_literal(FALSE)
        return self

    def with_(self, key: str, value: Any) -> 'JsonObjectNode[P]':
        """
        Add a member whose value is a string, bool, number or None.

        The value is rendered before the key is written, so an unsupported
        type raises TypeError without leaving a dangling key behind.
        """
        if isinstance(value, str):
            self._scribe.write_key(key)
            write_string(self._scribe, value)
        else:
            token = render_literal(value)
            self._scribe.write_key(key)
            self._scribe.write_value_literal(token)
        return self

    def with_all(self, members: Optional[Mapping] = None, **kwargs: Any) -> 'JsonObjectNode[P]':
        """Add every member of a mapping, then every keyword argument."""
        for source in (members or {}, kwargs):
            for key, value in source.items():
                if not isinstance(key, str):
                    raise TypeError(f"keys must be str, not {type(key).__name__}")
                self._scribe.write_key(key)
                write_nested(self._scribe, value)
        return self

    def with_empty_array(self, key: str) -> 'JsonObjectNode[P]':
        self._scribe.write_key(key)
        self._scribe.begin_array()
        self._scribe.end_current()
        return self

    def with_empty_object(self, key: str) -> 'JsonObjectNode[P]':
        self._scribe.write_key(key)
        self._scribe.begin_object()
        self._scribe.end_current()
        return self

    def value(self, key: str, prefix: Optional[str] = None) -> 'JsonValue[JsonObjectNode[P]]':
        """Open a string member and return a handle to stream into it."""
        self._scribe.write_key(key)
        self._scribe.begin_string_value(prefix)
        return JsonValue(self._scribe, self)

    def array(self, key: str) -> 'JsonArrayNode[JsonObjectNode[P]]':
        self._scribe.write_key(key)
        self._scribe.begin_array()
        return JsonArrayNode(self._scribe, self)

    def object(self, key: str) -> 'JsonObjectNode[JsonObjectNode[P]]':
        self._scribe.write_key(key)
        self._scribe.begin_object()
        return JsonObjectNode(self._scribe, self)
