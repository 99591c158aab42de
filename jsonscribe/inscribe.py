"""
Inscribe - Start a writing session on a sink.

Each helper wraps the sink in a fresh JsonScribe, opens the outermost
construct and returns its handle. Calling then() on that handle closes the
construct and gives back the sink, which is left open and unflushed.
"""

import io
import logging
from typing import Callable, Optional, TypeVar

from .nodes import JsonArrayNode, JsonObjectNode, JsonValue
from .scribe import JsonScribe

logger = logging.getLogger(__name__)

S = TypeVar('S')


def _start(sink, options: dict) -> JsonScribe:
    logger.debug("starting session on %s with options %r", type(sink).__name__, options)
    return JsonScribe(sink, **options)


def inscribe_array(sink: S, **options) -> JsonArrayNode[S]:
    """Write '[' to sink and return the array handle."""
    scribe = _start(sink, options)
    scribe.begin_array()
    return JsonArrayNode(scribe, sink)


def inscribe_object(sink: S, **options) -> JsonObjectNode[S]:
    """Write '{' to sink and return the object handle."""
    scribe = _start(sink, options)
    scribe.begin_object()
    return JsonObjectNode(scribe, sink)


def inscribe_value(sink: S, prefix: Optional[str] = None, **options) -> JsonValue[S]:
    """Write an opening quote (and prefix, escaped) to sink and return the string handle."""
    scribe = _start(sink, options)
    scribe.begin_string_value(prefix)
    return JsonValue(scribe, sink)


def dumps_with(build: Callable[[io.StringIO], object]) -> str:
    """
    Run build with a fresh StringIO sink and return what it wrote.

    Example:
        >>> dumps_with(lambda sink: inscribe_array(sink).with_(1).then())
        '[1]'
    """
    buffer = io.StringIO()
    build(buffer)
    return buffer.getvalue()
