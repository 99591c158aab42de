"""
Context Frames - One record per open JSON construct.

The scribe pushes a frame when it writes an opening delimiter and pops it
when it writes the matching closer.
"""

from enum import Enum


class FrameKind(Enum):
    """Kind of construct a frame represents, valued by its closing delimiter."""

    ARRAY = ']'
    OBJECT = '}'
    STRING_VALUE = '"'


class ContextFrame:
    """
    Emission state of one open construct.

    has_emitted_first_child decides whether the next sibling needs a comma.
    awaiting_key is only meaningful for objects and flips on every key and
    every value.
    """

    __slots__ = ('kind', 'has_emitted_first_child', 'awaiting_key')

    def __init__(self, kind: FrameKind):
        self.kind = kind
        self.has_emitted_first_child = False
        self.awaiting_key = kind is FrameKind.OBJECT

    @property
    def closer(self) -> str:
        """The delimiter written when this frame is popped."""
        return self.kind.value

    def __repr__(self) -> str:
        return (f"ContextFrame({self.kind.name}, "
                f"first_child={self.has_emitted_first_child}, "
                f"awaiting_key={self.awaiting_key})")
