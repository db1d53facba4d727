"""
Recursion guard for rendering records.

Tracks the identities of the records currently being rendered in the active
execution context. The stack lives in a ContextVar, so every thread and every
asyncio task starts with its own empty stack and concurrent renderings never
see each other's entries.
"""

from contextlib import contextmanager
from contextvars import ContextVar

__all__ = ["rendering", "active"]


_rendering = ContextVar("openstruct_rendering", default=())


def active():
    """Identities currently being rendered, outermost first."""
    return _rendering.get()


@contextmanager
def rendering(obj):
    """Mark `obj` as being rendered for the duration of the block.

    Yields False when `obj` is already being rendered further up the stack,
    in which case nothing is pushed. The stack is restored on every exit
    path, including exceptions raised inside the block.
    """
    obj_id = id(obj)
    visited = _rendering.get()

    if obj_id in visited:
        yield False
        return

    token = _rendering.set(visited + (obj_id,))
    try:
        yield True
    finally:
        _rendering.reset(token)
