"""Span tracking and path resolution built atop :mod:`contextvars`.

Purpose
-------
Keep a root-to-leaf chain of named scopes for the current execution flow and
turn that chain into the path decoration printed by the line renderer.

Contents
--------
* :class:`Span` - immutable named scope with a stable identifier.
* :class:`SpanStack` - context-local stack with enter/serialize/deserialize
  helpers.
* :func:`resolve_span_path` / :func:`resolve_span_depth` - the detailed and
  compact path representations.

System Role
-----------
The emit use case snapshots :meth:`SpanStack.current` into every event; the
renderer only ever reads that snapshot.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence
from uuid import uuid4


SPAN_SEPARATOR = " > "
DEPTH_LIMIT = 3


def _new_span_id() -> str:
    return uuid4().hex


@dataclass(slots=True, frozen=True)
class Span:
    """Named scope attached to every event emitted while it is active.

    Attributes
    ----------
    name:
        Display name used in the span path.
    span_id:
        Stable identity of this scope instance.
    fields:
        Caller-supplied metadata bound when the span was entered.
    """

    name: str
    span_id: str = field(default_factory=_new_span_id)
    fields: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("span name must not be empty")
        object.__setattr__(self, "fields", dict(self.fields))

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "span_id": self.span_id, "fields": dict(self.fields)}


class SpanStack:
    """Manage the :class:`Span` chain bound to the current execution flow."""

    _stack_var: contextvars.ContextVar[tuple[Span, ...]]

    def __init__(self) -> None:
        self._stack_var = contextvars.ContextVar("lib_log_trace_span_stack", default=())

    @contextmanager
    def enter(self, name: str, **fields: Any) -> Iterator[Span]:
        """Push a new span for the duration of the ``with`` block.

        Examples
        --------
        >>> stack = SpanStack()
        >>> with stack.enter("request"):
        ...     with stack.enter("db"):
        ...         resolve_span_path(stack.current())
        'request > db'
        >>> stack.current()
        ()
        """

        span = Span(name=name, fields=fields)
        token = self._stack_var.set(self._stack_var.get() + (span,))
        try:
            yield span
        finally:
            self._stack_var.reset(token)

    def current(self) -> tuple[Span, ...]:
        """Return the active chain, outermost span first."""

        return self._stack_var.get()

    def depth(self) -> int:
        return len(self._stack_var.get())

    def serialize(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of the chain."""

        return {"version": 1, "spans": [span.to_dict() for span in self._stack_var.get()]}

    def deserialize(self, payload: dict[str, Any]) -> None:
        """Restore a chain produced by :meth:`serialize` (e.g. in a worker thread)."""

        spans = tuple(Span(**data) for data in payload.get("spans", []))
        self._stack_var.set(spans)

    def clear(self) -> None:
        self._stack_var.set(())


def resolve_span_path(chain: Sequence[Span], separator: str = SPAN_SEPARATOR) -> str:
    """Join span names root-first without a trailing separator.

    Examples
    --------
    >>> resolve_span_path([Span("A"), Span("B"), Span("C")])
    'A > B > C'
    >>> resolve_span_path([])
    ''
    """

    return separator.join(span.name for span in chain)


def resolve_span_depth(chain: Sequence[Span], limit: int = DEPTH_LIMIT) -> str:
    """Return the compact depth marker for ``chain``.

    One ``>`` per span up to ``limit``; deeper chains collapse to ``>>N``.

    Examples
    --------
    >>> resolve_span_depth([Span("a"), Span("b")])
    '>>'
    >>> resolve_span_depth([Span(str(n)) for n in range(5)])
    '>>5'
    >>> resolve_span_depth([])
    ''
    """

    depth = len(chain)
    if depth > limit:
        return f">>{depth}"
    return ">" * depth


__all__ = [
    "DEPTH_LIMIT",
    "SPAN_SEPARATOR",
    "Span",
    "SpanStack",
    "resolve_span_depth",
    "resolve_span_path",
]
