"""Bounded undo/redo history over immutable snapshots.

The history is a plain value threaded through by the caller. The caller
decides when to push (drag end, field blur, add/remove); the history has
no notion of an in-progress edit.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, TypeVar

__all__ = [
    "DEFAULT_HISTORY_SIZE",
    "History",
    "create_history",
    "push",
    "redo",
    "undo",
]

T = TypeVar("T")

DEFAULT_HISTORY_SIZE: int = 30


@dataclass(frozen=True)
class History(Generic[T]):
    """Past and future snapshot stacks.

    Attributes:
        past: Snapshots oldest-first; the last entry is restored by undo.
        future: Snapshots nearest-first; the first entry is restored by redo.
        max: Capacity of ``past``.
    """

    past: tuple[T, ...] = ()
    future: tuple[T, ...] = ()
    max: int = DEFAULT_HISTORY_SIZE

    def __post_init__(self) -> None:
        if self.max < 1:
            raise ValueError("History capacity must be at least 1")

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)


def create_history(max: int = DEFAULT_HISTORY_SIZE) -> History:
    """Create an empty history with the given capacity."""
    return History(max=max)


def push(history: History[T], snapshot: T) -> History[T]:
    """Record a snapshot, dropping the oldest past the capacity.

    Any redo branch is discarded.
    """
    past = history.past + (snapshot,)
    if len(past) > history.max:
        past = past[len(past) - history.max :]
    return replace(history, past=past, future=())


def undo(history: History[T], current: T) -> tuple[History[T], T | None]:
    """Step back one snapshot.

    Args:
        history: Current history.
        current: The live state, saved for redo.

    Returns:
        ``(new_history, restored)``; ``restored`` is None (and the history
        unchanged) when there is nothing to undo.
    """
    if not history.past:
        return history, None
    restored = history.past[-1]
    return (
        replace(history, past=history.past[:-1], future=(current,) + history.future),
        restored,
    )


def redo(history: History[T], current: T) -> tuple[History[T], T | None]:
    """Step forward one snapshot.

    Args:
        history: Current history.
        current: The live state, saved for undo.

    Returns:
        ``(new_history, restored)``; ``restored`` is None (and the history
        unchanged) when there is nothing to redo.
    """
    if not history.future:
        return history, None
    restored = history.future[0]
    return (
        replace(history, past=history.past + (current,), future=history.future[1:]),
        restored,
    )
