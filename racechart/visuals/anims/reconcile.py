"""Keyed set reconciliation between existing elements and a new entry list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Reconciliation(Generic[T]):
    enter: tuple[T, ...]
    update: tuple[T, ...]
    exit: tuple[str, ...]


def reconcile(
    existing_keys: Iterable[str],
    entries: Sequence[T],
    key: Callable[[T], str],
) -> Reconciliation[T]:
    """Match entries to existing elements by key.

    Args:
        existing_keys: Keys of the elements currently on the surface.
        entries: The new entry list, in display order.
        key: Extracts the identity key from an entry.

    Returns:
        Entries whose key is new (``enter``), entries whose key already exists
        (``update``), both in entry order, and existing keys with no entry
        (``exit``), in their existing order. If several entries share a key,
        only the first is kept.
    """
    existing = list(existing_keys)
    known = set(existing)
    seen: set[str] = set()
    enter: list[T] = []
    update: list[T] = []
    for entry in entries:
        k = key(entry)
        if k in seen:
            continue
        seen.add(k)
        (update if k in known else enter).append(entry)
    exit_keys = tuple(k for k in existing if k not in seen)
    return Reconciliation(tuple(enter), tuple(update), exit_keys)
