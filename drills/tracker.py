"""Quota tracking that reports through a messenger, and a tree with weak parents."""

from __future__ import annotations

import math
import weakref
from abc import ABC, abstractmethod
from collections.abc import Iterable

OVER_QUOTA = "Error: You are over your quota!"
URGENT_WARNING = "Urgent warning: You've used up over 90% of your quota!"
WARNING = "Warning: You've used up over 75% of your quota!"


class Messenger(ABC):
    """Something that can deliver a text message."""

    @abstractmethod
    def send(self, msg: str) -> None:
        """Deliver ``msg``."""


def _ratio(value: int, maximum: int) -> float:
    if maximum == 0:
        return math.inf if value > 0 else math.nan
    return value / maximum


class LimitTracker:
    """Tracks a value against a maximum and warns as the maximum nears."""

    def __init__(self, messenger: Messenger, maximum: int) -> None:
        self.messenger = messenger
        self.maximum = maximum
        self.value = 0

    def set_value(self, value: int) -> None:
        """Record ``value`` and send a message if it is at least 75% of the maximum."""
        self.value = value
        fraction = _ratio(value, self.maximum)
        if fraction >= 1.0:
            self.messenger.send(OVER_QUOTA)
        elif fraction >= 0.9:
            self.messenger.send(URGENT_WARNING)
        elif fraction >= 0.75:
            self.messenger.send(WARNING)


class Node:
    """A tree node owning its children and holding only a weak link to its parent."""

    def __init__(self, value: int, children: Iterable[Node] = ()) -> None:
        self.value = value
        self.children: list[Node] = []
        self._parent: weakref.ref[Node] | None = None
        for child in children:
            self.add_child(child)

    def add_child(self, child: Node) -> None:
        """Adopt ``child``, making this node its parent."""
        self.children.append(child)
        child._parent = weakref.ref(self)

    def parent(self) -> Node | None:
        """Return the parent if it still exists."""
        return None if self._parent is None else self._parent()

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, children={self.children!r})"