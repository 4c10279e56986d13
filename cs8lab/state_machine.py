"""A small finite-state machine that accepts identifier-like strings."""

from __future__ import annotations

import string
from typing import Optional

_IDENTIFIER_CHARS = string.digits + string.ascii_uppercase + string.ascii_lowercase + "_"


class StateNode:
    """A state with at most one outgoing transition per character."""

    def __init__(self) -> None:
        self._edges: dict[str, StateNode] = {}

    def next(self, char: str) -> Optional[StateNode]:
        """Return the state reached on ``char``, or None if there is no transition."""
        return self._edges.get(char)

    def add_edge(self, char: str, node: StateNode) -> None:
        """Set the transition on ``char`` to ``node``, replacing any earlier one."""
        self._edges[char] = node


class StateMachine:
    """Accepts non-empty strings of ASCII letters, digits and underscores."""

    def __init__(self) -> None:
        self.start = StateNode()
        self.accept = StateNode()
        for char in _IDENTIFIER_CHARS:
            self.start.add_edge(char, self.accept)
            self.accept.add_edge(char, self.accept)

    def valid(self, text: str) -> bool:
        """True if every character of ``text`` has a transition from the start."""
        if not text:
            return False
        node: Optional[StateNode] = self.start
        for char in text:
            node = node.next(char)
            if node is None:
                return False
        return True