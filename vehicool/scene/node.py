# -*- coding: utf-8 -*-
"""Base node of the object tree."""
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from vehicool.errors import ScenarioLockedError


class ObjectNode(ABC):
    """Every dynamic object of a scenario derives from ObjectNode."""
    def __init__(self, name="Node"):
        self.name = name
        self.parent: Optional["ObjectNode"] = None
        self._children = []
        self._locked = False

    # ----------------- capabilities -----------------
    @abstractmethod
    def update(self, step: Optional[int] = None) -> None:
        """Move to tick ``step``, or one tick along the own clock if None."""

    @abstractmethod
    def render(self, surface, step: Optional[int] = None) -> None:
        """Draw the node (at tick ``step`` if given) onto ``surface``."""

    # ----------------- hierarchy -----------------
    @property
    def children(self) -> Tuple["ObjectNode", ...]:
        return tuple(self._children)

    def add_child(self, node: "ObjectNode") -> "ObjectNode":
        if self._locked:
            raise ScenarioLockedError(
                f"Cannot add {node.name!r} to {self.name!r} while animating"
            )
        if node.parent is not None:
            raise ValueError(f"{node.name!r} already belongs to {node.parent.name!r}")
        ancestor = self
        while ancestor is not None:
            if ancestor is node:
                raise ValueError(f"Adding {node.name!r} to {self.name!r} would create a cycle")
            ancestor = ancestor.parent
        node.parent = self
        self._children.append(node)
        return node

    def traverse(self) -> Iterator["ObjectNode"]:
        """Pre-order DFS generator."""
        yield self
        for child in self._children:
            yield from child.traverse()

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"
