"""Technologies and the dependencies between them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TechNode:
    """A technology and the technologies it unlocks."""

    name: str
    available: bool = False
    children: list[TechNode] = field(default_factory=list)

    def add_child(self, name: str) -> TechNode:
        """Add a new technology depending on this one and return it."""
        child = TechNode(name)
        self.children.append(child)
        return child


@dataclass
class TechTree:
    """A technology tree rooted at an unnamed node."""

    parent_node: TechNode = field(default_factory=lambda: TechNode(""))