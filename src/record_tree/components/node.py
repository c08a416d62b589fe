from typing import Iterator, List

from pydantic import BaseModel, Field

from .record import Record


class Node(BaseModel):
    """A tree node: an ID and its children, ordered ascending by ID."""

    id: int
    children: List["Node"] = Field(default_factory=list)

    def sort_children(self) -> None:
        self.children.sort(key=lambda n: n.id)

    def _walk_levels(self) -> Iterator[tuple["Node", int]]:
        # Pre-order with an explicit stack; reversed so the first child pops first.
        stack: list[tuple["Node", int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            yield node, level
            stack.extend((child, level + 1) for child in reversed(node.children))

    def walk(self) -> Iterator["Node"]:
        """Yield this node and every descendant in pre-order."""
        for node, _ in self._walk_levels():
            yield node

    def depth(self) -> int:
        """Height of the subtree rooted here; a leaf has depth 0."""
        return max(level for _, level in self._walk_levels())

    def flatten(self) -> list[Record]:
        """
        Turn the subtree back into flat records, sorted by ID.

        The node this is called on is reported as a root (``parent == id``).
        """
        records = [Record(id=self.id, parent=self.id)]
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node.children:
                records.append(Record(id=child.id, parent=node.id))
                stack.append(child)
        records.sort(key=lambda r: r.id)
        return records

    def render(self, indent: str = "  ") -> str:
        """Return an outline of the subtree, one ID per line."""
        return "\n".join(f"{indent * level}{node.id}" for node, level in self._walk_levels())
