"""Records of settled rocks, kept in order, used to spot a repeating cycle."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from aocpuzzles.shapes import Shape

T = TypeVar("T")


@dataclass
class CycleGuesser:
    """What is remembered about one rock once it has come to rest.

    Two records are equal when their shape name, left position, jet index,
    jet total and height match; the shape itself and the order of the next
    rock are left out of the comparison.
    """

    tetrimino: Shape = field(compare=False, repr=False)
    tetrimino_name: str
    x_position: int
    index_jet: int
    total_jet: int
    height: int
    ptr_tetriminos_index: int = field(compare=False)

    @classmethod
    def from_shape(
        cls, shape: Shape, index_jet: int, total_jet: int, next_order: int
    ) -> CycleGuesser:
        return cls(
            tetrimino=shape,
            tetrimino_name=shape.name(),
            x_position=shape.left(),
            index_jet=index_jet,
            total_jet=total_jet,
            height=shape.top(),
            ptr_tetriminos_index=next_order,
        )


@dataclass(eq=False)
class Node(Generic[T]):
    """A link of a ``LinkedList``, pointing to its neighbours."""

    data: T
    previous: Node[T] | None = field(default=None, repr=False)
    next: Node[T] | None = field(default=None, repr=False)


class LinkedList(Generic[T]):
    """A doubly linked list with indexed access to its nodes."""

    def __init__(self) -> None:
        self._nodes: list[Node[T]] = []

    @property
    def head(self) -> Node[T] | None:
        return self._nodes[0] if self._nodes else None

    @property
    def current_index(self) -> int:
        """Index of the last node, -1 when the list is empty."""
        return len(self._nodes) - 1

    def append(self, data: T) -> Node[T]:
        previous = self._nodes[-1] if self._nodes else None
        node = Node(data, previous)
        if previous is not None:
            previous.next = node
        self._nodes.append(node)
        return node

    def node(self, index: int) -> Node[T]:
        """The node at ``index``; negative indexes are out of range."""
        if index < 0 or index >= len(self._nodes):
            raise IndexError("index is out of range")
        return self._nodes[index]

    def __getitem__(self, index: int) -> T:
        return self.node(index).data

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[T]:
        current = self.head
        while current is not None:
            yield current.data
            current = current.next