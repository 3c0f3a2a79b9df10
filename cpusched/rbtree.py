"""Red-black tree keyed by virtual runtime, used as the CFS run queue."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator


class Color(Enum):
    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A tree node holding a key and the value stored under it."""

    key: Any
    value: Any
    color: Color = Color.RED
    left: RBNode | None = None
    right: RBNode | None = None
    parent: RBNode | None = None


class RedBlackTree:
    """Ordered tree; equal keys are kept in insertion order.

    Removing the minimum splices the leftmost node out without rebalancing,
    which keeps the ordering intact.
    """

    def __init__(self) -> None:
        self.root: RBNode | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.value
            node = node.right

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        if y is None:
            return
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is None:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, y: RBNode) -> None:
        x = y.left
        if x is None:
            return
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        x.parent = y.parent
        if y.parent is None:
            self.root = x
        elif y is y.parent.left:
            y.parent.left = x
        else:
            y.parent.right = x
        x.right = y
        y.parent = x

    def _fix_insert(self, z: RBNode) -> None:
        while z is not self.root and z.parent is not None and z.parent.color is Color.RED:
            gp = z.parent.parent
            if gp is None:
                break
            if z.parent is gp.left:
                uncle = gp.right
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    gp.color = Color.RED
                    z = gp
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = Color.BLACK
                    gp.color = Color.RED
                    self._rotate_right(gp)
            else:
                uncle = gp.left
                if uncle is not None and uncle.color is Color.RED:
                    z.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    gp.color = Color.RED
                    z = gp
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = Color.BLACK
                    gp.color = Color.RED
                    self._rotate_left(gp)
        if self.root is not None:
            self.root.color = Color.BLACK

    def insert(self, key: Any, value: Any) -> RBNode:
        """Insert value under key and return the new node."""
        z = RBNode(key, value)
        parent: RBNode | None = None
        x = self.root
        while x is not None:
            parent = x
            x = x.left if key < x.key else x.right
        z.parent = parent
        if parent is None:
            self.root = z
        elif key < parent.key:
            parent.left = z
        else:
            parent.right = z
        self._size += 1
        self._fix_insert(z)
        return z

    def _leftmost(self) -> RBNode:
        node = self.root
        if node is None:
            raise IndexError("tree is empty")
        while node.left is not None:
            node = node.left
        return node

    def peek_min(self) -> tuple[Any, Any]:
        """Return the (key, value) pair with the smallest key."""
        node = self._leftmost()
        return node.key, node.value

    def pop_min(self) -> tuple[Any, Any]:
        """Remove and return the (key, value) pair with the smallest key."""
        m = self._leftmost()
        child = m.right
        parent = m.parent
        if parent is not None:
            parent.left = child
        else:
            self.root = child
        if child is not None:
            child.parent = parent
        m.left = m.right = m.parent = None
        self._size -= 1
        return m.key, m.value