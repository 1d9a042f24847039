"""Binary trees: plain search trees, size-balanced trees and AVL trees."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional, TextIO

_EMPTY = "[.] "


@dataclass(eq=False)
class Node:
    """A binary tree node holding one value."""

    value: Any
    left: Optional["Node"] = None
    right: Optional["Node"] = None


@dataclass(eq=False)
class AvlNode(Node):
    """A node that also records its balance factor (left height minus right)."""

    balance: int = 0


def _height(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + max(_height(node.left), _height(node.right))


def _size(node: Optional[Node]) -> int:
    if node is None:
        return 0
    return 1 + _size(node.left) + _size(node.right)


class BinaryTree(ABC):
    """Common behaviour of the binary trees: traversal and level display."""

    def __init__(self, out: TextIO | None = None) -> None:
        self.root: Optional[Node] = None
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @abstractmethod
    def insert(self, value) -> bool:
        """Insert ``value``; return whether the tree changed."""

    @abstractmethod
    def search(self, value) -> bool:
        """Return whether ``value`` is stored in the tree."""

    def __contains__(self, value) -> bool:
        return self.search(value)

    def inorder(self) -> list:
        """Return the values in in-order traversal order."""
        result: list = []
        stack: list[Node] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def _level_nodes(self) -> Iterator[list[Optional[Node]]]:
        level: list[Optional[Node]] = [self.root]
        while level:
            yield level
            level = [
                child
                for node in level
                if node is not None
                for child in (node.left, node.right)
            ]

    def levels(self) -> list[list]:
        """Return each level left to right, with ``None`` for empty children."""
        return [
            [None if node is None else node.value for node in level]
            for level in self._level_nodes()
        ]

    def _format_node(self, node: Node) -> str:
        return f"{node.value} "

    def format_levels(self) -> str:
        """Render the tree one level per line, marking empty places with ``[.]``."""
        lines = []
        for depth, level in enumerate(self._level_nodes()):
            cells = "".join(
                _EMPTY if node is None else self._format_node(node) for node in level
            )
            lines.append(f"Nivel {depth}: {cells}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.format_levels()


class SearchTree(BinaryTree):
    """Binary search tree without repeated values."""

    def _new_node(self, value) -> Node:
        return Node(value)

    def insert(self, value) -> bool:
        parent: Optional[Node] = None
        current = self.root
        while current is not None:
            parent = current
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return False
        node = self._new_node(value)
        if parent is None:
            self.root = node
        elif value < parent.value:
            parent.left = node
        else:
            parent.right = node
        return True

    def search(self, value) -> bool:
        current = self.root
        while current is not None:
            if value < current.value:
                current = current.left
            elif value > current.value:
                current = current.right
            else:
                return True
        return False


class BalancedTree(BinaryTree):
    """Tree kept balanced by node count: each value goes to the smaller side."""

    def insert(self, value) -> bool:
        if self.search(value):
            return False
        if self.root is None:
            self.root = Node(value)
            return True
        node = self.root
        while True:
            if _size(node.left) <= _size(node.right):
                if node.left is None:
                    node.left = Node(value)
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    return True
                node = node.right

    def search(self, value) -> bool:
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node is None:
                continue
            if node.value == value:
                return True
            stack.append(node.left)
            stack.append(node.right)
        return False

    def size(self) -> int:
        """Number of values stored."""
        return _size(self.root)

    def height(self) -> int:
        """Number of levels holding nodes."""
        return _height(self.root)

    def is_balanced(self) -> bool:
        """Whether every node's subtrees differ in size by at most one."""

        def balanced(node: Optional[Node]) -> bool:
            if node is None:
                return True
            if abs(_size(node.left) - _size(node.right)) > 1:
                return False
            return balanced(node.left) and balanced(node.right)

        return balanced(self.root)


class AvlTree(SearchTree):
    """Height-balanced search tree that counts rotations by the pivot's parity.

    II and DD rotations are counted when the pivot value is even, ID and DI
    rotations when it is odd. Repeated values are stored to the right.
    """

    _COUNTER_ORDER = ("DI", "ID", "II", "DD")

    def __init__(self, trace: bool = False, out: TextIO | None = None) -> None:
        super().__init__(out)
        self.trace = trace
        self.rotation_counts = {name: 0 for name in self._COUNTER_ORDER}

    def height(self) -> int:
        """Number of levels holding nodes."""
        return _height(self.root)

    def insert(self, value) -> bool:
        self.root, _ = self._insert(self.root, AvlNode(value))
        return True

    def _format_node(self, node: Node) -> str:
        if self.trace:
            diff = _height(node.left) - _height(node.right)
            return f"[{node.value}({diff})] "
        return f"[{node.value}] "

    def format_levels(self) -> str:
        return super().format_levels()

    def _insert(self, node: Optional[AvlNode], new: AvlNode) -> tuple[AvlNode, bool]:
        if node is None:
            return new, True
        if new.value < node.value:
            node.left, grew = self._insert(node.left, new)
            if grew:
                return self._rebalance_left(node)
            return node, False
        node.right, grew = self._insert(node.right, new)
        if grew:
            return self._rebalance_right(node)
        return node, False

    def _rebalance_left(self, node: AvlNode) -> tuple[AvlNode, bool]:
        if node.balance == -1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = 1
            return node, True
        if node.left.balance == 1:
            return self._rotate_ii(node), False
        return self._rotate_id(node), False

    def _rebalance_right(self, node: AvlNode) -> tuple[AvlNode, bool]:
        if node.balance == 1:
            node.balance = 0
            return node, False
        if node.balance == 0:
            node.balance = -1
            return node, True
        if node.right.balance == -1:
            return self._rotate_dd(node), False
        return self._rotate_di(node), False

    def _report(self, name: str, node: AvlNode, counts: bool) -> None:
        stream = self.out
        if self.trace:
            diff = _height(node.left) - _height(node.right)
            stream.write(f"Rotation {name} en [{node.value}({diff})]\n")
        if counts:
            self.rotation_counts[name] += 1
            stream.write(f"Counter {name} incrementado\n")
        for key in self._COUNTER_ORDER:
            stream.write(f"Counter {key}: {self.rotation_counts[key]}\n")

    def _rotate_ii(self, node: AvlNode) -> AvlNode:
        self._report("II", node, node.value % 2 == 0)
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        if pivot.balance == 1:
            node.balance = pivot.balance = 0
        else:
            node.balance, pivot.balance = 1, -1
        return pivot

    def _rotate_dd(self, node: AvlNode) -> AvlNode:
        self._report("DD", node, node.value % 2 == 0)
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        if pivot.balance == -1:
            node.balance = pivot.balance = 0
        else:
            node.balance, pivot.balance = -1, 1
        return pivot

    def _rotate_id(self, node: AvlNode) -> AvlNode:
        self._report("ID", node, node.value % 2 != 0)
        child = node.left
        pivot = child.right
        node.left = pivot.right
        pivot.right = node
        child.right = pivot.left
        pivot.left = child
        child.balance = 1 if pivot.balance == -1 else 0
        node.balance = -1 if pivot.balance == 1 else 0
        pivot.balance = 0
        return pivot

    def _rotate_di(self, node: AvlNode) -> AvlNode:
        self._report("DI", node, node.value % 2 != 0)
        child = node.right
        pivot = child.left
        node.right = pivot.left
        pivot.left = node
        child.left = pivot.right
        pivot.right = child
        child.balance = -1 if pivot.balance == 1 else 0
        node.balance = 1 if pivot.balance == -1 else 0
        pivot.balance = 0
        return pivot