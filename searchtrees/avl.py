# AVL rebalancing for the persistent node skeleton.
# Rotations allocate new nodes and leave their input untouched.
from __future__ import annotations
from typing import TypeVar
from .errors import InvalidInvariant
from .node import Node, T
from .util import Comparator

N = TypeVar('N', bound=Node)

def rotate_left(node: N) -> N:
    """
               Left rotation

            [10]                   (15)
           /   \\                  /  \\
          5    (15)    --->     [10]   20
              /  \\             /  \\
             12   20           5    12
    """
    pivot = node.right
    if pivot is None:
        raise ValueError(f"Cannot rotate node {node.key!r} left without a right child")
    cls = type(node)
    return cls(pivot.key, cls(node.key, node.left, pivot.left), pivot.right)

def rotate_right(node: N) -> N:
    """
               Right rotation

            [10]                   (5)
           /   \\                  /  \\
         (5)    15     --->       2   [10]
        /  \\                         /  \\
       2    7                        7    15
    """
    pivot = node.left
    if pivot is None:
        raise ValueError(f"Cannot rotate node {node.key!r} right without a left child")
    cls = type(node)
    return cls(pivot.key, pivot.left, cls(node.key, pivot.right, node.right))

def rebalance(node: N) -> N:
    """Restores the AVL balance at node, assuming both of its subtrees are already balanced
    and their heights differ by at most 2. Returns the node that takes its place."""
    balance = node.balance_factor
    # A balance factor below -1 implies a left child, above 1 a right child
    if balance < -1:
        # Left-right case
        if node.left.balance_factor > 0:
            node = type(node)(node.key, rotate_left(node.left), node.right)
        return rotate_right(node)

    if balance > 1:
        # Right-left case
        if node.right.balance_factor < 0:
            node = type(node)(node.key, node.left, rotate_right(node.right))
        return rotate_left(node)

    return node

class AVLNode(Node[T]):
    """A node of a persistent AVL tree. Every node rebuilt by insert or delete is rebalanced on the way
    back up to the root. Insertion needs at most one (single or double) rotation, but a deletion can
    shorten a subtree and cause rotations at several ancestors, so every rebuilt ancestor is checked."""
    def _join(self, key: T, left: Node[T] | None, right: Node[T] | None) -> AVLNode[T]:
        return rebalance(AVLNode(key, left, right))

    def _check(self, compare: Comparator[T], lower: Node[T] | None, upper: Node[T] | None) -> None:
        if abs(self.balance_factor) > 1:
            raise InvalidInvariant(self.key, "balance", f"Node {self.key!r} has balance factor {self.balance_factor}")
        super()._check(compare, lower, upper)
