# The immutable node shared by every search tree in this package.
# Edits never modify a node: they rebuild the path from the edited node up to the root
# and reuse every subtree that is off that path.
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Iterator, Self, TypeVar
from .errors import InvalidInvariant
from .util import Comparator

T = TypeVar('T')

def height(x: Node | None) -> int:
    return x.height if x is not None else 0

def size(x: Node | None) -> int:
    return x.size if x is not None else 0

@dataclass(frozen=True, eq=False, repr=False)
class Node(Generic[T]):
    """A node of a persistent binary search tree. Nodes are never mutated after construction,
    so a subtree can be shared between any number of tree versions.

    This class does not rebalance. Subclasses that want to keep the tree balanced override _join,
    which is the single place where the insert/delete skeleton rebuilds a node."""
    key: T
    """key: The key stored in this node."""

    left: Node[T] | None
    """left: The subtree holding every key that orders before key."""

    right: Node[T] | None
    """right: The subtree holding every key that orders after key."""

    height: int
    """height: Number of nodes on the longest path down to a leaf. A leaf has height 1 and an absent child counts as 0."""

    size: int
    """size: Number of keys in the subtree rooted at this node."""

    def __init__(self, key: T, left: Node[T] | None = None, right: Node[T] | None = None):
        super().__setattr__("key", key)
        super().__setattr__("left", left)
        super().__setattr__("right", right)
        super().__setattr__("height", 1 + max(height(left), height(right)))
        super().__setattr__("size", 1 + size(left) + size(right))

    def __repr__(self):
        return f"{self.__class__.__name__}(key={self.key!r}, height={self.height}, size={self.size})"

    @property
    def balance_factor(self) -> int:
        """Height of the right subtree minus height of the left subtree. Positive means right heavy."""
        return height(self.right) - height(self.left)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def contains(self, key: T, compare: Comparator[T]) -> bool:
        current = self
        while current is not None:
            comparison = compare(key, current.key)
            if comparison == 0:
                return True
            current = current.left if comparison < 0 else current.right
        return False

    def min_key(self) -> T:
        x = self
        while x.left is not None:
            x = x.left
        return x.key

    def max_key(self) -> T:
        x = self
        while x.right is not None:
            x = x.right
        return x.key

    # The walks below keep an explicit stack so that a degenerate tree of any depth can be read
    def in_order_traversal(self) -> Iterator[T]:
        """Yields every key of the subtree in ascending order"""
        stack: list[Node[T]] = []
        node = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def reverse_order_traversal(self) -> Iterator[T]:
        """Yields every key of the subtree in descending order"""
        stack: list[Node[T]] = []
        node = self
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            yield node.key
            node = node.left

    def get_range(self, start: T, end: T, compare: Comparator[T]) -> Iterator[T]:
        """Yields the keys k with start <= k <= end in ascending order.
        Subtrees that lie entirely outside of the range are never visited."""
        stack: list[tuple[Node[T], bool]] = []
        node = self
        while stack or node is not None:
            while node is not None:
                after_start = compare(start, node.key) <= 0
                stack.append((node, after_start))
                node = node.left if after_start else None
            node, after_start = stack.pop()
            if compare(end, node.key) < 0:
                # Everything still on the stack orders after this node
                return
            if after_start:
                yield node.key
            node = node.right

    def find_deletion_replacement(self) -> T:
        """Given that this node has two children, returns the key that takes its place when it is deleted.
        This is the in-order successor if the right subtree is at least as tall as the left one, and the
        in-order predecessor otherwise. Taking the key from the taller side avoids a rotation right after the delete."""
        if self.left is None or self.right is None:
            raise ValueError(f"Node {self.key!r} does not have two children")
        if self.balance_factor >= 0:
            return self.right.min_key()
        return self.left.max_key()

    ### Insert/delete skeleton ###
    def _join(self, key: T, left: Node[T] | None, right: Node[T] | None) -> Self:
        """Builds the node that replaces this one after an edit somewhere below it."""
        return type(self)(key, left, right)

    def insert(self, key: T, compare: Comparator[T]) -> Self:
        """Returns the root of a new subtree which contains key. If an equal key is already present,
        the new key replaces it and keeps its children."""
        comparison = compare(key, self.key)
        if comparison < 0:
            left = self.left.insert(key, compare) if self.left is not None else type(self)(key)
            return self._join(self.key, left, self.right)
        if comparison > 0:
            right = self.right.insert(key, compare) if self.right is not None else type(self)(key)
            return self._join(self.key, self.left, right)
        return self._join(key, self.left, self.right)

    def delete(self, key: T, compare: Comparator[T]) -> Self | None:
        """Returns the root of a new subtree without key, or None if the subtree becomes empty.
        If key is not in the subtree, the very same node is returned."""
        comparison = compare(key, self.key)
        if comparison < 0:
            if self.left is None:
                return self
            left = self.left.delete(key, compare)
            if left is self.left:
                return self
            return self._join(self.key, left, self.right)

        if comparison > 0:
            if self.right is None:
                return self
            right = self.right.delete(key, compare)
            if right is self.right:
                return self
            return self._join(self.key, self.left, right)

        # Found it
        if self.left is None:
            return self.right
        if self.right is None:
            return self.left

        replacement = self.find_deletion_replacement()
        if compare(replacement, self.key) > 0:
            return self._join(replacement, self.left, self.right.delete(replacement, compare))
        return self._join(replacement, self.left.delete(replacement, compare), self.right)

    ### Diagnostics ###
    def validate(self, compare: Comparator[T]) -> None:
        """Checks the order, size and height invariants of every node in the subtree.
        Raises InvalidInvariant on the first violation found."""
        # lower and upper are the nearest ancestors a node must order after and before
        stack: list[tuple[Node[T], Node[T] | None, Node[T] | None]] = [(self, None, None)]
        while stack:
            node, lower, upper = stack.pop()
            node._check(compare, lower, upper)
            if node.right is not None:
                stack.append((node.right, node, upper))
            if node.left is not None:
                stack.append((node.left, lower, node))

    def _check(self, compare: Comparator[T], lower: Node[T] | None, upper: Node[T] | None) -> None:
        """Checks the invariants of this node alone"""
        if lower is not None and compare(self.key, lower.key) <= 0:
            raise InvalidInvariant(lower.key, "right-order", f"Key {self.key!r} in the right subtree of {lower.key!r} does not order after it")
        if upper is not None and compare(self.key, upper.key) >= 0:
            raise InvalidInvariant(upper.key, "left-order", f"Key {self.key!r} in the left subtree of {upper.key!r} does not order before it")
        if self.size != 1 + size(self.left) + size(self.right):
            raise InvalidInvariant(self.key, "size", f"Node {self.key!r} has size {self.size}, expected {1 + size(self.left) + size(self.right)}")
        if self.height != 1 + max(height(self.left), height(self.right)):
            raise InvalidInvariant(self.key, "height", f"Node {self.key!r} has height {self.height}, expected {1 + max(height(self.left), height(self.right))}")
