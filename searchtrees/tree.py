from __future__ import annotations
from typing import Generic, Iterable, Iterator, Self, TypeVar
from .avl import AVLNode
from .node import Node
from .util import Comparator, natural_order

T = TypeVar('T')

class BinarySearchTree(Generic[T]):
    """A persistent binary search tree. A tree value is never modified: insert and delete return a new tree
    that shares every untouched subtree with the old one, and the old tree stays valid.

    This tree does not rebalance itself, so sorted insertions degrade it into a linked list.
    Use AVLTree unless you specifically want that."""
    __slots__ = ("_root", "_compare")
    _node_type: type[Node] = Node

    def __init__(self, keys: Iterable[T] = (), compare: Comparator[T] | None = None):
        """Creates a tree holding keys. Keys are ordered by compare(a, b), which returns a negative number,
        zero or a positive number when a orders before, together with, or after b. Defaults to the natural order of the keys."""
        self._compare: Comparator[T] = compare if compare is not None else natural_order
        root: Node[T] | None = None
        for key in keys:
            root = self._node_type(key) if root is None else root.insert(key, self._compare)
        self._root = root

    @classmethod
    def _from_root(cls, root: Node[T] | None, compare: Comparator[T]) -> Self:
        tree = cls.__new__(cls)
        tree._root = root
        tree._compare = compare
        return tree

    @property
    def root(self) -> Node[T] | None:
        return self._root

    @property
    def comparator(self) -> Comparator[T]:
        return self._compare

    @property
    def height(self) -> int:
        return self._root.height if self._root is not None else 0

    def is_empty(self) -> bool:
        return self._root is None

    def size(self) -> int:
        return self._root.size if self._root is not None else 0

    def contains(self, key: T) -> bool:
        if self._root is None:
            return False
        return self._root.contains(key, self._compare)

    def insert(self, key: T) -> Self:
        """Returns a new tree with key inserted. If an equal key is already present, it is overwritten by key."""
        if self._root is None:
            return self._from_root(self._node_type(key), self._compare)
        return self._from_root(self._root.insert(key, self._compare), self._compare)

    def delete(self, key: T) -> Self:
        """Returns a new tree without key. If key is not in the tree, the same tree is returned."""
        if self._root is None:
            return self
        root = self._root.delete(key, self._compare)
        if root is self._root:
            return self
        return self._from_root(root, self._compare)

    def to_ascending_list(self) -> list[T]:
        if self._root is None:
            return []
        return list(self._root.in_order_traversal())

    def to_descending_list(self) -> list[T]:
        if self._root is None:
            return []
        return list(self._root.reverse_order_traversal())

    def get_range(self, start: T, end: T) -> list[T]:
        """Returns the keys between start and end inclusive, in ascending order. Empty if start orders after end."""
        if self._root is None or self._compare(start, end) > 0:
            return []
        return list(self._root.get_range(start, end, self._compare))

    def get_min(self, default: T | None = None) -> T | None:
        """Returns the smallest key, or default if the tree is empty. Pass your own default
        if None can be a key of this tree, the same way as min(..., default=...)."""
        return self._root.min_key() if self._root is not None else default

    def get_max(self, default: T | None = None) -> T | None:
        """Returns the largest key, or default if the tree is empty. Pass your own default
        if None can be a key of this tree, the same way as max(..., default=...)."""
        return self._root.max_key() if self._root is not None else default

    def validate(self) -> None:
        """Raises InvalidInvariant if any node of the tree breaks an invariant. Meant for testing and debugging."""
        if self._root is not None:
            self._root.validate(self._compare)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[T]:
        if self._root is not None:
            yield from self._root.in_order_traversal()

    def __reversed__(self) -> Iterator[T]:
        if self._root is not None:
            yield from self._root.reverse_order_traversal()

    def __repr__(self):
        return f"{self.__class__.__name__}({self.to_ascending_list()!r})"

class AVLTree(BinarySearchTree[T]):
    """A persistent AVL tree. Same interface as BinarySearchTree, but every edit rebalances the path
    it rebuilt so the height stays logarithmic in the number of keys."""
    __slots__ = ()
    _node_type = AVLNode
