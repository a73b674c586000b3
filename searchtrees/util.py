# Comparators used to order the keys of a search tree
from typing import Any, Callable, TypeVar

T = TypeVar('T')
Comparator = Callable[[T, T], int]

def natural_order(a: Any, b: Any) -> int:
    """Compares two keys using their own < and > operators. Returns -1, 0 or 1"""
    return (a > b) - (a < b)

def comparator_from_key(key: Callable[[T], Any]) -> Comparator[T]:
    """Builds a comparator that orders keys by the result of key(x), in the same spirit as sorted(..., key=key).
    Keys with equal key(x) are considered to be the same key by the tree."""
    def compare(a: T, b: T) -> int:
        return natural_order(key(a), key(b))
    return compare

def reverse_order(compare: Comparator[T]) -> Comparator[T]:
    """Returns a comparator that orders keys backwards with respect to compare"""
    def reversed_compare(a: T, b: T) -> int:
        return compare(b, a)
    return reversed_compare
