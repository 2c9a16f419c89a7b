"""
Infinite sequences built on top of the lazy list.

Each producer returns a node whose tail computes the next state only when
forced, so any of them can be handed to ``take``/``map``/``filter`` without
evaluating more than the consumer asks for.
"""

from typing import Callable, Dict, TypeVar

from lazy import LazyList, make_node

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF


def iterate(value: T, fn: Callable[[T], T]) -> LazyList:
    """``value, fn(value), fn(fn(value)), ...``"""
    return make_node(value, lambda: iterate(fn(value), fn))


def naturals(start: int = 1) -> LazyList:
    return iterate(start, lambda n: n + 1)


def odds(start: int = 1) -> LazyList:
    return iterate(start, lambda n: n + 2)


def fibonacci(a: int = 0, b: int = 1) -> LazyList:
    return make_node(a, lambda: fibonacci(b, a + b))


def xorshift(x: int = 24903412, y: int = 53346, z: int = 34, w: int = 24) -> LazyList:
    """
    Marsaglia's xorshift128 generator on unsigned 32-bit words.
    Each element is the freshly computed ``w``.
    """
    t = (x ^ (x << 11)) & MASK_32
    x, y, z = y, z, w
    w = (w ^ (w >> 19)) ^ (t ^ (t >> 8))
    return make_node(w, lambda: xorshift(x, y, z, w))


def newton_sqrt(x: float, a: float) -> LazyList:
    """Newton's method iterates for the square root of ``a`` starting at ``x``."""
    return make_node(x, lambda: newton_sqrt((x + a / x) * 0.5, a))


def napiers_constant(n: float = 1.0) -> LazyList:
    """``(1 + n) ** (1 / n)`` for ``n`` halving at each step; tends towards e."""
    # once 1 + n rounds to 1 the power is 1, and n later underflows to 0
    term = 1.0 if 1.0 + n == 1.0 else (1.0 + n) ** (1.0 / n)
    return make_node(term, lambda: napiers_constant(n * 0.5))


# Zero-argument factories for the sequences exposed by name
PRODUCERS: Dict[str, Callable[[], LazyList]] = {
    "naturals": naturals,
    "odds": odds,
    "fibonacci": fibonacci,
    "xorshift": xorshift,
    "newton_sqrt": lambda: newton_sqrt(2.0, 2.0),
    "napiers_constant": napiers_constant,
}
