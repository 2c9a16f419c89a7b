"""
Lazy, possibly infinite linked lists.

A list is either the shared terminal ``EMPTY`` or a ``Node`` holding an
evaluated head and a zero-argument callable producing the rest. Building a
node never calls that callable; only ``rest()`` does. Every combinator below
is expressed through ``head``/``rest`` and stays lazy, so chains over infinite
lists are cheap to build and only pay for what is traversed.

Terminal operations (``reduce``, ``length``, ``reverse``, ``to_list``) walk
the whole list and never return on an infinite one. Neither does ``filter``
once no later element matches. Nothing here tries to detect either case.

Forced tails are recomputed on every traversal unless the list was wrapped
with ``cache()``.
"""

import logging

logger = logging.getLogger(__name__)


class LazyList:
    """
    Common behaviour of ``Empty`` and ``Node``. Methods branch on truthiness:
    the empty list is falsy, every node is truthy.
    """
    __slots__ = ()

    head = None

    def rest(self):
        raise NotImplementedError

    # --------- iteration ----------
    def __iter__(self):
        return LazyListIterator(self)

    # --------- windowing (lazy) ----------
    def take(self, n):
        if n <= 0 or not self:
            return EMPTY
        if n == 1:
            # the last element never forces the source's tail
            return single_cons(self.head, EMPTY)
        return Node(self.head, lambda: self.rest().take(n - 1))

    def drop(self, n):
        """Skip ``n`` elements, forcing one tail per skipped element."""
        ll = self
        while n > 0 and ll:
            ll = ll.rest()
            n -= 1
        return ll

    skip = drop

    def batch(self, size):
        """Group consecutive elements into tuples of up to ``size`` items."""
        if size <= 0:
            raise ValueError("Batch size must be >= 1")
        if not self:
            return EMPTY
        bucket = [self.head]
        last = self
        exhausted = False
        while len(bucket) < size:
            following = last.rest()
            if not following:
                exhausted = True
                break
            bucket.append(following.head)
            last = following
        if exhausted:
            return single_cons(tuple(bucket), EMPTY)
        return Node(tuple(bucket), lambda: last.rest().batch(size))

    def chunk(self, size):
        """Alias for batch()"""
        return self.batch(size)

    def page(self, page_number, page_size):
        """Get a specific page of elements (1-indexed)"""
        if page_number < 1:
            raise ValueError("Page number must be >= 1")
        return self.drop((page_number - 1) * page_size).take(page_size)

    # --------- transformation (lazy) ----------
    def map(self, fn):
        if not self:
            return EMPTY
        return Node(fn(self.head), lambda: self.rest().map(fn))

    def filter(self, pred):
        """
        Keep the elements satisfying ``pred``.

        Realizing a head walks past rejected elements until one is accepted,
        so on an infinite list ``pred`` has to keep holding somewhere ahead.
        """
        ll = self
        while ll:
            value = ll.head
            if pred(value):
                accepted = ll
                return Node(value, lambda: accepted.rest().filter(pred))
            ll = ll.rest()
        return EMPTY

    # --------- combination (lazy) ----------
    def concat(self, other):
        if not self:
            return other
        return Node(self.head, lambda: self.rest().concat(other))

    def __add__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.concat(other)

    def zip(self, other):
        if not self or not other:
            return EMPTY
        return Node((self.head, other.head),
                    lambda: self.rest().zip(other.rest()))

    def flat_map(self, fn):
        return flatten(self.map(fn))

    def pair(self, other):
        """Every ``(left, right)`` combination, left elements in the outer loop."""
        return self.flat_map(lambda left: other.map(lambda right: (left, right)))

    # --------- repetition (lazy) ----------
    def cycle(self, n=None):
        """
        Repeat the list ``n`` times, or forever when ``n`` is None.
        Only meaningful for finite lists; an empty list stays empty.
        """
        if not self:
            logger.debug("cycle() on an empty list yields an empty list")
            return EMPTY
        copies = repeat_value(self)
        if n is not None:
            copies = copies.take(n)
        return flatten(copies)

    # --------- caching ----------
    def cache(self):
        """
        Equivalent list that keeps each forced tail, so traversing it again
        reuses earlier work instead of recomputing it.
        """
        if not self:
            return EMPTY
        return _CachedNode(self.head, lambda: self.rest().cache())

    # --------- reducing operations (force evaluation) ----------
    def reduce(self, initial, combine):
        """Left fold over a finite list."""
        acc = initial
        for value in self:
            acc = combine(acc, value)
        return acc

    def length(self):
        return self.reduce(0, lambda count, _: count + 1)

    def reverse(self):
        result = EMPTY
        for value in self:
            result = single_cons(value, result)
        return result

    def to_list(self):
        return list(self)

    def first(self, default=None):
        """Return the first element, or default if empty"""
        return self.head if self else default

    def nth(self, index):
        if index < 0:
            raise IndexError("negative indexes are not supported")
        ll = self.drop(index)
        if not ll:
            raise IndexError("lazy list index out of range")
        return ll.head


class Empty(LazyList):
    """The terminal list. There is exactly one instance, ``EMPTY``."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def rest(self):
        return self

    def __bool__(self):
        return False

    def __repr__(self):
        return 'Empty'


EMPTY = Empty()


class Node(LazyList):
    __slots__ = '_head', '_tail'

    def __init__(self, head, tail):
        self._head = head
        self._tail = tail

    @property
    def head(self):
        return self._head

    def rest(self):
        return self._tail()

    def __bool__(self):
        return True

    def __repr__(self):
        return f'Node({self._head!r}, ...)'


class _CachedNode(Node):
    __slots__ = '_forced',

    def __init__(self, head, tail):
        super().__init__(head, tail)
        self._forced = None

    def rest(self):
        if self._forced is None:
            self._forced = self._tail()
            # the thunk is no longer needed and may hold on to a long chain
            self._tail = None
        return self._forced


class LazyListIterator:
    """
    Cursor over a lazy list. Earlier nodes are not referenced once passed,
    so they can be collected while a long list is being consumed.
    """

    def __init__(self, lazy_list):
        self._current = lazy_list

    def __iter__(self):
        return self

    def __next__(self):
        current = self._current
        if not current:
            raise StopIteration
        value = current.head
        self._current = current.rest()
        return value


# --------- construction ----------

def make_node(value, thunk):
    return Node(value, thunk)


def single_cons(value, rest):
    return Node(value, lambda: rest)


def from_iterable(iterable):
    """Build a finite lazy list holding the items of ``iterable`` in order."""
    result = EMPTY
    for value in reversed(list(iterable)):
        result = single_cons(value, result)
    return result


def repeat_value(value):
    return Node(value, lambda: repeat_value(value))


def concat(first, second):
    return first.concat(second)


def pair(lhs, rhs):
    return lhs.pair(rhs)


def flatten(lists):
    """Concatenate a (possibly infinite) lazy list of lazy lists."""
    if not lists:
        return EMPTY
    return _flatten(lists.head, lists)


def _flatten(inner, outer):
    # `inner` is what remains of outer.head; outer.rest() is forced only
    # once `inner` runs dry
    while not inner:
        outer = outer.rest()
        if not outer:
            return EMPTY
        inner = outer.head
    return Node(inner.head, lambda: _flatten(inner.rest(), outer))
