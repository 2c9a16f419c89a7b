from lazy import EMPTY, from_iterable
from sequences import iterate


class TestCaching:
    """Test opt-in reuse of forced tails"""

    def test_cache_avoids_recomputation(self, counted):
        """Test that a second traversal reuses the first one's work"""
        step = counted(lambda x: x + 1)
        window = iterate(0, step).take(5).cache()

        assert window.to_list() == [0, 1, 2, 3, 4]
        first_calls = step.calls
        assert window.to_list() == [0, 1, 2, 3, 4]
        assert step.calls == first_calls == 4

    def test_uncached_recomputes(self, counted):
        """Test the default behaviour for comparison"""
        step = counted(lambda x: x + 1)
        window = iterate(0, step).take(5)

        window.to_list()
        window.to_list()
        assert step.calls == 8

    def test_cache_is_lazy(self, counted):
        """Test that caching forces nothing up front"""
        step = counted(lambda x: x + 1)
        cached = iterate(0, step).cache()

        assert step.calls == 0
        assert cached.take(3).to_list() == [0, 1, 2]
        assert step.calls == 2

    def test_cache_preserves_values(self):
        """Test that cached and plain traversals agree"""
        data = from_iterable(range(20)).filter(lambda x: x % 3 == 1)
        assert data.cache().to_list() == data.to_list()

    def test_cached_rest_is_stable(self):
        """Test that rest() of a cached node returns the same object"""
        cached = from_iterable([1, 2, 3]).cache()
        assert cached.rest() is cached.rest()

    def test_cache_empty(self):
        """Test caching the empty list"""
        assert EMPTY.cache() is EMPTY
