import pytest
from lazy import EMPTY, from_iterable
from sequences import naturals


class TestReductions:
    """Test reduction operations (reduce, length, reverse, ...)"""

    def test_reduce_sum(self):
        """Test a left fold summing elements"""
        result = naturals().take(10).reduce(0, lambda acc, x: acc + x)
        assert result == 55, f"Expected 55, got {result}"

    def test_reduce_order(self):
        """Test that reduce folds from the left"""
        result = from_iterable("abc").reduce("", lambda acc, x: acc + x)
        assert result == "abc"
        result = from_iterable([1, 2, 3]).reduce([], lambda acc, x: [x] + acc)
        assert result == [3, 2, 1]

    def test_reduce_empty(self):
        """Test that reducing the empty list returns the initial value"""
        assert EMPTY.reduce(42, lambda acc, x: acc + x) == 42

    def test_length(self):
        """Test counting elements"""
        assert from_iterable(range(12)).length() == 12
        assert EMPTY.length() == 0

    def test_length_matches_reduce(self):
        """Test length against a counting fold"""
        data = naturals().filter(lambda x: x % 3 == 0).take(9)
        assert data.length() == data.reduce(0, lambda acc, _: acc + 1) == 9

    def test_reverse(self):
        """Test reversing a finite list"""
        data = list(range(10))
        assert from_iterable(data).reverse().to_list() == data[::-1]

    def test_reverse_empty_and_single(self):
        """Test reversing trivial lists"""
        assert EMPTY.reverse() is EMPTY
        assert from_iterable([7]).reverse().to_list() == [7]

    def test_reverse_long(self):
        """Test reversing a long list without exhausting the stack"""
        reversed_list = naturals().take(50_000).reverse()
        assert reversed_list.head == 50_000
        assert reversed_list.drop(49_999).head == 1

    def test_to_list_and_from_iterable(self):
        """Test converting to and from Python lists"""
        data = [5, "a", None, 2.5]
        assert from_iterable(data).to_list() == data
        assert from_iterable([]) is EMPTY
        assert from_iterable(x * x for x in range(4)).to_list() == [0, 1, 4, 9]

    def test_first(self):
        """Test getting the first element"""
        assert naturals().first() == 1
        assert EMPTY.first() is None
        assert EMPTY.first("default") == "default"

    def test_nth(self):
        """Test indexing into a lazy list"""
        assert naturals().nth(0) == 1
        assert naturals().nth(99) == 100
        with pytest.raises(IndexError):
            from_iterable([1, 2]).nth(2)
        with pytest.raises(IndexError):
            naturals().nth(-1)

    def test_reduction_after_pipeline(self):
        """Test reductions terminating a chain of combinators"""
        total = (
            naturals()
            .map(lambda x: x * x)
            .filter(lambda x: x % 10 == 0)
            .drop(2)
            .take(5)
            .reduce(0, lambda acc, x: acc + x)
        )
        # 900 + 1600 + 2500 + 3600 + 4900
        assert total == 13500
