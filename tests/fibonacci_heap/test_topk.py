import numpy as np
import pytest

from fibheap.fibonacci_heap.topk import heapsort, nsmallest


class TestNSmallest:
    def test_nsmallest_with_negative_k(self):
        assert nsmallest([10, 5, 3], -1) == []

    def test_nsmallest_with_zero_k(self):
        assert nsmallest([10, 5, 3], 0) == []

    def test_nsmallest_with_empty_input(self):
        assert nsmallest([], 5) == []

    def test_nsmallest(self):
        result = nsmallest([10, 5, 15, 1, 20], 3)
        assert result == [1, 5, 10]

    def test_nsmallest_k_larger_than_input(self):
        result = nsmallest([3, 1, 2], 10)
        assert result == [1, 2, 3]

    def test_nsmallest_with_duplicates(self):
        result = nsmallest([10, 10, 5, 15], 3)
        assert result == [5, 10, 10]

    def test_nsmallest_with_negative_keys(self):
        result = nsmallest([-10, 0, 5, -5], 2)
        assert result == [-10, -5]

    def test_nsmallest_with_tuples(self):
        pairs = [(3, "three"), (1, "one"), (2, "two")]
        result = nsmallest(pairs, 2)
        assert result == [(1, "one"), (2, "two")]

    def test_nsmallest_accepts_generator(self):
        result = nsmallest((x * x for x in range(-3, 4)), 3)
        assert result == [0, 1, 1]


class TestHeapsort:
    def test_heapsort_list(self):
        assert heapsort([5, 2, 9, 1, 5, 6]) == [1, 2, 5, 5, 6, 9]

    def test_heapsort_empty(self):
        assert heapsort([]) == []

    def test_heapsort_strings(self):
        assert heapsort(["pear", "apple", "fig"]) == ["apple", "fig", "pear"]

    def test_heapsort_array(self):
        keys = np.array([3.5, -1.0, 2.25, 0.0])
        result = heapsort(keys)
        assert isinstance(result, np.ndarray)
        assert result.dtype == keys.dtype
        np.testing.assert_array_equal(result, np.array([-1.0, 0.0, 2.25, 3.5]))

    @pytest.mark.parametrize("size", [1, 2, 17, 256])
    def test_heapsort_matches_numpy(self, size):
        rng = np.random.default_rng(size)
        keys = rng.integers(-100, 100, size=size)
        np.testing.assert_array_equal(heapsort(keys), np.sort(keys))

    def test_heapsort_rejects_2d_array(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            heapsort(np.zeros((2, 2)))
