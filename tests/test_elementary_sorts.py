import unittest
import sys
import os
import random

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.algorithms.elementary import bubble_sort, gnome_sort, insertion_sort, selection_sort
from sortlab.algorithms.heap_sort import heap_sort, heapify, sift_down
from sortlab.algorithms.shell_sort import (
    ciura_gaps,
    halving_gaps,
    knuth_gaps,
    resolve_gaps,
    shell_sort,
)
from sortlab.algorithms.sort_errors import InvalidGapSequenceError, InvalidRangeError
from sortlab.comparator import Comparator
from sortlab.metrics import SortMetrics

ELEMENTARY = [gnome_sort, bubble_sort, selection_sort, insertion_sort, shell_sort, heap_sort]


class TestElementaryContract(unittest.TestCase):
    """Shared contract for the in-place O(1)-memory sorts."""

    def test_concrete_scenario(self):
        for sort in ELEMENTARY:
            with self.subTest(sort=sort.__name__):
                data = [5, 3, 3, 1, 4, 3, 2]
                self.assertIsNone(sort(data))
                self.assertEqual(data, [1, 2, 3, 3, 3, 4, 5])

    def test_empty_and_single(self):
        for sort in ELEMENTARY:
            with self.subTest(sort=sort.__name__):
                empty = []
                sort(empty)
                self.assertEqual(empty, [])
                single = [7]
                sort(single)
                self.assertEqual(single, [7])

    def test_reverse_comparator(self):
        for sort in ELEMENTARY:
            with self.subTest(sort=sort.__name__):
                data = [2, 9, 4, 1]
                sort(data, Comparator.natural(reverse=True))
                self.assertEqual(data, [9, 4, 2, 1])

    def test_sub_range_only(self):
        for sort in ELEMENTARY:
            with self.subTest(sort=sort.__name__):
                data = [9, 8, 5, 1, 3, 0, -1]
                sort(data, lo=2, hi=5)
                self.assertEqual(data, [9, 8, 1, 3, 5, 0, -1])

    def test_invalid_range(self):
        for sort in ELEMENTARY:
            with self.subTest(sort=sort.__name__):
                with self.assertRaises(InvalidRangeError):
                    sort([1, 2, 3], lo=2, hi=1)
                with self.assertRaises(InvalidRangeError):
                    sort([1, 2, 3], hi=4)
                with self.assertRaises(InvalidRangeError):
                    sort([1, 2, 3], lo=-1)

    def test_random_inputs_match_sorted(self):
        rng = random.Random(7)
        for sort in ELEMENTARY:
            for n in (2, 3, 10, 57):
                data = [rng.randrange(20) for _ in range(n)]
                expected = sorted(data)
                sort(data)
                self.assertEqual(data, expected, f"{sort.__name__} n={n}")


class TestGnomeAndBubble(unittest.TestCase):

    def test_gnome_sorted_input_is_linear(self):
        metrics = SortMetrics()
        gnome_sort(list(range(100)), metrics=metrics)
        self.assertEqual(metrics.comparisons, 99)
        self.assertEqual(metrics.swaps, 0)

    def test_bubble_stops_after_swapless_pass(self):
        metrics = SortMetrics()
        bubble_sort(list(range(100)), metrics=metrics)
        self.assertEqual(metrics.comparisons, 99)

    def test_bubble_shrinks_to_last_swap(self):
        # one pass moves 0 to the front region; the next pass stops at the last swap
        metrics = SortMetrics()
        data = [1, 0, 2, 3, 4, 5]
        bubble_sort(data, metrics=metrics)
        self.assertEqual(data, [0, 1, 2, 3, 4, 5])
        self.assertEqual(metrics.swaps, 1)
        self.assertEqual(metrics.comparisons, 5)


class TestSelectionSort(unittest.TestCase):

    def test_always_quadratic_comparisons(self):
        metrics = SortMetrics()
        selection_sort(list(range(20)), metrics=metrics)
        self.assertEqual(metrics.comparisons, 20 * 19 // 2)
        self.assertEqual(metrics.swaps, 0)


class TestInsertionSort(unittest.TestCase):

    def test_stability(self):
        data = [(3, "a"), (1, "b"), (3, "c")]
        insertion_sort(data, Comparator.by_key(lambda x: x[0]))
        self.assertEqual(data, [(1, "b"), (3, "a"), (3, "c")])

    def test_sorted_input_no_writes(self):
        metrics = SortMetrics()
        insertion_sort([1, 2, 3, 4], metrics=metrics)
        self.assertEqual(metrics.writes, 0)
        self.assertEqual(metrics.comparisons, 3)


class TestShellSort(unittest.TestCase):

    def test_halving_gaps(self):
        self.assertEqual(halving_gaps(20), [10, 5, 2, 1])
        self.assertEqual(halving_gaps(1), [1])

    def test_knuth_gaps(self):
        self.assertEqual(knuth_gaps(100), [13, 4, 1])
        self.assertEqual(knuth_gaps(5), [1])

    def test_ciura_gaps(self):
        self.assertEqual(ciura_gaps(30), [23, 10, 4, 1])
        self.assertEqual(ciura_gaps(2000), [1577, 701, 301, 132, 57, 23, 10, 4, 1])
        self.assertEqual(ciura_gaps(1), [1])

    def test_explicit_gaps_normalized(self):
        self.assertEqual(resolve_gaps([5, 3, 5], 100), [5, 3, 1])
        self.assertEqual(resolve_gaps((1,), 100), [1])

    def test_invalid_gaps(self):
        with self.assertRaises(InvalidGapSequenceError):
            resolve_gaps([4, 0], 10)
        with self.assertRaises(InvalidGapSequenceError):
            resolve_gaps([2.5], 10)
        with self.assertRaises(InvalidGapSequenceError):
            resolve_gaps("fibonacci", 10)

    def test_every_gap_sequence_sorts(self):
        rng = random.Random(3)
        for gaps in (None, "halving", "knuth", "ciura", [7, 3], [100]):
            data = [rng.randrange(1000) for _ in range(300)]
            expected = sorted(data)
            shell_sort(data, gaps=gaps)
            self.assertEqual(data, expected, f"gaps={gaps}")


class TestHeapSort(unittest.TestCase):

    def _is_max_heap(self, data):
        return all(
            data[(k - 1) // 2] >= data[k] for k in range(1, len(data))
        )

    def test_heapify_builds_max_heap(self):
        data = [4, 2, 5, 1, 6, 6, 2, 3]
        heapify(data, len(data), Comparator(), SortMetrics())
        self.assertTrue(self._is_max_heap(data))
        self.assertEqual(data[0], 6)

    def test_sift_down_picks_larger_child(self):
        data = [1, 5, 9]
        sift_down(data, 0, 3, Comparator(), SortMetrics())
        self.assertEqual(data, [9, 5, 1])

    def test_sift_down_stops_when_not_smaller(self):
        metrics = SortMetrics()
        data = [9, 5, 7]
        sift_down(data, 0, 3, Comparator(), metrics)
        self.assertEqual(data, [9, 5, 7])
        self.assertEqual(metrics.swaps, 0)

    def test_heap_sort_with_offset(self):
        data = [100, 3, 1, 2, -100]
        heap_sort(data, lo=1, hi=4)
        self.assertEqual(data, [100, 1, 2, 3, -100])


if __name__ == '__main__':
    unittest.main()
