"""
Cross-algorithm properties
==========================
Every registered algorithm (baselines included) must:

- return a permutation of its input
- leave adjacent pairs in non-decreasing order
- leave sorted input unchanged
- accept empty and single-element input
- stay a permutation, and terminate, under an inconsistent comparator

Stable algorithms must also keep equal keys in original order.
"""

import unittest
import sys
import os
import random
from collections import Counter
from operator import itemgetter

from hypothesis import given, settings, strategies as st

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sortlab.comparator import Comparator
from sortlab.registry import ALGORITHMS, stable_algorithms
from sortlab.validators import is_permutation, is_sorted, is_stable, matches_baseline, tag_with_index

BY_FIRST = Comparator.by_key(itemgetter(0))
small_lists = st.lists(st.integers(min_value=-50, max_value=50), max_size=60)


class TestAllAlgorithms(unittest.TestCase):

    @settings(max_examples=60, deadline=None)
    @given(small_lists)
    def test_permutation_and_sortedness(self, data):
        for name, algorithm in ALGORITHMS.items():
            out = list(data)
            algorithm.sort(out)
            self.assertTrue(is_permutation(data, out), name)
            self.assertTrue(is_sorted(out), name)
            self.assertEqual(out, sorted(data), name)

    @settings(max_examples=30, deadline=None)
    @given(st.lists(st.text(max_size=4), max_size=40))
    def test_reverse_comparator_on_strings(self, data):
        cmp = Comparator.natural(reverse=True)
        for name, algorithm in ALGORITHMS.items():
            out = list(data)
            algorithm.sort(out, cmp)
            self.assertEqual(out, sorted(data, reverse=True), name)

    @settings(max_examples=30, deadline=None)
    @given(small_lists)
    def test_idempotence(self, data):
        ordered = sorted(data)
        for name, algorithm in ALGORITHMS.items():
            out = list(ordered)
            algorithm.sort(out)
            self.assertEqual(out, ordered, name)

    def test_concrete_scenario(self):
        for name, algorithm in ALGORITHMS.items():
            data = [5, 3, 3, 1, 4, 3, 2]
            algorithm.sort(data)
            self.assertEqual(data, [1, 2, 3, 3, 3, 4, 5], name)

    def test_empty_and_single(self):
        for name, algorithm in ALGORITHMS.items():
            empty, single = [], ["x"]
            algorithm.sort(empty)
            algorithm.sort(single)
            self.assertEqual(empty, [], name)
            self.assertEqual(single, ["x"], name)

    def test_random_categories_match_baseline(self):
        rng = random.Random(2024)
        inputs = [
            [rng.randrange(1000) for _ in range(150)],
            list(range(150)),
            list(range(150, 0, -1)),
            [42] * 150,
            [rng.randrange(3) for _ in range(150)],
        ]
        for name, algorithm in ALGORITHMS.items():
            for data in inputs:
                out = list(data)
                algorithm.sort(out)
                self.assertTrue(matches_baseline(data, out), name)

    def test_inconsistent_comparator_keeps_permutation(self):
        rng = random.Random(99)

        def coin_flip(a, b):
            return rng.choice((-1, 0, 1))

        data = [rng.randrange(20) for _ in range(40)]
        for name, algorithm in ALGORITHMS.items():
            out = list(data)
            algorithm.sort(out, coin_flip)
            self.assertEqual(Counter(out), Counter(data), name)


class TestStableAlgorithms(unittest.TestCase):

    def test_insertion_and_merge_sorts_are_claimed_stable(self):
        names = {a.name for a in stable_algorithms()}
        self.assertTrue({"insertion", "mergesort-topdown", "mergesort-bottomup"} <= names)
        self.assertNotIn("heap", names)
        self.assertNotIn("quicksort-3way", names)

    def test_keyed_scenario(self):
        for algorithm in stable_algorithms() + [ALGORITHMS["baseline-stable"]]:
            data = [(3, "a"), (1, "b"), (3, "c")]
            algorithm.sort(data, BY_FIRST)
            self.assertEqual(data, [(1, "b"), (3, "a"), (3, "c")], algorithm.name)

    @settings(max_examples=60, deadline=None)
    @given(st.lists(st.integers(min_value=0, max_value=5), max_size=60))
    def test_equal_keys_keep_original_order(self, keys):
        for algorithm in stable_algorithms():
            tagged = tag_with_index(keys)
            algorithm.sort(tagged, BY_FIRST)
            self.assertTrue(is_stable(tagged), algorithm.name)
            self.assertTrue(is_sorted([k for k, _ in tagged]), algorithm.name)


if __name__ == '__main__':
    unittest.main()
