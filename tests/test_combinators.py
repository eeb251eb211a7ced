#!/usr/bin/env python3
"""
Tests for the intermediate stream combinators.
"""

import unittest

from kvstream import Stream, StreamConfig, TypeMismatchError, NilPointerError, api
from kvstream.streams import MergeMode, MergeOperator, TokenSet


def pairs(*items):
    """Stream over the given pairs, in order."""
    return Stream.of(iter(items))


class TestFilter(unittest.TestCase):
    """Test filter."""

    def test_always_true_is_identity(self):
        items = [(1, "a"), (2, "b"), (3, "c")]
        self.assertEqual(list(pairs(*items).filter(lambda k, v: True)), items)

    def test_keeps_matching_pairs(self):
        result = list(Stream.range(1, 10).filter(lambda k, v: v % 3 == 0))
        self.assertEqual(result, [(3, 3), (6, 6), (9, 9)])

    def test_only_exact_true_passes(self):
        """Truthy non-boolean predicate results are rejected."""
        result = list(pairs((1, "a"), (2, "b")).filter(lambda k, v: v))
        self.assertEqual(result, [])

    def test_predicate_call_count(self):
        calls = []

        def predicate(k, v):
            calls.append(k)
            return k == 3

        stream = Stream.range(1, 5).filter(predicate)
        self.assertEqual(stream.pull(), (3, 3))
        self.assertEqual(calls, [1, 2, 3])

    def test_non_callable_rejected_eagerly(self):
        with self.assertRaises(TypeMismatchError):
            Stream.of({}).filter("not callable")


class TestMap(unittest.TestCase):
    """Test map."""

    def test_identity_mapper(self):
        items = [(1, "a"), (2, "b")]
        self.assertEqual(list(pairs(*items).map(lambda k, v: (k, v))), items)

    def test_swaps_key_and_value(self):
        result = api.collect(api.map({"a": 1, "b": 2}, lambda k, v: (v, k)))
        self.assertEqual(result, {1: "a", 2: "b"})

    def test_mapper_not_called_at_end(self):
        calls = []
        stream = Stream.of({}).map(lambda k, v: calls.append(k) or (k, v))
        self.assertIsNone(stream.pull())
        self.assertEqual(calls, [])

    def test_absent_key_rejected(self):
        stream = pairs((1, "a")).map(lambda k, v: (None, v))
        with self.assertRaises(NilPointerError):
            stream.pull()

    def test_non_pair_rejected(self):
        stream = pairs((1, "a")).map(lambda k, v: v)
        with self.assertRaises(TypeMismatchError):
            stream.pull()

    def test_callback_errors_propagate(self):
        def mapper(k, v):
            raise KeyError("boom")

        with self.assertRaises(KeyError):
            pairs((1, "a")).map(mapper).collect()


class TestPeek(unittest.TestCase):
    """Test peek."""

    def test_observes_without_altering(self):
        seen = []
        items = [(1, "a"), (2, "b")]
        result = list(pairs(*items).peek(lambda k, v: seen.append((k, v)) or "ignored"))
        self.assertEqual(result, items)
        self.assertEqual(seen, items)

    def test_observer_not_called_at_end(self):
        seen = []
        stream = Stream.empty().peek(lambda k, v: seen.append(k))
        self.assertIsNone(stream.pull())
        self.assertEqual(seen, [])

    def test_side_effects_follow_demand(self):
        """Callbacks fire only as pairs are requested."""
        log = []
        stream = (Stream.range(1, 3)
                  .peek(lambda k, v: log.append(("peek", k)))
                  .map(lambda k, v: (log.append(("map", k)) or k, v)))
        self.assertEqual(log, [])
        stream.pull()
        self.assertEqual(log, [("peek", 1), ("map", 1)])
        stream.pull()
        self.assertEqual(log, [("peek", 1), ("map", 1), ("peek", 2), ("map", 2)])


class TestMerge(unittest.TestCase):
    """Test merge."""

    @staticmethod
    def combine(k1, v1, k2, v2):
        return (k1 if k1 is not None else k2), (v1, v2)

    def test_shorter_left(self):
        left = Stream.range(1, 3)
        right = Stream.range(10, 14)
        result = list(left.merge(right, self.combine))

        self.assertEqual(len(result), 5)
        self.assertEqual(result[:3], [(1, (1, 10)), (2, (2, 11)), (3, (3, 12))])
        self.assertEqual(result[3:], [(13, (None, 13)), (14, (None, 14))])

    def test_shorter_right(self):
        result = list(Stream.range(1, 4).merge(Stream.range(10, 11), self.combine))
        self.assertEqual(result, [(1, (1, 10)), (2, (2, 11)), (3, (3, None)), (4, (4, None))])

    def test_equal_lengths(self):
        result = api.collect(api.merge({"a": 1}, {"b": 2},
                                       lambda k1, v1, k2, v2: (k1 + k2, v1 + v2)))
        self.assertEqual(result, {"ab": 3})

    def test_empty_sides(self):
        self.assertEqual(list(Stream.empty().merge({}, self.combine)), [])
        result = list(Stream.empty().merge(Stream.range(1, 2), self.combine))
        self.assertEqual(result, [(1, (None, 1)), (2, (None, 2))])

    def test_dead_side_not_pulled(self):
        """After one side ends only the live side is pulled."""
        left_pulls = []

        def left():
            left_pulls.append(1)
            return (1, 1) if len(left_pulls) == 1 else None

        stream = Stream.of(left).merge(Stream.range(1, 4), self.combine)
        self.assertEqual(stream.count(), 4)
        self.assertEqual(len(left_pulls), 2)

    def test_mode_transitions(self):
        operator = MergeOperator(Stream.range(1, 1), Stream.range(1, 2), self.combine)
        self.assertIs(operator.mode, MergeMode.BOTH)
        operator.pull()
        self.assertIs(operator.mode, MergeMode.BOTH)
        operator.pull()
        self.assertIs(operator.mode, MergeMode.RIGHT_ONLY)
        self.assertIsNone(operator.pull())
        self.assertIs(operator.mode, MergeMode.ENDED)
        self.assertIsNone(operator.pull())


class TestFlatMap(unittest.TestCase):
    """Test flat_map."""

    def test_total_length_is_sum_of_inner_lengths(self):
        outer = pairs((1, "a"), (2, "b"))
        result = list(outer.flat_map(
            lambda k, v: Stream.range(1, 2).map(lambda i, _: ((k, i), v))))
        self.assertEqual(result, [((1, 1), "a"), ((1, 2), "a"), ((2, 1), "b"), ((2, 2), "b")])

    def test_empty_outer_never_expands(self):
        calls = []
        stream = Stream.empty().flat_map(lambda k, v: calls.append(k) or {})
        self.assertEqual(list(stream), [])
        self.assertEqual(calls, [])

    def test_empty_inner_streams_are_skipped(self):
        inner = {1: {}, 2: {"x": 1}, 3: {}, 4: {}, 5: {"y": 2, "z": 3}, 6: {}}
        stream = api.flat_map(Stream.range(1, 6), lambda k, v: inner[k])
        self.assertEqual(stream.collect(), {"x": 1, "y": 2, "z": 3})
        self.assertIsNone(stream.pull())

    def test_inner_drained_before_next_outer(self):
        log = []
        outer = Stream.range(1, 2).peek(lambda k, v: log.append(("outer", k)))
        stream = outer.flat_map(
            lambda k, v: Stream.range(1, 2).peek(lambda i, _: log.append(("inner", k, i))))
        stream.for_each(lambda k, v: None)
        self.assertEqual(log, [("outer", 1), ("inner", 1, 1), ("inner", 1, 2),
                               ("outer", 2), ("inner", 2, 1), ("inner", 2, 2)])

    def test_expander_must_return_source(self):
        stream = Stream.range(1, 1).flat_map(lambda k, v: [v])
        with self.assertRaises(TypeMismatchError):
            stream.pull()


class TestUnique(unittest.TestCase):
    """Test unique."""

    def tearDown(self):
        StreamConfig.set_defaults(weak_unique_tokens=False)

    def test_default_dedupes_by_value(self):
        stream = pairs((1, 1), (2, 2), (3, 2), (4, 3), (5, 1))
        self.assertEqual([v for _, v in stream.unique()], [1, 2, 3])

    def test_first_occurrence_kept(self):
        stream = pairs(("a", "x"), ("b", "x"), ("c", "y"))
        self.assertEqual(list(stream.unique()), [("a", "x"), ("c", "y")])

    def test_custom_keyer(self):
        stream = Stream.range(1, 10).unique(lambda k, v: v % 3)
        self.assertEqual([k for k, _ in stream], [1, 2, 3])

    def test_absent_token_rejected(self):
        stream = pairs((1, None))
        with self.assertRaises(NilPointerError):
            stream.unique().pull()

    def test_unhashable_token_rejected(self):
        with self.assertRaises(TypeMismatchError):
            pairs((1, [1])).unique().pull()
        with self.assertRaises(TypeMismatchError):
            pairs((1, (1, [2]))).unique().pull()

    def test_weak_tokens(self):
        class Token:
            def __init__(self, name):
                self.name = name

            def __eq__(self, other):
                return isinstance(other, Token) and other.name == self.name

            def __hash__(self):
                return hash(self.name)

        first, second = Token("a"), Token("a")
        stream = pairs((1, first), (2, second), (3, 7), (4, 7)).unique(weak=True)
        self.assertEqual([k for k, _ in stream], [1, 3])

    def test_weak_default_from_config(self):
        StreamConfig.set_defaults(weak_unique_tokens=True)
        operator = Stream.empty().unique()._cursor
        self.assertTrue(operator.seen.weak)

    def test_function_form_accepts_weak(self):
        stream = api.unique(iter([(1, 2), (2, 2)]), weak=True)
        self.assertTrue(stream._cursor.seen.weak)
        self.assertEqual(list(stream), [(1, 2)])

    def test_token_set(self):
        tokens = TokenSet()
        tokens.add(1)
        self.assertIn(1, tokens)
        self.assertNotIn(2, tokens)
        self.assertEqual(len(tokens), 1)


if __name__ == "__main__":
    unittest.main()
