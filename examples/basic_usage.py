#!/usr/bin/env python3
"""
Basic usage examples for kvstream.
"""

import logging

from kvstream import Stream, StreamConfig, ReadOnlyMapping, api as kv
from kvstream.algorithms import ascending, descending
from kvstream.profiler import ProfileContext


def example_pipeline():
    """Example: filter, map and collect a mapping."""
    print("\n=== Pipeline Example ===")

    scores = {"ann": 91, "bob": 67, "cid": 78, "dee": 85}

    passed = (Stream.of(scores)
              .filter(lambda name, score: score >= 75)
              .map(lambda name, score: (name.upper(), score))
              .collect())
    print(f"Passed: {passed}")


def example_num_stream():
    """Example: inclusive number ranges."""
    print("\n=== Number Stream Example ===")

    print("Ascending:", [v for _, v in kv.num_stream(1, 5)])
    print("Descending:", [v for _, v in kv.num_stream(5, 1)])
    print("Stepped:", [v for _, v in kv.num_stream(0, 1, 0.25)])


def example_merge():
    """Example: merge streams of different lengths."""
    print("\n=== Merge Example ===")

    def combine(k1, v1, k2, v2):
        return (k1 if k1 is not None else k2), (v1, v2)

    merged = kv.merge(kv.num_stream(1, 3), kv.num_stream(10, 14), combine)
    for key, value in merged:
        print(f"  {key}: {value}")


def example_flat_map_and_unique():
    """Example: expand pairs into inner streams, then deduplicate."""
    print("\n=== Flat Map / Unique Example ===")

    tags = {"post-1": ["python", "streams"], "post-2": ["python", "lazy"]}

    (Stream.of(tags)
     .flat_map(lambda post, names: enumerate(names))
     .unique()
     .for_each(lambda index, name: print(f"  {name}")))


def example_grouping_and_sorting():
    """Example: grouping and comparator sorting."""
    print("\n=== Grouping / Sorting Example ===")

    words = {1: "kiwi", 2: "apple", 3: "avocado", 4: "banana", 5: "blueberry"}

    by_letter = Stream.of(words).grouping(lambda k, word: word[0])
    print(f"Grouped: {by_letter}")

    lengths = Stream.of(words).map(lambda k, word: (k, len(word)))
    print(f"Lengths ascending: {lengths.sorted(ascending)}")
    print(f"Keys descending: {Stream.of(words).map(lambda k, v: (k, k)).sorted(descending)}")


def example_read_only_results():
    """Example: immutable results."""
    print("\n=== Read-only Results Example ===")

    result = kv.collect({"a": 1}, read_only=True)
    print(f"Result is read-only: {isinstance(result, ReadOnlyMapping)}")
    try:
        result["b"] = 2
    except TypeError as e:
        print(f"Rejected: {e}")


def example_profiling():
    """Example: profile terminal operations."""
    print("\n=== Profiling Example ===")

    StreamConfig.set_defaults(enable_profiling=True)
    with ProfileContext("grouping 100k"):
        kv.grouping(kv.num_stream(1, 100_000), lambda k, v: v % 10)
    StreamConfig.set_defaults(enable_profiling=False)


def main():
    """Run all examples."""
    logging.basicConfig(level=logging.INFO)
    print("kvstream Examples")
    print("=" * 50)

    example_pipeline()
    example_num_stream()
    example_merge()
    example_flat_map_and_unique()
    example_grouping_and_sorting()
    example_read_only_results()
    example_profiling()

    print("\n" + "=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    main()
