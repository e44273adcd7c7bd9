"""Tests for hebras.transducers — lazy sequence transformations."""

import itertools
import operator

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from hebras.errors import ConstructionError, NoSuchElementError
from hebras.predicates import digit, equals
from hebras.sequence import Sequence, sequence, single
from hebras.transducers import (
    Composite,
    Map,
    Take,
    compose,
    decompose,
    dedupe,
    drop,
    drop_while,
    filter,
    find,
    first,
    flat_map,
    identity,
    last,
    map,
    reduce,
    reject,
    scan,
    sort,
    take,
    take_while,
    unique,
    windowed,
    zip,
    zip_with_index,
)


class TestCompose:
    """Composition is flat and associative."""

    def test_nested_compose_is_flattened(self) -> None:
        a, b, c = map(str), take(2), drop(1)
        nested = compose(compose(a, b), c)
        assert nested.transducers == (a, b, c)
        assert nested == compose(a, b, c)

    def test_no_composite_inside_composite(self) -> None:
        pipeline = compose(compose(compose(map(str))), compose(take(1), compose(drop(0))))
        assert not any(isinstance(t, Composite) for t in pipeline.transducers)

    def test_empty_compose_is_identity(self) -> None:
        assert list(compose()([1, 2, 3])) == [1, 2, 3]

    def test_identity_passes_through(self) -> None:
        assert list(identity()("abc")) == ["a", "b", "c"]

    def test_order_is_left_to_right(self) -> None:
        pipeline = compose(filter(lambda x: x % 2 == 0), map(str))
        assert list(pipeline([1, 2, 3, 4])) == ["2", "4"]

    def test_decompose_yields_primitives(self) -> None:
        a, b = map(str), take(1)
        assert list(decompose(compose(a, compose(b)))) == [a, b]

    def test_non_transducer_rejected(self) -> None:
        with pytest.raises(ConstructionError, match="compose"):
            compose(map(str), len)  # type: ignore[arg-type]

    def test_str(self) -> None:
        assert str(compose(map(str), take(2))) == "compose(map(str), take(2))"


class TestLaziness:
    def test_take_stops_pulling(self) -> None:
        pulled: list[int] = []

        def source():
            for n in itertools.count():
                pulled.append(n)
                yield n

        assert list(take(3)(source())) == [0, 1, 2]
        assert pulled == [0, 1, 2]

    def test_nothing_runs_before_iteration(self) -> None:
        calls: list[int] = []
        result = map(calls.append)([1, 2, 3])
        assert calls == []
        list(result)
        assert calls == [1, 2, 3]

    def test_infinite_source_with_find(self) -> None:
        assert list(find(lambda n: n > 10)(itertools.count())) == [11]


class TestElementwise:
    def test_map(self) -> None:
        assert list(map(str)([1, 2])) == ["1", "2"]

    def test_flat_map(self) -> None:
        assert list(flat_map(lambda n: [n] * n)([1, 2])) == [1, 2, 2]

    def test_filter_and_reject(self) -> None:
        assert list(filter(digit)("a1b2")) == ["1", "2"]
        assert list(reject(digit)("a1b2")) == ["a", "b"]

    def test_zip_stops_at_shorter(self) -> None:
        assert list(zip("ab")([1, 2, 3])) == [(1, "a"), (2, "b")]

    def test_zip_reiterable_other_restarts_each_run(self) -> None:
        pairs = zip(["x", "y"])
        assert list(pairs([1, 2])) == [(1, "x"), (2, "y")]
        assert list(pairs([3, 4])) == [(3, "x"), (4, "y")]

    def test_zip_one_shot_iterator_is_shared_between_runs(self) -> None:
        pairs = zip(iter("xyz"))
        assert list(pairs([1, 2, 3])) == [(1, "x"), (2, "y"), (3, "z")]
        assert list(pairs([4])) == []

    def test_zip_unbounded_other(self) -> None:
        assert list(zip(itertools.count())("ab")) == [("a", 0), ("b", 1)]

    def test_zip_with_index(self) -> None:
        assert list(zip_with_index()("ab")) == [("a", 0), ("b", 1)]


class TestSlicing:
    @pytest.mark.parametrize("count", [0, -1])
    def test_take_non_positive_is_empty(self, count: int) -> None:
        assert list(take(count)([1, 2, 3])) == []

    @pytest.mark.parametrize("count", [0, -3])
    def test_drop_non_positive_is_passthrough(self, count: int) -> None:
        assert list(drop(count)([1, 2, 3])) == [1, 2, 3]

    def test_drop_past_end_is_empty(self) -> None:
        assert list(drop(5)([1, 2, 3])) == []

    def test_take_while_and_drop_while(self) -> None:
        assert list(take_while(digit)("12ab3")) == ["1", "2"]
        assert list(drop_while(digit)("12ab3")) == ["a", "b", "3"]

    def test_first_and_last(self) -> None:
        assert list(first()([4, 5, 6])) == [4]
        assert list(last()([4, 5, 6])) == [6]
        assert list(first()([])) == []
        assert list(last()([])) == []

    def test_find(self) -> None:
        assert list(find(equals("b"))("abcb")) == ["b"]
        assert list(find(equals("z"))("abc")) == []


class TestWindows:
    def test_windowed_drops_short_tail(self) -> None:
        assert list(windowed(3, 1, False)([1, 2, 3, 4])) == [[1, 2, 3], [2, 3, 4]]

    def test_windowed_keeps_short_tail(self) -> None:
        assert list(windowed(3, 1, True)([1, 2, 3, 4])) == [[1, 2, 3], [2, 3, 4], [3, 4]]

    def test_windowed_step_equal_to_size_chunks(self) -> None:
        assert list(windowed(2, 2)([1, 2, 3, 4, 5])) == [[1, 2], [3, 4]]
        assert list(windowed(2, 2, True)([1, 2, 3, 4, 5])) == [[1, 2], [3, 4], [5]]

    def test_windowed_step_larger_than_size_skips(self) -> None:
        assert list(windowed(2, 3)([1, 2, 3, 4, 5, 6, 7])) == [[1, 2], [4, 5]]

    def test_windowed_shorter_input(self) -> None:
        assert list(windowed(3)([1, 2])) == []
        assert list(windowed(3, remainder=True)([1, 2])) == [[1, 2]]

    @pytest.mark.parametrize("size,step", [(0, 1), (2, 0)])
    def test_windowed_rejects_bad_parameters(self, size: int, step: int) -> None:
        with pytest.raises(ConstructionError, match="windowed"):
            windowed(size, step)

    def test_dedupe_only_adjacent(self) -> None:
        assert list(dedupe()([1, 1, 2, 1, 1])) == [1, 2, 1]

    def test_unique_keeps_first_occurrence(self) -> None:
        assert list(unique()([3, 1, 3, 2, 1])) == [3, 1, 2]

    def test_unique_over_windows(self) -> None:
        """Lists emitted by windowed are unhashable but still deduplicated."""
        pipeline = compose(windowed(2), unique())
        assert list(pipeline([1, 2, 1, 2])) == [[1, 2], [2, 1]]

    def test_unique_mixed_hashable_and_unhashable(self) -> None:
        assert list(unique()([1, [1], 1, [1], {"a": 1}, {"a": 1}])) == [1, [1], {"a": 1}]

    def test_sort(self) -> None:
        assert list(sort()([3, 1, 2])) == [1, 2, 3]
        assert list(sort(key=len, reverse=True)(["a", "ccc", "bb"])) == ["ccc", "bb", "a"]

    def test_str(self) -> None:
        assert str(windowed(3)) == "windowed(3, 1, False)"


class TestFolding:
    def test_scan_emits_seed_and_running_values(self) -> None:
        assert list(scan(operator.add, 0)([1, 2, 3])) == [0, 1, 3, 6]

    def test_scan_empty_emits_seed(self) -> None:
        assert list(scan(operator.add, 0)([])) == [0]

    def test_reduce_emits_final(self) -> None:
        assert list(reduce(operator.add, 0)([1, 2, 3])) == [6]

    def test_reduce_empty_emits_seed(self) -> None:
        assert list(reduce(operator.add, 10)([])) == [10]


class TestDescribe:
    """Transducers describe themselves from their construction parameters."""

    def test_equal_parameters_are_equal(self) -> None:
        assert take(3) == Take(3)
        assert map(str) == Map(str)
        assert take(3) != take(4)

    @pytest.mark.parametrize(
        "transducer,expected",
        [
            (take(3), "take(3)"),
            (drop(1), "drop(1)"),
            (map(str), "map(str)"),
            (filter(digit), "filter(digit)"),
            (reject(digit), "filter(not(digit))"),
            (zip_with_index(), "zip_with_index()"),
            (dedupe(), "dedupe()"),
            (scan(operator.add, 0), "scan(add, 0)"),
            (identity(), "identity()"),
        ],
    )
    def test_str(self, transducer, expected: str) -> None:
        assert str(transducer) == expected


class TestSequence:
    def test_sequence_is_restartable(self) -> None:
        evens = sequence(range(10), filter(lambda n: n % 2 == 0))
        assert list(evens) == [0, 2, 4, 6, 8]
        assert list(evens) == [0, 2, 4, 6, 8]

    def test_nested_sequence_extends_pipeline(self) -> None:
        inner = sequence([1, 2, 3], map(str))
        outer = sequence(inner, take(2))
        assert isinstance(outer, Sequence)
        assert outer.source == [1, 2, 3]
        assert list(outer) == ["1", "2"]

    def test_single_returns_first(self) -> None:
        assert single([4, 5], map(str)) == "4"

    def test_single_of_empty_raises(self) -> None:
        with pytest.raises(NoSuchElementError, match="single"):
            single([], take(1))

    def test_str(self) -> None:
        assert str(sequence("ab", take(1))) == "sequence('ab', take(1))"


class TestTransducerInvariants:
    @given(st.lists(st.integers(), max_size=30), st.integers(-2, 40), st.integers(-2, 40))
    @settings(max_examples=100)
    def test_take_drop_match_slicing(self, items: list[int], n: int, m: int) -> None:
        assert list(compose(drop(n), take(m))(items)) == items[max(n, 0) :][: max(m, 0)]

    @given(st.lists(st.integers(), max_size=30), st.integers(1, 6), st.integers(1, 6))
    @settings(max_examples=100)
    def test_windows_never_exceed_size(self, items: list[int], size: int, step: int) -> None:
        for window in windowed(size, step, True)(items):
            assert 1 <= len(window) <= size
