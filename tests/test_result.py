"""Tests for the Ok/Err types, fold and publish."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given

from result_extensions import Err, Ok, PassthroughSubject, UnwrapError, fold, is_err, is_ok, publish
from tests.strategies import failures, integers, results


class TestVariants:
    """Tests for construction, equality and variant checks."""

    def test_ok_is_ok(self, sample_ok: Ok[int]) -> None:
        assert sample_ok.is_ok()
        assert not sample_ok.is_err()
        assert is_ok(sample_ok)
        assert not is_err(sample_ok)

    def test_err_is_err(self, sample_err: Err[ValueError]) -> None:
        assert sample_err.is_err()
        assert not sample_err.is_ok()
        assert is_err(sample_err)
        assert not is_ok(sample_err)

    def test_structural_equality(self) -> None:
        assert Ok(1) == Ok(1)
        assert Err('x') == Err('x')
        assert Ok(1) != Err(1)
        assert Ok(1) != Ok(2)

    def test_hashable(self) -> None:
        assert len({Ok(1), Ok(1), Err(1)}) == 2

    def test_frozen(self) -> None:
        ok = Ok(1)
        with pytest.raises(AttributeError):
            ok.value = 2  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(Ok(5)) == 'Ok(5)'
        assert repr(Err('x')) == "Err('x')"

    def test_pattern_matching(self) -> None:
        def describe(r: Ok[int] | Err[str]) -> str:
            match r:
                case Ok(value):
                    return f'ok:{value}'
                case Err(error):
                    return f'err:{error}'

        assert describe(Ok(1)) == 'ok:1'
        assert describe(Err('x')) == 'err:x'


class TestExtraction:
    """Tests for unwrap and friends, including wrong-variant extraction."""

    def test_unwrap_ok(self) -> None:
        assert Ok(3).unwrap() == 3
        assert Ok(3).expect('never') == 3

    def test_unwrap_err_raises(self) -> None:
        err = Err('boom')
        with pytest.raises(UnwrapError) as exc_info:
            err.unwrap()
        assert exc_info.value.result is err
        assert 'boom' in str(exc_info.value)

    def test_unwrap_err_on_ok_raises(self) -> None:
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_expect_message(self) -> None:
        with pytest.raises(UnwrapError, match='loading config'):
            Err('missing').expect('loading config')

    def test_expect_err_on_ok_raises(self) -> None:
        with pytest.raises(UnwrapError, match='expected Err'):
            Ok(1).expect_err('wanted failure')

    def test_unwrap_error_is_runtime_error(self) -> None:
        with pytest.raises(RuntimeError):
            Err('x').unwrap()

    def test_unwrap_or(self) -> None:
        assert Ok(1).unwrap_or(0) == 1
        assert Err('x').unwrap_or(0) == 0
        assert Err('abc').unwrap_or_else(len) == 3

    def test_option_conversion(self) -> None:
        assert Ok(1).ok() == 1
        assert Ok(1).err() is None
        assert Err('x').ok() is None
        assert Err('x').err() == 'x'
        assert Err('x').unwrap_err() == 'x'


class TestSyncCombinators:
    """Tests for map, map_err, and_then and or_else."""

    def test_map(self) -> None:
        assert Ok(2).map(lambda x: x * 2) == Ok(4)
        assert Err('x').map(lambda x: x * 2) == Err('x')

    def test_map_err(self) -> None:
        assert Err('x').map_err(str.upper) == Err('X')
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_and_then(self) -> None:
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda x: Err('bad')) == Err('bad')
        assert Err('x').and_then(lambda x: Ok(x)) == Err('x')

    def test_or_else(self) -> None:
        assert Err('x').or_else(lambda e: Ok(0)) == Ok(0)
        assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)


class TestFold:
    """Tests for fold: exactly one handler runs."""

    def test_ok_calls_success_handler_only(self) -> None:
        successes: list[int] = []
        failures_seen: list[Any] = []

        fold(Ok(5), successes.append, failures_seen.append)

        assert successes == [5]
        assert failures_seen == []

    def test_err_calls_failure_handler_only(self) -> None:
        successes: list[Any] = []
        failures_seen: list[str] = []

        Err('x').fold(successes.append, failures_seen.append)

        assert successes == []
        assert failures_seen == ['x']

    def test_returns_none(self) -> None:
        assert fold(Ok(1), lambda v: v, lambda e: e) is None

    def test_handler_exception_propagates(self) -> None:
        def explode(value: int) -> None:
            raise KeyError(value)

        with pytest.raises(KeyError):
            fold(Ok(1), explode, lambda e: None)

    @given(results)
    def test_exactly_one_handler(self, r: Ok[int] | Err[Any]) -> None:
        calls: list[str] = []
        fold(r, lambda _: calls.append('ok'), lambda _: calls.append('err'))
        assert calls == (['ok'] if r.is_ok() else ['err'])


class RecordingPublisher:
    """Minimal publisher that records what it receives."""

    def __init__(self) -> None:
        self.received: list[Any] = []

    def publish(self, value: Any) -> None:
        self.received.append(value)


class TestPublish:
    """Tests for publish: the whole outcome is forwarded once."""

    def test_publish_ok(self) -> None:
        sink = RecordingPublisher()
        ok = Ok(1)
        publish(ok, sink)
        assert sink.received == [ok]
        assert sink.received[0] is ok

    def test_publish_err(self) -> None:
        sink = RecordingPublisher()
        err = Err(ValueError('nope'))
        err.publish(sink)
        assert len(sink.received) == 1
        assert sink.received[0] is err

    def test_publish_to_subject(self) -> None:
        subject: PassthroughSubject[Ok[int] | Err[str]] = PassthroughSubject()
        seen: list[Ok[int] | Err[str]] = []
        subject.subscribe(seen.append)

        publish(Ok(1), subject)
        publish(Err('x'), subject)
        publish(Ok(2), subject)

        assert seen == [Ok(1), Err('x'), Ok(2)]

    @given(integers, failures)
    def test_publish_forwards_unchanged(self, value: int, failure: Any) -> None:
        sink = RecordingPublisher()
        ok, err = Ok(value), Err(failure)
        publish(ok, sink)
        publish(err, sink)
        assert sink.received[0] is ok
        assert sink.received[1] is err
