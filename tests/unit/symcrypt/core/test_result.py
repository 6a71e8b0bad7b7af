"""
Unit-тесты для контейнера результата Ok/Err.
"""

from __future__ import annotations

import pytest

from symcrypt.core.result import Err, Ok, UnwrapError, err, ok


class TestOk:
    def test_flags_and_unwrap(self) -> None:
        res = ok(5)
        assert res.is_ok() is True
        assert res.is_err() is False
        assert res.unwrap() == 5

    def test_unwrap_err_raises(self) -> None:
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_map_and_map_err(self) -> None:
        assert Ok(2).map(lambda v: v * 10) == Ok(20)
        assert Ok(2).map_err(lambda e: "changed") == Ok(2)

    def test_and_then_chains(self) -> None:
        assert Ok(3).and_then(lambda v: Ok(v + 1)) == Ok(4)
        assert Ok(3).and_then(lambda v: Err("boom")) == Err("boom")


class TestErr:
    def test_flags_and_unwrap_err(self) -> None:
        res = err("bad")
        assert res.is_ok() is False
        assert res.is_err() is True
        assert res.unwrap_err() == "bad"

    def test_unwrap_raises_with_cause(self) -> None:
        cause = ValueError("inner")
        with pytest.raises(UnwrapError) as exc_info:
            Err(cause).unwrap()
        assert exc_info.value.__cause__ is cause

    def test_unwrap_non_exception_error(self) -> None:
        with pytest.raises(UnwrapError):
            Err("plain").unwrap()

    def test_map_skipped_map_err_applied(self) -> None:
        calls: list[int] = []
        res = Err("e").map(lambda v: calls.append(1))
        assert res == Err("e")
        assert calls == []
        assert Err("e").map_err(str.upper) == Err("E")

    def test_and_then_short_circuits(self) -> None:
        def never(_: object) -> Ok[int]:
            raise AssertionError("must not be called")

        assert Err("e").and_then(never) == Err("e")


def test_pattern_matching() -> None:
    def describe(res: object) -> str:
        match res:
            case Ok(value):
                return f"ok:{value}"
            case Err(error):
                return f"err:{error}"
        return "unknown"

    assert describe(Ok(1)) == "ok:1"
    assert describe(Err("x")) == "err:x"


def test_values_are_frozen() -> None:
    res = Ok(1)
    with pytest.raises(AttributeError):
        res.value = 2  # type: ignore[misc]
