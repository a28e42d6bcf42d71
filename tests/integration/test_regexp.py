from __future__ import annotations

import pytest

from pyfsm.core.errors import UnmatchedTransition
from pyfsm.core.rng import make_rng
from pyfsm.tasks.examples import make_div3_automaton, make_light_switch
from pyfsm.tasks.metrics import match_accuracy, random_strings
from pyfsm.tasks.regexp import (
    any_of_one_or_more,
    check_match,
    fullmatch,
    one_or_more,
    only_one,
    process_symbols,
)


def test_light_switch_flips() -> None:
    fsm = make_light_switch()

    assert fsm.step("flip").ok
    assert fsm.current_state == "on"
    assert fsm.step("flip").ok
    assert fsm.current_state == "off"


def test_only_one_accepts_single() -> None:
    fsm = only_one("a")

    assert fsm.states == frozenset({"start", "a_end"})
    assert fsm.accept_states == frozenset({"a_end"})
    assert check_match(fsm, "a") is True


def test_only_one_rejects_double() -> None:
    fsm = only_one("a")

    result = process_symbols(fsm, "aa")
    assert result is not None
    assert not result.ok
    assert isinstance(result.error, UnmatchedTransition)
    assert result.error.state == "a_end"
    assert result.error.symbol == "a"
    assert fsm.current_state == "a_end"

    fsm.reset()
    assert check_match(fsm, "aa") is False


def test_one_or_more() -> None:
    fsm = one_or_more("a")

    assert check_match(fsm, "a") is True
    fsm.reset()
    assert check_match(fsm, "aaa") is True
    fsm.reset()
    assert check_match(fsm, "b") is False
    assert fsm.current_state == "start"


def test_one_or_more_rejects_empty_input() -> None:
    fsm = one_or_more("a")
    assert process_symbols(fsm, "") is None
    assert check_match(fsm, "") is False


def test_any_of_one_or_more_single_runs() -> None:
    fsm = any_of_one_or_more("abc")

    assert fsm.accept_states == frozenset({"a", "b", "c"})
    for s in ["a", "bbbb", "ccc"]:
        assert fullmatch(fsm, s) is True


def test_any_of_one_or_more_mixed_run_does_not_match() -> None:
    fsm = any_of_one_or_more("abc")

    result = process_symbols(fsm, "aabb")
    assert not result.ok
    assert result.error.state == "a"
    assert result.error.symbol == "b"

    fsm.reset()
    assert check_match(fsm, "aabb") is False


def test_any_of_one_or_more_repeated_chars() -> None:
    fsm = any_of_one_or_more("aab")
    assert len(fsm.transitions) == 4
    assert fullmatch(fsm, "bb") is True


def test_reset_after_failed_match() -> None:
    fsm = only_one("a")

    assert check_match(fsm, "aa") is False
    assert fsm.current_state == "a_end"

    fsm.reset()
    assert fsm.current_state == "start"
    assert check_match(fsm, "a") is True


def test_fullmatch_leaves_automaton_reset() -> None:
    fsm = one_or_more("a")
    fsm.step("a")

    assert fullmatch(fsm, "b") is False
    assert fsm.current_state == "start"
    assert fullmatch(fsm, "aa") is True
    assert fsm.current_state == "start"


@pytest.mark.parametrize(
    "builder, arg",
    [
        (only_one, ""),
        (only_one, "ab"),
        (one_or_more, ""),
        (one_or_more, "ab"),
        (any_of_one_or_more, ""),
    ],
)
def test_builders_reject_bad_arguments(builder, arg) -> None:
    with pytest.raises(ValueError):
        builder(arg)


def test_div3_matches_integer_arithmetic() -> None:
    fsm = make_div3_automaton()
    strings = random_strings("01", n_strings=200, max_length=12, rng=make_rng(2024), min_length=1)
    expected = [int(s, 2) % 3 == 0 for s in strings]

    assert match_accuracy(fsm, strings, expected) == 1.0


def test_shared_table_between_clones() -> None:
    base = one_or_more("a")
    left = base.clone()
    right = base.clone()

    assert check_match(left, "aaa") is True
    assert check_match(right, "ab") is False
    assert left.current_state == "a"
    assert right.current_state == "a"
    assert base.current_state == "start"
