"""Tests for trade-log editing operations."""

import pytest

from tradejournal.recording.tradelog import (
    add_trade,
    delete_day,
    delete_trade,
    make_mode,
    new_trade,
    update_trade,
)
from tradejournal.types import Pnl, Points


def test_new_trade_sets_identity_and_normalises() -> None:
    t = new_trade(date="2025/03/10", mode=Points("12,5"), contracts=2, tag="  pullback ", created_at=1700000000000)
    assert t.id.startswith("t_1700000000000_")
    assert t.created_at == 1700000000000
    assert t.date == "2025-03-10"
    assert t.contracts == "2"
    assert t.tag == "pullback"
    assert t.fee_override is None


def test_new_trade_rejects_non_numeric_value() -> None:
    with pytest.raises(ValueError, match="not numeric"):
        new_trade(date="2025-03-10", mode=Pnl("12,"))


def test_make_mode() -> None:
    assert make_mode("points", "10") == Points("10")
    assert make_mode("pnl", "-5") == Pnl("-5")
    with pytest.raises(ValueError):
        make_mode("ticks", "1")


def test_add_trade_prepends_without_mutating(make_trade) -> None:
    original = (make_trade(id="a"),)
    added = add_trade(original, make_trade(id="b"))
    assert [t.id for t in added] == ["b", "a"]
    assert [t.id for t in original] == ["a"]


def test_update_switching_mode_drops_old_value(make_trade) -> None:
    trades = (make_trade(id="a", points="10"), make_trade(id="b", points="5"))
    updated = update_trade(trades, "a", mode=Pnl("150"), tag=" x ", date="2025/03/11")

    a = updated[0]
    assert a.mode == Pnl("150")
    assert not isinstance(a.mode, Points)
    assert a.tag == "x"
    assert a.date == "2025-03-11"
    assert updated[1] is trades[1]
    assert trades[0].mode == Points("10")


def test_update_unknown_id_raises(make_trade) -> None:
    with pytest.raises(KeyError):
        update_trade((make_trade(id="a"),), "zzz", tag="x")


def test_update_rejects_non_numeric_mode(make_trade) -> None:
    with pytest.raises(ValueError):
        update_trade((make_trade(id="a"),), "a", mode=Points("abc"))


def test_delete_trade(make_trade) -> None:
    trades = (make_trade(id="a"), make_trade(id="b"))
    assert [t.id for t in delete_trade(trades, "a")] == ["b"]
    assert delete_trade(trades, "missing") == trades


def test_delete_day_matches_exact_date(make_trade) -> None:
    trades = (
        make_trade(id="a", date="2025-03-10"),
        make_trade(id="b", date="2025-03-11"),
        make_trade(id="c", date="2025-03-10"),
    )
    assert [t.id for t in delete_day(trades, "2025-03-10")] == ["b"]
