"""Tests for the daily risk evaluator."""

import pytest

from tradejournal.config import JournalConfig
from tradejournal.risk import classify_day, evaluate_daily_risk, risk_per_trade_amount
from tradejournal.types import RiskStatus

TODAY = "2025-03-12"


def _classify(pct, count, stop=-0.01, target=0.01, max_trades=3):
    return classify_day(
        today_pct=pct,
        trade_count=count,
        stop_daily_pct=stop,
        target_daily_pct=target,
        max_trades_per_day=max_trades,
    )


class TestClassifyDay:

    def test_no_trades_is_normal(self) -> None:
        assert _classify(-0.5, 0) is RiskStatus.NORMAL
        assert _classify(0.5, 0, max_trades=1) is RiskStatus.NORMAL

    def test_stop_and_target_are_inclusive(self) -> None:
        assert _classify(-0.01, 1) is RiskStatus.STOP
        assert _classify(0.01, 1) is RiskStatus.META

    def test_stop_and_meta_outrank_limite(self) -> None:
        assert _classify(-0.02, 5) is RiskStatus.STOP
        assert _classify(0.02, 5) is RiskStatus.META

    def test_limite_when_within_bounds(self) -> None:
        assert _classify(0.0, 3) is RiskStatus.LIMITE
        assert _classify(0.0, 2) is RiskStatus.NORMAL


def test_stop_outranks_limite_worked_example(make_trade) -> None:
    config = JournalConfig(capital_initial=50000.0, max_trades_per_day=1, stop_daily_pct=-0.01)
    trades = [make_trade(date=TODAY, pnl="-600")]

    state = evaluate_daily_risk(trades, config, TODAY)

    assert state.start_equity == pytest.approx(50000.0)
    assert state.today_net == pytest.approx(-600.0)
    assert state.today_pct == pytest.approx(-0.012)
    assert state.trade_count == 1
    assert state.status is RiskStatus.STOP
    assert state.blocked is True


def test_no_trades_today_is_normal_despite_history(make_trade, config) -> None:
    trades = [make_trade(date="2025-03-11", pnl="-5000")] * 4
    state = evaluate_daily_risk(trades, config, TODAY)
    assert state.status is RiskStatus.NORMAL
    assert state.blocked is False
    assert state.today_net == 0.0
    assert state.today_pct == 0.0


def test_pct_is_relative_to_equity_before_today(make_trade, config) -> None:
    trades = [
        make_trade(date="2025-03-11", pnl="-25000"),   # equity before today ~25000
        make_trade(date=TODAY, pnl="250,25"),          # +250 -> +1%
    ]
    state = evaluate_daily_risk(trades, config, TODAY)
    assert state.start_equity == pytest.approx(24999.75)
    assert state.today_pct == pytest.approx(250.0 / 24999.75)
    assert state.status is RiskStatus.META


def test_future_trades_do_not_count(make_trade, config) -> None:
    trades = [make_trade(date="2025-03-13", pnl="-10000"), make_trade(date=TODAY, pnl="10")]
    state = evaluate_daily_risk(trades, config, TODAY)
    assert state.start_equity == pytest.approx(50000.0)
    assert state.status is RiskStatus.NORMAL


def test_limite_after_max_trades(make_trade, config) -> None:
    trades = [make_trade(date=TODAY, pnl="10") for _ in range(3)]
    assert evaluate_daily_risk(trades, config, TODAY).status is RiskStatus.LIMITE


def test_non_positive_equity_gives_zero_pct(make_trade) -> None:
    config = JournalConfig(capital_initial=0.0)
    state = evaluate_daily_risk([make_trade(date=TODAY, pnl="-100")], config, TODAY)
    assert state.today_pct == 0.0
    assert state.status is RiskStatus.NORMAL


def test_risk_per_trade_amount(config) -> None:
    assert risk_per_trade_amount(config) == pytest.approx(125.0)
