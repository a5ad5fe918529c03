"""JSON snapshot of the journal (config text, trades, history filter).

The layout is the one the browser app exported and kept in local storage,
so files move freely between the two. Older records without an explicit
mode or with a per-trade fee are upgraded on load.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

from tradejournal.config import DEFAULT_CONFIG_TEXT
from tradejournal.filters import ALL_TAGS
from tradejournal.numbers import finite_or, parse_number
from tradejournal.types import Pnl, Points, Trade

log = logging.getLogger(__name__)

SNAPSHOT_VERSION = 5


def trade_from_dict(d: Mapping[str, Any]) -> Trade:
    """Build a :class:`Trade` from a stored record.

    Records without ``mode`` are treated as points-based when they carry a
    ``points`` field, otherwise as a direct P&L amount. A legacy ``fees``
    field is read as the fee override.
    """
    kind = d.get("mode")
    if kind not in (Points.kind, Pnl.kind):
        kind = Points.kind if d.get("points") not in (None, "") else Pnl.kind
    mode = Points(d.get("points", "")) if kind == Points.kind else Pnl(d.get("pnl", ""))

    fee_override = d.get("feeOverride", d.get("fees"))
    if fee_override == "":
        fee_override = None
    contracts = d.get("contracts")

    return Trade(
        id=str(d.get("id", "")),
        date=str(d.get("date") or ""),
        mode=mode,
        symbol=str(d.get("symbol") or "WIN"),
        contracts="1" if contracts is None else str(contracts),
        tag=str(d.get("tag") or ""),
        fee_override=fee_override,
        created_at=int(finite_or(parse_number(d.get("createdAt")), 0)),
    )


def trade_to_dict(t: Trade) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": t.id,
        "createdAt": t.created_at,
        "date": t.date,
        "symbol": t.symbol,
        "mode": t.mode.kind,
        "contracts": t.contracts,
        "tag": t.tag,
        t.mode.kind: t.mode.value,
    }
    if t.fee_override is not None:
        out["feeOverride"] = t.fee_override
    return out


@dataclass(frozen=True)
class JournalSnapshot:
    config_text: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_CONFIG_TEXT))
    trades: tuple[Trade, ...] = ()
    hist_date: str = ""
    hist_tag: str = ALL_TAGS

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": SNAPSHOT_VERSION,
            "configText": dict(self.config_text),
            "trades": [trade_to_dict(t) for t in self.trades],
            "hist": {"date": self.hist_date, "tag": self.hist_tag},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JournalSnapshot":
        """Read a snapshot, keeping defaults for anything missing or mistyped."""
        config_text = dict(DEFAULT_CONFIG_TEXT)
        if isinstance(data.get("configText"), dict):
            config_text.update(data["configText"])

        raw_trades = data.get("trades")
        trades = tuple(trade_from_dict(t) for t in raw_trades if isinstance(t, dict)) if isinstance(raw_trades, list) else ()

        hist = data.get("hist") if isinstance(data.get("hist"), dict) else {}
        hist_date = hist.get("date") if isinstance(hist.get("date"), str) else ""
        hist_tag = hist.get("tag") if isinstance(hist.get("tag"), str) else ALL_TAGS

        return cls(config_text=config_text, trades=trades, hist_date=hist_date, hist_tag=hist_tag)


class SnapshotJournal:
    """
    Persists a :class:`JournalSnapshot` to a JSON file.

    :meth:`save` writes atomically (write to ``.tmp``, then rename).
    :meth:`load` returns ``None`` when there is no file or it cannot be read.
    """

    def __init__(self, path: Path):
        self._path = path
        self._tmp_path = path.with_name(f".{path.name}.tmp")

    @property
    def path(self) -> Path:
        return self._path

    def save(self, snapshot: JournalSnapshot) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        data = snapshot.to_dict()
        data["savedAt"] = datetime.now(timezone.utc).isoformat()
        self._tmp_path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        self._tmp_path.replace(self._path)
        log.debug("Journal saved to %s: %d trades", self._path, len(snapshot.trades))

    def load(self) -> JournalSnapshot | None:
        if not self._path.exists():
            return None

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return JournalSnapshot.from_dict(data)
        except Exception:
            log.exception("Failed to load journal from %s", self._path)
            return None

    def clear(self) -> None:
        if self._path.exists():
            self._path.unlink()
            log.info("Journal cleared: %s", self._path)
