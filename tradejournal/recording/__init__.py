from .journal import (
    JournalSnapshot,
    SnapshotJournal,
    trade_from_dict,
    trade_to_dict,
)
from .tradelog import (
    add_trade,
    delete_day,
    delete_trade,
    make_mode,
    new_trade,
    update_trade,
)

__all__ = [
    "JournalSnapshot",
    "SnapshotJournal",
    "add_trade",
    "delete_day",
    "delete_trade",
    "make_mode",
    "new_trade",
    "trade_from_dict",
    "trade_to_dict",
    "update_trade",
]
