"""Helpers over lists of transaction records."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from .record import Transaction
from .types import TransactionType


def clean_memos(txs: Iterable[Transaction]) -> List[Transaction]:
    """Return the records with sanitized memos."""
    return [tx.clean_memo() for tx in txs]


def filter_unique_id(txs: Iterable[Transaction]) -> List[Transaction]:
    """Drop records whose ``id`` already appeared earlier in ``txs``."""
    seen = set()
    unique = []
    for tx in txs:
        if tx.id in seen:
            continue
        seen.add(tx.id)
        unique.append(tx)
    return unique


def sort_by_date(txs: Iterable[Transaction]) -> List[Transaction]:
    """Newest first; records with equal dates keep their order."""
    return sorted(txs, key=lambda tx: tx.date, reverse=True)


def filter_by_type(
    txs: Iterable[Transaction], types: Iterable[TransactionType]
) -> List[Transaction]:
    """Keep the records whose kind is one of ``types``."""
    wanted = frozenset(types)
    return [tx for tx in txs if tx.type in wanted]


@dataclass(frozen=True)
class TxPage:
    """One page of transactions as returned to API consumers."""

    total: int = 0
    docs: List[Transaction] = field(default_factory=list)

    @classmethod
    def of(cls, txs: Iterable[Transaction]) -> "TxPage":
        """Build a page of unique, newest-first records with clean memos."""
        docs = sort_by_date(filter_unique_id(clean_memos(txs)))
        return cls(total=len(docs), docs=docs)

    def to_dict(self) -> Dict[str, Any]:
        return {"total": self.total, "docs": [tx.to_dict() for tx in self.docs]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TxPage":
        docs = [Transaction.from_dict(item) for item in data.get("docs") or []]
        return cls(total=int(data.get("total", len(docs))), docs=docs)
