"""Normalized, chain-agnostic transaction record.

Account-model chains fill ``from_address``/``to_address``; UTXO-style chains
fill ``inputs``/``outputs``. Consumers use the derived views
(:meth:`Transaction.get_addresses`, :meth:`Transaction.get_direction`,
:meth:`Transaction.get_utxo_value_for`) instead of chain-specific logic.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..asset import build_asset_id
from ..errors import ValidationError
from ..logging import LogContext, get_logger
from .addresses import get_addresses
from .direction import get_direction
from .memo import clean_memo
from .types import (
    METADATA_TYPES,
    Direction,
    Metadata,
    Status,
    TransactionType,
    TxOutput,
)
from .utxo import get_utxo_value_for

logger = get_logger(__name__)


@dataclass(frozen=True)
class Transaction:
    """A transaction of any supported chain."""

    id: str = ""
    coin: int = 0
    from_address: str = ""
    to_address: str = ""
    fee: str = "0"
    date: int = 0
    block: int = 0
    sequence: int = 0
    status: Status = Status.COMPLETED
    error: str = ""
    memo: str = ""
    type: Optional[TransactionType] = None
    direction: Optional[Direction] = None
    inputs: Tuple[TxOutput, ...] = ()
    outputs: Tuple[TxOutput, ...] = ()
    metadata: Optional[Metadata] = None

    def __post_init__(self) -> None:
        # Accept lists from producers while keeping the record hashable.
        object.__setattr__(self, "inputs", tuple(self.inputs))
        object.__setattr__(self, "outputs", tuple(self.outputs))

        if self.date < 0:
            raise ValueError("Date must be non-negative")
        if self.block < 0:
            raise ValueError("Block must be non-negative")

    @property
    def is_utxo(self) -> bool:
        """True for UTXO-style records (any input or output present)."""
        return bool(self.inputs or self.outputs)

    def get_addresses(self) -> List[str]:
        """Addresses this transaction is indexed under."""
        return get_addresses(self)

    def get_direction(self, address: str) -> Direction:
        """Direction of this transaction for ``address``."""
        return get_direction(self, address)

    def get_utxo_value_for(self, address: str) -> str:
        """Amount ``address`` moved in this UTXO-style transaction."""
        return get_utxo_value_for(self, address)

    def clean_memo(self) -> "Transaction":
        """Return a copy whose memo is sanitized."""
        memo = clean_memo(self.memo)
        if memo == self.memo:
            return self
        return replace(self, memo=memo)

    def asset_id(self) -> str:
        """Asset key of the value moved.

        Metadata payloads carry the asset key of tokens; native transfers
        leave it empty and resolve to the chain's coin.
        """
        if self.metadata is not None and self.metadata.asset:
            return self.metadata.asset
        return build_asset_id(self.coin)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary. The memo is always sanitized."""
        return {
            "id": self.id,
            "coin": self.coin,
            "from": self.from_address,
            "to": self.to_address,
            "fee": self.fee,
            "date": self.date,
            "block": self.block,
            "sequence": self.sequence,
            "status": self.status.value,
            "error": self.error,
            "type": self.type.value if self.type else "",
            "direction": self.direction.value if self.direction else "",
            "memo": clean_memo(self.memo),
            "inputs": [output.to_dict() for output in self.inputs],
            "outputs": [output.to_dict() for output in self.outputs],
            "metadata": self.metadata.to_dict() if self.metadata else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Transaction":
        """Create from the wire dictionary.

        Unknown kinds decode to ``type=None`` and unknown directions to
        ``direction=None`` so that newer producers never break older
        consumers.

        Raises:
            ValidationError: if ``status`` is not a known status.
        """
        tx_id = data.get("id", "")
        coin = int(data.get("coin", 0))

        raw_type = data.get("type") or ""
        tx_type = TransactionType.from_value(raw_type)
        if raw_type and tx_type is None:
            logger.debug(
                "Unknown transaction type",
                context=LogContext(
                    component="transaction", coin=coin, transaction_id=tx_id
                ),
                extra={"type": raw_type},
            )

        raw_direction = data.get("direction") or ""
        try:
            direction = Direction(raw_direction) if raw_direction else None
        except ValueError:
            direction = None

        raw_status = data.get("status") or Status.COMPLETED.value
        try:
            status = Status(raw_status)
        except ValueError:
            raise ValidationError(
                f"unknown transaction status {raw_status!r}",
                field="status",
                value=raw_status,
                expected=[s.value for s in Status],
            ) from None

        return cls(
            id=tx_id,
            coin=coin,
            from_address=data.get("from", ""),
            to_address=data.get("to", ""),
            fee=str(data.get("fee", "0")),
            date=int(data.get("date", 0)),
            block=int(data.get("block", 0)),
            sequence=int(data.get("sequence", 0)),
            status=status,
            error=data.get("error", ""),
            memo=data.get("memo", ""),
            type=tx_type,
            direction=direction,
            inputs=_outputs_from(data.get("inputs")),
            outputs=_outputs_from(data.get("outputs")),
            metadata=_metadata_from(tx_type, data.get("metadata")),
        )


def _outputs_from(items: Optional[Sequence[Dict[str, Any]]]) -> Tuple[TxOutput, ...]:
    return tuple(TxOutput.from_dict(item) for item in items or ())


def _metadata_from(
    tx_type: Optional[TransactionType], data: Optional[Dict[str, Any]]
) -> Optional[Metadata]:
    if not data or tx_type is None:
        return None
    metadata_cls = METADATA_TYPES.get(tx_type)
    if metadata_cls is None:
        return None
    return metadata_cls.from_dict(data)
