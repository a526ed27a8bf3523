"""Normalized transaction record and the views derived from it."""

from .addresses import get_addresses
from .collection import (
    TxPage,
    clean_memos,
    filter_by_type,
    filter_unique_id,
    sort_by_date,
)
from .direction import get_direction
from .memo import clean_memo
from .record import Transaction
from .types import (
    METADATA_TYPES,
    STAKING_TYPES,
    SUPPORTED_TYPES,
    ContractCall,
    Direction,
    Metadata,
    Status,
    TransactionType,
    Transfer,
    TransferNFT,
    TxOutput,
)
from .utxo import get_utxo_value_for, parse_amount

__all__ = [
    # Record
    "Transaction",
    "TxOutput",
    "TransactionType",
    "Direction",
    "Status",
    "SUPPORTED_TYPES",
    "STAKING_TYPES",
    # Metadata
    "Metadata",
    "METADATA_TYPES",
    "Transfer",
    "TransferNFT",
    "ContractCall",
    # Derived views
    "get_addresses",
    "get_direction",
    "get_utxo_value_for",
    "parse_amount",
    "clean_memo",
    # Collections
    "TxPage",
    "clean_memos",
    "filter_unique_id",
    "sort_by_date",
    "filter_by_type",
]
