"""
chainrecord: canonical transaction and token records for many blockchains.

This package provides:
- the normalized transaction record and its derived views (participant
  addresses, direction, UTXO value)
- memo sanitizing
- the token registry (classification tags and protocol versions)
- cross-chain asset keys
"""

__version__ = "0.1.0"

from .asset import build_asset_id, parse_asset_id
from .config import ChainRecordConfig, configure, get_global_config
from .tokens import (
    Token,
    TokenType,
    TokenVersion,
    get_supported_token_types,
    get_token_type,
    get_token_version,
    parse_token_type,
)
from .transaction import (
    Direction,
    Status,
    Transaction,
    TransactionType,
    TxOutput,
    TxPage,
    clean_memo,
    get_addresses,
    get_direction,
    get_utxo_value_for,
)

__all__ = [
    "Transaction",
    "TxOutput",
    "TxPage",
    "TransactionType",
    "Direction",
    "Status",
    "get_addresses",
    "get_direction",
    "get_utxo_value_for",
    "clean_memo",
    "Token",
    "TokenType",
    "TokenVersion",
    "get_supported_token_types",
    "get_token_type",
    "get_token_version",
    "parse_token_type",
    "build_asset_id",
    "parse_asset_id",
    "ChainRecordConfig",
    "configure",
    "get_global_config",
]
