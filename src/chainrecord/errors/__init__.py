"""chainrecord error handling.

This module exposes the exception hierarchy raised by the token registry,
the asset key helpers, the UTXO value aggregator and the configuration layer.
"""

from .exceptions import (
    AmountParseError,
    AssetIdError,
    ChainRecordError,
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    FatalError,
    NotEvmCoinError,
    TokenError,
    TokenVersionNotImplementedError,
    UnknownTokenTypeError,
    ValidationError,
)

__all__ = [
    "ChainRecordError",
    "ErrorCategory",
    "ErrorContext",
    "ErrorSeverity",
    "ValidationError",
    "AmountParseError",
    "AssetIdError",
    "TokenError",
    "UnknownTokenTypeError",
    "NotEvmCoinError",
    "FatalError",
    "TokenVersionNotImplementedError",
    "ConfigurationError",
]
