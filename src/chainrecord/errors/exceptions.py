"""Exception hierarchy for chainrecord.

This module defines the structured errors raised by the token registry, the
asset key helpers and the UTXO value aggregator.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""

    VALIDATION = "validation"
    TOKEN = "token"
    TRANSACTION = "transaction"
    CONFIGURATION = "configuration"
    SYSTEM = "system"


@dataclass
class ErrorContext:
    """Context information for an error."""

    timestamp: float = field(default_factory=time.time)
    component: Optional[str] = None
    operation: Optional[str] = None
    coin: Optional[int] = None
    transaction_id: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary."""
        return {
            "timestamp": self.timestamp,
            "component": self.component,
            "operation": self.operation,
            "coin": self.coin,
            "transaction_id": self.transaction_id,
            "metadata": self.metadata,
        }


class ChainRecordError(Exception):
    """Base exception for all chainrecord errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        category: ErrorCategory = ErrorCategory.SYSTEM,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.severity = severity
        self.category = category
        self.context = context or ErrorContext()
        self.cause = cause
        self.metadata = metadata or {}
        self.timestamp = time.time()

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "severity": self.severity.value,
            "category": self.category.value,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
            "metadata": self.metadata,
            "timestamp": self.timestamp,
        }

    def __str__(self) -> str:
        parts = [self.message]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.severity != ErrorSeverity.MEDIUM:
            parts.append(f"Severity: {self.severity.value}")

        return " | ".join(parts)


class ValidationError(ChainRecordError):
    """Validation error."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        expected: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, category=ErrorCategory.VALIDATION, **kwargs)
        self.field = field
        self.value = value
        self.expected = expected

    def to_dict(self) -> Dict[str, Any]:
        """Convert validation error to dictionary."""
        data = super().to_dict()
        data.update(
            {
                "field": self.field,
                "value": str(self.value) if self.value is not None else None,
                "expected": str(self.expected) if self.expected is not None else None,
            }
        )
        return data


class AmountParseError(ValidationError, ValueError):
    """A UTXO value is not a non-negative decimal integer."""

    def __init__(self, value: str, address: Optional[str] = None, **kwargs):
        super().__init__(
            f"invalid amount {value!r}"
            + (f" for address {address}" if address else ""),
            field="value",
            value=value,
            expected="non-negative decimal integer",
            error_code="AMOUNT_PARSE",
            **kwargs,
        )
        self.address = address


class AssetIdError(ValidationError, ValueError):
    """An asset key does not follow the c<coin>[_t<token>] format."""

    def __init__(self, asset_id: str, reason: str, **kwargs):
        super().__init__(
            f"bad asset id {asset_id!r}: {reason}",
            field="asset_id",
            value=asset_id,
            expected="c<coin>[_t<token_id>]",
            error_code="ASSET_ID",
            **kwargs,
        )


class TokenError(ChainRecordError):
    """Token registry error."""

    def __init__(
        self,
        message: str,
        token_type: Optional[str] = None,
        coin: Optional[int] = None,
        **kwargs,
    ):
        kwargs.setdefault("category", ErrorCategory.TOKEN)
        super().__init__(message, **kwargs)
        self.token_type = token_type
        self.coin = coin

    def to_dict(self) -> Dict[str, Any]:
        """Convert token error to dictionary."""
        data = super().to_dict()
        data.update({"token_type": self.token_type, "coin": self.coin})
        return data


class UnknownTokenTypeError(TokenError, ValueError):
    """Text does not name a supported token type."""

    def __init__(self, token_type: str, **kwargs):
        super().__init__(
            f"{token_type}: unknown token type",
            token_type=token_type,
            error_code="UNKNOWN_TOKEN_TYPE",
            **kwargs,
        )


class NotEvmCoinError(TokenError):
    """The coin has no EVM token type."""

    def __init__(self, coin: int, **kwargs):
        super().__init__(
            f"not evm coin {coin}", coin=coin, error_code="NOT_EVM_COIN", **kwargs
        )


class FatalError(ChainRecordError):
    """Error signalling a defect rather than bad input."""

    def __init__(self, message: str, **kwargs):
        kwargs.setdefault("severity", ErrorSeverity.CRITICAL)
        super().__init__(message, **kwargs)


class TokenVersionNotImplementedError(FatalError, TokenError):
    """A supported token type is missing from the version table."""

    def __init__(self, token_type: str, **kwargs):
        super().__init__(
            f"tokenType {token_type}: token version not implemented",
            token_type=token_type,
            error_code="TOKEN_VERSION_NOT_IMPLEMENTED",
            **kwargs,
        )


class ConfigurationError(ChainRecordError):
    """Configuration error."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs,
    ):
        super().__init__(message, category=ErrorCategory.CONFIGURATION, **kwargs)
        self.config_key = config_key
        self.config_value = config_value

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration error to dictionary."""
        data = super().to_dict()
        data.update(
            {
                "config_key": self.config_key,
                "config_value": str(self.config_value)
                if self.config_value is not None
                else None,
            }
        )
        return data
