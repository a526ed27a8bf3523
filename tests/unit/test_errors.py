"""
Unit tests for the chainrecord exception hierarchy.
"""

import pytest

from chainrecord.errors import (
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


class TestErrorContext:
    """Test ErrorContext."""

    def test_defaults(self):
        """Test default context values."""
        context = ErrorContext()

        assert context.timestamp > 0
        assert context.component is None
        assert context.coin is None
        assert context.metadata == {}

    def test_to_dict(self):
        """Test converting context to dictionary."""
        context = ErrorContext(
            component="utxo", operation="get_utxo_value_for", coin=0, transaction_id="t"
        )

        data = context.to_dict()

        assert data["component"] == "utxo"
        assert data["operation"] == "get_utxo_value_for"
        assert data["coin"] == 0
        assert data["transaction_id"] == "t"


class TestChainRecordError:
    """Test ChainRecordError."""

    def test_creation(self):
        """Test creating a base error."""
        error = ChainRecordError("boom", error_code="E1")

        assert error.message == "boom"
        assert error.error_code == "E1"
        assert error.severity is ErrorSeverity.MEDIUM
        assert error.category is ErrorCategory.SYSTEM
        assert isinstance(error.context, ErrorContext)

    def test_str(self):
        """Test string representation."""
        assert str(ChainRecordError("boom")) == "boom"
        assert str(ChainRecordError("boom", error_code="E1")) == "boom | Code: E1"
        assert (
            str(ChainRecordError("boom", severity=ErrorSeverity.HIGH))
            == "boom | Severity: high"
        )

    def test_to_dict(self):
        """Test converting error to dictionary."""
        cause = KeyError("x")
        error = ChainRecordError("boom", cause=cause, metadata={"k": "v"})

        data = error.to_dict()

        assert data["type"] == "ChainRecordError"
        assert data["message"] == "boom"
        assert data["severity"] == "medium"
        assert data["category"] == "system"
        assert data["cause"] == str(cause)
        assert data["metadata"] == {"k": "v"}


class TestValidationErrors:
    """Test validation errors."""

    def test_validation_error(self):
        """Test ValidationError fields."""
        error = ValidationError("bad", field="status", value="lost", expected=["ok"])

        assert error.category is ErrorCategory.VALIDATION
        data = error.to_dict()
        assert data["field"] == "status"
        assert data["value"] == "lost"
        assert data["expected"] == "['ok']"

    def test_amount_parse_error(self):
        """Test AmountParseError."""
        error = AmountParseError("1.5", address="addr")

        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert error.error_code == "AMOUNT_PARSE"
        assert error.address == "addr"
        assert error.value == "1.5"
        assert error.message == "invalid amount '1.5' for address addr"

    def test_amount_parse_error_without_address(self):
        """Test AmountParseError without an address."""
        assert AmountParseError("x").message == "invalid amount 'x'"

    def test_asset_id_error(self):
        """Test AssetIdError."""
        error = AssetIdError("60", "missing coin prefix")

        assert isinstance(error, ValueError)
        assert error.error_code == "ASSET_ID"
        assert error.field == "asset_id"
        assert "missing coin prefix" in error.message


class TestTokenErrors:
    """Test token registry errors."""

    def test_unknown_token_type(self):
        """Test UnknownTokenTypeError."""
        error = UnknownTokenTypeError("FOO")

        assert isinstance(error, TokenError)
        assert isinstance(error, ValueError)
        assert error.category is ErrorCategory.TOKEN
        assert error.message == "FOO: unknown token type"
        assert error.to_dict()["token_type"] == "FOO"

    def test_not_evm_coin(self):
        """Test NotEvmCoinError."""
        error = NotEvmCoinError(0)

        assert error.message == "not evm coin 0"
        assert error.coin == 0
        assert error.to_dict()["coin"] == 0

    def test_token_version_not_implemented(self):
        """Test TokenVersionNotImplementedError."""
        error = TokenVersionNotImplementedError("ERC20")

        assert isinstance(error, FatalError)
        assert isinstance(error, TokenError)
        assert error.severity is ErrorSeverity.CRITICAL
        assert error.category is ErrorCategory.TOKEN
        assert error.message == "tokenType ERC20: token version not implemented"

    def test_token_errors_are_not_value_errors(self):
        """Test that defects cannot be caught as bad input."""
        with pytest.raises(FatalError):
            try:
                raise TokenVersionNotImplementedError("ERC20")
            except ValueError:
                pytest.fail("fatal error caught as ValueError")


class TestConfigurationError:
    """Test ConfigurationError."""

    def test_configuration_error(self):
        """Test ConfigurationError fields."""
        error = ConfigurationError("bad", config_key="log_format", config_value="xml")

        assert error.category is ErrorCategory.CONFIGURATION
        data = error.to_dict()
        assert data["config_key"] == "log_format"
        assert data["config_value"] == "xml"
